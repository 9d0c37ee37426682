from enum import Enum
from typing import Optional, Union


class Theorem(str, Enum):
    GREEN = "green"
    STOKES = "stokes"
    GAUSS = "gauss"
    DEFAULT = "default"


GREEN_PROMPT = (
    "Gere um exemplo simples e conciso de aplicação do Teorema de Green, "
    "explicando os passos de forma didática. Utilize a sintaxe LaTeX correta e "
    "padrão para todas as expressões matemáticas, usando $ para inline e $$ para "
    "display. Utilize Markdown para títulos, negritos e listas. Garanta "
    "espaçamento adequado entre as palavras e uma formatação visualmente clara."
)

STOKES_PROMPT = (
    "Gere um exemplo simples e conciso de aplicação do Teorema de Stokes, "
    "explicando os passos de forma didática. Utilize a sintaxe LaTeX correta "
    "(usando \\vec{F} ou \\mathbf{F} para vetores) para todas as expressões "
    "matemáticas, usando $ para inline e $$ para display. **Para o cálculo do "
    "Rotacional (Curl), utilize o ambiente LaTeX \\begin{vmatrix} e "
    "\\end{vmatrix} para criar a matriz determinante, garantindo alinhamento e "
    "formatação visualmente clara.** Utilize Markdown para títulos, negritos e "
    "listas. **Gere texto claro e em português correto, sem concatenar palavras "
    "ou usar formatação estranha em termos.** "
)

GAUSS_PROMPT = (
    "Gere um exemplo simples e conciso de aplicação do Teorema de Gauss "
    "(Teorema da Divergência), explicando os passos de forma didática. Utilize "
    "a sintaxe LaTeX correta e padrão para todas as expressões matemáticas, "
    "usando $ para inline e $$ para display. Utilize Markdown para títulos, "
    "negritos e listas. Garanta espaçamento adequado entre as palavras e evite "
    "formatar termos técnicos em itálico."
)

DEFAULT_PROMPT = (
    "Gere um exemplo de um teorema de cálculo vetorial. Utilize a sintaxe LaTeX "
    "correta e padrão para as expressões matemáticas, usando $ para inline e $$ "
    "para display. Utilize Markdown para títulos, negritos e listas. Garanta "
    "espaçamento adequado entre as palavras e uma formatação visualmente clara."
)

PROMPTS = {
    Theorem.GREEN: GREEN_PROMPT,
    Theorem.STOKES: STOKES_PROMPT,
    Theorem.GAUSS: GAUSS_PROMPT,
    Theorem.DEFAULT: DEFAULT_PROMPT,
}


def parse_theorem(value: Optional[Union[Theorem, str]]) -> Theorem:
    """Map an identifier to a `Theorem`, falling back to `Theorem.DEFAULT`."""
    if isinstance(value, Theorem):
        return value
    try:
        return Theorem(value)
    except ValueError:
        return Theorem.DEFAULT


def build_prompt(theorem: Optional[Union[Theorem, str]]) -> str:
    """
    Return the fixed instruction string for a theorem identifier.

    Unrecognized or missing identifiers never fail; they select the default
    prompt.
    """
    return PROMPTS[parse_theorem(theorem)]
