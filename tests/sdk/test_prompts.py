import pytest

from sdk.theorem_api_client.prompts import (
    DEFAULT_PROMPT,
    GAUSS_PROMPT,
    GREEN_PROMPT,
    STOKES_PROMPT,
    Theorem,
    build_prompt,
    parse_theorem,
)


class TestBuildPrompt:
    """Test cases for the theorem prompt selection"""

    @pytest.mark.parametrize(
        "theorem, expected",
        [
            ("green", GREEN_PROMPT),
            ("stokes", STOKES_PROMPT),
            ("gauss", GAUSS_PROMPT),
            ("default", DEFAULT_PROMPT),
            (Theorem.GREEN, GREEN_PROMPT),
            (Theorem.STOKES, STOKES_PROMPT),
            (Theorem.GAUSS, GAUSS_PROMPT),
        ],
    )
    def test_recognized_identifiers(self, theorem, expected):
        assert build_prompt(theorem) == expected

    @pytest.mark.parametrize("theorem", ["divergence", "GREEN", "", None, 42])
    def test_unrecognized_identifiers_fall_back_to_default(self, theorem):
        assert build_prompt(theorem) == DEFAULT_PROMPT

    def test_prompts_are_distinct(self):
        prompts = {GREEN_PROMPT, STOKES_PROMPT, GAUSS_PROMPT, DEFAULT_PROMPT}
        assert len(prompts) == 4

    def test_green_prompt_text(self):
        assert GREEN_PROMPT == (
            "Gere um exemplo simples e conciso de aplicação do Teorema de Green, "
            "explicando os passos de forma didática. Utilize a sintaxe LaTeX correta "
            "e padrão para todas as expressões matemáticas, usando $ para inline e $$ "
            "para display. Utilize Markdown para títulos, negritos e listas. Garanta "
            "espaçamento adequado entre as palavras e uma formatação visualmente clara."
        )

    def test_stokes_prompt_asks_for_vmatrix_determinant(self):
        assert r"\begin{vmatrix} e \end{vmatrix}" in STOKES_PROMPT
        assert r"(usando \vec{F} ou \mathbf{F} para vetores)" in STOKES_PROMPT
        assert STOKES_PROMPT.endswith("formatação estranha em termos.** ")

    def test_gauss_prompt_mentions_divergence_theorem(self):
        assert "Teorema de Gauss (Teorema da Divergência)" in GAUSS_PROMPT
        assert GAUSS_PROMPT.endswith("evite formatar termos técnicos em itálico.")

    def test_default_prompt_text(self):
        assert DEFAULT_PROMPT.startswith(
            "Gere um exemplo de um teorema de cálculo vetorial."
        )


def test_parse_theorem():
    assert parse_theorem("stokes") is Theorem.STOKES
    assert parse_theorem(Theorem.GAUSS) is Theorem.GAUSS
    assert parse_theorem("unknown") is Theorem.DEFAULT
