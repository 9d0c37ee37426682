from typing import List

from pydantic import BaseModel

from sdk.theorem_api_client.prompts import Theorem, build_prompt


class TheoremContent(BaseModel):
    """Static educational content of one theorem section."""

    theorem: Theorem
    title: str
    description: str
    formula: str
    notation: str
    details_title: str
    details: str

    @property
    def prompt(self) -> str:
        return build_prompt(self.theorem)


PAGE_TITLE = "Teoremas Fundamentais do Cálculo Vetorial"
PAGE_SUBTITLE = "Uma visão interativa dos teoremas de Green, Stokes e Gauss."
FOOTER_TEXT = "© 2025 Hevellyn ♡. Todos os direitos reservados."

THEOREMS: List[TheoremContent] = [
    TheoremContent(
        theorem=Theorem.GREEN,
        title="Teorema de Green",
        description=(
            "O Teorema de Green relaciona a integral de linha de um campo vetorial "
            "ao longo de uma curva fechada simples no plano com a integral dupla "
            "sobre a região plana delimitada por essa curva. Ele é fundamental para "
            "converter problemas de integral de linha em problemas de integral de "
            "área e vice-versa em duas dimensões."
        ),
        formula=(
            r"$$ \oint_C (P \, dx + Q \, dy) = \iint_D \left( \frac{\partial Q}"
            r"{\partial x} - \frac{\partial P}{\partial y} \right) \, dA $$"
        ),
        notation=(
            "Onde $C$ é uma curva fechada simples e positivamente orientada, e $D$ "
            "é a região plana delimitada por $C$. $P$ e $Q$ são funções com "
            "derivadas parciais contínuas."
        ),
        details_title="Saiba Mais sobre o Teorema de Green",
        details=(
            "O Teorema de Green é frequentemente usado para calcular áreas de "
            "regiões complexas ou para simplificar o cálculo de integrais de linha. "
            "Ele tem aplicações importantes em física, como no cálculo de trabalho "
            "realizado por uma força ou fluxo através de uma curva. É um caso "
            "especial do Teorema de Stokes em duas dimensões."
        ),
    ),
    TheoremContent(
        theorem=Theorem.STOKES,
        title="Teorema de Stokes",
        description=(
            "O Teorema de Stokes generaliza o Teorema de Green para três dimensões, "
            "relacionando a integral de linha de um campo vetorial ao longo de uma "
            "curva fechada $C$ a fronteira de uma superfície $S$ com a integral de "
            "superfície do rotacional (curl) desse campo sobre a superfície $S$."
        ),
        formula=(
            r"$$ \oint_C \mathbf{F} \cdot d\mathbf{r} = \iint_S (\nabla \times "
            r"\mathbf{F}) \cdot d\mathbf{S} $$"
        ),
        notation=(
            r"Onde $\mathbf{F}$ é um campo vetorial, $C$ é a fronteira orientada de "
            r"uma superfície orientada $S$, e $\nabla \times \mathbf{F}$ é o "
            r"rotacional de $\mathbf{F}$."
        ),
        details_title="Saiba Mais sobre o Teorema de Stokes",
        details=(
            "Este teorema é crucial em eletromagnetismo, onde é usado para derivar "
            "as equações de Maxwell. Ele permite converter integrais de linha em "
            "integrais de superfície, o que pode simplificar os cálculos em muitas "
            "situações práticas envolvendo campos conservativos ou rotacionais."
        ),
    ),
    TheoremContent(
        theorem=Theorem.GAUSS,
        title="Teorema de Gauss",
        description=(
            "O Teorema de Gauss, também conhecido como Teorema da Divergência, "
            "relaciona o fluxo de um campo vetorial através de uma superfície "
            "fechada $S$ com a integral tripla da divergência desse campo sobre o "
            "volume $V$ contido por $S$."
        ),
        formula=(
            r"$$ \iint_S \mathbf{F} \cdot d\mathbf{S} = \iiint_V (\nabla \cdot "
            r"\mathbf{F}) \, dV $$"
        ),
        notation=(
            r"Onde $\mathbf{F}$ é um campo vetorial, $S$ é uma superfície fechada "
            r"que delimita um volume $V$, e $\nabla \cdot \mathbf{F}$ é a "
            r"divergência de $\mathbf{F}$."
        ),
        details_title="Saiba Mais sobre o Teorema de Gauss",
        details=(
            "Este teorema é amplamente utilizado em física, especialmente em "
            "eletrostática e dinâmica dos fluidos, para calcular o fluxo de campos "
            "elétricos ou a vazão de fluidos através de superfícies. Ele permite "
            "converter uma integral de superfície em uma integral de volume, "
            "simplificando o cálculo em muitos casos."
        ),
    ),
]
