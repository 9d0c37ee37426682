import asyncio
import os
from typing import Optional, Sequence

DEFAULT_RESPONSE_DELAY = 0.01

DEFAULT_RESPONSES = [
    "## Exemplo: Teorema de Green\n\n"
    "Seja $\\mathbf{F} = (-y, x)$ e $C$ o círculo unitário.\n\n"
    "$$ \\oint_C (-y \\, dx + x \\, dy) = \\iint_D 2 \\, dA = 2\\pi $$",
    "## Exemplo: Teorema de Stokes\n\n"
    "Para $\\mathbf{F} = (z, x, y)$ temos\n\n"
    "$$ \\nabla \\times \\mathbf{F} = \\begin{vmatrix} \\mathbf{i} & \\mathbf{j} & \\mathbf{k} \\\\ "
    "\\partial_x & \\partial_y & \\partial_z \\\\ z & x & y \\end{vmatrix} = (1, 1, 1) $$",
    "## Exemplo: Teorema de Gauss\n\n"
    "Com $\\mathbf{F} = (x, y, z)$ e $V$ a bola unitária, $\\nabla \\cdot \\mathbf{F} = 3$, logo\n\n"
    "$$ \\iint_S \\mathbf{F} \\cdot d\\mathbf{S} = 3 \\cdot \\frac{4}{3}\\pi = 4\\pi $$",
]


class MockTheoremClient:
    """
    A mock client that answers with canned Markdown/LaTeX examples.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        delay: Optional[float] = None,
        responses: Optional[Sequence[str]] = None,
    ):
        if delay is not None:
            self.delay = delay
        else:
            env_delay = os.getenv("MOCK_RESPONSE_DELAY")
            try:
                self.delay = (
                    float(env_delay) if env_delay is not None else DEFAULT_RESPONSE_DELAY
                )
            except ValueError:
                self.delay = DEFAULT_RESPONSE_DELAY

        if responses is not None:
            if not responses:
                raise ValueError("responses must be a non-empty list")
            if not all(isinstance(x, str) for x in responses):
                raise TypeError("all responses must be str")
            self.mock_responses = list(responses)
        else:
            self.mock_responses = DEFAULT_RESPONSES.copy()

        self.response_index = 0

    async def generate(self, prompt: str) -> str:
        """
        Return the next canned response.

        Args:
            prompt: Accepted for protocol compatibility, not inspected.
        """
        del prompt

        response_text = self.mock_responses[
            self.response_index % len(self.mock_responses)
        ]
        self.response_index += 1

        await asyncio.sleep(self.delay)
        return response_text
