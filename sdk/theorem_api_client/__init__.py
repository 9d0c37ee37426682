from .client import TheoremApiClient
from .errors import GenerationStatusError, TheoremApiError, UnexpectedResponseError
from .mock_client import MockTheoremClient
from .prompts import Theorem, build_prompt
from .protocol import TheoremClientProtocol
from .renderer import (
    ExampleRenderer,
    LoadingIndicator,
    MarkdownConverter,
    MathMarkdownConverter,
    ResultContainer,
    TheoremSection,
    Typesetter,
)

__all__ = [
    # clients
    "TheoremApiClient",
    "MockTheoremClient",
    "TheoremClientProtocol",
    # errors
    "TheoremApiError",
    "GenerationStatusError",
    "UnexpectedResponseError",
    # prompts
    "Theorem",
    "build_prompt",
    # rendering
    "ExampleRenderer",
    "LoadingIndicator",
    "MarkdownConverter",
    "MathMarkdownConverter",
    "ResultContainer",
    "TheoremSection",
    "Typesetter",
]
