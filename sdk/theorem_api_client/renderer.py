import html
import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence, runtime_checkable

import markdown

from .errors import GenerationStatusError, UnexpectedResponseError
from .prompts import Theorem, build_prompt, parse_theorem
from .protocol import TheoremClientProtocol

logger = logging.getLogger(__name__)

STATUS_ERROR_MESSAGE = (
    "Erro: Não foi possível gerar o exemplo. Status: {status_code}. Tente novamente."
)
UNEXPECTED_RESPONSE_MESSAGE = "Erro: Resposta inesperada da API. Tente novamente."
CONNECTION_ERROR_MESSAGE = (
    "Ocorreu um erro ao gerar o exemplo. Verifique sua conexão ou tente "
    "novamente mais tarde."
)

# Display math first so that `$$...$$` is never split into two inline spans.
MATH_PATTERN = re.compile(r"\$\$.+?\$\$|\$[^$\n]+?\$", re.DOTALL)
PLACEHOLDER = "MATHSEGMENT{index}END"


@dataclass
class ResultContainer:
    html: str = ""
    hidden: bool = True

    def clear(self) -> None:
        self.html = ""

    def show(self) -> None:
        self.hidden = False

    def hide(self) -> None:
        self.hidden = True


@dataclass
class LoadingIndicator:
    hidden: bool = True

    def show(self) -> None:
        self.hidden = False

    def hide(self) -> None:
        self.hidden = True


@dataclass
class TheoremSection:
    """
    UI state of one theorem section: its result area and loading indicator.

    `latest_token` numbers the requests issued for this section; only the
    response to the most recent one may change the section.
    """

    theorem: Theorem
    result: ResultContainer = field(default_factory=ResultContainer)
    loading: LoadingIndicator = field(default_factory=LoadingIndicator)
    latest_token: int = 0

    def __post_init__(self) -> None:
        self.theorem = parse_theorem(self.theorem)

    def begin_request(self) -> int:
        self.latest_token += 1
        self.result.hide()
        self.loading.show()
        self.result.clear()
        return self.latest_token

    def is_current(self, token: int) -> bool:
        return token == self.latest_token


@runtime_checkable
class MarkdownConverter(Protocol):
    async def convert(self, text: str) -> str: ...


@runtime_checkable
class Typesetter(Protocol):
    async def typeset(self, containers: Sequence[ResultContainer]) -> None:
        """Typeset the math contained in the given containers."""
        ...


class MathMarkdownConverter:
    """
    Markdown to HTML with Python-Markdown, leaving `$...$` and `$$...$$` math
    untouched for the typesetter.
    """

    def __init__(self, extensions: Optional[Sequence[str]] = None):
        self.extensions = (
            list(extensions) if extensions is not None else ["extra", "sane_lists"]
        )

    async def convert(self, text: str) -> str:
        segments = []

        def _stash(match: re.Match) -> str:
            segments.append(match.group(0))
            return PLACEHOLDER.format(index=len(segments) - 1)

        protected = MATH_PATTERN.sub(_stash, text)
        rendered = markdown.markdown(protected, extensions=self.extensions)
        for index, segment in enumerate(segments):
            rendered = rendered.replace(
                PLACEHOLDER.format(index=index), html.escape(segment, quote=False)
            )
        return rendered


class ExampleRenderer:
    """
    Requests a generated example for a section and renders it into the section.

    Every failure ends up as literal text in the section's result container;
    `generate_for` never raises.
    """

    def __init__(
        self,
        client: TheoremClientProtocol,
        converter: Optional[MarkdownConverter] = None,
        typesetter: Optional[Typesetter] = None,
    ):
        self.client = client
        self.converter = converter or MathMarkdownConverter()
        self.typesetter = typesetter

    async def generate_for(self, section: TheoremSection) -> None:
        token = section.begin_request()
        prompt = build_prompt(section.theorem)

        try:
            text = await self.client.generate(prompt)
            if not section.is_current(token):
                return
            content = await self.converter.convert(text)
            if not section.is_current(token):
                return
            section.result.html = content
            if self.typesetter is not None:
                await self.typesetter.typeset([section.result])
                if not section.is_current(token):
                    return
            section.result.show()
        except GenerationStatusError as e:
            logger.error(
                "Example generation failed for %s: %s", section.theorem.value, e
            )
            self._show_message(
                section, token, STATUS_ERROR_MESSAGE.format(status_code=e.status_code)
            )
        except UnexpectedResponseError as e:
            logger.error(
                "Unexpected generation response for %s: %s", section.theorem.value, e
            )
            self._show_message(section, token, UNEXPECTED_RESPONSE_MESSAGE)
        except Exception:
            logger.exception(
                "Error while generating example for %s", section.theorem.value
            )
            self._show_message(section, token, CONNECTION_ERROR_MESSAGE)
        finally:
            if section.is_current(token):
                section.loading.hide()

    @staticmethod
    def _show_message(section: TheoremSection, token: int, message: str) -> None:
        if not section.is_current(token):
            return
        section.result.html = message
        section.result.show()
