from typing import Protocol, runtime_checkable


@runtime_checkable
class TheoremClientProtocol(Protocol):
    """
    Protocol for clients of the example generation endpoint.

    Implementations return the generated Markdown text, or raise one of the
    `TheoremApiError` subclasses from `theorem_api_client.errors`.
    """

    async def generate(self, prompt: str) -> str:
        """
        Generate example text for a prompt.

        Args:
            prompt: The instruction string forwarded to the model.

        Returns:
            The generated text (Markdown with LaTeX math).
        """
        ...
