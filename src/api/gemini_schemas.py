from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    parts: List[Part] = []


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[Content] = None
    finishReason: Optional[str] = None


class GeminiResponse(BaseModel):
    """Subset of the `generateContent` response that the proxy relies on."""

    model_config = ConfigDict(extra="ignore")

    candidates: List[Candidate] = []

    def first_text(self) -> str:
        """
        Return the text of the first part of the first candidate.

        Raises:
            ValueError: If the response has no candidate, no content, no part,
                or the first part carries no text.
        """
        if not self.candidates:
            raise ValueError("Gemini response contains no candidates.")
        content = self.candidates[0].content
        if content is None or not content.parts:
            raise ValueError("First Gemini candidate has no content parts.")
        text = content.parts[0].text
        if text is None:
            raise ValueError("First Gemini content part has no text.")
        return text


def build_generate_payload(prompt: str) -> dict:
    """Single-turn conversation with the prompt as the only user turn."""
    return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
