"""
Request and response models for the keyword relay endpoint.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class RelayRequest(BaseModel):
    """Payload posted by the chat UI.

    - message: the user's text, forwarded verbatim to the upstream model
    """
    message: str = Field(
        default="",
        description="User text to extract a keyword from",
        examples=["明日は新幹線で東京に行きます"],
    )


class ChatMessage(BaseModel):
    """A single chat-completions message."""
    role: str
    content: str


class UpstreamChatRequest(BaseModel):
    """Body sent to the upstream chat-completions API."""
    model: str
    messages: List[ChatMessage]
    temperature: float


def _scalar_text(value: Any) -> Optional[str]:
    """Render a JSON scalar as text; containers and null give None."""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


class UpstreamChatResponse(BaseModel):
    """Either an error payload or a list of choices.

    Both parts are read independently so a malformed ``choices`` never hides
    an error message. Any other fields returned by the upstream are ignored.
    """
    error: Any = None
    choices: Any = None

    def error_message(self) -> Optional[str]:
        """Text of ``error.message``, if present."""
        if not isinstance(self.error, dict):
            return None
        return _scalar_text(self.error.get("message"))

    def first_content(self) -> Optional[str]:
        """Content of the first choice, if present."""
        if not isinstance(self.choices, list) or not self.choices:
            return None
        first = self.choices[0]
        if not isinstance(first, dict) or not isinstance(first.get("message"), dict):
            return None
        return _scalar_text(first["message"].get("content"))
