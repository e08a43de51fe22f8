from .error import ErrorResponse
from .relay import (
    ChatMessage,
    RelayRequest,
    UpstreamChatRequest,
    UpstreamChatResponse,
)

__all__ = [
    "ErrorResponse",
    "ChatMessage",
    "RelayRequest",
    "UpstreamChatRequest",
    "UpstreamChatResponse",
]
