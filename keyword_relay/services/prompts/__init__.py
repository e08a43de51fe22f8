from .keyword_prompts import (
    KEYWORD_SYSTEM_PROMPT,
    KEYWORD_TEMPERATURE,
)

__all__ = [
    "KEYWORD_SYSTEM_PROMPT",
    "KEYWORD_TEMPERATURE",
]
