from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """JSON body returned for unhandled server errors."""

    error: str
    message: str
    traceback: Optional[str] = None
