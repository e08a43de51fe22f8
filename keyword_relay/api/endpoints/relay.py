"""
Keyword relay endpoints.

POST / relays one message to the upstream model and answers in plain text.
GET / serves the chat page that talks to it.
"""
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import FileResponse, PlainTextResponse

from keyword_relay.api.models import ErrorResponse
from keyword_relay.config.settings import Settings, get_settings
from keyword_relay.controllers.keyword_controller import KeywordController

STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "static"
INDEX_PAGE = STATIC_DIR / "index.html"

# ============================================================================
# Dependency Injection
# ============================================================================


def get_keyword_controller(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> KeywordController:
    """Dependency injection for KeywordController, sharing the app's upstream client."""
    return KeywordController(
        settings=settings,
        client=getattr(request.app.state, "openai_client", None),
    )


# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/", include_in_schema=False)
async def chat_page() -> FileResponse:
    """Serve the static chat UI."""
    return FileResponse(INDEX_PAGE, media_type="text/html")


@router.post(
    "/",
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def relay_keyword(
    request: Request,
    controller: KeywordController = Depends(get_keyword_controller),
) -> PlainTextResponse:
    """
    Extract the most important word of a message and translate it to English.

    Expects a JSON body ``{"message": "..."}``. The body is read raw so that
    malformed JSON is treated as empty input instead of a 422.
    Every outcome, including failures, is returned as 200 text/plain.
    """
    raw_body = await request.body()
    reply = await controller.handle(raw_body)
    return PlainTextResponse(reply)
