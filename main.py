"""
Keyword Relay
FastAPI application that picks the most important word of a message
and returns it with its English translation.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from keyword_relay import __version__
from keyword_relay.api.routers import api_router
from keyword_relay.config.settings import get_settings
from keyword_relay.controllers.keyword_controller import create_openai_client
from keyword_relay.middleware.error_handling import ErrorHandlingMiddleware
from keyword_relay.middleware.request_logging import RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.info(f"Starting {settings.app_name} ({settings.environment})")

    # One pooled client shared by every request, only when there is a key to use
    if not settings.has_api_key:
        logging.warning("OPENAI_API_KEY is not set! Relay requests will be answered with an error")
        app.state.openai_client = None
    else:
        logging.info(f"Upstream model: {settings.openai_model} at {settings.openai_base_url}")
        app.state.openai_client = create_openai_client(settings)

    yield

    # Shutdown
    logging.info("Shutting down...")
    if app.state.openai_client is not None:
        await app.state.openai_client.close()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Keyword extraction and translation relay for a chat UI",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware, log_bodies=settings.enable_request_logging)

    app.include_router(api_router)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
