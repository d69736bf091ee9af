"""FastAPI application for the speech service."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlmodel import SQLModel

from speechbase import __version__
from speechbase.database.exceptions import SpeechValidationError
from speechbase.database.session import engine
from speechbase.domain_service import SpeechNotFoundError

from .exception_handlers import (
    not_found_exception_handler,
    request_validation_exception_handler,
    speech_validation_exception_handler,
)
from .settings import settings

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(levelname)s:     %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Initializes database tables on startup.
    """
    SQLModel.metadata.create_all(engine)
    logger.info(f"Database ready at {engine.url.render_as_string(hide_password=True)}")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Speechbase Server",
        description="Speech records with multi-criteria search",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_exception_handler(SpeechNotFoundError, not_found_exception_handler)
    app.add_exception_handler(SpeechValidationError, speech_validation_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Check server health status."""
        return {"status": "healthy", "version": __version__}

    from .routers.speeches import router as speeches_router

    app.include_router(speeches_router)

    return app


def run_server() -> None:
    """Run the server using uvicorn."""
    app = create_app()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


# Application instance for ASGI servers
app = create_app()
