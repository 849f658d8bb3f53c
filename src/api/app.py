"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import router as subtitles_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log application startup and shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Gemini SRT Pro API...")
    yield
    logger.info("Shutting down Gemini SRT Pro API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Gemini SRT Pro API",
        description=(
            "Subtitle extraction and translation backed by Gemini. "
            "Upload a video to receive an SRT transcript, then translate "
            "the SRT into another language with timestamps preserved."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(subtitles_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "gemini-srt-pro"}

    return application


app = create_app()
