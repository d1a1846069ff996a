# main.py
"""
FastAPI Application Entry Point

Clean and minimal main.py that imports routes from api/routes.py
All route logic is separated into the api module for better organization.

Run with:
    uvicorn main:app --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api.middleware import setup_middleware
from api.routes import router
from readcomics.client import ReadComics, ReadComicsClient
from readcomics.core.config import settings
from readcomics.services.logging_service import LoggingService, configure_logging

logger = logging.getLogger(__name__)


def create_app(client: Optional[ReadComics] = None, enable_rate_limiting: bool = True) -> FastAPI:
    """
    Build the application around a comics client.

    Args:
        client: Client to serve; a ReadComicsClient is created when omitted
            and closed on shutdown
        enable_rate_limiting: Apply the per-IP rate limit
    """
    owns_client = client is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_client:
            logger.info("[SHUTDOWN] Closing HTTP session")
            app.state.comics_client.close()

    app = FastAPI(
        title="ReadComics API",
        description="Comic listings, details and chapter pages scraped from readcomicsonline.ru",
        version="1.0.0",
        lifespan=lifespan
    )

    if owns_client:
        client = ReadComicsClient(logger=LoggingService(settings.logging_url))
    app.state.comics_client = client

    # Setup CORS and other middleware
    setup_middleware(
        app,
        allowed_origins=settings.cors_origins,
        enable_rate_limiting=enable_rate_limiting
    )

    app.include_router(router)
    return app


configure_logging(settings.log_level)

# Create FastAPI application
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
