"""
API Middleware - Request/response middleware for the ReadComics API

Every comic route triggers one or more live fetches from readcomicsonline.ru
(the weekly packs route fetches one page per pack), so the API is a
proxy whose traffic lands on somebody else's site. The middleware keeps
that traffic bounded and visible:

- Rate limiting (using slowapi): settings.api_rate_limit per client IP,
  429 once exceeded, so one caller cannot flood the comic site
- Request logging with an X-Process-Time header; slow responses usually
  mean a slow upstream fetch
- CORS for browser front ends; the API is read-only apart from DELETE /hot
"""

import time
import logging
from typing import Callable, Optional, List
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from readcomics.core.config import settings

# Setup logging
logger = logging.getLogger(__name__)


# Rate limiter configuration
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.api_rate_limit])


def setup_cors(app: FastAPI, allowed_origins: Optional[List[str]] = None):
    """
    Setup CORS middleware for browser front ends.

    Only GET and DELETE (resetting the hot-updates cache) are allowed.
    Credentials are only allowed with an explicit origin list.

    Args:
        app: FastAPI application instance
        allowed_origins: settings.cors_origins; None allows all origins
    """
    origins = allowed_origins or ["*"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "DELETE"],
        allow_headers=["*"],
    )

    logger.info(f"CORS middleware configured with origins: {origins}")


def setup_rate_limiting(app: FastAPI):
    """
    Throttle callers so the proxy cannot flood readcomicsonline.ru.

    SlowAPIMiddleware applies settings.api_rate_limit per client IP to every
    route. Requests over the limit get a 429 from slowapi and never reach
    the comic site.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    logger.info(f"Rate limiting configured ({settings.api_rate_limit})")


async def request_logging_middleware(request: Request, call_next: Callable):
    """
    Log every request with its status code and processing time.

    The time covers the upstream fetch and the parse, and is returned in
    an X-Process-Time header.
    """
    start_time = time.time()

    client_ip = request.client.host if request.client else "unknown"
    method = request.method
    path = request.url.path

    logger.info(f"Request: {method} {path} from {client_ip}")

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(
            f"Error: {method} {path} - "
            f"Error: {str(e)} - "
            f"Time: {process_time:.3f}s"
        )
        raise

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    logger.info(
        f"Response: {method} {path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.3f}s"
    )

    return response


def setup_middleware(
    app: FastAPI,
    enable_cors: bool = True,
    allowed_origins: Optional[List[str]] = None,
    enable_rate_limiting: bool = True,
    enable_logging: bool = True
):
    """
    Setup all middleware for the ReadComics API.

    main.create_app() passes settings.cors_origins; create_app(enable_rate_limiting=False)
    skips the limiter.

    Usage:
        from fastapi import FastAPI
        from api.middleware import setup_middleware

        app = FastAPI()
        setup_middleware(app, allowed_origins=["http://localhost:3000"])
    """
    if enable_logging:
        app.middleware("http")(request_logging_middleware)
        logger.info("Request logging middleware enabled")

    if enable_cors:
        setup_cors(app, allowed_origins)

    if enable_rate_limiting:
        setup_rate_limiting(app)

    logger.info("All middleware configured successfully")


__all__ = [
    "setup_middleware",
    "setup_cors",
    "setup_rate_limiting",
    "limiter",
    "request_logging_middleware",
]
