"""
HTTP Client

Fetches pages from the comic site with a shared requests session.
Any failure surfaces as requests.RequestException, which is an OSError,
so callers can classify it as a transport failure.

Usage:
    from readcomics.services.http_client import HttpClient

    with HttpClient() as client:
        html = client.fetch("https://readcomicsonline.ru/")
"""

import logging
from typing import Optional

import requests

from readcomics.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class HttpClient:
    """Plain GET fetcher returning the response body as text."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        """
        Initialize the HTTP client.

        Args:
            settings: Settings with timeout and user agent (defaults to global settings)
            session: Optional pre-built requests session
        """
        settings = settings or default_settings
        self.timeout = settings.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': settings.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        })

    def fetch(self, url: str) -> str:
        """
        GET a url and return the response body.

        Raises:
            requests.RequestException: on network errors and non-2xx responses
        """
        logger.debug(f"GET {url}")
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
