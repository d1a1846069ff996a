"""
Services Package - External collaborators

This package contains the HTTP fetcher and the logging sink used by the
extractors and the client.
"""

from .logging_service import LoggingService, NoOpLoggingService, configure_logging
from .http_client import HttpClient

__all__ = [
    'LoggingService',
    'NoOpLoggingService',
    'configure_logging',
    'HttpClient',
]
