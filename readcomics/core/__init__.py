"""
Core Package - Configuration and error taxonomy

This package contains the settings and exception types shared by the
extractors, services and the client.
"""

from .config import settings, Settings
from .exceptions import (
    ReadComicsError,
    ExtractionError,
    MissingFieldError,
    MalformedFieldError,
)

__all__ = [
    'settings',
    'Settings',
    'ReadComicsError',
    'ExtractionError',
    'MissingFieldError',
    'MalformedFieldError',
]
