"""
Logging Service

Logging sink injected into the extractors and the client. Messages go to
the standard library logger and, when a remote endpoint is configured,
are also POSTed to it as JSON.

The sink never raises: a failing remote endpoint is reported on the local
logger and otherwise ignored.

Usage:
    from readcomics.services.logging_service import LoggingService
    from readcomics.core.config import settings

    logger = LoggingService(settings.logging_url)
    logger.log("[Popular-Comics] thumbnail url for comic X was null")
    logger.log("[Parsing-Popular-Comics-Error]", error=exc)
"""

import logging
import re
import sys
import traceback
from datetime import datetime
from typing import Optional

import requests

_logger = logging.getLogger("readcomics")


def configure_logging(level: str = "INFO") -> None:
    """Attach a console handler to the readcomics logger."""
    _logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        _logger.addHandler(handler)


class LoggingService:
    """Logging sink accepting a message and an optional error."""

    def __init__(self, remote_url: Optional[str] = None, timeout: float = 5.0):
        """
        Initialize logging service.

        Args:
            remote_url: Optional HTTP endpoint receiving log records
            timeout: Timeout for the remote POST in seconds
        """
        self.url = remote_url
        self.timeout = timeout

    @staticmethod
    def sanitize_message(message: str, max_length: int = 10000) -> str:
        """
        Sanitize a message before sending it to the remote endpoint.

        Removes null bytes and control characters (except newlines and tabs),
        collapses runs of blank lines and spaces, and enforces a maximum length.
        """
        message = message.replace('\x00', '')

        message = ''.join(
            char for char in message
            if char in ('\n', '\t') or (ord(char) >= 32 and ord(char) != 127)
        )

        message = re.sub(r'\n{3,}', '\n\n', message)
        message = re.sub(r' {2,}', ' ', message)
        message = message.strip()

        if len(message) > max_length:
            message = message[:max_length] + "\n\n[Message truncated due to length]"

        return message

    def log(self, message: str, error: Optional[BaseException] = None) -> None:
        """
        Log a message, with the error's traceback when one is given.

        Args:
            message: The message, usually a bracketed routine tag
            error: Optional error being reported
        """
        try:
            if error is not None:
                _logger.error(
                    "%s: %s", message, error,
                    exc_info=(type(error), error, error.__traceback__)
                )
            else:
                _logger.info(message)

            if self.url:
                self._send(message, error)
        except Exception as e:
            # A broken sink must never break an extraction
            _logger.debug(f"[LoggingService] Could not log message: {e}")

    def _send(self, message: str, error: Optional[BaseException]) -> bool:
        """POST a record to the remote endpoint."""
        record = {
            "type": "error" if error is not None else "status",
            "message": self.sanitize_message(message),
            "timestamp": datetime.now().isoformat(),
        }
        if error is not None:
            record["error"] = self.sanitize_message(
                "".join(traceback.format_exception(type(error), error, error.__traceback__))
            )
        try:
            response = requests.post(self.url, json=record, timeout=self.timeout)
            response.raise_for_status()
            return True
        except requests.exceptions.RequestException as e:
            _logger.warning(f"[LoggingService] Could not send log to {self.url}: {e}")
            return False

    def status(self, message: str) -> None:
        """Convenience method for status messages."""
        self.log(message)

    def error(self, message: str, error: Optional[BaseException] = None) -> None:
        """Convenience method for error messages. Never raises, like log()."""
        if error is not None:
            self.log(message, error)
            return
        try:
            _logger.error(message)
            if self.url:
                self._send(message, None)
        except Exception as e:
            _logger.debug(f"[LoggingService] Could not log message: {e}")


class NoOpLoggingService(LoggingService):
    """Sink that drops every message; useful in tests."""

    def __init__(self):
        super().__init__(remote_url=None)

    def log(self, message: str, error: Optional[BaseException] = None) -> None:
        return None

    def error(self, message: str, error: Optional[BaseException] = None) -> None:
        return None
