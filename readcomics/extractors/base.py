"""
Base Extractor Class

Abstract base class that all extraction routines inherit from.
It packages every outcome into an ExtractionResult:

- transport errors (any OSError) are logged with the routine's tag and
  returned as a 'transport' failure
- layout mismatches (ExtractionError) are logged and returned as a
  'schema' failure
- anything else is a bug and propagates

Usage:
    from readcomics.extractors.base import BaseExtractor

    class MyExtractor(BaseExtractor):
        @property
        def name(self) -> str:
            return "my_routine"

        @property
        def log_tag(self) -> str:
            return "[My-Routine-Error]"

        def _extract_impl(self, html: str):
            doc = parse_document(html)
            return [...]
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from readcomics.core.exceptions import ExtractionError
from readcomics.models.extraction_result import ExtractionResult
from readcomics.services.logging_service import LoggingService, NoOpLoggingService


class BaseExtractor(ABC):
    """
    Abstract base class for all extraction routines.

    All extractors must implement:
    - name: Routine identifier, recorded on every result
    - log_tag: Tag prefixed to logged failures
    - _extract_impl: The parsing logic
    """

    def __init__(self, logger: Optional[LoggingService] = None):
        """
        Initialize the extractor.

        Args:
            logger: Optional logging sink; defaults to one that drops messages
        """
        self.logger = logger or NoOpLoggingService()

    @property
    @abstractmethod
    def name(self) -> str:
        """Routine name."""
        pass

    @property
    @abstractmethod
    def log_tag(self) -> str:
        """Tag identifying this routine in log lines."""
        pass

    @abstractmethod
    def _extract_impl(self, html: str) -> Any:
        """
        Parse the document and return the extracted records.

        Raises ExtractionError when the markup does not match the schema.
        """
        pass

    def extract(self, html: str) -> ExtractionResult:
        """
        Public extract method with error handling.

        Args:
            html: Raw page body

        Returns:
            ExtractionResult with the records or the classified error
        """
        try:
            data = self._extract_impl(html)
        except ExtractionError as e:
            self.logger.log(self.log_tag, e)
            return ExtractionResult.fail(e, kind="schema", source=self.name)
        except OSError as e:
            self.logger.log(self.log_tag, e)
            return ExtractionResult.fail(e, kind="transport", source=self.name)
        return ExtractionResult.ok(data, source=self.name)

    async def aextract(self, html: str) -> ExtractionResult:
        """Run extract() on a worker thread so the caller's event loop stays free."""
        return await asyncio.to_thread(self.extract, html)

    def _log_abort(self, field: str):
        """on_abort hook for align_records that reports where a pass stopped."""
        def on_abort(index: int, row: Sequence) -> None:
            self.logger.log(
                f"[{self.name}] {field} could not be derived for item {index}; "
                f"dropping it and the rest of the list"
            )
        return on_abort
