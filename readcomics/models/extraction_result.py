"""
Extraction Result Model

Standardized success/failure container returned by every extractor and
every public client call. Failures carry their kind so callers can tell a
network problem from a page whose layout no longer matches the selectors.
"""

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


ErrorKind = Literal["transport", "schema", "input"]


class ExtractionResult(BaseModel):
    """
    Standardized result of an extraction.

    Example:
        # Success case
        result = ExtractionResult.ok([comic, ...], source="popular_comics")

        # Error case
        result = ExtractionResult.fail(exc, kind="transport", source="popular_comics")
        if not result.success:
            print(result.error_kind, result.error)
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        json_schema_extra={
            "example": {
                "success": True,
                "data": [{"name": "Batman (2016-)", "url": "https://readcomicsonline.ru/comic/batman-2016"}],
                "error": None,
                "error_kind": None,
                "metadata": {"count": 1},
                "timestamp": "2022-09-01T10:30:00",
                "source": "popular_comics"
            }
        },
    )

    success: bool = Field(
        description="Whether the extraction succeeded"
    )

    data: Optional[Any] = Field(
        default=None,
        description="Extracted records (a list of models or a single model)"
    )

    error: Optional[str] = Field(
        default=None,
        description="Error message if the extraction failed"
    )

    error_kind: Optional[ErrorKind] = Field(
        default=None,
        description="'transport' for I/O failures, 'schema' for layout mismatches, 'input' for rejected arguments"
    )

    exception: Optional[BaseException] = Field(
        default=None,
        exclude=True,
        description="The original error"
    )

    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Additional metadata about the extraction"
    )

    timestamp: str = Field(
        default_factory=lambda: datetime.now().isoformat(),
        description="Timestamp of the result"
    )

    source: Optional[str] = Field(
        default=None,
        description="Name of the routine that produced this result"
    )

    @classmethod
    def ok(cls, data: Any, source: Optional[str] = None, **metadata: Any) -> "ExtractionResult":
        if isinstance(data, list):
            metadata.setdefault("count", len(data))
        return cls(success=True, data=data, source=source, metadata=metadata)

    @classmethod
    def fail(
        cls,
        exc: BaseException,
        kind: ErrorKind,
        source: Optional[str] = None,
        **metadata: Any
    ) -> "ExtractionResult":
        return cls(
            success=False,
            error=str(exc) or exc.__class__.__name__,
            error_kind=kind,
            exception=exc,
            source=source,
            metadata=metadata,
        )

    def unwrap(self) -> Any:
        """Return the data, or re-raise the original error of a failure."""
        if self.success:
            return self.data
        if self.exception is not None:
            raise self.exception
        raise RuntimeError(self.error or "extraction failed")

    def __str__(self) -> str:
        """String representation for logging."""
        if self.success:
            return f"ExtractionResult(success=True, source={self.source})"
        else:
            return f"ExtractionResult(success=False, kind={self.error_kind}, error='{self.error}')"
