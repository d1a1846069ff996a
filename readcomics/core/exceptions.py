"""Custom exceptions for the readcomics client."""

from typing import Optional


class ReadComicsError(Exception):
    """Base exception for readcomics."""
    pass


class ExtractionError(ReadComicsError):
    """The page markup does not match the selector schema."""
    pass


class MissingFieldError(ExtractionError):
    """A required singular field had no matching node."""

    def __init__(self, field: str, selector: Optional[str] = None):
        message = f"Missing required field '{field}'"
        if selector:
            message += f" (selector: {selector})"
        super().__init__(message)
        self.field = field
        self.selector = selector


class MalformedFieldError(ExtractionError):
    """A field was present but its value could not be converted."""

    def __init__(self, field: str, value: str):
        super().__init__(f"Malformed value for field '{field}': {value!r}")
        self.field = field
        self.value = value
