"""Library exceptions."""

from typing import Optional


class NotespanError(Exception):
    """Base notespan error."""


class DocumentFormatError(NotespanError):
    """A serialized document looked structured but could not be parsed."""

    def __init__(self, message: str, payload: Optional[str] = None):
        super().__init__(message)
        self.payload = payload


class InvalidSelectionError(NotespanError):
    """Selection does not fit inside the text buffer."""

    def __init__(self, start: int, end: int, length: int):
        super().__init__(
            f"Selection [{start}, {end}) is outside the buffer of length {length}"
        )
        self.start = start
        self.end = end
        self.length = length
