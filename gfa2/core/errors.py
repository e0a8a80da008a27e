"""Exceptions raised while parsing GFA documents."""
from typing import Optional


class GFAError(Exception):
    """Base error for this package."""
    pass


class ConfigurationError(GFAError):
    """Custom exception for configuration errors."""
    pass


class GFAParseError(GFAError):
    """
    Raised when a line cannot be parsed into a record.

    The document parser fills in ``line_number`` (1-based) and ``line`` before
    the error leaves it, so callers always know where the input went wrong.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.line_number: Optional[int] = None
        self.line: Optional[str] = None

    def at_line(self, line_number: int, line: str) -> "GFAParseError":
        self.line_number = line_number
        self.line = line
        return self

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message} [{self.line!r}]"


class FieldCountError(GFAParseError):
    """A record line has fewer fields than its kind requires."""

    def __init__(self, record_type: str, expected: int, found: int):
        super().__init__(f"{record_type} record expects {expected} fields, found {found}")
        self.record_type = record_type
        self.expected = expected
        self.found = found


class UnknownRecordType(GFAParseError):
    """The leading field of a line is not a known record type."""

    def __init__(self, record_type: str):
        super().__init__(f"Unknown record type '{record_type}'")
        self.record_type = record_type


class MalformedTag(GFAParseError):
    """A tag token fails structural or type-code validation."""
    pass


class EncodingError(GFAParseError):
    """A byte-array or numeric-array tag value cannot be decoded."""
    pass


class InvalidOrientation(GFAParseError):
    """A reference field ends in something other than '+' or '-'."""
    pass


class MissingOrientation(InvalidOrientation):
    """A reference field carries no orientation suffix at all."""
    pass
