"""
Parser error models.

This module defines structured errors for the record parser.
All parser errors use error codes from the CSV-XXX-NNN taxonomy.
"""

from __future__ import annotations

from pydantic import BaseModel


class Location(BaseModel, frozen=True):
    """Error location within a record."""

    offset: int
    record_no: int | None = None

    def __str__(self) -> str:
        """Format location for display."""
        parts = []
        if self.record_no is not None:
            parts.append(f"record {self.record_no}")
        parts.append(f"offset {self.offset}")
        return ", ".join(parts)


class RecordParseError(Exception):
    """
    Malformed record.

    Raised at the first violation; no partial field list is ever returned.
    The offset is the 0-based character index where the violation was
    detected (len(record) when detected at the end of the record).
    """

    code: str = "CSV-REC-000"
    title: str = "Malformed record"

    def __init__(self, message: str, offset: int, *, record_no: int | None = None) -> None:
        self.message = message
        self.offset = offset
        self.location = Location(offset=offset, record_no=record_no)
        super().__init__(f"{self.location}: {message}")

    def with_record_no(self, record_no: int) -> RecordParseError:
        """Return a copy of this error tagged with the caller's record number."""
        return type(self)(self.message, self.offset, record_no=record_no)

    def __str__(self) -> str:
        """Format error for display."""
        return f"[{self.code}] {self.title} at {self.location} - {self.message}"


class TrailingEscapeError(RecordParseError):
    """The record ends right after an escape character."""

    code = "CSV-ESC-001"
    title = "Trailing escape"


class UnterminatedQuotedFieldError(RecordParseError):
    """A quote-opened field never reached a closing quote."""

    code = "CSV-QUOTE-001"
    title = "Unterminated quoted field"


class UnexpectedQuoteError(RecordParseError):
    """An unescaped quote appeared inside a field that did not open with one."""

    code = "CSV-QUOTE-002"
    title = "Unexpected quote in unquoted field"


# =============================================================================
# Error Codes Registry
# =============================================================================

PARSER_ERROR_CODES: dict[str, str] = {
    TrailingEscapeError.code: "Record ends immediately after an escape character",
    UnterminatedQuotedFieldError.code: "Field starts with a quote but never closes it",
    UnexpectedQuoteError.code: "Unescaped quote inside a field not delimited by quotes",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return PARSER_ERROR_CODES.get(code)
