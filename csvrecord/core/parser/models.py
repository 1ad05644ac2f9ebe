"""
Parser data models.

CRITICAL DESIGN DECISIONS:
- Dialect is frozen (immutable) and safe to share across threads
- quote and escape use None as the "disabled" value, never a sentinel character
- empty_value only replaces zero-length UNQUOTED fields; a quoted "" stays ""
"""

from __future__ import annotations

from enum import Enum, auto

from pydantic import BaseModel, Field

# =============================================================================
# Enums
# =============================================================================


class ScanState(Enum):
    """State of the record scanner for the field under construction."""

    FIELD_START = auto()  # Nothing consumed for this field yet
    IN_UNQUOTED = auto()  # Inside an unquoted field with content
    IN_QUOTED = auto()  # Inside a quote-opened field
    QUOTE_IN_QUOTED = auto()  # Just saw a quote inside a quoted field, may be closing
    AFTER_ESCAPE = auto()  # Previous char was the escape, next one is literal


# =============================================================================
# Dialect
# =============================================================================


class Dialect(BaseModel, frozen=True):
    """
    Delimited-text dialect settings.

    Attributes:
        separator: Field separator, normally ',' for CSV or '\\t' for TSV.
        quote: Quote character, or None to disable quoting entirely.
        escape: Escape character (non-RFC extension), or None to disable.
            Makes the following character literal inside quoted or
            unquoted fields.
        empty_value: Substitute for absent (zero-length, unquoted) fields.
            A quoted empty field ("") is not absent, so callers can tell
            "no value" from "empty string" by picking a distinct value.
            None makes absent fields come back as None.
        trim: Strip characters <= 0x20 from both ends of every field.
        single_quote: Allow unescaped internal quotes in quoted fields,
            e.g. "My name is "John"". The closing quote is the one followed
            by a separator or the end of the record, so an internal quote
            cannot be followed by a separator unless that separator is escaped.
    """

    separator: str = Field(description="Field separator character")
    quote: str | None = Field(default=None, description="Quote character, None = disabled")
    escape: str | None = Field(default=None, description="Escape character, None = disabled")
    empty_value: str | None = Field(
        default="",
        description="Value substituted for zero-length unquoted fields",
    )
    trim: bool = False
    single_quote: bool = False

    model_config = {"frozen": True}

    def __str__(self) -> str:
        """Format dialect for display."""
        from .presets import describe

        return describe(self)
