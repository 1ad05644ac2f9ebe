"""
Record Parser Core.

Public API for parsing single CSV/TSV records.

Usage:
    from csvrecord.core.parser import csv_parser, parse

    fields = parse(csv_parser(), '"a,b",c')
    # ["a,b", "c"]

The caller is responsible for splitting a stream into logical records;
a quoted field may legitimately contain a line break.

API Functions:
    new_dialect(separator, quote, escape, empty_value, trim, single_quote) -> Dialect
    csv_parser() -> Dialect
    tsv_parser() -> Dialect
    parse(dialect, line) -> list[str | None]
    parse_record(line, dialect=None) -> list[str | None]
    describe(dialect) -> str
    get_dialect(name) -> Dialect
    load_dialects_from_yaml(path) -> dict[str, Dialect]
"""

from __future__ import annotations

from .errors import (
    Location,
    RecordParseError,
    TrailingEscapeError,
    UnexpectedQuoteError,
    UnterminatedQuotedFieldError,
    get_error_description,
)
from .loader import DialectConfigError, load_dialects_from_directory, load_dialects_from_yaml
from .models import Dialect, ScanState
from .presets import (
    csv_parser,
    describe,
    get_dialect,
    list_dialects,
    new_dialect,
    register_dialect,
    tsv_parser,
)
from .scanner import parse, parse_record

# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    # Models
    "Dialect",
    "DialectConfigError",
    "Location",
    "RecordParseError",
    "ScanState",
    "TrailingEscapeError",
    "UnexpectedQuoteError",
    "UnterminatedQuotedFieldError",
    # Main functions
    "csv_parser",
    "describe",
    "get_dialect",
    "get_error_description",
    "list_dialects",
    "load_dialects_from_directory",
    "load_dialects_from_yaml",
    "new_dialect",
    "parse",
    "parse_record",
    "register_dialect",
    "tsv_parser",
]
