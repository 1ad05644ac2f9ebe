"""
Record scanner for delimited text.

Splits ONE logical record into fields. The record must already be isolated
by the caller: a quoted field may contain a literal line break, so splitting
a stream on newlines before calling this is only safe when the data has no
multi-line fields.

Each character is handled by the first matching rule, in this order:
1. pending escape
2. separator
3. end of record
4. escape character
5. quote character
6. anything else

The order matters on ambiguous input (an escape that is also the quote, an
escaped separator, ...).
"""

from __future__ import annotations

import logging

from .errors import (
    RecordParseError,
    TrailingEscapeError,
    UnexpectedQuoteError,
    UnterminatedQuotedFieldError,
)
from .models import Dialect, ScanState

logger = logging.getLogger(__name__)

_QUOTED_STATES = (ScanState.IN_QUOTED, ScanState.QUOTE_IN_QUOTED)


def parse_record(line: str, dialect: Dialect | None = None) -> list[str | None]:
    """
    Parse a single record into fields.

    Args:
        line: The record to parse (without line terminator)
        dialect: Dialect settings (defaults to RFC 4180 CSV)

    Returns:
        List of field values. An empty record yields an empty list.

    Raises:
        TrailingEscapeError: Record ends right after an escape character
        UnterminatedQuotedFieldError: Quoted field is never closed
        UnexpectedQuoteError: Unescaped quote inside an unquoted field
    """
    if dialect is None:
        from .presets import csv_parser

        dialect = csv_parser()

    separator = dialect.separator
    quotechar = dialect.quote
    escapechar = dialect.escape

    fields: list[str | None] = []
    field_buffer: list[str] = []
    state = ScanState.FIELD_START
    resume_state = ScanState.FIELD_START
    seen_separator = False

    def close_field(offset: int) -> None:
        if state == ScanState.IN_QUOTED:
            raise UnterminatedQuotedFieldError("Field starts with quote but ends unquoted", offset)
        if not field_buffer and state not in _QUOTED_STATES:
            fields.append(dialect.empty_value)
        else:
            value = "".join(field_buffer)
            fields.append(_trim(value) if dialect.trim else value)
        field_buffer.clear()

    try:
        for i, char in enumerate(line):
            if state == ScanState.AFTER_ESCAPE:
                field_buffer.append(char)
                state = ScanState.IN_UNQUOTED if resume_state == ScanState.FIELD_START else resume_state

            elif char == separator:
                if state == ScanState.IN_QUOTED:
                    # Separator inside quotes is data
                    field_buffer.append(char)
                else:
                    close_field(i)
                    state = ScanState.FIELD_START
                    seen_separator = True

            elif char == escapechar:
                resume_state = state
                state = ScanState.AFTER_ESCAPE

            elif char == quotechar:
                if state == ScanState.QUOTE_IN_QUOTED:
                    field_buffer.append(char)
                    if not dialect.single_quote:
                        # Doubled quote
                        state = ScanState.IN_QUOTED
                    # In single-quote mode the second quote may still be the closing one
                elif state == ScanState.FIELD_START:
                    state = ScanState.IN_QUOTED
                elif state == ScanState.IN_UNQUOTED:
                    raise UnexpectedQuoteError(
                        "Unescaped quote inside non-quote-delimited field"
                        if escapechar is None
                        else "Quote inside non-quote-delimited field",
                        i,
                    )
                else:
                    state = ScanState.QUOTE_IN_QUOTED

            else:
                if state == ScanState.QUOTE_IN_QUOTED:
                    # The deferred quote was internal text, not a closing quote
                    field_buffer.append(quotechar)
                    state = ScanState.IN_QUOTED
                elif state == ScanState.FIELD_START:
                    state = ScanState.IN_UNQUOTED
                field_buffer.append(char)

        # End of record
        end = len(line)
        if state == ScanState.AFTER_ESCAPE:
            raise TrailingEscapeError("Escape not followed by a character", end)
        if field_buffer or seen_separator or state in _QUOTED_STATES:
            close_field(end)

    except RecordParseError as e:
        logger.debug("Rejected record (%s at offset %d): %r", e.code, e.offset, line)
        raise

    return fields


def parse(dialect: Dialect, line: str) -> list[str | None]:
    """Parse one record with the given dialect."""
    return parse_record(line, dialect)


def _trim(value: str) -> str:
    """Strip characters with code point <= 0x20 from both ends."""
    first = 0
    last = len(value)
    while first < last and value[first] <= " ":
        first += 1
    while last > first and value[last - 1] <= " ":
        last -= 1
    return value[first:last]
