"""
Terminal output adapter.

Renders fields and errors with ANSI colors when writing to a TTY.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from csvrecord.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from csvrecord.core.parser import Dialect, RecordParseError


def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "✖".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


ERROR_SYMBOL_UNICODE = "✖"
ERROR_SYMBOL_ASCII = "X"

STYLE_CODES = {
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "bold red": "\033[1;31m",
}
RESET = "\033[0m"


class TerminalOutput(OutputAdapter):
    """Human-readable terminal output."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._error_symbol = ERROR_SYMBOL_UNICODE if _supports_unicode() else ERROR_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_fields(self, fields: list[str | None], dialect: Dialect) -> str:
        """Render one line per field: index and repr of the value."""
        if not fields:
            return self._style("(empty record: 0 fields)", "dim")

        width = len(str(len(fields) - 1))
        lines = [f"{self._style(f'[{i:>{width}}]', 'dim')} {value!r}" for i, value in enumerate(fields)]
        lines.append(self._style(f"{len(fields)} field(s)", "green"))
        return "\n".join(lines)

    def render_error(self, error: RecordParseError, record: str) -> str:
        """Render error with a caret under the offending offset."""
        symbol = self._style(self._error_symbol, "bold red")
        code = self._style(error.code, "dim")
        lines = [
            f"{symbol} {error.title} at offset {error.offset}: {error.message} [{code}]",
            f"  {record!r}",
            # Caret sits under record[offset] in the indented repr above
            " " * (2 + len(repr(record[: error.offset])) - 1) + self._style("^", "red"),
        ]
        return "\n".join(lines)

    def render_dialects(self, dialects: dict[str, Dialect]) -> str:
        """Render one line per named dialect."""
        if not dialects:
            return self._style("No dialects defined.", "dim")

        width = max(len(name) for name in dialects)
        return "\n".join(
            f"{self._style(name.ljust(width), 'bold')}  {dialect}"
            for name, dialect in sorted(dialects.items())
        )

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        code = STYLE_CODES.get(style, "")
        if code:
            return f"{code}{text}{RESET}"
        return text
