"""
JSON output adapter.

Renders fields and errors as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from csvrecord.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from csvrecord.core.parser import Dialect, RecordParseError


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_fields(self, fields: list[str | None], dialect: Dialect) -> str:
        """Render parsed fields as JSON."""
        output: dict[str, Any] = {
            "fields": fields,
            "field_count": len(fields),
            "dialect": self._dialect_to_dict(dialect),
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def render_error(self, error: RecordParseError, record: str) -> str:
        """Render a parse error as JSON."""
        output = {
            "error": {
                "code": error.code,
                "title": error.title,
                "message": error.message,
                "offset": error.offset,
                "record": record,
            }
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def render_dialects(self, dialects: dict[str, Dialect]) -> str:
        """Render named dialects as JSON."""
        output = {
            "dialects": {name: self._dialect_to_dict(d) for name, d in sorted(dialects.items())}
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def _dialect_to_dict(self, dialect: Dialect) -> dict[str, Any]:
        """Convert dialect to dictionary."""
        return dialect.model_dump()
