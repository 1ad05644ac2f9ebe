"""
CLI context and configuration.

Manages exit codes and resolves the dialect from options and environment.
"""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path

from pydantic import BaseModel, Field

from csvrecord.core.parser import (
    Dialect,
    list_dialects,
    load_dialects_from_yaml,
)
from csvrecord.core.parser.loader import resolve_char

DIALECT_ENV = "CSVRECORD_DIALECT"
CONFIG_ENV = "CSVRECORD_CONFIG"
DEFAULT_DIALECT = "csv"


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # Record parsed
    PARSE_ERROR = 1  # Record is malformed
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Configuration error


class DialectOverrides(BaseModel):
    """Dialect settings given explicitly on the command line."""

    separator: str | None = None
    quote: str | None = None
    no_quote: bool = False
    escape: str | None = None
    empty_value: str | None = None
    trim: bool | None = None
    single_quote: bool | None = None

    def apply(self, dialect: Dialect) -> Dialect:
        """Return the dialect with these overrides applied."""
        update: dict[str, object] = {}
        if self.separator is not None:
            update["separator"] = resolve_char(self.separator)
        if self.no_quote:
            update["quote"] = None
        elif self.quote is not None:
            update["quote"] = resolve_char(self.quote)
        if self.escape is not None:
            update["escape"] = resolve_char(self.escape)
        if self.empty_value is not None:
            update["empty_value"] = self.empty_value
        if self.trim is not None:
            update["trim"] = self.trim
        if self.single_quote is not None:
            update["single_quote"] = self.single_quote

        if not update:
            return dialect
        return Dialect(**{**dialect.model_dump(), **update})


class CliContext(BaseModel):
    """Shared context for CLI commands."""

    dialect_name: str | None = Field(default=None)
    config_file: Path | None = Field(default=None)

    def resolved_dialect_name(self) -> str:
        """Dialect name from option, then environment, then default."""
        return self.dialect_name or os.environ.get(DIALECT_ENV) or DEFAULT_DIALECT

    def resolved_config_file(self) -> Path | None:
        """Config file from option, then environment."""
        if self.config_file is not None:
            return self.config_file
        env_value = os.environ.get(CONFIG_ENV)
        return Path(env_value) if env_value else None

    def known_dialects(self) -> dict[str, Dialect]:
        """Built-in dialects merged with those from the config file."""
        dialects = list_dialects()
        config_file = self.resolved_config_file()
        if config_file is not None:
            dialects.update(load_dialects_from_yaml(config_file))
        return dialects

    def get_dialect(self, overrides: DialectOverrides | None = None) -> Dialect:
        """
        Resolve the dialect to use.

        Raises:
            KeyError: If the dialect name is unknown
            DialectConfigError: If the config file is malformed
        """
        name = self.resolved_dialect_name()
        dialects = self.known_dialects()
        if name not in dialects:
            raise KeyError(name)
        dialect = dialects[name]
        return overrides.apply(dialect) if overrides else dialect
