"""
Dialect loader.

Loads named dialects from YAML files.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from .models import Dialect

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Names accepted in place of a literal character
CHAR_ALIASES: dict[str, str] = {
    "tab": "\t",
    "\\t": "\t",
    "comma": ",",
    "semicolon": ";",
    "pipe": "|",
    "space": " ",
    "backslash": "\\",
    "double_quote": '"',
    "single_quote": "'",
}


class DialectConfigError(ValueError):
    """Malformed dialect configuration."""

    def __init__(self, message: str, source: str | None = None, name: str | None = None) -> None:
        self.source = source
        self.name = name
        prefix = ": ".join(p for p in (source, name) if p)
        super().__init__(f"{prefix}: {message}" if prefix else message)


def resolve_char(value: str | None) -> str | None:
    """Resolve a configured character, expanding aliases such as 'tab'."""
    if not isinstance(value, str):
        return value
    return CHAR_ALIASES.get(value, value)


def load_dialects_from_yaml(path: Path) -> dict[str, Dialect]:
    """
    Load named dialects from a YAML file.

    YAML format:
    ```yaml
    dialects:
      pipes:
        separator: pipe
        quote: '"'
        escape: backslash
        empty_value: "<NULL>"
        trim: true
        single_quote: false
      raw_tsv:
        separator: tab
        quote: null
    ```

    Raises:
        DialectConfigError: If the file or one of its entries is malformed
    """
    if not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise DialectConfigError(f"Invalid YAML: {e}", source=str(path)) from e

    if not isinstance(data, dict):
        raise DialectConfigError("Top level must be a mapping", source=str(path))

    dialects_data = data.get("dialects") or {}
    if not isinstance(dialects_data, dict):
        raise DialectConfigError("'dialects' must be a mapping", source=str(path))

    dialects: dict[str, Dialect] = {}
    for name, dialect_data in dialects_data.items():
        dialects[str(name)] = _parse_dialect(str(name), dialect_data, source=str(path))

    return dialects


def _parse_dialect(name: str, data: Any, source: str | None = None) -> Dialect:
    """Parse a single dialect entry."""
    if not isinstance(data, dict):
        raise DialectConfigError("Dialect entry must be a mapping", source=source, name=name)

    unknown = set(data) - set(Dialect.model_fields)
    if unknown:
        raise DialectConfigError(
            f"Unknown setting(s): {', '.join(sorted(unknown))}", source=source, name=name
        )

    if "separator" not in data:
        raise DialectConfigError("Missing required setting 'separator'", source=source, name=name)

    try:
        return Dialect(
            separator=resolve_char(data["separator"]),
            quote=resolve_char(data.get("quote")),
            escape=resolve_char(data.get("escape")),
            empty_value=data.get("empty_value", ""),
            trim=data.get("trim", False),
            single_quote=data.get("single_quote", False),
        )
    except ValidationError as e:
        raise DialectConfigError(str(e), source=source, name=name) from e


def load_dialects_from_directory(directory: Path) -> dict[str, Dialect]:
    """Load all dialects from YAML files in a directory."""
    all_dialects: dict[str, Dialect] = {}

    if not directory.exists():
        return all_dialects

    for yaml_file in sorted([*directory.glob("*.yaml"), *directory.glob("*.yml")]):
        for name, dialect in load_dialects_from_yaml(yaml_file).items():
            if name in all_dialects:
                logger.warning("Dialect %r from %s overrides an earlier definition", name, yaml_file)
            all_dialects[name] = dialect

    return all_dialects
