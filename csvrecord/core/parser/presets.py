"""
Dialect construction.

Factories for the general dialect and the CSV/TSV presets, a registry of
named dialects, and the diagnostic description.
"""

from __future__ import annotations

from .models import Dialect


def new_dialect(
    separator: str,
    quote: str | None,
    escape: str | None,
    empty_value: str | None,
    trim: bool,
    single_quote: bool,
) -> Dialect:
    """
    Create a dialect from all six settings.

    No validation is performed; any combination of disabled (None)
    quote and escape is accepted.
    """
    return Dialect(
        separator=separator,
        quote=quote,
        escape=escape,
        empty_value=empty_value,
        trim=trim,
        single_quote=single_quote,
    )


def csv_parser() -> Dialect:
    """Return an RFC 4180 CSV dialect."""
    return new_dialect(",", '"', None, "", False, False)


def tsv_parser() -> Dialect:
    """Return an IANA TSV dialect (no quoting, no escaping)."""
    return new_dialect("\t", None, None, "", False, False)


# =============================================================================
# Named dialects
# =============================================================================

_DIALECTS: dict[str, Dialect] = {
    "csv": csv_parser(),
    "tsv": tsv_parser(),
}


def register_dialect(name: str, dialect: Dialect) -> None:
    """Register (or replace) a named dialect."""
    _DIALECTS[name] = dialect


def get_dialect(name: str) -> Dialect:
    """
    Look up a named dialect.

    Raises:
        KeyError: If no dialect is registered under this name
    """
    try:
        return _DIALECTS[name]
    except KeyError:
        raise KeyError(f"Unknown dialect: {name}") from None


def list_dialects() -> dict[str, Dialect]:
    """Return a snapshot of all registered dialects."""
    return dict(_DIALECTS)


# =============================================================================
# Description
# =============================================================================


def _hex(char: str) -> str:
    return ",".join(f"0x{ord(c):x}" for c in char)


def describe(dialect: Dialect) -> str:
    """
    Render dialect settings for diagnostics.

    Characters are shown as hex codes; disabled ones are omitted.

    Example:
        Dialect(separator=0x2c, quote=0x22, empty='', trim=False, single_quote=False)
    """
    parts = [f"separator={_hex(dialect.separator)}"]
    if dialect.quote is not None:
        parts.append(f"quote={_hex(dialect.quote)}")
    if dialect.escape is not None:
        parts.append(f"escape={_hex(dialect.escape)}")
    if dialect.empty_value is not None:
        parts.append(f"empty={dialect.empty_value!r}")
    parts.append(f"trim={dialect.trim}")
    parts.append(f"single_quote={dialect.single_quote}")
    return f"Dialect({', '.join(parts)})"
