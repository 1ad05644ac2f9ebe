"""
Pytest configuration and fixtures for csvrecord tests.

Provides fixtures for:
- Common dialects
- YAML dialect configuration files
"""

from __future__ import annotations

from pathlib import Path

import pytest

from csvrecord.core.parser import Dialect, csv_parser, new_dialect, tsv_parser

# =============================================================================
# Dialect Fixtures
# =============================================================================


@pytest.fixture
def csv_dialect() -> Dialect:
    """RFC 4180 CSV dialect."""
    return csv_parser()


@pytest.fixture
def tsv_dialect() -> Dialect:
    """IANA TSV dialect."""
    return tsv_parser()


@pytest.fixture
def escape_dialect() -> Dialect:
    """CSV dialect with backslash escaping."""
    return new_dialect(",", '"', "\\", "", False, False)


@pytest.fixture
def single_quote_dialect() -> Dialect:
    """CSV dialect tolerating unescaped internal quotes."""
    return new_dialect(",", '"', None, "", False, True)


@pytest.fixture
def null_dialect() -> Dialect:
    """CSV dialect with a distinct substitute for absent fields."""
    return new_dialect(",", '"', None, "<NULL>", False, False)


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def dialect_config(tmp_path: Path) -> Path:
    """YAML file defining two extra dialects."""
    path = tmp_path / "dialects.yaml"
    path.write_text(
        """
dialects:
  pipes:
    separator: pipe
    quote: '"'
    escape: backslash
    empty_value: "<NULL>"
    trim: true
  raw_tsv:
    separator: tab
    quote: null
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def broken_config(tmp_path: Path) -> Path:
    """YAML file with a dialect that has no separator."""
    path = tmp_path / "broken.yaml"
    path.write_text(
        """
dialects:
  nosep:
    quote: '"'
""",
        encoding="utf-8",
    )
    return path
