"""
csvrecord core library.

This package contains the core functionality:
- parser: dialect configuration and the record scanner
"""

__all__: list[str] = []
