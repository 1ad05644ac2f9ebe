"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from csvrecord.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from csvrecord.cli.output.json import JsonOutput
from csvrecord.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
