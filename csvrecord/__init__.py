"""
csvrecord: record-oriented CSV/TSV field parser.

A library (and small CLI) for splitting one logical record of delimited
text into its field values under a configurable dialect.

Usage:
    from csvrecord.core.parser import csv_parser, parse
    fields = parse(csv_parser(), 'a,"b,c",d')
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
