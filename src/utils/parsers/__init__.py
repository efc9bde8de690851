"""
Parser utilities for listing data.

Contains functions to parse listing fields and query numerals.
"""

from src.utils.parsers.complex_name import extract_complex_name
from src.utils.parsers.price import format_eok, parse_number, parse_price

__all__ = [
    "parse_price",
    "parse_number",
    "format_eok",
    "extract_complex_name",
]
