"""
Utility modules for listing search.
"""

from src.utils.parsers import (
    extract_complex_name,
    format_eok,
    parse_number,
    parse_price,
)

__all__ = [
    "parse_price",
    "parse_number",
    "format_eok",
    "extract_complex_name",
]
