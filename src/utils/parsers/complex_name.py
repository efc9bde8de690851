"""
Complex name parsing utilities.

Listing complex names often carry the unit number and transaction type,
e.g. "래미안대치팰리스 101동매매". These helpers strip that suffix for display.
"""

import re
from typing import Optional

_UNIT_SUFFIX = re.compile(r"^(.+?)\s*\d+동(?:매매|전세|월세)")
_TRADE_SUFFIX = re.compile(r"^(.+?)\s*(?:매매|전세|월세)")

MAX_NAME_LENGTH = 20


def extract_complex_name(name: Optional[str]) -> str:
    """
    Extract the bare complex name from a listing's complex name field.

    Args:
        name: Original string like "래미안대치팰리스 101동매매"

    Returns:
        Complex name without unit/transaction suffix

    Examples:
        >>> extract_complex_name("래미안대치팰리스 101동매매")
        '래미안대치팰리스'
        >>> extract_complex_name("마곡힐스테이트전세")
        '마곡힐스테이트'
        >>> extract_complex_name(None)
        ''
    """
    if not name:
        return ""

    match = _UNIT_SUFFIX.match(name)
    if match:
        return match.group(1).strip()

    match = _TRADE_SUFFIX.match(name)
    if match:
        return match.group(1).strip()

    return name[:MAX_NAME_LENGTH]
