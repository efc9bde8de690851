"""
Price parsing utilities.

Parse Korean listing prices ("12억 3,000", "5,000/50", "9억") into
values expressed in 억 units.
"""

import re
from typing import Optional

EOK = "억"
MAN_PER_EOK = 10000

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)")


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse the leading numeral of a string.

    Trailing non-numeric characters are ignored, so "3000만" parses as 3000.

    Args:
        text: String starting with a numeral

    Returns:
        Parsed number or None if the string has no leading numeral

    Examples:
        >>> parse_number("12")
        12.0
        >>> parse_number("3000만")
        3000.0
        >>> parse_number("abc")
        None
    """
    if not text:
        return None

    match = _LEADING_NUMBER.match(text.strip())
    if not match:
        return None
    return float(match.group(0))


def _parse_eok_amount(text: str) -> float:
    """Parse an amount that is either "<억>억<만>" or a bare 만 value."""
    if EOK in text:
        eok_part, _, man_part = text.partition(EOK)
        eok = parse_number(eok_part) or 0.0
        man = parse_number(man_part) or 0.0
        return eok + man / MAN_PER_EOK

    return (parse_number(text) or 0.0) / MAN_PER_EOK


def parse_price(price_str: Optional[str]) -> float:
    """
    Parse a listing price string into 억 units.

    Rent prices use "deposit/rent" notation; only the deposit is parsed.
    Amounts without 억 are treated as 만-denominated values.

    Args:
        price_str: Original string like "12억 3,000", "5,000/50" or "9억"

    Returns:
        Price in 억 (0.0 when the string cannot be parsed)

    Examples:
        >>> parse_price("12억 3,000")
        12.3
        >>> parse_price("5,000/50")
        0.5
        >>> parse_price("9억")
        9.0
        >>> parse_price("")
        0.0
    """
    if not price_str:
        return 0.0

    clean = re.sub(r"[,\s]", "", price_str)

    # 월세: "보증금/월세" - deposit only
    if "/" in clean:
        clean = clean.split("/", 1)[0]

    return _parse_eok_amount(clean)


def format_eok(value: float) -> str:
    """
    Format an 억 amount without a trailing ".0".

    Examples:
        >>> format_eok(10.0)
        '10'
        >>> format_eok(19.99)
        '19.99'
        >>> format_eok(1000000.0)
        '1000000'
    """
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"
