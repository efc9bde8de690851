"""
Query parsing for natural-language listing search.

Turns Korean free text such as "강남구 10억대 아파트 매매 찾아줘" into a
SearchQuery. Parsing runs as a pipeline of extraction stages; each stage
takes the working text and returns (extracted value, remaining text), so
consumed substrings never become keywords.
"""

import re
from typing import Callable, Optional

from loguru import logger

from src.search.models import SearchQuery
from src.utils.parsers import parse_number

parser_log = logger.bind(module="QueryParser")

PriceBounds = tuple[Optional[float], Optional[float]]

_NUM = r"(\d+(?:\.\d+)?)"

# "5억~10억", "5~10억", "5억 - 10억"
PRICE_RANGE_PATTERN = re.compile(_NUM + r"억?\s*[~-]\s*" + _NUM + r"억")


def _decade(base: float) -> PriceBounds:
    # "10억대" = 10억 ~ 19.99억
    return base, round(base + 9.99, 2)


# Checked in order, first match wins
PRICE_BOUND_RULES: list[tuple[re.Pattern, Callable[[float], PriceBounds]]] = [
    (re.compile(_NUM + r"억\s*(?:이하|미만)"), lambda n: (None, n)),
    (re.compile(_NUM + r"억\s*(?:이상|초과)"), lambda n: (n, None)),
    (re.compile(_NUM + r"억\s*대"), _decade),
]

# (trigger words, category) - first trigger found wins
BUILDING_TYPE_RULES: list[tuple[tuple[str, ...], str]] = [
    (("아파트",), "아파트"),
    (("오피스텔",), "오피스텔"),
    (("빌라", "연립", "다세대"), "빌라/연립"),
    (("원룸",), "원룸"),
    (("단독주택", "주택", "단독", "다가구"), "단독/다가구"),
]

TRANSACTION_TYPES: tuple[str, ...] = ("매매", "전세", "월세")

STOP_WORDS: tuple[str, ...] = (
    "찾아줘", "찾아", "검색", "물건", "매물", "보여줘", "알려줘",
    "있나요", "있어", "주세요", "좀", "해줘", "구해줘",
    "싶어", "원하는", "근처", "부근", "주변", "추천",
)


def _consume(text: str, match: re.Match) -> str:
    """Replace a matched span with a space."""
    return text[: match.start()] + " " + text[match.end():]


def _remove_all(text: str, word: str) -> str:
    """Replace every occurrence of a word with a space."""
    return text.replace(word, " ")


# ============================================================
# Extraction stages
# ============================================================


def extract_price_range(text: str) -> tuple[PriceBounds, str]:
    """
    Extract a price range in 억 units.

    Args:
        text: Working query text

    Returns:
        ((min_price, max_price), remaining text)

    Examples:
        >>> extract_price_range("5억~10억 아파트")[0]
        (5.0, 10.0)
        >>> extract_price_range("10억대")[0]
        (10.0, 19.99)
        >>> extract_price_range("5억 이하")[0]
        (None, 5.0)
    """
    match = PRICE_RANGE_PATTERN.search(text)
    if match:
        low = parse_number(match.group(1))
        high = parse_number(match.group(2))
        return (low, high), _consume(text, match)

    for pattern, build in PRICE_BOUND_RULES:
        match = pattern.search(text)
        if match:
            value = parse_number(match.group(1))
            bounds = build(value) if value is not None else (None, None)
            return bounds, _consume(text, match)

    return (None, None), text


def extract_building_type(text: str) -> tuple[Optional[str], str]:
    """
    Extract the building-use category.

    All occurrences of the matched trigger word are removed.

    Examples:
        >>> extract_building_type("마포 빌라 전세")
        ('빌라/연립', '마포   전세')
    """
    for triggers, category in BUILDING_TYPE_RULES:
        for trigger in triggers:
            if trigger in text:
                return category, _remove_all(text, trigger)
    return None, text


def extract_transaction_type(text: str) -> tuple[Optional[str], str]:
    """
    Extract the transaction type (매매 > 전세 > 월세).

    Examples:
        >>> extract_transaction_type("래미안 전세")
        ('전세', '래미안  ')
    """
    for trade in TRANSACTION_TYPES:
        if trade in text:
            return trade, _remove_all(text, trade)
    return None, text


def strip_stop_words(text: str) -> str:
    """Remove search/politeness filler words."""
    for word in STOP_WORDS:
        text = _remove_all(text, word)
    return text


def tokenize(text: str) -> list[str]:
    """Split remaining text into keyword tokens."""
    return text.split()


# ============================================================
# Pipeline
# ============================================================


def parse_search_query(raw_query: str) -> SearchQuery:
    """
    Parse a free-text query into a SearchQuery.

    Never fails: absent patterns leave the matching field unset.

    Args:
        raw_query: User input like "강남구 10억대 아파트"

    Returns:
        SearchQuery with keywords and structured conditions
    """
    text = raw_query or ""

    (min_price, max_price), text = extract_price_range(text)
    building_type, text = extract_building_type(text)
    transaction_type, text = extract_transaction_type(text)
    text = strip_stop_words(text)

    query = SearchQuery(
        keywords=tokenize(text),
        min_price=min_price,
        max_price=max_price,
        building_type=building_type,
        transaction_type=transaction_type,
    )
    parser_log.debug(f"Parsed {raw_query!r} -> {query}")
    return query
