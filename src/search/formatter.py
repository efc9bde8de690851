"""
Search Response Formatter.

Renders search results and fixed templates as markdown-style text
(`**bold**`), the format shared by the HTTP API and the chat channels.
"""

from src.modules.listings import Listing
from src.search.models import SearchQuery, SimilarResult
from src.utils.parsers import format_eok

DISPLAY_LIMIT = 10
FEATURE_MAX_LENGTH = 50

GREETING_MESSAGE = "\n".join([
    "안녕하세요! **어디살래** 부동산 검색 서비스입니다.",
    "",
    "현재 서울 지역 매물 정보를 검색하실 수 있습니다.",
    "",
    "**검색 예시:**",
    '- "강남구 10억대 아파트"',
    '- "마포구 전세 5억 이하"',
    '- "역삼동 매매 아파트"',
    '- "마곡 힐스테이트 매매"',
    '- "래미안 전세"',
    "",
    "원하시는 조건을 말씀해주세요!",
])

HELP_MESSAGE = "\n".join([
    "**어디살래 검색 사용법**",
    "",
    "**지역 검색:**",
    '- 구 단위: "강남구", "서초구", "마포구"',
    '- 동 단위: "역삼동", "논현동", "합정동"',
    '- 지역명: "마곡", "잠실", "판교"',
    "",
    "**단지명 검색:**",
    '- "래미안", "힐스테이트", "자이", "마곡보타닉"',
    "",
    "**가격 조건:**",
    '- "10억대" → 10억~19억',
    '- "5억 이하" → 최대 5억',
    '- "10억 이상" → 최소 10억',
    '- "5억~10억" → 5억에서 10억 사이',
    "",
    "**건물 유형:**",
    "아파트, 오피스텔, 빌라, 원룸, 단독주택",
    "",
    "**거래 방식:**",
    "매매, 전세, 월세",
    "",
    "**검색 TIP:**",
    "여러 키워드를 조합할 수 있습니다.",
    '예: "마곡 힐스테이트 매매 10억대"',
])

DATA_UNAVAILABLE_MESSAGE = "매물 데이터를 불러올 수 없습니다. 잠시 후 다시 시도해주세요."

NO_SIMILAR_TIP = "\n".join([
    "조건에 맞는 유사 매물도 찾지 못했습니다.",
    "",
    "**TIP:** 키워드를 줄이거나 조건을 변경해보세요.",
    '예: "마곡 매매 아파트", "래미안 전세"',
])


def format_price_range(query: SearchQuery) -> str:
    """
    Format the price bounds of a query.

    Examples:
        "10억 ~ 19.99억", "5억 ~", "~ 5억"
    """
    low = f"{format_eok(query.min_price)}억" if query.min_price is not None else ""
    high = f"{format_eok(query.max_price)}억" if query.max_price is not None else ""
    return f"{low} ~ {high}".strip()


def format_conditions(query: SearchQuery) -> str:
    """
    Build the condition summary line.

    Args:
        query: Parsed search query

    Returns:
        Non-empty condition parts joined by " | " ("" if none)
    """
    parts = []
    if query.keywords:
        parts.append(f"키워드: {', '.join(query.keywords)}")
    if query.has_price_range:
        parts.append(f"가격: {format_price_range(query)}")
    if query.building_type:
        parts.append(f"유형: {query.building_type}")
    if query.transaction_type:
        parts.append(f"거래: {query.transaction_type}")
    return " | ".join(parts)


def format_listing(listing: Listing, index: int) -> str:
    """
    Format a single listing.

    Args:
        listing: Listing to format
        index: Zero-based position in the result list

    Returns:
        Multi-line listing block ending with a blank line
    """
    name = listing.display_name or "매물"
    location = listing.address or f"{listing.district} {listing.neighborhood}"

    lines = [
        f"**{index + 1}. {name}**",
        f"   위치: {location}",
        f"   가격: {listing.price} ({listing.transaction_type})",
        f"   면적: {listing.area or '-'} | {listing.floor or '-'} | {listing.direction or '-'}",
    ]

    if listing.feature:
        feature = listing.feature[:FEATURE_MAX_LENGTH]
        if len(listing.feature) > FEATURE_MAX_LENGTH:
            feature += "..."
        lines.append(f"   특징: {feature}")

    return "\n".join(lines) + "\n\n"


def _format_header(raw_query: str, summary_line: str, conditions: str) -> str:
    header = f'**"{raw_query}" 검색 결과**\n{summary_line}\n'
    if conditions:
        header += f"({conditions})\n"
    return header + "\n"


def format_exact_results(raw_query: str, query: SearchQuery, matches: list[Listing]) -> str:
    """
    Format the strict-match branch.

    Args:
        raw_query: Query as typed by the user
        query: Parsed search query
        matches: Strict matches sorted by price

    Returns:
        Response text with up to 10 listings
    """
    total = len(matches)
    response = _format_header(
        raw_query,
        f"총 {total:,}건의 매물을 찾았습니다.",
        format_conditions(query),
    )

    for index, listing in enumerate(matches[:DISPLAY_LIMIT]):
        response += format_listing(listing, index)

    if total > DISPLAY_LIMIT:
        response += f"\n...외 {total - DISPLAY_LIMIT:,}건의 매물이 더 있습니다.\n"
        response += "더 구체적인 조건을 입력하시면 원하는 매물을 찾기 쉽습니다."

    return response


def format_similar_results(raw_query: str, query: SearchQuery, result: SimilarResult) -> str:
    """
    Format the fallback branch (similar and nearby listings).

    Args:
        raw_query: Query as typed by the user
        query: Parsed search query
        result: Fallback ranking result

    Returns:
        Response text
    """
    response = _format_header(
        raw_query,
        "정확히 일치하는 매물이 없습니다.",
        format_conditions(query),
    )

    if result.is_empty:
        return response + NO_SIMILAR_TIP

    if result.similar:
        keywords = ", ".join(f'"{k}"' for k in result.matched_keywords)
        response += "---\n"
        response += f"**유사매물** ({keywords} 포함)\n\n"
        for index, listing in enumerate(result.similar):
            response += format_listing(listing, index)

    if result.nearby:
        response += "---\n"
        response += f"**인근지역매물** ({result.nearby_location} 지역)\n\n"
        for index, listing in enumerate(result.nearby):
            response += format_listing(listing, index)

    response += "\n더 구체적인 조건이나 다른 키워드로 검색해보세요."
    return response
