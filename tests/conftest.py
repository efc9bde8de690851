"""
Shared pytest fixtures for all tests.
"""

import pytest


# ============================================================
# Sample Data Fixtures
# ============================================================


@pytest.fixture
def sample_listing_record() -> dict:
    """Sample listing record as it appears in the JSON dump."""
    return {
        "구": "강남구",
        "동": "역삼동_남동",
        "단지명": "역삼래미안 101동매매",
        "매물유형": "아파트",
        "건물용도": "아파트",
        "거래방식": "매매",
        "가격": "12억 3,000",
        "가격유형": "매매가",
        "소재지": "서울특별시 강남구 역삼동 123",
        "매물특징": "역세권, 남향, 올수리",
        "공급/전용면적": "112/84㎡",
        "해당층/총층": "10/25",
        "방향": "남향",
        "확인일자": "2025.01.10",
        "상세링크": None,
        "매물번호": "1000000001",
        "단지번호": "11680",
        "수집일시": "2025-01-10 09:00:00",
        "status": "active",
        "first_seen": "2025-01-10",
        "last_seen": "2025-01-12",
    }


# ============================================================
# Price Fixtures
# ============================================================


@pytest.fixture
def price_cases() -> list[tuple[str | None, float]]:
    """Test cases for price parsing: (input, expected 억)."""
    return [
        ("12억 3,000", 12.3),
        ("5,000/50", 0.5),
        ("9억", 9.0),
        ("1억/100", 1.0),
        ("1억 5,000/120", 1.5),
        ("8,500", 0.85),
        ("", 0.0),
        (None, 0.0),
    ]
