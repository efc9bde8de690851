"""
Mock listing fixtures for search tests.
"""

import pytest

from src.modules.listings import Listing


def make_listing(listing_no: str, **fields) -> Listing:
    """Build a Listing with sensible defaults."""
    defaults = {
        "district": "강남구",
        "neighborhood": "역삼동_남동",
        "address": "",
        "complex_name": "테스트아파트 101동매매",
        "building_use": "아파트",
        "transaction_type": "매매",
        "price": "10억",
        "area": "112/84㎡",
        "floor": "10/25",
        "direction": "남향",
    }
    defaults.update(fields)
    return Listing(listing_no=listing_no, **defaults)


@pytest.fixture
def listing_factory():
    """Factory for building listings in tests."""
    return make_listing


@pytest.fixture
def gangnam_listings() -> list[Listing]:
    """강남구 아파트 (12억) and 강남구 오피스텔 (11억)."""
    return [
        make_listing(
            "A1",
            complex_name="강남아파트 101동매매",
            building_use="아파트",
            price="12억",
        ),
        make_listing(
            "O1",
            complex_name="강남오피스텔 1동매매",
            building_use="오피스텔",
            price="11억",
        ),
    ]


@pytest.fixture
def search_listings() -> list[Listing]:
    """Mixed listings across districts for search and ranking tests."""
    return [
        make_listing(
            "GN-1",
            district="강남구",
            neighborhood="역삼동_남동",
            complex_name="역삼래미안 101동매매",
            address="서울특별시 강남구 역삼동 1",
            price="15억",
        ),
        make_listing(
            "GN-2",
            district="강남구",
            neighborhood="대치동_남",
            complex_name="대치자이 102동전세",
            address="서울특별시 강남구 대치동 2",
            transaction_type="전세",
            price="8억",
        ),
        make_listing(
            "GN-3",
            district="강남구",
            neighborhood="논현동_북",
            complex_name="논현오피스텔 월세",
            building_use="오피스텔",
            address="서울특별시 강남구 논현동 3",
            transaction_type="월세",
            price="1,000/70",
        ),
        make_listing(
            "GS-1",
            district="강서구",
            neighborhood="마곡동_남동",
            complex_name="마곡힐스테이트 201동매매",
            address="서울특별시 강서구 마곡동 4",
            price="14억 8,000",
        ),
        make_listing(
            "MP-1",
            district="마포구",
            neighborhood="합정동_서",
            complex_name="합정래미안 301동전세",
            address="서울특별시 마포구 역삼로 5",
            transaction_type="전세",
            price="6억",
        ),
    ]
