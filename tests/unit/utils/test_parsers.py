"""
Unit tests for src/utils/parsers/
"""

import pytest

from src.utils.parsers.complex_name import extract_complex_name
from src.utils.parsers.price import format_eok, parse_number, parse_price


# ============================================================
# parse_price tests
# ============================================================


class TestParsePrice:
    """Tests for parse_price function."""

    def test_eok_and_man(self):
        assert parse_price("12억 3,000") == pytest.approx(12.3)

    def test_rent_uses_deposit_only(self):
        assert parse_price("5,000/50") == pytest.approx(0.5)

    def test_eok_only(self):
        assert parse_price("9억") == 9.0

    def test_rent_with_eok_deposit(self):
        assert parse_price("1억 5,000/120") == pytest.approx(1.5)

    def test_man_only(self):
        assert parse_price("8,500") == pytest.approx(0.85)

    def test_man_suffix_is_ignored(self):
        assert parse_price("12억3000만") == pytest.approx(12.3)

    def test_empty_string(self):
        assert parse_price("") == 0.0

    def test_none(self):
        assert parse_price(None) == 0.0

    def test_non_numeric(self):
        """Unparsable prices degrade to 0."""
        assert parse_price("가격협의") == 0.0

    def test_non_numeric_eok_part(self):
        assert parse_price("협의억") == 0.0

    def test_all_cases(self, price_cases):
        for price_str, expected in price_cases:
            assert parse_price(price_str) == pytest.approx(expected), price_str


# ============================================================
# parse_number tests
# ============================================================


class TestParseNumber:
    """Tests for parse_number function."""

    def test_integer(self):
        assert parse_number("12") == 12.0

    def test_decimal(self):
        assert parse_number("2.5") == 2.5

    def test_trailing_text(self):
        assert parse_number("3000만") == 3000.0

    def test_no_number(self):
        assert parse_number("abc") is None

    def test_empty(self):
        assert parse_number("") is None
        assert parse_number(None) is None


# ============================================================
# format_eok tests
# ============================================================


class TestFormatEok:
    """Tests for format_eok function."""

    def test_whole_number(self):
        assert format_eok(10.0) == "10"

    def test_fraction(self):
        assert format_eok(19.99) == "19.99"

    def test_zero(self):
        assert format_eok(0.0) == "0"

    def test_large_value_not_scientific(self):
        assert format_eok(1000000.0) == "1000000"
        assert format_eok(1234567.5) == "1234567.5"


# ============================================================
# extract_complex_name tests
# ============================================================


class TestExtractComplexName:
    """Tests for extract_complex_name function."""

    def test_unit_and_trade_suffix(self):
        assert extract_complex_name("래미안대치팰리스 101동매매") == "래미안대치팰리스"

    def test_unit_suffix_without_space(self):
        assert extract_complex_name("역삼e편한세상103동전세") == "역삼e편한세상"

    def test_trade_suffix_only(self):
        assert extract_complex_name("합정오피스텔 월세 풀옵션") == "합정오피스텔"

    def test_no_suffix_truncates(self):
        name = "아주아주긴이름을가진단지명입니다정말로길어요"
        assert extract_complex_name(name) == name[:20]

    def test_short_name_unchanged(self):
        assert extract_complex_name("마곡보타닉") == "마곡보타닉"

    def test_empty(self):
        assert extract_complex_name("") == ""
        assert extract_complex_name(None) == ""
