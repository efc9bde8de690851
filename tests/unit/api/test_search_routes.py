"""
Unit tests for src/api/routes (health and search)
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.modules.listings import DataUnavailable, ListingSource, ListingStore
from src.search import DATA_UNAVAILABLE_MESSAGE, ListingSearchService, get_search_service

# Import fixtures
pytest_plugins = ["tests.fixtures.listings"]


class StubSource(ListingSource):
    def __init__(self, listings=None, fail: bool = False):
        self.listings = listings or []
        self.fail = fail

    async def load(self):
        if self.fail:
            raise DataUnavailable("stub failure")
        return self.listings


@pytest.fixture
def client_factory():
    """Build a TestClient whose search service reads the given source."""

    def factory(source: ListingSource) -> TestClient:
        service = ListingSearchService(ListingStore(source))
        app.dependency_overrides[get_search_service] = lambda: service
        return TestClient(app)

    yield factory
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory, search_listings):
    return client_factory(StubSource(search_listings))


# ============================================================
# Health
# ============================================================


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] is True
        assert "listings_loaded" in body


# ============================================================
# POST /search/chat
# ============================================================


class TestChat:
    """Tests for the chat endpoint."""

    def test_greeting(self, client):
        resp = client.post("/search/chat", json={"message": "안녕하세요"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert "어디살래" in body["message"]

    def test_search(self, client):
        resp = client.post("/search/chat", json={"message": "마포구 전세"})

        assert resp.status_code == 200
        assert "총 1건의 매물을 찾았습니다." in resp.json()["message"]

    def test_data_unavailable_is_not_an_error(self, client_factory):
        client = client_factory(StubSource(fail=True))

        resp = client.post("/search/chat", json={"message": "강남구"})

        assert resp.status_code == 200
        assert resp.json()["message"] == DATA_UNAVAILABLE_MESSAGE

    def test_empty_message_rejected(self, client):
        resp = client.post("/search/chat", json={"message": ""})

        assert resp.status_code == 422
        body = resp.json()
        assert body["success"] is False
        assert body["message"].startswith("body.message")

    def test_missing_body(self, client):
        resp = client.post("/search/chat", json={})

        assert resp.status_code == 422
        assert resp.json()["success"] is False


# ============================================================
# GET /search/listings
# ============================================================


class TestListings:
    """Tests for the structured search endpoint."""

    def test_exact(self, client):
        resp = client.get("/search/listings", params={"q": "강남구 아파트 매매"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["exact"] is True
        assert body["total"] == 1
        assert body["query"]["keywords"] == ["강남구"]
        assert body["query"]["building_type"] == "아파트"
        assert body["query"]["transaction_type"] == "매매"

        item = body["listings"][0]
        assert item["listing_no"] == "GN-1"
        assert item["name"] == "역삼래미안"
        assert item["neighborhood"] == "역삼동"
        assert item["price_value"] == 15.0

    def test_sorted_by_price(self, client):
        resp = client.get("/search/listings", params={"q": "강남구"})

        prices = [item["price_value"] for item in resp.json()["listings"]]
        assert prices == sorted(prices)

    def test_fallback(self, client):
        resp = client.get("/search/listings", params={"q": "역삼 자이"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["exact"] is False
        assert body["listings"] == []
        assert body["matched_keywords"] == ["역삼"]
        assert [item["listing_no"] for item in body["similar"]][:2] == ["GN-1", "GN-2"]
        assert body["nearby_location"] == "강남구"
        assert [item["listing_no"] for item in body["nearby"]] == ["GN-3"]

    def test_price_range_in_query(self, client):
        resp = client.get("/search/listings", params={"q": "10억대"})

        body = resp.json()
        assert body["query"]["min_price"] == 10
        assert body["query"]["max_price"] == 19.99
        assert {item["listing_no"] for item in body["listings"]} == {"GN-1", "GS-1"}

    def test_unavailable(self, client_factory):
        client = client_factory(StubSource(fail=True))

        resp = client.get("/search/listings", params={"q": "강남구"})

        assert resp.status_code == 503
        assert resp.json() == {"success": False, "message": DATA_UNAVAILABLE_MESSAGE}

    def test_missing_query(self, client):
        resp = client.get("/search/listings")

        assert resp.status_code == 422
        assert resp.json()["success"] is False
