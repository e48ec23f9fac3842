"""
Tests for REST API server.

Tests the FastAPI endpoints for ranking, transforming and recoding blocks.
"""

import pytest
from fastapi.testclient import TestClient

from blocksort import mtf
from blocksort.server.api import app


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def client():
    """Create test client."""
    with TestClient(app) as test_client:
        yield test_client


# ============================================================================
# Service Endpoints
# ============================================================================

class TestServiceEndpoints:
    """Tests for health and strategy listing."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_strategies(self, client):
        response = client.get("/v1/strategies")
        assert response.status_code == 200
        data = response.json()
        assert data["default"] == "divsufsort"
        assert set(data["strategies"]) == {"comparison", "doubling", "divsufsort"}


# ============================================================================
# Ranking and Transform Endpoints
# ============================================================================

class TestRankEndpoint:
    """Tests for /v1/rank."""

    def test_rank_string(self, client):
        response = client.post("/v1/rank", json={"data": "ABRACADABRA!"})
        assert response.status_code == 200
        data = response.json()
        assert data["n"] == 12
        assert data["order"] == [11, 10, 7, 0, 3, 5, 8, 1, 4, 6, 9, 2]

    def test_rank_bytes(self, client):
        response = client.post("/v1/rank", json={"data": [99, 97, 98], "strategy": "doubling"})
        assert response.status_code == 200
        assert response.json()["order"] == [1, 2, 0]
        assert response.json()["strategy"] == "doubling"

    def test_unknown_strategy(self, client):
        response = client.post("/v1/rank", json={"data": "abc", "strategy": "bogus"})
        assert response.status_code == 400
        assert "Unknown ranking strategy" in response.json()["detail"]

    def test_bad_symbols(self, client):
        response = client.post("/v1/rank", json={"data": [1, 300]})
        assert response.status_code == 400


class TestTransformEndpoints:
    """Tests for /v1/transform and /v1/untransform."""

    def test_transform(self, client):
        response = client.post("/v1/transform", json={"data": "ABRACADABRA!"})
        assert response.status_code == 200
        data = response.json()
        assert data["origin"] == 3
        assert data["text"] == "ARD!RCAAAABB"
        assert data["data"] == list(b"ARD!RCAAAABB")

    def test_transform_empty(self, client):
        response = client.post("/v1/transform", json={"data": ""})
        assert response.status_code == 200
        assert response.json()["origin"] is None
        assert response.json()["data"] == []

    def test_untransform(self, client):
        response = client.post("/v1/untransform", json={"data": "ARD!RCAAAABB", "origin": 3})
        assert response.status_code == 200
        assert response.json()["text"] == "ABRACADABRA!"

    def test_untransform_bad_origin(self, client):
        response = client.post("/v1/untransform", json={"data": "ARD!RCAAAABB", "origin": 12})
        assert response.status_code == 400

    def test_untransform_missing_origin(self, client):
        response = client.post("/v1/untransform", json={"data": "ARD!RCAAAABB"})
        assert response.status_code == 400

    def test_untransform_length_mismatch(self, client):
        response = client.post(
            "/v1/untransform",
            json={"data": "ARD!RCAAAABB", "origin": 3, "length": 5}
        )
        assert response.status_code == 400


# ============================================================================
# MTF and Pipeline Endpoints
# ============================================================================

class TestMTFEndpoints:
    """Tests for /v1/mtf/encode and /v1/mtf/decode."""

    def test_encode(self, client):
        response = client.post("/v1/mtf/encode", json={"data": "BANANA"})
        assert response.status_code == 200
        assert response.json()["ranks"] == [66, 66, 78, 1, 1, 1]

    def test_decode(self, client):
        response = client.post("/v1/mtf/decode", json={"ranks": [66, 66, 78, 1, 1, 1]})
        assert response.status_code == 200
        assert response.json()["text"] == "BANANA"

    def test_decode_bad_rank(self, client):
        response = client.post("/v1/mtf/decode", json={"ranks": [1, 256]})
        assert response.status_code == 400


class TestPipelineEndpoints:
    """Tests for /v1/compress and /v1/decompress."""

    def test_compress(self, client):
        response = client.post("/v1/compress", json={"data": "ABRACADABRA!"})
        assert response.status_code == 200
        assert response.json()["ranks"] == list(mtf.encode(b"\x00\x00\x00\x03ARD!RCAAAABB"))

    def test_round_trip(self, client):
        text = "peter piper picked a peck of pickled peppers"
        ranks = client.post("/v1/compress", json={"data": text}).json()["ranks"]
        response = client.post("/v1/decompress", json={"ranks": ranks})
        assert response.status_code == 200
        assert response.json()["text"] == text

    def test_decompress_corrupt(self, client):
        response = client.post("/v1/decompress", json={"ranks": [0, 0]})
        assert response.status_code == 400
