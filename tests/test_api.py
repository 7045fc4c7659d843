"""
FastAPI endpoint tests for the Chinese Numerals API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from chinese_numerals.symbols import SYMBOLS

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _mark_ready() -> None:
    """Mark the service ready once for all API tests (bypasses lifespan)."""
    api._ready = True
    yield  # type: ignore[misc]
    api._ready = False


SAMPLE_TEXT = "總價1000萬800呎，共三千二百人"


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["symbols_loaded"] == len(SYMBOLS)

    def test_not_ready_returns_503(self) -> None:
        api._ready = False
        try:
            assert client.get("/health").status_code == 503
        finally:
            api._ready = True


class TestConvertEndpoint:
    def test_converts_text(self) -> None:
        resp = client.post("/convert", json={"text": SAMPLE_TEXT})
        assert resp.status_code == 200
        data = resp.json()
        assert data["converted"] == "總價10000000 800呎，共3200人"
        assert data["numerals"] == [10_000_000, 800, 3200]
        assert data["source"] == SAMPLE_TEXT

    def test_segments_in_response(self) -> None:
        data = client.post("/convert", json={"text": SAMPLE_TEXT}).json()
        numerals = [s for s in data["segments"] if s["kind"] == "numeral"]
        assert numerals[0]["text"] == "1000萬"
        assert numerals[1]["boundary_before"] is True

    def test_empty_text(self) -> None:
        data = client.post("/convert", json={"text": ""}).json()
        assert data["converted"] == ""
        assert data["segments"] == []

    def test_missing_body_returns_422(self) -> None:
        assert client.post("/convert", json={}).status_code == 422


class TestParseEndpoint:
    def test_parse_token(self) -> None:
        data = client.post("/parse", json={"token": "一千萬"}).json()
        assert data == {"token": "一千萬", "value": 10_000_000}

    def test_unparseable_token_is_zero(self) -> None:
        data = client.post("/parse", json={"token": ",,"}).json()
        assert data["value"] == 0

    def test_decimal_token(self) -> None:
        data = client.post("/parse", json={"token": "3.5萬"}).json()
        assert data["value"] == 35_000

    def test_value_beyond_float_range_returns_422(self) -> None:
        resp = client.post("/parse", json={"token": "1" * 400 + ".5"})
        assert resp.status_code == 422
        assert "floating-point range" in resp.json()["detail"]

    def test_long_digit_run_converts(self) -> None:
        data = client.post("/convert", json={"text": "門牌" + "一" * 5000 + "號"}).json()
        assert data["converted"] == "門牌" + "1" * 5000 + "號"
        assert data["numerals"] == ["1" * 5000]

    def test_long_token_value_is_decimal_string(self) -> None:
        data = client.post("/parse", json={"token": "九" * 5000}).json()
        assert data["value"] == "9" * 5000


class TestClassifyEndpoint:
    def test_digit(self) -> None:
        data = client.get("/classify/貳").json()
        assert data["kind"] == "digit"
        assert data["value"] == 2

    def test_scale_multiplier(self) -> None:
        data = client.get("/classify/萬").json()
        assert data["kind"] == "multiplier"
        assert data["magnitude"] == 10_000
        assert data["carries_scale"] is True

    def test_plain_multiplier(self) -> None:
        data = client.get("/classify/十").json()
        assert data["magnitude"] == 10
        assert data["carries_scale"] is False

    def test_not_a_numeral(self) -> None:
        data = client.get("/classify/a").json()
        assert data["kind"] == "not_a_numeral"

    def test_multi_character_returns_422(self) -> None:
        resp = client.get("/classify/十二")
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_INPUT"


class TestFileUploadEndpoint:
    def test_upload_text_file(self) -> None:
        resp = client.post(
            "/convert/file",
            files={"file": ("sample.txt", SAMPLE_TEXT.encode("utf-8"), "text/plain")},
        )
        assert resp.status_code == 200
        assert resp.json()["converted"] == "總價10000000 800呎，共3200人"

    def test_non_utf8_file_returns_400(self) -> None:
        resp = client.post(
            "/convert/file",
            files={"file": ("sample.txt", b"\xff\xfe\xc1\x60", "text/plain")},
        )
        assert resp.status_code == 400

    def test_too_large_file_returns_413(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(api, "MAX_UPLOAD_BYTES", 4)
        resp = client.post(
            "/convert/file",
            files={"file": ("sample.txt", SAMPLE_TEXT.encode("utf-8"), "text/plain")},
        )
        assert resp.status_code == 413
