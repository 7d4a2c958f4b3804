"""
HTTP layer tests (FastAPI TestClient).

Run:
    pytest tests/test_api.py -q
"""

import pytest
from fastapi.testclient import TestClient

import smart_chips.api.main as api_main
from smart_chips.api.main import LATENCY_HEADER, create_app
from smart_chips.utils.settings import Settings

VALID_BODY = {
    "intent": "product_discovery",
    "channel": "web",
    "stats": {
        "price_min": 25,
        "price_max": 1200,
        "price_median": 450,
        "rating_coverage": 0.72,
        "facets": [
            {
                "name": "gender",
                "values": [
                    {"value": "Men's", "share": 0.45},
                    {"value": "Women's", "share": 0.40},
                ],
            },
        ],
    },
    "config": {
        "modules": {"budget": True, "facet": True, "sort": True, "order": False, "cart": False, "policy": False},
        "thresholds": {"variance": 2.0, "facet_threshold": 0.2, "rating_threshold": 0.5},
    },
}


@pytest.fixture
def client(merchant_store):
    settings = Settings(merchant_config_path=None, log_level="INFO", cors_origins=("*",))
    return TestClient(create_app(store=merchant_store, settings=settings))


def test_valid_request_returns_chips(client):
    res = client.post("/v1/compute_chips", json=VALID_BODY)

    assert res.status_code == 200
    body = res.json()
    assert body["option"] == "success"
    assert len(body["chips"]) > 0
    assert isinstance(body["trace"], list)
    assert "error" not in body


def test_latency_header(client):
    res = client.post("/v1/compute_chips", json=VALID_BODY)

    latency = res.headers[LATENCY_HEADER]
    assert float(latency) >= 0
    assert len(latency.split(".")[1]) == 2


def test_invalid_body_is_200_error(client):
    res = client.post("/v1/compute_chips", json={"garbage": True})

    assert res.status_code == 200
    body = res.json()
    assert body["option"] == "error"
    assert body["error"]
    assert body["chips"] == []
    assert body["trace"] == []


def test_malformed_json_is_200_error(client):
    res = client.post(
        "/v1/compute_chips",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 200
    assert res.json()["option"] == "error"


def test_cors_header(client):
    res = client.post("/v1/compute_chips", json=VALID_BODY, headers={"Origin": "http://localhost:5173"})
    assert res.headers["access-control-allow-origin"] == "*"


def test_hydrates_from_merchant_id(client):
    res = client.post(
        "/v1/compute_chips",
        json={
            "intent": "product_discovery",
            "channel": "web",
            "merchant_id": "demo-electronics",
            "stats": VALID_BODY["stats"],
        },
    )

    assert res.status_code == 200
    assert res.json()["option"] == "success"
    assert len(res.json()["chips"]) > 0


def test_unknown_merchant_id(client):
    res = client.post(
        "/v1/compute_chips",
        json={"intent": "product_discovery", "channel": "web", "merchant_id": "does-not-exist", "stats": VALID_BODY["stats"]},
    )

    assert res.status_code == 200
    assert res.json()["option"] == "error"
    assert "Unknown merchant_id" in res.json()["error"]


def test_invalid_config_overrides(client):
    res = client.post(
        "/v1/compute_chips",
        json={
            "intent": "product_discovery",
            "channel": "web",
            "merchant_id": "demo-electronics",
            "stats": VALID_BODY["stats"],
            "config_overrides": {"thresholds": {"variance": 0}},
        },
    )

    assert res.status_code == 200
    assert res.json()["option"] == "error"
    assert "config_overrides invalid" in res.json()["error"]


def test_unexpected_exception_becomes_error_payload(client, monkeypatch):
    def boom(_payload):
        raise RuntimeError("engine exploded")

    monkeypatch.setattr(api_main, "compute_chips", boom)
    res = client.post("/v1/compute_chips", json=VALID_BODY)

    assert res.status_code == 200
    body = res.json()
    assert body["option"] == "error"
    assert "engine exploded" in body["error"]
    assert LATENCY_HEADER in res.headers


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
