"""
Integration tests for phrasebook and health endpoints
"""
import pytest
from fastapi.testclient import TestClient

from phrase_router.config.settings import Settings
from phrase_router.main import create_app


@pytest.fixture
def api(fake_client):
    app = create_app(settings=Settings(), client=fake_client)
    with TestClient(app) as client:
        yield client


def test_list_all_phrases(api):
    resp = api.get("/phrases")
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == 175


def test_list_by_category(api):
    data = api.get("/phrases", params={"category": "greeting"}).json()["data"]
    assert data
    assert all(p["category"] == "greeting" for p in data)
    assert data[0]["id"] == "greeting_01"
    assert data[0]["secondary_pronunciation"] == "Annyeonghaseyo"


def test_unknown_category_rejected(api):
    resp = api.get("/phrases", params={"category": "nightlife"})
    assert resp.status_code == 422
    assert resp.json()["status"] == "error"


def test_similar_phrases(api):
    resp = api.get("/phrases/similar", params={"q": "你好呀", "source_language": "zh", "limit": 3})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert 1 <= len(data) <= 3
    assert "greeting_01" in [item["phrase"]["id"] for item in data]
    assert all(item["matched_language"] == "zh" for item in data)
    scores = [item["similarity"] for item in data]
    assert scores == sorted(scores, reverse=True)


def test_similar_requires_query(api):
    assert api.get("/phrases/similar").status_code == 422


def test_health(api):
    body = api.get("/health").json()
    assert body["status"] == "healthy"
    assert body["details"]["phrase_index"]["entries"] == 175
    assert body["details"]["cache"]["size"] == 0


def test_client_closed_on_shutdown(fake_client):
    app = create_app(settings=Settings(), client=fake_client)
    with TestClient(app):
        pass
    assert fake_client.closed
