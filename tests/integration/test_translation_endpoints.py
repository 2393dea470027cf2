"""
Integration tests for the HTTP surface, using the full phrase catalog and a
scripted remote client.
"""
import pytest
from fastapi.testclient import TestClient

from phrase_router.config.settings import Settings
from phrase_router.core.exceptions import ProviderRateLimitedError
from phrase_router.main import create_app
from phrase_router.services.romanizer import romanize_korean
from phrase_router.services.translation_router import CONNECTIVITY_GUIDANCE


@pytest.fixture
def remote(client_factory):
    return client_factory(["안녕~"])


@pytest.fixture
def api(remote):
    app = create_app(settings=Settings(), client=remote)
    with TestClient(app) as client:
        yield client


def test_offline_translation(api, remote):
    resp = api.post("/translation/text", json={"text": "你好"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["error"] is None
    data = body["data"]
    assert data["translated_text"] == "안녕하세요"
    assert data["romanization"] == "Annyeonghaseyo"
    assert data["is_offline"] is True
    assert data["matched_phrase"]["id"] == "greeting_01"
    assert remote.calls == []


def test_remote_translation(api, remote):
    resp = api.post(
        "/translation/text",
        json={"text": "你好呀", "source_language": "zh", "target_language": "ko"},
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["translated_text"] == "안녕~"
    assert data["is_offline"] is False
    assert data["romanization"] == romanize_korean("안녕~")
    assert len(remote.calls) == 1


def test_auto_detect(api):
    resp = api.post("/translation/text", json={"text": "감사합니다", "auto_detect": True})
    data = resp.json()["data"]
    assert data["source_language"] == "ko"
    assert data["target_language"] == "zh"
    assert data["translated_text"] == "谢谢"


def test_empty_text_rejected(api):
    resp = api.post("/translation/text", json={"text": "   "})
    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "error"
    assert body["data"] is None
    assert body["error"].startswith("INVALID_INPUT")


def test_same_language_rejected(api):
    resp = api.post(
        "/translation/text",
        json={"text": "你好", "source_language": "ko", "target_language": "ko"},
    )
    assert resp.status_code == 400


def test_unsupported_language_rejected(api):
    resp = api.post("/translation/text", json={"text": "hello", "target_language": "en"})
    assert resp.status_code == 422
    assert resp.json()["error"].startswith("INVALID_INPUT")


def test_provider_failure_returns_error_envelope(client_factory):
    app = create_app(settings=Settings(), client=client_factory([ProviderRateLimitedError()]))
    with TestClient(app) as api:
        resp = api.post("/translation/text", json={"text": "你好呀"})

    assert resp.status_code == 429
    body = resp.json()
    assert body["status"] == "error"
    assert body["error"].startswith("PROVIDER_RATE_LIMITED")
    assert CONNECTIVITY_GUIDANCE in body["error"]


def test_batch_reports_failed_items(api):
    resp = api.post("/translation/batch", json={"texts": ["你好", "", "谢谢"]})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [r["source_text"] for r in data["results"]] == ["你好", "谢谢"]
    assert [f["index"] for f in data["failed"]] == [1]


def test_batch_reports_unexpected_client_errors(client_factory):
    remote = client_factory([RuntimeError("boom"), "좋아요"])
    app = create_app(settings=Settings(), client=remote)
    with TestClient(app) as client:
        resp = client.post("/translation/batch", json={"texts": ["新句子一", "你好", "新句子二"]})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [r["source_text"] for r in data["results"]] == ["你好", "新句子二"]
    assert data["results"][1]["romanization"] == romanize_korean("좋아요")
    assert data["results"][1]["romanization"] is not None
    assert data["failed"][0]["index"] == 0
    assert data["failed"][0]["error"].startswith("UNKNOWN")


def test_batch_size_limit(api):
    resp = api.post("/translation/batch", json={"texts": ["你好"] * 51})
    assert resp.status_code == 422


def test_history_lifecycle(api):
    api.post("/translation/text", json={"text": "你好"})
    api.post("/translation/text", json={"text": "你好呀"})

    history = api.get("/translation/history").json()["data"]
    assert [h["source_text"] for h in history] == ["你好呀", "你好"]

    stats = api.get("/translation/history/stats").json()["data"]
    assert stats["total_translations"] == 2
    assert stats["offline_translations"] == 1

    record_id = history[0]["id"]
    assert api.delete(f"/translation/history/{record_id}").status_code == 200
    missing = api.delete(f"/translation/history/{record_id}")
    assert missing.status_code == 404
    assert missing.json()["status"] == "error"

    api.delete("/translation/history")
    assert api.get("/translation/history").json()["data"] == []


def test_cache_endpoints(api):
    api.post("/translation/text", json={"text": "你好呀"})

    stats = api.get("/translation/cache/stats").json()["data"]
    assert stats["size"] == 1
    assert stats["keys"] == ["你好呀_zh_ko"]

    api.delete("/translation/cache")
    assert api.get("/translation/cache/stats").json()["data"]["size"] == 0


def test_routing_stats(api):
    api.post("/translation/text", json={"text": "你好"})
    data = api.get("/translation/stats").json()["data"]
    assert data["paths"]["offline"] == 1
