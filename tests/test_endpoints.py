from fastapi.testclient import TestClient

from src.app import app
from src.banners import cache
from src.settings import settings

client = TestClient(app)


def test_root_ok():
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_search_places_mopub_banner():
    r = client.post("/search", json={
        "query": "coffee",
        "results": ["a", "b", "c"],
        "banners": [{"banner_id": "ad-1", "kind": "mopub"}],
    })
    assert r.status_code == 200
    items = r.json()["items"]
    assert [i.get("result") or i.get("banner_id") for i in items] == ["a", "b", "ad-1", "c"]
    assert items[2]["type"] == "mopub"
    assert items[2]["position"] == 2

    # session is closed before responding
    assert cache.visible == ()
    assert cache.history[-1] == ("out_of_screen", "ad-1")


def test_search_rejects_unknown_kind():
    r = client.post("/search", json={
        "query": "coffee",
        "banners": [{"banner_id": "x", "kind": "not-a-kind"}],
    })
    assert r.status_code == 422


def test_search_keeps_two_mopub_banners_in_order():
    r = client.post("/search", json={
        "query": "coffee",
        "results": ["a", "b", "c"],
        "banners": [
            {"banner_id": "ad-1", "kind": "mopub"},
            {"banner_id": "ad-2", "kind": "mopub"},
        ],
    })
    assert r.status_code == 200
    items = r.json()["items"]
    assert [i.get("result") or i.get("banner_id") for i in items] == ["a", "b", "ad-1", "ad-2", "c"]
    assert [i["container_index"] for i in items if i["banner_id"]] == [0, 1]


def test_search_unsupported_kind_falls_back_when_not_debug(monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", False)
    r = client.post("/search", json={
        "query": "coffee",
        "results": ["a", "b"],
        "banners": [{"banner_id": "fb-1", "kind": "facebook"}],
    })
    assert r.status_code == 200
    first = r.json()["items"][0]
    assert first["type"] == "regular"
    assert first["position"] == 0
    assert first["banner_id"] == "fb-1"


def test_search_unsupported_kind_fails_in_debug(monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", True)
    r = client.post("/search", json={
        "query": "coffee",
        "results": ["a"],
        "banners": [{"banner_id": "fb-1", "kind": "facebook"}],
    })
    assert r.status_code == 422
    assert "Unsupported banner type" in r.json()["detail"]
    # session still tears down
    assert cache.history[-1] == ("out_of_screen", "fb-1")
