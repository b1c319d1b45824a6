"""
API tests for converter pages: conversion, favorites, history, exports.
"""

from calchub.models import StateEntry
from calchub.settings import settings


# --- Pages ---

def test_list_pages(client):
    resp = client.get("/api/units")
    assert resp.status_code == 200
    pages = resp.json()["pages"]
    slugs = [p["slug"] for p in pages]
    assert slugs[:3] == ["flow-rate", "density", "time"]
    flow = pages[0]
    assert flow["base"] == "m3/s"
    assert flow["unit_count"] == 22


def test_page_detail(client):
    resp = client.get("/api/units/flow-rate")
    assert resp.status_code == 200
    data = resp.json()
    assert data["default_from"] == "L/min"
    assert data["default_to"] == "galUS/min"
    assert data["default_format"] == "normal"
    assert data["default_precision"] == 6
    assert data["csv_filename"] == "flowrate-conversion.csv"
    assert data["shortcuts"]["x"] == "swap"
    assert data["favorites"]["favorites"][0] == "L/min"
    assert len(data["favorites"]["favored"]) + len(data["favorites"]["others"]) == len(data["units"])


def test_unknown_page_404(client):
    assert client.get("/api/units/temperature").status_code == 404
    assert client.get("/api/units/temperature/convert").status_code == 404


# --- Conversion ---

def test_convert_from_share_query(client):
    resp = client.get("/api/units/time/convert?v=10&from=badkey&to=s&fmt=bogus&p=99")
    assert resp.status_code == 200
    data = resp.json()
    assert data["from_unit"] == "min"
    assert data["to_unit"] == "s"
    assert data["format"] == "normal"
    assert data["precision"] == 6
    assert data["result"] == {"value": 600, "display": "600"}
    assert data["share"]["query"] == "v=10&from=min&to=s&fmt=normal&p=6"
    assert data["share"]["url"] == "/api/units/time/convert?v=10&from=min&to=s&fmt=normal&p=6"
    assert data["share"]["history_action"] == "replace"


def test_convert_post_body(client):
    resp = client.post("/api/units/pressure/convert", json={
        "value": "1,000",
        "from_unit": "kPa",
        "to_unit": "bar",
        "format": "compact",
        "precision": 2,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["value"] == 1000
    assert data["result"]["display"] == "10"
    grid = {c["key"]: c for c in data["grid"]}
    assert "kPa" not in grid
    assert grid["Pa"]["display"] == "1M"


def test_convert_unknown_unit_is_null(client):
    resp = client.post("/api/units/time/convert", json={"value": "1", "from_unit": "eon"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["result"] == {"value": None, "display": "—"}
    assert all(c["value"] is None for c in data["grid"])
    # Nothing meaningful to replay later
    assert client.get("/api/units/time/history").json()["history"] == []


def test_convert_rejects_bad_body(client):
    assert client.post("/api/units/time/convert", json={"precision": 13}).status_code == 422
    assert client.post("/api/units/time/convert", json={"format": "bogus"}).status_code == 422


def test_swap(client):
    resp = client.post("/api/units/angle/swap", json={"value": "3.14159", "precision": 2})
    assert resp.status_code == 200
    data = resp.json()
    assert data["from_unit"] == "rad"
    assert data["to_unit"] == "deg"
    assert data["result"]["display"] == "180"


def test_hints_returned(client):
    data = client.get("/api/units/time/convert?from=yr&to=d").json()
    assert any("365.2425" in h for h in data["hints"])


# --- Favorites ---

def test_toggle_favorite_persists_per_client(client, mock_redis):
    headers = {"X-Client-Id": "alice"}
    resp = client.post("/api/units/flow-rate/favorites/toggle", json={"key": "bbl/s"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["favorites"][-1] == "bbl/s"
    assert "bbl/s" in mock_redis.get("calchub:alice:flow:favorites")

    favs = client.get("/api/units/flow-rate/favorites", headers=headers).json()["favorites"]
    assert "bbl/s" in favs
    favored = client.get("/api/units/flow-rate/favorites", headers=headers).json()["favored"]
    assert favored[-1]["key"] == "bbl/s"

    # Other clients are unaffected
    other = client.get("/api/units/flow-rate/favorites", headers={"X-Client-Id": "bob"}).json()
    assert "bbl/s" not in other["favorites"]

    # Toggle again removes it
    resp = client.post("/api/units/flow-rate/favorites/toggle", json={"key": "bbl/s"}, headers=headers)
    assert "bbl/s" not in resp.json()["favorites"]


def test_toggle_unknown_unit_404(client):
    resp = client.post("/api/units/flow-rate/favorites/toggle", json={"key": "parsec/s"})
    assert resp.status_code == 404


def test_invalid_client_id_400(client):
    resp = client.get("/api/units/flow-rate/favorites", headers={"X-Client-Id": "not valid!"})
    assert resp.status_code == 400


# --- History ---

def test_history_records_share_query_conversions(client):
    client.get("/api/units/energy/convert?v=2&from=kWh&to=MJ")
    client.get("/api/units/energy/convert?v=2&from=kWh&to=MJ")
    client.post("/api/units/energy/convert", json={"value": "", "from_unit": "J", "to_unit": "cal"})

    history = client.get("/api/units/energy/history").json()["history"]
    assert [(h["value_text"], h["from_unit"], h["to_unit"]) for h in history] == [
        ("0", "J", "cal"),
        ("2", "kWh", "MJ"),
    ]
    assert history[0]["timestamp"] > 0


def test_history_capped(client):
    for i in range(12):
        client.get(f"/api/units/mass/convert?v={i}")
    history = client.get("/api/units/mass/history").json()["history"]
    assert len(history) == settings.history_max
    assert history[0]["value_text"] == "11"


def test_history_is_per_page(client):
    client.get("/api/units/force/convert?v=5")
    assert client.get("/api/units/density/history").json()["history"] == []


# --- Exports ---

def test_export_csv(client):
    resp = client.get("/api/units/time/export.csv?v=10&from=min&to=s")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert 'filename="time-conversion.csv"' in resp.headers["content-disposition"]
    rows = resp.text.split("\n")
    assert rows[0] == '"Unit","Value"'
    assert '"Second (s)","600"' in rows


def test_export_text(client):
    resp = client.get("/api/units/time/export.txt?v=10&from=min")
    assert resp.status_code == 200
    assert "Second (s): 600" in resp.text.split("\n")


def test_exports_do_not_touch_history(client):
    client.get("/api/units/time/export.csv?v=10")
    client.get("/api/units/time/export.txt?v=10")
    assert client.get("/api/units/time/history").json()["history"] == []


# --- Storage backends ---

def test_storage_down_degrades_gracefully(client, fake_redis_server):
    fake_redis_server.connected = False

    resp = client.get("/api/units/time/convert?v=10")
    assert resp.status_code == 200
    assert resp.json()["result"]["display"] == "600"

    resp = client.post("/api/units/time/favorites/toggle", json={"key": "ns"})
    assert resp.status_code == 200
    assert "ns" in resp.json()["favorites"]

    # Nothing persisted: next request is back to defaults
    assert "ns" not in client.get("/api/units/time/favorites").json()["favorites"]

    ready = client.get("/api/ready").json()
    assert ready["ok"] is True
    assert ready["storage_ok"] is False


def test_ready_with_storage(client):
    data = client.get("/api/ready").json()
    assert data == {"ok": True, "state_backend": "redis", "storage_ok": True}


def test_memory_backend(client, monkeypatch):
    monkeypatch.setattr(settings, "state_backend", "memory")
    client.post("/api/units/angle/favorites/toggle", json={"key": "mrad"})
    assert "mrad" in client.get("/api/units/angle/favorites").json()["favorites"]


def test_unknown_backend_does_not_persist(client, monkeypatch):
    monkeypatch.setattr(settings, "state_backend", "floppy")
    client.post("/api/units/angle/favorites/toggle", json={"key": "mrad"})
    assert "mrad" not in client.get("/api/units/angle/favorites").json()["favorites"]


def test_sql_backend(client, sql_backend):
    client.post("/api/units/density/favorites/toggle", json={"key": "oz/in3"})
    client.get("/api/units/density/convert?v=1")

    assert "oz/in3" in client.get("/api/units/density/favorites").json()["favorites"]

    keys = {row.key for row in sql_backend.query(StateEntry).all()}
    assert keys == {"calchub:local:density:favorites", "calchub:local:density:history"}


# --- Limits ---

def test_overlong_query_value_falls_back_to_default(client):
    data = client.get("/api/units/time/convert?v=" + "1" * 101 + "&to=h").json()
    assert data["value_text"] == ""
    assert data["to_unit"] == "h"
    assert client.post("/api/units/time/convert", json={"value": "1" * 101}).status_code == 422


def test_rate_limit_returns_429(client, monkeypatch):
    monkeypatch.setattr(settings, "rate_limit", "3/minute")
    codes = [client.get("/api/units/time/convert?v=1").status_code for _ in range(4)]
    assert codes == [200, 200, 200, 429]

    # Limits are per route
    resp = client.post("/api/units/time/favorites/toggle", json={"key": "ns"})
    assert resp.status_code == 200
