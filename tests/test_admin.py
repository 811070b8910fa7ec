import copy
import json

import pytest
from fastapi.testclient import TestClient

import config
from main import app
from ranges import DEFAULT_RANGES, RangeTable, reload_ranges

client = TestClient(app)


@pytest.fixture(autouse=True)
def _builtin_ranges(monkeypatch):
    monkeypatch.setattr(config, "RANGES_FILE", None)
    yield
    # put RANGES_FILE back before reloading, or a bad test file gets reloaded
    monkeypatch.undo()
    reload_ranges()


def test_admin_reload_unauthorized(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.post("/admin/reload")
    assert r.status_code == 401


def test_admin_reload_not_configured(monkeypatch):
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    r = client.post("/admin/reload", headers={"x-admin-token": "anything"})
    assert r.status_code == 500


def test_admin_reload_ok(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.post("/admin/reload", headers={"x-admin-token": "secret"})
    assert r.status_code == 200
    assert r.json() == {"ok": True, "count": 9, "source": "builtin"}


def test_admin_reload_bad_file_keeps_table(monkeypatch, tmp_path):
    raw = copy.deepcopy(DEFAULT_RANGES)
    raw["balance"]["easy"]["a"] = [3, 2]
    p = tmp_path / "ranges.json"
    p.write_text(json.dumps(raw), encoding="utf-8")

    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    monkeypatch.setattr(config, "RANGES_FILE", str(p))
    r = client.post("/admin/reload", headers={"x-admin-token": "secret"})
    body = r.json()
    assert body["ok"] is False and "ValidationError" in body["error"]
    assert RangeTable.source() == "builtin"


def test_admin_session_count(monkeypatch, client):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    client.post("/sessions")
    r = client.get("/admin/sessions", headers={"x-admin-token": "secret"})
    assert r.json() == {"ok": True, "count": 1, "evicted": 0}
