from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health_ranges():
    r = client.get("/health/ranges")
    assert r.status_code == 200
    b = r.json()
    assert b["ok"] is True and b["rows"] == 9


def test_list_exercises_in_rotation_order():
    r = client.get("/exercises")
    assert r.status_code == 200
    data = r.json()
    assert [e["kind"] for e in data] == ["balance", "perimeter", "fruitStall"]
    assert [d["id"] for d in data[0]["difficulties"]] == ["easy", "medium", "difficult"]


def test_exercise_ranges():
    r = client.get("/exercises/perimeter/ranges")
    assert r.status_code == 200
    rows = r.json()
    assert rows[0] == {"difficulty": "easy", "a": [2, 2], "x": [5, 10], "b": [10, 30]}


def test_exercise_ranges_404():
    assert client.get("/exercises/triangle/ranges").status_code == 404
