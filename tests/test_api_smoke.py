import pytest


@pytest.fixture
def client(tmp_path, monkeypatch):
    pytest.importorskip("fastapi")
    pytest.importorskip("starlette")
    pytest.importorskip("httpx")

    # db.py reads the path on every call, so the env var is enough.
    monkeypatch.setenv("FROGPATH_DB_PATH", str(tmp_path / "ponds.db"))

    from fastapi.testclient import TestClient
    from app import app

    return TestClient(app)


def test_api_create_solve_and_state(client):
    r = client.post("/ponds")
    assert r.status_code == 200
    pond_id = r.json()["pond_id"]
    assert isinstance(pond_id, str) and len(pond_id) > 0

    assert pond_id in client.get("/ponds").json()["ponds"]

    r = client.get(f"/ponds/{pond_id}/state")
    assert r.status_code == 200
    data = r.json()
    assert data["pond_id"] == pond_id
    assert data["flies_left"] == 5
    assert "map_text" in data

    r = client.post(f"/ponds/{pond_id}/solve")
    assert r.status_code == 200
    out = r.json()
    assert out["solved"] is True
    assert out["trace"] == "0 1 2 3 8 14 ate 5 flies"

    # eaten flies are persisted
    assert client.get(f"/ponds/{pond_id}/state").json()["flies_left"] == 0

    runs = client.get(f"/ponds/{pond_id}/runs").json()["runs"]
    assert [run["trace"] for run in runs] == ["0 1 2 3 8 14 ate 5 flies"]


def test_api_create_from_text(client):
    r = client.post("/ponds", json={"text": "S.A\n"})
    assert r.status_code == 200
    pond_id = r.json()["pond_id"]

    out = client.post(f"/ponds/{pond_id}/solve").json()
    assert out["solved"] is False
    assert out["trace"] == "No solution"


def test_api_rejects_bad_pond_text(client):
    r = client.post("/ponds", json={"text": "..?\n"})
    assert r.status_code == 400
    assert "unknown cell character" in r.json()["detail"]


def test_api_empty_pond_text_is_rejected(client):
    before = client.get("/ponds").json()["ponds"]

    r = client.post("/ponds", json={"text": ""})
    assert r.status_code == 400
    assert "no cells" in r.json()["detail"]
    assert client.get("/ponds").json()["ponds"] == before


def test_api_unknown_pond_is_404(client):
    assert client.get("/ponds/nope/state").status_code == 404
    assert client.post("/ponds/nope/solve").status_code == 404
    assert client.get("/ponds/nope/runs").status_code == 404


def test_api_commands(client):
    pond_id = client.post("/ponds", json={"text": "P.E\n"}).json()["pond_id"]

    r = client.post(f"/ponds/{pond_id}/command", json={"command": "best 0"})
    assert r.status_code == 200
    assert r.json()["events"] == ["Candidates from 0: 2 [3.5], 1 [6.0]"]

    r = client.post(f"/ponds/{pond_id}/command", json={"command": "best 9"})
    assert r.json()["events"] == ["ERROR: no such cell 9"]

    r = client.post(f"/ponds/{pond_id}/command", json={"command": "solve"})
    assert r.json()["events"] == ["0 2 ate 0 flies"]
    assert r.json()["state"]["runs"] == ["0 2 ate 0 flies"]

    r = client.post(f"/ponds/{pond_id}/command", json={"command": "dance"})
    assert r.json()["events"] == ["Unknown command: dance"]


def test_api_html_index_redirects_then_renders(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 302
    location = r.headers["location"]
    assert location.startswith("/?pond_id=")

    r = client.get(location)
    assert r.status_code == 200
    assert "Frog Path" in r.text
    assert "SS" in r.text

    pond_id = location.split("=", 1)[1]
    r = client.post("/ui/command", data={"pond_id": pond_id, "command": "solve"})
    assert r.status_code == 200
    assert "ate 5 flies" in r.text
