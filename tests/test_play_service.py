from fastapi.testclient import TestClient

from klondike.config import CONFIG_ENV_VAR
from server.play_service import app, sessions

client = TestClient(app)


def start(seed=21):
    response = client.post("/session/start", json={"seed": seed})
    assert response.status_code == 200
    return response.json()


def test_start_session_returns_fresh_deal():
    body = start()
    state = body["state"]

    assert body["session_id"]
    assert state["stock_count"] == 24
    assert [len(pile) for pile in state["tableau"]] == [1, 2, 3, 4, 5, 6, 7]


def test_same_seed_same_layout():
    first = start(seed=8)["state"]["tableau"]
    second = start(seed=8)["state"]["tableau"]
    assert [pile[-1]["label"] for pile in first] == [pile[-1]["label"] for pile in second]


def test_draw_and_undo():
    session_id = start()["session_id"]

    state = client.post(f"/session/{session_id}/draw").json()["state"]
    assert state["stock_count"] == 23

    state = client.post(f"/session/{session_id}/undo").json()["state"]
    assert state["stock_count"] == 24
    assert state["waste"] == []


def test_select_and_activate_round_trip():
    session_id = start()["session_id"]

    response = client.post(f"/session/{session_id}/select", json={"kind": "tableau", "pile": 6, "index": 6})
    assert response.status_code == 200
    assert response.json()["state"]["selection"] == {"kind": "tableau", "pile": 6, "index": 6}

    response = client.post(f"/session/{session_id}/activate", json={"kind": "tableau", "index": 6})
    assert response.status_code == 200
    assert response.json()["state"]["selection"] is None


def test_bad_pile_index_is_a_client_error():
    session_id = start()["session_id"]

    response = client.post(f"/session/{session_id}/select", json={"kind": "tableau", "pile": 9, "index": 0})
    assert response.status_code == 400
    response = client.post(f"/session/{session_id}/activate", json={"kind": "foundation", "index": 4})
    assert response.status_code == 400
    response = client.post(f"/session/{session_id}/activate", json={"kind": "stock", "index": 0})
    assert response.status_code == 400


def test_hint_endpoint():
    session_id = start()["session_id"]
    hint = client.get(f"/session/{session_id}/hint").json()["hint"]
    assert hint["action"] in {"move", "draw"}


def test_unknown_session():
    assert client.get("/session/missing").status_code == 404
    assert client.post("/session/missing/draw").status_code == 404


def test_malformed_activate_payload_is_a_bad_request():
    session_id = start()["session_id"]

    response = client.post(f"/session/{session_id}/activate", json={"kind": "tableau"})
    assert response.status_code == 400
    response = client.post(f"/session/{session_id}/activate", json={"kind": "tableau", "index": "left"})
    assert response.status_code == 400


def test_sessions_use_the_configured_history_capacity(tmp_path, monkeypatch):
    path = tmp_path / "klondike.json"
    path.write_text('{"history_capacity": 4}', encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    session_id = start()["session_id"]
    assert sessions[session_id].game.config.history_capacity == 4

    for _ in range(6):
        state = client.post(f"/session/{session_id}/draw").json()["state"]
    assert state["history_length"] == 4
