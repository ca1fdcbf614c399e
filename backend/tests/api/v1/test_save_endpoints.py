# backend/tests/api/v1/test_save_endpoints.py
import uuid

from app.game_state import get_game, register_game
from app.services.save_service import save_store


def test_save_status_load_delete(test_client, game_state):
    """
    GIVEN a running game
    WHEN it is saved, inspected, loaded and deleted through the API
    THEN each step reports the save slot's state.
    """
    # --- Arrange ---
    register_game(game_state)
    sid = game_state.session_id

    # --- Act / Assert ---
    saved = test_client.post(f"/api/v1/save/{sid}")
    assert saved.status_code == 200
    assert saved.json()["has_saved_game"] is True
    assert saved.json()["message"].startswith("Game saved successfully!")

    status = test_client.get(f"/api/v1/save/{sid}").json()
    assert status["has_saved_game"] is True
    assert status["message"] == "Saved game from room 1."

    game_state.current_position = 2
    loaded = test_client.post(f"/api/v1/save/{sid}/load")
    assert loaded.status_code == 200
    assert loaded.json()["game"]["current_position"] == 1
    assert get_game(sid).current_position == 1

    deleted = test_client.delete(f"/api/v1/save/{sid}").json()
    assert deleted["has_saved_game"] is False
    assert deleted["message"] == "Saved game deleted."


def test_status_without_save(test_client):
    body = test_client.get(f"/api/v1/save/{uuid.uuid4()}").json()
    assert body["has_saved_game"] is False


def test_load_without_save_is_404(test_client):
    assert test_client.post(f"/api/v1/save/{uuid.uuid4()}/load").status_code == 404


def test_finished_game_cannot_be_saved(test_client, game_state):
    register_game(game_state)
    game_state.game_status = "won"
    assert test_client.post(f"/api/v1/save/{game_state.session_id}").status_code == 409


def test_save_for_unknown_game_is_404(test_client):
    assert test_client.post(f"/api/v1/save/{uuid.uuid4()}").status_code == 404


def test_load_from_other_version_is_409(test_client, game_state, monkeypatch):
    register_game(game_state)
    test_client.post(f"/api/v1/save/{game_state.session_id}")
    monkeypatch.setattr(save_store, "version", "9.9")

    response = test_client.post(f"/api/v1/save/{game_state.session_id}/load")

    assert response.status_code == 409
    assert "different game version" in response.json()["detail"]
