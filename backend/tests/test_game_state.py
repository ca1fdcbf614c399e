# backend/tests/test_game_state.py
import uuid

from app.game_state import get_game, list_session_ids, register_game, remove_game


def test_list_session_ids_tracks_registered_games(game_state):
    """
    GIVEN two registered games
    WHEN one of them is removed
    THEN only the other session id is listed.
    """
    # Arrange
    other = game_state.model_copy(update={"session_id": uuid.uuid4()}, deep=True)
    register_game(game_state)
    register_game(other)
    assert set(list_session_ids()) == {game_state.session_id, other.session_id}

    # Act
    removed = remove_game(other.session_id)

    # Assert
    assert removed is True
    assert list_session_ids() == [game_state.session_id]
    assert get_game(other.session_id) is None


def test_list_session_ids_when_empty():
    assert list_session_ids() == []


def test_remove_unknown_game():
    assert remove_game(uuid.uuid4()) is False
