# backend/tests/services/test_save_service.py
import uuid

from app.game_logic.inventory import add_item_to_inventory, has_item
from app.services.save_service import SaveStore


def test_load_without_save(game_state):
    store = SaveStore(version="1.0")
    state, message = store.load_game(game_state.session_id)
    assert state is None
    assert message == "No saved game found."


def test_save_and_load_restores_a_copy(game_state):
    """
    GIVEN a saved game
    WHEN the player keeps playing and then loads
    THEN they get back the moment they saved, as a separate object.
    """
    # --- Arrange ---
    store = SaveStore(version="1.0")
    add_item_to_inventory(game_state, "lantern")
    game_state.current_position = 7
    store.save_game(game_state)

    # --- Act ---
    game_state.current_position = 8
    game_state.inventory.clear()
    loaded, message = store.load_game(game_state.session_id)

    # --- Assert ---
    assert loaded is not game_state
    assert loaded.current_position == 7
    assert has_item(loaded, "lantern")
    assert message == "Game loaded! You're back in room 7. Welcome back, adventurer!"


def test_load_clears_pending_modes(game_state):
    store = SaveStore(version="1.0")
    game_state.shop_mode = True
    game_state.throwing_repellent = True
    store.save_game(game_state)

    loaded, _ = store.load_game(game_state.session_id)

    assert loaded.shop_mode is False
    assert loaded.throwing_repellent is False


def test_saves_from_another_version_are_rejected(game_state):
    old_store = SaveStore(version="0.9")
    old_store.save_game(game_state)
    new_store = SaveStore(version="1.0")
    new_store._slots = old_store._slots

    state, message = new_store.load_game(game_state.session_id)

    assert state is None
    assert "different game version" in message


def test_status_and_delete(game_state):
    store = SaveStore(version="1.0")
    assert store.get_status(game_state.session_id).has_saved_game is False

    store.save_game(game_state)
    status = store.get_status(game_state.session_id)
    assert status.has_saved_game is True
    assert status.saved_at is not None
    assert store.has_saved_game(game_state.session_id)

    assert store.delete_saved_game(game_state.session_id) == "Saved game deleted."
    assert not store.has_saved_game(game_state.session_id)
    assert store.delete_saved_game(uuid.uuid4()) == "No saved game found."
