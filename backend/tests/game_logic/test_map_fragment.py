# backend/tests/game_logic/test_map_fragment.py
import pytest

from app.game_logic.inventory import add_item_to_inventory, has_item
from app.game_logic.item_handlers import handle_item_use
from app.game_logic.map_fragment import CRUMBLE_TEXT
from app.schemas.game import Treasure


def use_map(state, purpose):
    add_item_to_inventory(state, "old_map", purpose=purpose)
    return handle_item_use(state, "old_map")


def test_danger_sense_is_single_use(game_state):
    game_state.current_position = 9

    result = use_map(game_state, "danger_sense")

    assert "room 10 (the Druika)" in result.message
    assert result.message.endswith(CRUMBLE_TEXT)
    assert result.consumed is True


def test_danger_sense_with_nothing_nearby(game_state):
    result = use_map(game_state, "danger_sense")
    assert result.message.startswith("The parchment stays blank and cool.")


def test_danger_sense_marks_bats_but_not_the_exit(game_state):
    game_state.positions.exit = 13
    game_state.current_position = 14

    result = use_map(game_state, "danger_sense")

    assert result.message == "Red ink bleeds across the parchment, marking danger in room 15 (giant bats)."


def test_druika_tracker_has_three_uses(game_state):
    add_item_to_inventory(game_state, "old_map", purpose="druika_tracker")

    first = handle_item_use(game_state, "old_map")
    assert "The Ancient Druika is 9 rooms away." in first.message
    assert "toward room 2" in first.message
    assert first.consumed is False

    handle_item_use(game_state, "old_map")
    third = handle_item_use(game_state, "old_map")
    assert third.consumed is True
    assert not has_item(game_state, "old_map")


def test_disintegrating_map(game_state):
    result = use_map(game_state, "disintegrate")
    assert result.consumed is True
    assert "crumbles to dust" in result.message


def test_cursed_map_is_fatal(game_state):
    use_map(game_state, "cursed")
    assert game_state.death_cause == "curse"


@pytest.mark.parametrize("door_room, expected", [(1, "a door in THIS room"), (4, "hidden door in room 4")])
def test_secret_door_map(game_state, door_room, expected):
    flags = game_state.special(door_room)
    flags.has_hidden_door = True
    flags.door_feature = "some dripping stalactites"

    result = use_map(game_state, "secret_door")

    assert expected in result.message


def test_flask_finder(game_state):
    game_state.rooms[3].interactive_item = "torch_oil"
    result = use_map(game_state, "flask_finder")
    assert result.message == "A little drawing of an oil flask appears 2 rooms away, toward room 2."


def test_treasure_enhancer_needs_the_main_map(game_state):
    result = use_map(game_state, "treasure_enhancer")
    assert "Without the main treasure map" in result.message


def test_treasure_enhancer_points_to_treasure(game_state):
    game_state.has_map = True
    game_state.treasure_pieces = [Treasure(id="ruby", name="Ancient Ruby", description="Red.", room=28, clue="Crimson.")]

    result = use_map(game_state, "treasure_enhancer")

    assert "toward room 30" in result.message
    assert "3 rooms away" in result.message


def test_room_revealer_labels_neighbours(game_state):
    game_state.current_position = 9
    result = use_map(game_state, "room_revealer")
    assert "Room 8: safe" in result.message
    assert "Room 10: Druika" in result.message


def test_gold_finder(game_state):
    flags = game_state.special(4)
    flags.has_item = True
    flags.item_id = "gold_coins"

    result = use_map(game_state, "gold_finder")

    assert "pointing toward room 2" in result.message
    assert "Gold lies 3 rooms away." in result.message
