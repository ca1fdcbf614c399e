# backend/tests/game_logic/test_item_handlers.py
from unittest.mock import patch

from app.game_logic.inventory import add_item_to_inventory, coin_count, find_item, has_item
from app.game_logic.item_handlers import handle_item_use, throw_repellent
from app.schemas.game import Treasure


def test_using_missing_item(game_state):
    result = handle_item_use(game_state, "rusty_key")
    assert result.message == "You don't have that."
    assert result.consumed is False


def test_using_unusable_item(game_state):
    add_item_to_inventory(game_state, "gold_coins")
    result = handle_item_use(game_state, "gold_coins")
    assert result.message == "You examine the item, but aren't sure how to use it here."
    assert has_item(game_state, "gold_coins")


def test_rusty_key_without_a_door(game_state):
    add_item_to_inventory(game_state, "rusty_key")
    result = handle_item_use(game_state, "rusty_key")
    assert result.message == "The key doesn't seem to fit anywhere in this room."
    assert has_item(game_state, "rusty_key")


def test_rusty_key_opens_hidden_door(game_state):
    """
    GIVEN a hidden door in the player's room
    WHEN the rusty key is used
    THEN a two-way passage to the hidden chamber opens and the key stays in the lock.
    """
    # --- Arrange ---
    flags = game_state.special(1)
    flags.has_hidden_door = True
    flags.door_feature = "a crooked stalactite"
    add_item_to_inventory(game_state, "rusty_key")

    # --- Act ---
    result = handle_item_use(game_state, "rusty_key")

    # --- Assert ---
    assert result.consumed is True
    assert not has_item(game_state, "rusty_key")
    assert flags.door_opened is True
    assert 31 in game_state.room_connections[1]
    assert 1 in game_state.room_connections[31]
    assert "a crooked stalactite" in result.message


def test_wizard_journal_placates_the_nixie(game_state):
    flags = game_state.special(1)
    flags.has_water_spirit = True
    flags.water_spirit_active = True
    flags.nixie_has_appeared = True
    add_item_to_inventory(game_state, "wizard_journal")

    result = handle_item_use(game_state, "wizard_journal")

    assert result.consumed is True
    assert flags.water_spirit_gone is True
    assert flags.toll_paid is True
    assert coin_count(game_state) == 1


def test_wizard_journal_crumbles_elsewhere(game_state):
    add_item_to_inventory(game_state, "wizard_journal")
    result = handle_item_use(game_state, "wizard_journal")
    assert "PRIVATE!" in result.message
    assert not has_item(game_state, "wizard_journal")


def test_rock_on_pedestal_frees_the_wizard(game_state):
    game_state.current_position = 32
    add_item_to_inventory(game_state, "loose_rocks")

    result = handle_item_use(game_state, "loose_rocks")

    assert result.consumed is True
    assert game_state.wizard_freed is True
    assert game_state.special(32).pedestal_has_rock is True
    assert has_item(game_state, "wyrmglass")


def test_rock_defeats_sand_creature(game_state):
    flags = game_state.special(1)
    flags.has_sand_creature = True
    flags.sand_creature_active = True
    add_item_to_inventory(game_state, "loose_rocks")

    handle_item_use(game_state, "loose_rocks")

    assert flags.sand_creature_active is False
    assert flags.sand_creature_defeated is True


def test_rock_in_nixie_pool_before_she_appears_is_fatal(game_state):
    flags = game_state.special(1)
    flags.has_water_spirit = True
    flags.water_spirit_active = True
    add_item_to_inventory(game_state, "loose_rocks")

    handle_item_use(game_state, "loose_rocks")

    assert game_state.death_cause == "nixie_rage"


def test_rock_kills_a_nixie_who_has_appeared(game_state):
    """
    GIVEN the nixie has risen from the pool in the player's room
    WHEN the player throws a loose rock at her
    THEN she is killed, the toll no longer applies, and the rock is used up.
    """
    # Arrange
    flags = game_state.special(1)
    flags.has_water_spirit = True
    flags.water_spirit_active = True
    flags.nixie_has_appeared = True
    add_item_to_inventory(game_state, "loose_rocks")

    # Act
    result = handle_item_use(game_state, "loose_rocks")

    # Assert
    assert result.consumed is True
    assert result.message.startswith("The rock hits the nixie square on the forehead.")
    assert flags.nixie_killed is True
    assert flags.has_water_spirit is False
    assert flags.water_spirit_active is False
    assert flags.toll_paid is True
    assert game_state.game_status == "playing"
    assert not has_item(game_state, "loose_rocks")


def test_rock_crumbles_in_ordinary_room(game_state):
    game_state.current_position = 7
    add_item_to_inventory(game_state, "loose_rocks")
    result = handle_item_use(game_state, "loose_rocks")
    assert result.message == "The rock crumbles in your hand, dissolving into chalky dust."


def test_crystal_orb_teleports_to_sanctum(game_state):
    game_state.special(1).has_teleport = True
    add_item_to_inventory(game_state, "crystal_orb")

    result = handle_item_use(game_state, "crystal_orb")

    assert game_state.current_position == 32
    assert game_state.last_teleport_room == 1
    assert result.consumed is False
    assert result.message.startswith("You set the orb in the glowing hollow.")


def test_crystal_orb_returns_from_sanctum(game_state):
    game_state.special(1).has_teleport = True
    game_state.last_teleport_room = 1
    game_state.current_position = 32
    add_item_to_inventory(game_state, "crystal_orb")

    handle_item_use(game_state, "crystal_orb")

    assert game_state.current_position == 1


def test_crystal_orb_does_nothing_elsewhere(game_state):
    add_item_to_inventory(game_state, "crystal_orb")
    result = handle_item_use(game_state, "crystal_orb")
    assert "Nothing else happens" in result.message


def test_spellbook_casts_floating_in_sanctum(game_state):
    game_state.current_position = 32
    add_item_to_inventory(game_state, "spellbook")

    result = handle_item_use(game_state, "spellbook")

    assert result.consumed is True
    assert game_state.floating_active is True
    assert game_state.floating_moves_left == 5


def test_spellbook_backfires_and_drains_lantern(game_state):
    add_item_to_inventory(game_state, "spellbook")
    lantern = add_item_to_inventory(game_state, "lantern")

    result = handle_item_use(game_state, "spellbook")

    assert result.consumed is False
    assert lantern.fuel == 5
    assert game_state.floating_active is False


def test_golden_compass_needs_the_map(game_state):
    add_item_to_inventory(game_state, "golden_compass")
    result = handle_item_use(game_state, "golden_compass")
    assert "Maybe a map?" in result.message


@patch("app.game_logic.item_handlers.random.random", return_value=0.99)
def test_golden_compass_points_to_nearest_treasure(mock_random, game_state):
    game_state.has_map = True
    game_state.treasure_pieces = [
        Treasure(id="ruby", name="Ancient Ruby", description="Red.", room=3, clue="Crimson."),
        Treasure(id="statue", name="Jade Figurine", description="Green.", room=12, clue="Watcher."),
    ]
    compass = add_item_to_inventory(game_state, "golden_compass")

    result = handle_item_use(game_state, "golden_compass")

    assert result.message == "The needle points toward room 2. A treasure lies 2 rooms away."
    assert compass.uses == 2
    assert compass.name == "Golden Compass (2 uses left)"


def give_compass_and_map(state):
    state.has_map = True
    state.treasure_pieces = [Treasure(id="ruby", name="Ancient Ruby", description="Red.", room=3, clue="Crimson.")]
    return add_item_to_inventory(state, "golden_compass")


@patch("app.game_logic.item_handlers.random.choice", side_effect=lambda rooms: rooms[-1])
@patch("app.game_logic.item_handlers.random.random", return_value=0.05)
def test_golden_compass_can_point_at_danger(mock_random, mock_choice, game_state):
    compass = give_compass_and_map(game_state)

    result = handle_item_use(game_state, "golden_compass")

    assert result.message == "The needle swings wildly and settles firmly on room 15. Something about it feels wrong."
    assert result.consumed is False
    assert compass.uses == 2


@patch("app.game_logic.item_handlers.random.random", return_value=0.99)
def test_golden_compass_snaps_on_its_last_use(mock_random, game_state):
    """
    GIVEN a compass with one use left
    WHEN the player uses it
    THEN it still points the way, then the needle snaps and the compass is gone.
    """
    # Arrange
    give_compass_and_map(game_state).uses = 1

    # Act
    result = handle_item_use(game_state, "golden_compass")

    # Assert
    assert result.message.startswith("The needle points toward room 2. A treasure lies 2 rooms away.")
    assert result.message.endswith("The compass needle snaps off. It won't work again.")
    assert result.consumed is True
    assert not has_item(game_state, "golden_compass")


def test_cave_salt_grants_protection(game_state):
    add_item_to_inventory(game_state, "cave_salt")
    game_state.night_crawler_warning = True

    result = handle_item_use(game_state, "cave_salt")

    assert result.consumed is True
    assert game_state.night_crawler_protection_turns == 5
    assert game_state.night_crawler_warning is False


def test_cloak_toggles(game_state):
    cloak = add_item_to_inventory(game_state, "invisibility_cloak")
    handle_item_use(game_state, "invisibility_cloak")
    assert cloak.equipped is True
    assert cloak.name == "Tattered Winter Cloak (Worn)"
    handle_item_use(game_state, "invisibility_cloak")
    assert cloak.equipped is False


def test_torch_oil_refills_torch(game_state):
    game_state.torch_level = 30
    add_item_to_inventory(game_state, "torch_oil")
    add_item_to_inventory(game_state, "torch_oil")

    handle_item_use(game_state, "torch_oil")
    assert game_state.torch_level == 100
    assert find_item(game_state, "torch_oil").name == "Torch Oil Flask (1)"

    handle_item_use(game_state, "torch_oil")
    assert not has_item(game_state, "torch_oil")


def test_wyrmglass_extends_the_ladder(game_state):
    game_state.current_position = 5
    add_item_to_inventory(game_state, "wyrmglass")

    result = handle_item_use(game_state, "wyrmglass")

    assert game_state.special(5).ladder_extended is True
    assert "Type 'climb' to escape!" in result.message
    assert has_item(game_state, "wyrmglass")


def test_wyrmglass_and_lantern_do_not_mix(game_state):
    game_state.current_position = 5
    add_item_to_inventory(game_state, "wyrmglass")
    add_item_to_inventory(game_state, "lantern").is_active = True

    handle_item_use(game_state, "wyrmglass")

    assert game_state.death_cause == "magical_catastrophe"


def test_repellent_asks_for_a_target(game_state):
    add_item_to_inventory(game_state, "druika_repellent")
    result = handle_item_use(game_state, "druika_repellent")
    assert game_state.throwing_repellent is True
    assert result.message == "Where do you want to throw the Wumpus Repellent? Select a room, or enter 0 to put it away."


def test_repellent_thrown_too_far(game_state):
    add_item_to_inventory(game_state, "druika_repellent")
    game_state.throwing_repellent = True
    message = throw_repellent(game_state, 7)
    assert message.startswith("You can't throw that far.")
    assert game_state.throwing_repellent is True


def test_zero_puts_the_repellent_away(game_state):
    """
    GIVEN a player who has readied the repellent
    WHEN they pick room 0
    THEN throw mode ends and the vial stays in the pack.
    """
    # Arrange
    add_item_to_inventory(game_state, "druika_repellent")
    handle_item_use(game_state, "druika_repellent")

    # Act
    message = throw_repellent(game_state, 0)

    # Assert
    assert game_state.throwing_repellent is False
    assert has_item(game_state, "druika_repellent")
    assert message.startswith("You think better of it")
    assert game_state.positions.wumpus == 10


@patch("app.game_logic.item_handlers.random.random", return_value=0.5)
def test_repellent_drives_the_druika_away(mock_random, game_state):
    game_state.current_position = 9
    add_item_to_inventory(game_state, "druika_repellent")
    game_state.throwing_repellent = True

    message = throw_repellent(game_state, 10)

    assert game_state.positions.wumpus == 11
    assert "flees deeper into the cave" in message
    assert not has_item(game_state, "druika_repellent")


@patch("app.game_logic.item_handlers.random.random", return_value=0.1)
def test_repellent_next_door_can_flush_the_druika_out(mock_random, game_state):
    game_state.current_position = 8
    add_item_to_inventory(game_state, "druika_repellent")
    game_state.throwing_repellent = True

    throw_repellent(game_state, 9)

    assert game_state.death_cause == "wumpus"


def test_lantern_on_and_off(game_state):
    lantern = add_item_to_inventory(game_state, "lantern")

    handle_item_use(game_state, "lantern")
    assert lantern.is_active is True

    handle_item_use(game_state, "lantern")
    assert lantern.is_active is False
    assert lantern.fuel == 9
    assert lantern.name == "Old Lantern (9 charges)"


def test_empty_lantern_will_not_light(game_state):
    lantern = add_item_to_inventory(game_state, "lantern")
    lantern.fuel = 0
    result = handle_item_use(game_state, "lantern")
    assert result.message == "The lantern is out of charges. It won't light."
    assert lantern.is_active is False


def test_turning_off_lantern_with_dead_torch_is_fatal(game_state):
    """
    GIVEN a lit lantern and a torch that has burned out
    WHEN the player switches the lantern off
    THEN the darkness kills them.
    """
    # Arrange
    add_item_to_inventory(game_state, "lantern").is_active = True
    game_state.torch_level = 0

    # Act
    result = handle_item_use(game_state, "lantern")

    # Assert
    assert game_state.game_status == "lost"
    assert game_state.death_cause == "lantern_darkness"
    assert result.message.startswith("You turn off your lantern.")
    assert result.consumed is False
