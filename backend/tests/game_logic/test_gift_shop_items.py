# backend/tests/game_logic/test_gift_shop_items.py
from unittest.mock import patch

from app.game_logic.inventory import add_item_to_inventory, coin_count, has_item
from app.game_logic.item_handlers import handle_item_use


def test_tshirt_is_worn_and_removed(game_state):
    shirt = add_item_to_inventory(game_state, "wumpus_tshirt")

    handle_item_use(game_state, "wumpus_tshirt")
    assert shirt.equipped is True
    assert shirt.name == "Wumpus Cave T-shirt (Worn)"

    handle_item_use(game_state, "wumpus_tshirt")
    assert shirt.equipped is False


def test_tshirt_cannot_go_over_the_cloak(game_state):
    add_item_to_inventory(game_state, "invisibility_cloak").equipped = True
    shirt = add_item_to_inventory(game_state, "wumpus_tshirt")

    result = handle_item_use(game_state, "wumpus_tshirt")

    assert shirt.equipped is False
    assert "Remove the cloak first" in result.message


def test_mug_chokes_the_sand_creature(game_state):
    flags = game_state.special(1)
    flags.has_sand_creature = True
    flags.sand_creature_active = True
    add_item_to_inventory(game_state, "souvenir_mug")

    result = handle_item_use(game_state, "souvenir_mug")

    assert result.consumed is True
    assert flags.sand_creature_defeated is True


def test_mug_on_the_pedestal_is_a_fatal_insult(game_state):
    game_state.current_position = 32
    add_item_to_inventory(game_state, "souvenir_mug")
    handle_item_use(game_state, "souvenir_mug")
    assert game_state.death_cause == "stupidity"


def test_drinking_plain_cave_water_is_fatal(game_state):
    game_state.rooms[1].has_water = True
    add_item_to_inventory(game_state, "souvenir_mug")
    handle_item_use(game_state, "souvenir_mug")
    assert game_state.death_cause == "dysentery"


@patch("app.game_logic.gift_shop_items.random.random", return_value=0.99)
def test_nixie_water_brightens_torch(mock_random, game_state):
    game_state.rooms[1].has_water = True
    game_state.special(1).has_water_spirit = True
    game_state.torch_level = 60
    add_item_to_inventory(game_state, "souvenir_mug")

    result = handle_item_use(game_state, "souvenir_mug")

    assert game_state.torch_level == 80
    assert result.consumed is False
    assert has_item(game_state, "souvenir_mug")


@patch("app.game_logic.gift_shop_items.random.random", return_value=0.5)
def test_empty_canvas_bag_hides_a_coin_once(mock_random, game_state):
    add_item_to_inventory(game_state, "canvas_bag")

    first = handle_item_use(game_state, "canvas_bag")
    second = handle_item_use(game_state, "canvas_bag")

    assert "hidden pocket" in first.message
    assert second.message == "The bag is empty. It's waiting for treasures."
    assert coin_count(game_state) == 1


@patch("app.game_logic.gift_shop_items.random.random", return_value=0.5)
def test_canvas_bag_protects_treasures(mock_random, game_state):
    game_state.collected_treasures.append("ruby")
    bag = add_item_to_inventory(game_state, "canvas_bag")

    handle_item_use(game_state, "canvas_bag")

    assert game_state.treasures_protected is True
    assert bag.in_use is True


@patch("app.game_logic.gift_shop_items.random.random", return_value=0.01)
def test_canvas_bag_can_tear(mock_random, game_state):
    game_state.collected_treasures.append("ruby")
    add_item_to_inventory(game_state, "canvas_bag")

    result = handle_item_use(game_state, "canvas_bag")

    assert result.consumed is True
    assert not has_item(game_state, "canvas_bag")
    assert game_state.treasures_protected is False


def test_plush_scares_off_night_crawlers(game_state):
    game_state.night_crawler_warning = True
    game_state.turns_in_room = 5
    add_item_to_inventory(game_state, "druika_plush")

    result = handle_item_use(game_state, "druika_plush")

    assert result.consumed is True
    assert game_state.night_crawler_warning is False
    assert game_state.turns_in_room == 0


@patch("app.game_logic.gift_shop_items.random.choice", side_effect=lambda seq: seq[0])
def test_plush_lures_a_nearby_druika_away(mock_choice, game_state):
    game_state.current_position = 9
    add_item_to_inventory(game_state, "druika_plush")

    result = handle_item_use(game_state, "druika_plush")

    assert result.consumed is True
    assert game_state.positions.wumpus == 1


def test_plush_just_squeaks(game_state):
    add_item_to_inventory(game_state, "druika_plush")
    result = handle_item_use(game_state, "druika_plush")
    assert result.message == "You squeeze the plush Druika. It squeaks."
    assert has_item(game_state, "druika_plush")
