# backend/tests/game_logic/test_inventory.py
from app.game_logic.inventory import (
    add_gold_coins,
    add_item_to_inventory,
    coin_count,
    find_item,
    inspect_gold_coins,
    spend_gold_coins,
    update_canvas_bag_name,
)
from app.schemas.game import Treasure


def test_add_item_sets_catalogue_values(game_state):
    lantern = add_item_to_inventory(game_state, "lantern")
    sulfur = add_item_to_inventory(game_state, "sulfur_crystal")
    compass = add_item_to_inventory(game_state, "golden_compass")

    assert lantern.fuel == 10
    assert lantern.name == "Old Lantern (10 charges)"
    assert sulfur.moves_remaining == 10
    assert sulfur.name == "Sulfur Crystal (10 moves left)"
    assert compass.name == "Golden Compass (3 uses left)"


def test_add_item_does_not_duplicate(game_state):
    add_item_to_inventory(game_state, "rusty_key")
    add_item_to_inventory(game_state, "rusty_key")
    assert len(game_state.inventory) == 1
    assert len({item.id for item in game_state.inventory}) == len(game_state.inventory)


def test_torch_oil_stacks(game_state):
    add_item_to_inventory(game_state, "torch_oil")
    oil = add_item_to_inventory(game_state, "torch_oil")
    assert oil.quantity == 2
    assert oil.name == "Torch Oil Flask (2)"
    assert len(game_state.inventory) == 1


def test_coins_stack_by_value(game_state):
    add_item_to_inventory(game_state, "gold_coins")
    add_item_to_inventory(game_state, "single_gold_coin")
    coins = find_item(game_state, "gold_coins")
    assert coin_count(game_state) == 11
    assert coins.name == "Ancient Wyrm Coins (11)"


def test_add_unknown_item_is_ignored(game_state):
    assert add_item_to_inventory(game_state, "no_such_thing") is None
    assert game_state.inventory == []


def test_spend_gold_coins(game_state):
    add_gold_coins(game_state, 3)
    assert spend_gold_coins(game_state, 5) is False
    assert coin_count(game_state) == 3
    assert spend_gold_coins(game_state, 3) is True
    assert find_item(game_state, "gold_coins") is None


def test_inspect_gold_coins(game_state):
    assert "Not a single coin" in inspect_gold_coins(game_state)
    add_gold_coins(game_state, 1)
    assert inspect_gold_coins(game_state).startswith("You count 1 ancient wyrm coin.")


def test_canvas_bag_name_tracks_treasures(game_state):
    game_state.treasure_pieces = [
        Treasure(id="ruby", name="Ancient Ruby", description="", room=7, clue=""),
        Treasure(id="amulet", name="Crystal Amulet", description="", room=8, clue=""),
    ]
    add_item_to_inventory(game_state, "canvas_bag")
    bag = find_item(game_state, "canvas_bag")
    assert bag.name == "Adventure Canvas Bag"

    game_state.collected_treasures.append("ruby")
    update_canvas_bag_name(game_state)
    assert bag.name == "Adventure Canvas Bag (1/2 treasures)"

    game_state.collected_treasures.append("amulet")
    update_canvas_bag_name(game_state)
    assert bag.name == "Adventure Canvas Bag (Filled)"
