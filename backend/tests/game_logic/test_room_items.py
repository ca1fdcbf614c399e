# backend/tests/game_logic/test_room_items.py
from app.game_logic.inventory import add_gold_coins, add_item_to_inventory, coin_count, has_item
from app.game_logic.room_items import collect_interactive_item


def place(state, item_id, room=1):
    state.rooms[room].interactive_item = item_id


def test_nothing_to_take(game_state):
    assert collect_interactive_item(game_state) == "There is nothing here you can take."


def test_take_item(game_state):
    place(game_state, "cave_salt")
    game_state.rooms[1].text_after_collection = "A bare chamber."

    message = collect_interactive_item(game_state)

    assert message.startswith("You take the Cave Salt Crystal.")
    assert has_item(game_state, "cave_salt")
    assert game_state.rooms[1].interactive_item is None
    assert game_state.rooms[1].collected_items == ["cave_salt"]
    assert game_state.rooms[1].text == "A bare chamber."


def test_unknown_item_crumbles(game_state):
    place(game_state, "mystery_widget")
    assert collect_interactive_item(game_state) == "Whatever was here crumbles as you reach for it."
    assert game_state.rooms[1].interactive_item is None


def test_shiny_trinkets_are_a_trap(game_state):
    place(game_state, "shiny_trinkets")
    collect_interactive_item(game_state)
    assert game_state.death_cause == "trinket_trap"


def test_knife_and_sulfur_explode(game_state):
    add_item_to_inventory(game_state, "sulfur_crystal")
    place(game_state, "utility_knife")
    collect_interactive_item(game_state)
    assert game_state.death_cause == "sulfur_explosion"


def test_sulfur_and_knife_explode_the_other_way_round(game_state):
    add_item_to_inventory(game_state, "utility_knife")
    place(game_state, "sulfur_crystal")
    collect_interactive_item(game_state)
    assert game_state.death_cause == "sulfur_explosion"


def test_bracelet_and_cloak_curse(game_state):
    add_item_to_inventory(game_state, "invisibility_cloak").equipped = True
    place(game_state, "tarnished_bracelet")
    collect_interactive_item(game_state)
    assert game_state.death_cause == "cursed_items"


def test_bracelet_alone_is_harmless(game_state):
    place(game_state, "tarnished_bracelet")
    collect_interactive_item(game_state)
    assert game_state.game_status == "playing"
    assert has_item(game_state, "tarnished_bracelet")


def test_fools_gold_takes_real_coins(game_state):
    add_gold_coins(game_state, 12)
    place(game_state, "fools_gold")

    message = collect_interactive_item(game_state)

    assert coin_count(game_state) == 0
    assert has_item(game_state, "fools_gold")
    assert "all 12 of your real coins" in message
