# backend/app/game_logic/room_items.py
import logging

from app.data.items import ITEM_TYPES
from app.schemas.game import GameState

from .inventory import add_item_to_inventory, coin_count, has_item, is_wearing, remove_item
from .outcomes import kill_player

logger = logging.getLogger(__name__)


def collect_interactive_item(state: GameState) -> str:
    """Picks up the item lying in the current room, springing any trap or curse attached to it."""
    room = state.room()
    item_id = room.interactive_item if room else None
    if not item_id:
        state.message = "There is nothing here you can take."
        return state.message

    template = ITEM_TYPES.get(item_id)
    if template is None:
        logger.warning(f"Session {state.session_id}: room {state.current_position} holds unknown item '{item_id}'.")
        state.message = "Whatever was here crumbles as you reach for it."
        room.interactive_item = None
        return state.message

    if item_id == "shiny_trinkets":
        kill_player(
            state,
            "trinket_trap",
            "You reach for the shiniest bauble. The floor gives way beneath you: the trinkets were bait, and this is the trap.\nGame over!",
        )
        return state.message

    if (item_id == "utility_knife" and has_item(state, "sulfur_crystal")) or (
        item_id == "sulfur_crystal" and has_item(state, "utility_knife")
    ):
        kill_player(
            state,
            "sulfur_explosion",
            "The dagger's bat-shaped hilt scrapes against the sulfur crystal. A spark, a flash, and a very loud noise.\nGame over!",
        )
        return state.message

    if item_id == "tarnished_bracelet" and is_wearing(state, "invisibility_cloak"):
        kill_player(
            state,
            "cursed_items",
            "As you slip on the bracelet, the cloak tightens around you like a fist. Two curses, one adventurer.\nGame over!",
        )
        return state.message

    room.interactive_item = None
    room.collected_items.append(item_id)
    if room.text_after_collection:
        room.text = room.text_after_collection

    if item_id == "fools_gold":
        add_item_to_inventory(state, item_id)
        lost = coin_count(state)
        if lost:
            remove_item(state, "gold_coins")
            state.message = (
                f"You scoop up the gleaming coins. As they touch your purse, all {lost} of your real coins turn to painted "
                "stone along with them. Cursed!"
            )
        else:
            state.message = "You scoop up the gleaming coins. The 'gold' rubs off on your fingers. Painted stones. Cursed, too, by the feel of them."
        logger.info(f"Session {state.session_id}: picked up fool's gold (lost {lost} coins).")
        return state.message

    add_item_to_inventory(state, item_id)
    logger.info(f"Session {state.session_id}: took '{item_id}' from room {state.current_position}.")
    state.message = f"You take the {template.name}. {template.description}"
    return state.message
