# backend/app/game_logic/room_events.py
"""
Everything that happens when the player arrives in a room.

check_position() runs the arrival rules in a fixed order and leaves the
narrative in state.message. Any rule that ends the game stops the rest.
"""
import logging
import random
from typing import List, Optional

from app.data.items import ITEM_TYPES
from app.data.messages import (
    BAT_NEARBY,
    CAVE_SILENCE_MESSAGE,
    EXIT_NEARBY,
    PIT_NEARBY,
    SPECIAL_ROOM_PERCEPTIONS,
    WUMPUS_NEARBY,
    get_random_cave_message,
    get_random_quiet_thought,
)
from app.data.rooms import HIDDEN_CHAMBER_EMPTY_TEXT
from app.schemas.game import GameState

from .inventory import (
    add_item_to_inventory,
    find_item,
    has_active_lantern,
    has_amulet,
    has_item,
    is_wearing,
    remove_item,
    update_canvas_bag_name,
)
from .navigation import CAVE_ROOM_COUNT, HIDDEN_CHAMBER, WIZARD_SANCTUM, adjacent_rooms
from .outcomes import kill_player
from .shop import check_gift_shop

logger = logging.getLogger(__name__)

CAVE_MESSAGE_CHANCE = 0.25


def check_position(state: GameState, room: Optional[int] = None):
    room = state.current_position if room is None else room
    parts: List[str] = [f"You are now in room {room}." if room <= CAVE_ROOM_COUNT else "You are in a hidden chamber."]

    def finish() -> None:
        if not state.is_over():
            state.message = "\n\n".join(part for part in parts if part)

    # --- Floating spell ---
    if state.floating_active:
        state.floating_moves_left -= 1
        if state.floating_moves_left <= 0:
            state.floating_active = False
            state.active_spell = None
            if room in (state.positions.pit1, state.positions.pit2):
                kill_player(state, "pit", "The floating spell fades right above a bottomless pit. You drop like a stone.\nGame over!")
                return
            parts.append("Your feet touch the ground again as the floating spell wears off.")
        elif state.floating_moves_left == 1:
            parts.append("You feel the floating spell weakening. It will wear off after your next move.")

    flags = state.special(room)
    if flags.has_water_spirit and flags.water_spirit_active and not flags.amulet_passage:
        flags.toll_paid = False

    # --- Pits ---
    if room in (state.positions.pit1, state.positions.pit2):
        if state.floating_active:
            parts.append("You float gently over a yawning pit. Far below, something echoes. You'd rather not find out what.")
        elif room == state.positions.pit1:
            kill_player(state, "pit1", "You tumbled into an endless chasm! \nGame over!\n Gravity always wins!")
            return
        else:
            kill_player(state, "pit2", "You fell into a bottomless pit! You fall for what feels like forever.\nGame over!")
            return

    # --- The Druika ---
    if room == state.positions.wumpus:
        if has_item(state, "sulfur_crystal"):
            state.sulfur_escape_pending = True
            parts.append(
                "The Druika rears up in front of you, then gags at the stench of your sulfur crystal. "
                "It won't hold it off for long. Get out of here, now!"
            )
            finish()
            return
        kill_player(state, "wumpus", "You walked straight into the Druika's lair. It was hungry.\nGame over!")
        return

    # --- Exit ---
    if room == state.positions.exit:
        exit_text = describe_exit(state)
        if exit_text:
            parts.append(exit_text)

    # --- Shifting room ---
    if room == state.shifting_room_id:
        shifting_text = check_shifting_room(state)
        if shifting_text:
            parts.append(shifting_text)

    # --- Secret rooms ---
    if room == HIDDEN_CHAMBER:
        parts.append(collect_secret_room_item(state))
    elif room == WIZARD_SANCTUM:
        parts.append(describe_sanctum(state))

    # --- Treasure hunt ---
    if room == state.treasure_map_room and not state.has_map:
        state.has_map = True
        parts.append(f"You found an ancient treasure map!\n\n{state.map_clue}")
        logger.info(f"Session {state.session_id}: treasure map found in room {room}.")
    treasure_text = check_treasure(state, room)
    if treasure_text:
        parts.append(treasure_text)

    # --- Placed items ---
    if flags.has_item and flags.item_id:
        parts.append(pick_up_placed_item(state, room))

    # --- Gift shop ---
    if room == state.positions.gift_shop:
        parts.append(check_gift_shop(state))

    # --- Temperature ---
    temperature_text = check_temperature_effects(state)
    if state.is_over():
        return
    if temperature_text:
        parts.append(temperature_text)

    # --- Water nixie ---
    if flags.has_water_spirit and flags.water_spirit_active:
        parts.append(check_water_spirit(state, room))

    # --- Whispers ---
    if state.wizard_freed:
        if not state.cave_silence_announced:
            state.cave_silence_announced = True
            parts.append(CAVE_SILENCE_MESSAGE)
    elif random.random() < CAVE_MESSAGE_CHANCE:
        parts.append(f"A whisper echoes through the cave: \"{get_random_cave_message()}\"")

    finish()


def describe_exit(state: GameState) -> Optional[str]:
    if not has_item(state, "wyrmglass") or has_active_lantern(state):
        return None

    missing = len(state.treasure_pieces) - len(state.collected_treasures)
    flags = state.special(state.positions.exit)
    lines = ["Through the wyrmglass you see it: a narrow shaft rising toward daylight. This is the way out!"]
    if flags.ladder_extended:
        lines.append("The magically extended ladder reaches all the way to the top. Type 'climb' to escape.")
    else:
        lines.append("An old ladder hangs half-extended from the shaft. It doesn't look like it reaches the bottom safely.")
    if missing > 0:
        noun = "treasure" if missing == 1 else "treasures"
        lines.append(f"You are still missing {missing} {noun}.")
    else:
        lines.append("You have every treasure. Time to go home!")
    return " ".join(lines)


def check_shifting_room(state: GameState) -> Optional[str]:
    if state.shifting_stabilized:
        return None
    if has_item(state, "reality_stabilizer"):
        remove_item(state, "reality_stabilizer")
        state.shifting_stabilized = True
        original = state.shifting_descriptions[0] if state.shifting_descriptions else None
        if original:
            _apply_description(state, state.shifting_room_id, original)
        state.room(state.shifting_room_id).is_shifting_room = False
        add_item_to_inventory(state, "golden_compass")
        logger.info(f"Session {state.session_id}: shifting room {state.shifting_room_id} stabilized.")
        return (
            "The crystalline rock in your pack tugs toward the centre of the room and anchors itself in the floor. "
            "The walls stop moving. Where they settle, a golden compass lies on the ground, and you pick it up."
        )
    if state.shifting_room_id in state.visited_rooms[:-1]:
        return "This room doesn't look the way you remember it. Didn't it have a different shape a moment ago?"
    return None


def _apply_description(state: GameState, room_id: int, description):
    room = state.room(room_id)
    for field in ("text", "mood", "has_water", "special", "perception", "enhanced_text"):
        setattr(room, field, getattr(description, field))


def collect_secret_room_item(state: GameState) -> str:
    flags = state.special(HIDDEN_CHAMBER)
    content = flags.special_content
    if flags.item_collected or content is None:
        return "The chamber is silent. Whatever treasure it held is already in your pack."

    flags.item_collected = True
    add_item_to_inventory(state, content.id)
    state.room(HIDDEN_CHAMBER).text = HIDDEN_CHAMBER_EMPTY_TEXT
    logger.info(f"Session {state.session_id}: collected '{content.id}' from the hidden chamber.")
    return f"You found and picked up the {content.name}! {content.description}"


def describe_sanctum(state: GameState) -> str:
    state.wizard_room_visited = True
    flags = state.special(WIZARD_SANCTUM)
    content = flags.special_content
    seen = f" You notice the {content.name}. {content.description}" if content else ""
    if state.wizard_freed:
        return f"The sanctum is peaceful now.{seen}"
    return (
        "The air crackles. A voice booms: 'At last, a visitor! Free me, and the way out shall be shown to you.'"
        f"{seen} Something tells you not to linger here."
    )


def check_treasure(state: GameState, room: int) -> Optional[str]:
    room_state = state.room(room)
    if not room_state or not room_state.has_treasure or not state.has_map:
        return None
    if room_state.treasure_id in state.collected_treasures:
        return None

    treasure = next((t for t in state.treasure_pieces if t.id == room_state.treasure_id), None)
    if treasure is None:
        return None
    if not has_item(state, "canvas_bag"):
        return (
            f"You spot the {treasure.name} half-buried in the rubble, but it is too strange and fragile to stuff "
            "in your pockets. If only you had something sturdy to carry it in..."
        )

    state.collected_treasures.append(treasure.id)
    update_canvas_bag_name(state)
    remaining = len(state.treasure_pieces) - len(state.collected_treasures)
    logger.info(f"Session {state.session_id}: collected treasure '{treasure.id}' ({remaining} remaining).")
    tail = f"{remaining} treasures remain hidden in the cave." if remaining else "That's every treasure on the map! Now find the way out."
    return f"You found the {treasure.name}! {treasure.description} You tuck it into your canvas bag. {tail}"


def pick_up_placed_item(state: GameState, room: int) -> str:
    flags = state.special(room)
    item_id = flags.item_id
    flags.has_item = False
    flags.item_id = None
    add_item_to_inventory(state, item_id, purpose=flags.map_purpose if item_id == "old_map" else None)
    logger.info(f"Session {state.session_id}: picked up '{item_id}' in room {room}.")
    if item_id == "gold_coins":
        return f"You found a pouch of ancient coins! (+{ITEM_TYPES['gold_coins'].value})"
    template = ITEM_TYPES[item_id]
    return f"You found something: the {template.name}. {template.description}"


def check_water_spirit(state: GameState, room: int) -> str:
    flags = state.special(room)
    if flags.amulet_passage:
        return "The nixie bows as you pass. \"Bearer of the crystal, go freely.\""
    if has_amulet(state):
        flags.amulet_passage = True
        flags.toll_paid = True
        return "A water nixie rises from the pool, sees your crystal amulet, and bows deeply. \"Pass freely, bearer of the crystal.\""
    flags.nixie_has_appeared = True
    return (
        "A water nixie rises from the pool, her eyes glittering like wet coins. \"There's a toll, traveller. "
        "Gold, or something shiny. Otherwise you go back the way you came.\" (Type 'pay' to pay the toll.)"
    )


def generate_perceptions(state: GameState, room: Optional[int] = None) -> List[str]:
    room = state.current_position if room is None else room
    perceptions: List[str] = []
    positions = state.positions

    for adjacent in adjacent_rooms(state, room):
        if adjacent == positions.wumpus and WUMPUS_NEARBY not in perceptions:
            perceptions.append(WUMPUS_NEARBY)
        if adjacent in (positions.pit1, positions.pit2) and PIT_NEARBY not in perceptions:
            perceptions.append(PIT_NEARBY)
        if adjacent == positions.bat and BAT_NEARBY not in perceptions:
            perceptions.append(BAT_NEARBY)
        if adjacent == positions.exit and EXIT_NEARBY not in perceptions:
            perceptions.append(EXIT_NEARBY)

    room_state = state.room(room)
    if room_state:
        special_perception = SPECIAL_ROOM_PERCEPTIONS.get(room_state.special or "")
        if special_perception:
            perceptions.append(special_perception)
        if room_state.perception:
            perceptions.append(room_state.perception)

    if not perceptions:
        perceptions.append(get_random_quiet_thought())
    return perceptions


def check_temperature_effects(state: GameState) -> Optional[str]:
    """
    Warm rooms punish a worn cloak; cold rooms punish going without one.
    The first turn in the room warns, the next one kills.
    """
    room_state = state.room()
    mood = room_state.mood if room_state else None
    cloaked = is_wearing(state, "invisibility_cloak")

    if mood == "warm" and cloaked:
        if not state.temperature_warning:
            state.temperature_warning = True
            return "The heat is stifling under the heavy cloak. Sweat pours down your face. Take it off, or get out, quickly."
        kill_player(state, "heat", "You collapse from heat exhaustion, cooked inside your own cloak.\nGame over!")
        return None

    if mood == "cold" and not cloaked:
        if not state.temperature_warning:
            state.temperature_warning = True
            state.torch_level = max(0, state.torch_level - 10)
            return "The bitter cold bites through your clothes and your torch sputters. You won't last long here without something warm to wear."
        kill_player(state, "cold", "Your fingers stop working, then your legs. You curl up in the frost and never wake.\nGame over!")
        return None

    state.temperature_warning = False
    if mood == "cold" and cloaked:
        return "The cloak keeps you warm against the biting cold."
    return None


def lantern_lit_text(state: GameState) -> Optional[str]:
    lantern = find_item(state, "lantern")
    room_state = state.room()
    if lantern and lantern.is_active and room_state and room_state.enhanced_text:
        return room_state.enhanced_text
    return None
