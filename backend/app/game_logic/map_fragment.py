# backend/app/game_logic/map_fragment.py
"""
The faded parchment found in the cave is one of several different magical
map fragments. Which one is decided when the world is built and stored on
the inventory item as its purpose.
"""
import logging
from typing import Callable, Dict, Optional

from app.schemas.game import GameState
from app.schemas.item import InventoryItem

from .navigation import adjacent_rooms, find_shortest_path, is_danger_room
from .outcomes import kill_player

logger = logging.getLogger(__name__)

DEFAULT_USES = 3
SINGLE_USE_PURPOSES = ("danger_sense",)
CRUMBLE_TEXT = "\n\nThe map fragment crumbles to dust as you use it one last time..."


def _nearest_room(state: GameState, rooms) -> Optional[tuple]:
    best = None
    for room in rooms:
        path = find_shortest_path(state.current_position, room, state.room_connections)
        if path and (best is None or path.distance < best[1].distance):
            best = (room, path)
    return best


def _danger_sense(state: GameState) -> str:
    positions = state.positions
    dangers = []
    for room in adjacent_rooms(state):
        if not is_danger_room(state, room):
            continue
        if room == positions.wumpus:
            dangers.append(f"room {room} (the Druika)")
        elif room in (positions.pit1, positions.pit2):
            dangers.append(f"room {room} (a bottomless pit)")
        else:
            dangers.append(f"room {room} (giant bats)")
    if not dangers:
        return "The parchment stays blank and cool. None of the neighbouring rooms hold anything deadly."
    return "Red ink bleeds across the parchment, marking danger in " + ", ".join(dangers) + "."


def _secret_door(state: GameState) -> str:
    for room_id, flags in state.special_rooms.items():
        if flags.has_hidden_door:
            if room_id == state.current_position:
                return f"The parchment shows a door in THIS room! Look for {flags.door_feature}."
            return f"Faint lines sketch a hidden door in room {room_id}, hidden among {flags.door_feature}."
    return "The parchment shows a door, but it has been smudged beyond reading."


def _druika_tracker(state: GameState) -> str:
    path = find_shortest_path(state.current_position, state.positions.wumpus, state.room_connections)
    if path is None or path.next_room is None:
        return "The fragment pulses red so violently it burns your fingers."
    return (
        "The fragment pulses with an ominous red glow. "
        f"The Ancient Druika is {path.distance} rooms away. "
        f"The glow intensifies when pointed toward room {path.next_room}."
    )


def _flask_finder(state: GameState) -> str:
    oil_rooms = [room_id for room_id, room in state.rooms.items() if room.interactive_item == "torch_oil"]
    nearest = _nearest_room(state, oil_rooms)
    if nearest is None:
        return "A little drawing of an oil flask appears, then fades. There is no oil left to find."
    room, path = nearest
    if path.distance == 0:
        return "A little drawing of an oil flask appears, circled twice. There's oil right here!"
    return f"A little drawing of an oil flask appears {path.distance} rooms away, toward room {path.next_room}."


def _treasure_enhancer(state: GameState) -> str:
    if not state.has_map:
        return "The fragment looks like it belongs to a bigger map. Without the main treasure map it shows nothing."
    remaining = [t.room for t in state.treasure_pieces if t.id not in state.collected_treasures]
    nearest = _nearest_room(state, remaining)
    if nearest is None:
        return "The fragment fits against your treasure map, but every mark on it is already crossed off."
    room, path = nearest
    if path.distance == 0:
        return "The fragment glows against your map. A treasure is here, in this very room!"
    return f"The fragment glows against your map, tracing a path toward room {path.next_room}. A treasure lies {path.distance} rooms away."


def _room_revealer(state: GameState) -> str:
    positions = state.positions
    labels = []
    for room in adjacent_rooms(state):
        flags = state.special_rooms.get(room)
        room_state = state.room(room)
        if flags and flags.is_special_room:
            label = "secret"
        elif room == positions.wumpus:
            label = "Druika"
        elif room in (positions.pit1, positions.pit2):
            label = "pit"
        elif room == positions.bat:
            label = "bats"
        elif room == positions.exit:
            label = "exit"
        elif room_state and room_state.has_treasure and room_state.treasure_id not in state.collected_treasures:
            label = "treasure"
        elif room_state and room_state.interactive_item == "torch_oil":
            label = "oil"
        elif room == state.treasure_map_room and not state.has_map:
            label = "map"
        elif flags and flags.has_item:
            label = "item"
        elif room_state and room_state.interactive_item:
            label = "item"
        elif flags and flags.has_teleport:
            label = "teleport"
        elif flags and flags.has_hidden_door:
            label = "hidden door"
        else:
            label = "safe"
        labels.append(f"Room {room}: {label}")
    return "Tiny labels appear beside each passage:\n" + "\n".join(labels)


def _gold_finder(state: GameState) -> str:
    for room_id, flags in state.special_rooms.items():
        if flags.has_item and flags.item_id == "gold_coins":
            path = find_shortest_path(state.current_position, room_id, state.room_connections)
            if path and path.distance == 0:
                return "A golden glow spreads across the parchment. The coins are here!"
            if path:
                return f"A golden glow spreads across the parchment, pointing toward room {path.next_room}. Gold lies {path.distance} rooms away."
    return "The parchment glints gold for a moment, then fades. Someone beat you to it."


PURPOSE_HANDLERS: Dict[str, Callable[[GameState], str]] = {
    "danger_sense": _danger_sense,
    "secret_door": _secret_door,
    "druika_tracker": _druika_tracker,
    "flask_finder": _flask_finder,
    "treasure_enhancer": _treasure_enhancer,
    "room_revealer": _room_revealer,
    "gold_finder": _gold_finder,
}


def use_map_fragment(state: GameState, item: InventoryItem) -> bool:
    purpose = item.purpose or "danger_sense"
    logger.debug(f"Session {state.session_id}: reading map fragment with purpose '{purpose}'.")

    if purpose == "disintegrate":
        state.message = "You unfold the parchment and it immediately crumbles to dust in your fingers."
        return True
    if purpose == "cursed":
        kill_player(state, "curse", "You read the faded runes aloud. The parchment bursts into black flame, and so do you.\nGame over!")
        return True

    if item.uses is None:
        item.uses = 1 if purpose in SINGLE_USE_PURPOSES else DEFAULT_USES
    item.uses -= 1

    text = PURPOSE_HANDLERS[purpose](state)
    if item.uses <= 0:
        state.message = text + CRUMBLE_TEXT
        return True
    state.message = text
    return False
