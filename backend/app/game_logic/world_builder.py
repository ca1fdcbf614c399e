# backend/app/game_logic/world_builder.py
import logging
import random
from typing import Dict, List, Set

from app.data.items import MAP_PURPOSES, TREASURE_TYPES
from app.data.rooms import (
    DOOR_FEATURES,
    HIDDEN_CHAMBER_TEXT,
    SANCTUM_CONTENTS,
    SECRET_ROOM_CONTENTS,
    SHIFTING_ROOM_FALLBACKS,
    WIZARD_SANCTUM_TEXT,
    get_all_room_descriptions,
    get_room_descriptions_by_special,
)
from app.schemas.game import GameState, Positions, SpecialContent, Treasure
from app.schemas.room import RoomState

from .navigation import CAVE_ROOM_COUNT, HIDDEN_CHAMBER, WIZARD_SANCTUM, adjacent_rooms
from .room_events import generate_perceptions

logger = logging.getLogger(__name__)

CREATURE_SPECIALS = ("sand_creature", "water_spirit", "fungi_creature")
PLACED_ITEMS = ["rusty_key", "crystal_orb", "old_map", "gold_coins", "reality_stabilizer", "spellbook"]

HIDDEN_DOOR_HINT = " Among {feature} you notice the outline of a door with a large, rusted keyhole."
TELEPORT_HINT = " A shallow circular hollow in the floor glows faintly whenever you come near, as if something round belongs in it."
SAND_HINT = " Looking closer, you notice a subtle circular disturbance in the middle of the sand."
TORCH_OIL_HINT = " A leather-wrapped flask of torch oil lies forgotten against the wall."
CLOAK_HINT = " A tattered cloak hangs from a jagged rock, stiff with frost and old bite marks."


def generate_positions() -> Positions:
    wumpus, pit1, pit2, bat, exit_room = random.sample(range(1, CAVE_ROOM_COUNT + 1), 5)
    logger.debug(f"Hazards placed: wumpus={wumpus}, pits={pit1},{pit2}, bat={bat}, exit={exit_room}")
    return Positions(wumpus=wumpus, pit1=pit1, pit2=pit2, bat=bat, exit=exit_room)


def generate_room_connections() -> Dict[int, List[int]]:
    """
    Every cave room gets three passages to rooms within five steps of it (wrapping
    around the ring), then every passage is made two-way.
    Rooms 31 and 32 start unconnected.
    """
    offsets = [o for o in range(-5, 6) if o != 0]
    connections: Dict[int, Set[int]] = {room: set() for room in range(1, CAVE_ROOM_COUNT + 1)}
    for room in range(1, CAVE_ROOM_COUNT + 1):
        picked: Set[int] = set()
        while len(picked) < 3:
            target = ((room - 1 + random.choice(offsets)) % CAVE_ROOM_COUNT) + 1
            picked.add(target)
        connections[room] |= picked

    for room in range(1, CAVE_ROOM_COUNT + 1):
        for target in list(connections[room]):
            connections[target].add(room)

    result = {room: sorted(targets) for room, targets in connections.items()}
    result[HIDDEN_CHAMBER] = []
    result[WIZARD_SANCTUM] = []
    return result


def _safe_rooms(positions: Positions, exclude=()) -> List[int]:
    blocked = set(positions.danger_rooms()) | {positions.exit} | set(exclude)
    return [room for room in range(1, CAVE_ROOM_COUNT + 1) if room not in blocked]


def create_room_states(positions: Positions) -> Dict[int, RoomState]:
    """
    Deals room descriptions onto rooms 1..30.
    The gift description goes to the gift shop room; the three creature rooms always
    appear, in rooms free of hazards. Sets positions.gift_shop.
    """
    descriptions = get_all_room_descriptions()
    gift = get_room_descriptions_by_special("gift")[0]
    creatures = [d for d in descriptions if d.special in CREATURE_SPECIALS]
    others = [d for d in descriptions if d.special != "gift" and d.special not in CREATURE_SPECIALS]
    random.shuffle(others)

    candidates = _safe_rooms(positions)
    random.shuffle(candidates)
    positions.gift_shop = candidates[0]

    rooms: Dict[int, RoomState] = {positions.gift_shop: RoomState(**gift.model_dump())}
    for room_id, description in zip(candidates[1:1 + len(creatures)], creatures):
        rooms[room_id] = RoomState(**description.model_dump())

    remaining = [room for room in range(1, CAVE_ROOM_COUNT + 1) if room not in rooms]
    for room_id in remaining:
        if not others:
            others = [d for d in get_all_room_descriptions() if d.special is None]
            random.shuffle(others)
        rooms[room_id] = RoomState(**others.pop().model_dump())

    rooms[HIDDEN_CHAMBER] = RoomState(text=HIDDEN_CHAMBER_TEXT, mood="ancient", special="hidden_chamber")
    rooms[WIZARD_SANCTUM] = RoomState(text=WIZARD_SANCTUM_TEXT, mood="magical", special="wizard_sanctum")
    return rooms


def initialize_treasure_hunt(state: GameState):
    """Picks the map room and four treasure rooms among the safe rooms, none of them the shop."""
    candidates = _safe_rooms(state.positions, exclude=[state.positions.gift_shop])
    random.shuffle(candidates)
    state.treasure_map_room = candidates[0]

    clue_lines = []
    for room_id, treasure_type in zip(candidates[1:], TREASURE_TYPES):
        room = state.rooms[room_id]
        treasure = Treasure(room=room_id, **treasure_type)
        treasure.clue = room.treasure_clues.get(treasure.id, treasure.clue)
        state.treasure_pieces.append(treasure)
        room.has_treasure = True
        room.treasure_id = treasure.id
        room.treasure_clue = treasure.clue
        clue_lines.append(f"- {treasure.name}: {treasure.clue}")

    state.map_clue = "The map marks four treasures hidden in the cave:\n" + "\n".join(clue_lines)
    logger.debug(
        f"Treasure map in room {state.treasure_map_room}; treasures in "
        f"{[t.room for t in state.treasure_pieces]}"
    )


def _occupied_rooms(state: GameState) -> Set[int]:
    occupied = {state.positions.gift_shop, state.treasure_map_room}
    occupied |= {t.room for t in state.treasure_pieces}
    occupied |= {room_id for room_id, flags in state.special_rooms.items() if flags.has_hidden_door or flags.has_teleport or flags.has_item}
    return occupied


def initialize_special_rooms(state: GameState):
    """Hidden door, teleport entrances, creatures, and the contents of rooms 31 and 32."""
    candidates = [r for r in _safe_rooms(state.positions) if r not in _occupied_rooms(state)]
    random.shuffle(candidates)

    door_room = candidates.pop()
    feature = random.choice(DOOR_FEATURES)
    door_flags = state.special(door_room)
    door_flags.has_hidden_door = True
    door_flags.door_feature = feature
    door_flags.secret_room = HIDDEN_CHAMBER
    state.rooms[door_room].text += HIDDEN_DOOR_HINT.format(feature=feature)

    for _ in range(random.randint(1, 2)):
        teleport_room = candidates.pop()
        flags = state.special(teleport_room)
        flags.has_teleport = True
        flags.teleport_room = WIZARD_SANCTUM
        state.rooms[teleport_room].text += TELEPORT_HINT

    chamber = state.special(HIDDEN_CHAMBER)
    chamber.is_special_room = True
    chamber.connected_from = door_room
    chamber.special_content = SpecialContent(**random.choice(SECRET_ROOM_CONTENTS))
    state.rooms[HIDDEN_CHAMBER].text += f" On a dusty pedestal lies something: {chamber.special_content.description}"

    sanctum = state.special(WIZARD_SANCTUM)
    sanctum.is_special_room = True
    sanctum.is_teleport_room = True
    sanctum.special_content = SpecialContent(**random.choice(SANCTUM_CONTENTS))

    for room_id in range(1, CAVE_ROOM_COUNT + 1):
        special = state.rooms[room_id].special
        if special == "sand_creature":
            flags = state.special(room_id)
            flags.has_sand_creature = True
            flags.sand_creature_active = True
            state.rooms[room_id].text += SAND_HINT
        elif special == "water_spirit":
            flags = state.special(room_id)
            flags.has_water_spirit = True
            flags.water_spirit_active = True
        elif special == "fungi_creature":
            flags = state.special(room_id)
            flags.has_fungi_creature = True
            flags.fungi_creature_active = True

    logger.debug(f"Hidden door in room {door_room} ({feature}); secret chamber holds '{chamber.special_content.id}'.")


def place_items_in_world(state: GameState):
    """Places the key items, loose interactive items and the shifting room."""
    candidates = [r for r in _safe_rooms(state.positions) if r not in _occupied_rooms(state)]
    random.shuffle(candidates)

    for item_id in PLACED_ITEMS:
        room_id = candidates.pop()
        flags = state.special(room_id)
        flags.has_item = True
        flags.item_id = item_id
        if item_id == "old_map":
            flags.map_purpose = random.choice(MAP_PURPOSES)
        logger.debug(f"Placed '{item_id}' in room {room_id}.")

    free_rooms = [r for r in candidates if not state.rooms[r].interactive_item]
    for hint, item_id in ((TORCH_OIL_HINT, "torch_oil"), (TORCH_OIL_HINT, "torch_oil"), (CLOAK_HINT, "invisibility_cloak")):
        if not free_rooms:
            break
        room_id = free_rooms.pop()
        state.rooms[room_id].interactive_item = item_id
        state.rooms[room_id].text += hint
        candidates.remove(room_id)

    shifting_candidates = [r for r in candidates if state.rooms[r].special is None] or candidates
    if shifting_candidates:
        room_id = random.choice(shifting_candidates)
        room = state.rooms[room_id]
        room.is_shifting_room = True
        state.shifting_room_id = room_id
        state.shifting_descriptions = [room.model_copy(deep=True)] + [
            d.model_copy(deep=True) for d in random.sample(SHIFTING_ROOM_FALLBACKS, 3)
        ]
        state.shifting_index = 0
        logger.debug(f"Room {room_id} is the shifting room.")


def select_start_room(state: GameState) -> int:
    positions = state.positions
    dangers = set(positions.danger_rooms())
    creature_rooms = {r for r in range(1, CAVE_ROOM_COUNT + 1) if state.rooms[r].special in CREATURE_SPECIALS}

    def near(room_id: int, targets: Set[int]) -> bool:
        return any(adjacent in targets for adjacent in adjacent_rooms(state, room_id))

    rooms = range(1, CAVE_ROOM_COUNT + 1)
    ideal = [
        r for r in rooms
        if r not in dangers
        and r != positions.exit
        and r != positions.gift_shop
        and r != state.shifting_room_id
        and r not in creature_rooms
        and not near(r, dangers | {positions.exit})
    ]
    if ideal:
        return random.choice(ideal)

    fallback = [r for r in rooms if r not in dangers and r != positions.exit and not near(r, dangers)]
    if fallback:
        return random.choice(fallback)
    return random.choice([r for r in rooms if r not in dangers and r != positions.exit])


def new_game() -> GameState:
    positions = generate_positions()
    rooms = create_room_states(positions)
    state = GameState(positions=positions, room_connections=generate_room_connections(), rooms=rooms)

    initialize_treasure_hunt(state)
    initialize_special_rooms(state)
    place_items_in_world(state)

    start = select_start_room(state)
    state.current_position = start
    state.position_history = [start]
    state.visited_rooms = [start]
    state.message = (
        f"You stumble into a cave room, lets call it room {start}, as you seek shelter from the storm. "
        "The entrance collapses behind you. Somewhere in these tunnels lives the Druika, and somewhere "
        "there must be another way out."
    )
    state.perceptions = generate_perceptions(state, start)
    logger.info(f"New game {state.session_id} created; player starts in room {start}.")
    return state

