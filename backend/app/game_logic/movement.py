# backend/app/game_logic/movement.py
import logging
import random
from typing import List, Optional

from app.schemas.game import GameState

from .inventory import find_item, has_active_lantern, has_amulet, has_item, is_wearing, remove_item
from .navigation import (
    CAVE_ROOM_COUNT,
    HIDDEN_CHAMBER,
    WIZARD_SANCTUM,
    adjacent_rooms,
    find_shortest_path,
    random_safe_room,
)
from .outcomes import kill_player, win_game
from .room_events import check_position, check_temperature_effects, generate_perceptions
from .shop import process_shop_purchase

logger = logging.getLogger(__name__)

TORCH_BURN_PER_MOVE = 5
BAT_MOVE_INTERVAL = 4
WUMPUS_WANDER_CHANCE = 0.1
WUMPUS_TSHIRT_WANDER_CHANCE = 0.2
WUMPUS_CHASE_CHANCE = 0.25
TSHIRT_BAT_REPEL_CHANCE = 0.8
WANDER_GROWL = "You hear a low growling sound as something moves in the darkness..."
CHASE_GROWL = "You hear a particularly angry growl as something large moves through the cave system. It seems to be getting closer..."

# Rooms where night crawlers never come.
CRAWLER_FREE_SPECIALS = ("gift", "hidden_chamber", "wizard_sanctum", "water_spirit")


def handle_guess(state: GameState, raw_target) -> str:
    """
    The player picked a room number. Depending on the mode this is a shop
    choice, a repellent throw, or a move. Returns the narrative.
    """
    if state.shop_mode:
        state.message = process_shop_purchase(state, str(raw_target))
        return state.message

    try:
        target = int(str(raw_target).strip())
    except ValueError:
        state.message = f"'{raw_target}' is not a room number."
        return state.message

    if state.throwing_repellent:
        from .item_handlers import throw_repellent

        state.message = throw_repellent(state, target)
        return state.message

    if not 1 <= target <= WIZARD_SANCTUM or target not in adjacent_rooms(state):
        state.message = f"You can't get to room {target} from here. Connected rooms: {', '.join(map(str, adjacent_rooms(state)))}."
        return state.message

    current = state.current_position
    notes: List[str] = []

    # --- Creatures guarding the way out ---
    blocked = check_sand_creature(state, target, notes)
    if state.is_over():
        return state.message
    if blocked:
        return state.message
    if check_water_spirit_toll(state, target):
        return state.message

    # --- Wizard trickery ---
    target = check_wizard_trickery(state, current, target, notes)

    # --- Torch ---
    state.torch_level = max(0, state.torch_level - TORCH_BURN_PER_MOVE)
    if state.torch_level == 0 and not has_active_lantern(state):
        kill_player(state, "torch_darkness", "Your torch sputters and dies. In the total darkness you stumble, fall, and never get up.\nGame over!")
        return state.message

    move_player(state, target)

    # --- Bats ---
    if state.current_position == state.positions.bat:
        if is_wearing(state, "wumpus_tshirt") and random.random() < TSHIRT_BAT_REPEL_CHANCE:
            notes.append("Giant bats swoop down at you, take one look at your t-shirt, and flee in embarrassment.")
        else:
            carried_to = random.choice([r for r in range(1, CAVE_ROOM_COUNT + 1) if r != state.positions.bat])
            notes.append(f"Giant bats grab you and carry you off through the darkness! They drop you in room {carried_to}.")
            logger.info(f"Session {state.session_id}: bats carried the player from {state.current_position} to {carried_to}.")
            move_player(state, carried_to)
            relocate_bats(state)
            if random.random() < WUMPUS_WANDER_CHANCE:
                move_wumpus_randomly(state)
                notes.append("The commotion wakes something big. You hear heavy footsteps moving somewhere in the cave.")

    # --- The cave moves on ---
    state.move_counter += 1
    growl = move_wumpus(state)
    if growl:
        notes.append(growl)
    if state.move_counter % BAT_MOVE_INTERVAL == 0:
        relocate_bats(state)
    notes.extend(tick_inventory(state))
    cycle_shifting_room(state)
    if state.goblin_cooldown > 0:
        state.goblin_cooldown -= 1
    if state.night_crawler_protection_turns > 0:
        state.night_crawler_protection_turns -= 1

    reset_linger_state(state)
    check_position(state, state.current_position)
    if not state.is_over():
        if notes:
            state.message = "\n\n".join(notes + [state.message])
        state.perceptions = generate_perceptions(state)
    return state.message


def move_player(state: GameState, target: int):
    state.previous_position = state.current_position
    state.current_position = target
    state.position_history.append(target)
    if target not in state.visited_rooms:
        state.visited_rooms.append(target)


def reset_linger_state(state: GameState):
    state.turns_in_room = 0
    state.fungi_warning = False
    state.crystal_warning = False
    state.night_crawler_warning = False
    state.wizard_room_warning = False
    state.temperature_warning = False
    state.sulfur_escape_pending = False


def check_sand_creature(state: GameState, target: int, notes: List[str]) -> bool:
    """Returns True if the move must not go ahead."""
    flags = state.special()
    if not flags.has_sand_creature or not flags.sand_creature_active or target == state.previous_position:
        return False

    if has_amulet(state):
        flags.sand_creature_active = False
        flags.sand_creature_defeated = True
        notes.append("Your crystal amulet flares. The sand creature shrieks, sinks deep beneath the dunes, and is gone for good.")
        return False

    sulfur = find_item(state, "sulfur_crystal")
    if sulfur:
        sulfur.moves_remaining = (sulfur.moves_remaining or 0) - 2
        notes.append("You wave the sulfur crystal over the sand. Something below recoils from the stench and lets you pass.")
        if sulfur.moves_remaining <= 0:
            remove_item(state, "sulfur_crystal")
            notes.append("The effort leaves your sulfur crystal crumbling to yellow dust.")
        else:
            sulfur.name = f"Sulfur Crystal ({sulfur.moves_remaining} moves left)"
        return False

    if has_item(state, "crystal_orb"):
        notes.append("The crystal orb pulses and the sand goes still long enough for you to cross. Beneath you, something is still waiting.")
        return False

    kill_player(state, "sand_creature", "As you step off the path across the sand, the ground erupts! A sand creature drags you under.\nGame over!")
    return True


def check_water_spirit_toll(state: GameState, target: int) -> bool:
    flags = state.special()
    if not flags.has_water_spirit or not flags.water_spirit_active or not flags.nixie_has_appeared:
        return False
    if flags.toll_paid or flags.amulet_passage or target == state.previous_position:
        return False
    if has_amulet(state):
        flags.amulet_passage = True
        return False
    state.message = "The water nixie rises up between you and the passage. \"The toll, traveller!\" She will only let you go back the way you came."
    return True


def check_wizard_trickery(state: GameState, current: int, target: int, notes: List[str]) -> int:
    """Going back and forth between two rooms annoys the trapped wizard."""
    if state.wizard_freed:
        return target

    pair = sorted([current, target])
    if state.back_and_forth_rooms == pair:
        state.back_and_forth_count += 1
    else:
        state.back_and_forth_rooms = pair
        state.back_and_forth_count = 1

    if state.back_and_forth_count == 2:
        notes.append("You hear faint, mocking laughter. \"Back and forth, back and forth... make up your mind!\"")
    elif state.back_and_forth_count >= 3:
        state.back_and_forth_rooms = []
        state.back_and_forth_count = 0
        new_target = random_safe_room(state, exclude=[current, target, state.positions.exit])
        notes.append("A mischievous voice cackles: \"Make up your mind!\" The world spins and you find yourself somewhere else entirely.")
        logger.info(f"Session {state.session_id}: wizard trick teleported the player to room {new_target}.")
        return new_target
    return target


def _blocked_for_wumpus(state: GameState) -> List[int]:
    sulfur_rooms = [room_id for room_id, room in state.rooms.items() if room.interactive_item == "sulfur_crystal"]
    positions = state.positions
    return [positions.pit1, positions.pit2, positions.bat, state.current_position] + sulfur_rooms


def move_wumpus(state: GameState) -> Optional[str]:
    """
    The Druika wanders sometimes, and with the t-shirt on it may come looking for you.
    Returns the growl the player hears when it moves, or None if it stayed put.
    """
    wearing_shirt = is_wearing(state, "wumpus_tshirt")
    chance = WUMPUS_TSHIRT_WANDER_CHANCE if wearing_shirt else WUMPUS_WANDER_CHANCE
    if random.random() >= chance:
        return None

    blocked = _blocked_for_wumpus(state)
    if wearing_shirt and random.random() < WUMPUS_CHASE_CHANCE:
        path = find_shortest_path(state.positions.wumpus, state.current_position, state.room_connections)
        if path and path.next_room and path.next_room not in blocked:
            logger.debug(f"Session {state.session_id}: Druika chases from {state.positions.wumpus} to {path.next_room}.")
            state.positions.wumpus = path.next_room
            return CHASE_GROWL

    wumpus = state.positions.wumpus
    for step in random.sample([-1, 1], 2):
        candidate = ((wumpus - 1 + step) % CAVE_ROOM_COUNT) + 1
        if candidate not in blocked:
            logger.debug(f"Session {state.session_id}: Druika wanders from {wumpus} to {candidate}.")
            state.positions.wumpus = candidate
            return WANDER_GROWL
    move_wumpus_randomly(state)
    return WANDER_GROWL if state.positions.wumpus != wumpus else None


def move_wumpus_randomly(state: GameState, exclude=()):
    blocked = set(_blocked_for_wumpus(state)) | set(exclude) | {state.positions.wumpus}
    candidates = [r for r in range(1, CAVE_ROOM_COUNT + 1) if r not in blocked]
    if candidates:
        state.positions.wumpus = random.choice(candidates)
        logger.debug(f"Session {state.session_id}: Druika relocated to {state.positions.wumpus}.")


def relocate_bats(state: GameState):
    positions = state.positions
    blocked = {positions.wumpus, positions.pit1, positions.pit2, positions.bat, positions.exit, state.current_position}
    candidates = [r for r in range(1, CAVE_ROOM_COUNT + 1) if r not in blocked]
    if candidates:
        positions.bat = random.choice(candidates)
        logger.debug(f"Session {state.session_id}: bats moved to {positions.bat}.")


def tick_inventory(state: GameState) -> List[str]:
    """Lantern fuel and the sulfur crystal wear down with every move."""
    notes = []
    lantern = find_item(state, "lantern")
    if lantern and lantern.is_active:
        lantern.fuel = max(0, (lantern.fuel or 0) - 1)
        lantern.name = f"Old Lantern ({lantern.fuel} charges)"
        if lantern.fuel == 0:
            lantern.is_active = False
            notes.append("Your lantern flickers and goes out. It's out of charges.")

    sulfur = find_item(state, "sulfur_crystal")
    if sulfur:
        sulfur.moves_remaining = (sulfur.moves_remaining or 0) - 1
        if sulfur.moves_remaining <= 0:
            remove_item(state, "sulfur_crystal")
            notes.append("Your sulfur crystal crumbles into a pile of foul yellow dust.")
        else:
            sulfur.name = f"Sulfur Crystal ({sulfur.moves_remaining} moves left)"
    return notes


def cycle_shifting_room(state: GameState):
    room_id = state.shifting_room_id
    if not room_id or state.shifting_stabilized or not state.shifting_descriptions:
        return
    if room_id == state.current_position or room_id not in state.visited_rooms:
        return
    state.shifting_index = (state.shifting_index + 1) % len(state.shifting_descriptions)
    description = state.shifting_descriptions[state.shifting_index]
    room = state.room(room_id)
    for field in ("text", "mood", "has_water", "special", "perception", "enhanced_text"):
        setattr(room, field, getattr(description, field))


def handle_linger(state: GameState) -> str:
    """
    A turn spent without leaving the room. Timed hazards advance: the sulfur
    escape window closes, fungi and crystals close in, night crawlers come out,
    and the sanctum tires of visitors.
    """
    if state.is_over():
        return state.message

    state.turns_in_room += 1
    if state.night_crawler_protection_turns > 0:
        state.night_crawler_protection_turns -= 1
    room = state.current_position
    room_state = state.room()
    flags = state.special()
    notes: List[str] = []

    if state.sulfur_escape_pending and room == state.positions.wumpus:
        kill_player(state, "wumpus", "You hesitated. The Druika shakes off the sulfur stench and lunges.\nGame over!")
        return state.message

    if flags.has_fungi_creature and flags.fungi_creature_active:
        text = _linger_fungi(state)
        if state.is_over():
            return state.message
        if text:
            notes.append(text)

    if room_state and room_state.special == "crystal":
        text = _linger_crystals(state)
        if state.is_over():
            return state.message
        if text:
            notes.append(text)

    if room == WIZARD_SANCTUM:
        text = _linger_sanctum(state)
        if state.is_over():
            return state.message
        if text:
            notes.append(text)
    elif not _crawler_free(state):
        text = _linger_night_crawlers(state)
        if state.is_over():
            return state.message
        if text:
            notes.append(text)

    temperature_text = check_temperature_effects(state)
    if state.is_over():
        return state.message
    if temperature_text:
        notes.append(temperature_text)

    state.message = "\n\n".join(notes) if notes else "Time passes. Somewhere in the darkness, water drips."
    return state.message


def _linger_fungi(state: GameState) -> Optional[str]:
    if state.turns_in_room >= 3 and state.fungi_warning:
        if state.torch_level > 80:
            return "The glowing fungi creep toward you, then shrink back from your blazing torch."
        kill_player(state, "fungi", "The fungi swarm over you in a glowing tide. Your dim torch can't hold them back.\nGame over!")
        return None
    if state.turns_in_room >= 2 and not state.fungi_warning:
        state.fungi_warning = True
        return "The fungi are pulsing faster now, and the nearest clusters have crept closer to your boots."
    return None


def _linger_crystals(state: GameState) -> Optional[str]:
    if state.turns_in_room >= 3 and state.crystal_warning:
        if has_amulet(state):
            state.crystal_warning = False
            return "Your crystal amulet hums in harmony with the crystals, and the drowsiness lifts."
        kill_player(state, "crystal_sleep", "The crystal song wraps around you like a blanket. You lie down, just for a moment...\nGame over!")
        return None
    if state.turns_in_room >= 2 and not state.crystal_warning:
        state.crystal_warning = True
        return "The crystals' song grows louder. Your eyelids feel very heavy..."
    return None


def _crawler_free(state: GameState) -> bool:
    room_state = state.room()
    if state.current_position == HIDDEN_CHAMBER or state.night_crawler_protection_turns > 0:
        return True
    return bool(room_state and room_state.special in CRAWLER_FREE_SPECIALS)


def _linger_night_crawlers(state: GameState) -> Optional[str]:
    if state.turns_in_room >= 7 and state.night_crawler_warning:
        kill_player(state, "night_crawlers", "Thousands of night crawlers pour out of the cracks and swarm over you.\nGame over!")
        return None
    if state.turns_in_room >= 4 and not state.night_crawler_warning:
        state.night_crawler_warning = True
        return "You hear a skittering in the walls. Something with a great many legs is waking up. Better keep moving."
    return None


def _linger_sanctum(state: GameState) -> Optional[str]:
    if state.turns_in_room >= 6 and state.wizard_room_warning:
        if state.wizard_freed:
            kill_player(state, "wizard_room_absorbed", "The sanctum, empty of its master, slowly absorbs you into its walls.\nGame over!")
        else:
            kill_player(state, "wizard_room_trapped", "The wizard's voice sighs. 'Finally, company.' The walls close in and you become part of the decor.\nGame over!")
        return None
    if state.turns_in_room >= 4 and not state.wizard_room_warning:
        state.wizard_room_warning = True
        return "The bookshelves seem to lean closer. The room is growing impatient with you."
    return None


def climb_ladder(state: GameState) -> str:
    at_exit = state.current_position == state.positions.exit
    if not at_exit or not has_item(state, "wyrmglass") or has_active_lantern(state):
        state.message = "There's nothing here to climb."
        return state.message

    if not state.special(state.positions.exit).ladder_extended:
        kill_player(state, "ladder_trap", "You climb the half-extended ladder. Halfway up, a rung snaps and you plunge back down the shaft.\nGame over!")
        return state.message

    missing = len(state.treasure_pieces) - len(state.collected_treasures)
    if missing:
        win_game(state, f"You climb the magically extended ladder into the daylight. You escaped, though {missing} treasures stay behind in the dark. You won!")
    else:
        win_game(state, "You climb the magically extended ladder into the daylight with every treasure in your bag. The village will sing about this. You won!")
    return state.message
