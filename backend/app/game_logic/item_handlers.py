# backend/app/game_logic/item_handlers.py
"""
Item-use dispatcher.

Each handler takes the game state and the inventory item being used, writes
the outcome narrative to state.message, and returns True when the item is
used up and should leave the inventory.
"""
import logging
import random
from typing import Callable, Dict, NamedTuple

from app.data.rooms import WIZARD_SANCTUM_FREED_TEXT
from app.schemas.game import GameState
from app.schemas.item import InventoryItem

from . import gift_shop_items, map_fragment
from .inventory import add_gold_coins, add_item_to_inventory, find_item, has_active_lantern, is_wearing, remove_item
from .movement import move_player, move_wumpus_randomly, reset_linger_state
from .navigation import HIDDEN_CHAMBER, WIZARD_SANCTUM, adjacent_rooms, connect_rooms, find_shortest_path
from .outcomes import kill_player
from .room_events import check_position, generate_perceptions

logger = logging.getLogger(__name__)

ItemHandler = Callable[[GameState, InventoryItem], bool]

FLOATING_SPELL_MOVES = 5
COMPASS_MALFUNCTION_CHANCE = 0.1
REPELLENT_BACKFIRE_CHANCE = 0.1
REPELLENT_BURST_IN_CHANCE = 0.2


class ItemUseResult(NamedTuple):
    message: str
    consumed: bool


def use_rusty_key(state: GameState, item: InventoryItem) -> bool:
    flags = state.special()
    if not flags.has_hidden_door:
        state.message = "The key doesn't seem to fit anywhere in this room."
        return False

    flags.door_opened = True
    connect_rooms(state, state.current_position, HIDDEN_CHAMBER)
    logger.info(f"Session {state.session_id}: hidden door opened in room {state.current_position}.")
    state.message = (
        f"You fit the rusty key into the keyhole hidden among {flags.door_feature}. With a grinding groan, a section of "
        f"the wall swings inward, revealing a passage to room {HIDDEN_CHAMBER}. The key stays stuck in the lock."
    )
    return True


def use_wizard_journal(state: GameState, item: InventoryItem) -> bool:
    flags = state.special()
    if flags.has_water_spirit and flags.water_spirit_active and flags.nixie_has_appeared:
        flags.water_spirit_active = False
        flags.water_spirit_gone = True
        flags.nixie_has_journal = True
        flags.toll_paid = True
        add_gold_coins(state, 1)
        logger.info(f"Session {state.session_id}: traded the wizard's journal to the nixie.")
        state.message = (
            "The nixie snatches the journal and flips through it, cackling at the poker complaints. \"He never did "
            "figure out my tell!\" She tosses you a coin for your trouble and vanishes into the pool for good."
        )
        return True

    state.message = (
        "You open the journal. The pages flutter angrily: 'PRIVATE! Who taught you manners?' The journal snaps "
        "shut and crumbles into dust in your hands."
    )
    return True


def use_loose_rocks(state: GameState, item: InventoryItem) -> bool:
    room = state.current_position
    room_state = state.room()
    flags = state.special()

    if room == WIZARD_SANCTUM:
        sanctum = state.special(WIZARD_SANCTUM)
        if sanctum.pedestal_has_rock:
            state.message = "The pedestal already holds a rock. The wizard is free; there is nothing more to do here."
            return False
        sanctum.pedestal_has_rock = True
        sanctum.wizard_freed = True
        state.wizard_freed = True
        state.room(WIZARD_SANCTUM).text = WIZARD_SANCTUM_FREED_TEXT
        add_item_to_inventory(state, "wyrmglass")
        logger.info(f"Session {state.session_id}: the wizard has been freed.")
        state.message = (
            "You place the rock in the pedestal hollow. It fits perfectly. Light explodes through the sanctum and a "
            "voice laughs with relief: \"Free! Free at last! Take the wyrmglass, adventurer. Look through it at the "
            "exit and you'll find the way home.\" A polished glassy sphere drops into your hands."
        )
        return True

    if flags.has_sand_creature:
        if flags.sand_creature_active:
            flags.sand_creature_active = False
            flags.sand_creature_defeated = True
            logger.info(f"Session {state.session_id}: sand creature defeated with a rock.")
            state.message = (
                "You hurl the rock into the centre of the disturbance. The sand bucks, something screeches, and the "
                "ground goes still. The sand creature is gone."
            )
        else:
            state.message = "The rock sinks into the sand and dissolves like sugar in tea."
        return True

    if flags.has_water_spirit and not flags.water_spirit_gone and not flags.nixie_killed:
        if flags.nixie_has_appeared:
            flags.nixie_killed = True
            flags.has_water_spirit = False
            flags.water_spirit_active = False
            flags.toll_paid = True
            logger.info(f"Session {state.session_id}: the nixie was killed with a rock.")
            state.message = (
                "The rock hits the nixie square on the forehead. She dissolves into the pool with a hiss, and the "
                "water goes flat and still. You feel strangely guilty."
            )
            return True
        kill_player(
            state,
            "nixie_rage",
            "Your rock splashes into the pool. A furious nixie erupts from the water and drags you under for disturbing her bath.\nGame over!",
        )
        return True

    if room_state and room_state.has_water:
        state.message = "The rock hits the water and fizzes violently, hissing like a fire doused in oil, until nothing is left."
        return True
    if room in (state.positions.pit1, state.positions.pit2) or any(
        adjacent in (state.positions.pit1, state.positions.pit2) for adjacent in adjacent_rooms(state)
    ):
        state.message = "You toss the rock into the darkness. A long time later you hear a faint plunk."
        return True
    if room_state and room_state.special == "echo":
        state.message = "The rock clatters across the floor. The echo comes back a beat late, and slightly mocking."
        return True
    if room_state and room_state.mood in ("dark", "eerie", "ominous"):
        state.message = "The rock rolls away into the shadows and is gone."
        return True

    state.message = "The rock crumbles in your hand, dissolving into chalky dust."
    return True


def use_crystal_orb(state: GameState, item: InventoryItem) -> bool:
    flags = state.special()
    if state.current_position == WIZARD_SANCTUM:
        entrances = [room_id for room_id, f in state.special_rooms.items() if f.has_teleport]
        choices = [room_id for room_id in entrances if room_id != state.last_teleport_room] or entrances
        if not choices:
            state.message = "The orb glows faintly, but nothing happens."
            return False
        destination = random.choice(choices)
        _teleport(state, destination)
        state.message = f"The orb flares and the sanctum dissolves around you.\n\n{state.message}"
        return False

    if flags.has_teleport:
        state.last_teleport_room = state.current_position
        _teleport(state, WIZARD_SANCTUM)
        if not state.is_over():
            state.message = f"You set the orb in the glowing hollow. Light swallows you whole.\n\n{state.message}"
        return False

    state.message = "The orb glows faintly in your hands. Nothing else happens, here at least."
    return False


def _teleport(state: GameState, destination: int):
    logger.info(f"Session {state.session_id}: teleported from {state.current_position} to {destination}.")
    move_player(state, destination)
    reset_linger_state(state)
    check_position(state, destination)
    if not state.is_over():
        state.perceptions = generate_perceptions(state)


def use_spellbook(state: GameState, item: InventoryItem) -> bool:
    if state.current_position == WIZARD_SANCTUM or state.wizard_room_visited:
        state.floating_active = True
        state.floating_moves_left = FLOATING_SPELL_MOVES
        state.active_spell = "floating"
        state.message = (
            "You read the one spell you saw the wizard's notes refer to. The book turns to ash, and your feet lift "
            f"gently off the ground. You will float for the next {FLOATING_SPELL_MOVES} moves."
        )
        return True

    lantern = find_item(state, "lantern")
    if lantern and lantern.fuel:
        lantern.fuel = lantern.fuel // 2
        lantern.name = f"Old Lantern ({lantern.fuel} charges)"
    state.message = (
        "You try to read the spellbook, but the symbols squirm away from your eyes. The spell backfires with a "
        "pop and you smell burning lamp oil."
    )
    return False


def use_golden_compass(state: GameState, item: InventoryItem) -> bool:
    if not state.has_map:
        state.message = "The compass needle spins lazily. It seems to need something to point at. Maybe a map?"
        return False

    remaining = [t for t in state.treasure_pieces if t.id not in state.collected_treasures]
    if not remaining:
        state.message = "The needle droops. There are no treasures left to find."
        return False

    item.uses = (item.uses or 0) - 1
    if random.random() < COMPASS_MALFUNCTION_CHANCE:
        danger = random.choice(state.positions.danger_rooms())
        text = f"The needle swings wildly and settles firmly on room {danger}. Something about it feels wrong."
    else:
        best = None
        for treasure in remaining:
            path = find_shortest_path(state.current_position, treasure.room, state.room_connections)
            if path and (best is None or path.distance < best[1].distance):
                best = (treasure, path)
        if best is None:
            text = "The needle trembles but can't find a path from here."
        elif best[1].distance == 0:
            text = f"The needle points straight down. The {best[0].name} is right here!"
        else:
            text = f"The needle points toward room {best[1].next_room}. A treasure lies {best[1].distance} rooms away."

    if item.uses <= 0:
        state.message = f"{text}\n\nThe compass needle snaps off. It won't work again."
        return True
    item.name = f"Golden Compass ({item.uses} uses left)"
    state.message = text
    return False


def use_sulfur_crystal(state: GameState, item: InventoryItem) -> bool:
    state.message = "You squeeze the crystal and it crumbles into foul-smelling yellow dust. Your eyes water."
    return True


def use_cave_salt(state: GameState, item: InventoryItem) -> bool:
    state.night_crawler_protection_turns = item.duration or 5
    state.night_crawler_warning = False
    state.message = "You crush the salt crystal and sprinkle it around you in a glittering ring. Nothing creepy will come near for a while."
    return True


def use_invisibility_cloak(state: GameState, item: InventoryItem) -> bool:
    item.equipped = not item.equipped
    if item.equipped:
        item.name = "Tattered Winter Cloak (Worn)"
        state.message = "You wrap the tattered cloak around your shoulders. It tingles, and your hands look oddly faint."
    else:
        item.name = "Tattered Winter Cloak"
        state.message = "You take the cloak off and fold it into your pack."
    return False


def use_torch_oil(state: GameState, item: InventoryItem) -> bool:
    state.torch_level = 100
    item.quantity = (item.quantity or 1) - 1
    state.message = "You carefully pour the oil onto your torch and the flame brightens considerably."
    if item.quantity <= 0:
        return True
    item.name = f"Torch Oil Flask ({item.quantity})"
    return False


def use_wyrmglass(state: GameState, item: InventoryItem) -> bool:
    if state.current_position != state.positions.exit:
        state.message = "You peer through the wyrmglass. The world looks slightly distorted, but nothing else changes."
        return False

    flags = state.special(state.positions.exit)
    if flags.ladder_extended:
        state.message = "The ladder remains fully extended, glowing faintly. Type 'climb' to escape."
        return False
    if has_active_lantern(state):
        kill_player(
            state,
            "magical_catastrophe",
            "The wyrmglass catches the lantern's glyph-light and the two magics tear at each other. The explosion is spectacular.\nGame over!",
        )
        return True

    flags.ladder_extended = True
    logger.info(f"Session {state.session_id}: exit ladder extended.")
    state.message = "You hold the wyrmglass up to the shaft. With a rattle, the old ladder extends all the way to the floor. Type 'climb' to escape!"
    return False


def use_druika_repellent(state: GameState, item: InventoryItem) -> bool:
    state.throwing_repellent = True
    state.message = "Where do you want to throw the Wumpus Repellent? Select a room, or enter 0 to put it away."
    return False


def throw_repellent(state: GameState, target: int) -> str:
    """Second half of using the repellent: the player picked a room."""
    if target == 0:
        state.throwing_repellent = False
        logger.debug(f"Session {state.session_id}: repellent throw cancelled.")
        return "You think better of it and tuck the vial of repellent back into your pack."
    if target not in adjacent_rooms(state):
        return f"You can't throw that far. Pick a connected room: {', '.join(map(str, adjacent_rooms(state)))}."

    state.throwing_repellent = False
    remove_item(state, "druika_repellent")
    wumpus = state.positions.wumpus
    logger.info(f"Session {state.session_id}: repellent thrown into room {target} (Druika in {wumpus}).")

    if target == wumpus:
        if random.random() < REPELLENT_BACKFIRE_CHANCE:
            kill_player(state, "wumpus", "The vial shatters right on the Druika's nose. Enraged, it charges straight through the passage at you.\nGame over!")
            return state.message
        safe = [
            room for room in adjacent_rooms(state, wumpus)
            if room not in (state.current_position, state.positions.pit1, state.positions.pit2, state.positions.bat)
        ]
        if safe:
            state.positions.wumpus = random.choice(safe)
        else:
            move_wumpus_randomly(state)
        state.message = "The vial shatters and a reek of the ancients fills the room. You hear a roar of disgust as the Druika flees deeper into the cave."
        return state.message

    if wumpus in adjacent_rooms(state, target):
        if random.random() < REPELLENT_BURST_IN_CHANCE:
            if is_wearing(state, "invisibility_cloak"):
                move_wumpus_randomly(state)
                state.message = "The Druika bursts into your room, sniffing furiously, looks straight through your cloak, and storms off elsewhere."
                return state.message
            kill_player(state, "wumpus", "The stench drives the Druika out of hiding, and straight into your room.\nGame over!")
            return state.message
        move_wumpus_randomly(state)
        state.message = "The vial shatters. Somewhere nearby, something huge gags and lumbers away."
        return state.message

    state.message = "The vial shatters in the empty room. The smell is appalling, but it seems to have no effect on anything."
    return state.message


def use_lantern(state: GameState, item: InventoryItem) -> bool:
    if item.is_active:
        if state.torch_level <= 0:
            kill_player(state, "lantern_darkness", "You turn off your lantern. With your torch long dead, the darkness is total, and something in it moves.\nGame over!")
            return False
        item.is_active = False
        item.fuel = max(0, (item.fuel or 0) - 1)
        item.name = f"Old Lantern ({item.fuel} charges)"
        state.message = "You turn the lantern off. The glyphs on its side fade."
        return False

    if not item.fuel:
        state.message = "The lantern is out of charges. It won't light."
        return False
    item.is_active = True
    state.message = "You turn the lantern on. The glyphs on its side glow and the room reveals details you never noticed."
    return False


ITEM_HANDLERS: Dict[str, ItemHandler] = {
    "rusty_key": use_rusty_key,
    "wizard_journal": use_wizard_journal,
    "loose_rocks": use_loose_rocks,
    "crystal_orb": use_crystal_orb,
    "spellbook": use_spellbook,
    "golden_compass": use_golden_compass,
    "sulfur_crystal": use_sulfur_crystal,
    "cave_salt": use_cave_salt,
    "invisibility_cloak": use_invisibility_cloak,
    "torch_oil": use_torch_oil,
    "wyrmglass": use_wyrmglass,
    "druika_repellent": use_druika_repellent,
    "lantern": use_lantern,
    "old_map": map_fragment.use_map_fragment,
    "wumpus_tshirt": gift_shop_items.use_wumpus_tshirt,
    "souvenir_mug": gift_shop_items.use_souvenir_mug,
    "canvas_bag": gift_shop_items.use_canvas_bag,
    "druika_plush": gift_shop_items.use_druika_plush,
}


def handle_item_use(state: GameState, item_id: str) -> ItemUseResult:
    item = find_item(state, item_id)
    if item is None:
        state.message = "You don't have that."
        return ItemUseResult(state.message, False)

    handler = ITEM_HANDLERS.get(item.original_id) if item.can_use else None
    if handler is None:
        state.message = "You examine the item, but aren't sure how to use it here."
        return ItemUseResult(state.message, False)

    logger.debug(f"Session {state.session_id}: using '{item.original_id}' in room {state.current_position}.")
    consumed = handler(state, item)
    if consumed and item in state.inventory:
        state.inventory.remove(item)
    return ItemUseResult(state.message, consumed)
