# backend/app/game_logic/gift_shop_items.py
# Handlers for the souvenirs sold in the gift shop.
import logging
import random

from app.schemas.game import GameState
from app.schemas.item import InventoryItem

from .inventory import add_gold_coins, is_wearing
from .navigation import CAVE_ROOM_COUNT, WIZARD_SANCTUM, adjacent_rooms, find_shortest_path
from .outcomes import kill_player

logger = logging.getLogger(__name__)

MUG_CRACK_CHANCE = 0.5
MUG_CLINK_CHANCE = 0.1
BAG_TEAR_CHANCE = 0.05
HIDDEN_COIN_CHANCE = 0.95
NIXIE_WATER_TORCH_BONUS = 20


def use_wumpus_tshirt(state: GameState, item: InventoryItem) -> bool:
    if item.equipped:
        item.equipped = False
        item.name = "Wumpus Cave T-shirt"
        state.message = "You pull off the t-shirt and stuff it in your pack. The cave seems slightly less embarrassed for you."
        return False
    if is_wearing(state, "invisibility_cloak"):
        state.message = "You can't put on the T-shirt while wearing the cloak. Remove the cloak first."
        return False
    item.equipped = True
    item.name = "Wumpus Cave T-shirt (Worn)"
    state.message = "You pull on the garish t-shirt. Somewhere, something with a keen sense of smell takes an interest in you."
    return False


def use_souvenir_mug(state: GameState, item: InventoryItem) -> bool:
    flags = state.special()
    room_state = state.room()

    if flags.has_sand_creature and flags.sand_creature_active:
        flags.sand_creature_active = False
        flags.sand_creature_defeated = True
        logger.info(f"Session {state.session_id}: sand creature defeated with the souvenir mug.")
        state.message = (
            "You hurl the mug onto the sand. A maw opens, swallows it whole, and chokes on the 'DON'T WAKE THE "
            "WUMPUS' slogan. The sand goes still for good."
        )
        return True

    if state.current_position == WIZARD_SANCTUM and not state.wizard_freed:
        kill_player(
            state,
            "stupidity",
            "You set the mug on the pedestal. The wizard's voice goes very quiet. 'A MUG? You put a MUG in my pedestal?' The sanctum detonates.\nGame over!",
        )
        return True

    if room_state and room_state.has_water:
        if flags.has_water_spirit or flags.water_spirit_gone or flags.nixie_killed:
            state.torch_level = min(100, state.torch_level + NIXIE_WATER_TORCH_BONUS)
            text = "You scoop up a mugful of the nixie's crystal-clear water and drink. You feel refreshed, and your torch burns brighter."
        else:
            kill_player(state, "dysentery", "You drink a mugful of cave water. It tastes of rock, then of regret.\nGame over!")
            return True
        if random.random() < MUG_CRACK_CHANCE:
            state.message = f"{text}\n\nThe mug cracks down the middle. You leave it behind."
            return True
        state.message = text
        return False

    if random.random() < MUG_CLINK_CHANCE:
        path = find_shortest_path(state.positions.wumpus, state.current_position, state.room_connections)
        if path and path.next_room and path.next_room != state.current_position:
            state.positions.wumpus = path.next_room
            logger.debug(f"Session {state.session_id}: mug clink drew the Druika to room {path.next_room}.")
        state.message = "The mug clinks loudly against your belt buckle. The sound echoes a long way. Something answers."
        return False

    state.message = "You admire the mug. 'DON'T WAKE THE WUMPUS'. Good advice, probably."
    return False


def use_canvas_bag(state: GameState, item: InventoryItem) -> bool:
    if state.collected_treasures:
        if random.random() < BAG_TEAR_CHANCE:
            state.treasures_protected = False
            state.message = "You tug the bag's straps tight and it tears along a seam. Your treasures tumble safely into your pockets, but the bag is ruined."
            return True
        item.in_use = True
        state.treasures_protected = True
        item.name = "Adventure Canvas Bag (Filled)"
        state.message = "You cinch the bag shut over your treasures. They'll be safe in there."
        return False

    if not item.coin_found and random.random() < HIDDEN_COIN_CHANCE:
        item.coin_found = True
        add_gold_coins(state, 1)
        state.message = "You turn the empty bag inside out and a coin drops out of a hidden pocket. Lucky!"
        return False

    state.message = "The bag is empty. It's waiting for treasures."
    return False


def use_druika_plush(state: GameState, item: InventoryItem) -> bool:
    if state.night_crawler_warning and state.night_crawler_protection_turns == 0:
        state.night_crawler_warning = False
        state.turns_in_room = 0
        state.message = "You squeeze the plush Druika and it lets out a lifelike roar. The skittering in the walls stops dead and retreats."
        return True

    if state.positions.wumpus in adjacent_rooms(state):
        near = set(adjacent_rooms(state)) | {state.current_position}
        positions = state.positions
        candidates = [
            r for r in range(1, CAVE_ROOM_COUNT + 1)
            if r not in near and r not in (positions.pit1, positions.pit2, positions.bat, positions.wumpus)
        ]
        if candidates:
            positions.wumpus = random.choice(candidates)
        logger.info(f"Session {state.session_id}: plush mating call lured the Druika to room {positions.wumpus}.")
        state.message = "You squeeze the plush and it lets out a surprisingly convincing mating call. Heavy footsteps hurry away in search of romance."
        return True

    state.message = "You squeeze the plush Druika. It squeaks."
    return False
