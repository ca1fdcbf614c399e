# backend/app/game_logic/shop.py
import logging
import random

from app.data.items import (
    GIFT_SHOP_CATALOG,
    GIFT_SHOP_ONLY_ITEMS,
    ITEM_TYPES,
    MAP_PURPOSES,
    NON_PURCHASABLE_ITEMS,
    SHOP_PURCHASE_LINES,
)
from app.data.messages import get_random_coin_dialogue
from app.schemas.game import GameState
from app.schemas.item import ShopOffer

from .inventory import add_item_to_inventory, coin_count, has_item, is_wearing, remove_item, spend_gold_coins

logger = logging.getLogger(__name__)

MAX_SHOP_OFFERS = 9
DEPARTURE_LINE = "With a flourish, the goblin gathers its wares and scurries off into the darkness, muttering about inventory."


def _start_cooldown(state: GameState):
    state.goblin_cooldown = random.randint(3, 7)
    logger.debug(f"Session {state.session_id}: shopkeeper away for {state.goblin_cooldown} moves.")


def check_gift_shop(state: GameState) -> str:
    """What the player sees on arriving in the gift shop room."""
    if state.goblin_cooldown > 0:
        return "A hand-painted sign hangs on an empty stall: \"Back in a bit - counting coins!\""
    if is_wearing(state, "invisibility_cloak"):
        return "The stall is deserted. Wrapped in your cloak, you catch a goblin peeking out from behind the counter, looking straight through you."
    if coin_count(state) > 0:
        state.coin_dialogue = get_random_coin_dialogue()
        return (
            f"A goblin in a tiny apron pops up from behind a cluttered stall. \"Throk's Cave Emporium!\" {state.coin_dialogue} "
            "(Type 'trade' to see the wares.)"
        )
    return "A goblin in a tiny apron glances at your empty pockets, sniffs, and goes back to polishing a mug."


def build_shop_offers(state: GameState):
    offers = []
    coins = coin_count(state)
    for item_id, price in GIFT_SHOP_CATALOG.items():
        if item_id in NON_PURCHASABLE_ITEMS or has_item(state, item_id):
            continue
        template = ITEM_TYPES[item_id]
        offers.append(
            ShopOffer(id=item_id, name=template.name, description=template.description, price=price, affordable=price <= coins)
        )
    offers.sort(key=lambda offer: offer.price)
    return offers[:MAX_SHOP_OFFERS]


def format_shop_display(state: GameState) -> str:
    lines = ["Welcome to Throk's Cave Emporium!", f"You have {coin_count(state)} coins.", ""]
    for number, offer in enumerate(state.shop_offers, start=1):
        mark = "✓" if offer.affordable else "✗"
        lines.append(f"{number}. {offer.name} - {offer.price} coins {mark}")
    lines.append("")
    lines.append(f"Enter the item number you want to buy (1-{len(state.shop_offers)}):")
    lines.append("(Or enter 0 to leave the shop)")
    return "\n".join(lines)


def handle_trade(state: GameState) -> str:
    if state.current_position != state.positions.gift_shop:
        return "There is nobody here to trade with."
    if state.goblin_cooldown > 0:
        return "The stall is empty. The sign still says \"Back in a bit - counting coins!\""
    if coin_count(state) == 0:
        return "The shopkeeper looks at you oddly. \"Can't exactly barter with nothing, can you?\""

    offers = build_shop_offers(state)
    if not offers:
        _start_cooldown(state)
        return "\"You've bought me out!\" the goblin says, shooing you away while it restocks."

    state.shop_offers = offers
    state.shop_mode = True
    return format_shop_display(state)


def leave_shop(state: GameState) -> str:
    state.shop_mode = False
    state.shop_offers = []
    _start_cooldown(state)
    return "\"Maybe next time!\" the shopkeeper shrugs and scurries away into the shadows."


def process_shop_purchase(state: GameState, text: str) -> str:
    """Handles the number typed while the shop list is open."""
    choice = text.strip()
    if choice == "0":
        return leave_shop(state)
    if not choice.isdigit() or not 1 <= int(choice) <= len(state.shop_offers):
        return "The shopkeeper looks confused. \"Just pick a number from the list, friend.\""

    offer = state.shop_offers[int(choice) - 1]
    coins = coin_count(state)
    if coins < offer.price:
        return f"\"That costs {offer.price} coins, but you only have {coins},\" the shopkeeper says. \"Maybe try something cheaper?\""

    spend_gold_coins(state, offer.price)
    purpose = _placed_map_purpose(state) if offer.id == "old_map" else None
    add_item_to_inventory(state, offer.id, purpose=purpose)
    if offer.id not in GIFT_SHOP_ONLY_ITEMS:
        _remove_world_copy(state, offer.id)

    state.shop_mode = False
    state.shop_offers = []
    _start_cooldown(state)
    logger.info(f"Session {state.session_id}: bought '{offer.id}' for {offer.price} coins.")
    purchase_line = SHOP_PURCHASE_LINES.get(offer.id, f"The shopkeeper hands you the {offer.name}.")
    return f"{purchase_line}\n\n{DEPARTURE_LINE}"


def _placed_map_purpose(state: GameState):
    for flags in state.special_rooms.values():
        if flags.has_item and flags.item_id == "old_map" and flags.map_purpose:
            return flags.map_purpose
    return random.choice(MAP_PURPOSES)


def _remove_world_copy(state: GameState, item_id: str):
    """A bought item no longer waits somewhere in the cave."""
    for room_id, flags in state.special_rooms.items():
        if flags.has_item and flags.item_id == item_id:
            flags.has_item = False
            flags.item_id = None
            flags.map_purpose = None
            logger.debug(f"Removed placed '{item_id}' from room {room_id} after purchase.")
    for room_id, room in state.rooms.items():
        if room.interactive_item == item_id:
            room.interactive_item = None
            logger.debug(f"Removed interactive '{item_id}' from room {room_id} after purchase.")


def handle_water_spirit_trade(state: GameState) -> str:
    flags = state.special()
    if not flags.has_water_spirit or not flags.water_spirit_active or not flags.nixie_has_appeared:
        return "There is nobody here to pay."
    if flags.toll_paid or flags.amulet_passage:
        return "The nixie waves you on. \"You've paid, traveller. Go.\""

    coins = coin_count(state)
    if coins > 0:
        spend_gold_coins(state, 1)
        flags.toll_paid = True
        logger.info(f"Session {state.session_id}: paid the nixie toll with a coin.")
        if coins == 1:
            return "You hand over your last coin. The nixie bites it, smiles, and sinks into the pool. The way is open."
        return "You flip a coin into the pool. The nixie snatches it out of the air and sinks beneath the surface. The way is open."

    if has_item(state, "golden_compass"):
        remove_item(state, "golden_compass")
        flags.toll_paid = True
        logger.info(f"Session {state.session_id}: paid the nixie toll with the golden compass.")
        return "A fair trade... The nixie turns the golden compass over in her webbed hands and sinks beneath the surface. The way is open."

    return "You have nothing valuable to offer the water sprite."
