# backend/app/game_logic/inventory.py
import logging
from typing import Optional

from app.data.items import ITEM_TYPES
from app.data.messages import COIN_LORE
from app.schemas.game import GameState
from app.schemas.item import InventoryItem

logger = logging.getLogger(__name__)


def find_item(state: GameState, item_id: str) -> Optional[InventoryItem]:
    """Finds an inventory item by its id or by its catalogue id."""
    for item in state.inventory:
        if item.id == item_id or item.original_id == item_id:
            return item
    return None


def has_item(state: GameState, item_id: str) -> bool:
    return find_item(state, item_id) is not None


def is_wearing(state: GameState, item_id: str) -> bool:
    item = find_item(state, item_id)
    return bool(item and item.equipped)


def has_active_lantern(state: GameState) -> bool:
    lantern = find_item(state, "lantern")
    return bool(lantern and lantern.is_active)


def has_amulet(state: GameState) -> bool:
    return "amulet" in state.collected_treasures


def remove_item(state: GameState, item_id: str) -> Optional[InventoryItem]:
    item = find_item(state, item_id)
    if item:
        state.inventory.remove(item)
        logger.debug(f"Session {state.session_id}: removed '{item.original_id}' from inventory.")
    return item


def coin_count(state: GameState) -> int:
    coins = find_item(state, "gold_coins")
    return (coins.value or 0) if coins else 0


def add_gold_coins(state: GameState, amount: int) -> InventoryItem:
    coins = find_item(state, "gold_coins")
    if coins:
        coins.value = (coins.value or 0) + amount
    else:
        template = ITEM_TYPES["gold_coins"]
        coins = InventoryItem(
            id="gold_coins",
            original_id="gold_coins",
            name=template.name,
            description=template.description,
            can_use=False,
            value=amount,
        )
        state.inventory.append(coins)
    coins.name = f"Ancient Wyrm Coins ({coins.value})"
    return coins


def spend_gold_coins(state: GameState, amount: int) -> bool:
    """Takes coins from the purse. Returns False, and changes nothing, if there are not enough."""
    coins = find_item(state, "gold_coins")
    if not coins or (coins.value or 0) < amount:
        return False
    coins.value = (coins.value or 0) - amount
    if coins.value <= 0:
        state.inventory.remove(coins)
    else:
        coins.name = f"Ancient Wyrm Coins ({coins.value})"
    return True


def inspect_gold_coins(state: GameState) -> str:
    count = coin_count(state)
    if count == 0:
        return "You turn out your pockets. Not a single coin."
    noun = "coin" if count == 1 else "coins"
    return f"You count {count} ancient wyrm {noun}. {COIN_LORE}"


def update_canvas_bag_name(state: GameState):
    bag = find_item(state, "canvas_bag")
    if not bag:
        return
    total = len(state.treasure_pieces)
    collected = len(state.collected_treasures)
    if total and collected >= total:
        bag.name = "Adventure Canvas Bag (Filled)"
    elif collected:
        bag.name = f"Adventure Canvas Bag ({collected}/{total} treasures)"
    else:
        bag.name = ITEM_TYPES["canvas_bag"].name


def add_item_to_inventory(state: GameState, item_id: str, purpose: Optional[str] = None) -> Optional[InventoryItem]:
    """
    Adds a catalogue item to the inventory.
    Coins and torch oil stack; any other item the player already holds is not duplicated.
    """
    template = ITEM_TYPES.get(item_id)
    if not template:
        logger.warning(f"Session {state.session_id}: tried to add unknown item '{item_id}'.")
        return None

    if item_id in ("gold_coins", "single_gold_coin"):
        return add_gold_coins(state, template.value or 1)

    existing = find_item(state, item_id)
    if item_id == "torch_oil" and existing:
        existing.quantity = (existing.quantity or 1) + 1
        existing.name = f"Torch Oil Flask ({existing.quantity})"
        return existing
    if existing:
        logger.debug(f"Session {state.session_id}: already carrying '{item_id}', not adding a duplicate.")
        return existing

    item = InventoryItem(
        id=item_id,
        original_id=item_id,
        name=template.name,
        description=template.description,
        can_use=template.can_use,
        fuel=template.fuel,
        uses=template.uses,
        quantity=template.quantity,
        moves_remaining=template.moves_remaining,
        duration=template.duration,
        value=template.value,
        is_cursed=template.is_cursed,
        purpose=purpose,
    )
    if item_id == "torch_oil":
        item.name = f"Torch Oil Flask ({item.quantity})"
    elif item_id == "sulfur_crystal":
        item.name = f"Sulfur Crystal ({item.moves_remaining} moves left)"
    elif item_id == "golden_compass":
        item.name = f"Golden Compass ({item.uses} uses left)"
    elif item_id == "lantern":
        item.name = f"Old Lantern ({item.fuel} charges)"

    state.inventory.append(item)
    if item_id == "canvas_bag":
        update_canvas_bag_name(state)
    logger.debug(f"Session {state.session_id}: added '{item_id}' to inventory.")
    return item
