# backend/app/commands/utils.py
import logging
from typing import Optional

from app import schemas
from app.game_logic.inventory import coin_count
from app.game_logic.navigation import adjacent_rooms
from app.game_logic.room_events import lantern_lit_text
from app.schemas.game import GameState, GameView
from app.schemas.item import InventoryItem

logger_utils = logging.getLogger(__name__)


def build_game_view(state: GameState) -> GameView:
    room = state.room()
    room_text = lantern_lit_text(state) or (room.text if room else "")
    return GameView(
        session_id=state.session_id,
        game_status=state.game_status,
        death_cause=state.death_cause,
        message=state.message,
        current_position=state.current_position,
        connections=adjacent_rooms(state),
        room_text=room_text,
        mood=room.mood if room else "mysterious",
        has_water=room.has_water if room else False,
        perceptions=list(state.perceptions),
        inventory=[item.model_copy() for item in state.inventory],
        torch_level=state.torch_level,
        move_counter=state.move_counter,
        collected_treasures=list(state.collected_treasures),
        total_treasures=len(state.treasure_pieces),
        has_map=state.has_map,
        shop_mode=state.shop_mode,
        shop_offers=list(state.shop_offers),
        throwing_repellent=state.throwing_repellent,
    )


def respond(
    state: GameState,
    message: Optional[str] = None,
    location_update: Optional[schemas.LocationUpdate] = None,
) -> schemas.CommandResponse:
    """Wraps the current state and a message into the standard command response."""
    return schemas.CommandResponse(
        game=build_game_view(state),
        message_to_player=message if message is not None else state.message,
        game_over=state.is_over(),
        location_update=location_update,
    )


def format_inventory_for_player_message(state: GameState) -> str:
    if not state.inventory:
        return "You are carrying nothing but your torch."
    lines = ["You are carrying:"]
    for idx, item in enumerate(state.inventory):
        marker = "" if item.can_use else " (not usable)"
        lines.append(f"  {idx + 1}. {item.name}{marker}")
    lines.append(f"Torch: {state.torch_level}%")
    return "\n".join(lines)


def resolve_inventory_target(state: GameState, target_ref: str) -> Optional[InventoryItem]:
    """
    Resolves an inventory reference typed by the player: a list number, an
    item id, or part of the item's name.
    """
    ref = target_ref.lower().strip()
    if not ref:
        return None

    if ref.isdigit():
        index = int(ref) - 1
        if 0 <= index < len(state.inventory):
            return state.inventory[index]
        return None

    for item in state.inventory:
        if ref in (item.id.lower(), item.original_id.lower()):
            return item
    for item in state.inventory:
        if item.name.lower().startswith(ref):
            return item
    for item in state.inventory:
        if ref in item.name.lower():
            return item
    return None


def format_status_for_player_message(state: GameState) -> str:
    lines = [
        f"Room: {state.current_position}   Moves: {state.move_counter}   Torch: {state.torch_level}%",
        f"Coins: {coin_count(state)}   Treasures: {len(state.collected_treasures)}/{len(state.treasure_pieces)}",
    ]
    if state.floating_active:
        lines.append(f"You are floating ({state.floating_moves_left} moves left).")
    if state.night_crawler_protection_turns:
        lines.append(f"Cave salt protects you for {state.night_crawler_protection_turns} more turns.")
    if state.is_over():
        lines.append(f"The game is over: you {state.game_status}.")
    return "\n".join(lines)
