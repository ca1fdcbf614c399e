# backend/app/api/v1/endpoints/command.py
import logging
from typing import Awaitable, Callable, Dict

from fastapi import APIRouter, Body, Depends

from app import schemas
from app.api.dependencies import get_active_game
from app.commands import inventory_parser, meta_parser, movement_parser, shop_parser
from app.commands.command_args import CommandContext
from app.commands.utils import respond
from app.schemas.game import GameState

logger = logging.getLogger(__name__)

router = APIRouter()

CommandHandler = Callable[[CommandContext], Awaitable[schemas.CommandResponse]]

COMMAND_REGISTRY: Dict[str, CommandHandler] = {}

# Verbs still accepted once the game has ended.
AFTER_GAME_VERBS = {"look", "l", "status", "score", "help", "?", "load", "inventory", "i"}


def build_command_registry():
    global COMMAND_REGISTRY

    static_commands = {
        # Movement and Perception
        "look": movement_parser.handle_look,
        "l": movement_parser.handle_look,
        "move": movement_parser.handle_move,
        "go": movement_parser.handle_move,
        "m": movement_parser.handle_move,
        "wait": movement_parser.handle_wait,
        "z": movement_parser.handle_wait,
        "climb": movement_parser.handle_climb,
        # Inventory and Items
        "inventory": inventory_parser.handle_inventory,
        "i": inventory_parser.handle_inventory,
        "use": inventory_parser.handle_use,
        "inspect": inventory_parser.handle_inspect,
        "examine": inventory_parser.handle_inspect,
        "x": inventory_parser.handle_inspect,
        "take": inventory_parser.handle_take,
        "get": inventory_parser.handle_take,
        # Shop and Trades
        "trade": shop_parser.handle_trade,
        "buy": shop_parser.handle_buy,
        "leave": shop_parser.handle_leave,
        "pay": shop_parser.handle_pay,
        # Meta
        "status": meta_parser.handle_status,
        "score": meta_parser.handle_status,
        "help": meta_parser.handle_help,
        "?": meta_parser.handle_help,
        "save": meta_parser.handle_save,
        "load": meta_parser.handle_load,
    }
    COMMAND_REGISTRY.update(static_commands)
    logger.info(f"Command registry built with {len(COMMAND_REGISTRY)} total commands.")


build_command_registry()


async def execute_command_logic(context: CommandContext) -> schemas.CommandResponse:
    """Shared by the HTTP endpoint and the WebSocket loop."""
    state = context.state
    verb = context.command_verb

    if state.is_over() and verb not in AFTER_GAME_VERBS:
        return respond(state, "The game is over. Start a new game, or 'load' a saved one.")

    # Room numbers move the player, or pick an item while the shop list is open.
    if verb.isdigit():
        return await movement_parser.handle_move(context)

    handler = COMMAND_REGISTRY.get(verb)
    if handler:
        return await handler(context)

    return schemas.CommandResponse(
        game=None,
        message_to_player=f"I don't understand the command: '{context.original_command}'. Type 'help' or '?'.",
    )


def build_command_context(state: GameState, command_text: str) -> CommandContext:
    command_parts = command_text.split()
    return CommandContext(
        state=state,
        original_command=command_text,
        command_verb=command_parts[0].lower(),
        args=command_parts[1:],
    )


@router.post("/{session_id}", response_model=schemas.CommandResponse)
async def process_command_for_session(
    payload: schemas.CommandRequest = Body(...),
    state: GameState = Depends(get_active_game),
):
    original_command_text = payload.command.strip()
    if not original_command_text:
        return schemas.CommandResponse(message_to_player="Please type a command.")

    context = build_command_context(state, original_command_text)
    response = await execute_command_logic(context)
    logger.debug(f"Session {state.session_id}: '{original_command_text}' -> game_over={response.game_over}")
    return response
