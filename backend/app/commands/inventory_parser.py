# backend/app/commands/inventory_parser.py
from app import schemas
from app.game_logic.inventory import inspect_gold_coins
from app.game_logic.item_handlers import handle_item_use
from app.game_logic.room_items import collect_interactive_item
from .command_args import CommandContext
from app.commands.utils import format_inventory_for_player_message, resolve_inventory_target, respond


async def handle_inventory(context: CommandContext) -> schemas.CommandResponse:
    return respond(context.state, format_inventory_for_player_message(context.state))


async def handle_use(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    target_ref = " ".join(context.args)
    if not target_ref:
        return respond(state, "Use what?")

    item = resolve_inventory_target(state, target_ref)
    if not item:
        return respond(state, f"You don't have anything called '{target_ref}'.")

    result = handle_item_use(state, item.id)
    return respond(state, result.message)


async def handle_inspect(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    target_ref = " ".join(context.args)
    if not target_ref:
        return respond(state, "Inspect what?")

    if target_ref.lower() in ("coins", "coin", "gold"):
        return respond(state, inspect_gold_coins(state))

    item = resolve_inventory_target(state, target_ref)
    if not item:
        return respond(state, f"You don't have anything called '{target_ref}'.")
    if item.original_id == "gold_coins":
        return respond(state, inspect_gold_coins(state))
    return respond(state, f"{item.name}: {item.description}")


async def handle_take(context: CommandContext) -> schemas.CommandResponse:
    collect_interactive_item(context.state)
    return respond(context.state)
