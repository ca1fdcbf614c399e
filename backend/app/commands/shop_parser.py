# backend/app/commands/shop_parser.py
from app import schemas
from app.game_logic.shop import handle_trade as open_trade
from app.game_logic.shop import handle_water_spirit_trade, leave_shop, process_shop_purchase
from .command_args import CommandContext
from app.commands.utils import respond


async def handle_trade(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    state.message = open_trade(state)
    return respond(state)


async def handle_buy(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    if not state.shop_mode:
        return respond(state, "You're not browsing any wares. Type 'trade' in the gift shop first.")
    if not context.args:
        return respond(state, "Buy what? Give the item number from the list.")
    state.message = process_shop_purchase(state, context.args[0])
    return respond(state)


async def handle_leave(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    if not state.shop_mode:
        return respond(state, "You aren't in the middle of anything.")
    state.message = leave_shop(state)
    return respond(state)


async def handle_pay(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    state.message = handle_water_spirit_trade(state)
    return respond(state)
