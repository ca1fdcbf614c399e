# backend/app/commands/meta_parser.py
from app import schemas
from app.game_state import replace_game
from app.services.save_service import save_store
from .command_args import CommandContext
from app.commands.utils import format_status_for_player_message, respond


async def handle_help(context: CommandContext) -> schemas.CommandResponse:
    categories = {
        "General": [
            ("look (l)", "Describes the room you are in and where the passages lead."),
            ("status (score)", "Shows your torch, coins and treasures."),
            ("help (?)", "Shows this message."),
        ],
        "Movement": [
            ("<room number>", "Move to a connected room, e.g. '7'."),
            ("go (move, m) <room>", "Same as above."),
            ("wait (z)", "Stay put for a turn. Not always wise."),
            ("climb", "Climb out of the cave, if you have found the way."),
        ],
        "Items": [
            ("inventory (i)", "Shows what you carry."),
            ("use <item>", "Uses an item by name or list number."),
            ("inspect (x) <item>", "Looks closely at an item."),
            ("take (get)", "Picks up whatever lies in this room."),
        ],
        "Trading": [
            ("trade", "Browse the gift shop wares."),
            ("buy <number>", "Buy an item from the list."),
            ("leave", "Leave the shop."),
            ("pay", "Pay the water nixie's toll."),
        ],
        "Game": [
            ("save", "Saves your game."),
            ("load", "Loads your saved game."),
        ],
    }

    help_message_lines = ["--- Available Commands ---"]
    command_col_width = 24

    for category_name, commands in categories.items():
        help_message_lines.append(f"\n-- {category_name} --")
        for cmd, desc in commands:
            help_message_lines.append(f"  {cmd.ljust(command_col_width)}  - {desc}")

    return respond(context.state, "\n".join(help_message_lines))


async def handle_status(context: CommandContext) -> schemas.CommandResponse:
    return respond(context.state, format_status_for_player_message(context.state))


async def handle_save(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    if state.is_over():
        return respond(state, "There's nothing left to save. The game is over.")
    return respond(state, save_store.save_game(state))


async def handle_load(context: CommandContext) -> schemas.CommandResponse:
    loaded, message = save_store.load_game(context.state.session_id)
    if loaded is None:
        return respond(context.state, message)
    replace_game(loaded)
    return respond(loaded, message)
