# backend/app/commands/movement_parser.py
import logging

from app import schemas
from app.game_logic.movement import climb_ladder, handle_guess, handle_linger
from app.game_logic.room_events import generate_perceptions
from .command_args import CommandContext
from app.commands.utils import respond

logger = logging.getLogger(__name__)


async def handle_look(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    room = state.room()
    state.perceptions = generate_perceptions(state)
    look_payload = {
        "type": "look_response",
        "room_number": state.current_position,
        "description": room.text if room else "",
        "exits": state.room_connections.get(state.current_position, []),
        "perceptions": state.perceptions,
    }
    exits = ", ".join(str(r) for r in look_payload["exits"]) or "none"
    message = f"{look_payload['description']}\n\nPassages lead to rooms: {exits}."
    response = respond(state, message)
    response.special_payload = look_payload
    return response


async def handle_move(context: CommandContext) -> schemas.CommandResponse:
    state = context.state
    if context.command_verb.isdigit():
        target = context.command_verb
    elif context.args:
        target = context.args[0]
    else:
        return respond(state, "Go where? Give a room number, e.g. 'go 7'.")

    old_position = state.current_position
    handle_guess(state, target)

    location_update = None
    if state.current_position != old_position:
        location_update = schemas.LocationUpdate(session_id=state.session_id, new_position=state.current_position)
        logger.debug(f"Session {state.session_id} moved {old_position} -> {state.current_position}")
    return respond(state, location_update=location_update)


async def handle_wait(context: CommandContext) -> schemas.CommandResponse:
    handle_linger(context.state)
    return respond(context.state)


async def handle_climb(context: CommandContext) -> schemas.CommandResponse:
    climb_ladder(context.state)
    return respond(context.state)
