# backend/app/websocket_router.py
import logging
import uuid

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status

from app.api.v1.endpoints.command import build_command_context, execute_command_logic
from app.commands.utils import build_game_view
from app.game_state import get_game
from app.websocket_manager import connection_manager

logger = logging.getLogger(__name__)
router = APIRouter()


@router.websocket("/ws")
async def websocket_game_endpoint(
    websocket: WebSocket,
    session_id: uuid.UUID = Query(..., description="Session ID returned when the game was created"),
):
    state = get_game(session_id)
    if state is None:
        logger.warning(f"WS Connect: Unknown session {session_id}.")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason="Unknown game session")
        return

    await connection_manager.connect(websocket, session_id)

    welcome_payload = {
        "type": "welcome_package",
        "log": [state.message],
        "game": build_game_view(state).model_dump(),
    }
    await connection_manager.send_personal_message(welcome_payload, session_id)

    try:
        while True:
            received_data = await websocket.receive_json()
            connection_manager.update_last_seen(session_id)
            command_text = received_data.get("command_text", "").strip()

            if not command_text:
                continue

            # 'load' replaces the state object.
            current_state = get_game(session_id)
            if current_state is None:
                logger.error(f"WS Loop: Game state lost for session {session_id}.")
                await websocket.close(code=status.WS_1011_INTERNAL_ERROR, reason="Game state lost")
                break

            context = build_command_context(current_state, command_text)
            response = await execute_command_logic(context)
            if response.special_payload:
                await connection_manager.send_personal_message(response.special_payload, session_id)
            if response.message_to_player:
                log_payload = {
                    "type": "game_update",
                    "log": [response.message_to_player],
                    "game": response.game.model_dump() if response.game else None,
                    "game_over": response.game_over,
                }
                await connection_manager.send_personal_message(log_payload, session_id)

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected for session {session_id}")
        connection_manager.disconnect(session_id)
    except Exception as e:
        logger.error(f"Critical Error in WebSocket handler: {e}", exc_info=True)
        connection_manager.disconnect(session_id)
