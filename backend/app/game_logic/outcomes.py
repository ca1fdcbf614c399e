# backend/app/game_logic/outcomes.py
import logging

from app.data.messages import DEATH_MESSAGES
from app.schemas.game import GameState

logger = logging.getLogger(__name__)


def kill_player(state: GameState, cause: str, message: str):
    """Ends the game as a loss. The closing line for the cause is appended to the message."""
    state.game_status = "lost"
    state.death_cause = cause
    closing = DEATH_MESSAGES.get(cause)
    state.message = f"{message}\n\n{closing}" if closing else message
    logger.info(f"Session {state.session_id}: player died in room {state.current_position} (cause: {cause}).")


def win_game(state: GameState, message: str):
    state.game_status = "won"
    state.death_cause = None
    state.message = message
    logger.info(
        f"Session {state.session_id}: player escaped after {state.move_counter} moves with "
        f"{len(state.collected_treasures)}/{len(state.treasure_pieces)} treasures."
    )
