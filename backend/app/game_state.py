# backend/app/game_state.py
import logging
import uuid
from typing import Dict, List, Optional

from app.schemas.game import GameState

logger = logging.getLogger(__name__)

# Session ID -> live game. Games only live for the lifetime of the process.
active_games: Dict[uuid.UUID, GameState] = {}


def register_game(state: GameState) -> GameState:
    active_games[state.session_id] = state
    logger.info(f"GAME_STATE: Session {state.session_id} registered. Active sessions: {len(active_games)}")
    return state


def get_game(session_id: uuid.UUID) -> Optional[GameState]:
    return active_games.get(session_id)


def replace_game(state: GameState) -> GameState:
    """Swaps in a state for an existing session, e.g. after loading a save."""
    active_games[state.session_id] = state
    return state


def remove_game(session_id: uuid.UUID) -> bool:
    if session_id in active_games:
        del active_games[session_id]
        logger.info(f"GAME_STATE: Session {session_id} removed.")
        return True
    return False


def list_session_ids() -> List[uuid.UUID]:
    return list(active_games.keys())
