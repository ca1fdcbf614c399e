# backend/app/api/dependencies.py
import uuid

from fastapi import HTTPException, status

from app.game_state import get_game
from app.schemas.game import GameState


async def get_active_game(session_id: uuid.UUID) -> GameState:
    state = get_game(session_id)
    if state is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No game found for session {session_id}",
        )
    return state
