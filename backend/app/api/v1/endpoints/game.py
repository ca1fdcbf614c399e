# backend/app/api/v1/endpoints/game.py
import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from app import schemas
from app.api.dependencies import get_active_game
from app.commands.utils import build_game_view
from app.game_logic.world_builder import new_game
from app.game_state import register_game, remove_game
from app.schemas.game import GameState

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=schemas.GameView, status_code=status.HTTP_201_CREATED)
async def create_game():
    state = register_game(new_game())
    return build_game_view(state)


@router.get("/{session_id}", response_model=schemas.GameView)
async def read_game(state: GameState = Depends(get_active_game)):
    return build_game_view(state)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_game(session_id: uuid.UUID):
    if not remove_game(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No game found for session {session_id}")
    logger.info(f"Session {session_id} ended by client.")
