# backend/app/api/v1/endpoints/save.py
import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from app import schemas
from app.api.dependencies import get_active_game
from app.commands.utils import respond
from app.game_state import replace_game
from app.schemas.game import GameState
from app.services.save_service import save_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{session_id}", response_model=schemas.SaveStatus)
async def save_game(state: GameState = Depends(get_active_game)):
    if state.is_over():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A finished game cannot be saved.")
    message = save_store.save_game(state)
    saved = save_store.get_status(state.session_id)
    saved.message = message
    return saved


@router.get("/{session_id}", response_model=schemas.SaveStatus)
async def read_save_status(session_id: uuid.UUID):
    return save_store.get_status(session_id)


@router.post("/{session_id}/load", response_model=schemas.CommandResponse)
async def load_game(session_id: uuid.UUID):
    if not save_store.has_saved_game(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No saved game found.")
    loaded, message = save_store.load_game(session_id)
    if loaded is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message)
    replace_game(loaded)
    return respond(loaded, message)


@router.delete("/{session_id}", response_model=schemas.SaveStatus)
async def delete_save(session_id: uuid.UUID):
    message = save_store.delete_saved_game(session_id)
    return schemas.SaveStatus(session_id=session_id, has_saved_game=False, message=message)
