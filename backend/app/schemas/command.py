# backend/app/schemas/command.py
import uuid
from typing import Any, Dict, Optional

from pydantic import BaseModel

from .game import GameView


class CommandRequest(BaseModel):
    command: str


class LocationUpdate(BaseModel):
    """A small model to carry location update info."""

    session_id: uuid.UUID
    new_position: int


class CommandResponse(BaseModel):
    game: Optional[GameView] = None
    message_to_player: Optional[str] = None
    game_over: bool = False
    special_payload: Optional[Dict[str, Any]] = None

    # Populated by commands that change the player's room.
    location_update: Optional[LocationUpdate] = None
