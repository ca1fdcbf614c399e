# backend/app/schemas/save.py
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, Field

from .game import GameState


class SavedGame(BaseModel):
    version: str
    saved_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
    state: GameState


class SaveStatus(BaseModel):
    session_id: uuid.UUID
    has_saved_game: bool
    saved_at: Optional[datetime.datetime] = None
    message: Optional[str] = None
