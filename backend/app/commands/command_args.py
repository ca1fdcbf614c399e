# backend/app/commands/command_args.py
from typing import List

from pydantic import BaseModel

from app.schemas.game import GameState


class CommandContext(BaseModel):
    state: GameState
    original_command: str
    command_verb: str
    args: List[str]  # The rest of the command words after the verb

    class Config:
        arbitrary_types_allowed = True
