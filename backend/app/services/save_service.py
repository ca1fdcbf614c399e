# backend/app/services/save_service.py
import logging
import uuid
from typing import Dict, Optional, Tuple

from app.core.config import settings
from app.schemas.game import GameState
from app.schemas.save import SavedGame, SaveStatus

logger = logging.getLogger(__name__)


class SaveStore:
    """
    One save slot per session, kept in memory for the life of the process.
    Saves are stored as JSON so a loaded game never shares objects with the live one.
    """

    def __init__(self, version: Optional[str] = None):
        self.version = version or settings.SAVE_GAME_VERSION
        self._slots: Dict[uuid.UUID, str] = {}

    def save_game(self, state: GameState) -> str:
        saved = SavedGame(version=self.version, state=state)
        self._slots[state.session_id] = saved.model_dump_json()
        logger.info(f"SAVE: Session {state.session_id} saved in room {state.current_position}.")
        return "Game saved successfully! Type 'load' at any time to return to this moment."

    def load_game(self, session_id: uuid.UUID) -> Tuple[Optional[GameState], str]:
        raw = self._slots.get(session_id)
        if raw is None:
            return None, "No saved game found."

        saved = SavedGame.model_validate_json(raw)
        if saved.version != self.version:
            logger.warning(f"SAVE: Session {session_id} has a version {saved.version} save; expected {self.version}.")
            return None, "This save file is from a different game version and cannot be loaded."

        state = saved.state
        state.shop_mode = False
        state.shop_offers = []
        state.throwing_repellent = False
        state.message = f"Game loaded! You're back in room {state.current_position}. Welcome back, adventurer!"
        logger.info(f"SAVE: Session {session_id} loaded.")
        return state, state.message

    def has_saved_game(self, session_id: uuid.UUID) -> bool:
        return session_id in self._slots

    def get_status(self, session_id: uuid.UUID) -> SaveStatus:
        raw = self._slots.get(session_id)
        if raw is None:
            return SaveStatus(session_id=session_id, has_saved_game=False, message="No saved game found.")
        saved = SavedGame.model_validate_json(raw)
        return SaveStatus(
            session_id=session_id,
            has_saved_game=True,
            saved_at=saved.saved_at,
            message=f"Saved game from room {saved.state.current_position}.",
        )

    def delete_saved_game(self, session_id: uuid.UUID) -> str:
        if self._slots.pop(session_id, None) is None:
            return "No saved game found."
        logger.info(f"SAVE: Session {session_id} save deleted.")
        return "Saved game deleted."


# Global instance
save_store = SaveStore()
