# backend/app/websocket_manager.py
import uuid
import logging
import time
from typing import Dict, List

from fastapi import WebSocket
from fastapi.encoders import jsonable_encoder

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        # session_id -> WebSocket mapping
        self.active_connections: Dict[uuid.UUID, WebSocket] = {}
        self.session_last_seen: Dict[uuid.UUID, float] = {}

    async def connect(self, websocket: WebSocket, session_id: uuid.UUID):
        await websocket.accept()
        self.active_connections[session_id] = websocket
        self.session_last_seen[session_id] = time.time()
        logger.info(f"Session {session_id} connected.")

    def update_last_seen(self, session_id: uuid.UUID):
        self.session_last_seen[session_id] = time.time()

    def disconnect(self, session_id: uuid.UUID):
        self.active_connections.pop(session_id, None)
        self.session_last_seen.pop(session_id, None)
        logger.info(f"Session {session_id} disconnected.")

    def get_all_active_session_ids(self) -> List[uuid.UUID]:
        return list(self.active_connections.keys())

    def is_session_connected(self, session_id: uuid.UUID) -> bool:
        return session_id in self.active_connections

    async def send_personal_message(self, message_payload: dict, session_id: uuid.UUID):
        if session_id in self.active_connections:
            websocket = self.active_connections[session_id]
            try:
                encoded_payload = jsonable_encoder(message_payload)
                await websocket.send_json(encoded_payload)
            except Exception as e:
                logger.error(f"Error sending personal WS message to {session_id}: {e}", exc_info=True)
        else:
            logger.warning(f"Attempted to send personal message to disconnected session {session_id}")


# Global instance
connection_manager = ConnectionManager()
