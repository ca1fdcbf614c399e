# File: backend/app/schemas/__init__.py

from .command import CommandRequest, CommandResponse, LocationUpdate
from .game import (
    GameState,
    GameView,
    Positions,
    SpecialContent,
    SpecialRoomFlags,
    Treasure,
)
from .item import InventoryItem, ItemType, ShopOffer
from .room import RoomDescription, RoomState
from .save import SavedGame, SaveStatus

__all__ = [
    "CommandRequest",
    "CommandResponse",
    "LocationUpdate",
    "GameState",
    "GameView",
    "Positions",
    "SpecialContent",
    "SpecialRoomFlags",
    "Treasure",
    "InventoryItem",
    "ItemType",
    "ShopOffer",
    "RoomDescription",
    "RoomState",
    "SavedGame",
    "SaveStatus",
]
