# backend/app/schemas/room.py
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class RoomDescription(BaseModel):
    text: str
    mood: str = "mysterious"
    has_water: bool = False
    special: Optional[str] = Field(None, description="e.g., crystal, echo, sand_creature, water_spirit, gift")
    perception: Optional[str] = None
    enhanced_text: Optional[str] = Field(None, description="Shown instead of text while a lantern is lit")
    text_after_collection: Optional[str] = None
    interactive_item: Optional[str] = Field(None, description="Item id that can be taken from this room")
    keywords: List[str] = Field(default_factory=list)
    treasure_clues: Dict[str, str] = Field(default_factory=dict, description="Treasure id -> where that treasure sits in this room")


class RoomState(RoomDescription):
    """A room description as it exists inside one game, including what has happened to it."""

    has_treasure: bool = False
    treasure_id: Optional[str] = None
    treasure_clue: Optional[str] = None
    collected_items: List[str] = Field(default_factory=list)
    is_shifting_room: bool = False
