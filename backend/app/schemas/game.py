# backend/app/schemas/game.py
import uuid
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .item import InventoryItem, ShopOffer
from .room import RoomDescription, RoomState


class Positions(BaseModel):
    wumpus: int
    pit1: int
    pit2: int
    bat: int
    exit: int
    gift_shop: Optional[int] = None

    def danger_rooms(self) -> List[int]:
        return [self.wumpus, self.pit1, self.pit2, self.bat]


class SpecialContent(BaseModel):
    id: str
    name: str
    description: str


class SpecialRoomFlags(BaseModel):
    # --- Hidden door / secret chamber ---
    has_hidden_door: bool = False
    door_feature: Optional[str] = None
    secret_room: Optional[int] = None
    door_opened: bool = False
    is_special_room: bool = False
    connected_from: Optional[int] = None
    special_content: Optional[SpecialContent] = None
    item_collected: bool = False

    # --- Crystal orb teleport ---
    has_teleport: bool = False
    teleport_room: Optional[int] = None
    is_teleport_room: bool = False

    # --- Placed items ---
    has_item: bool = False
    item_id: Optional[str] = None
    map_purpose: Optional[str] = None

    # --- Sand creature ---
    has_sand_creature: bool = False
    sand_creature_active: bool = False
    sand_creature_defeated: bool = False

    # --- Water nixie ---
    has_water_spirit: bool = False
    water_spirit_active: bool = False
    nixie_has_appeared: bool = False
    toll_paid: bool = False
    water_spirit_gone: bool = False
    nixie_has_journal: bool = False
    nixie_killed: bool = False
    amulet_passage: bool = False

    # --- Fungi ---
    has_fungi_creature: bool = False
    fungi_creature_active: bool = False

    # --- Wizard sanctum / exit ---
    wizard_freed: bool = False
    pedestal_has_rock: bool = False
    ladder_extended: bool = False


class Treasure(BaseModel):
    id: str
    name: str
    description: str
    room: int
    clue: str


class GameState(BaseModel):
    """Everything one game session knows. Rules mutate this object in place."""

    session_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    game_status: str = "playing"  # playing | won | lost
    death_cause: Optional[str] = None
    message: str = ""

    # --- Where the player is ---
    current_position: int = 1
    previous_position: Optional[int] = None
    position_history: List[int] = Field(default_factory=list)
    visited_rooms: List[int] = Field(default_factory=list)
    perceptions: List[str] = Field(default_factory=list)

    # --- The world ---
    positions: Positions
    room_connections: Dict[int, List[int]] = Field(default_factory=dict)
    rooms: Dict[int, RoomState] = Field(default_factory=dict)
    special_rooms: Dict[int, SpecialRoomFlags] = Field(default_factory=dict)

    # --- Player resources ---
    inventory: List[InventoryItem] = Field(default_factory=list)
    torch_level: int = 100
    move_counter: int = 0

    # --- Treasure hunt ---
    treasure_pieces: List[Treasure] = Field(default_factory=list)
    collected_treasures: List[str] = Field(default_factory=list)
    treasure_map_room: Optional[int] = None
    has_map: bool = False
    map_clue: str = ""
    treasures_protected: bool = False

    # --- Magic ---
    floating_active: bool = False
    floating_moves_left: int = 0
    active_spell: Optional[str] = None
    wizard_freed: bool = False
    wizard_room_visited: bool = False
    last_teleport_room: Optional[int] = None
    back_and_forth_rooms: List[int] = Field(default_factory=list)
    back_and_forth_count: int = 0
    cave_silence_announced: bool = False

    # --- Shifting room ---
    shifting_room_id: Optional[int] = None
    shifting_descriptions: List[RoomDescription] = Field(default_factory=list)
    shifting_index: int = 0
    shifting_stabilized: bool = False

    # --- Gift shop ---
    shop_mode: bool = False
    shop_offers: List[ShopOffer] = Field(default_factory=list)
    coin_dialogue: str = ""
    goblin_cooldown: int = 0

    # --- Pending actions ---
    throwing_repellent: bool = False
    sulfur_escape_pending: bool = False

    # --- Lingering hazards (turns spent without leaving the room) ---
    turns_in_room: int = 0
    fungi_warning: bool = False
    crystal_warning: bool = False
    night_crawler_warning: bool = False
    wizard_room_warning: bool = False
    night_crawler_protection_turns: int = 0
    temperature_warning: bool = False

    def room(self, room_id: Optional[int] = None) -> Optional[RoomState]:
        return self.rooms.get(self.current_position if room_id is None else room_id)

    def special(self, room_id: Optional[int] = None) -> SpecialRoomFlags:
        """Returns the flags for a room, creating an empty set on first access."""
        key = self.current_position if room_id is None else room_id
        if key not in self.special_rooms:
            self.special_rooms[key] = SpecialRoomFlags()
        return self.special_rooms[key]

    def is_over(self) -> bool:
        return self.game_status != "playing"


class GameView(BaseModel):
    """What the client is allowed to see of a GameState."""

    session_id: uuid.UUID
    game_status: str
    death_cause: Optional[str] = None
    message: str
    current_position: int
    connections: List[int]
    room_text: str
    mood: str
    has_water: bool = False
    perceptions: List[str]
    inventory: List[InventoryItem]
    torch_level: int
    move_counter: int
    collected_treasures: List[str]
    total_treasures: int
    has_map: bool
    shop_mode: bool
    shop_offers: List[ShopOffer] = Field(default_factory=list)
    throwing_repellent: bool
