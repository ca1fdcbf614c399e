# backend/app/schemas/item.py
from typing import Optional

from pydantic import BaseModel, Field


class ItemType(BaseModel):
    """Catalogue entry for an item. Inventory items are created from these."""

    id: str
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    can_use: bool = True
    equippable: bool = False
    fuel: Optional[int] = None
    max_fuel: Optional[int] = None
    uses: Optional[int] = None
    quantity: Optional[int] = None
    moves_remaining: Optional[int] = None
    duration: Optional[int] = Field(None, description="Protection length in turns")
    value: Optional[int] = None
    is_trap: bool = False
    is_cursed: bool = False


class InventoryItem(BaseModel):
    # id is unique within an inventory; original_id is the catalogue id.
    id: str
    original_id: str
    name: str
    description: str = ""
    can_use: bool = True
    equipped: bool = False
    is_active: bool = False
    fuel: Optional[int] = None
    uses: Optional[int] = None
    quantity: Optional[int] = None
    moves_remaining: Optional[int] = None
    duration: Optional[int] = None
    value: Optional[int] = None
    purpose: Optional[str] = Field(None, description="Map fragment purpose, e.g., danger_sense")
    in_use: bool = False
    coin_found: bool = False
    is_cursed: bool = False


class ShopOffer(BaseModel):
    id: str
    name: str
    description: str = ""
    price: int = Field(..., ge=0)
    affordable: bool = False
