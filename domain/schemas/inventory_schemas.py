from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from domain.schemas.common import CamelModel
from domain.schemas.category_schemas import IngredientCategoryResponse


class IngredientCreate(CamelModel):
    """Schema for adding an ingredient batch to the pantry.

    Dates are ``YYYY-MM-DD`` strings; malformed values are rejected by the
    service with a 400.
    """

    name: str = Field(..., max_length=128)
    quantity: float = Field(default=0, ge=0)
    unit: str = ""
    amount: str = ""
    storage: Optional[str] = Field(
        None, description="room, fridge or freezer (default fridge)"
    )
    category_id: Optional[str] = None
    expiry_date: Optional[str] = None
    purchase_date: Optional[str] = None
    thumbnail: str = ""
    icon: str = ""
    note: str = ""


class IngredientUpdate(CamelModel):
    """Partial update; only non-empty / non-zero values are applied"""

    name: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    amount: Optional[str] = None
    storage: Optional[str] = None
    category_id: Optional[str] = None
    expiry_date: Optional[str] = None
    purchase_date: Optional[str] = None
    thumbnail: Optional[str] = None
    icon: Optional[str] = None
    note: Optional[str] = None


class IngredientItemView(CamelModel):
    """Inventory item with its expiry projection"""

    id: str
    name: str
    quantity: float
    unit: str
    amount: str
    storage: str
    category_id: Optional[str] = None
    category: Optional[IngredientCategoryResponse] = None
    batch_id: str
    thumbnail: str = ""
    icon: str = ""
    note: str = ""
    expiry_date: date
    purchase_date: date
    expiry_days: int
    expiry_text: str
    urgent: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class IngredientGroup(CamelModel):
    category: IngredientCategoryResponse
    items: List[IngredientItemView]
    count: int


class GroupedInventory(CamelModel):
    groups: List[IngredientGroup]
    total: int
