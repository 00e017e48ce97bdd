from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.schemas.common import CamelModel


class ShoppingItemInput(CamelModel):
    """Item as supplied when creating or replacing a list"""

    id: Optional[str] = None
    name: str = ""
    amount: str = ""
    price: float = Field(default=0, ge=0)
    checked: bool = False


class ShoppingListCreate(CamelModel):
    name: Optional[str] = None
    items: List[ShoppingItemInput] = Field(default_factory=list)


class ShoppingListUpdate(CamelModel):
    """Rename and/or replace the whole item collection"""

    name: Optional[str] = None
    items: Optional[List[ShoppingItemInput]] = None


class ShoppingItemCreate(CamelModel):
    name: str = Field(..., max_length=128)
    amount: str = ""
    price: float = Field(default=0, ge=0)


class ShoppingItemUpdate(CamelModel):
    """Only supplied fields change"""

    name: Optional[str] = None
    amount: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    checked: Optional[bool] = None


class ShoppingItemResponse(CamelModel):
    id: str
    name: str
    amount: str = ""
    price: float = 0
    checked: bool = False


class ShoppingListResponse(CamelModel):
    """A shopping list; ``id`` is None for the unsaved placeholder list"""

    id: Optional[str] = None
    name: str
    items: List[ShoppingItemResponse]
    total_price: float
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ShoppingListSummary(CamelModel):
    id: str
    name: str
    total_price: float
    item_count: int
    completed_at: Optional[datetime] = None


class ShareLinkResponse(CamelModel):
    share_code: str
    share_url: str
