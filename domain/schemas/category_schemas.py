from datetime import datetime
from typing import Optional

from pydantic import Field

from domain.schemas.common import CamelModel


class IngredientCategoryCreate(CamelModel):
    """Schema for creating a user-owned ingredient category"""

    name: str = Field(..., min_length=1, max_length=64)
    icon: Optional[str] = None
    color: Optional[str] = None
    sort_order: int = 0


class IngredientCategoryUpdate(CamelModel):
    """Partial update; empty strings and zero leave a field unchanged"""

    name: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    sort_order: Optional[int] = None


class IngredientCategoryResponse(CamelModel):
    id: str
    name: str
    icon: str
    color: str
    sort_order: int
    is_system: bool
    owner_user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecipeCategoryCreate(CamelModel):
    """Schema for creating or replacing a recipe filter category"""

    type: str = Field(..., description="taste, cuisine, difficulty or meal_type")
    name: str = Field(..., min_length=1, max_length=64)
    color: str = ""
    icon: str = ""
    sort_order: int = 0
    is_active: bool = True


class RecipeCategoryResponse(CamelModel):
    id: str
    type: str
    name: str
    color: str
    icon: str
    sort_order: int
    is_active: bool
    created_at: Optional[datetime] = None
