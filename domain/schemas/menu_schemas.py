from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.schemas.common import CamelModel


class MenuEntry(CamelModel):
    recipe_id: str
    recipe_name: str = ""
    meal_type: str = "dinner"


class MenuResponse(CamelModel):
    """A day's menu; ``id`` is None when nothing has been planned yet"""

    id: Optional[str] = None
    date: str
    recipes: List[MenuEntry]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AddMenuRecipeRequest(CamelModel):
    recipe_id: str = Field(..., min_length=1)
    meal_type: Optional[str] = Field(
        None, description="breakfast, lunch, dinner or snack (default dinner)"
    )
    date: Optional[str] = Field(None, description="YYYY-MM-DD, defaults to today")


class OrderRecipe(CamelModel):
    recipe_id: str
    recipe_name: str = ""


class OrderCreate(CamelModel):
    recipes: List[OrderRecipe] = Field(default_factory=list)


class OrderResponse(CamelModel):
    id: str
    recipes: List[OrderRecipe]
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
