"""Pydantic schemas for the recipe library."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.schemas.common import CamelModel


class RecipeIngredient(CamelModel):
    """Embedded ingredient in a recipe."""

    name: str
    amount: str = ""
    available: bool = False


class RecipeBase(CamelModel):
    name: str = Field(..., max_length=128)
    image: str = ""
    time: str = Field(default="", description="Free-text duration, e.g. '15 min'")
    difficulty: str = ""
    tags: List[str] = Field(default_factory=list)
    tag_colors: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    is_public: bool = False


class RecipeCreate(RecipeBase):
    pass


class RecipeUpdate(RecipeBase):
    """Full replacement of the editable recipe fields."""


class RecipeListItem(CamelModel):
    """Compact recipe card used by listings and recommendations."""

    id: str
    name: str
    image: str = ""
    time: str = ""
    difficulty: str = ""
    tags: List[str] = Field(default_factory=list)
    tag_colors: List[str] = Field(default_factory=list)
    favorite: bool = False
    categories: List[str] = Field(default_factory=list)


class RecipeResponse(RecipeListItem):
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    owner_user_id: str
    is_public: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FavoriteRequest(CamelModel):
    favorite: bool


class RecommendationRequest(CamelModel):
    mode: str = Field(default="random", description="inventory, quick or random; anything else means random")
    max_time: Optional[int] = Field(
        None, gt=0, description="Upper bound in minutes for quick mode"
    )


class RecommendationResponse(CamelModel):
    recipe: Optional[RecipeListItem] = None
    reason: str
