"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.types import (
    JSONDocument,
    EntityMixin,
    SoftDeleteMixin,
    encode_document,
    decode_document,
    new_id,
)
from domain.models.category import IngredientCategory, RecipeCategory
from domain.models.inventory import IngredientItem
from domain.models.recipe import Recipe, UserFavorite
from domain.models.shopping import ShoppingList, DEFAULT_LIST_NAME
from domain.models.meal_plan import TodayMenu, MealOrder
from domain.models.family import FamilyMember, empty_preferences
from domain.models.stats import UserStats

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    # Column types
    "JSONDocument",
    "EntityMixin",
    "SoftDeleteMixin",
    "encode_document",
    "decode_document",
    "new_id",
    # Category models
    "IngredientCategory",
    "RecipeCategory",
    # Inventory models
    "IngredientItem",
    # Recipe models
    "Recipe",
    "UserFavorite",
    # Shopping models
    "ShoppingList",
    "DEFAULT_LIST_NAME",
    # Menu / order models
    "TodayMenu",
    "MealOrder",
    # Family models
    "FamilyMember",
    "empty_preferences",
    # Stats models
    "UserStats",
]
