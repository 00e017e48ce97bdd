"""
Repository layer for data access.
Implements the Repository pattern to separate data access from business logic.
"""

from repositories.base import BaseRepository, Page
from repositories.category_repository import (
    IngredientCategoryRepository,
    RecipeCategoryRepository,
)
from repositories.inventory_repository import InventoryRepository
from repositories.shopping_repository import ShoppingListRepository
from repositories.meal_plan_repository import MenuRepository, OrderRepository
from repositories.recipe_repository import RecipeRepository, FavoriteRepository
from repositories.family_repository import FamilyMemberRepository, UserStatsRepository

__all__ = [
    "BaseRepository",
    "Page",
    "IngredientCategoryRepository",
    "RecipeCategoryRepository",
    "InventoryRepository",
    "ShoppingListRepository",
    "MenuRepository",
    "OrderRepository",
    "RecipeRepository",
    "FavoriteRepository",
    "FamilyMemberRepository",
    "UserStatsRepository",
]
