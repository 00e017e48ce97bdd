"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.inventory_mapper import (
    InventoryMapper,
    UNCATEGORIZED_ID,
    uncategorized_category,
)
from domain.mappers.shopping_mapper import ShoppingMapper
from domain.mappers.recipe_mapper import RecipeMapper

__all__ = [
    "InventoryMapper",
    "UNCATEGORIZED_ID",
    "uncategorized_category",
    "ShoppingMapper",
    "RecipeMapper",
]
