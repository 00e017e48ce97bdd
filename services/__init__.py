"""Services package - Business logic layer"""

from services.base import BaseService
from services.category_service import CategoryService
from services.inventory_service import InventoryService
from services.shopping_service import ShoppingService
from services.menu_service import MenuService
from services.order_service import OrderService
from services.recipe_service import RecipeService
from services.recommendation_service import RecommendationService
from services.preference_service import PreferenceService
from services.stats_service import StatsService

__all__ = [
    "BaseService",
    "CategoryService",
    "InventoryService",
    "ShoppingService",
    "MenuService",
    "OrderService",
    "RecipeService",
    "RecommendationService",
    "PreferenceService",
    "StatsService",
]
