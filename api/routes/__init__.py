"""API routes package"""

from . import categories, ingredients, shopping, menu, meals, recipes, user, health

__all__ = ["categories", "ingredients", "shopping", "menu", "meals", "recipes", "user", "health"]
