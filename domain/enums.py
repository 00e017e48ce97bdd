"""
Domain enums for PantryPal.
Contains all enumeration types used across the domain models.
"""

import enum


class StorageLocation(str, enum.Enum):
    """Where an inventory item is kept"""

    ROOM = "room"
    FRIDGE = "fridge"
    FREEZER = "freezer"


class RecipeCategoryType(str, enum.Enum):
    """Recipe filter taxonomies"""

    TASTE = "taste"
    CUISINE = "cuisine"
    DIFFICULTY = "difficulty"
    MEAL_TYPE = "meal_type"


class MealType(str, enum.Enum):
    """Meal slots on a day's menu"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class OrderStatus(str, enum.Enum):
    """Meal order lifecycle. Only PENDING -> CONFIRMED is reachable."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"


class ExpiryBucket(str, enum.Enum):
    """Human-facing expiry classification"""

    EXPIRED = "expired"
    TODAY = "today"
    TOMORROW = "tomorrow"
    DAY_AFTER_TOMORROW = "day_after_tomorrow"
    DAYS_FROM_NOW = "days_from_now"


class RecommendationMode(str, enum.Enum):
    """Candidate filters for the random recipe picker"""

    INVENTORY = "inventory"
    QUICK = "quick"
    RANDOM = "random"
