"""
Shopping list domain mappers.
Handles transformation between ORM models and DTOs for shopping-related entities.
"""

from domain.models import ShoppingList, DEFAULT_LIST_NAME
from domain.schemas.shopping_schemas import (
    ShoppingListResponse,
    ShoppingListSummary,
    ShoppingItemResponse,
)


class ShoppingMapper:
    """Mapper for shopping list transformations."""

    @staticmethod
    def to_response(shopping_list: ShoppingList) -> ShoppingListResponse:
        """
        Convert ORM ShoppingList to ShoppingListResponse DTO.

        Args:
            shopping_list: ShoppingList ORM instance

        Returns:
            ShoppingListResponse DTO with items in stored order
        """
        return ShoppingListResponse(
            id=shopping_list.id,
            name=shopping_list.name,
            items=[
                ShoppingItemResponse.model_validate(item)
                for item in (shopping_list.items or [])
            ],
            total_price=shopping_list.total_price or 0,
            completed_at=shopping_list.completed_at,
            created_at=shopping_list.created_at,
            updated_at=shopping_list.updated_at,
        )

    @staticmethod
    def to_summary(shopping_list: ShoppingList) -> ShoppingListSummary:
        return ShoppingListSummary(
            id=shopping_list.id,
            name=shopping_list.name,
            total_price=shopping_list.total_price or 0,
            item_count=len(shopping_list.items or []),
            completed_at=shopping_list.completed_at,
        )

    @staticmethod
    def empty_list() -> ShoppingListResponse:
        """Placeholder returned when the user has no open list (never persisted)."""
        return ShoppingListResponse(
            id=None, name=DEFAULT_LIST_NAME, items=[], total_price=0
        )
