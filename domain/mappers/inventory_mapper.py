"""
Inventory domain mappers.
Turns IngredientItem rows into views carrying the expiry projection.
"""

from datetime import date
from typing import Optional

from domain.expiry import project
from domain.models import IngredientItem, IngredientCategory
from domain.schemas.category_schemas import IngredientCategoryResponse
from domain.schemas.inventory_schemas import IngredientItemView

UNCATEGORIZED_ID = "uncategorized"


def uncategorized_category() -> IngredientCategoryResponse:
    """Synthetic group header for items without a visible category."""
    return IngredientCategoryResponse(
        id=UNCATEGORIZED_ID,
        name="Uncategorized",
        icon="📦",
        color="#9E9E9E",
        sort_order=100,
        is_system=True,
    )


class InventoryMapper:
    """Mapper for inventory item transformations."""

    @staticmethod
    def category_to_response(
        category: Optional[IngredientCategory],
    ) -> Optional[IngredientCategoryResponse]:
        if category is None or category.is_deleted:
            return None
        return IngredientCategoryResponse.model_validate(category)

    @staticmethod
    def to_view(item: IngredientItem, today: date, locale: str = "en") -> IngredientItemView:
        """
        Convert an ORM IngredientItem to its view.

        Args:
            item: IngredientItem ORM instance
            today: the caller's current calendar day
            locale: message catalog for the expiry text

        Returns:
            IngredientItemView with expiryDays, expiryText and urgent filled in
        """
        projection = project(item.expiry_date, today, locale)
        return IngredientItemView(
            id=item.id,
            name=item.name,
            quantity=item.quantity or 0,
            unit=item.unit or "",
            amount=item.amount or "",
            storage=item.storage,
            category_id=item.category_id,
            category=InventoryMapper.category_to_response(item.category),
            batch_id=item.batch_id,
            thumbnail=item.thumbnail or "",
            icon=item.icon or "",
            note=item.note or "",
            expiry_date=item.expiry_date,
            purchase_date=item.purchase_date,
            expiry_days=projection.days,
            expiry_text=projection.text,
            urgent=projection.urgent,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )
