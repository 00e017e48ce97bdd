"""
Inventory Repository - Data access layer for pantry items
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from repositories.base import BaseRepository
from domain.models import IngredientItem


class InventoryRepository(BaseRepository[IngredientItem]):
    """Repository for ingredient item data access"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, IngredientItem, clock)

    def list_for_owner(
        self,
        user_id: str,
        storage: Optional[str] = None,
        category_id: Optional[str] = None,
        expiring_on_or_before: Optional[date] = None,
        name: Optional[str] = None,
    ) -> List[IngredientItem]:
        """Owner-scoped listing, soonest expiry first"""
        query = self.owned(user_id)
        if storage:
            query = query.filter(IngredientItem.storage == storage)
        if category_id:
            query = query.filter(IngredientItem.category_id == category_id)
        if expiring_on_or_before is not None:
            query = query.filter(IngredientItem.expiry_date <= expiring_on_or_before)
        if name is not None:
            query = query.filter(IngredientItem.name == name)
        return query.order_by(
            IngredientItem.expiry_date, IngredientItem.created_at
        ).all()

    def count_for_owner(self, user_id: str) -> int:
        return self.owned(user_id).count()

    def count_expiring(self, user_id: str, on_or_before: date) -> int:
        return (
            self.owned(user_id)
            .filter(IngredientItem.expiry_date <= on_or_before)
            .count()
        )

    def count_in_category(self, user_id: str, category_id: str) -> int:
        """Live items of this user still classified under the category"""
        return (
            self.owned(user_id)
            .filter(IngredientItem.category_id == category_id)
            .count()
        )

    def names_for_owner(self, user_id: str) -> List[str]:
        rows = self.owned(user_id).with_entities(IngredientItem.name).distinct().all()
        return [row[0] for row in rows if row[0]]
