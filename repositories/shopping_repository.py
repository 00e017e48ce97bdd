"""
Shopping Repository - Data access layer for shopping lists
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from repositories.base import BaseRepository, Page
from domain.models import ShoppingList


class ShoppingListRepository(BaseRepository[ShoppingList]):
    """Repository for shopping list data access"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, ShoppingList, clock)

    def latest_open(self, user_id: str) -> Optional[ShoppingList]:
        """Most recently created list that has not been completed"""
        return (
            self.owned(user_id)
            .filter(ShoppingList.completed_at.is_(None))
            .order_by(ShoppingList.created_at.desc())
            .first()
        )

    def list_for_owner(
        self,
        user_id: str,
        completed: Optional[bool],
        page: int,
        page_size: int,
    ) -> Page:
        query = self.owned(user_id)
        if completed is True:
            query = query.filter(ShoppingList.completed_at.isnot(None))
        elif completed is False:
            query = query.filter(ShoppingList.completed_at.is_(None))
        query = query.order_by(ShoppingList.created_at.desc())
        return self.paginate(query, page, page_size)

    def completed_between(
        self,
        user_id: str,
        start: Optional[datetime],
        end_exclusive: Optional[datetime],
        page: int,
        page_size: int,
    ) -> Page:
        """Completed lists, most recently completed first"""
        query = self.owned(user_id).filter(ShoppingList.completed_at.isnot(None))
        if start is not None:
            query = query.filter(ShoppingList.completed_at >= start)
        if end_exclusive is not None:
            query = query.filter(ShoppingList.completed_at < end_exclusive)
        query = query.order_by(ShoppingList.completed_at.desc())
        return self.paginate(query, page, page_size)
