"""
Meal Plan Repository - Data access for daily menus and meal orders
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from repositories.base import BaseRepository, Page
from domain.enums import OrderStatus
from domain.models import TodayMenu, MealOrder


class MenuRepository(BaseRepository[TodayMenu]):
    """Repository for per-day menus"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, TodayMenu, clock)

    def get_for_day(self, user_id: str, day: str) -> Optional[TodayMenu]:
        return self.owned(user_id).filter(TodayMenu.date == day).first()


class OrderRepository(BaseRepository[MealOrder]):
    """Repository for meal orders"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, MealOrder, clock)

    def list_for_owner(
        self,
        user_id: str,
        statuses: Optional[List[str]],
        page: int,
        page_size: int,
    ) -> Page:
        query = self.owned(user_id)
        if statuses:
            query = query.filter(MealOrder.status.in_(statuses))
        query = query.order_by(MealOrder.created_at.desc())
        return self.paginate(query, page, page_size)

    def count_confirmed_between(
        self, user_id: str, start: datetime, end_exclusive: datetime
    ) -> int:
        return (
            self.owned(user_id)
            .filter(
                MealOrder.status == OrderStatus.CONFIRMED.value,
                MealOrder.created_at >= start,
                MealOrder.created_at < end_exclusive,
            )
            .count()
        )
