"""Monthly usage statistics"""

from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from domain.models import UserStats
from domain.schemas.preference_schemas import UserStatsResponse
from repositories import (
    UserStatsRepository,
    OrderRepository,
    RecipeRepository,
    FavoriteRepository,
    InventoryRepository,
)
from services.base import BaseService
from services.helpers import parse_month, MONTH_FORMAT

EXPIRING_WINDOW_DAYS = 3
WASTE_BASELINE = 50.0


def waste_reduction_rate(total_items: int, expiring_items: int) -> float:
    """Share of items not about to expire, above a 50% baseline; 0 when empty."""
    if total_items <= 0:
        return 0.0
    used_rate = (total_items - expiring_items) / total_items * 100
    return round(max(0.0, used_rate - WASTE_BASELINE), 2)


class StatsService(BaseService):
    """
    Computes and caches one statistics snapshot per user and month.

    A cached snapshot is returned as-is on later reads of the same month.
    """

    logger_name = "pantrypal.stats"

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, clock)
        self.stats = UserStatsRepository(db, clock)
        self.orders = OrderRepository(db, clock)
        self.recipes = RecipeRepository(db, clock)
        self.favorites = FavoriteRepository(db, clock)
        self.items = InventoryRepository(db, clock)

    def get_stats(self, user_id: str, month: Optional[str] = None) -> UserStatsResponse:
        month = month or self.clock.today().strftime(MONTH_FORMAT)
        start, end = parse_month(month)

        cached = self.stats.get_for_month(user_id, month)
        if cached is not None:
            return UserStatsResponse.model_validate(cached)

        today = self.clock.today()
        total_items = self.items.count_for_owner(user_id)
        expiring = self.items.count_expiring(user_id, today + timedelta(days=EXPIRING_WINDOW_DAYS))

        snapshot = UserStats.new(
            owner_user_id=user_id,
            month=month,
            monthly_cooking_count=self.orders.count_confirmed_between(user_id, start, end),
            waste_reduction_rate=waste_reduction_rate(total_items, expiring),
            total_recipes=self.recipes.count_owned(user_id),
            favorite_recipes=self.recipes.count_owned_favorites(user_id)
            + self.favorites.count_for_user(user_id),
        )
        snapshot = self.stats.create(snapshot)
        self.log_info("Computed monthly stats", user_id=user_id, month=month)
        return UserStatsResponse.model_validate(snapshot)
