"""
Monthly usage statistics snapshot.
"""

from sqlalchemy import Column, String, Integer, Float, UniqueConstraint

from domain.models.database import Base
from domain.models.types import EntityMixin


class UserStats(EntityMixin, Base):
    """Cached per-month statistics for one user"""

    __tablename__ = "user_stats"

    owner_user_id = Column(String(64), nullable=False, index=True)
    month = Column(String(7), nullable=False, index=True)  # YYYY-MM
    monthly_cooking_count = Column(Integer, nullable=False, default=0)
    waste_reduction_rate = Column(Float, nullable=False, default=0)
    total_recipes = Column(Integer, nullable=False, default=0)
    favorite_recipes = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("owner_user_id", "month", name="uq_stats_owner_month"),
    )
