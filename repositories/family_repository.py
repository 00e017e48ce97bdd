"""
Family Repository - Data access for family members and monthly stats
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from repositories.base import BaseRepository
from domain.models import FamilyMember, UserStats


class FamilyMemberRepository(BaseRepository[FamilyMember]):
    """Repository for family member data access"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, FamilyMember, clock)

    def list_for_owner(self, user_id: str) -> List[FamilyMember]:
        return self.owned(user_id).order_by(FamilyMember.created_at).all()


class UserStatsRepository(BaseRepository[UserStats]):
    """Repository for cached monthly statistics"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, UserStats, clock)

    def get_for_month(self, user_id: str, month: str) -> Optional[UserStats]:
        return self.owned(user_id).filter(UserStats.month == month).first()
