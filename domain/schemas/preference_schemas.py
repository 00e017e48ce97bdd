from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.schemas.common import CamelModel


class MemberPreferences(CamelModel):
    tastes: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    dislikes: List[str] = Field(default_factory=list)


class FamilyMemberInput(CamelModel):
    """Member in an upsert batch; no id means create"""

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=64)
    preferences: MemberPreferences = Field(default_factory=MemberPreferences)


class FamilyPreferencesUpdate(CamelModel):
    members: List[FamilyMemberInput] = Field(default_factory=list)


class FamilyMemberResponse(CamelModel):
    id: str
    name: str
    preferences: MemberPreferences
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserStatsResponse(CamelModel):
    month: str
    monthly_cooking_count: int
    waste_reduction_rate: float
    total_recipes: int
    favorite_recipes: int
    updated_at: Optional[datetime] = None
