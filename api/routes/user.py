"""User statistics and family preference routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_clock, get_current_user_id
from api.responses import APIResponse, success_response
from app.clock import Clock
from domain.schemas.preference_schemas import (
    FamilyPreferencesUpdate,
    FamilyMemberResponse,
    UserStatsResponse,
)
from services.preference_service import PreferenceService
from services.stats_service import StatsService

router = APIRouter(prefix="/user", tags=["User"])


def get_stats_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> StatsService:
    return StatsService(db, clock)


def get_preference_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> PreferenceService:
    return PreferenceService(db, clock)


@router.get("/stats", response_model=APIResponse[UserStatsResponse])
def get_stats(
    month: Optional[str] = Query(None, description="YYYY-MM, defaults to the current month"),
    user_id: str = Depends(get_current_user_id),
    service: StatsService = Depends(get_stats_service),
):
    """Monthly cooking count, recipe totals and waste reduction rate"""
    return success_response(service.get_stats(user_id, month))


@router.get("/preferences", response_model=APIResponse[List[FamilyMemberResponse]])
def get_preferences(
    user_id: str = Depends(get_current_user_id),
    service: PreferenceService = Depends(get_preference_service),
):
    return success_response(service.list_members(user_id))


@router.put("/preferences", response_model=APIResponse[List[FamilyMemberResponse]])
def update_preferences(
    payload: FamilyPreferencesUpdate,
    user_id: str = Depends(get_current_user_id),
    service: PreferenceService = Depends(get_preference_service),
):
    """Create members without an id, update the caller's existing ones"""
    return success_response(service.upsert_members(user_id, payload.members), "Preferences saved")


@router.delete("/preferences/{member_id}", response_model=APIResponse)
def delete_member(
    member_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PreferenceService = Depends(get_preference_service),
):
    service.delete_member(user_id, member_id)
    return success_response(None, "Family member deleted")
