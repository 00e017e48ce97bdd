"""Family member preferences"""

from typing import List

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from domain.models import FamilyMember
from domain.schemas.preference_schemas import FamilyMemberInput, FamilyMemberResponse
from repositories import FamilyMemberRepository
from services.base import BaseService


class PreferenceService(BaseService):
    """Business logic for the household's taste, allergy and dislike lists."""

    logger_name = "pantrypal.preferences"

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, clock)
        self.members = FamilyMemberRepository(db, clock)

    def list_members(self, user_id: str) -> List[FamilyMemberResponse]:
        return [
            FamilyMemberResponse.model_validate(m)
            for m in self.members.list_for_owner(user_id)
        ]

    def upsert_members(self, user_id: str, members: List[FamilyMemberInput]) -> List[FamilyMemberResponse]:
        """
        Save a batch of members.

        Members with an id the caller owns are updated, members without an id
        are created, and ids the caller does not own are skipped.
        """
        created = updated = skipped = 0
        for entry in members:
            preferences = entry.preferences.model_dump()
            if entry.id:
                member = self.members.get_owned(entry.id, user_id)
                if member is None:
                    skipped += 1
                    continue
                member.name = entry.name
                member.preferences = preferences
                self.members.touch(member)
                updated += 1
            else:
                member = FamilyMember.new(name=entry.name, preferences=preferences, owner_user_id=user_id)
                self.db.add(self.members.touch(member, created=True))
                created += 1
        self.db.commit()
        self.log_info(
            "Saved family members", user_id=user_id, created=created, updated=updated, skipped=skipped
        )
        return self.list_members(user_id)

    def delete_member(self, user_id: str, member_id: str) -> None:
        member = self.members.get_owned(member_id, user_id)
        if not member:
            raise self.not_found("Family member", member_id=member_id, user_id=user_id)
        self.members.soft_delete(member, self.clock.now())
        self.log_info("Deleted family member", user_id=user_id, member_id=member_id)
