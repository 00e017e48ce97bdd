"""
Family member preference model.
"""

from sqlalchemy import Column, String, Text

from domain.models.database import Base
from domain.models.types import EntityMixin, SoftDeleteMixin, JSONDocument


def empty_preferences() -> dict:
    return {"tastes": [], "allergies": [], "dislikes": []}


class FamilyMember(EntityMixin, SoftDeleteMixin, Base):
    """A household member whose tastes and allergies shape meal choices"""

    __tablename__ = "family_member"

    name = Column(Text, nullable=False, default="")
    preferences = Column(
        JSONDocument(empty_factory=empty_preferences),
        nullable=False,
        default=empty_preferences,
    )
    owner_user_id = Column(String(64), nullable=False, index=True)
