"""
Recipe library models.
"""

from sqlalchemy import Column, String, Text, Boolean, UniqueConstraint

from domain.models.database import Base
from domain.models.types import EntityMixin, SoftDeleteMixin, JSONDocument


class Recipe(EntityMixin, SoftDeleteMixin, Base):
    """A recipe owned by one user, optionally shared publicly"""

    __tablename__ = "recipe"

    name = Column(Text, nullable=False, index=True)
    image = Column(Text, nullable=False, default="")
    time = Column(Text, nullable=False, default="")  # free-text duration, e.g. "15 min"
    difficulty = Column(String(32), nullable=False, default="")
    tags = Column(JSONDocument(), nullable=False, default=list)
    tag_colors = Column(JSONDocument(), nullable=False, default=list)
    categories = Column(JSONDocument(), nullable=False, default=list)
    # [{"name": str, "amount": str, "available": bool}, ...]
    ingredients = Column(JSONDocument(), nullable=False, default=list)
    steps = Column(JSONDocument(), nullable=False, default=list)
    owner_user_id = Column(String(64), nullable=False, index=True)
    is_public = Column(Boolean, nullable=False, default=False, index=True)
    favorite = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<Recipe(id={self.id}, name='{self.name}')>"


class UserFavorite(EntityMixin, Base):
    """A user's favorite mark on a recipe they do not own"""

    __tablename__ = "user_favorite"

    user_id = Column(String(64), nullable=False, index=True)
    recipe_id = Column(String(36), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("user_id", "recipe_id", name="uq_favorite_user_recipe"),
    )
