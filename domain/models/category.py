"""
Classification models: food-storage categories and recipe filter categories.
"""

from sqlalchemy import Column, String, Text, Integer, Boolean

from domain.models.database import Base
from domain.models.types import EntityMixin, SoftDeleteMixin


class IngredientCategory(EntityMixin, SoftDeleteMixin, Base):
    """Food-type category. System rows have no owner and are read-only for users."""

    __tablename__ = "ingredient_category"

    name = Column(Text, nullable=False)
    icon = Column(Text, nullable=False, default="📦")
    color = Column(String(16), nullable=False, default="#9E9E9E")
    sort_order = Column(Integer, nullable=False, default=0)
    is_system = Column(Boolean, nullable=False, default=False, index=True)
    owner_user_id = Column(String(64), nullable=True, index=True)

    def __repr__(self):
        return f"<IngredientCategory(id={self.id}, name='{self.name}', system={self.is_system})>"


class RecipeCategory(EntityMixin, Base):
    """Recipe filter entry (taste / cuisine / difficulty / meal_type)."""

    __tablename__ = "recipe_category"

    type = Column(String(20), nullable=False, index=True)
    name = Column(Text, nullable=False)
    color = Column(String(16), nullable=False, default="")
    icon = Column(Text, nullable=False, default="")
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<RecipeCategory(id={self.id}, type='{self.type}', name='{self.name}')>"
