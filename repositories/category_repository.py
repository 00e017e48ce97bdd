"""
Category Repository - Data access for ingredient and recipe filter categories
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_, and_

from app.clock import Clock, system_clock
from repositories.base import BaseRepository
from domain.models import IngredientCategory, RecipeCategory


class IngredientCategoryRepository(BaseRepository[IngredientCategory]):
    """Repository for food-type categories"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, IngredientCategory, clock)

    def visible(self, user_id: str):
        """System categories plus the user's own"""
        return self.query().filter(
            or_(
                IngredientCategory.is_system.is_(True),
                IngredientCategory.owner_user_id == user_id,
            )
        )

    def list_visible(self, user_id: str) -> List[IngredientCategory]:
        return (
            self.visible(user_id)
            .order_by(IngredientCategory.sort_order, IngredientCategory.created_at)
            .all()
        )

    def get_visible(self, user_id: str, category_id: str) -> Optional[IngredientCategory]:
        return self.visible(user_id).filter(IngredientCategory.id == category_id).first()

    def get_user_owned(self, user_id: str, category_id: str) -> Optional[IngredientCategory]:
        return (
            self.owned(user_id)
            .filter(
                and_(
                    IngredientCategory.id == category_id,
                    IngredientCategory.is_system.is_(False),
                )
            )
            .first()
        )

    def find_visible_by_name(
        self, user_id: str, name: str, exclude_id: Optional[str] = None
    ) -> Optional[IngredientCategory]:
        query = self.visible(user_id).filter(IngredientCategory.name == name)
        if exclude_id:
            query = query.filter(IngredientCategory.id != exclude_id)
        return query.first()


class RecipeCategoryRepository(BaseRepository[RecipeCategory]):
    """Repository for recipe filter categories"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, RecipeCategory, clock)

    def list_active(self, category_type: Optional[str] = None) -> List[RecipeCategory]:
        query = self.query().filter(RecipeCategory.is_active.is_(True))
        if category_type:
            query = query.filter(RecipeCategory.type == category_type)
        return query.order_by(
            RecipeCategory.type, RecipeCategory.sort_order, RecipeCategory.created_at
        ).all()
