"""
Recipe Repository - Data access for recipes and favorite marks
"""

from typing import Iterable, List, Optional, Set
from sqlalchemy.orm import Session
from sqlalchemy import or_

from app.clock import Clock, system_clock
from repositories.base import BaseRepository, Page
from domain.models import Recipe, UserFavorite


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, Recipe, clock)

    def mine_or_public(self, user_id: str):
        return self.query().filter(
            or_(Recipe.owner_user_id == user_id, Recipe.is_public.is_(True))
        )

    def get_visible(self, user_id: str, recipe_id: str) -> Optional[Recipe]:
        return self.mine_or_public(user_id).filter(Recipe.id == recipe_id).first()

    def public(self):
        return self.query().filter(Recipe.is_public.is_(True))

    @staticmethod
    def apply_filters(
        query,
        keyword: Optional[str] = None,
        tastes: Iterable[str] = (),
        difficulty: Iterable[str] = (),
        cuisines: Iterable[str] = (),
        favorite: Optional[bool] = None,
    ):
        """Keyword LIKE on name; tastes and cuisines match inside the categories document"""
        if keyword:
            query = query.filter(Recipe.name.like(f"%{keyword}%"))
        for taste in tastes:
            query = query.filter(Recipe.categories.like(f"%{taste}%"))
        for cuisine in cuisines:
            query = query.filter(Recipe.categories.like(f"%{cuisine}%"))
        difficulty = list(difficulty)
        if difficulty:
            query = query.filter(Recipe.difficulty.in_(difficulty))
        if favorite is not None:
            query = query.filter(Recipe.favorite == favorite)
        return query

    def search(self, query, page: int, page_size: int) -> Page:
        return self.paginate(query.order_by(Recipe.created_at.desc()), page, page_size)

    def candidates(self, user_id: str) -> List[Recipe]:
        """Everything the user may cook: own recipes plus public ones"""
        return self.mine_or_public(user_id).order_by(Recipe.created_at).all()

    def count_owned(self, user_id: str) -> int:
        return self.owned(user_id).count()

    def count_owned_favorites(self, user_id: str) -> int:
        return self.owned(user_id).filter(Recipe.favorite.is_(True)).count()


class FavoriteRepository(BaseRepository[UserFavorite]):
    """Repository for favorite marks on recipes the user does not own"""

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, UserFavorite, clock)

    def get(self, user_id: str, recipe_id: str) -> Optional[UserFavorite]:
        return (
            self.query()
            .filter(UserFavorite.user_id == user_id, UserFavorite.recipe_id == recipe_id)
            .first()
        )

    def recipe_ids_for_user(self, user_id: str) -> Set[str]:
        rows = (
            self.query()
            .filter(UserFavorite.user_id == user_id)
            .with_entities(UserFavorite.recipe_id)
            .all()
        )
        return {row[0] for row in rows}

    def count_for_user(self, user_id: str) -> int:
        return self.query().filter(UserFavorite.user_id == user_id).count()
