"""Recipe library: private and public recipes, favorites and cloning"""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.exceptions import ServiceValidationError, ForbiddenError
from domain.mappers import RecipeMapper
from domain.models import Recipe, UserFavorite
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate, RecipeResponse
from repositories import RecipeRepository, FavoriteRepository, Page
from services.base import BaseService


class RecipeService(BaseService):
    """Business logic for the recipe library."""

    logger_name = "pantrypal.recipes"

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, clock)
        self.recipes = RecipeRepository(db, clock)
        self.favorites = FavoriteRepository(db, clock)

    def _response(self, recipe: Recipe, user_id: Optional[str]) -> RecipeResponse:
        favorite_ids = self.favorites.recipe_ids_for_user(user_id) if user_id else set()
        return RecipeMapper.to_response(recipe, user_id, favorite_ids)

    def _owned_for_write(self, user_id: str, recipe_id: str) -> Recipe:
        recipe = self.recipes.get_by_id(recipe_id)
        if not recipe:
            raise self.not_found("Recipe", recipe_id=recipe_id)
        if recipe.owner_user_id != user_id:
            self.log_warning("Recipe write by non-owner", user_id=user_id, recipe_id=recipe_id)
            raise ForbiddenError("Only the owner can modify this recipe")
        return recipe

    @staticmethod
    def _fields(payload: RecipeCreate) -> dict:
        name = (payload.name or "").strip()
        if not name:
            raise ServiceValidationError("Recipe name is required")
        data = payload.model_dump()
        data["name"] = name
        # Document columns store the camelCase wire shape
        data["ingredients"] = [i.model_dump(by_alias=True) for i in payload.ingredients]
        return data

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_mine(
        self,
        user_id: str,
        keyword: Optional[str] = None,
        tastes: Optional[List[str]] = None,
        difficulty: Optional[List[str]] = None,
        cuisines: Optional[List[str]] = None,
        favorite: Optional[bool] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Page:
        query = self.recipes.apply_filters(
            self.recipes.owned(user_id),
            keyword=keyword,
            tastes=tastes or (),
            difficulty=difficulty or (),
            cuisines=cuisines or (),
            favorite=favorite,
        )
        return self.recipes.search(query, page, page_size).map(
            lambda r: RecipeMapper.to_list_item(r, user_id)
        )

    def list_public(
        self,
        user_id: Optional[str] = None,
        keyword: Optional[str] = None,
        tastes: Optional[List[str]] = None,
        difficulty: Optional[List[str]] = None,
        cuisines: Optional[List[str]] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Page:
        query = self.recipes.apply_filters(
            self.recipes.public(),
            keyword=keyword,
            tastes=tastes or (),
            difficulty=difficulty or (),
            cuisines=cuisines or (),
        )
        favorite_ids = self.favorites.recipe_ids_for_user(user_id) if user_id else set()
        return self.recipes.search(query, page, page_size).map(
            lambda r: RecipeMapper.to_list_item(r, user_id, favorite_ids)
        )

    def get(self, user_id: str, recipe_id: str) -> RecipeResponse:
        recipe = self.recipes.get_visible(user_id, recipe_id)
        if not recipe:
            raise self.not_found("Recipe", recipe_id=recipe_id)
        return self._response(recipe, user_id)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, user_id: str, payload: RecipeCreate) -> RecipeResponse:
        recipe = Recipe.new(owner_user_id=user_id, favorite=False, **self._fields(payload))
        recipe = self.recipes.create(recipe)
        self.log_info("Created recipe", user_id=user_id, recipe_id=recipe.id)
        return self._response(recipe, user_id)

    def update(self, user_id: str, recipe_id: str, payload: RecipeUpdate) -> RecipeResponse:
        recipe = self._owned_for_write(user_id, recipe_id)
        for key, value in self._fields(payload).items():
            setattr(recipe, key, value)
        recipe = self.recipes.update(recipe)
        self.log_info("Updated recipe", user_id=user_id, recipe_id=recipe_id)
        return self._response(recipe, user_id)

    def delete(self, user_id: str, recipe_id: str) -> None:
        recipe = self._owned_for_write(user_id, recipe_id)
        self.recipes.soft_delete(recipe, self.clock.now())
        self.log_info("Deleted recipe", user_id=user_id, recipe_id=recipe_id)

    def set_favorite(self, user_id: str, recipe_id: str, favorite: bool) -> RecipeResponse:
        """
        Mark or unmark a recipe as favorite.

        Owned recipes carry the flag themselves; for anyone else's (public)
        recipe a UserFavorite row is added or removed.
        """
        recipe = self.recipes.get_visible(user_id, recipe_id)
        if not recipe:
            raise self.not_found("Recipe", recipe_id=recipe_id)

        if recipe.owner_user_id == user_id:
            recipe.favorite = favorite
            recipe = self.recipes.update(recipe)
        else:
            existing = self.favorites.get(user_id, recipe_id)
            if favorite and existing is None:
                self.favorites.create(UserFavorite.new(user_id=user_id, recipe_id=recipe_id))
            elif not favorite and existing is not None:
                self.favorites.delete(existing)
        self.log_info("Set favorite", user_id=user_id, recipe_id=recipe_id, favorite=favorite)
        return self._response(recipe, user_id)

    def clone_to_mine(self, user_id: str, recipe_id: str) -> RecipeResponse:
        """Copy a visible recipe into a new private recipe owned by the caller."""
        source = self.recipes.get_visible(user_id, recipe_id)
        if not source:
            raise self.not_found("Recipe", recipe_id=recipe_id)
        copy = Recipe.new(
            name=source.name,
            image=source.image,
            time=source.time,
            difficulty=source.difficulty,
            tags=list(source.tags or []),
            tag_colors=list(source.tag_colors or []),
            categories=list(source.categories or []),
            ingredients=[dict(i) for i in (source.ingredients or [])],
            steps=list(source.steps or []),
            owner_user_id=user_id,
            is_public=False,
            favorite=False,
        )
        copy = self.recipes.create(copy)
        self.log_info("Cloned recipe", user_id=user_id, source_id=recipe_id, recipe_id=copy.id)
        return self._response(copy, user_id)
