"""
Recipe domain mappers.

The ``favorite`` flag is viewer-relative: owners see the recipe's own
boolean, everyone else sees whether they hold a favorite mark on it.
"""

from typing import Collection, Optional

from domain.models import Recipe
from domain.schemas.recipe_schemas import RecipeListItem, RecipeResponse


def _viewer_favorite(recipe: Recipe, viewer_id: Optional[str], favorite_ids: Collection[str]) -> bool:
    if viewer_id is not None and recipe.owner_user_id == viewer_id:
        return bool(recipe.favorite)
    return recipe.id in favorite_ids


class RecipeMapper:
    """Mapper for recipe transformations."""

    @staticmethod
    def to_list_item(
        recipe: Recipe, viewer_id: Optional[str] = None, favorite_ids: Collection[str] = ()
    ) -> RecipeListItem:
        return RecipeListItem(
            id=recipe.id,
            name=recipe.name,
            image=recipe.image or "",
            time=recipe.time or "",
            difficulty=recipe.difficulty or "",
            tags=recipe.tags or [],
            tag_colors=recipe.tag_colors or [],
            favorite=_viewer_favorite(recipe, viewer_id, favorite_ids),
            categories=recipe.categories or [],
        )

    @staticmethod
    def to_response(
        recipe: Recipe, viewer_id: Optional[str] = None, favorite_ids: Collection[str] = ()
    ) -> RecipeResponse:
        return RecipeResponse(
            id=recipe.id,
            name=recipe.name,
            image=recipe.image or "",
            time=recipe.time or "",
            difficulty=recipe.difficulty or "",
            tags=recipe.tags or [],
            tag_colors=recipe.tag_colors or [],
            favorite=_viewer_favorite(recipe, viewer_id, favorite_ids),
            categories=recipe.categories or [],
            ingredients=recipe.ingredients or [],
            steps=recipe.steps or [],
            owner_user_id=recipe.owner_user_id,
            is_public=bool(recipe.is_public),
            created_at=recipe.created_at,
            updated_at=recipe.updated_at,
        )
