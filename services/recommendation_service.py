"""Recipe recommendation: filter candidates by mode, then pick one uniformly"""

import random
from typing import List, Optional

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.config import settings
from domain.enums import RecommendationMode
from domain.mappers import RecipeMapper
from domain.models import Recipe
from domain.schemas.recipe_schemas import RecommendationResponse
from repositories import RecipeRepository, InventoryRepository, FavoriteRepository
from services.base import BaseService
from services.helpers import names_overlap, parse_minutes

# One generator for the whole process, seeded once at import
_rng = random.Random()

REASON_INVENTORY = "Picked from recipes that use what is in your pantry"
REASON_NO_INVENTORY = "Random pick (your pantry is empty)"
REASON_QUICK = "Quick recipe, ready within {minutes} minutes"
REASON_RANDOM = "Random pick"
REASON_NONE = "no matching recipes"


class RecommendationService(BaseService):
    """Suggests one recipe from the caller's own and public recipes."""

    logger_name = "pantrypal.recommendations"

    def __init__(self, db: Session, clock: Clock = system_clock, rng: Optional[random.Random] = None):
        super().__init__(db, clock)
        self.rng = rng or _rng
        self.recipes = RecipeRepository(db, clock)
        self.items = InventoryRepository(db, clock)
        self.favorites = FavoriteRepository(db, clock)

    def _mode(self, mode: Optional[str]) -> RecommendationMode:
        """Unknown or missing modes fall back to random"""
        if not mode:
            return RecommendationMode.RANDOM
        try:
            return RecommendationMode(mode.strip().lower())
        except ValueError:
            self.log_warning("Unknown recommendation mode, using random", mode=mode)
            return RecommendationMode.RANDOM

    def _inventory_matches(self, user_id: str, candidates: List[Recipe]):
        pantry = self.items.names_for_owner(user_id)
        if not pantry:
            return candidates, REASON_NO_INVENTORY
        matched = [
            recipe
            for recipe in candidates
            if any(
                names_overlap(ingredient.get("name", ""), pantry)
                for ingredient in (recipe.ingredients or [])
            )
        ]
        return matched, REASON_INVENTORY

    @staticmethod
    def _quick(candidates: List[Recipe], max_time: int) -> List[Recipe]:
        result = []
        for recipe in candidates:
            minutes = parse_minutes(recipe.time)
            if minutes is not None and minutes <= max_time:
                result.append(recipe)
        return result

    def recommend(
        self, user_id: str, mode: Optional[str] = None, max_time: Optional[int] = None
    ) -> RecommendationResponse:
        """
        Pick one recipe for the given mode.

        Modes:
            inventory: recipes sharing an ingredient name with the pantry
            quick: recipes whose duration is at most ``max_time`` minutes
            random: any candidate
        """
        selected_mode = self._mode(mode)
        candidates = self.recipes.candidates(user_id)

        if selected_mode == RecommendationMode.INVENTORY:
            candidates, reason = self._inventory_matches(user_id, candidates)
        elif selected_mode == RecommendationMode.QUICK:
            minutes = max_time or settings.quick_recipe_minutes
            candidates = self._quick(candidates, minutes)
            reason = REASON_QUICK.format(minutes=minutes)
        else:
            reason = REASON_RANDOM

        if not candidates:
            self.log_info("No recommendation", user_id=user_id, mode=selected_mode.value)
            return RecommendationResponse(recipe=None, reason=REASON_NONE)

        recipe = self.rng.choice(candidates)
        favorite_ids = self.favorites.recipe_ids_for_user(user_id)
        self.log_info(
            "Recommended recipe",
            user_id=user_id,
            mode=selected_mode.value,
            recipe_id=recipe.id,
            candidates=len(candidates),
        )
        return RecommendationResponse(
            recipe=RecipeMapper.to_list_item(recipe, user_id, favorite_ids), reason=reason
        )
