"""Daily menu planner"""

from typing import Optional

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.exceptions import ServiceValidationError
from domain.enums import MealType
from domain.models import TodayMenu
from domain.schemas.menu_schemas import MenuResponse
from repositories import MenuRepository, RecipeRepository
from services.base import BaseService
from services.helpers import parse_date, format_date


class MenuService(BaseService):
    """
    Business logic for per-day menus.

    A day's menu row is created lazily by the first recipe added to it;
    reading a day with no row returns an empty, unsaved menu.
    """

    logger_name = "pantrypal.menu"

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, clock)
        self.menus = MenuRepository(db, clock)
        self.recipes = RecipeRepository(db, clock)

    def _day(self, day: Optional[str]) -> str:
        if not day:
            return format_date(self.clock.today())
        return format_date(parse_date(day, "date"))

    @staticmethod
    def _meal_type(meal_type: Optional[str]) -> str:
        if not meal_type:
            return MealType.DINNER.value
        try:
            return MealType(meal_type).value
        except ValueError:
            allowed = ", ".join(m.value for m in MealType)
            raise ServiceValidationError(
                f"Invalid meal type '{meal_type}', expected one of: {allowed}"
            )

    @staticmethod
    def _to_response(menu: TodayMenu) -> MenuResponse:
        return MenuResponse(
            id=menu.id,
            date=menu.date,
            recipes=menu.recipes or [],
            created_at=menu.created_at,
            updated_at=menu.updated_at,
        )

    def get_menu(self, user_id: str, day: Optional[str] = None) -> MenuResponse:
        day = self._day(day)
        menu = self.menus.get_for_day(user_id, day)
        if menu is None:
            return MenuResponse(id=None, date=day, recipes=[])
        return self._to_response(menu)

    def add_recipe(
        self,
        user_id: str,
        recipe_id: str,
        meal_type: Optional[str] = None,
        day: Optional[str] = None,
    ) -> MenuResponse:
        """Add a recipe to a day's menu. Adding one already present changes nothing."""
        day = self._day(day)
        meal_type = self._meal_type(meal_type)
        recipe = self.recipes.get_visible(user_id, recipe_id)
        if not recipe:
            raise self.not_found("Recipe", recipe_id=recipe_id)

        menu = self.menus.get_for_day(user_id, day)
        if menu is None:
            menu = TodayMenu.new(date=day, recipes=[], owner_user_id=user_id)
            menu.add_recipe(recipe.id, recipe.name, meal_type)
            menu = self.menus.create(menu)
            self.log_info("Created menu", user_id=user_id, date=day, recipe_id=recipe_id)
            return self._to_response(menu)

        if menu.add_recipe(recipe.id, recipe.name, meal_type):
            menu = self.menus.update(menu)
            self.log_info("Added recipe to menu", user_id=user_id, date=day, recipe_id=recipe_id)
        return self._to_response(menu)

    def remove_recipe(self, user_id: str, recipe_id: str, day: Optional[str] = None) -> MenuResponse:
        day = self._day(day)
        menu = self.menus.get_for_day(user_id, day)
        if menu is None:
            raise self.not_found("Menu", user_id=user_id, date=day)
        if not menu.remove_recipe(recipe_id):
            raise self.not_found("Menu recipe", date=day, recipe_id=recipe_id)
        menu = self.menus.update(menu)
        self.log_info("Removed recipe from menu", user_id=user_id, date=day, recipe_id=recipe_id)
        return self._to_response(menu)
