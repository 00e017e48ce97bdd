"""
Daily menu and family meal order models.
"""

from sqlalchemy import Column, String, UniqueConstraint

from domain.enums import OrderStatus
from domain.models.database import Base
from domain.models.types import EntityMixin, SoftDeleteMixin, JSONDocument


class TodayMenu(EntityMixin, SoftDeleteMixin, Base):
    """Recipes planned for one calendar day"""

    __tablename__ = "today_menu"

    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    # [{"recipeId", "recipeName", "mealType"}, ...]
    recipes = Column(JSONDocument(), nullable=False, default=list)
    owner_user_id = Column(String(64), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("owner_user_id", "date", name="uq_menu_owner_date"),
    )

    def has_recipe(self, recipe_id: str) -> bool:
        return any(r.get("recipeId") == recipe_id for r in (self.recipes or []))

    def add_recipe(self, recipe_id: str, recipe_name: str, meal_type: str) -> bool:
        """Append an entry; returns False when the recipe is already on the menu."""
        if self.has_recipe(recipe_id):
            return False
        entry = {"recipeId": recipe_id, "recipeName": recipe_name, "mealType": meal_type}
        self.recipes = list(self.recipes or []) + [entry]
        return True

    def remove_recipe(self, recipe_id: str) -> bool:
        entries = list(self.recipes or [])
        remaining = [r for r in entries if r.get("recipeId") != recipe_id]
        if len(remaining) == len(entries):
            return False
        self.recipes = remaining
        return True


class MealOrder(EntityMixin, SoftDeleteMixin, Base):
    """A family meal order: pending until confirmed"""

    __tablename__ = "meal_order"

    # [{"recipeId", "recipeName"}, ...]
    recipes = Column(JSONDocument(), nullable=False, default=list)
    status = Column(
        String(16), nullable=False, default=OrderStatus.PENDING.value, index=True
    )
    owner_user_id = Column(String(64), nullable=False, index=True)

    def confirm(self) -> None:
        self.status = OrderStatus.CONFIRMED.value
