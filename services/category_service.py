"""Category registry: food-type categories and recipe filter categories"""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.exceptions import (
    ServiceValidationError,
    ForbiddenError,
    DuplicateNameError,
    CategoryInUseError,
)
from domain.enums import RecipeCategoryType
from domain.models import IngredientCategory, RecipeCategory
from domain.schemas.category_schemas import (
    IngredientCategoryCreate,
    IngredientCategoryUpdate,
    RecipeCategoryCreate,
)
from domain.seeds import DEFAULT_INGREDIENT_CATEGORIES, DEFAULT_RECIPE_CATEGORIES
from repositories import (
    IngredientCategoryRepository,
    RecipeCategoryRepository,
    InventoryRepository,
)
from services.base import BaseService

DEFAULT_ICON = "📦"
DEFAULT_COLOR = "#9E9E9E"


class CategoryService(BaseService):
    """Business logic for both category taxonomies."""

    logger_name = "pantrypal.categories"

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, clock)
        self.categories = IngredientCategoryRepository(db, clock)
        self.recipe_categories = RecipeCategoryRepository(db, clock)
        self.items = InventoryRepository(db, clock)

    # ------------------------------------------------------------------
    # Ingredient categories
    # ------------------------------------------------------------------

    def list_ingredient_categories(self, user_id: str) -> List[IngredientCategory]:
        """System categories plus the caller's own, by sort order then creation."""
        return self.categories.list_visible(user_id)

    def get_ingredient_category(self, user_id: str, category_id: str) -> IngredientCategory:
        category = self.categories.get_visible(user_id, category_id)
        if not category:
            raise self.not_found("Category", category_id=category_id)
        return category

    def create_ingredient_category(
        self, user_id: str, payload: IngredientCategoryCreate
    ) -> IngredientCategory:
        """
        Create a user-owned category.

        Raises:
            ServiceValidationError: blank name
            DuplicateNameError: a system or own category already uses the name
        """
        name = (payload.name or "").strip()
        if not name:
            raise ServiceValidationError("Category name is required")
        if self.categories.find_visible_by_name(user_id, name):
            self.log_warning("Duplicate category name", user_id=user_id, name=name)
            raise DuplicateNameError(f"Category '{name}' already exists")

        category = IngredientCategory.new(
            name=name,
            icon=payload.icon or DEFAULT_ICON,
            color=payload.color or DEFAULT_COLOR,
            sort_order=payload.sort_order or 0,
            is_system=False,
            owner_user_id=user_id,
        )
        category = self.categories.create(category)
        self.log_info("Created category", user_id=user_id, category_id=category.id)
        return category

    def _owned_user_category(self, user_id: str, category_id: str) -> IngredientCategory:
        # System categories are rejected before ownership is considered
        visible = self.categories.get_visible(user_id, category_id)
        if visible is not None and visible.is_system:
            self.log_warning("Attempt to modify system category", user_id=user_id, category_id=category_id)
            raise ForbiddenError("System categories cannot be modified")
        category = self.categories.get_user_owned(user_id, category_id)
        if not category:
            raise self.not_found("Category", category_id=category_id)
        return category

    def update_ingredient_category(
        self, user_id: str, category_id: str, patch: IngredientCategoryUpdate
    ) -> IngredientCategory:
        """Apply non-empty fields; sortOrder only when greater than zero."""
        category = self._owned_user_category(user_id, category_id)

        if patch.name:
            name = patch.name.strip()
            if name and name != category.name:
                if self.categories.find_visible_by_name(user_id, name, exclude_id=category.id):
                    raise DuplicateNameError(f"Category '{name}' already exists")
                category.name = name
        if patch.icon:
            category.icon = patch.icon
        if patch.color:
            category.color = patch.color
        if patch.sort_order and patch.sort_order > 0:
            category.sort_order = patch.sort_order

        category = self.categories.update(category)
        self.log_info("Updated category", user_id=user_id, category_id=category_id)
        return category

    def delete_ingredient_category(self, user_id: str, category_id: str) -> None:
        """
        Soft-delete a user category.

        Raises:
            ForbiddenError: system category, whatever its usage
            NotFoundError: not owned by the caller
            CategoryInUseError: the caller still has items in it
        """
        category = self._owned_user_category(user_id, category_id)
        in_use = self.items.count_in_category(user_id, category_id)
        if in_use:
            self.log_warning("Category still in use", category_id=category_id, items=in_use)
            raise CategoryInUseError(
                "Category still has ingredients; move or delete them first",
                details={"category_id": category_id, "item_count": in_use},
            )
        self.categories.soft_delete(category, self.clock.now())
        self.log_info("Deleted category", user_id=user_id, category_id=category_id)

    # ------------------------------------------------------------------
    # Recipe filter categories
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_type(category_type: str) -> str:
        try:
            return RecipeCategoryType(category_type).value
        except ValueError:
            allowed = ", ".join(t.value for t in RecipeCategoryType)
            raise ServiceValidationError(
                f"Invalid category type '{category_type}', expected one of: {allowed}"
            )

    def list_recipe_categories(self, category_type: Optional[str] = None) -> List[RecipeCategory]:
        if category_type:
            category_type = self._validate_type(category_type)
        return self.recipe_categories.list_active(category_type)

    def list_recipe_categories_by_type(self, category_type: str) -> List[RecipeCategory]:
        return self.recipe_categories.list_active(self._validate_type(category_type))

    def create_recipe_category(self, payload: RecipeCategoryCreate) -> RecipeCategory:
        category = RecipeCategory.new(
            type=self._validate_type(payload.type),
            name=payload.name,
            color=payload.color,
            icon=payload.icon,
            sort_order=payload.sort_order,
            is_active=payload.is_active,
        )
        category = self.recipe_categories.create(category)
        self.log_info("Created recipe category", category_id=category.id, type=category.type)
        return category

    def update_recipe_category(self, category_id: str, payload: RecipeCategoryCreate) -> RecipeCategory:
        """Full replacement of the editable fields."""
        category = self.recipe_categories.get_by_id(category_id)
        if not category:
            raise self.not_found("Recipe category", category_id=category_id)
        category.type = self._validate_type(payload.type)
        category.name = payload.name
        category.color = payload.color
        category.icon = payload.icon
        category.sort_order = payload.sort_order
        category.is_active = payload.is_active
        category = self.recipe_categories.update(category)
        self.log_info("Updated recipe category", category_id=category_id)
        return category

    def delete_recipe_category(self, category_id: str) -> None:
        category = self.recipe_categories.get_by_id(category_id)
        if not category:
            raise self.not_found("Recipe category", category_id=category_id)
        self.recipe_categories.delete(category)
        self.log_info("Deleted recipe category", category_id=category_id)

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def seed_defaults(self) -> int:
        """Insert any missing default rows by stable id. Returns how many were added."""
        created = []
        for row in DEFAULT_INGREDIENT_CATEGORIES:
            if not self.categories.exists_any(row["id"]):
                created.append(IngredientCategory(is_system=True, owner_user_id=None, **row))
                self.log_info("Seeding ingredient category", name=row["name"])
        for row in DEFAULT_RECIPE_CATEGORIES:
            if not self.recipe_categories.exists_any(row["id"]):
                created.append(RecipeCategory(is_active=True, **row))
                self.log_info("Seeding recipe category", type=row["type"], name=row["name"])
        if created:
            self.categories.create_many(created)
        return len(created)
