"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.common import CamelModel
from domain.schemas.category_schemas import (
    IngredientCategoryCreate,
    IngredientCategoryUpdate,
    IngredientCategoryResponse,
    RecipeCategoryCreate,
    RecipeCategoryResponse,
)
from domain.schemas.inventory_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientItemView,
    IngredientGroup,
    GroupedInventory,
)
from domain.schemas.shopping_schemas import (
    ShoppingItemInput,
    ShoppingListCreate,
    ShoppingListUpdate,
    ShoppingItemCreate,
    ShoppingItemUpdate,
    ShoppingItemResponse,
    ShoppingListResponse,
    ShoppingListSummary,
    ShareLinkResponse,
)
from domain.schemas.menu_schemas import (
    MenuEntry,
    MenuResponse,
    AddMenuRecipeRequest,
    OrderRecipe,
    OrderCreate,
    OrderResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeIngredient,
    RecipeCreate,
    RecipeUpdate,
    RecipeListItem,
    RecipeResponse,
    FavoriteRequest,
    RecommendationRequest,
    RecommendationResponse,
)
from domain.schemas.preference_schemas import (
    MemberPreferences,
    FamilyMemberInput,
    FamilyPreferencesUpdate,
    FamilyMemberResponse,
    UserStatsResponse,
)

__all__ = [
    "CamelModel",
    # Category schemas
    "IngredientCategoryCreate",
    "IngredientCategoryUpdate",
    "IngredientCategoryResponse",
    "RecipeCategoryCreate",
    "RecipeCategoryResponse",
    # Inventory schemas
    "IngredientCreate",
    "IngredientUpdate",
    "IngredientItemView",
    "IngredientGroup",
    "GroupedInventory",
    # Shopping schemas
    "ShoppingItemInput",
    "ShoppingListCreate",
    "ShoppingListUpdate",
    "ShoppingItemCreate",
    "ShoppingItemUpdate",
    "ShoppingItemResponse",
    "ShoppingListResponse",
    "ShoppingListSummary",
    "ShareLinkResponse",
    # Menu / order schemas
    "MenuEntry",
    "MenuResponse",
    "AddMenuRecipeRequest",
    "OrderRecipe",
    "OrderCreate",
    "OrderResponse",
    # Recipe schemas
    "RecipeIngredient",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeListItem",
    "RecipeResponse",
    "FavoriteRequest",
    "RecommendationRequest",
    "RecommendationResponse",
    # Preference / stats schemas
    "MemberPreferences",
    "FamilyMemberInput",
    "FamilyPreferencesUpdate",
    "FamilyMemberResponse",
    "UserStatsResponse",
]
