"""Ingredient category and recipe filter category routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_clock, get_current_user_id
from api.responses import APIResponse, success_response
from app.clock import Clock
from domain.schemas.category_schemas import (
    IngredientCategoryCreate,
    IngredientCategoryUpdate,
    IngredientCategoryResponse,
    RecipeCategoryCreate,
    RecipeCategoryResponse,
)
from services.category_service import CategoryService

router = APIRouter(prefix="/ingredient-categories", tags=["Ingredient Categories"])
recipe_router = APIRouter(prefix="/recipe-categories", tags=["Recipe Categories"])


def get_category_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> CategoryService:
    return CategoryService(db, clock)


def _category(c) -> IngredientCategoryResponse:
    return IngredientCategoryResponse.model_validate(c)


def _recipe_category(c) -> RecipeCategoryResponse:
    return RecipeCategoryResponse.model_validate(c)


# ============================================================================
# Ingredient categories
# ============================================================================


@router.get("", response_model=APIResponse[List[IngredientCategoryResponse]])
def list_ingredient_categories(
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    """System categories plus the caller's own, in display order"""
    categories = service.list_ingredient_categories(user_id)
    return success_response([_category(c) for c in categories])


@router.get("/{category_id}", response_model=APIResponse[IngredientCategoryResponse])
def get_ingredient_category(
    category_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    return success_response(_category(service.get_ingredient_category(user_id, category_id)))


@router.post(
    "",
    response_model=APIResponse[IngredientCategoryResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_ingredient_category(
    payload: IngredientCategoryCreate,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    """Create a category; 409 DUPLICATE_NAME if the name is already visible"""
    category = service.create_ingredient_category(user_id, payload)
    return success_response(_category(category), "Category created")


@router.put("/{category_id}", response_model=APIResponse[IngredientCategoryResponse])
def update_ingredient_category(
    category_id: str,
    payload: IngredientCategoryUpdate,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    category = service.update_ingredient_category(user_id, category_id, payload)
    return success_response(_category(category), "Category updated")


@router.delete("/{category_id}", response_model=APIResponse)
def delete_ingredient_category(
    category_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    """
    Delete a user category.

    - 403 for system categories
    - 409 CATEGORY_IN_USE while ingredients still reference it
    """
    service.delete_ingredient_category(user_id, category_id)
    return success_response(None, "Category deleted")


# ============================================================================
# Recipe filter categories
# ============================================================================


@recipe_router.get("", response_model=APIResponse[List[RecipeCategoryResponse]])
def list_recipe_categories(
    type: Optional[str] = Query(None, description="taste, cuisine, difficulty or meal_type"),
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    categories = service.list_recipe_categories(type)
    return success_response([_recipe_category(c) for c in categories])


@recipe_router.get("/{category_type}", response_model=APIResponse[List[RecipeCategoryResponse]])
def list_recipe_categories_by_type(
    category_type: str,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    categories = service.list_recipe_categories_by_type(category_type)
    return success_response([_recipe_category(c) for c in categories])


@recipe_router.post(
    "",
    response_model=APIResponse[RecipeCategoryResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_recipe_category(
    payload: RecipeCategoryCreate,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    return success_response(_recipe_category(service.create_recipe_category(payload)), "Category created")


@recipe_router.put("/{category_id}", response_model=APIResponse[RecipeCategoryResponse])
def update_recipe_category(
    category_id: str,
    payload: RecipeCategoryCreate,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    category = service.update_recipe_category(category_id, payload)
    return success_response(_recipe_category(category), "Category updated")


@recipe_router.delete("/{category_id}", response_model=APIResponse)
def delete_recipe_category(
    category_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
):
    service.delete_recipe_category(category_id)
    return success_response(None, "Category deleted")
