"""Recipe library and recommendation routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_clock, get_current_user_id, get_page_params, PageParams
from api.responses import APIResponse, PaginatedResponse, success_response, page_response
from app.clock import Clock
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeListItem,
    RecipeResponse,
    FavoriteRequest,
    RecommendationRequest,
    RecommendationResponse,
)
from services.helpers import split_csv
from services.recipe_service import RecipeService
from services.recommendation_service import RecommendationService

router = APIRouter(prefix="/recipes", tags=["Recipes"])


def get_recipe_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> RecipeService:
    return RecipeService(db, clock)


def get_recommendation_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> RecommendationService:
    return RecommendationService(db, clock)


@router.get("", response_model=APIResponse[PaginatedResponse[RecipeListItem]])
def list_my_recipes(
    keyword: Optional[str] = Query(None, description="Substring of the recipe name"),
    tastes: Optional[str] = Query(None, description="Comma-separated"),
    difficulty: Optional[str] = Query(None, description="Comma-separated"),
    cuisines: Optional[str] = Query(None, description="Comma-separated"),
    favorite: Optional[bool] = Query(None),
    paging: PageParams = Depends(get_page_params),
    user_id: str = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    """The caller's own recipes, newest first"""
    page = service.list_mine(
        user_id,
        keyword=keyword,
        tastes=split_csv(tastes),
        difficulty=split_csv(difficulty),
        cuisines=split_csv(cuisines),
        favorite=favorite,
        page=paging.page,
        page_size=paging.page_size,
    )
    return success_response(page_response(page))


@router.get("/public", response_model=APIResponse[PaginatedResponse[RecipeListItem]])
def list_public_recipes(
    keyword: Optional[str] = Query(None),
    tastes: Optional[str] = Query(None, description="Comma-separated"),
    difficulty: Optional[str] = Query(None, description="Comma-separated"),
    cuisines: Optional[str] = Query(None, description="Comma-separated"),
    paging: PageParams = Depends(get_page_params),
    user_id: str = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    page = service.list_public(
        user_id,
        keyword=keyword,
        tastes=split_csv(tastes),
        difficulty=split_csv(difficulty),
        cuisines=split_csv(cuisines),
        page=paging.page,
        page_size=paging.page_size,
    )
    return success_response(page_response(page))


@router.post("/random", response_model=APIResponse[RecommendationResponse])
def recommend_recipe(
    payload: RecommendationRequest,
    user_id: str = Depends(get_current_user_id),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """
    Suggest one recipe.

    Modes:
    - inventory: uses what is in the pantry
    - quick: ready within maxTime minutes (default 20)
    - random: anything (also used for unknown modes)
    """
    result = service.recommend(user_id, payload.mode, payload.max_time)
    message = "Recommendation ready" if result.recipe else "No recommendation"
    return success_response(result, message)


@router.get("/{recipe_id}", response_model=APIResponse[RecipeResponse])
def get_recipe(
    recipe_id: str,
    user_id: str = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return success_response(service.get(user_id, recipe_id))


@router.post("", response_model=APIResponse[RecipeResponse], status_code=status.HTTP_201_CREATED)
def create_recipe(
    payload: RecipeCreate,
    user_id: str = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return success_response(service.create(user_id, payload), "Recipe created")


@router.put("/{recipe_id}", response_model=APIResponse[RecipeResponse])
def update_recipe(
    recipe_id: str,
    payload: RecipeUpdate,
    user_id: str = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return success_response(service.update(user_id, recipe_id, payload), "Recipe updated")


@router.delete("/{recipe_id}", response_model=APIResponse)
def delete_recipe(
    recipe_id: str,
    user_id: str = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    service.delete(user_id, recipe_id)
    return success_response(None, "Recipe deleted")


@router.put("/{recipe_id}/favorite", response_model=APIResponse[RecipeResponse])
def set_favorite(
    recipe_id: str,
    payload: FavoriteRequest,
    user_id: str = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return success_response(service.set_favorite(user_id, recipe_id, payload.favorite))


@router.post(
    "/{recipe_id}/clone",
    response_model=APIResponse[RecipeResponse],
    status_code=status.HTTP_201_CREATED,
)
def clone_recipe(
    recipe_id: str,
    user_id: str = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    """Copy a public recipe into the caller's private collection"""
    return success_response(service.clone_to_mine(user_id, recipe_id), "Recipe cloned")
