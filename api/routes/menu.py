"""Today's menu routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_clock, get_current_user_id
from api.responses import APIResponse, success_response
from app.clock import Clock
from domain.schemas.menu_schemas import AddMenuRecipeRequest, MenuResponse
from services.menu_service import MenuService

router = APIRouter(prefix="/today-menu", tags=["Today Menu"])


def get_menu_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> MenuService:
    return MenuService(db, clock)


@router.get("", response_model=APIResponse[MenuResponse])
def get_menu(
    date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    user_id: str = Depends(get_current_user_id),
    service: MenuService = Depends(get_menu_service),
):
    """A day's menu; empty (id null) if nothing is planned"""
    return success_response(service.get_menu(user_id, date))


@router.post("/recipes", response_model=APIResponse[MenuResponse])
def add_menu_recipe(
    payload: AddMenuRecipeRequest,
    user_id: str = Depends(get_current_user_id),
    service: MenuService = Depends(get_menu_service),
):
    """
    Add a recipe to a day's menu.

    Adding a recipe that is already on that day's menu is a no-op.

    Example:
    - POST /today-menu/recipes {"recipeId": "...", "mealType": "lunch"}
    """
    menu = service.add_recipe(user_id, payload.recipe_id, payload.meal_type, payload.date)
    return success_response(menu, "Recipe added to menu")


@router.delete("/recipes/{recipe_id}", response_model=APIResponse[MenuResponse])
def remove_menu_recipe(
    recipe_id: str,
    date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    user_id: str = Depends(get_current_user_id),
    service: MenuService = Depends(get_menu_service),
):
    return success_response(service.remove_recipe(user_id, recipe_id, date), "Recipe removed from menu")
