"""Pantry inventory routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_clock, get_current_user_id
from api.responses import APIResponse, success_response
from app.clock import Clock
from domain.schemas.inventory_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientItemView,
    GroupedInventory,
)
from services.inventory_service import InventoryService

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])


def get_inventory_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> InventoryService:
    return InventoryService(db, clock)


@router.get("", response_model=APIResponse[List[IngredientItemView]])
def list_ingredients(
    storage: Optional[str] = Query(None, description="room, fridge or freezer"),
    category: Optional[str] = Query(
        None, description="Legacy alias for storage, kept for older clients"
    ),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    urgent: bool = Query(False, description="Only items expiring today or earlier"),
    expiring_days: Optional[int] = Query(
        None, alias="expiringDays", ge=0, description="Only items expiring within N days"
    ),
    user_id: str = Depends(get_current_user_id),
    service: InventoryService = Depends(get_inventory_service),
):
    """
    List pantry items, soonest expiry first.

    Each item carries ``expiryDays``, ``expiryText`` and ``urgent``.

    Examples:
    - GET /ingredients?urgent=true - expired or expiring today
    - GET /ingredients?expiringDays=3 - expiring within three days
    - GET /ingredients?storage=freezer
    """
    items = service.list(
        user_id,
        storage=storage or category,
        category_id=category_id,
        urgent_only=urgent,
        expiring_within_days=expiring_days,
    )
    return success_response(items)


@router.get("/grouped", response_model=APIResponse[GroupedInventory])
def list_grouped_ingredients(
    storage: Optional[str] = Query(None, description="room, fridge or freezer"),
    user_id: str = Depends(get_current_user_id),
    service: InventoryService = Depends(get_inventory_service),
):
    """Items grouped by category, uncategorized last"""
    return success_response(service.list_grouped(user_id, storage))


@router.get("/expiring", response_model=APIResponse[List[IngredientItemView]])
def list_expiring_ingredients(
    days: Optional[int] = Query(None, ge=0, le=365, description="Window in days (default 3)"),
    user_id: str = Depends(get_current_user_id),
    service: InventoryService = Depends(get_inventory_service),
):
    return success_response(service.list_expiring_soon(user_id, days))


@router.get("/batches", response_model=APIResponse[List[IngredientItemView]])
def list_ingredient_batches(
    name: str = Query("", description="Exact ingredient name"),
    user_id: str = Depends(get_current_user_id),
    service: InventoryService = Depends(get_inventory_service),
):
    """All purchase batches of one ingredient"""
    return success_response(service.list_batches(user_id, name))


@router.get("/{item_id}", response_model=APIResponse[IngredientItemView])
def get_ingredient(
    item_id: str,
    user_id: str = Depends(get_current_user_id),
    service: InventoryService = Depends(get_inventory_service),
):
    return success_response(service.get(user_id, item_id))


@router.post("", response_model=APIResponse[IngredientItemView], status_code=status.HTTP_201_CREATED)
def create_ingredient(
    payload: IngredientCreate,
    user_id: str = Depends(get_current_user_id),
    service: InventoryService = Depends(get_inventory_service),
):
    """Add an ingredient batch (expiry defaults to seven days from today)"""
    return success_response(service.create(user_id, payload), "Ingredient added")


@router.put("/{item_id}", response_model=APIResponse[IngredientItemView])
def update_ingredient(
    item_id: str,
    payload: IngredientUpdate,
    user_id: str = Depends(get_current_user_id),
    service: InventoryService = Depends(get_inventory_service),
):
    return success_response(service.update(user_id, item_id, payload), "Ingredient updated")


@router.delete("/{item_id}", response_model=APIResponse)
def delete_ingredient(
    item_id: str,
    user_id: str = Depends(get_current_user_id),
    service: InventoryService = Depends(get_inventory_service),
):
    service.delete(user_id, item_id)
    return success_response(None, "Ingredient deleted")
