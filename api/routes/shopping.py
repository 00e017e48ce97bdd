"""Shopping list routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_clock, get_current_user_id, get_page_params, PageParams
from api.responses import APIResponse, PaginatedResponse, success_response, page_response
from app.clock import Clock
from domain.schemas.shopping_schemas import (
    ShoppingListCreate,
    ShoppingListUpdate,
    ShoppingItemCreate,
    ShoppingItemUpdate,
    ShoppingItemResponse,
    ShoppingListResponse,
    ShoppingListSummary,
    ShareLinkResponse,
)
from services.shopping_service import ShoppingService

router = APIRouter(prefix="/shopping-lists", tags=["Shopping Lists"])


def get_shopping_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> ShoppingService:
    return ShoppingService(db, clock)


@router.get("/current", response_model=APIResponse[ShoppingListResponse])
def get_current_list(
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    """Newest open list; an unsaved empty list (id null) if there is none"""
    return success_response(service.get_current(user_id))


@router.get("/history", response_model=APIResponse[PaginatedResponse[ShoppingListSummary]])
def get_history(
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD, inclusive"),
    paging: PageParams = Depends(get_page_params),
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    page = service.history(user_id, start_date, end_date, paging.page, paging.page_size)
    return success_response(page_response(page))


@router.get("", response_model=APIResponse[PaginatedResponse[ShoppingListResponse]])
def list_shopping_lists(
    completed: Optional[bool] = Query(None),
    paging: PageParams = Depends(get_page_params),
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    page = service.list(user_id, completed, paging.page, paging.page_size)
    return success_response(page_response(page))


@router.post("", response_model=APIResponse[ShoppingListResponse], status_code=status.HTTP_201_CREATED)
def create_shopping_list(
    payload: ShoppingListCreate,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    return success_response(service.create(user_id, payload), "Shopping list created")


@router.get("/{list_id}", response_model=APIResponse[ShoppingListResponse])
def get_shopping_list(
    list_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    return success_response(service.get(user_id, list_id))


@router.put("/{list_id}", response_model=APIResponse[ShoppingListResponse])
def update_shopping_list(
    list_id: str,
    payload: ShoppingListUpdate,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    return success_response(service.update(user_id, list_id, payload), "Shopping list updated")


@router.delete("/{list_id}", response_model=APIResponse)
def delete_shopping_list(
    list_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    service.delete(user_id, list_id)
    return success_response(None, "Shopping list deleted")


@router.post(
    "/{list_id}/items",
    response_model=APIResponse[ShoppingItemResponse],
    status_code=status.HTTP_201_CREATED,
)
def add_item(
    list_id: str,
    payload: ShoppingItemCreate,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    return success_response(service.add_item(user_id, list_id, payload), "Item added")


@router.put("/{list_id}/items/{item_id}", response_model=APIResponse[ShoppingItemResponse])
def update_item(
    list_id: str,
    item_id: str,
    payload: ShoppingItemUpdate,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    return success_response(service.update_item(user_id, list_id, item_id, payload), "Item updated")


@router.delete("/{list_id}/items/{item_id}", response_model=APIResponse[ShoppingListResponse])
def remove_item(
    list_id: str,
    item_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    return success_response(service.remove_item(user_id, list_id, item_id), "Item removed")


@router.post("/{list_id}/complete", response_model=APIResponse[ShoppingListResponse])
def complete_shopping_list(
    list_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    return success_response(service.complete(user_id, list_id), "Shopping list completed")


@router.post("/{list_id}/share", response_model=APIResponse[ShareLinkResponse])
def share_shopping_list(
    list_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ShoppingService = Depends(get_shopping_service),
):
    return success_response(service.share(user_id, list_id))
