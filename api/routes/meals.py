"""Family meal ordering routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_clock, get_current_user_id, get_page_params, PageParams
from api.responses import APIResponse, PaginatedResponse, success_response, page_response
from app.clock import Clock
from domain.schemas.menu_schemas import OrderCreate, OrderResponse
from domain.schemas.recipe_schemas import RecipeListItem
from services.helpers import split_csv
from services.order_service import OrderService

router = APIRouter(prefix="/meals", tags=["Meal Orders"])


def get_order_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> OrderService:
    return OrderService(db, clock)


@router.get("/recipes", response_model=APIResponse[PaginatedResponse[RecipeListItem]])
def list_orderable_recipes(
    keyword: Optional[str] = Query(None),
    tastes: Optional[str] = Query(None, description="Comma-separated"),
    cuisines: Optional[str] = Query(None, description="Comma-separated"),
    paging: PageParams = Depends(get_page_params),
    user_id: str = Depends(get_current_user_id),
    service: OrderService = Depends(get_order_service),
):
    """Recipes the family can order from: the caller's own plus public ones"""
    page = service.list_orderable_recipes(
        user_id,
        keyword=keyword,
        tastes=split_csv(tastes),
        cuisines=split_csv(cuisines),
        page=paging.page,
        page_size=paging.page_size,
    )
    return success_response(page_response(page))


@router.post("/orders", response_model=APIResponse[OrderResponse], status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    user_id: str = Depends(get_current_user_id),
    service: OrderService = Depends(get_order_service),
):
    return success_response(service.create_order(user_id, payload), "Order created")


@router.get("/orders", response_model=APIResponse[PaginatedResponse[OrderResponse]])
def list_orders(
    status_filter: Optional[str] = Query(
        None, alias="status", description="Comma-separated, e.g. pending,confirmed"
    ),
    paging: PageParams = Depends(get_page_params),
    user_id: str = Depends(get_current_user_id),
    service: OrderService = Depends(get_order_service),
):
    page = service.list_orders(user_id, split_csv(status_filter), paging.page, paging.page_size)
    return success_response(page_response(page))


@router.post("/orders/{order_id}/confirm", response_model=APIResponse[OrderResponse])
def confirm_order(
    order_id: str,
    user_id: str = Depends(get_current_user_id),
    service: OrderService = Depends(get_order_service),
):
    return success_response(service.confirm_order(user_id, order_id), "Order confirmed")
