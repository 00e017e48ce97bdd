"""Family meal ordering"""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.exceptions import ServiceValidationError
from domain.enums import OrderStatus
from domain.mappers import RecipeMapper
from domain.models import MealOrder
from domain.schemas.menu_schemas import OrderCreate, OrderResponse
from repositories import OrderRepository, RecipeRepository, FavoriteRepository, Page
from services.base import BaseService


class OrderService(BaseService):
    """
    Business logic for meal orders.

    Orders start pending and can be confirmed. The completed status exists
    but no operation moves an order into it.
    """

    logger_name = "pantrypal.orders"

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, clock)
        self.orders = OrderRepository(db, clock)
        self.recipes = RecipeRepository(db, clock)
        self.favorites = FavoriteRepository(db, clock)

    @staticmethod
    def _validate_statuses(statuses: Optional[List[str]]) -> List[str]:
        result = []
        for status in statuses or []:
            try:
                result.append(OrderStatus(status).value)
            except ValueError:
                raise ServiceValidationError(f"Invalid order status '{status}'")
        return result

    def create_order(self, user_id: str, payload: OrderCreate) -> OrderResponse:
        if not payload.recipes:
            raise ServiceValidationError("An order needs at least one recipe")
        order = MealOrder.new(
            recipes=[r.model_dump(by_alias=True) for r in payload.recipes],
            status=OrderStatus.PENDING.value,
            owner_user_id=user_id,
        )
        order = self.orders.create(order)
        self.log_info("Created order", user_id=user_id, order_id=order.id, recipes=len(order.recipes))
        return OrderResponse.model_validate(order)

    def confirm_order(self, user_id: str, order_id: str) -> OrderResponse:
        """Confirm an order; confirming twice leaves it confirmed."""
        order = self.orders.get_owned(order_id, user_id)
        if not order:
            raise self.not_found("Order", order_id=order_id, user_id=user_id)
        if order.status != OrderStatus.CONFIRMED.value:
            order.confirm()
            order = self.orders.update(order)
            self.log_info("Confirmed order", user_id=user_id, order_id=order_id)
        return OrderResponse.model_validate(order)

    def list_orders(
        self,
        user_id: str,
        statuses: Optional[List[str]] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Page:
        statuses = self._validate_statuses(statuses)
        return self.orders.list_for_owner(user_id, statuses, page, page_size).map(
            OrderResponse.model_validate
        )

    def list_orderable_recipes(
        self,
        user_id: str,
        keyword: Optional[str] = None,
        tastes: Optional[List[str]] = None,
        cuisines: Optional[List[str]] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Page:
        """The ordering menu: the caller's own recipes plus public ones."""
        query = self.recipes.apply_filters(
            self.recipes.mine_or_public(user_id),
            keyword=keyword,
            tastes=tastes or (),
            cuisines=cuisines or (),
        )
        favorite_ids = self.favorites.recipe_ids_for_user(user_id)
        return self.recipes.search(query, page, page_size).map(
            lambda r: RecipeMapper.to_list_item(r, user_id, favorite_ids)
        )
