"""Shopping list service"""

import secrets
import string
from typing import Optional

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.config import settings
from app.exceptions import ServiceValidationError
from domain.mappers import ShoppingMapper
from domain.models import ShoppingList, DEFAULT_LIST_NAME
from domain.schemas.shopping_schemas import (
    ShoppingListCreate,
    ShoppingListUpdate,
    ShoppingItemCreate,
    ShoppingItemUpdate,
    ShoppingItemResponse,
    ShoppingListResponse,
    ShareLinkResponse,
)
from repositories import ShoppingListRepository, Page
from services.base import BaseService
from services.helpers import day_range

SHARE_CODE_ALPHABET = string.ascii_letters + string.digits
SHARE_CODE_LENGTH = 8


class ShoppingService(BaseService):
    """
    Business logic for shopping lists.

    Item mutations read the list, change the item collection in memory and
    write the whole collection back. Two concurrent mutations of the same
    list can therefore lose one of the writes; no locking is attempted.
    """

    logger_name = "pantrypal.shopping"

    def __init__(self, db: Session, clock: Clock = system_clock):
        super().__init__(db, clock)
        self.lists = ShoppingListRepository(db, clock)

    def _get_owned(self, user_id: str, list_id: str) -> ShoppingList:
        shopping_list = self.lists.get_owned(list_id, user_id)
        if not shopping_list:
            raise self.not_found("Shopping list", list_id=list_id, user_id=user_id)
        return shopping_list

    def get_current(self, user_id: str) -> ShoppingListResponse:
        """Newest open list, or an unsaved empty placeholder."""
        shopping_list = self.lists.latest_open(user_id)
        if shopping_list is None:
            return ShoppingMapper.empty_list()
        return ShoppingMapper.to_response(shopping_list)

    def get(self, user_id: str, list_id: str) -> ShoppingListResponse:
        return ShoppingMapper.to_response(self._get_owned(user_id, list_id))

    def list(
        self, user_id: str, completed: Optional[bool] = None, page: int = 1, page_size: int = 20
    ) -> Page:
        return self.lists.list_for_owner(user_id, completed, page, page_size).map(
            ShoppingMapper.to_response
        )

    def create(self, user_id: str, payload: ShoppingListCreate) -> ShoppingListResponse:
        shopping_list = ShoppingList.new(
            name=(payload.name or "").strip() or DEFAULT_LIST_NAME,
            owner_user_id=user_id,
        )
        shopping_list.set_items([i.model_dump() for i in payload.items])
        shopping_list = self.lists.create(shopping_list)
        self.log_info(
            "Created shopping list",
            user_id=user_id,
            list_id=shopping_list.id,
            items=len(shopping_list.items),
        )
        return ShoppingMapper.to_response(shopping_list)

    def update(self, user_id: str, list_id: str, payload: ShoppingListUpdate) -> ShoppingListResponse:
        shopping_list = self._get_owned(user_id, list_id)
        if payload.name:
            shopping_list.name = payload.name
        if payload.items is not None:
            shopping_list.set_items([i.model_dump() for i in payload.items])
        shopping_list = self.lists.update(shopping_list)
        self.log_info("Updated shopping list", user_id=user_id, list_id=list_id)
        return ShoppingMapper.to_response(shopping_list)

    def delete(self, user_id: str, list_id: str) -> None:
        shopping_list = self._get_owned(user_id, list_id)
        self.lists.soft_delete(shopping_list, self.clock.now())
        self.log_info("Deleted shopping list", user_id=user_id, list_id=list_id)

    def add_item(self, user_id: str, list_id: str, payload: ShoppingItemCreate) -> ShoppingItemResponse:
        name = (payload.name or "").strip()
        if not name:
            raise ServiceValidationError("Item name is required")
        shopping_list = self._get_owned(user_id, list_id)
        item = shopping_list.add_item(
            {"name": name, "amount": payload.amount, "price": payload.price, "checked": False}
        )
        self.lists.update(shopping_list)
        self.log_info("Added shopping item", list_id=list_id, item_id=item["id"])
        return ShoppingItemResponse.model_validate(item)

    def update_item(
        self, user_id: str, list_id: str, item_id: str, patch: ShoppingItemUpdate
    ) -> ShoppingItemResponse:
        """Name and amount change when non-empty; price and checked whenever supplied."""
        shopping_list = self._get_owned(user_id, list_id)
        changes = {}
        if patch.name:
            changes["name"] = patch.name
        if patch.amount:
            changes["amount"] = patch.amount
        if patch.price is not None:
            changes["price"] = patch.price
        if patch.checked is not None:
            changes["checked"] = patch.checked

        item = shopping_list.update_item(item_id, changes)
        if item is None:
            raise self.not_found("Shopping item", list_id=list_id, item_id=item_id)
        self.lists.update(shopping_list)
        self.log_info("Updated shopping item", list_id=list_id, item_id=item_id)
        return ShoppingItemResponse.model_validate(item)

    def remove_item(self, user_id: str, list_id: str, item_id: str) -> ShoppingListResponse:
        shopping_list = self._get_owned(user_id, list_id)
        if not shopping_list.remove_item(item_id):
            raise self.not_found("Shopping item", list_id=list_id, item_id=item_id)
        shopping_list = self.lists.update(shopping_list)
        self.log_info("Removed shopping item", list_id=list_id, item_id=item_id)
        return ShoppingMapper.to_response(shopping_list)

    def complete(self, user_id: str, list_id: str) -> ShoppingListResponse:
        """Mark a list as bought. Completed lists move to history."""
        shopping_list = self._get_owned(user_id, list_id)
        shopping_list.completed_at = self.clock.now()
        shopping_list = self.lists.update(shopping_list)
        self.log_info("Completed shopping list", user_id=user_id, list_id=list_id)
        return ShoppingMapper.to_response(shopping_list)

    def share(self, user_id: str, list_id: str) -> ShareLinkResponse:
        """Issue a share code for a list. Codes are not stored."""
        self._get_owned(user_id, list_id)
        code = "".join(secrets.choice(SHARE_CODE_ALPHABET) for _ in range(SHARE_CODE_LENGTH))
        return ShareLinkResponse(share_code=code, share_url=f"{settings.share_base_url}{code}")

    def history(
        self,
        user_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Page:
        """Completed lists as summaries, most recently completed first."""
        start, end_before = day_range(start_date, end_date)
        return self.lists.completed_between(user_id, start, end_before, page, page_size).map(
            ShoppingMapper.to_summary
        )
