"""Inventory engine: pantry items with expiry tracking, grouping and batches"""

from datetime import date, timedelta
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.config import settings
from app.exceptions import ServiceValidationError
from domain.enums import StorageLocation
from domain.mappers import InventoryMapper, UNCATEGORIZED_ID, uncategorized_category
from domain.models import IngredientItem
from domain.schemas.category_schemas import IngredientCategoryResponse
from domain.schemas.inventory_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientItemView,
    IngredientGroup,
    GroupedInventory,
)
from domain.seeds import OTHER_CATEGORY_ID
from repositories import IngredientCategoryRepository, InventoryRepository
from services.base import BaseService
from services.helpers import parse_date, format_quantity


class InventoryService(BaseService):
    """
    Business logic for the pantry inventory.

    Every read renders items through the expiry projection using the
    service clock's calendar day; nothing derived is stored.
    """

    logger_name = "pantrypal.inventory"

    def __init__(
        self,
        db: Session,
        clock: Clock = system_clock,
        locale: Optional[str] = None,
        default_expiry_days: Optional[int] = None,
    ):
        super().__init__(db, clock)
        self.locale = locale or settings.expiry_locale
        self.default_expiry_days = (
            settings.default_expiry_days if default_expiry_days is None else default_expiry_days
        )
        self.items = InventoryRepository(db, clock)
        self.categories = IngredientCategoryRepository(db, clock)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _view(self, item: IngredientItem, today: Optional[date] = None) -> IngredientItemView:
        return InventoryMapper.to_view(item, today or self.clock.today(), self.locale)

    @staticmethod
    def _validate_storage(storage: str) -> str:
        try:
            return StorageLocation(storage).value
        except ValueError:
            allowed = ", ".join(s.value for s in StorageLocation)
            raise ServiceValidationError(
                f"Invalid storage location '{storage}', expected one of: {allowed}"
            )

    def _require_visible_category(self, user_id: str, category_id: str) -> None:
        if not self.categories.get_visible(user_id, category_id):
            raise self.not_found("Category", category_id=category_id)

    def _get_owned(self, user_id: str, item_id: str) -> IngredientItem:
        item = self.items.get_owned(item_id, user_id)
        if not item:
            raise self.not_found("Ingredient", item_id=item_id, user_id=user_id)
        return item

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(
        self,
        user_id: str,
        storage: Optional[str] = None,
        category_id: Optional[str] = None,
        urgent_only: bool = False,
        expiring_within_days: Optional[int] = None,
    ) -> List[IngredientItemView]:
        """
        List the caller's items, soonest expiry first.

        Args:
            storage: only items kept in this location
            category_id: only items of this category
            urgent_only: only items expiring today or earlier
            expiring_within_days: only items expiring on or before today + N
        """
        today = self.clock.today()
        if storage:
            storage = self._validate_storage(storage)

        cutoff = None
        if urgent_only:
            cutoff = today
        if expiring_within_days is not None:
            window = today + timedelta(days=expiring_within_days)
            cutoff = window if cutoff is None else min(cutoff, window)

        rows = self.items.list_for_owner(
            user_id,
            storage=storage,
            category_id=category_id,
            expiring_on_or_before=cutoff,
        )
        return [self._view(item, today) for item in rows]

    def get(self, user_id: str, item_id: str) -> IngredientItemView:
        return self._view(self._get_owned(user_id, item_id))

    def list_grouped(self, user_id: str, storage: Optional[str] = None) -> GroupedInventory:
        """
        Group the caller's items by category.

        Only categories with at least one matching item appear, ordered by
        sort order; items with no visible category fall into the synthetic
        "uncategorized" group, which always comes last.
        """
        items = self.list(user_id, storage=storage)
        categories = self.categories.list_visible(user_id)

        buckets: Dict[str, List[IngredientItemView]] = {}
        known_ids = {c.id for c in categories}
        for view in items:
            key = view.category_id if view.category_id in known_ids else UNCATEGORIZED_ID
            buckets.setdefault(key, []).append(view)

        groups = []
        for category in categories:
            members = buckets.get(category.id)
            if members:
                groups.append(
                    IngredientGroup(
                        category=IngredientCategoryResponse.model_validate(category),
                        items=members,
                        count=len(members),
                    )
                )
        leftovers = buckets.get(UNCATEGORIZED_ID)
        if leftovers:
            groups.append(
                IngredientGroup(
                    category=uncategorized_category(), items=leftovers, count=len(leftovers)
                )
            )
        return GroupedInventory(groups=groups, total=sum(g.count for g in groups))

    def list_expiring_soon(self, user_id: str, days: Optional[int] = None) -> List[IngredientItemView]:
        if days is None:
            days = settings.expiring_soon_days
        return self.list(user_id, expiring_within_days=days)

    def list_batches(self, user_id: str, name: str) -> List[IngredientItemView]:
        """All purchase batches of one ingredient name, soonest expiry first."""
        if not name or not name.strip():
            raise ServiceValidationError("Ingredient name is required")
        today = self.clock.today()
        rows = self.items.list_for_owner(user_id, name=name)
        return [self._view(item, today) for item in rows]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, user_id: str, payload: IngredientCreate) -> IngredientItemView:
        """
        Add an ingredient batch.

        Defaults: expiry today + 7 days, purchase date today, storage fridge,
        category "other". When no amount text is given but quantity and unit
        are, the amount is rendered from them (e.g. "2kg", "1.50kg").
        """
        name = (payload.name or "").strip()
        if not name:
            raise ServiceValidationError("Ingredient name is required")

        today = self.clock.today()
        expiry = (
            parse_date(payload.expiry_date, "expiryDate")
            if payload.expiry_date
            else today + timedelta(days=self.default_expiry_days)
        )
        purchased = (
            parse_date(payload.purchase_date, "purchaseDate") if payload.purchase_date else today
        )
        storage = self._validate_storage(payload.storage) if payload.storage else StorageLocation.FRIDGE.value

        category_id = payload.category_id or OTHER_CATEGORY_ID
        if payload.category_id:
            self._require_visible_category(user_id, category_id)

        amount = payload.amount or ""
        if not amount and payload.quantity > 0 and payload.unit:
            amount = format_quantity(payload.quantity, payload.unit)

        item = IngredientItem.new(
            name=name,
            quantity=payload.quantity,
            unit=payload.unit or "",
            amount=amount,
            storage=storage,
            category_id=category_id,
            thumbnail=payload.thumbnail or "",
            icon=payload.icon or "",
            note=payload.note or "",
            expiry_date=expiry,
            purchase_date=purchased,
            owner_user_id=user_id,
        )
        item = self.items.create(item)
        self.log_info("Added ingredient", user_id=user_id, item_id=item.id, name=name)
        return self._view(item, today)

    def update(self, user_id: str, item_id: str, patch: IngredientUpdate) -> IngredientItemView:
        """
        Partially update an item.

        Empty strings and zero/None values leave a field unchanged, so a text
        field cannot be cleared and quantity cannot be reset to 0 here.
        """
        item = self._get_owned(user_id, item_id)

        # Validate everything before touching the entity
        expiry = parse_date(patch.expiry_date, "expiryDate") if patch.expiry_date else None
        purchased = parse_date(patch.purchase_date, "purchaseDate") if patch.purchase_date else None
        storage = self._validate_storage(patch.storage) if patch.storage else None
        if patch.category_id:
            self._require_visible_category(user_id, patch.category_id)

        if patch.name and patch.name.strip():
            item.name = patch.name.strip()
        if patch.quantity is not None and patch.quantity > 0:
            item.quantity = patch.quantity
        if patch.unit:
            item.unit = patch.unit
        if patch.amount:
            item.amount = patch.amount
        if storage:
            item.storage = storage
        if patch.category_id:
            item.category_id = patch.category_id
        if expiry:
            item.expiry_date = expiry
        if purchased:
            item.purchase_date = purchased
        if patch.thumbnail:
            item.thumbnail = patch.thumbnail
        if patch.icon:
            item.icon = patch.icon
        if patch.note:
            item.note = patch.note

        item = self.items.update(item)
        self.log_info("Updated ingredient", user_id=user_id, item_id=item_id)
        return self._view(item)

    def delete(self, user_id: str, item_id: str) -> None:
        item = self._get_owned(user_id, item_id)
        self.items.soft_delete(item, self.clock.now())
        self.log_info("Deleted ingredient", user_id=user_id, item_id=item_id)
