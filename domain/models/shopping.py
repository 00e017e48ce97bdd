"""
Shopping list model.

Items live in a single document column; every mutation rewrites the whole
collection and recomputes total_price from it.
"""

from typing import Optional

from sqlalchemy import Column, String, Text, Float, DateTime

from domain.models.database import Base
from domain.models.types import EntityMixin, SoftDeleteMixin, JSONDocument, new_id

DEFAULT_LIST_NAME = "Shopping List"


def _price(item: dict) -> float:
    try:
        return float(item.get("price") or 0)
    except (TypeError, ValueError):
        return 0.0


class ShoppingList(EntityMixin, SoftDeleteMixin, Base):
    """Ordered list of purchasable items"""

    __tablename__ = "shopping_list"

    name = Column(Text, nullable=False, default=DEFAULT_LIST_NAME)
    # [{"id", "name", "amount", "price", "checked"}, ...]
    items = Column(JSONDocument(), nullable=False, default=list)
    total_price = Column(Float, nullable=False, default=0)
    owner_user_id = Column(String(64), nullable=False, index=True)
    completed_at = Column(DateTime, nullable=True, index=True)

    @staticmethod
    def normalize_item(item: dict) -> dict:
        """Fill defaults and a fresh id for an item missing one."""
        return {
            "id": item.get("id") or new_id(),
            "name": item.get("name") or "",
            "amount": item.get("amount") or "",
            "price": _price(item),
            "checked": bool(item.get("checked", False)),
        }

    def set_items(self, items: list) -> None:
        self.items = [self.normalize_item(i) for i in items]
        self.recalculate_total()

    def recalculate_total(self) -> float:
        self.total_price = round(sum(_price(i) for i in (self.items or [])), 2)
        return self.total_price

    def add_item(self, item: dict) -> dict:
        new_item = self.normalize_item(item)
        self.items = list(self.items or []) + [new_item]
        self.recalculate_total()
        return new_item

    def update_item(self, item_id: str, changes: dict) -> Optional[dict]:
        """Apply changes to one item. Returns the updated item or None if absent."""
        items = [dict(i) for i in (self.items or [])]
        for item in items:
            if item.get("id") == item_id:
                item.update(changes)
                self.items = items
                self.recalculate_total()
                return item
        return None

    def remove_item(self, item_id: str) -> bool:
        items = list(self.items or [])
        remaining = [i for i in items if i.get("id") != item_id]
        if len(remaining) == len(items):
            return False
        self.items = remaining
        self.recalculate_total()
        return True

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def __repr__(self):
        return f"<ShoppingList(id={self.id}, name='{self.name}', items={len(self.items or [])})>"
