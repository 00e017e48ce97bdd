"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session, Query
from abc import ABC

from app.clock import Clock, system_clock

ModelType = TypeVar("ModelType")
T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of results plus the total match count"""

    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 20

    @property
    def has_next(self) -> bool:
        return self.page * self.page_size < self.total

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def map(self, fn) -> "Page":
        return Page([fn(i) for i in self.items], self.total, self.page, self.page_size)


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.

    Models with a ``deleted_at`` column are soft-deleted: ``query()`` never
    returns rows that carry a deletion timestamp.

    Timestamps are stamped from the repository clock on every write.
    """

    def __init__(self, db: Session, model: Type[ModelType], clock: Clock = system_clock):
        self.db = db
        self.model = model
        self.clock = clock

    @property
    def soft_deletes(self) -> bool:
        return hasattr(self.model, "deleted_at")

    def query(self) -> Query:
        """Base query over live rows"""
        q = self.db.query(self.model)
        if self.soft_deletes:
            q = q.filter(self.model.deleted_at.is_(None))
        return q

    def owned(self, owner_user_id: str) -> Query:
        """Live rows belonging to one user"""
        return self.query().filter(self.model.owner_user_id == owner_user_id)

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """Get a live entity by ID"""
        return self.query().filter(self.model.id == entity_id).first()

    def get_owned(self, entity_id: str, owner_user_id: str) -> Optional[ModelType]:
        """Get a live entity by ID, only if it belongs to the given user"""
        return self.owned(owner_user_id).filter(self.model.id == entity_id).first()

    def exists_any(self, entity_id: str) -> bool:
        """True if a row with this ID exists, deleted or not"""
        return self.db.get(self.model, entity_id) is not None

    def paginate(self, query: Query, page: int, page_size: int) -> Page:
        """Count then slice a query"""
        total = query.order_by(None).count()
        items = query.offset((page - 1) * page_size).limit(page_size).all()
        return Page(items=items, total=total, page=page, page_size=page_size)

    def touch(self, entity: ModelType, created: bool = False) -> ModelType:
        """Set updated_at, and created_at for new rows, from the clock"""
        now = self.clock.now()
        if created and entity.created_at is None:
            entity.created_at = now
        entity.updated_at = now
        return entity

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.touch(entity, created=True)
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def create_many(self, entities: List[Any]) -> None:
        for entity in entities:
            self.touch(entity, created=True)
        self.db.add_all(entities)
        self.db.commit()

    def update(self, entity: ModelType) -> ModelType:
        """Update existing entity"""
        self.touch(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def soft_delete(self, entity: ModelType, deleted_at: datetime) -> None:
        """Hide an entity from every read without erasing it"""
        entity.deleted_at = deleted_at
        self.touch(entity)
        self.db.commit()

    def delete(self, entity: ModelType) -> None:
        """Physically delete an entity"""
        self.db.delete(entity)
        self.db.commit()
