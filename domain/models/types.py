"""
Column types and mixins shared by every entity.

JSONDocument stores an ordered list (or a small object) of structured
records as one JSON text column. Values on the Python side are plain
lists/dicts; the column is always rewritten as a whole.
"""

import json
import uuid
from typing import Any, Callable

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.types import TypeDecorator


def new_id() -> str:
    """Fresh string identity for a new entity."""
    return str(uuid.uuid4())


def encode_document(value: Any) -> str:
    """Encode a list/dict of JSON-native values to text, keeping order and non-ASCII text."""
    return json.dumps(value, ensure_ascii=False)


def decode_document(raw: Any, empty_factory: Callable[[], Any] = list) -> Any:
    """Decode stored JSON text. Null or blank input yields an empty container."""
    if raw is None:
        return empty_factory()
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        if not raw.strip():
            return empty_factory()
        value = json.loads(raw)
    else:
        # Drivers with native JSON support hand back decoded values
        value = raw
    if value is None:
        return empty_factory()
    return value


class JSONDocument(TypeDecorator):
    """Document column: JSON text in the database, list/dict in Python."""

    impl = Text
    cache_ok = True

    def __init__(self, empty_factory: Callable[[], Any] = list, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.empty_factory = empty_factory

    def process_bind_param(self, value, dialect):
        if value is None:
            value = self.empty_factory()
        return encode_document(value)

    def process_result_value(self, value, dialect):
        return decode_document(value, self.empty_factory)

    def coerce_compared_value(self, op, value):
        # LIKE patterns match against the encoded text, not a JSON-encoded pattern
        if isinstance(value, str):
            return Text()
        return self


class EntityMixin:
    """String primary key plus timestamps.

    Identity is assigned by ``new()`` before the first flush, not by the
    storage layer. Timestamps come from the service clock through
    ``BaseRepository.touch``, never from the database.
    """

    id = Column(String(36), primary_key=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    @classmethod
    def new(cls, **fields):
        """Build a transient entity with identity assigned."""
        fields.setdefault("id", new_id())
        return cls(**fields)


class SoftDeleteMixin:
    """Rows with deleted_at set are hidden from every read."""

    deleted_at = Column(DateTime, nullable=True, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
