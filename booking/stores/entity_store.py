"""Generic in-memory entity store.

Holds one entity type keyed by integer id. Specialized stores compose an
EntityStore and hold its lock around compound check-then-write operations.
"""

import logging
import threading
from typing import Generic, Protocol, TypeVar

from booking.domain.errors import DuplicateIdError

logger = logging.getLogger(__name__)


class Identified(Protocol):
    id: int


T = TypeVar("T", bound=Identified)


class IdentityGenerator:
    """Issues strictly increasing ids. Ids are never reused."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            issued = self._next
            self._next += 1
            return issued

    def advance_past(self, used_id: int) -> None:
        """Ensure later ids are greater than ``used_id``."""
        with self._lock:
            self._next = max(self._next, used_id + 1)


class EntityStore(Generic[T]):
    """Keyed collection of one entity type, guarded by a re-entrant lock."""

    def __init__(self, name: str, generator: IdentityGenerator | None = None) -> None:
        self.name = name
        self.lock = threading.RLock()
        self._generator = generator or IdentityGenerator()
        self._data: dict[int, T] = {}

    def get(self, entity_id: int) -> T | None:
        with self.lock:
            return self._data.get(entity_id)

    def get_all(self) -> list[T]:
        """Return a snapshot in insertion order."""
        with self.lock:
            return list(self._data.values())

    def save(self, entity: T) -> T:
        """Assign a fresh id (any supplied id is ignored) and insert."""
        with self.lock:
            entity.id = self._generator.next_id()
            self._data[entity.id] = entity
        logger.info("Saved %s with id %s", self.name, entity.id)
        return entity

    def insert_with_id(self, entity: T) -> T:
        """Insert keeping the entity's own id. Used for preloading only."""
        with self.lock:
            if entity.id in self._data:
                raise DuplicateIdError(entity.id)
            self._data[entity.id] = entity
            self._generator.advance_past(entity.id)
        return entity

    def delete(self, entity_id: int) -> bool:
        with self.lock:
            removed = self._data.pop(entity_id, None) is not None
        if removed:
            logger.info("Deleted %s with id %s", self.name, entity_id)
        return removed
