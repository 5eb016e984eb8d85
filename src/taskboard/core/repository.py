# src/taskboard/core/repository.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Generic

from .ports import T

logger = logging.getLogger(__name__)


class InMemoryRepository(Generic[T]):
    """
    Dict-backed repository keyed by entity id.

    - save() is an upsert: last write for an id wins
    - find_by_id() returns None when missing (not an error)
    - delete() of an unknown id is a no-op
    - find_all() returns a snapshot list in first-insert order

    Thread-safety:
    - every method holds an internal lock, so the background reporter can read
      while the main thread writes
    - no cascading: deleting an entity never touches others that reference it
    """

    def __init__(self, name: str = "entities") -> None:
        self._name = name
        self._storage: dict[int, T] = {}
        self._lock = threading.RLock()

    def save(self, entity: T) -> T:
        with self._lock:
            replaced = entity.id in self._storage
            self._storage[entity.id] = entity
        logger.debug("%s: saved id=%s replaced=%s", self._name, entity.id, replaced)
        return entity

    def find_by_id(self, entity_id: int) -> T | None:
        with self._lock:
            return self._storage.get(int(entity_id))

    def find_all(self) -> list[T]:
        with self._lock:
            return list(self._storage.values())

    def delete(self, entity_id: int) -> None:
        with self._lock:
            removed = self._storage.pop(int(entity_id), None)
        if removed is not None:
            logger.debug("%s: deleted id=%s", self._name, entity_id)

    def find_all_sorted(
        self,
        key: Callable[[T], Any] | None = None,
        *,
        reverse: bool = False,
    ) -> list[T]:
        """Snapshot sorted by `key`, or by the entities' natural order (<) if no key."""
        return sorted(self.find_all(), key=key, reverse=reverse)  # type: ignore[arg-type,type-var]

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

    def __len__(self) -> int:
        return self.count()
