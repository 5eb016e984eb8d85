# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the service layer.

The service depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar


class Identifiable(Protocol):
    """Anything stored in a repository: carries a unique integer id."""

    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=Identifiable)


class Repository(Protocol[T]):
    """Key-value store keyed by entity id."""

    def save(self, entity: T) -> T: ...
    def find_by_id(self, entity_id: int) -> T | None: ...
    def find_all(self) -> list[T]: ...
    def delete(self, entity_id: int) -> None: ...

    def find_all_sorted(
            self,
            key: Callable[[T], Any] | None = None,
            *,
            reverse: bool = False,
    ) -> list[T]: ...

    def count(self) -> int: ...
