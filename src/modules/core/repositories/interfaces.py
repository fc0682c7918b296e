"""Generic repository interface.

Provides ``IRepository[T]``, the abstract base every entity-specific
repository extends.  Service-layer code depends on this abstraction and
receives a concrete implementation through its constructor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` is the entity managed by the repository
    (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def list(self) -> List[T]:
        """Return every entity in insertion order."""

    @abstractmethod
    def save(self, entity: T, update_fields: Optional[Iterable[str]] = None) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Permanently remove an entity by ID.

        Returns ``False`` when nothing matched.
        """
