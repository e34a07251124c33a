"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Use-case code depends on
this abstraction, never on the Django ORM: implementations receive and
return domain entities, not model instances.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist an entity and return the stored representation."""

    @abstractmethod
    def find_by_id(self, id: UUID | str) -> Optional[T]:
        """Retrieve an entity by its identifier, or ``None``."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every stored entity, in storage order."""
