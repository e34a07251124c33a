"""Customer repository interface (port).

Extends ``IRepository[Customer]`` with the CPF look-ups required by the
registration and lookup use cases.  Implementations store CPFs as
11 digits and must enforce CPF uniqueness on ``save``: a duplicate
insert raises ``CustomerAlreadyExists`` rather than a storage error.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.entities import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer entity."""

    @abstractmethod
    def find_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF (digits only)."""

    @abstractmethod
    def exists_by_cpf(self, cpf: str) -> bool:
        """``True`` when a customer with this CPF (digits only) is stored."""
