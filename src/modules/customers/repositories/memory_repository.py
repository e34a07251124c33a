"""In-memory implementation of ICustomerRepository (no DB).

Used by unit tests and local scripting.  Keeps insertion order and
enforces CPF uniqueness the same way the database constraint does.
"""

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import UUID

from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.repositories.interfaces import ICustomerRepository


def _as_uuid(value: UUID | str) -> UUID | None:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


class InMemoryCustomerRepository(ICustomerRepository):
    """Stores customers in a dict keyed by id. Order preserved by insertion."""

    def __init__(self) -> None:
        self._by_id: Dict[UUID, Customer] = {}
        self._id_by_cpf: Dict[str, UUID] = {}

    def save(self, entity: Customer) -> Customer:
        owner = self._id_by_cpf.get(entity.cpf)
        if owner is not None and owner != entity.id:
            raise CustomerAlreadyExists.for_cpf(entity.cpf)
        previous = self._by_id.get(entity.id)
        if previous is not None and previous.cpf != entity.cpf:
            del self._id_by_cpf[previous.cpf]
        self._by_id[entity.id] = entity
        self._id_by_cpf[entity.cpf] = entity.id
        return entity

    def find_by_id(self, id: UUID | str) -> Optional[Customer]:
        key = _as_uuid(id)
        if key is None:
            return None
        return self._by_id.get(key)

    def find_by_cpf(self, cpf: str) -> Optional[Customer]:
        customer_id = self._id_by_cpf.get(cpf)
        if customer_id is None:
            return None
        return self._by_id[customer_id]

    def exists_by_cpf(self, cpf: str) -> bool:
        return cpf in self._id_by_cpf

    def find_all(self) -> List[Customer]:
        return list(self._by_id.values())
