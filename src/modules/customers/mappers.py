"""Conversion between the ``Customer`` entity and ``CustomerRecord``.

Mappers are stateless and hold no business rules.  Records read back
from storage are rebuilt through ``Customer.create``, so a row that no
longer satisfies the entity invariants fails loudly instead of leaking
an invalid entity into the use cases.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from modules.customers.entities import Customer
from modules.customers.models import CustomerRecord


class CustomerMapper:
    @staticmethod
    def to_record_fields(entity: Customer) -> Dict[str, Any]:
        """Column values for ``entity``, without the primary key."""
        return {
            "name": entity.name,
            "email": entity.email,
            "cpf": entity.cpf,
        }

    @staticmethod
    def to_entity(record: CustomerRecord) -> Customer:
        return Customer.create(
            id=record.id,
            name=record.name,
            email=record.email,
            cpf=record.cpf,
        )

    @classmethod
    def to_entity_list(cls, records: Iterable[CustomerRecord]) -> List[Customer]:
        return [cls.to_entity(record) for record in records]
