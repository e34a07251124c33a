"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API and the
``CustomerMapper``: the use cases only ever see ``Customer`` entities.
Error handling follows the Null Object pattern for look-ups: methods
return ``None`` instead of raising, and the use case decides how to
translate a missing entity.  The UNIQUE constraint on ``cpf`` is turned
into ``CustomerAlreadyExists``, so a registration racing another one
with the same CPF fails the same way as a sequential duplicate.
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.mappers import CustomerMapper
from modules.customers.models import CustomerRecord
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def save(self, entity: Customer) -> Customer:
        """Insert or update a customer and return the stored version."""
        try:
            with transaction.atomic():
                record, created = CustomerRecord.objects.update_or_create(
                    id=entity.id,
                    defaults=CustomerMapper.to_record_fields(entity),
                )
        except IntegrityError as exc:
            logger.warning(
                "customer.unique_violation",
                customer_id=str(entity.id),
                cpf=entity.masked_cpf,
            )
            raise CustomerAlreadyExists.for_cpf(entity.cpf) from exc

        record.refresh_from_db()
        logger.info(
            "customer.saved",
            customer_id=str(record.id),
            is_new=created,
        )
        return CustomerMapper.to_entity(record)

    def find_by_id(self, id: UUID | str) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            record = CustomerRecord.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None
        return CustomerMapper.to_entity(record) if record else None

    def find_by_cpf(self, cpf: str) -> Optional[Customer]:
        record = CustomerRecord.objects.filter(cpf=cpf).first()
        return CustomerMapper.to_entity(record) if record else None

    def exists_by_cpf(self, cpf: str) -> bool:
        return CustomerRecord.objects.filter(cpf=cpf).exists()

    def find_all(self) -> List[Customer]:
        return CustomerMapper.to_entity_list(CustomerRecord.objects.all())
