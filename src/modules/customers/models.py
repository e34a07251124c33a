"""Customer persistence model.

``CustomerRecord`` is the storage shape of the ``Customer`` entity; the
entity itself lives in ``entities.py`` and never depends on Django.
Conversion in both directions goes through ``mappers.py``.

- ``id`` is assigned by the domain (the use case), not by the database.
- ``cpf`` stores only digits and is UNIQUE: the database is the final
  guard against two concurrent registrations of the same CPF.
- ``email`` is optional and stored lower-cased (``""`` when absent).
"""

from __future__ import annotations

import structlog
from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import BaseModel
from modules.customers.validators import is_valid_cpf, mask_cpf, strip_cpf

logger = structlog.get_logger(__name__)


class CustomerRecord(BaseModel):
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254, blank=True, default="")
    cpf = models.CharField(max_length=11, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="customers_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} (CPF: {mask_cpf(self.cpf)})"

    def clean(self) -> None:
        """Row-level check for records written outside the use case
        (shell, fixtures, data migrations): digits only, valid check digits."""
        super().clean()
        if strip_cpf(self.cpf) != self.cpf or not is_valid_cpf(self.cpf):
            logger.warning("customer.invalid_record_cpf", cpf=mask_cpf(self.cpf))
            raise ValidationError({"cpf": "Invalid CPF number."})
