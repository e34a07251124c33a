"""Customer DTOs for the API layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the use
cases.  DTOs are immutable (``frozen=True``).

- ``RegisterCustomerDTO``: input for registration.  It only checks that
  fields are strings (or null); every business validation belongs to
  ``Customer.create`` so the error messages stay the domain's.
- ``CustomerOutputDTO``: the presenter, one entity → one response body.
"""

from __future__ import annotations

from typing import Iterable, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from modules.customers.entities import Customer


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class RegisterCustomerDTO(BaseModel):
    """Immutable DTO for registration requests.

    Missing keys default to ``None`` and are rejected by the domain
    (``Name cannot be null or empty``, ``CPF cannot be null``).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = None
    email: str | None = None
    cpf: str | None = None


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerOutputDTO(BaseModel):
    """Immutable DTO for customer API responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    email: str
    cpf: str

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        """Build an output DTO from a Customer entity."""
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            cpf=customer.cpf,
        )

    @classmethod
    def from_entities(cls, customers: Iterable[Customer]) -> List[CustomerOutputDTO]:
        """Preserves the input order."""
        return [cls.from_entity(customer) for customer in customers]
