"""Customer entity.

``Customer`` is immutable once built.  All field checks run before the
instance becomes visible, in a fixed order (id, name, email, CPF) so
that a caller sending several invalid fields always sees the same error
first.  Identity is ``(id, cpf)``: two customers with the same id and CPF
are equal even when name or email differ.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from modules.customers.exceptions import MissingId
from modules.customers.validators import (
    mask_cpf,
    normalize_email,
    validate_cpf,
    validate_name,
)


@dataclass(frozen=True, repr=False)
class Customer:
    """Customer identified by a CPF.

    Build through ``Customer.create`` (or the constructor, which runs the
    same validation); instances are never partially valid.
    """

    id: UUID
    name: str = field(compare=False)
    email: str | None = field(compare=False)
    cpf: str

    def __post_init__(self) -> None:
        if self.id is None:
            raise MissingId("ID cannot be null")
        object.__setattr__(self, "name", validate_name(self.name))
        object.__setattr__(self, "email", normalize_email(self.email))
        object.__setattr__(self, "cpf", validate_cpf(self.cpf))

    @classmethod
    def create(
        cls,
        *,
        id: UUID,
        name: str | None,
        email: str | None,
        cpf: str | None,
    ) -> Customer:
        """Validating factory used by the use case and the storage mappers."""
        return cls(id=id, name=name, email=email, cpf=cpf)

    @property
    def masked_cpf(self) -> str:
        return mask_cpf(self.cpf)

    def __repr__(self) -> str:
        return f"Customer(id={self.id!s}, name={self.name!r}, cpf={self.masked_cpf!r})"
