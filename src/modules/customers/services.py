"""Customer use cases.

Orchestrates registration and look-ups for the Customer entity,
delegating persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- A CPF can be registered only once.  The existence check runs on the
  normalised (digits-only) CPF, so ``111.444.777-35`` and ``11144477735``
  are the same customer.
- Field validation (name, email, CPF) happens in ``Customer.create``
  after the uniqueness check passes.

Errors propagate to the caller unchanged; mapping them to a transport
response is the API layer's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List
from uuid import UUID

import structlog
import uuid6

from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerAlreadyExists, NotFoundError
from modules.customers.validators import mask_cpf, strip_cpf

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerUseCase:
    """Application service for Customer use cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    ``id_factory`` produces the identifier of each new customer.
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        id_factory: Callable[[], UUID] = uuid6.uuid7,
    ) -> None:
        self._repo = repository
        self._id_factory = id_factory

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def register_customer(
        self, name: str | None, email: str | None, cpf: str | None
    ) -> Customer:
        """Register a new customer after enforcing CPF uniqueness.

        Raises:
            CustomerAlreadyExists: the CPF is already registered.
            InvalidCpf, InvalidEmail, IllegalArgument: invalid input.
        """
        digits = strip_cpf(cpf)
        log = logger.bind(cpf=mask_cpf(digits))

        if digits and self._repo.exists_by_cpf(digits):
            log.warning("customer.duplicate_cpf")
            raise CustomerAlreadyExists.for_cpf(digits)

        customer = Customer.create(
            id=self._id_factory(),
            name=name,
            email=email,
            cpf=cpf,
        )
        customer = self._repo.save(customer)
        log.info("customer.registered", customer_id=str(customer.id))
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_customer_by_cpf(self, cpf: str) -> Customer:
        """Raises ``NotFoundError`` when no customer has this CPF."""
        customer = self._repo.find_by_cpf(strip_cpf(cpf) or "")
        if customer is None:
            raise NotFoundError()
        return customer

    def find_customer_by_id(self, id: UUID | str) -> Customer:
        """Raises ``NotFoundError`` when no customer has this id."""
        customer = self._repo.find_by_id(id)
        if customer is None:
            raise NotFoundError()
        return customer

    def find_customer_all(self) -> List[Customer]:
        """Every stored customer, in the order storage returns them."""
        return list(self._repo.find_all())
