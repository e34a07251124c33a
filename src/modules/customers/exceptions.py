"""Customer domain exceptions.

Raised by the entity factory and the use-case layer.  Every exception
carries an ``ErrorKind`` so callers can dispatch on the kind of failure
instead of on the class hierarchy; the API layer maps kinds to HTTP
status codes in ``modules.core.exception_handler``.

- ``INVALID_CPF``, ``INVALID_EMAIL``, ``ILLEGAL_ARGUMENT``: caller input
  errors, never retried.
- ``DOMAIN``: business-rule violation (e.g. duplicate CPF).
- ``NOT_FOUND``: specialisation of ``DOMAIN`` for missing records.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_CPF = "INVALID_CPF"
    INVALID_EMAIL = "INVALID_EMAIL"
    ILLEGAL_ARGUMENT = "ILLEGAL_ARGUMENT"
    DOMAIN = "DOMAIN"
    NOT_FOUND = "NOT_FOUND"


class CustomerError(Exception):
    """Root of the customer error taxonomy."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidCpf(CustomerError, ValueError):
    """Malformed or checksum-failing CPF."""

    kind = ErrorKind.INVALID_CPF


class InvalidEmail(CustomerError, ValueError):
    """Email that does not match the ``local@domain.tld`` shape."""

    kind = ErrorKind.INVALID_EMAIL


class IllegalArgument(CustomerError, ValueError):
    """Blank name or any other rejected plain argument."""

    kind = ErrorKind.ILLEGAL_ARGUMENT


class MissingId(CustomerError, TypeError):
    """Customer built without an identifier."""

    kind = ErrorKind.ILLEGAL_ARGUMENT


class DomainError(CustomerError):
    """Generic business-rule violation."""

    kind = ErrorKind.DOMAIN


class CustomerAlreadyExists(DomainError):
    """A customer with the same CPF is already registered."""

    @classmethod
    def for_cpf(cls, cpf: str) -> CustomerAlreadyExists:
        return cls(f"Customer with CPF {cpf} already exists")


class NotFoundError(DomainError):
    """The requested record does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "Record not found") -> None:
        super().__init__(message)
