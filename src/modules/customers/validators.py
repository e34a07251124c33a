"""Field validators for the Customer entity.

Pure functions with no Django dependency.  Each validator either
returns the normalised value that the entity stores or raises the
matching exception from ``modules.customers.exceptions``.
"""

from __future__ import annotations

import re

from validate_docbr import CPF

from modules.customers.exceptions import IllegalArgument, InvalidCpf, InvalidEmail

CPF_LENGTH = 11

EMAIL_PATTERN = re.compile(r"^[a-z0-9._+-]+@[a-z0-9-]+(?:\.[a-z0-9-]+)+$")

_NON_DIGITS = re.compile(r"[^0-9]")


# ---------------------------------------------------------------------------
# CPF
# ---------------------------------------------------------------------------


def strip_cpf(raw: str | None) -> str | None:
    """Strip everything but ASCII digits (accept formatted or raw input).

    Other Unicode decimal digits (fullwidth, Arabic-Indic, ...) are
    stripped too, so a stored CPF is always ``[0-9]{11}``.
    """
    if raw is None:
        return None
    return _NON_DIGITS.sub("", raw)


def validate_cpf(raw: str | None) -> str:
    """Return the 11-digit CPF or raise ``InvalidCpf``.

    Formatting characters (dots, dashes, spaces) are stripped first.  The
    check digits are verified with *validate-docbr*, which also rejects
    sequences of one repeated digit (``111.111.111-11``).
    """
    digits = strip_cpf(raw)
    if digits is None:
        raise InvalidCpf("CPF cannot be null")
    if len(digits) != CPF_LENGTH:
        raise InvalidCpf("CPF must contain exactly 11 digits")
    if not CPF().validate(digits):
        raise InvalidCpf("Invalid CPF checksum")
    return digits


def is_valid_cpf(raw: str | None) -> bool:
    try:
        validate_cpf(raw)
    except InvalidCpf:
        return False
    return True


def mask_cpf(digits: str | None) -> str:
    """***.XXX.XXX-**, the only CPF form that may reach the logs."""
    if not digits or len(digits) != CPF_LENGTH:
        return "***.***.***-**"
    return f"***.{digits[3:6]}.{digits[6:9]}-**"


# ---------------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------------


def normalize_email(raw: str | None) -> str:
    """Lower-case the address and check its shape.

    Email is optional: ``None`` and ``""`` both become ``""``.
    """
    if raw is None or raw == "":
        return ""
    email = raw.lower()
    if not EMAIL_PATTERN.fullmatch(email):
        raise InvalidEmail(f"Invalid email format: {raw}")
    return email


# ---------------------------------------------------------------------------
# Name
# ---------------------------------------------------------------------------


def validate_name(raw: str | None) -> str:
    name = (raw or "").strip()
    if not name:
        raise IllegalArgument("Name cannot be null or empty")
    return name
