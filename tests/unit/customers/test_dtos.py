"""Unit tests for Customer DTOs.

Covers:
- RegisterCustomerDTO: missing keys, unknown keys, non-string values,
  immutability.
- CustomerOutputDTO: presenter output and JSON shape.
"""

from __future__ import annotations

import uuid

import pytest
from pydantic import ValidationError

from modules.customers.dtos import CustomerOutputDTO, RegisterCustomerDTO
from modules.customers.entities import Customer

pytestmark = pytest.mark.unit

VALID_CPF = "11144477735"


class TestRegisterCustomerDTO:
    def test_keeps_raw_values(self):
        dto = RegisterCustomerDTO.model_validate(
            {"name": " Ana ", "email": "Ana@Example.com", "cpf": "111.444.777-35"}
        )
        assert dto.name == " Ana "
        assert dto.email == "Ana@Example.com"
        assert dto.cpf == "111.444.777-35"

    def test_missing_keys_default_to_none(self):
        dto = RegisterCustomerDTO.model_validate({})
        assert dto.name is None
        assert dto.email is None
        assert dto.cpf is None

    def test_unknown_keys_are_ignored(self):
        dto = RegisterCustomerDTO.model_validate({"name": "Ana", "id": "forged"})
        assert not hasattr(dto, "id")

    def test_non_string_value_is_rejected(self):
        with pytest.raises(ValidationError):
            RegisterCustomerDTO.model_validate({"name": "Ana", "cpf": 11144477735})

    def test_non_object_payload_is_rejected(self):
        with pytest.raises(ValidationError):
            RegisterCustomerDTO.model_validate(["Ana", VALID_CPF])

    def test_frozen(self):
        dto = RegisterCustomerDTO(name="Ana", cpf=VALID_CPF)
        with pytest.raises(ValidationError):
            dto.name = "Other"


class TestCustomerOutputDTO:
    def test_from_entity(self):
        customer = Customer.create(
            id=uuid.uuid4(), name="Ana", email=None, cpf="111.444.777-35"
        )
        dto = CustomerOutputDTO.from_entity(customer)
        assert dto.id == customer.id
        assert dto.name == "Ana"
        assert dto.email == ""
        assert dto.cpf == VALID_CPF

    def test_json_shape(self):
        customer_id = uuid.uuid4()
        customer = Customer.create(
            id=customer_id, name="Ana", email="ana@example.com", cpf=VALID_CPF
        )
        assert CustomerOutputDTO.from_entity(customer).model_dump(mode="json") == {
            "id": str(customer_id),
            "name": "Ana",
            "email": "ana@example.com",
            "cpf": VALID_CPF,
        }

    def test_from_entities_preserves_order(self):
        customers = [
            Customer.create(id=uuid.uuid4(), name="Ana", email=None, cpf=VALID_CPF),
            Customer.create(id=uuid.uuid4(), name="Bia", email=None, cpf="52998224725"),
        ]
        dtos = CustomerOutputDTO.from_entities(customers)
        assert [d.name for d in dtos] == ["Ana", "Bia"]
