"""Unit tests for CustomerRecord (storage model)."""

from __future__ import annotations

import uuid

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.customers.models import CustomerRecord

pytestmark = pytest.mark.unit

VALID_CPF = "11144477735"


def _make_record(**overrides) -> CustomerRecord:
    defaults = {"id": uuid.uuid4(), "name": "Maria Oliveira", "cpf": VALID_CPF}
    defaults.update(overrides)
    return CustomerRecord(**defaults)


class TestClean:
    def test_valid_record_passes(self):
        _make_record().full_clean()

    @pytest.mark.parametrize(
        "cpf", ["12345678901", "00000000000", "111.444.777", "５２９９８２２４７２５"]
    )
    def test_invalid_cpf_is_rejected(self, cpf):
        with pytest.raises(ValidationError) as exc_info:
            _make_record(cpf=cpf).clean()
        assert "cpf" in exc_info.value.message_dict

    def test_email_defaults_to_blank(self):
        assert _make_record().email == ""


class TestConstraints:
    def test_cpf_is_unique(self):
        _make_record().save()
        with pytest.raises(IntegrityError), transaction.atomic():
            _make_record().save()

    def test_id_is_kept_as_given(self):
        record_id = uuid.uuid4()
        _make_record(id=record_id).save()
        assert CustomerRecord.objects.get(cpf=VALID_CPF).id == record_id

    def test_timestamps_are_set_on_save(self):
        record = _make_record()
        record.save()
        assert record.created_at is not None
        assert record.updated_at is not None
