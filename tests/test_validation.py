"""Tests for transaction validation."""

from datetime import date
from decimal import Decimal

import pytest

from pennywise.domain.entities import Frequency, TransactionKind
from pennywise.domain.errors import DomainError, ValidationError
from pennywise.domain.validation import (
    MAX_AMOUNT,
    build_transaction,
    validate_transaction,
)


def _fields(**overrides):
    fields = {
        "kind": "expense",
        "frequency": "variable",
        "description": "Groceries",
        "amount": "120.50",
        "category": "Food",
        "date": "2025-03-10",
    }
    fields.update(overrides)
    return fields


def _installment_fields(**overrides):
    fields = _fields(
        frequency="installment",
        description="Laptop (2/12)",
        amount="4800",
        installment_amount="400",
        installment_count=12,
        installment_index=2,
    )
    fields.update(overrides)
    return fields


def _code(fields):
    with pytest.raises(ValidationError) as excinfo:
        build_transaction(fields)
    return excinfo.value.code


def test_builds_plain_transaction():
    txn = build_transaction(_fields(), transaction_id="abc")

    assert txn.id == "abc"
    assert txn.kind == TransactionKind.EXPENSE
    assert txn.frequency == Frequency.VARIABLE
    assert txn.amount == Decimal("120.50")
    assert txn.date == date(2025, 3, 10)
    assert txn.installment_amount is None


def test_generates_id_when_missing():
    first = build_transaction(_fields())
    second = build_transaction(_fields())

    assert first.id
    assert first.id != second.id


def test_builds_installment_transaction():
    txn = build_transaction(_installment_fields())

    assert txn.is_installment
    assert txn.installment_amount == Decimal("400")
    assert txn.installment_count == 12
    assert txn.installment_index == 2


def test_installment_fields_dropped_for_plain_records():
    txn = build_transaction(
        _fields(installment_amount="10", installment_count=3, installment_index=1)
    )

    assert txn.installment_amount is None
    assert txn.installment_count is None
    assert txn.installment_index is None


def test_accepts_date_objects():
    txn = build_transaction(_fields(date=date(2024, 2, 29)))
    assert txn.date == date(2024, 2, 29)


def test_accepts_iso_datetime_strings():
    txn = build_transaction(_fields(date="2025-03-10T14:30:00Z"))
    assert txn.date == date(2025, 3, 10)


@pytest.mark.parametrize("missing", ["kind", "frequency", "description", "amount", "category", "date"])
def test_missing_required_field(missing):
    fields = _fields()
    del fields[missing]

    with pytest.raises(ValidationError) as excinfo:
        build_transaction(fields)

    assert excinfo.value.code == "missing_fields"
    assert missing in str(excinfo.value)


def test_blank_string_counts_as_missing():
    assert _code(_fields(description="   ")) == "missing_fields"


def test_invalid_kind():
    assert _code(_fields(kind="transfer")) == "invalid_kind"


def test_invalid_frequency():
    assert _code(_fields(frequency="weekly")) == "invalid_frequency"


@pytest.mark.parametrize("amount", ["0", "-5", "abc", "NaN", "1000000000"])
def test_invalid_amount(amount):
    assert _code(_fields(amount=amount)) == "invalid_amount"


def test_maximum_amount_is_accepted():
    txn = build_transaction(_fields(amount=str(MAX_AMOUNT)))
    assert txn.amount == MAX_AMOUNT


def test_description_length_limit():
    assert build_transaction(_fields(description="x" * 100)).description == "x" * 100
    assert _code(_fields(description="x" * 101)) == "description_too_long"


def test_invalid_date():
    assert _code(_fields(date="not a date")) == "invalid_date"


def test_missing_installment_fields():
    fields = _installment_fields()
    del fields["installment_amount"]

    assert _code(fields) == "missing_installment_fields"


@pytest.mark.parametrize(
    "overrides",
    [
        {"installment_count": 0},
        {"installment_index": 0},
        {"installment_amount": "-1"},
        {"installment_count": "2.5"},
    ],
)
def test_invalid_installment_values(overrides):
    assert _code(_installment_fields(**overrides)) == "invalid_installment_values"


def test_installment_index_cannot_exceed_count():
    assert _code(_installment_fields(installment_index=13)) == "invalid_installment_index"


def test_last_installment_is_valid():
    txn = build_transaction(_installment_fields(installment_index=12))
    assert txn.installment_index == 12


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        build_transaction(_fields(kind="nope"))
    assert issubclass(ValidationError, DomainError)


def test_validate_transaction_round_trips_entity(make_transaction):
    txn = make_transaction()
    assert validate_transaction(txn) == txn


def test_validate_transaction_rejects_bad_entity(make_transaction):
    txn = make_transaction(amount=Decimal("0"))

    with pytest.raises(ValidationError) as excinfo:
        validate_transaction(txn)

    assert excinfo.value.code == "invalid_amount"
