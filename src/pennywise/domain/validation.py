"""Store boundary validation for transaction records."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from dateutil import parser as date_parser

from pennywise.domain import errors
from pennywise.domain.entities import Frequency, Transaction, TransactionKind
from pennywise.domain.errors import ValidationError
from pennywise.domain.installments import new_transaction_id

MAX_AMOUNT = Decimal("999999999.99")
MAX_DESCRIPTION_LENGTH = 100

REQUIRED_FIELDS = ("kind", "frequency", "description", "amount", "category", "date")
INSTALLMENT_FIELDS = ("installment_count", "installment_index", "installment_amount")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be numeric", code="invalid_amount")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be numeric", code="invalid_amount")
    if not result.is_finite():
        raise ValidationError(f"{field_name} must be numeric", code="invalid_amount")
    return result


def _to_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be an integer", code="invalid_installment_values"
        )
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(
            f"{field_name} must be an integer", code="invalid_installment_values"
        )
    if not number.is_finite() or number != number.to_integral_value():
        raise ValidationError(
            f"{field_name} must be an integer", code="invalid_installment_values"
        )
    return int(number)


def _to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date_parser.isoparse(str(value).strip()).date()
    except (ValueError, OverflowError):
        pass
    try:
        return date_parser.parse(str(value).strip()).date()
    except (ValueError, OverflowError, TypeError):
        raise ValidationError(
            "Date must be in a valid format (YYYY-MM-DD)", code="invalid_date"
        )


def _to_enum(enum_cls, value: Any, field_name: str, code: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(
            errors.invalid_choice(field_name, value, [member.value for member in enum_cls]),
            code=code,
        )


def build_transaction(
    fields: Mapping[str, Any], transaction_id: Optional[str] = None
) -> Transaction:
    """Validate raw fields and build a Transaction entity.

    Args:
        fields: Mapping with kind, frequency, description, amount, category,
            date and, for installments, installment_count, installment_index
            and installment_amount
        transaction_id: Identifier for the record; a new one is generated
            when omitted

    Returns:
        Validated Transaction entity

    Raises:
        ValidationError: If any rule fails; ``code`` names the rule
    """
    missing = [name for name in REQUIRED_FIELDS if _is_blank(fields.get(name))]
    if missing:
        raise ValidationError(errors.missing_fields(missing), code="missing_fields")

    kind = _to_enum(TransactionKind, fields["kind"], "kind", "invalid_kind")
    frequency = _to_enum(Frequency, fields["frequency"], "frequency", "invalid_frequency")

    amount = _to_decimal(fields["amount"], "amount")
    if amount <= 0 or amount > MAX_AMOUNT:
        raise ValidationError(errors.amount_out_of_range(MAX_AMOUNT), code="invalid_amount")

    description = str(fields["description"])
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            errors.description_too_long(MAX_DESCRIPTION_LENGTH),
            code="description_too_long",
        )

    txn_date = _to_date(fields["date"])

    installment_amount = None
    installment_count = None
    installment_index = None
    if frequency == Frequency.INSTALLMENT:
        absent = [name for name in INSTALLMENT_FIELDS if _is_blank(fields.get(name))]
        if absent:
            raise ValidationError(
                errors.missing_fields(absent), code="missing_installment_fields"
            )
        installment_count = _to_int(fields["installment_count"], "installment_count")
        installment_index = _to_int(fields["installment_index"], "installment_index")
        installment_amount = _to_decimal(fields["installment_amount"], "installment_amount")
        if installment_count <= 0 or installment_index <= 0 or installment_amount <= 0:
            raise ValidationError(
                "Installment count, index and amount must be positive",
                code="invalid_installment_values",
            )
        if installment_index > installment_count:
            raise ValidationError(
                errors.installment_index_out_of_range(installment_index, installment_count),
                code="invalid_installment_index",
            )

    if transaction_id is None:
        transaction_id = new_transaction_id()

    return Transaction(
        id=transaction_id,
        kind=kind,
        frequency=frequency,
        description=description,
        amount=amount,
        category=str(fields["category"]),
        date=txn_date,
        installment_amount=installment_amount,
        installment_count=installment_count,
        installment_index=installment_index,
    )


def validate_transaction(txn: Transaction) -> Transaction:
    """Re-run boundary validation on an already built entity."""
    fields = {
        "kind": txn.kind.value if isinstance(txn.kind, TransactionKind) else txn.kind,
        "frequency": (
            txn.frequency.value if isinstance(txn.frequency, Frequency) else txn.frequency
        ),
        "description": txn.description,
        "amount": txn.amount,
        "category": txn.category,
        "date": txn.date,
        "installment_amount": txn.installment_amount,
        "installment_count": txn.installment_count,
        "installment_index": txn.installment_index,
    }
    return build_transaction(fields, transaction_id=txn.id)
