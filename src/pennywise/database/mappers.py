"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the entities stay free of
column types and enum storage details.
"""

from decimal import Decimal
from typing import Optional

from pennywise.domain import entities as domain
from pennywise.database.models import Transaction as ORMTransaction


def _optional_decimal(value) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(value)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        kind=domain.TransactionKind(orm_transaction.kind),
        frequency=domain.Frequency(orm_transaction.frequency),
        description=orm_transaction.description,
        amount=Decimal(orm_transaction.amount),
        category=orm_transaction.category,
        date=orm_transaction.date,
        installment_amount=_optional_decimal(orm_transaction.installment_amount),
        installment_count=orm_transaction.installment_count,
        installment_index=orm_transaction.installment_index,
    )


def apply_transaction_fields(
    orm_transaction: ORMTransaction, transaction: domain.Transaction
) -> ORMTransaction:
    """Copy every field except the identifier from an entity onto a row."""
    orm_transaction.kind = transaction.kind.value
    orm_transaction.frequency = transaction.frequency.value
    orm_transaction.description = transaction.description
    orm_transaction.amount = transaction.amount
    orm_transaction.category = transaction.category
    orm_transaction.date = transaction.date
    orm_transaction.installment_amount = transaction.installment_amount
    orm_transaction.installment_count = transaction.installment_count
    orm_transaction.installment_index = transaction.installment_index
    return orm_transaction


def transaction_to_orm(transaction: domain.Transaction) -> ORMTransaction:
    """Build a new SQLAlchemy row from a domain entity."""
    return apply_transaction_fields(ORMTransaction(id=transaction.id), transaction)
