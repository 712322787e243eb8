"""Tests for database mappers."""

from datetime import date
from decimal import Decimal

from pennywise.database.models import Transaction as ORMTransaction
from pennywise.database.mappers import (
    apply_transaction_fields,
    transaction_to_domain,
    transaction_to_orm,
)
from pennywise.domain.entities import Frequency, Transaction, TransactionKind


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        """Test converting ORM Transaction to domain Transaction."""
        orm_txn = ORMTransaction(
            id="abc",
            kind="expense",
            frequency="installment",
            description="Laptop (2/12)",
            amount=Decimal("4800.00"),
            category="Education",
            date=date(2025, 2, 20),
            installment_amount=Decimal("400.000000"),
            installment_count=12,
            installment_index=2,
        )

        txn = transaction_to_domain(orm_txn)

        assert isinstance(txn, Transaction)
        assert txn.id == "abc"
        assert txn.kind == TransactionKind.EXPENSE
        assert txn.frequency == Frequency.INSTALLMENT
        assert txn.amount == Decimal("4800")
        assert txn.installment_amount == Decimal("400")
        assert txn.installment_count == 12
        assert txn.installment_index == 2

    def test_transaction_to_domain_without_installment_fields(self):
        """Plain records keep their installment fields empty."""
        orm_txn = ORMTransaction(
            id="def",
            kind="income",
            frequency="fixed",
            description="Salary",
            amount=Decimal("5000.00"),
            category="Salary",
            date=date(2025, 3, 5),
        )

        txn = transaction_to_domain(orm_txn)

        assert txn.is_income
        assert not txn.is_installment
        assert txn.installment_amount is None
        assert txn.installment_count is None

    def test_transaction_to_orm_stores_enum_values(self, make_transaction):
        """Enums are stored as their string values."""
        txn = make_transaction(kind=TransactionKind.INCOME, frequency=Frequency.FIXED)

        orm_txn = transaction_to_orm(txn)

        assert orm_txn.id == txn.id
        assert orm_txn.kind == "income"
        assert orm_txn.frequency == "fixed"
        assert orm_txn.amount == txn.amount

    def test_apply_fields_keeps_identifier(self, make_transaction):
        """Updating a row never touches its primary key."""
        orm_txn = ORMTransaction(id="keep-me")
        txn = make_transaction(description="Bus pass", category="Transport")

        apply_transaction_fields(orm_txn, txn)

        assert orm_txn.id == "keep-me"
        assert orm_txn.description == "Bus pass"
        assert orm_txn.category == "Transport"
