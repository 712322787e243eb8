"""Transaction domain service."""

from typing import Any, Optional, Sequence
from datetime import date
from decimal import Decimal
from pennywise.database.base import Database
from pennywise.domain.entities import (
    Frequency,
    InstallmentPurchase,
    Transaction,
    TransactionKind,
)
from pennywise.domain.errors import NotFoundError, transaction_not_found
from pennywise.domain.installments import expand_installments
from pennywise.domain.validation import build_transaction, validate_transaction


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        kind: TransactionKind | str,
        frequency: Frequency | str,
        description: str,
        amount: Decimal | str | float,
        category: str,
        date: date | str,
        installment_amount: Optional[Decimal] = None,
        installment_count: Optional[int] = None,
        installment_index: Optional[int] = None,
        transaction_id: Optional[str] = None,
    ) -> str:
        """Create a transaction.

        Args:
            kind: income or expense
            frequency: fixed, variable or installment
            description: Free text, at most 100 characters
            amount: Positive amount (purchase total for installments)
            category: Category name
            date: Posting date
            installment_amount: Per-installment share (installments only)
            installment_count: Number of installments (installments only)
            installment_index: 1-based position (installments only)
            transaction_id: Optional identifier; generated when omitted

        Returns:
            Transaction ID

        Raises:
            ValidationError: If any field fails validation
        """
        txn = build_transaction(
            {
                "kind": kind,
                "frequency": frequency,
                "description": description,
                "amount": amount,
                "category": category,
                "date": date,
                "installment_amount": installment_amount,
                "installment_count": installment_count,
                "installment_index": installment_index,
            },
            transaction_id=transaction_id,
        )
        return self.db.create_transaction(txn)

    def create_from_fields(
        self, fields: dict[str, Any], transaction_id: Optional[str] = None
    ) -> Transaction:
        """Validate a raw field mapping, store it, and return the entity."""
        txn = build_transaction(fields, transaction_id=transaction_id)
        self.db.create_transaction(txn)
        return txn

    def create_transactions(self, transactions: Sequence[Transaction]) -> list[str]:
        """Create several transactions at once.

        Every record is validated before anything is written, so a bad
        record leaves the store untouched.

        Raises:
            ValidationError: If any record fails validation
        """
        validated = [validate_transaction(txn) for txn in transactions]
        if not validated:
            return []
        return self.db.create_transactions(validated)

    def create_installment_purchase(
        self,
        description: str,
        total_amount: Decimal,
        category: str,
        installment_count: int,
        kind: TransactionKind = TransactionKind.EXPENSE,
        start_date: Optional[date] = None,
    ) -> list[Transaction]:
        """Split a purchase into monthly installments and store them.

        Returns:
            The created installment transactions, first installment first

        Raises:
            ValidationError: If the purchase or any generated record is invalid
        """
        purchase = InstallmentPurchase(
            description=description,
            total_amount=Decimal(total_amount),
            category=category,
            kind=TransactionKind(kind),
            start_date=start_date,
        )
        installments = expand_installments(purchase, installment_count)
        self.create_transactions(installments)
        return installments

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: str) -> Transaction:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def replace_transaction(
        self, transaction_id: str, fields: dict[str, Any]
    ) -> Transaction:
        """Replace a stored transaction with a complete new set of fields.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If the new fields fail validation
        """
        self.require_transaction(transaction_id)
        txn = build_transaction(fields, transaction_id=transaction_id)
        self.db.update_transaction(txn)
        return txn

    def update_transaction(self, transaction_id: str, **changes: Any) -> Transaction:
        """Update selected fields of a transaction.

        Fields left out keep their stored value. Passing None for an
        installment field clears it.

        Args:
            transaction_id: Transaction ID to update
            **changes: Field names and new values

        Returns:
            The updated transaction

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If the resulting record fails validation
        """
        current = self.require_transaction(transaction_id)
        fields = {
            "kind": current.kind,
            "frequency": current.frequency,
            "description": current.description,
            "amount": current.amount,
            "category": current.category,
            "date": current.date,
            "installment_amount": current.installment_amount,
            "installment_count": current.installment_count,
            "installment_index": current.installment_index,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown transaction fields: {', '.join(sorted(unknown))}")
        fields.update(changes)
        return self.replace_transaction(transaction_id, fields)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Other installments of the same purchase are not affected.

        Args:
            transaction_id: Transaction ID to delete

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        kind: Optional[TransactionKind | str] = None,
        frequency: Optional[Frequency | str] = None,
        category: Optional[str] = None,
    ) -> list[Transaction]:
        """List transactions with filters.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            kind: Optional income/expense filter
            frequency: Optional frequency filter
            category: Optional category filter

        Returns:
            List of transaction entities
        """
        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            kind=TransactionKind(kind) if kind is not None else None,
            frequency=Frequency(frequency) if frequency is not None else None,
            category=category,
        )
