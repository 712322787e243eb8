"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from pennywise.domain.entities import Frequency, Transaction, TransactionKind


class Database(ABC):
    """Abstract transaction store for pennywise."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def create_transaction(self, transaction: Transaction) -> str:
        """Insert one transaction. Returns its ID."""
        pass

    @abstractmethod
    def create_transactions(self, transactions: Sequence[Transaction]) -> list[str]:
        """Insert several transactions in a single commit. Returns their IDs."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(self, transaction: Transaction) -> None:
        """Replace every field of the stored transaction with the same ID."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a single transaction."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        kind: Optional[TransactionKind] = None,
        frequency: Optional[Frequency] = None,
        category: Optional[str] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, ordered by date.

        Args:
            start_date: Optional inclusive start date filter
            end_date: Optional inclusive end date filter
            kind: Optional income/expense filter
            frequency: Optional frequency filter
            category: Optional exact category filter
        """
        pass
