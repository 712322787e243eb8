"""Client-side transaction cache.

Holds the full transaction list between store calls. Invalidation rules:
a batch write reloads everything from the store, a single create appends,
a single update patches the cached record in place and a delete removes it.
"""

from datetime import date
from typing import Any, Optional, Sequence

from pennywise.domain.aggregation import aggregate
from pennywise.domain.entities import DashboardFigures, Transaction
from pennywise.domain.transaction import TransactionService


class TransactionCache:
    """Cached view of all transactions backed by a TransactionService."""

    def __init__(self, service: TransactionService):
        self.service = service
        self._transactions: Optional[list[Transaction]] = None

    @property
    def is_loaded(self) -> bool:
        return self._transactions is not None

    @property
    def transactions(self) -> list[Transaction]:
        """All transactions, loading them on first access."""
        if self._transactions is None:
            self.reload()
        return list(self._transactions)

    def reload(self) -> None:
        """Replace the cached list with a fresh copy from the store."""
        self._transactions = self.service.list_transactions()

    def invalidate(self) -> None:
        self._transactions = None

    def add(self, **fields: Any) -> Transaction:
        """Create one transaction and append it to the cache."""
        txn = self.service.create_from_fields(fields)
        if self._transactions is not None:
            self._transactions.append(txn)
        return txn

    def add_many(self, transactions: Sequence[Transaction]) -> list[str]:
        """Create transactions not already cached, then reload everything.

        Returns:
            IDs of the transactions actually created
        """
        known = {txn.id for txn in self.transactions}
        fresh = [txn for txn in transactions if txn.id not in known]
        if not fresh:
            return []
        created = self.service.create_transactions(fresh)
        self.reload()
        return created

    def update(self, transaction_id: str, **changes: Any) -> Transaction:
        """Update one transaction and patch the cached copy."""
        updated = self.service.update_transaction(transaction_id, **changes)
        if self._transactions is not None:
            self._transactions = [
                updated if txn.id == transaction_id else txn
                for txn in self._transactions
            ]
        return updated

    def delete(self, transaction_id: str) -> None:
        """Delete one transaction and drop it from the cache."""
        self.service.delete_transaction(transaction_id)
        if self._transactions is not None:
            self._transactions = [
                txn for txn in self._transactions if txn.id != transaction_id
            ]

    def figures(self, as_of: Optional[date] = None) -> DashboardFigures:
        """Dashboard figures over the cached transactions."""
        return aggregate(self.transactions, as_of)
