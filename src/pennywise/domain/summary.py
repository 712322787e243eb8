"""Summary domain service for dashboard, history and installment views."""

from datetime import date
from typing import Optional

from pennywise.database.base import Database
from pennywise.domain.aggregation import aggregate
from pennywise.domain.entities import (
    DashboardFigures,
    Frequency,
    InstallmentProgress,
    Transaction,
    TransactionKind,
)
from pennywise.domain.history import filter_history
from pennywise.domain.installments import (
    collapse_installments,
    regroup_installments,
    series_progress,
)


class SummaryService:
    """Service for building read-only views over all transactions."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def dashboard(self, as_of: Optional[date] = None) -> DashboardFigures:
        """Compute dashboard figures for ``as_of`` (defaults to today)."""
        return aggregate(self.db.list_transactions(), as_of)

    def history(
        self,
        as_of: Optional[date] = None,
        search: Optional[str] = None,
        kind: Optional[TransactionKind | str] = None,
        frequency: Optional[Frequency | str] = None,
        category: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """Filtered history with installment descriptions regrouped.

        Series totals are counted among the records that survive the
        filters, so a partially paid series shows only its posted part.
        """
        selected = filter_history(
            self.db.list_transactions(),
            as_of=as_of,
            search=search,
            kind=kind,
            frequency=frequency,
            category=category,
            start_date=start_date,
            end_date=end_date,
        )
        return regroup_installments(selected)

    def installment_overview(
        self, as_of: Optional[date] = None
    ) -> list[tuple[Transaction, InstallmentProgress]]:
        """One entry per installment series with its payment progress."""
        installments = self.db.list_transactions(frequency=Frequency.INSTALLMENT)
        return [
            (txn, series_progress(txn, installments, as_of))
            for txn in collapse_installments(installments)
        ]
