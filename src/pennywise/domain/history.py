"""Transaction history filtering."""

from datetime import date
from typing import Optional, Sequence

from pennywise.domain.entities import Frequency, Transaction, TransactionKind


def filter_history(
    transactions: Sequence[Transaction],
    as_of: Optional[date] = None,
    search: Optional[str] = None,
    kind: Optional[TransactionKind | str] = None,
    frequency: Optional[Frequency | str] = None,
    category: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> list[Transaction]:
    """Select transactions for the history view.

    Installments that have not posted by ``as_of`` are hidden. ``search``
    matches the description or the category, ignoring case. Date bounds are
    inclusive.
    """
    if as_of is None:
        as_of = date.today()
    kind = TransactionKind(kind) if kind is not None else None
    frequency = Frequency(frequency) if frequency is not None else None
    needle = search.lower() if search else None

    result = []
    for txn in transactions:
        if txn.is_installment and txn.date > as_of:
            continue
        if needle and needle not in txn.description.lower() and needle not in txn.category.lower():
            continue
        if kind is not None and txn.kind != kind:
            continue
        if frequency is not None and txn.frequency != frequency:
            continue
        if category is not None and txn.category != category:
            continue
        if start_date is not None and txn.date < start_date:
            continue
        if end_date is not None and txn.date > end_date:
            continue
        result.append(txn)
    return result
