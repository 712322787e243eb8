"""Dashboard aggregation over a list of transactions.

Every function here is a pure reduction. Installment records count with
their per-installment share, never with the purchase total, so a series
spread over twelve months adds one twelfth of its value to each month.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from pennywise.domain.entities import (
    EXPENSE_CATEGORIES,
    DashboardFigures,
    InstallmentBill,
    MonthlyTotal,
    PendingInstallments,
    Transaction,
    TransactionKind,
)
from pennywise.utils.date_parser import last_n_months

ZERO = Decimal("0")


def contribution_value(txn: Transaction) -> Decimal:
    """Return the amount a transaction counts toward period sums.

    Installment records use ``installment_amount``; when it is missing the
    share is derived from ``amount / installment_count``, and failing that
    the full amount is used.
    """
    if not txn.is_installment:
        return txn.amount
    if txn.installment_amount:
        return txn.installment_amount
    if txn.installment_count:
        return txn.amount / Decimal(txn.installment_count)
    return txn.amount


def in_month(txn: Transaction, year: int, month: int) -> bool:
    return txn.date.year == year and txn.date.month == month


def _sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def total_balance(transactions: Sequence[Transaction], as_of: date) -> Decimal:
    """Net balance of everything posted on or before ``as_of``."""
    return _sum(
        contribution_value(txn) if txn.is_income else -contribution_value(txn)
        for txn in transactions
        if txn.date <= as_of
    )


def _monthly_total(
    transactions: Sequence[Transaction],
    kind: TransactionKind,
    year: int,
    month: int,
) -> Decimal:
    return _sum(
        contribution_value(txn)
        for txn in transactions
        if txn.kind == kind and in_month(txn, year, month)
    )


def monthly_income(transactions: Sequence[Transaction], year: int, month: int) -> Decimal:
    """Income posted in the given calendar month."""
    return _monthly_total(transactions, TransactionKind.INCOME, year, month)


def monthly_expenses(transactions: Sequence[Transaction], year: int, month: int) -> Decimal:
    """Expenses posted in the given calendar month."""
    return _monthly_total(transactions, TransactionKind.EXPENSE, year, month)


def category_totals(
    transactions: Sequence[Transaction],
    year: int,
    month: int,
    categories: Sequence[str] = EXPENSE_CATEGORIES,
) -> dict[str, Decimal]:
    """Expense totals per category for one month.

    Every category in ``categories`` appears in the result, in order, even
    when nothing was spent on it. Expenses in other categories are ignored.
    """
    totals = {category: ZERO for category in categories}
    for txn in transactions:
        if txn.kind != TransactionKind.EXPENSE or not in_month(txn, year, month):
            continue
        if txn.category in totals:
            totals[txn.category] += contribution_value(txn)
    return totals


def pending_installments(
    transactions: Sequence[Transaction], as_of: date
) -> PendingInstallments:
    """Count and value of installments dated after ``as_of``."""
    pending = [txn for txn in transactions if txn.is_installment and txn.date > as_of]
    return PendingInstallments(
        count=len(pending),
        total=_sum(contribution_value(txn) for txn in pending),
    )


def monthly_expense_trend(
    transactions: Sequence[Transaction], as_of: date, months: int = 6
) -> list[MonthlyTotal]:
    """Monthly expense totals for the ``months`` months ending at ``as_of``."""
    return [
        MonthlyTotal(year=year, month=month, total=monthly_expenses(transactions, year, month))
        for year, month in last_n_months(as_of, months)
    ]


def installment_bills(
    transactions: Sequence[Transaction], year: int, month: int
) -> list[InstallmentBill]:
    """Installments due in a month, largest first."""
    bills = [
        InstallmentBill(
            description=txn.description,
            value=contribution_value(txn),
            installment_index=txn.installment_index or 1,
            installment_count=txn.installment_count or 1,
        )
        for txn in transactions
        if txn.is_installment and in_month(txn, year, month)
    ]
    bills.sort(key=lambda bill: bill.value, reverse=True)
    return bills


def aggregate(
    transactions: Sequence[Transaction],
    as_of: Optional[date] = None,
    trend_months: int = 6,
) -> DashboardFigures:
    """Compute all dashboard figures for ``as_of`` (defaults to today)."""
    if as_of is None:
        as_of = date.today()
    year, month = as_of.year, as_of.month
    bills = installment_bills(transactions, year, month)

    return DashboardFigures(
        as_of=as_of,
        total_balance=total_balance(transactions, as_of),
        monthly_income=monthly_income(transactions, year, month),
        monthly_expenses=monthly_expenses(transactions, year, month),
        category_totals=category_totals(transactions, year, month),
        pending_installments=pending_installments(transactions, as_of),
        bills_total=_sum(bill.value for bill in bills),
        installment_bills=tuple(bills),
        expense_trend=tuple(monthly_expense_trend(transactions, as_of, trend_months)),
    )
