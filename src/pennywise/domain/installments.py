"""Installment series generation and regrouping.

A purchase paid in installments is stored as one record per month. The
records carry no link to each other: a series is recognised by the shared
description prefix ("Laptop" in "Laptop (3/12)").
"""

import re
import uuid
from collections import defaultdict
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from pennywise.domain.entities import (
    Frequency,
    InstallmentProgress,
    InstallmentPurchase,
    Transaction,
)
from pennywise.domain.errors import ValidationError
from pennywise.utils.date_parser import add_months

SERIES_SEPARATOR = " ("
_POSITION_PATTERN = re.compile(r"\((\d+)/\d+\)")


def new_transaction_id() -> str:
    """Generate an opaque transaction identifier."""
    return str(uuid.uuid4())


def series_key(description: str) -> str:
    """Return the series grouping key, the text before the first separator."""
    return description.split(SERIES_SEPARATOR, 1)[0]


def installment_description(description: str, index: int, count: int) -> str:
    return f"{description} ({index}/{count})"


def expand_installments(
    purchase: InstallmentPurchase, installment_count: int
) -> list[Transaction]:
    """Split a purchase into one transaction per month.

    Record ``i`` posts ``i`` calendar months after the start date and carries
    the unrounded share ``total_amount / installment_count``.

    Args:
        purchase: Purchase details
        installment_count: Number of monthly installments

    Returns:
        List of installment transactions, first installment first

    Raises:
        ValidationError: If the count or total amount is not positive
    """
    if installment_count <= 0:
        raise ValidationError(
            f"Installment count must be positive, got {installment_count}",
            code="invalid_installment_count",
        )
    total_amount = Decimal(purchase.total_amount)
    if total_amount <= 0:
        raise ValidationError(
            f"Total amount must be positive, got {total_amount}",
            code="invalid_amount",
        )

    start_date = purchase.start_date or date.today()
    share = total_amount / Decimal(installment_count)

    return [
        Transaction(
            id=new_transaction_id(),
            kind=purchase.kind,
            frequency=Frequency.INSTALLMENT,
            description=installment_description(
                purchase.description, i + 1, installment_count
            ),
            amount=total_amount,
            category=purchase.category,
            date=add_months(start_date, i),
            installment_amount=share,
            installment_count=installment_count,
            installment_index=i + 1,
        )
        for i in range(installment_count)
    ]


def parse_installment_position(description: str) -> int:
    """Extract the installment number from an "(i/n)" suffix.

    Returns 1 when the description carries no such suffix.
    """
    match = _POSITION_PATTERN.search(description)
    if match is None:
        return 1
    return int(match.group(1))


def group_series(transactions: Sequence[Transaction]) -> dict[str, list[Transaction]]:
    """Group installment records by series key, preserving input order."""
    groups: dict[str, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        if txn.is_installment:
            groups[series_key(txn.description)].append(txn)
    return dict(groups)


def regroup_installments(transactions: Sequence[Transaction]) -> list[Transaction]:
    """Return copies with installment descriptions rewritten for display.

    Each installment becomes "{base} (Installment {paid} of {total})". The
    total counts the series records present in ``transactions``; the paid
    number comes from the original "(i/n)" suffix, not from
    ``installment_index``. Other records are returned unchanged.
    """
    groups = group_series(transactions)

    result = []
    for txn in transactions:
        if not txn.is_installment:
            result.append(txn)
            continue
        base = series_key(txn.description)
        paid = parse_installment_position(txn.description)
        total = len(groups[base])
        result.append(
            replace(txn, description=f"{base} (Installment {paid} of {total})")
        )
    return result


def collapse_installments(transactions: Sequence[Transaction]) -> list[Transaction]:
    """Keep only the first record of each installment series.

    Non-installment records are always kept. Input order is preserved.
    """
    seen: set[str] = set()
    result = []
    for txn in transactions:
        if txn.is_installment:
            base = series_key(txn.description)
            if base in seen:
                continue
            seen.add(base)
        result.append(txn)
    return result


def series_progress(
    transaction: Transaction,
    transactions: Sequence[Transaction],
    as_of: Optional[date] = None,
) -> Optional[InstallmentProgress]:
    """Compute payment progress for the series ``transaction`` belongs to.

    An installment counts as paid once its date is on or before ``as_of``.
    Returns None for non-installment records.
    """
    if not transaction.is_installment:
        return None
    if as_of is None:
        as_of = date.today()

    base = series_key(transaction.description)
    series = [
        txn
        for txn in transactions
        if txn.is_installment and series_key(txn.description) == base
    ]
    # the record itself may not be part of ``transactions``
    total = len(series) or 1
    paid = sum(1 for txn in series if txn.date <= as_of)

    if transaction.installment_amount:
        installment_value = transaction.installment_amount
    else:
        installment_value = transaction.amount / total

    return InstallmentProgress(
        paid=paid,
        total=total,
        installment_value=installment_value,
        total_value=transaction.amount,
    )
