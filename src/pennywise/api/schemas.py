"""Request and response models for the REST API.

JSON keys are camelCase on the wire and snake_case in Python.
"""

import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pennywise.domain.entities import (
    DashboardFigures,
    InstallmentProgress,
    Transaction,
    TransactionKind,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionIn(CamelModel):
    """Raw transaction body.

    Every field is optional here so that missing or out-of-range values are
    reported by the domain validation with its own error codes.
    """

    id: Optional[str] = None
    kind: Optional[str] = None
    frequency: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    category: Optional[str] = None
    date: Optional[str] = None
    installment_amount: Optional[Decimal] = None
    installment_count: Optional[int] = None
    installment_index: Optional[int] = None

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude={"id"})


class InstallmentPurchaseIn(CamelModel):
    description: str
    total_amount: Decimal
    category: str
    installment_count: int
    kind: TransactionKind = TransactionKind.EXPENSE
    start_date: Optional[datetime.date] = None


class TransactionOut(CamelModel):
    id: str
    kind: str
    frequency: str
    description: str
    amount: float
    category: str
    date: datetime.date
    installment_amount: Optional[float] = None
    installment_count: Optional[int] = None
    installment_index: Optional[int] = None

    @classmethod
    def from_entity(cls, txn: Transaction) -> "TransactionOut":
        return cls(
            id=txn.id,
            kind=txn.kind.value,
            frequency=txn.frequency.value,
            description=txn.description,
            amount=float(txn.amount),
            category=txn.category,
            date=txn.date,
            installment_amount=(
                float(txn.installment_amount)
                if txn.installment_amount is not None
                else None
            ),
            installment_count=txn.installment_count,
            installment_index=txn.installment_index,
        )


class PendingInstallmentsOut(CamelModel):
    count: int
    total: float


class InstallmentBillOut(CamelModel):
    description: str
    value: float
    installment_index: int
    installment_count: int


class MonthlyTotalOut(CamelModel):
    month: str
    total: float


class DashboardOut(CamelModel):
    as_of: datetime.date
    total_balance: float
    monthly_income: float
    monthly_expenses: float
    category_totals: dict[str, float]
    pending_installments: PendingInstallmentsOut
    bills_total: float
    installment_bills: List[InstallmentBillOut]
    expense_trend: List[MonthlyTotalOut]

    @classmethod
    def from_figures(cls, figures: DashboardFigures) -> "DashboardOut":
        return cls(
            as_of=figures.as_of,
            total_balance=float(figures.total_balance),
            monthly_income=float(figures.monthly_income),
            monthly_expenses=float(figures.monthly_expenses),
            category_totals={
                name: float(total) for name, total in figures.category_totals.items()
            },
            pending_installments=PendingInstallmentsOut(
                count=figures.pending_installments.count,
                total=float(figures.pending_installments.total),
            ),
            bills_total=float(figures.bills_total),
            installment_bills=[
                InstallmentBillOut(
                    description=bill.description,
                    value=float(bill.value),
                    installment_index=bill.installment_index,
                    installment_count=bill.installment_count,
                )
                for bill in figures.installment_bills
            ],
            expense_trend=[
                MonthlyTotalOut(month=point.label, total=float(point.total))
                for point in figures.expense_trend
            ],
        )


class InstallmentSeriesOut(CamelModel):
    transaction: TransactionOut
    paid: int
    total: int
    installment_value: float
    total_value: float

    @classmethod
    def from_progress(
        cls, txn: Transaction, progress: InstallmentProgress
    ) -> "InstallmentSeriesOut":
        return cls(
            transaction=TransactionOut.from_entity(txn),
            paid=progress.paid,
            total=progress.total,
            installment_value=float(progress.installment_value),
            total_value=float(progress.total_value),
        )
