"""Domain model entities for pennywise.

These are pure data classes representing business concepts, independent of
database schema. The store, the API and the CLI all exchange these objects.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionKind(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Frequency(str, Enum):
    """How a transaction recurs."""

    FIXED = "fixed"
    VARIABLE = "variable"
    INSTALLMENT = "installment"


EXPENSE_CATEGORIES = (
    "Food",
    "Transport",
    "Housing",
    "Health",
    "Education",
    "Leisure",
    "Other",
)

INCOME_CATEGORIES = (
    "Salary",
    "Freelance",
    "Investments",
    "Sales",
    "Other",
)


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    For an installment record ``amount`` is the total of the whole purchase
    and ``installment_amount`` is this record's share of it.
    """

    id: str
    kind: TransactionKind
    frequency: Frequency
    description: str
    amount: Decimal
    category: str
    date: date
    installment_amount: Optional[Decimal] = None
    installment_count: Optional[int] = None
    installment_index: Optional[int] = None

    @property
    def is_installment(self) -> bool:
        return self.frequency == Frequency.INSTALLMENT

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME


@dataclass(frozen=True)
class InstallmentPurchase:
    """A purchase to be split into monthly installment records."""

    description: str
    total_amount: Decimal
    category: str
    kind: TransactionKind = TransactionKind.EXPENSE
    start_date: Optional[date] = None


@dataclass(frozen=True)
class InstallmentProgress:
    """Payment progress of one installment series."""

    paid: int
    total: int
    installment_value: Decimal
    total_value: Decimal


@dataclass(frozen=True)
class PendingInstallments:
    """Installment records that have not posted yet."""

    count: int
    total: Decimal


@dataclass(frozen=True)
class MonthlyTotal:
    """Sum of contributions for one calendar month."""

    year: int
    month: int
    total: Decimal

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class InstallmentBill:
    """One installment due in a given month."""

    description: str
    value: Decimal
    installment_index: int
    installment_count: int


@dataclass(frozen=True)
class DashboardFigures:
    """Derived dashboard figures for a reference date."""

    as_of: date
    total_balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    category_totals: dict[str, Decimal]
    pending_installments: PendingInstallments
    bills_total: Decimal
    installment_bills: tuple[InstallmentBill, ...] = field(default_factory=tuple)
    expense_trend: tuple[MonthlyTotal, ...] = field(default_factory=tuple)
