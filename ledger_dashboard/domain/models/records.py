"""Domain models for rows read from the published sheets."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Literal

WorkStatus = Literal["Paid", "Pending"]
FeedName = Literal["works", "expenses"]


@dataclass(frozen=True)
class WorkRecord:
    """One row of billable work.

    Attributes:
        date: Display-formatted date, or the raw cell when it does not parse.
        client: Client name, compared case-sensitively.
        description: Work description.
        price: Non-negative amount billed.
        status: Payment status derived from the sheet's note column.
    """

    date: str
    client: str
    description: str
    price: Decimal
    status: WorkStatus


@dataclass(frozen=True)
class ExpenseRecord:
    """One row of the expenses ledger."""

    date: str
    credit: Decimal
    debit: Decimal
    counterparty: str
    client: str
    row_balance: Decimal


@dataclass(frozen=True)
class ExpenseAggregate:
    """Totals read from fixed cells of the expenses sheet.

    Attributes:
        total_credit: Sum of the two credit cells in column G.
        balance: Value of the balance cell in column G.
    """

    total_credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class ExpenseFeed:
    """Expense records together with their positional aggregate."""

    records: tuple[ExpenseRecord, ...]
    aggregate: ExpenseAggregate


@dataclass(frozen=True)
class DashboardSnapshot:
    """Read view of the dashboard store at one point in time."""

    works: tuple[WorkRecord, ...] = ()
    expenses: tuple[ExpenseRecord, ...] = ()
    expense_aggregate: ExpenseAggregate | None = None
    works_refreshed_at: datetime | None = None
    expenses_refreshed_at: datetime | None = None


__all__ = [
    "WorkStatus",
    "FeedName",
    "WorkRecord",
    "ExpenseRecord",
    "ExpenseAggregate",
    "ExpenseFeed",
    "DashboardSnapshot",
]
