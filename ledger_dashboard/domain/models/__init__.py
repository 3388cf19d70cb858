"""Domain models package."""

from .finance import ClientRevenueEntry, DashboardSummary
from .records import (
    DashboardSnapshot,
    ExpenseAggregate,
    ExpenseFeed,
    ExpenseRecord,
    FeedName,
    WorkRecord,
    WorkStatus,
)

__all__ = [
    "ClientRevenueEntry",
    "DashboardSummary",
    "DashboardSnapshot",
    "ExpenseAggregate",
    "ExpenseFeed",
    "ExpenseRecord",
    "FeedName",
    "WorkRecord",
    "WorkStatus",
]
