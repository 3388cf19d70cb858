"""Domain package for business rules and core models."""

from .constants import (
    EXPENSES_FEED,
    STATUS_PAID,
    STATUS_PENDING,
    TOP_CLIENTS_LIMIT,
    WORKS_FEED,
)
from .models import (
    ClientRevenueEntry,
    DashboardSnapshot,
    DashboardSummary,
    ExpenseAggregate,
    ExpenseFeed,
    ExpenseRecord,
    WorkRecord,
)
from .policies import classify_work_status
from .services import (
    compute_dashboard_summary,
    filter_expense_records,
    filter_work_records,
    normalize_date,
    parse_expenses_csv,
    parse_works_csv,
    tokenize_line,
)

__all__ = [
    "EXPENSES_FEED",
    "STATUS_PAID",
    "STATUS_PENDING",
    "TOP_CLIENTS_LIMIT",
    "WORKS_FEED",
    "ClientRevenueEntry",
    "DashboardSnapshot",
    "DashboardSummary",
    "ExpenseAggregate",
    "ExpenseFeed",
    "ExpenseRecord",
    "WorkRecord",
    "classify_work_status",
    "compute_dashboard_summary",
    "filter_expense_records",
    "filter_work_records",
    "normalize_date",
    "parse_expenses_csv",
    "parse_works_csv",
    "tokenize_line",
]
