"""Domain constants for the ledger dashboard."""

WORKS_FEED = "works"
EXPENSES_FEED = "expenses"

STATUS_PAID = "Paid"
STATUS_PENDING = "Pending"

WORK_MIN_FIELDS = 5
EXPENSE_MIN_FIELDS = 3

TOP_CLIENTS_LIMIT = 5


__all__ = [
    "WORKS_FEED",
    "EXPENSES_FEED",
    "STATUS_PAID",
    "STATUS_PENDING",
    "WORK_MIN_FIELDS",
    "EXPENSE_MIN_FIELDS",
    "TOP_CLIENTS_LIMIT",
]
