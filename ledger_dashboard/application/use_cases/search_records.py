"""Use case to search the stored record collections."""

from ledger_dashboard.application.ports.dashboard_store import (
    DashboardStorePort,
)
from ledger_dashboard.domain.models import ExpenseRecord, WorkRecord
from ledger_dashboard.domain.services.search import (
    filter_expense_records,
    filter_work_records,
)


class SearchRecordsUseCase:
    """Filter works and expenses by a case-insensitive substring."""

    def __init__(self, store: DashboardStorePort) -> None:
        self._store = store

    def search_works(self, query: str) -> list[WorkRecord]:
        """Return works whose client, description or date match."""
        return filter_work_records(self._store.snapshot().works, query)

    def search_expenses(self, query: str) -> list[ExpenseRecord]:
        """Return expenses whose counterparty, client or date match."""
        return filter_expense_records(self._store.snapshot().expenses, query)


__all__ = ["SearchRecordsUseCase"]
