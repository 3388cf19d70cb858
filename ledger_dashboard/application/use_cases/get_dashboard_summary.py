"""Use case to compute the dashboard summary from stored records."""

from ledger_dashboard.application.ports.dashboard_store import (
    DashboardStorePort,
)
from ledger_dashboard.domain.constants import TOP_CLIENTS_LIMIT
from ledger_dashboard.domain.models import DashboardSummary
from ledger_dashboard.domain.services.aggregates import (
    compute_dashboard_summary,
)


class GetDashboardSummaryUseCase:
    """Compute revenue, credit, balance and client ranking."""

    def __init__(
        self,
        store: DashboardStorePort,
        top_limit: int = TOP_CLIENTS_LIMIT,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._store = store
        self._top_limit = top_limit

    def execute(self) -> DashboardSummary:
        """Return the summary for the store's current snapshot."""
        snapshot = self._store.snapshot()
        return compute_dashboard_summary(
            snapshot.works,
            snapshot.expense_aggregate,
            top_limit=self._top_limit,
        )


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]
