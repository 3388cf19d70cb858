"""In-memory store for the dashboard's record collections."""

import threading
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timezone

from ledger_dashboard.application.ports.dashboard_store import (
    DashboardStorePort,
)
from ledger_dashboard.domain.models import (
    DashboardSnapshot,
    ExpenseFeed,
    WorkRecord,
)


class InMemoryDashboardStore(DashboardStorePort):
    """Process-local store swapping whole collections under a lock.

    The store keeps a single frozen snapshot. Each replace builds a new
    snapshot from the current one, so readers never see a half-updated
    collection.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot = DashboardSnapshot()

    def replace_works(self, records: Sequence[WorkRecord]) -> None:
        """Replace the works collection."""
        with self._lock:
            self._snapshot = replace(
                self._snapshot,
                works=tuple(records),
                works_refreshed_at=self._now(),
            )

    def replace_expenses(self, feed: ExpenseFeed) -> None:
        """Replace the expenses collection and its aggregate."""
        with self._lock:
            self._snapshot = replace(
                self._snapshot,
                expenses=tuple(feed.records),
                expense_aggregate=feed.aggregate,
                expenses_refreshed_at=self._now(),
            )

    def snapshot(self) -> DashboardSnapshot:
        """Return the current snapshot."""
        with self._lock:
            return self._snapshot

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)


__all__ = ["InMemoryDashboardStore"]
