"""Port for holding the dashboard's current record collections."""

from collections.abc import Sequence
from typing import Protocol

from ledger_dashboard.domain.models import (
    DashboardSnapshot,
    ExpenseFeed,
    WorkRecord,
)


class DashboardStorePort(Protocol):
    """Port exposing atomic replacement and snapshot reads."""

    def replace_works(self, records: Sequence[WorkRecord]) -> None:
        """Replace the whole works collection."""

    def replace_expenses(self, feed: ExpenseFeed) -> None:
        """Replace the expenses collection and its aggregate together."""

    def snapshot(self) -> DashboardSnapshot:
        """Return the current collections."""


__all__ = ["DashboardStorePort"]
