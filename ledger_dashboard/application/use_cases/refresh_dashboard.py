"""Use case running one dashboard refresh cycle.

A cycle:

* fetches the works and expenses feeds concurrently and waits for both;
* parses each feed that arrived and replaces its collection in the store;
* keeps the previous collection for a feed whose fetch failed;
* recomputes the summary from whatever the store now holds.

Cycles may overlap when a trigger fires before the previous cycle ends.
They are not serialized; each replace is atomic and the last one wins.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from ledger_dashboard.application.ports.dashboard_store import (
    DashboardStorePort,
)
from ledger_dashboard.application.ports.feed_source import (
    FeedSourcePort,
    FetchErrorKind,
    FetchResult,
)
from ledger_dashboard.domain.constants import (
    EXPENSES_FEED,
    TOP_CLIENTS_LIMIT,
    WORKS_FEED,
)
from ledger_dashboard.domain.models import (
    DashboardSnapshot,
    DashboardSummary,
    FeedName,
)
from ledger_dashboard.domain.services.aggregates import (
    compute_dashboard_summary,
)
from ledger_dashboard.domain.services.mappers import (
    parse_expenses_csv,
    parse_works_csv,
)
from ledger_dashboard.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FeedRefreshOutcome:
    """Result of refreshing one feed.

    Attributes:
        feed: Feed name.
        updated: True when the collection was replaced this cycle.
        record_count: Records stored for the feed after the cycle.
        error_kind: Fetch failure category when the feed was kept stale.
        error_message: Fetch failure detail when the feed was kept stale.
    """

    feed: FeedName
    updated: bool
    record_count: int
    error_kind: FetchErrorKind | None = None
    error_message: str | None = None


@dataclass(frozen=True)
class RefreshResult:
    """Result of one refresh cycle."""

    works: FeedRefreshOutcome
    expenses: FeedRefreshOutcome
    snapshot: DashboardSnapshot
    summary: DashboardSummary

    @property
    def fully_updated(self) -> bool:
        """Return True when both feeds were replaced."""
        return self.works.updated and self.expenses.updated


class RefreshDashboardUseCase:
    """Fetch both feeds and refresh the dashboard store."""

    def __init__(
        self,
        feed_source: FeedSourcePort,
        store: DashboardStorePort,
        logger=None,
        top_limit: int = TOP_CLIENTS_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            feed_source: Port providing the raw CSV feeds.
            store: Port holding the current record collections.
            logger: Optional logger compatible with logging.Logger-like API.
            top_limit: Maximum number of ranked clients in the summary.
        """
        self._feed_source = feed_source
        self._store = store
        self._logger = logger or get_app_logger()
        self._top_limit = top_limit

    def run(self) -> RefreshResult:
        """Execute one refresh cycle.

        Returns:
            RefreshResult: Per-feed outcomes plus the refreshed snapshot and
            summary.
        """
        works_result, expenses_result = self._fetch_feeds()

        works_updated = self._apply_works(works_result)
        expenses_updated = self._apply_expenses(expenses_result)

        snapshot = self._store.snapshot()
        summary = compute_dashboard_summary(
            snapshot.works,
            snapshot.expense_aggregate,
            top_limit=self._top_limit,
        )
        self._logger.info(
            f"Refresh cycle done: works={len(snapshot.works)} "
            f"(updated={works_updated}), "
            f"expenses={len(snapshot.expenses)} "
            f"(updated={expenses_updated}), "
            f"revenue={summary.total_revenue}"
        )
        return RefreshResult(
            works=self._outcome(
                works_result, works_updated, len(snapshot.works)
            ),
            expenses=self._outcome(
                expenses_result, expenses_updated, len(snapshot.expenses)
            ),
            snapshot=snapshot,
            summary=summary,
        )

    def _fetch_feeds(self) -> tuple[FetchResult, FetchResult]:
        """Fetch both feeds concurrently and wait for both to finish."""
        with ThreadPoolExecutor(
            max_workers=2,
            thread_name_prefix="feed-fetch",
        ) as pool:
            works_future = pool.submit(self._feed_source.fetch, WORKS_FEED)
            expenses_future = pool.submit(
                self._feed_source.fetch, EXPENSES_FEED
            )
            return works_future.result(), expenses_future.result()

    def _apply_works(self, result: FetchResult) -> bool:
        if not result.ok:
            self._log_failure(result)
            return False
        records = parse_works_csv(result.text)
        self._store.replace_works(records)
        self._logger.info(f"Loaded {len(records)} work records")
        return True

    def _apply_expenses(self, result: FetchResult) -> bool:
        if not result.ok:
            self._log_failure(result)
            return False
        feed = parse_expenses_csv(result.text)
        self._store.replace_expenses(feed)
        self._logger.info(
            f"Loaded {len(feed.records)} expense records: "
            f"total_credit={feed.aggregate.total_credit}, "
            f"balance={feed.aggregate.balance}"
        )
        return True

    def _log_failure(self, result: FetchResult) -> None:
        self._logger.warning(
            f"Keeping previous {result.feed} data after fetch failure "
            f"({result.error_kind}): {result.error_message}"
        )

    @staticmethod
    def _outcome(
        result: FetchResult,
        updated: bool,
        record_count: int,
    ) -> FeedRefreshOutcome:
        return FeedRefreshOutcome(
            feed=result.feed,
            updated=updated,
            record_count=record_count,
            error_kind=result.error_kind,
            error_message=result.error_message,
        )


__all__ = [
    "FeedRefreshOutcome",
    "RefreshResult",
    "RefreshDashboardUseCase",
]
