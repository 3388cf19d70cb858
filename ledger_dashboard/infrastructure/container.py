"""Composition root for wiring infrastructure adapters."""

from ledger_dashboard.application.ports.dashboard_store import (
    DashboardStorePort,
)
from ledger_dashboard.application.ports.feed_source import FeedSourcePort
from ledger_dashboard.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from ledger_dashboard.application.use_cases.refresh_dashboard import (
    RefreshDashboardUseCase,
)
from ledger_dashboard.application.use_cases.search_records import (
    SearchRecordsUseCase,
)
from ledger_dashboard.infrastructure.http_feed_source import UrllibFeedSource
from ledger_dashboard.infrastructure.logging.logger import get_app_logger
from ledger_dashboard.infrastructure.memory_store import (
    InMemoryDashboardStore,
)
from ledger_dashboard.infrastructure.settings import DashboardSettings


def build_settings() -> DashboardSettings:
    """Return settings sourced from the environment."""
    return DashboardSettings.from_env()


def build_feed_source(
    settings: DashboardSettings | None = None,
) -> FeedSourcePort:
    """Return the configured HTTP feed source."""
    resolved = settings or build_settings()
    return UrllibFeedSource(resolved, logger=get_app_logger())


def build_dashboard_store() -> DashboardStorePort:
    """Return a fresh in-memory dashboard store."""
    return InMemoryDashboardStore()


def build_refresh_use_case(
    store: DashboardStorePort,
    feed_source: FeedSourcePort | None = None,
) -> RefreshDashboardUseCase:
    """Return the refresh use case wired to the given store."""
    return RefreshDashboardUseCase(
        feed_source=feed_source or build_feed_source(),
        store=store,
        logger=get_app_logger(),
    )


def build_summary_use_case(
    store: DashboardStorePort,
) -> GetDashboardSummaryUseCase:
    """Return the summary use case for the given store."""
    return GetDashboardSummaryUseCase(store)


def build_search_use_case(store: DashboardStorePort) -> SearchRecordsUseCase:
    """Return the search use case for the given store."""
    return SearchRecordsUseCase(store)


__all__ = [
    "build_settings",
    "build_feed_source",
    "build_dashboard_store",
    "build_refresh_use_case",
    "build_summary_use_case",
    "build_search_use_case",
]
