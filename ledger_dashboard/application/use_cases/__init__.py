"""Application use cases package."""

from .get_dashboard_summary import DashboardSummary, GetDashboardSummaryUseCase
from .refresh_dashboard import (
    FeedRefreshOutcome,
    RefreshDashboardUseCase,
    RefreshResult,
)
from .search_records import SearchRecordsUseCase

__all__ = [
    "DashboardSummary",
    "GetDashboardSummaryUseCase",
    "FeedRefreshOutcome",
    "RefreshDashboardUseCase",
    "RefreshResult",
    "SearchRecordsUseCase",
]
