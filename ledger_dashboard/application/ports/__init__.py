"""Application ports package."""

from .dashboard_store import DashboardStorePort
from .feed_source import FeedSourcePort, FetchErrorKind, FetchResult

__all__ = [
    "DashboardStorePort",
    "FeedSourcePort",
    "FetchErrorKind",
    "FetchResult",
]
