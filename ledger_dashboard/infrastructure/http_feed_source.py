"""Feed source reading published sheet CSVs over HTTP."""

import http.client
import urllib.error
import urllib.request

from ledger_dashboard.application.ports.feed_source import (
    FeedSourcePort,
    FetchResult,
)
from ledger_dashboard.domain.models import FeedName
from ledger_dashboard.infrastructure.logging.logger import get_app_logger
from ledger_dashboard.infrastructure.settings import DashboardSettings


class UrllibFeedSource(FeedSourcePort):
    """FeedSourcePort implementation backed by ``urllib.request``."""

    def __init__(self, settings: DashboardSettings, logger=None) -> None:
        """Initialize the source adapter.

        Args:
            settings: Feed URLs and request timeout.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings = settings
        self._logger = logger or get_app_logger()

    def fetch(self, feed: FeedName) -> FetchResult:
        """Download one feed.

        Transport errors, HTTP error statuses and undecodable bodies are
        returned as failed results instead of being raised.

        Args:
            feed: Feed to download.

        Returns:
            FetchResult: CSV text or the failure category.
        """
        url = self._settings.url_for(feed)
        request = urllib.request.Request(url, headers={"Accept": "text/csv"})
        try:
            with urllib.request.urlopen(
                request,
                timeout=self._settings.fetch_timeout_seconds,
            ) as response:
                payload = response.read()
        except urllib.error.HTTPError as exc:
            return FetchResult.failure(
                feed, "http_status", f"HTTP {exc.code} from {url}"
            )
        except (
            urllib.error.URLError,
            http.client.HTTPException,
            OSError,
        ) as exc:
            return FetchResult.failure(feed, "transport", str(exc))

        try:
            text = payload.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            return FetchResult.failure(feed, "decode", str(exc))

        self._logger.debug(f"Fetched {len(payload)} bytes for {feed}")
        return FetchResult.success(feed, text)


__all__ = ["UrllibFeedSource"]
