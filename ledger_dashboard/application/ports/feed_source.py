"""Port for fetching the published CSV feeds."""

from dataclasses import dataclass
from typing import Literal, Protocol

from ledger_dashboard.domain.models import FeedName

FetchErrorKind = Literal["transport", "http_status", "decode"]


@dataclass(frozen=True)
class FetchResult:
    """Outcome of fetching one feed.

    Attributes:
        feed: Feed that was requested.
        text: CSV document when the fetch succeeded.
        error_kind: Failure category when the fetch failed.
        error_message: Human-readable failure detail.
    """

    feed: FeedName
    text: str | None = None
    error_kind: FetchErrorKind | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        """Return True when the feed text is available."""
        return self.error_kind is None and self.text is not None

    @classmethod
    def success(cls, feed: FeedName, text: str) -> "FetchResult":
        return cls(feed=feed, text=text)

    @classmethod
    def failure(
        cls,
        feed: FeedName,
        error_kind: FetchErrorKind,
        error_message: str,
    ) -> "FetchResult":
        return cls(
            feed=feed,
            error_kind=error_kind,
            error_message=error_message,
        )


class FeedSourcePort(Protocol):
    """Port exposing read access to the works and expenses feeds."""

    def fetch(self, feed: FeedName) -> FetchResult:
        """Return the raw CSV for a feed, or a failed result."""


__all__ = ["FetchErrorKind", "FetchResult", "FeedSourcePort"]
