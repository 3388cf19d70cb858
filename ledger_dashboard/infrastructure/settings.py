"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from ledger_dashboard.infrastructure.logging.logger import get_app_logger

DEFAULT_WORKS_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vRLtabZ-6eyDtjEwHsB6AdwBvMbc4ihVNRRUoyCK-HnqRBrNNwBTDNOBK-"
    "0cdlCQ0vZ66p_y58fi0qc/pub?output=csv&gid=0"
)
DEFAULT_EXPENSES_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vRLtabZ-6eyDtjEwHsB6AdwBvMbc4ihVNRRUoyCK-HnqRBrNNwBTDNOBK-"
    "0cdlCQ0vZ66p_y58fi0qc/pub?output=csv&gid=1890560582"
)
DEFAULT_REFRESH_INTERVAL_SECONDS = 30.0
DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the feed locations and refresh timing.

    Attributes:
        works_csv_url: Published CSV URL of the works sheet.
        expenses_csv_url: Published CSV URL of the expenses sheet.
        refresh_interval_seconds: Delay between refresh cycles.
        fetch_timeout_seconds: Timeout applied to each feed request.
    """

    works_csv_url: str = DEFAULT_WORKS_CSV_URL
    expenses_csv_url: str = DEFAULT_EXPENSES_CSV_URL
    refresh_interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        works_url = (
            os.getenv("LEDGER_WORKS_CSV_URL", "").strip()
            or DEFAULT_WORKS_CSV_URL
        )
        expenses_url = (
            os.getenv("LEDGER_EXPENSES_CSV_URL", "").strip()
            or DEFAULT_EXPENSES_CSV_URL
        )
        refresh_interval = cls._positive_float(
            "LEDGER_REFRESH_INTERVAL_SECONDS",
            DEFAULT_REFRESH_INTERVAL_SECONDS,
            logger=logger,
        )
        fetch_timeout = cls._positive_float(
            "LEDGER_FETCH_TIMEOUT_SECONDS",
            DEFAULT_FETCH_TIMEOUT_SECONDS,
            logger=logger,
        )
        return cls(
            works_csv_url=works_url,
            expenses_csv_url=expenses_url,
            refresh_interval_seconds=refresh_interval,
            fetch_timeout_seconds=fetch_timeout,
        )

    def url_for(self, feed: str) -> str:
        """Return the CSV URL configured for a feed name."""
        if feed == "works":
            return self.works_csv_url
        if feed == "expenses":
            return self.expenses_csv_url
        raise ValueError(f"Unknown feed: {feed}")

    @staticmethod
    def _positive_float(name: str, default: float, logger) -> float:
        """Read a positive number from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is missing or invalid.
            logger: Logger used for warnings.

        Returns:
            float: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"{name}={raw!r} is not a number; using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name}={raw!r} must be positive; using {default}")
            return default
        return value


__all__ = ["DashboardSettings"]
