"""Domain models for dashboard aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ClientRevenueEntry:
    """Revenue summed for one client.

    Attributes:
        client: Client name as it appears in the works sheet.
        revenue: Sum of the client's work prices.
        share_percent: Revenue as a percentage of the top client's revenue.
    """

    client: str
    revenue: Decimal
    share_percent: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Summary figures shown in the dashboard header and summary tab."""

    total_revenue: Decimal
    total_credit: Decimal
    current_balance: Decimal
    unique_clients: tuple[str, ...]
    top_clients: tuple[ClientRevenueEntry, ...]

    @property
    def client_count(self) -> int:
        """Return the number of distinct clients."""
        return len(self.unique_clients)


__all__ = ["ClientRevenueEntry", "DashboardSummary"]
