"""Domain services for dashboard aggregates."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from ledger_dashboard.domain.constants import TOP_CLIENTS_LIMIT
from ledger_dashboard.domain.models import (
    ClientRevenueEntry,
    DashboardSummary,
    ExpenseAggregate,
    WorkRecord,
)

_HUNDRED = Decimal("100")


def compute_total_revenue(works: Iterable[WorkRecord]) -> Decimal:
    """Return the sum of all work prices."""
    return sum((work.price for work in works), Decimal("0"))


def collect_unique_clients(works: Iterable[WorkRecord]) -> tuple[str, ...]:
    """Return distinct non-empty client names in first-seen order."""
    seen: dict[str, None] = {}
    for work in works:
        if work.client:
            seen.setdefault(work.client, None)
    return tuple(seen)


def rank_top_clients(
    works: Iterable[WorkRecord],
    limit: int = TOP_CLIENTS_LIMIT,
) -> tuple[ClientRevenueEntry, ...]:
    """Rank clients by summed revenue.

    Clients are grouped in first-seen order and sorted with a stable sort,
    so ties keep that order.

    Args:
        works: Work records to group.
        limit: Maximum number of entries to return.

    Returns:
        tuple[ClientRevenueEntry, ...]: Highest revenue first, with shares
        relative to the top entry.
    """
    totals: dict[str, Decimal] = {}
    for work in works:
        if not work.client:
            continue
        totals[work.client] = totals.get(work.client, Decimal("0")) + work.price

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ranked = ranked[:limit]
    if not ranked:
        return ()

    top_revenue = ranked[0][1]
    return tuple(
        ClientRevenueEntry(
            client=client,
            revenue=revenue,
            share_percent=(
                revenue / top_revenue * _HUNDRED if top_revenue else _HUNDRED
            ),
        )
        for client, revenue in ranked
    )


def compute_dashboard_summary(
    works: Sequence[WorkRecord],
    expense_aggregate: ExpenseAggregate | None,
    *,
    top_limit: int = TOP_CLIENTS_LIMIT,
) -> DashboardSummary:
    """Compute the dashboard summary from current collections.

    Args:
        works: Current work records.
        expense_aggregate: Positional aggregate of the expenses sheet, or
            None when expenses have never loaded.
        top_limit: Maximum number of ranked clients.

    Returns:
        DashboardSummary: Revenue, credit, balance and client figures.
    """
    if expense_aggregate is None:
        total_credit = Decimal("0")
        current_balance = Decimal("0")
    else:
        total_credit = expense_aggregate.total_credit
        current_balance = expense_aggregate.balance
    return DashboardSummary(
        total_revenue=compute_total_revenue(works),
        total_credit=total_credit,
        current_balance=current_balance,
        unique_clients=collect_unique_clients(works),
        top_clients=rank_top_clients(works, top_limit),
    )


__all__ = [
    "compute_total_revenue",
    "collect_unique_clients",
    "rank_top_clients",
    "compute_dashboard_summary",
]
