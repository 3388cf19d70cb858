"""Case-insensitive substring filters over record collections."""

from collections.abc import Iterable

from ledger_dashboard.domain.models import ExpenseRecord, WorkRecord


def _matches(query: str, *values: str) -> bool:
    return any(query in value.lower() for value in values)


def filter_work_records(
    records: Iterable[WorkRecord],
    query: str,
) -> list[WorkRecord]:
    """Return work records whose client, description or date match.

    Args:
        records: Work records to filter.
        query: Substring to look for, compared case-insensitively.

    Returns:
        list[WorkRecord]: Matching records in their original order.
    """
    needle = query.lower()
    return [
        record
        for record in records
        if _matches(needle, record.client, record.description, record.date)
    ]


def filter_expense_records(
    records: Iterable[ExpenseRecord],
    query: str,
) -> list[ExpenseRecord]:
    """Return expense records whose counterparty, client or date match."""
    needle = query.lower()
    return [
        record
        for record in records
        if _matches(needle, record.counterparty, record.client, record.date)
    ]


__all__ = ["filter_work_records", "filter_expense_records"]
