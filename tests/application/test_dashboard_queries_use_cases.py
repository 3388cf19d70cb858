"""Tests for the summary and search use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

from ledger_dashboard.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from ledger_dashboard.application.use_cases.search_records import (
    SearchRecordsUseCase,
)
from ledger_dashboard.domain.models import (
    DashboardSnapshot,
    ExpenseAggregate,
    ExpenseRecord,
    WorkRecord,
)


def _store() -> MagicMock:
    store = MagicMock()
    store.snapshot.return_value = DashboardSnapshot(
        works=(
            WorkRecord("Nov 1, 2024", "Acme", "Logo", Decimal("100"), "Paid"),
            WorkRecord("Nov 2, 2024", "Beta", "Site", Decimal("300"), "Paid"),
        ),
        expenses=(
            ExpenseRecord(
                "Nov 3, 2024",
                Decimal("0"),
                Decimal("40"),
                "Printer",
                "Acme",
                Decimal("0"),
            ),
        ),
        expense_aggregate=ExpenseAggregate(
            total_credit=Decimal("75"),
            balance=Decimal("35"),
        ),
    )
    return store


def test_summary_use_case_reads_current_snapshot() -> None:
    summary = GetDashboardSummaryUseCase(_store(), top_limit=1).execute()

    assert summary.total_revenue == Decimal("400")
    assert summary.total_credit == Decimal("75")
    assert summary.current_balance == Decimal("35")
    assert summary.client_count == 2
    assert [entry.client for entry in summary.top_clients] == ["Beta"]


def test_search_use_case_filters_each_collection() -> None:
    use_case = SearchRecordsUseCase(_store())

    assert [r.client for r in use_case.search_works("acme")] == ["Acme"]
    assert [r.counterparty for r in use_case.search_expenses("PRINT")] == [
        "Printer"
    ]
    assert use_case.search_expenses("beta") == []
