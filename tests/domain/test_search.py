"""Tests for the record search filters."""

from decimal import Decimal

from ledger_dashboard.domain.models import ExpenseRecord, WorkRecord
from ledger_dashboard.domain.services.search import (
    filter_expense_records,
    filter_work_records,
)

WORKS = [
    WorkRecord("Nov 11, 2024", "Acme", "Logo design", Decimal("10"), "Paid"),
    WorkRecord("Dec 1, 2024", "Beta", "Website", Decimal("20"), "Pending"),
    WorkRecord("Jan 5, 2025", "", "Acme follow-up", Decimal("5"), "Pending"),
]

EXPENSES = [
    ExpenseRecord(
        "Nov 1, 2024", Decimal("0"), Decimal("50"), "Rent", "", Decimal("0")
    ),
    ExpenseRecord(
        "Nov 2, 2024", Decimal("90"), Decimal("0"), "Bank", "Acme", Decimal("0")
    ),
]


def test_work_search_matches_client_description_and_date():
    assert filter_work_records(WORKS, "ACME") == [WORKS[0], WORKS[2]]
    assert filter_work_records(WORKS, "dec") == [WORKS[1]]


def test_work_search_does_not_match_status():
    assert filter_work_records(WORKS, "paid") == []


def test_empty_query_returns_everything_in_order():
    assert filter_work_records(WORKS, "") == WORKS
    assert filter_expense_records(EXPENSES, "") == EXPENSES


def test_expense_search_matches_counterparty_client_and_date():
    assert filter_expense_records(EXPENSES, "rent") == [EXPENSES[0]]
    assert filter_expense_records(EXPENSES, "acme") == [EXPENSES[1]]
    assert filter_expense_records(EXPENSES, "nov 2") == [EXPENSES[1]]


def test_search_does_not_mutate_input():
    works = list(WORKS)

    filter_work_records(works, "beta")

    assert works == WORKS
