"""Tests for row-to-record mapping."""

from decimal import Decimal

from ledger_dashboard.domain.models import ExpenseRecord, WorkRecord
from ledger_dashboard.domain.services.mappers import (
    map_expense_rows,
    map_work_rows,
    parse_expenses_csv,
    parse_works_csv,
)


def test_work_row_maps_all_fields():
    records = map_work_rows(
        [["2024-11-11", "Acme", "Logo design", "1500", "Paid in full"]]
    )

    assert records == [
        WorkRecord(
            date="Nov 11, 2024",
            client="Acme",
            description="Logo design",
            price=Decimal("1500"),
            status="Paid",
        )
    ]


def test_work_row_with_bad_price_and_empty_note():
    (record,) = map_work_rows([["2024-11-11", "Acme", "Logo", "abc", ""]])

    assert record.price == Decimal("0")
    assert record.status == "Pending"


def test_short_or_undated_work_rows_are_dropped():
    records = map_work_rows(
        [
            ["2024-11-11", "Acme", "Logo"],
            ["", "Acme", "Logo", "10", "Paid"],
            ["2024-11-12", "Beta", "Site", "20", "Pending"],
        ]
    )

    assert [record.client for record in records] == ["Beta"]


def test_negative_work_price_is_clamped():
    (record,) = map_work_rows([["2024-11-11", "Acme", "Refund", "-50", ""]])

    assert record.price == Decimal("0")


def test_parse_works_csv_keeps_order_and_skips_header():
    text = (
        "Date,Client,Work,Price,Note\n"
        '2024-11-11,Acme,"Logo, business card",1500,Paid\n'
        "\n"
        "2024-11-02,Beta,Website,3000,Pending\n"
        "2024-11-03,Gamma,Banner\n"
    )

    records = parse_works_csv(text)

    assert [record.client for record in records] == ["Acme", "Beta"]
    assert records[0].description == "Logo, business card"
    assert records[1].date == "Nov 2, 2024"


def test_expense_row_maps_fields_with_defaults():
    feed = map_expense_rows(
        [(0, ["2024-11-01", "500", "x", "Bank", "Acme", "1200.5"])]
    )

    assert feed.records == (
        ExpenseRecord(
            date="Nov 1, 2024",
            credit=Decimal("500"),
            debit=Decimal("0"),
            counterparty="Bank",
            client="Acme",
            row_balance=Decimal("1200.5"),
        ),
    )


def test_expense_row_with_three_fields_is_kept():
    feed = map_expense_rows([(0, ["2024-11-01", "", "75"])])

    (record,) = feed.records
    assert record.debit == Decimal("75")
    assert record.counterparty == ""
    assert record.client == ""
    assert record.row_balance == Decimal("0")


def test_short_or_undated_expense_rows_are_dropped():
    feed = map_expense_rows(
        [
            (0, ["2024-11-01", "10"]),
            (1, ["", "10", "0"]),
        ]
    )

    assert feed.records == ()


def test_parse_expenses_csv_reads_positional_aggregate():
    text = (
        "Date,Credit,Debit,To/From,Client,Balance,Totals\n"
        "2024-11-01,1000,0,Acme,Acme,1000,700\n"
        "2024-11-02,0,200,Rent,,800,300\n"
        "2024-11-03,0,50,Food,,750,999\n"
        "2024-11-04,0,0,Note,,750,4200\n"
        "2024-11-05,0,0,Note,,750,77\n"
    )

    feed = parse_expenses_csv(text)

    assert len(feed.records) == 5
    assert feed.aggregate.total_credit == Decimal("1000")
    assert feed.aggregate.balance == Decimal("4200")


def test_out_of_range_price_reads_as_zero():
    works = parse_works_csv(
        "Date,Client,Work,Price,Note\n"
        "2024-11-11,Acme,Logo,1e999999999,Paid\n"
        "2024-11-12,Acme,Site,200,Paid\n"
    )

    assert [record.price for record in works] == [Decimal("0"), Decimal("200")]
