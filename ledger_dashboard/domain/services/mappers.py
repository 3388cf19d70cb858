"""Mapping of tokenized sheet rows to domain records."""

from collections.abc import Iterable

from ledger_dashboard.domain.constants import (
    EXPENSE_MIN_FIELDS,
    STATUS_PENDING,
    WORK_MIN_FIELDS,
)
from ledger_dashboard.domain.models import (
    ExpenseFeed,
    ExpenseRecord,
    WorkRecord,
)
from ledger_dashboard.domain.policies import classify_work_status
from ledger_dashboard.domain.services.csv_tokenizer import (
    iter_body_lines,
    tokenize_line,
)
from ledger_dashboard.domain.services.dates import normalize_date
from ledger_dashboard.domain.services.positional import (
    extract_legacy_positional_aggregate,
)
from ledger_dashboard.utils.decimal_utils import (
    parse_amount,
    parse_non_negative_amount,
)


def _field(fields: list[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def is_work_row(fields: list[str]) -> bool:
    """Return True when a row has enough fields and a date."""
    return len(fields) >= WORK_MIN_FIELDS and bool(fields[0])


def is_expense_row(fields: list[str]) -> bool:
    """Return True when a row has enough fields and a date."""
    return len(fields) >= EXPENSE_MIN_FIELDS and bool(fields[0])


def map_work_row(fields: list[str]) -> WorkRecord:
    """Build a work record from one retained row.

    Args:
        fields: Tokenized fields: date, client, work, price, note.

    Returns:
        WorkRecord: Record with coerced price and derived status.
    """
    note = _field(fields, 4) or STATUS_PENDING
    return WorkRecord(
        date=normalize_date(fields[0]),
        client=_field(fields, 1),
        description=_field(fields, 2),
        price=parse_non_negative_amount(_field(fields, 3)),
        status=classify_work_status(note),
    )


def map_work_rows(rows: Iterable[list[str]]) -> list[WorkRecord]:
    """Map tokenized works body rows, dropping incomplete ones.

    Args:
        rows: Tokenized body rows, header excluded.

    Returns:
        list[WorkRecord]: Records in input order.
    """
    return [map_work_row(fields) for fields in rows if is_work_row(fields)]


def map_expense_row(fields: list[str]) -> ExpenseRecord:
    """Build an expense record from one retained row."""
    return ExpenseRecord(
        date=normalize_date(fields[0]),
        credit=parse_non_negative_amount(_field(fields, 1)),
        debit=parse_non_negative_amount(_field(fields, 2)),
        counterparty=_field(fields, 3),
        client=_field(fields, 4),
        row_balance=parse_amount(_field(fields, 5)),
    )


def map_expense_rows(
    rows: Iterable[tuple[int, list[str]]],
) -> ExpenseFeed:
    """Map tokenized expenses body rows and their positional aggregate.

    Args:
        rows: ``(body_index, fields)`` pairs, header excluded.

    Returns:
        ExpenseFeed: Records in input order and the column G aggregate.
    """
    retained = [
        (body_index, fields)
        for body_index, fields in rows
        if is_expense_row(fields)
    ]
    records = tuple(map_expense_row(fields) for _, fields in retained)
    return ExpenseFeed(
        records=records,
        aggregate=extract_legacy_positional_aggregate(retained),
    )


def parse_works_csv(text: str) -> tuple[WorkRecord, ...]:
    """Parse the works CSV document into records."""
    rows = (tokenize_line(line) for _, line in iter_body_lines(text))
    return tuple(map_work_rows(rows))


def parse_expenses_csv(text: str) -> ExpenseFeed:
    """Parse the expenses CSV document into records and aggregate."""
    rows = (
        (body_index, tokenize_line(line))
        for body_index, line in iter_body_lines(text)
    )
    return map_expense_rows(rows)


__all__ = [
    "is_work_row",
    "is_expense_row",
    "map_work_row",
    "map_work_rows",
    "map_expense_row",
    "map_expense_rows",
    "parse_works_csv",
    "parse_expenses_csv",
]
