"""Presentation helpers for the Streamlit dashboard.

Pure transformations from domain records and summaries to table rows and
chart data. No Streamlit calls happen here.
"""

from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ledger_dashboard.domain.models import (
    ClientRevenueEntry,
    ExpenseRecord,
    WorkRecord,
)

CURRENCY_SYMBOL = "₹"
EMPTY_AMOUNT = "-"
NO_DATA_MESSAGE = "No data available"
NO_CLIENT_DATA_MESSAGE = "No client revenue data available"

_FRACTION_QUANTUM = Decimal("0.001")


def group_indian_digits(digits: str) -> str:
    """Group an integer digit string the en-IN way (12,34,567).

    Args:
        digits: Unsigned integer digits.

    Returns:
        str: Digits with lakh/crore separators.
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join([*groups, tail])


def format_inr(value: Decimal) -> str:
    """Format an amount as rupees with en-IN grouping.

    At most three fraction digits are kept and trailing zeros are dropped,
    so ``Decimal("1500.50")`` renders as ``₹1,500.5``.

    Args:
        value: Amount to format.

    Returns:
        str: Formatted amount.
    """
    with localcontext() as ctx:
        # Room for every integer digit plus the kept fraction digits.
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        rounded = value.quantize(_FRACTION_QUANTUM, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    integer_part, _, fraction = f"{rounded.copy_abs():f}".partition(".")
    fraction = fraction.rstrip("0")
    text = group_indian_digits(integer_part)
    if fraction:
        text = f"{text}.{fraction}"
    return f"{CURRENCY_SYMBOL}{sign}{text}"


def format_optional_amount(value: Decimal) -> str:
    """Format a ledger amount, showing a dash when it is zero."""
    return format_inr(value) if value > 0 else EMPTY_AMOUNT


def format_month_title(today: date) -> str:
    """Return the header month label, e.g. ``November 2024``."""
    return f"{today:%B} {today.year}"


def build_works_table(records: Iterable[WorkRecord]) -> list[dict[str, str]]:
    """Return table rows for the works tab."""
    return [
        {
            "Date": record.date,
            "Client": record.client,
            "Work": record.description,
            "Price": format_inr(record.price),
            "Status": record.status,
        }
        for record in records
    ]


def build_expenses_table(
    records: Iterable[ExpenseRecord],
) -> list[dict[str, str]]:
    """Return table rows for the expenses tab."""
    return [
        {
            "Date": record.date,
            "Credit": format_optional_amount(record.credit),
            "Debit": format_optional_amount(record.debit),
            "To/From": record.counterparty,
        }
        for record in records
    ]


def build_client_chart_data(
    entries: Iterable[ClientRevenueEntry],
) -> list[dict[str, str | float]]:
    """Return Altair-ready rows for the top clients bar chart."""
    return [
        {
            "client": entry.client,
            "revenue": float(entry.revenue),
            "share": float(entry.share_percent),
            "revenue_label": format_inr(entry.revenue),
        }
        for entry in entries
    ]


__all__ = [
    "CURRENCY_SYMBOL",
    "EMPTY_AMOUNT",
    "NO_DATA_MESSAGE",
    "NO_CLIENT_DATA_MESSAGE",
    "group_indian_digits",
    "format_inr",
    "format_optional_amount",
    "format_month_title",
    "build_works_table",
    "build_expenses_table",
    "build_client_chart_data",
]
