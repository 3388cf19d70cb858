"""Legacy positional aggregate for the expenses sheet.

The expenses sheet keeps its running totals in column G of fixed rows
rather than in named columns:

* G2 and G3 (body rows 0 and 1) hold the two credit totals that are summed;
* G5 (body row 3) holds the current balance.

The extraction depends only on row positions. Replacing it with a
header-based lookup should only require changing this module.
"""

from collections.abc import Iterable
from decimal import Decimal

from ledger_dashboard.domain.models import ExpenseAggregate
from ledger_dashboard.utils.decimal_utils import parse_amount

COLUMN_G_INDEX = 6
CREDIT_ROW_INDICES = frozenset({0, 1})
BALANCE_ROW_INDEX = 3


def extract_legacy_positional_aggregate(
    rows: Iterable[tuple[int, list[str]]],
) -> ExpenseAggregate:
    """Read the credit total and balance from column G of fixed rows.

    Args:
        rows: Retained body rows as ``(body_index, fields)`` pairs.

    Returns:
        ExpenseAggregate: Credit total and balance, 0 when the cells are
        missing.
    """
    total_credit = Decimal("0")
    balance = Decimal("0")
    for body_index, fields in rows:
        if len(fields) <= COLUMN_G_INDEX:
            continue
        column_g = parse_amount(fields[COLUMN_G_INDEX])
        if body_index in CREDIT_ROW_INDICES:
            total_credit += column_g
        if body_index == BALANCE_ROW_INDEX:
            balance = column_g
    return ExpenseAggregate(total_credit=total_credit, balance=balance)


__all__ = [
    "COLUMN_G_INDEX",
    "CREDIT_ROW_INDICES",
    "BALANCE_ROW_INDEX",
    "extract_legacy_positional_aggregate",
]
