"""Domain services package."""

from .aggregates import (
    collect_unique_clients,
    compute_dashboard_summary,
    compute_total_revenue,
    rank_top_clients,
)
from .csv_tokenizer import iter_body_lines, tokenize_line
from .dates import normalize_date
from .mappers import (
    map_expense_rows,
    map_work_rows,
    parse_expenses_csv,
    parse_works_csv,
)
from .positional import extract_legacy_positional_aggregate
from .search import filter_expense_records, filter_work_records

__all__ = [
    "collect_unique_clients",
    "compute_dashboard_summary",
    "compute_total_revenue",
    "rank_top_clients",
    "iter_body_lines",
    "tokenize_line",
    "normalize_date",
    "map_expense_rows",
    "map_work_rows",
    "parse_expenses_csv",
    "parse_works_csv",
    "extract_legacy_positional_aggregate",
    "filter_expense_records",
    "filter_work_records",
]
