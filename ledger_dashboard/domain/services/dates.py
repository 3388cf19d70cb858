"""Date normalization for sheet cells."""

import pandas as pd

_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def normalize_date(raw: str) -> str:
    """Format a loosely written date as ``"Nov 11, 2024"``.

    Args:
        raw: Date cell text in any format the general date parser accepts.

    Returns:
        str: The formatted date, the raw text when it does not parse or
        holds no digits, or an empty string for empty input.
    """
    if not raw:
        return ""
    # Words like "today" or "now" are not dates in a sheet cell.
    if not any(char.isdigit() for char in raw):
        return raw
    try:
        parsed = pd.to_datetime(raw, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return raw
    if pd.isna(parsed):
        return raw
    month = _MONTH_ABBREVIATIONS[parsed.month - 1]
    return f"{month} {parsed.day}, {parsed.year:04d}"


__all__ = ["normalize_date"]
