"""Line-oriented tokenizer for published sheet CSV exports.

The tokenizer is deliberately simpler than RFC 4180: a double quote only
toggles the quoted state and is never copied to the output, and doubled
quotes are not treated as escapes.
"""

from collections.abc import Iterator

DELIMITER = ","
QUOTE = '"'


def tokenize_line(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    Args:
        line: A single line of CSV text.

    Returns:
        list[str]: Fields in order; an empty line yields ``[""]``.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields


def iter_body_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield non-empty body lines with their position after the header.

    Blank lines are skipped but still counted, so ``body_index`` matches the
    sheet row number minus two.

    Args:
        text: Whole CSV document including the header line.

    Yields:
        tuple[int, str]: 0-based body index and the stripped line.
    """
    lines = text.strip().split("\n")
    for body_index, raw_line in enumerate(lines[1:]):
        line = raw_line.strip()
        if not line:
            continue
        yield body_index, line


__all__ = ["tokenize_line", "iter_body_lines"]
