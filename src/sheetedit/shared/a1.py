from __future__ import annotations

import re

_A1_PATTERN = re.compile(r"^[A-Za-z]{1,3}[1-9][0-9]*$")
_A1_RANGE_PATTERN = re.compile(r"^[A-Za-z]{1,3}[1-9][0-9]*:[A-Za-z]{1,3}[1-9][0-9]*$")
_COLUMN_LABEL_PATTERN = re.compile(r"^[A-Za-z]{1,3}$")


def split_a1(value: str) -> tuple[str, int]:
    """Split A1 notation into normalized (column_label, row_number)."""
    candidate = value.strip()
    if not _A1_PATTERN.match(candidate):
        raise ValueError(f"Invalid cell reference: {value}")
    idx = 0
    for index, char in enumerate(candidate):
        if char.isdigit():
            idx = index
            break
    return candidate[:idx].upper(), int(candidate[idx:])


def column_label_to_index(label: str) -> int:
    """Convert Excel-style column label (A/AA) to 0-based index."""
    normalized = label.strip().upper()
    if not _COLUMN_LABEL_PATTERN.match(normalized):
        raise ValueError(f"Invalid column label: {label}")
    index = 0
    for char in normalized:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index - 1


def column_index_to_label(index: int) -> str:
    """Convert 0-based column index to Excel-style column label."""
    if index < 0:
        raise ValueError("Column index must not be negative.")
    chunks: list[str] = []
    current = index + 1
    while current > 0:
        current -= 1
        chunks.append(chr(ord("A") + (current % 26)))
        current //= 26
    return "".join(reversed(chunks))


def a1_to_coordinates(value: str) -> tuple[int, int]:
    """Convert A1 notation to 0-based (row, col)."""
    column, row = split_a1(value)
    return row - 1, column_label_to_index(column)


def coordinates_to_a1(row: int, col: int) -> str:
    """Convert 0-based (row, col) to A1 notation."""
    if row < 0:
        raise ValueError("Row index must not be negative.")
    return f"{column_index_to_label(col)}{row + 1}"


def split_range(value: str) -> tuple[tuple[int, int], tuple[int, int]]:
    """Parse an A1 range into normalized 0-based (top-left, bottom-right)."""
    candidate = value.strip()
    if _A1_PATTERN.match(candidate):
        candidate = f"{candidate}:{candidate}"
    if not _A1_RANGE_PATTERN.match(candidate):
        raise ValueError(f"Invalid range reference: {value}")
    start_ref, end_ref = candidate.split(":", maxsplit=1)
    start_row, start_col = a1_to_coordinates(start_ref)
    end_row, end_col = a1_to_coordinates(end_ref)
    return (
        (min(start_row, end_row), min(start_col, end_col)),
        (max(start_row, end_row), max(start_col, end_col)),
    )
