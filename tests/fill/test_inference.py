from __future__ import annotations

import pytest

from sheetedit.fill.inference import detect_pattern, infer
from sheetedit.models import CellRange


def test_numeric_source_counts_up_row_major() -> None:
    assert infer(5, CellRange.from_a1("A1:D1")) == [5, 6, 7, 8]


def test_numeric_fill_runs_left_to_right_then_down() -> None:
    assert infer(1, CellRange.from_a1("A1:B3")) == [1, 2, 3, 4, 5, 6]


def test_float_source_keeps_fraction() -> None:
    assert infer(1.5, CellRange.from_a1("A1:A3")) == [1.5, 2.5, 3.5]


def test_date_source_rolls_over_month_boundary() -> None:
    assert infer("1/31/2024", CellRange.from_a1("A1:B1")) == ["2/1/2024", "2/2/2024"]


def test_date_source_rolls_over_year_boundary() -> None:
    assert infer("2023-12-30", CellRange.from_a1("A1:A3")) == [
        "12/31/2023",
        "1/1/2024",
        "1/2/2024",
    ]


def test_date_source_handles_leap_day() -> None:
    assert infer("2/28/2024", CellRange.from_a1("A1:B1")) == ["2/29/2024", "3/1/2024"]


@pytest.mark.parametrize("value", ["Total", True, False, None, "2/30/2024"])
def test_other_values_are_copied_verbatim(value: object) -> None:
    result = infer(value, CellRange.from_a1("A1:C2"))  # type: ignore[arg-type]
    assert result == [value] * 6


def test_boolean_is_not_treated_as_number() -> None:
    assert infer(True, CellRange.from_a1("A1:B1")) == [True, True]


@pytest.mark.parametrize(
    ("value", "pattern"),
    [(3, "series"), (2.5, "series"), ("3/1/2024", "date"), ("x", "copy"), (True, "copy"), (None, "copy")],
)
def test_detect_pattern(value: object, pattern: str) -> None:
    assert detect_pattern(value) == pattern  # type: ignore[arg-type]


def test_infer_rejects_unsupported_types() -> None:
    with pytest.raises(TypeError, match="Unsupported"):
        infer([1], CellRange.from_a1("A1"))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.5, [2.5, 3.5]),
        ("3/1/2024", ["3/2/2024", "3/3/2024"]),
        ("Qty", ["Qty", "Qty"]),
        (False, [False, False]),
        (None, [None, None]),
    ],
)
def test_infer_follows_detected_pattern(value: object, expected: list[object]) -> None:
    target = CellRange.from_a1("B1:C1")
    assert infer(value, target) == expected  # type: ignore[arg-type]
    if detect_pattern(value) == "copy":  # type: ignore[arg-type]
        assert expected == [value] * target.cell_count
