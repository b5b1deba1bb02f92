from __future__ import annotations

from .a1 import (
    a1_to_coordinates,
    column_index_to_label,
    column_label_to_index,
    coordinates_to_a1,
    split_a1,
    split_range,
)

__all__ = [
    "a1_to_coordinates",
    "column_index_to_label",
    "column_label_to_index",
    "coordinates_to_a1",
    "split_a1",
    "split_range",
]
