from __future__ import annotations

from .base import Grid
from .memory import InMemoryGrid
from .openpyxl_grid import OpenpyxlGrid

__all__ = ["Grid", "InMemoryGrid", "OpenpyxlGrid"]
