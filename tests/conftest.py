from __future__ import annotations

import pytest

from sheetedit.grid.memory import InMemoryGrid
from sheetedit.models import Address
from sheetedit.session import EditingSession


def _addr(ref: str) -> Address:
    """Build an address from A1 notation."""
    return Address.from_a1(ref)


@pytest.fixture
def grid() -> InMemoryGrid:
    """Grid with a 2x2 numeric block at A1:B2 and a label in D1."""
    seeded = InMemoryGrid.from_rows([[1, 2], [3, 4]])
    seeded.set_cell_value(_addr("D1"), "Total")
    return seeded


@pytest.fixture
def session(grid: InMemoryGrid) -> EditingSession:
    """Editing session over the seeded grid."""
    return EditingSession(grid)
