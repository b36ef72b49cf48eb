"""Grid coordinate space and occupancy helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from shipyard.core.models import Ship

GRID_SIZE = 10


@dataclass(frozen=True, slots=True)
class Grid:
    """Square cell grid addressed by (row, col)."""

    size: int = GRID_SIZE

    def in_bounds(self, row: int, col: int) -> bool:
        """Return whether the cell is inside the grid."""
        return 0 <= row < self.size and 0 <= col < self.size


DEFAULT_GRID = Grid()


def in_bounds(row: int, col: int) -> bool:
    """Return whether the cell is inside the default grid."""
    return DEFAULT_GRID.in_bounds(row, col)


def occupancy_grid(
    ships: Iterable[Ship],
    *,
    exclude: str | None = None,
    size: int = GRID_SIZE,
) -> np.ndarray:
    """Build an occupancy matrix holding each placed ship's 1-based fleet index.

    Unplaced ships and the ship named ``exclude`` leave their cells at zero.
    """
    grid = np.zeros((size, size), dtype=np.int16)
    for index, ship in enumerate(ships, start=1):
        if ship.name == exclude:
            continue
        for cell in ship.cells():
            if 0 <= cell.row < size and 0 <= cell.col < size:
                grid[cell.row, cell.col] = index
    return grid
