"""Placement validation and commit."""

from __future__ import annotations

from shipyard.core.fleet import Fleet
from shipyard.core.grid import DEFAULT_GRID, Grid, occupancy_grid
from shipyard.core.models import Coord, Orientation, cells_for


def can_place(
    fleet: Fleet,
    name: str,
    size: int,
    row: int,
    col: int,
    orientation: Orientation,
    *,
    grid: Grid = DEFAULT_GRID,
) -> bool:
    """Return whether the named ship fits at (row, col) without overlap.

    The ship named ``name`` is ignored in the overlap check, so a ship never
    blocks itself. Side-effect free.
    """
    cells = cells_for(Coord(row, col), size, orientation)
    if not all(grid.in_bounds(cell.row, cell.col) for cell in cells):
        return False
    occupied = occupancy_grid(fleet, exclude=name, size=grid.size)
    return all(occupied[cell.row, cell.col] == 0 for cell in cells)


def place_ship(
    fleet: Fleet,
    name: str,
    size: int,
    row: int,
    col: int,
    orientation: Orientation,
    *,
    grid: Grid = DEFAULT_GRID,
) -> bool:
    """Validate against the current fleet and commit the pose on success."""
    ship = fleet.get(name)
    if ship is None or ship.size != size:
        return False
    if not can_place(fleet, name, size, row, col, orientation, grid=grid):
        return False
    fleet.set_pose(name, Coord(row, col), orientation)
    return True
