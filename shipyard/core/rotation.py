"""In-place rotation by breadth-first pivot search.

A straight flip about the ship's center often hits the grid edge or another
ship. Instead of rejecting the rotation, the pivot is relaxed outward one grid
step per round until the reoriented ship fits somewhere. Search states are
``(row, col, offset)`` triples: a candidate pivot cell plus the index along
the ship that the pivot stands for. The first legal pose found is the one
closest to the original pivot(s).
"""

from __future__ import annotations

import logging
from collections import deque

from shipyard.core.fleet import Fleet
from shipyard.core.grid import DEFAULT_GRID, Grid
from shipyard.core.models import Coord, Orientation, Ship
from shipyard.core.placement import can_place

logger = logging.getLogger(__name__)

PivotState = tuple[int, int, int]

# up, down, left, right
_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def pivot_seeds(ship: Ship) -> list[PivotState]:
    """Return the starting pivot states for a placed ship.

    Even-length ships have two center cells and seed both.
    """
    if ship.origin is None:
        return []
    offset = (ship.size - 1) // 2
    if ship.horizontal:
        row, col = ship.origin.row, ship.origin.col + offset
    else:
        row, col = ship.origin.row + offset, ship.origin.col
    seeds = [(row, col, offset)]
    if ship.size % 2 == 0:
        if ship.horizontal:
            seeds.append((row, col + 1, offset + 1))
        else:
            seeds.append((row + 1, col, offset + 1))
    return seeds


def _origin_for(row: int, col: int, offset: int, orientation: Orientation) -> Coord:
    if orientation is Orientation.VERTICAL:
        return Coord(row - offset, col)
    return Coord(row, col - offset)


def find_rotation(
    fleet: Fleet, ship: Ship, *, grid: Grid = DEFAULT_GRID
) -> tuple[Coord, Orientation] | None:
    """Find the nearest legal pose for ``ship`` with its orientation flipped."""
    seeds = pivot_seeds(ship)
    if not seeds:
        return None
    target = ship.orientation.flipped()
    queue: deque[PivotState] = deque(seeds)
    visited: set[PivotState] = set(seeds)
    while queue:
        row, col, offset = queue.popleft()
        origin = _origin_for(row, col, offset, target)
        if can_place(fleet, ship.name, ship.size, origin.row, origin.col, target, grid=grid):
            return origin, target
        for d_row, d_col in _STEPS:
            state = (row + d_row, col + d_col, offset)
            if not grid.in_bounds(state[0], state[1]) or state in visited:
                continue
            visited.add(state)
            queue.append(state)
    return None


def rotate_ship(fleet: Fleet, name: str, *, grid: Grid = DEFAULT_GRID) -> bool:
    """Rotate the named ship in place; return whether a new pose was committed.

    Unknown or unplaced ships and a board with no room leave the fleet unchanged.
    """
    ship = fleet.get(name)
    if ship is None or ship.origin is None:
        return False
    found = find_rotation(fleet, ship, grid=grid)
    if found is None:
        logger.debug("rotation_no_room ship=%s origin=%s", name, ship.origin)
        return False
    origin, orientation = found
    fleet.set_pose(name, origin, orientation)
    logger.debug("rotation_committed ship=%s origin=%s orientation=%s", name, origin, orientation.value)
    return True
