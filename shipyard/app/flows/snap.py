"""Drag offset snapping to grid cells.

Snapping is visual feedback only. Drop decisions come from the cell the UI
hit-tests under the pointer, validated by ``shipyard.core.placement``.
"""

from __future__ import annotations

import math

from shipyard.core.grid import GRID_SIZE
from shipyard.core.models import Coord
from shipyard.ui_runtime.geometry import Rect

DEFAULT_CELL_SIZE = 44.0


def _round_half_up(value: float) -> int:
    # Halves go toward +inf, unlike round()'s banker's rounding.
    return math.floor(value + 0.5)


def nearest_cell(
    element_rect: Rect,
    board_rect: Rect,
    dx: float,
    dy: float,
    *,
    cell_size: float = DEFAULT_CELL_SIZE,
) -> Coord:
    """Return the cell nearest to the element's displaced top-left corner.

    The result may lie outside the grid.
    """
    row = _round_half_up((element_rect.top - board_rect.top + dy) / cell_size)
    col = _round_half_up((element_rect.left - board_rect.left + dx) / cell_size)
    return Coord(row, col)


def snap_offset(
    element_rect: Rect,
    board_rect: Rect,
    dx: float,
    dy: float,
    *,
    cell_size: float = DEFAULT_CELL_SIZE,
    grid_size: int = GRID_SIZE,
) -> tuple[float, float]:
    """Return the drag offset aligned to the nearest board cell.

    Offsets that land off the board pass through unchanged so the element
    can move freely, for example inside the unplaced-ships tray.
    """
    cell = nearest_cell(element_rect, board_rect, dx, dy, cell_size=cell_size)
    if not (0 <= cell.row < grid_size and 0 <= cell.col < grid_size):
        return dx, dy
    snapped_x = cell.col * cell_size - (element_rect.left - board_rect.left)
    snapped_y = cell.row * cell_size - (element_rect.top - board_rect.top)
    return snapped_x, snapped_y
