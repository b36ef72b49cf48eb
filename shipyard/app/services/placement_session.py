"""Placement session: the seam the drag/drop UI drives."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shipyard.core.fleet import Fleet
from shipyard.core.models import Coord, ShipDescriptor, ShipView
from shipyard.core.placement import can_place, place_ship
from shipyard.core.rotation import rotate_ship

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DragSession:
    """Active drag; the hovered cell is supplied per query, never stored."""

    ship: ShipDescriptor


@dataclass(frozen=True, slots=True)
class PlacementActionResult:
    """Outcome of a drop interaction."""

    handled: bool
    placed: bool = False
    status: str | None = None


class PlacementSession:
    """Owns the fleet, the transient drag and the sticky selection.

    Only drops and rotations mutate the fleet. Every commit re-validates
    against the fleet as it is at that instant.
    """

    def __init__(self, fleet: Fleet | None = None) -> None:
        self.fleet = fleet if fleet is not None else Fleet.from_specs()
        self.drag: DragSession | None = None
        self.selected: str | None = None

    def descriptor_for(self, name: str) -> ShipDescriptor:
        return self.fleet[name].descriptor()

    def drag_start(self, descriptor: ShipDescriptor) -> None:
        if descriptor.name not in self.fleet:
            raise ValueError(f"Unknown ship: {descriptor.name}.")
        self.drag = DragSession(ship=descriptor)

    def drag_cancel(self) -> None:
        self.drag = None

    def is_invalid_drop(self, target: Coord | None) -> bool:
        """Return whether the dragged ship would be rejected at ``target``."""
        if self.drag is None or target is None:
            return False
        ship = self.drag.ship
        return not can_place(self.fleet, ship.name, ship.size, target.row, target.col, ship.orientation)

    def drag_end(self, descriptor: ShipDescriptor, target: Coord | None) -> PlacementActionResult:
        self.drag = None
        if target is None:
            return PlacementActionResult(handled=False)
        placed = place_ship(
            self.fleet,
            descriptor.name,
            descriptor.size,
            target.row,
            target.col,
            descriptor.orientation,
        )
        if not placed:
            logger.debug("drop_rejected ship=%s target=%s", descriptor.name, target)
            return PlacementActionResult(handled=True, status="Invalid drop position.")
        self.selected = descriptor.name
        logger.info("ship_placed ship=%s row=%d col=%d", descriptor.name, target.row, target.col)
        return PlacementActionResult(handled=True, placed=True, status=f"Placed {descriptor.name}.")

    def rotate_selected(self) -> bool:
        """Rotate the selected ship; no-op when nothing placed is selected."""
        if self.selected is None:
            return False
        rotated = rotate_ship(self.fleet, self.selected)
        if rotated:
            ship = self.fleet[self.selected]
            logger.info("ship_rotated ship=%s origin=%s orientation=%s", ship.name, ship.origin, ship.orientation.value)
        return rotated

    def snapshot(self) -> tuple[ShipView, ...]:
        return self.fleet.snapshot()

    @property
    def ready(self) -> bool:
        return self.fleet.all_placed()
