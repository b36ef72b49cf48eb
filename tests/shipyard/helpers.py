from __future__ import annotations

from shipyard.core.fleet import Fleet
from shipyard.core.models import Coord, Orientation, Ship

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


def make_fleet(*poses: tuple[str, int, Coord | None, Orientation]) -> Fleet:
    return Fleet(
        Ship(name=name, size=size, origin=origin, orientation=orientation)
        for name, size, origin, orientation in poses
    )
