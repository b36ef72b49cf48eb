"""Fleet construction and lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from shipyard.core.grid import DEFAULT_GRID, Grid
from shipyard.core.models import DEFAULT_FLEET, Coord, Orientation, Ship, ShipSpec, ShipView


def validate_specs(specs: Sequence[ShipSpec]) -> tuple[bool, str]:
    """Validate whether fleet slot specs can form a fleet."""
    seen: set[str] = set()
    for spec in specs:
        if not spec.name:
            return False, "Ship name is required."
        if spec.name in seen:
            return False, f"Duplicate ship name: {spec.name}."
        if spec.size <= 0:
            return False, f"Ship size must be positive: {spec.name}."
        seen.add(spec.name)
    return True, ""


def validate_poses(ships: Sequence[Ship], grid: Grid = DEFAULT_GRID) -> tuple[bool, str]:
    """Validate that placed ships sit inside the grid without overlapping."""
    occupied: dict[Coord, str] = {}
    for ship in ships:
        for cell in ship.cells():
            if not grid.in_bounds(cell.row, cell.col):
                return False, f"Ship out of bounds: {ship.name}."
            if cell in occupied:
                return False, f"Ships overlap: {occupied[cell]} and {ship.name}."
            occupied[cell] = ship.name
    return True, ""


class Fleet:
    """Ordered set of ships keyed by unique name.

    Ships are created once and never added or removed; only their origin and
    orientation change through placement and rotation.
    """

    __slots__ = ("_ships", "_by_name")

    def __init__(self, ships: Iterable[Ship], *, grid: Grid = DEFAULT_GRID) -> None:
        self._ships: tuple[Ship, ...] = tuple(ships)
        for valid, reason in (
            validate_specs([ShipSpec(s.name, s.size, s.color) for s in self._ships]),
            validate_poses(self._ships, grid),
        ):
            if not valid:
                raise ValueError(reason)
        self._by_name: dict[str, Ship] = {ship.name: ship for ship in self._ships}

    @classmethod
    def from_specs(cls, specs: Sequence[ShipSpec] = DEFAULT_FLEET) -> Fleet:
        """Create an unplaced, horizontal fleet from slot specs."""
        return cls(Ship(name=spec.name, size=spec.size, color=spec.color) for spec in specs)

    def __iter__(self) -> Iterator[Ship]:
        return iter(self._ships)

    def __len__(self) -> int:
        return len(self._ships)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __getitem__(self, name: str) -> Ship:
        return self._by_name[name]

    def get(self, name: str) -> Ship | None:
        return self._by_name.get(name)

    def placed(self) -> list[Ship]:
        return [ship for ship in self._ships if ship.is_placed]

    def all_placed(self) -> bool:
        """Return whether every ship has an origin."""
        return all(ship.is_placed for ship in self._ships)

    def snapshot(self) -> tuple[ShipView, ...]:
        return tuple(ship.view() for ship in self._ships)

    def set_pose(self, name: str, origin: Coord, orientation: Orientation) -> None:
        """Write a pose without validation; callers validate first."""
        ship = self._by_name[name]
        ship.origin = origin
        ship.orientation = orientation
