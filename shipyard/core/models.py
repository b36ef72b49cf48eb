"""Core domain models used by placement logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @classmethod
    def from_horizontal(cls, horizontal: bool) -> Orientation:
        return cls.HORIZONTAL if horizontal else cls.VERTICAL

    def flipped(self) -> Orientation:
        """Return the perpendicular orientation."""
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Static description of a fleet slot."""

    name: str
    size: int
    color: str


DEFAULT_FLEET: tuple[ShipSpec, ...] = (
    ShipSpec("Carrier", 5, "#1E40AF"),
    ShipSpec("Battleship", 4, "#3B82F6"),
    ShipSpec("Cruiser", 3, "#60A5FA"),
    ShipSpec("Submarine", 3, "#93C5FD"),
    ShipSpec("Destroyer", 2, "#C0D6F0"),
)


@dataclass(frozen=True, slots=True)
class ShipDescriptor:
    """Immutable ship data captured when a drag starts."""

    name: str
    size: int
    color: str
    horizontal: bool

    @property
    def orientation(self) -> Orientation:
        return Orientation.from_horizontal(self.horizontal)


@dataclass(frozen=True, slots=True)
class ShipView:
    """Render-facing snapshot of one ship."""

    name: str
    size: int
    color: str
    horizontal: bool
    origin: Coord | None

    def to_payload(self) -> dict[str, object]:
        """Convert to a JSON-serializable payload."""
        return {
            "name": self.name,
            "size": self.size,
            "color": self.color,
            "horizontal": self.horizontal,
            "origin": None if self.origin is None else [self.origin.row, self.origin.col],
        }


@dataclass(slots=True)
class Ship:
    """Mutable fleet slot; only its origin and orientation ever change."""

    name: str
    size: int
    color: str = ""
    orientation: Orientation = Orientation.HORIZONTAL
    origin: Coord | None = None

    @property
    def horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    @property
    def is_placed(self) -> bool:
        return self.origin is not None

    def cells(self) -> list[Coord]:
        """Occupied cells, empty while unplaced."""
        if self.origin is None:
            return []
        return cells_for(self.origin, self.size, self.orientation)

    def descriptor(self) -> ShipDescriptor:
        return ShipDescriptor(self.name, self.size, self.color, self.horizontal)

    def view(self) -> ShipView:
        return ShipView(self.name, self.size, self.color, self.horizontal, self.origin)


def cells_for(origin: Coord, size: int, orientation: Orientation) -> list[Coord]:
    """Compute occupied cells for a ship anchored at ``origin``."""
    result: list[Coord] = []
    for i in range(size):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(origin.row, origin.col + i))
        else:
            result.append(Coord(origin.row + i, origin.col))
    return result
