"""Console entry point driving a placement session with line commands.

Commands::

    place NAME ROW COL [H|V]     drag NAME from its current pose and drop it
    rotate                       rotate the selected ship
    snap EX EY BX BY DX DY       snapped drag offset for element/board corners
    show                         print the fleet snapshot
    ready                        print whether every ship is placed

Successful ``place`` and ``rotate`` print the snapshot; a rejected drop or a
blocked rotation prints an ``INFO`` line and malformed input an ``ERR`` line.
"""

from __future__ import annotations

import json
import logging
import math
import sys
from collections.abc import Iterable
from typing import TextIO

from shipyard.app.flows.snap import snap_offset
from shipyard.app.services.placement_session import PlacementSession
from shipyard.core.models import Coord, ShipDescriptor
from shipyard.infra.config import ShipyardSettings, load_default_env_files, load_settings
from shipyard.infra.logging import setup_logging, shutdown_logging
from shipyard.ui_runtime.geometry import Rect

logger = logging.getLogger(__name__)


class CommandError(ValueError):
    """Raised for malformed console input."""


def _snapshot_line(session: PlacementSession) -> str:
    return json.dumps(
        {
            "selected": session.selected,
            "ready": session.ready,
            "ships": [view.to_payload() for view in session.snapshot()],
        }
    )


def _place(session: PlacementSession, args: list[str]) -> str:
    if len(args) not in (3, 4):
        raise CommandError("Syntax: place NAME ROW COL [H|V]")
    name, raw_row, raw_col = args[:3]
    if name not in session.fleet:
        raise CommandError(f"Unknown ship: {name}")
    try:
        target = Coord(int(raw_row), int(raw_col))
    except ValueError as exc:
        raise CommandError("ROW and COL must be integers") from exc
    descriptor = session.descriptor_for(name)
    if len(args) == 4:
        orient = args[3].upper()
        if orient not in ("H", "V"):
            raise CommandError("Orientation must be H or V")
        descriptor = ShipDescriptor(descriptor.name, descriptor.size, descriptor.color, orient == "H")
    session.drag_start(descriptor)
    result = session.drag_end(descriptor, target)
    if not result.placed:
        return f"INFO {result.status}"
    return _snapshot_line(session)


def _snap(settings: ShipyardSettings, args: list[str]) -> str:
    if len(args) != 6:
        raise CommandError("Syntax: snap EX EY BX BY DX DY")
    try:
        values = [float(value) for value in args]
    except ValueError as exc:
        raise CommandError("snap arguments must be numbers") from exc
    if not all(math.isfinite(value) for value in values):
        raise CommandError("snap arguments must be numbers")
    ex, ey, bx, by, dx, dy = values
    x, y = snap_offset(Rect(ex, ey, 0.0, 0.0), Rect(bx, by, 0.0, 0.0), dx, dy, cell_size=settings.cell_size)
    return json.dumps({"dx": x, "dy": y})


def handle_command(session: PlacementSession, settings: ShipyardSettings, line: str) -> str | None:
    """Apply one console command and return the line to print."""
    parts = line.split()
    if not parts:
        return None
    command, args = parts[0].lower(), parts[1:]
    if command == "place":
        return _place(session, args)
    if command == "rotate":
        if not session.rotate_selected():
            return "INFO No rotation."
        return _snapshot_line(session)
    if command == "snap":
        return _snap(settings, args)
    if command == "show":
        return _snapshot_line(session)
    if command == "ready":
        return json.dumps({"ready": session.ready})
    raise CommandError(f"Unknown command: {command}")


def run(lines: Iterable[str], out: TextIO, settings: ShipyardSettings) -> None:
    session = PlacementSession()
    for line in lines:
        try:
            response = handle_command(session, settings, line)
        except CommandError as exc:
            response = f"ERR {exc}"
        if response is not None:
            out.write(response + "\n")
            out.flush()


def main() -> None:
    """Run the placement console on stdin/stdout."""
    load_default_env_files()
    settings = load_settings()
    setup_logging(settings)
    logger.info("console_start cell_size=%s", settings.cell_size)
    try:
        run(sys.stdin, sys.stdout, settings)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
