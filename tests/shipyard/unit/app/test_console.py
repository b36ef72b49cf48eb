import io
import json

from shipyard.infra.config import ShipyardSettings
from shipyard.main import run


def _run(*lines: str) -> list[str]:
    out = io.StringIO()
    run(list(lines), out, ShipyardSettings())
    return out.getvalue().splitlines()


def test_place_rotate_and_show() -> None:
    output = _run("place Cruiser 0 0", "rotate", "", "show")
    assert len(output) == 3
    placed = json.loads(output[0])
    assert placed["selected"] == "Cruiser"
    cruiser = next(ship for ship in placed["ships"] if ship["name"] == "Cruiser")
    assert cruiser["origin"] == [0, 0]
    rotated = json.loads(output[1])
    cruiser = next(ship for ship in rotated["ships"] if ship["name"] == "Cruiser")
    assert cruiser == {"name": "Cruiser", "size": 3, "color": "#60A5FA", "horizontal": False, "origin": [0, 1]}
    assert json.loads(output[2]) == rotated


def test_rejected_drop_and_errors() -> None:
    output = _run(
        "place Carrier 0 0",
        "place Battleship 0 3 H",
        "place Battleship 0 3 X",
        "place Ghost 1 1",
        "place Carrier a b",
        "fire 1 1",
        "ready",
    )
    assert output[1] == "INFO Invalid drop position."
    assert output[2] == "ERR Orientation must be H or V"
    assert output[3] == "ERR Unknown ship: Ghost"
    assert output[4] == "ERR ROW and COL must be integers"
    assert output[5] == "ERR Unknown command: fire"
    assert json.loads(output[6]) == {"ready": False}


def test_rotate_without_selection_and_snap() -> None:
    output = _run("rotate", "snap 110 60 100 50 80 130", "snap 1 2 3")
    assert output[0] == "INFO No rotation."
    assert json.loads(output[1]) == {"dx": 78.0, "dy": 122.0}
    assert output[2] == "ERR Syntax: snap EX EY BX BY DX DY"


def test_non_finite_snap_reports_error_and_keeps_reading() -> None:
    output = _run("snap 0 0 0 0 inf 0", "snap 0 0 0 0 0 nan", "show")
    assert output[0] == "ERR snap arguments must be numbers"
    assert output[1] == "ERR snap arguments must be numbers"
    assert json.loads(output[2])["selected"] is None
