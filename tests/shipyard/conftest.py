from __future__ import annotations

import pytest

from shipyard.app.services.placement_session import PlacementSession
from shipyard.core.fleet import Fleet


@pytest.fixture
def fleet() -> Fleet:
    return Fleet.from_specs()


@pytest.fixture
def session(fleet: Fleet) -> PlacementSession:
    return PlacementSession(fleet)
