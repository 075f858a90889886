"""Shared pytest fixtures for shipzones tests."""

from __future__ import annotations

import copy
import logging
from pathlib import Path

import pytest

from shipzones.core.types import HullDescriptor, ShipClass
from shipzones.data.tables import DamageDiagramData, load_damage_diagram_data

# Small hand-written tables; only the 2-zone d6 chart is authored so the
# other layouts exercise chart generation.
TABLE_DICT = {
    "zone_configurations": {
        "small-craft": {
            "2-zone": {"max_hull_points": 20, "zones": ["F", "A"], "hit_die": 6},
            "4-zone": {"max_hull_points": 40, "zones": ["F", "FC", "AC", "A"], "hit_die": 8},
        },
        "light": {"zones": ["F", "FC", "P", "S", "AC", "A"], "hit_die": 8},
        "medium": {"zones": ["F", "FP", "FC", "FS", "AP", "AC", "AS", "A"], "hit_die": 12},
        "heavy": {
            "zones": ["F", "FC", "FP", "FS", "P", "CF", "S", "AP", "CA", "AS", "AC", "A"],
            "hit_die": 20,
        },
        "super-heavy": {
            "zones": [
                "F", "FFP", "FFC", "FFS", "FP", "FC", "FS", "P", "PC", "CF",
                "SC", "S", "AP", "CA", "AS", "AAP", "AC", "AAS", "AAC", "A",
            ],
            "hit_die": 20,
        },
    },
    "zone_limits": {
        "hulls": {
            "fighter": {"hull_points": 10, "zone_count": 2, "zone_limit": 7},
            "scout": {"hull_points": 30, "zone_count": 4, "zone_limit": 10},
            "corvette": {"hull_points": 80, "zone_count": 6, "zone_limit": 22},
            "light-cruiser": {"hull_points": 160, "zone_count": 6, "zone_limit": 40},
            "heavy-cruiser": {"hull_points": 400, "zone_count": 8, "zone_limit": 96},
            "battleship": {"hull_points": 1200, "zone_count": 12, "zone_limit": 195},
            "dreadnought": {"hull_points": 3200, "zone_count": 20, "zone_limit": 480},
        },
    },
    "hit_location_tables": {
        "6-die": {
            "forward": [{"roll": [1, 2, 3], "zone": "F"}, {"roll": [4, 5, 6], "zone": "A"}],
            "port": [{"roll": [1, 2, 3], "zone": "F"}, {"roll": [4, 5, 6], "zone": "A"}],
            "starboard": [{"roll": [1, 2, 3], "zone": "F"}, {"roll": [4, 5, 6], "zone": "A"}],
            "aft": [{"roll": [1, 2, 3], "zone": "A"}, {"roll": [4, 5, 6], "zone": "F"}],
        },
    },
}


def _make_hull(**overrides) -> HullDescriptor:
    defaults = dict(
        id="heavy-cruiser",
        ship_class=ShipClass.MEDIUM,
        hull_points=400,
        name="Heavy Cruiser",
    )
    defaults.update(overrides)
    return HullDescriptor(**defaults)


@pytest.fixture(autouse=True)
def _reset_shipzones_logger():
    """Undo setup_logging() so caplog sees records in later tests."""
    yield
    root = logging.getLogger("shipzones")
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def make_hull():
    """Factory for hull descriptors (defaults to a medium heavy cruiser)."""
    return _make_hull


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return project_root / "config" / "default.yaml"


@pytest.fixture
def table_dict() -> dict:
    return copy.deepcopy(TABLE_DICT)


@pytest.fixture
def diagram_data(table_dict: dict) -> DamageDiagramData:
    return DamageDiagramData.from_omegaconf(table_dict)


@pytest.fixture(scope="session")
def packaged_data() -> DamageDiagramData:
    return load_damage_diagram_data()
