"""Damage diagram data tables and loader."""

from shipzones.data.tables import (
    DEFAULT_DATA_PATH,
    DamageDiagramData,
    ZoneConfigRow,
    ZoneLimitRow,
    load_damage_diagram_data,
)

__all__ = [
    "DEFAULT_DATA_PATH",
    "DamageDiagramData",
    "ZoneConfigRow",
    "ZoneLimitRow",
    "load_damage_diagram_data",
]
