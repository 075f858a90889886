"""Immutable damage diagram data tables and their YAML loader."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from omegaconf import OmegaConf

from shipzones.core.types import (
    AttackDirection,
    HitLocationEntry,
    ShipClass,
    ZoneCode,
)
from shipzones.data.schema import (
    DamageDiagramSchema,
    ZoneConfigRowSchema,
    validate_damage_diagram_data,
)

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).with_name("damage_diagram.yaml")

SMALL_CRAFT_TWO_ZONE = "2-zone"
SMALL_CRAFT_FOUR_ZONE = "4-zone"


@dataclass(frozen=True)
class ZoneConfigRow:
    zones: tuple[ZoneCode, ...]
    hit_die: int
    # Only set on small-craft tiers
    max_hull_points: int | None = None


@dataclass(frozen=True)
class ZoneLimitRow:
    hull_points: int
    zone_count: int
    zone_limit: int


HitLocationTable = Mapping[AttackDirection, tuple[HitLocationEntry, ...]]


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class DamageDiagramData:
    """All table data the zone engine reads.

    Built once by the loader and passed explicitly to every table-dependent
    function; nothing here is mutated after construction.
    """

    class_rows: Mapping[ShipClass, ZoneConfigRow]
    small_craft_tiers: Mapping[str, ZoneConfigRow]
    zone_limits: Mapping[str, ZoneLimitRow] = field(default_factory=_empty_mapping)
    hit_location_tables: Mapping[str, HitLocationTable] = field(default_factory=_empty_mapping)
    default_zone_limit: int = 100
    default_zone_count: int = 6

    @classmethod
    def from_schema(cls, schema: DamageDiagramSchema) -> DamageDiagramData:
        zc = schema.zone_configurations
        class_rows = {
            ShipClass.LIGHT: _row(zc.light),
            ShipClass.MEDIUM: _row(zc.medium),
            ShipClass.HEAVY: _row(zc.heavy),
            ShipClass.SUPER_HEAVY: _row(zc.super_heavy),
        }
        tiers = {
            SMALL_CRAFT_TWO_ZONE: _row(zc.small_craft.two_zone, zc.small_craft.two_zone.max_hull_points),
            SMALL_CRAFT_FOUR_ZONE: _row(zc.small_craft.four_zone, zc.small_craft.four_zone.max_hull_points),
        }
        limits = {
            hull_id: ZoneLimitRow(
                hull_points=row.hull_points,
                zone_count=row.zone_count,
                zone_limit=row.zone_limit,
            )
            for hull_id, row in schema.zone_limits.hulls.items()
        }
        tables: dict[str, HitLocationTable] = {}
        for key, directions in schema.hit_location_tables.items():
            tables[key] = MappingProxyType({
                direction: tuple(
                    HitLocationEntry(min_roll=e.roll[0], max_roll=e.roll[-1], zone=e.zone)
                    for e in entries
                )
                for direction, entries in directions.items()
            })
        return cls(
            class_rows=MappingProxyType(class_rows),
            small_craft_tiers=MappingProxyType(tiers),
            zone_limits=MappingProxyType(limits),
            hit_location_tables=MappingProxyType(tables),
            default_zone_limit=schema.fallbacks.zone_limit,
            default_zone_count=schema.fallbacks.zone_count,
        )

    @classmethod
    def from_omegaconf(cls, cfg: Any) -> DamageDiagramData:
        """Build from OmegaConf dict or plain dict."""
        if OmegaConf.is_config(cfg):
            cfg = OmegaConf.to_container(cfg, resolve=True)
        if not isinstance(cfg, dict):
            cfg = dict(cfg)
        return cls.from_schema(validate_damage_diagram_data(cfg))


def _row(schema: ZoneConfigRowSchema, max_hull_points: int | None = None) -> ZoneConfigRow:
    return ZoneConfigRow(
        zones=tuple(schema.zones),
        hit_die=schema.hit_die,
        max_hull_points=max_hull_points,
    )


def load_damage_diagram_data(path: str | Path | None = None) -> DamageDiagramData:
    """Load and validate the damage diagram tables from YAML.

    ``path=None`` loads the tables shipped with the package. Raises
    ``FileNotFoundError`` for a missing file and ``pydantic.ValidationError``
    for malformed tables.
    """
    data_path = Path(path) if path is not None else DEFAULT_DATA_PATH
    if not data_path.exists():
        raise FileNotFoundError(f"Damage diagram data not found: {data_path}")

    raw = OmegaConf.load(data_path)
    data = DamageDiagramData.from_omegaconf(raw)
    logger.debug(
        "Loaded damage diagram data from %s (%d hull limits, %d hit tables)",
        data_path,
        len(data.zone_limits),
        len(data.hit_location_tables),
    )
    return data
