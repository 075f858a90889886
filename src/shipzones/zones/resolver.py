"""Zone topology resolution and empty zone initialization.

Turns a hull descriptor into the ship's zone layout (zone codes + hit die)
and the per-zone hull point capacity. Missing table rows never raise: they
resolve to the configured fallbacks and are reported through ``TableLookup``
and a log warning.
"""

from __future__ import annotations

import logging

from shipzones.core.types import (
    DamageZone,
    HullDescriptor,
    ShipClass,
    ShipClassZoneConfig,
    TableLookup,
)
from shipzones.data.tables import (
    SMALL_CRAFT_FOUR_ZONE,
    SMALL_CRAFT_TWO_ZONE,
    DamageDiagramData,
)

logger = logging.getLogger(__name__)

# Small craft at or below this many hull points use the 2-zone layout.
# Fixed by the rules; the tiers' max_hull_points in the tables is descriptive.
SMALL_CRAFT_TWO_ZONE_MAX_HP = 20


def get_zone_config_for_hull(hull: HullDescriptor, data: DamageDiagramData) -> ShipClassZoneConfig:
    """Resolve the zone layout for a hull.

    Small craft pick a tier by size; every other class has one fixed row.
    """
    if hull.ship_class == ShipClass.SMALL_CRAFT:
        if hull.hull_points <= SMALL_CRAFT_TWO_ZONE_MAX_HP:
            row = data.small_craft_tiers[SMALL_CRAFT_TWO_ZONE]
        else:
            row = data.small_craft_tiers[SMALL_CRAFT_FOUR_ZONE]
    else:
        row = data.class_rows[hull.ship_class]

    return ShipClassZoneConfig(
        ship_class=hull.ship_class,
        zone_count=len(row.zones),
        zones=row.zones,
        hit_die=row.hit_die,
    )


def lookup_zone_limit(hull_type_id: str, data: DamageDiagramData) -> TableLookup[int]:
    """Max hull points per zone for a hull type, flagged when defaulted."""
    row = data.zone_limits.get(hull_type_id)
    if row is None:
        return TableLookup(
            value=data.default_zone_limit,
            fallback_used=True,
            note=f"No zone limit data for hull type: {hull_type_id}",
        )
    return TableLookup(value=row.zone_limit)


def get_zone_limit_for_hull(hull_type_id: str, data: DamageDiagramData) -> int:
    result = lookup_zone_limit(hull_type_id, data)
    if result.fallback_used:
        logger.warning("%s, using %d HP", result.note, result.value)
    return result.value


def lookup_zone_count(hull_type_id: str, data: DamageDiagramData) -> TableLookup[int]:
    row = data.zone_limits.get(hull_type_id)
    if row is None:
        return TableLookup(
            value=data.default_zone_count,
            fallback_used=True,
            note=f"No zone count data for hull type: {hull_type_id}",
        )
    return TableLookup(value=row.zone_count)


def get_zone_count_for_hull(hull_type_id: str, data: DamageDiagramData) -> int:
    """Zone count from the zone limit table (defaults to light-ship zones)."""
    result = lookup_zone_count(hull_type_id, data)
    if result.fallback_used:
        logger.debug("%s, using %d zones", result.note, result.value)
    return result.value


def create_empty_zones(hull: HullDescriptor, data: DamageDiagramData) -> list[DamageZone]:
    """One empty zone per zone code of the hull's layout."""
    config = get_zone_config_for_hull(hull, data)
    zone_limit = get_zone_limit_for_hull(hull.id, data)
    return [DamageZone(code=code, max_hull_points=zone_limit) for code in config.zones]
