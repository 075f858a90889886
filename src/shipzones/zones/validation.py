"""Damage diagram validation, statistics and completeness.

Everything here is advisory: problems come back as strings or flags and the
caller decides whether to block the user.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Sequence

from shipzones.core.types import (
    DamageDiagram,
    DamageDiagramStats,
    DamageZone,
)
from shipzones.data.tables import DamageDiagramData
from shipzones.zones.hit_location import (
    create_default_hit_location_chart,
    validate_hit_location_chart,
)

logger = logging.getLogger(__name__)


def validate_zone(zone: DamageZone) -> list[str]:
    errors: list[str] = []

    if zone.is_over_limit:
        errors.append(
            f"Zone {zone.code.value} exceeds HP limit: "
            f"{zone.total_hull_points}/{zone.max_hull_points} HP"
        )

    if zone.is_empty:
        errors.append(f"Zone {zone.code.value} has no systems assigned (risky in combat)")

    return errors


def validate_damage_diagram(diagram: DamageDiagram) -> list[str]:
    """Per-zone diagnostics, empty zone summary, duplicate ids and chart checks."""
    errors: list[str] = []

    for zone in diagram.zones:
        errors.extend(validate_zone(zone))

    empty = sum(1 for z in diagram.zones if z.is_empty)
    if empty > 0:
        errors.append(f"Warning: {empty} zone(s) have no systems assigned")

    ref_ids = Counter(s.id for z in diagram.zones for s in z.systems)
    for ref_id, count in sorted(ref_ids.items()):
        if count > 1:
            errors.append(f"System reference {ref_id} is assigned {count} times")

    if diagram.hit_location_chart.columns:
        errors.extend(
            validate_hit_location_chart(
                diagram.hit_location_chart,
                [z.code for z in diagram.zones],
            )
        )

    return errors


def calculate_damage_diagram_stats(
    zones: Sequence[DamageZone],
    total_ship_systems: int,
) -> DamageDiagramStats:
    zones_with_systems = 0
    zones_over_limit = 0
    empty_zones = 0
    total_systems_assigned = 0
    total_hull_points_assigned = 0

    for zone in zones:
        if zone.is_empty:
            empty_zones += 1
        else:
            zones_with_systems += 1
        if zone.is_over_limit:
            zones_over_limit += 1
        total_systems_assigned += len(zone.systems)
        total_hull_points_assigned += zone.total_hull_points

    unassigned = total_ship_systems - total_systems_assigned
    if unassigned < 0:
        # Caller counted fewer systems than are placed; reported unclamped
        logger.warning(
            "%d systems assigned to zones but ship reports only %d",
            total_systems_assigned, total_ship_systems,
        )

    return DamageDiagramStats(
        zone_count=len(zones),
        zones_with_systems=zones_with_systems,
        zones_over_limit=zones_over_limit,
        empty_zones=empty_zones,
        total_systems_assigned=total_systems_assigned,
        total_hull_points_assigned=total_hull_points_assigned,
        unassigned_systems=unassigned,
    )


def is_damage_diagram_complete(zones: Sequence[DamageZone], unassigned_systems: int) -> bool:
    """All systems placed, no empty zone, no zone over its HP limit."""
    if unassigned_systems > 0:
        return False
    if any(z.is_empty for z in zones):
        return False
    if any(z.is_over_limit for z in zones):
        return False
    return True


def build_damage_diagram(
    zones: Sequence[DamageZone],
    hit_die: int,
    total_ship_systems: int,
    data: DamageDiagramData | None = None,
) -> DamageDiagram:
    """Assemble a diagram snapshot: chart, diagnostics and completeness."""
    chart = create_default_hit_location_chart([z.code for z in zones], hit_die, data)
    stats = calculate_damage_diagram_stats(zones, total_ship_systems)
    draft = DamageDiagram(zones=tuple(zones), hit_location_chart=chart)
    return DamageDiagram(
        zones=draft.zones,
        hit_location_chart=chart,
        is_complete=is_damage_diagram_complete(zones, stats.unassigned_systems),
        validation_errors=tuple(validate_damage_diagram(draft)),
    )
