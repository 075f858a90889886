"""Placing installed systems into damage zones.

All helpers take the current zone list and return a new one; zones are
frozen, so a caller's snapshot is never modified. Reference ids come from an
``IdFactory`` supplied by the caller.
"""

from __future__ import annotations

import itertools
import logging
import uuid
from dataclasses import replace
from typing import Callable, Iterable, Sequence

from shipzones.core.types import (
    AutoAssignResult,
    DamageZone,
    InstalledSystem,
    SystemDamageCategory,
    ZoneCode,
    ZoneSystemReference,
)
from shipzones.zones.arcs import can_weapon_be_in_zone
from shipzones.zones.classifier import (
    get_damage_category_order,
    get_system_damage_category,
    sort_systems_by_damage_priority,
)

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def counter_id_generator(prefix: str = "zsr", start: int = 1) -> IdFactory:
    """Monotonic ids: ``zsr-1``, ``zsr-2``, ... (deterministic, good for tests)."""
    counter = itertools.count(start)
    return lambda: f"{prefix}-{next(counter)}"


def uuid_id_generator(prefix: str = "zsr") -> IdFactory:
    return lambda: f"{prefix}-{uuid.uuid4().hex}"


def make_reference(system: InstalledSystem, id_factory: IdFactory) -> ZoneSystemReference:
    is_weapon = get_system_damage_category(system.system_type) == SystemDamageCategory.WEAPON
    return ZoneSystemReference(
        id=id_factory(),
        system_type=system.system_type,
        hull_points=system.hull_points,
        firepower_order=system.firepower_order if is_weapon else None,
        name=system.name,
        installed_system_id=system.id,
    )


def _update_zone(
    zones: Sequence[DamageZone],
    zone_code: ZoneCode | str,
    update: Callable[[DamageZone], DamageZone],
) -> list[DamageZone]:
    code = ZoneCode(zone_code)
    return [update(z) if z.code == code else z for z in zones]


def add_reference(
    zones: Sequence[DamageZone],
    zone_code: ZoneCode | str,
    ref: ZoneSystemReference,
) -> list[DamageZone]:
    """Insert an existing reference and re-sort the zone by hit order."""
    return _update_zone(
        zones,
        zone_code,
        lambda z: replace(z, systems=tuple(sort_systems_by_damage_priority([*z.systems, ref]))),
    )


def assign_system(
    zones: Sequence[DamageZone],
    zone_code: ZoneCode | str,
    system: InstalledSystem,
    id_factory: IdFactory,
) -> list[DamageZone]:
    return add_reference(zones, zone_code, make_reference(system, id_factory))


def remove_system(
    zones: Sequence[DamageZone],
    zone_code: ZoneCode | str,
    ref_id: str,
) -> list[DamageZone]:
    return _update_zone(
        zones,
        zone_code,
        lambda z: replace(z, systems=tuple(s for s in z.systems if s.id != ref_id)),
    )


def remove_installed_system(zones: Sequence[DamageZone], installed_system_id: str) -> list[DamageZone]:
    """Drop every reference to a deleted ship component, in all zones."""
    return [
        replace(z, systems=tuple(s for s in z.systems if s.installed_system_id != installed_system_id))
        for z in zones
    ]


def clear_zone(zones: Sequence[DamageZone], zone_code: ZoneCode | str) -> list[DamageZone]:
    return _update_zone(zones, zone_code, lambda z: replace(z, systems=()))


def clear_all_zones(zones: Sequence[DamageZone]) -> list[DamageZone]:
    return [replace(z, systems=()) for z in zones]


def move_system(
    zones: Sequence[DamageZone],
    zone_code: ZoneCode | str,
    ref_id: str,
    offset: int,
) -> list[DamageZone]:
    """Manually shift a reference within its zone's hit order.

    Moves past either end of the list are ignored.
    """

    def _move(zone: DamageZone) -> DamageZone:
        systems = list(zone.systems)
        idx = next((i for i, s in enumerate(systems) if s.id == ref_id), None)
        if idx is None:
            return zone
        target = idx + offset
        if target < 0 or target >= len(systems):
            return zone
        systems.insert(target, systems.pop(idx))
        return replace(zone, systems=tuple(systems))

    return _update_zone(zones, zone_code, _move)


def move_system_up(zones: Sequence[DamageZone], zone_code: ZoneCode | str, ref_id: str) -> list[DamageZone]:
    return move_system(zones, zone_code, ref_id, -1)


def move_system_down(zones: Sequence[DamageZone], zone_code: ZoneCode | str, ref_id: str) -> list[DamageZone]:
    return move_system(zones, zone_code, ref_id, 1)


def find_unassigned_systems(
    installed: Iterable[InstalledSystem],
    zones: Sequence[DamageZone],
) -> list[InstalledSystem]:
    assigned = {s.installed_system_id for z in zones for s in z.systems}
    return [s for s in installed if s.id not in assigned]


def auto_assign(
    zones: Sequence[DamageZone],
    systems: Iterable[InstalledSystem],
    id_factory: IdFactory,
) -> AutoAssignResult:
    """Spread systems over zones without exceeding any zone's HP limit.

    Systems are placed surface to core. Each goes to the candidate zone with
    the most free hull points (first zone wins ties); weapons prefer zones
    their arcs allow, falling back to any zone with room. Systems that fit
    nowhere are returned in ``unplaced``.
    """
    result = list(zones)
    unplaced: list[InstalledSystem] = []

    ordered = sorted(systems, key=lambda s: get_damage_category_order(s.system_type))
    for system in ordered:
        candidates = [z for z in result if z.free_hull_points >= system.hull_points]

        is_weapon = get_system_damage_category(system.system_type) == SystemDamageCategory.WEAPON
        if is_weapon and system.arcs:
            in_arc = [z for z in candidates if can_weapon_be_in_zone(system.arcs, z.code)]
            if in_arc:
                candidates = in_arc

        if not candidates:
            unplaced.append(system)
            continue

        best = candidates[0]
        for zone in candidates[1:]:
            if zone.free_hull_points > best.free_hull_points:
                best = zone

        result = assign_system(result, best.code, system, id_factory)

    if unplaced:
        logger.info("Auto-assign left %d system(s) unplaced", len(unplaced))
    return AutoAssignResult(zones=result, unplaced=unplaced)
