"""Hit location chart construction.

A chart maps each attack direction to a partition of the hit die's outcomes
``[1, hit_die]`` into contiguous roll ranges, one per zone. Authored tables
from the data file take priority; otherwise a chart is generated by ordering
the zones nearest the attack axis first and splitting the die evenly, with
the remainder going to the leading zones.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

import numpy as np

from shipzones.core.types import (
    CARDINAL_DIRECTIONS,
    AttackDirection,
    HitLocationChart,
    HitLocationColumn,
    HitLocationEntry,
    ZoneCode,
)
from shipzones.data.tables import DamageDiagramData

logger = logging.getLogger(__name__)

_Z = ZoneCode
_D = AttackDirection

# Zone order per attack direction, hit first to hit last. Directions not
# listed here (high, low) keep the ship's own zone order.
DIRECTION_PRIORITIES: Mapping[AttackDirection, tuple[ZoneCode, ...]] = MappingProxyType({
    _D.FORWARD: (
        _Z.F, _Z.FFP, _Z.FFC, _Z.FFS, _Z.FC, _Z.FP, _Z.FS, _Z.CF, _Z.P, _Z.S,
        _Z.PC, _Z.SC, _Z.AC, _Z.AP, _Z.AS, _Z.CA, _Z.AAP, _Z.AAC, _Z.AAS, _Z.A,
    ),
    _D.AFT: (
        _Z.A, _Z.AAP, _Z.AAC, _Z.AAS, _Z.AC, _Z.AP, _Z.AS, _Z.CA, _Z.P, _Z.S,
        _Z.PC, _Z.SC, _Z.FC, _Z.FP, _Z.FS, _Z.CF, _Z.FFP, _Z.FFC, _Z.FFS, _Z.F,
    ),
    _D.PORT: (
        _Z.P, _Z.FP, _Z.AP, _Z.FFP, _Z.AAP, _Z.PC, _Z.FC, _Z.AC, _Z.F, _Z.A, _Z.S, _Z.SC,
    ),
    _D.STARBOARD: (
        _Z.S, _Z.FS, _Z.AS, _Z.FFS, _Z.AAS, _Z.SC, _Z.FC, _Z.AC, _Z.F, _Z.A, _Z.P, _Z.PC,
    ),
})


def hit_location_table_key(hit_die: int, zone_count: int) -> str:
    """Data file key: ``"6-die"`` for 2-zone ships, ``"8-die-4zone"`` etc."""
    if zone_count <= 2:
        return f"{hit_die}-die"
    return f"{hit_die}-die-{zone_count}zone"


def reorder_zones_for_direction(
    zones: Sequence[ZoneCode],
    direction: AttackDirection,
) -> list[ZoneCode]:
    """Zones closest to the attack axis first.

    Zones missing from the direction's priority list go last in their
    original order (``sorted`` is stable).
    """
    priority = DIRECTION_PRIORITIES.get(AttackDirection(direction))
    if priority is None:
        return list(zones)
    rank = {zone: i for i, zone in enumerate(priority)}
    return sorted(zones, key=lambda z: rank.get(z, len(priority)))


def partition_rolls(ordered_zones: Sequence[ZoneCode], hit_die: int) -> tuple[HitLocationEntry, ...]:
    """Split ``[1, hit_die]`` into contiguous ranges over the ordered zones.

    The first ``hit_die % n`` zones get one extra roll. Zones left with no
    roll at all (more zones than die faces) get no entry.
    """
    n = len(ordered_zones)
    if n == 0:
        return ()
    base, extra = divmod(hit_die, n)
    counts = np.full(n, base, dtype=np.int64)
    counts[:extra] += 1
    upper = np.cumsum(counts)
    lower = upper - counts + 1

    if base == 0:
        logger.warning(
            "d%d has fewer faces than %d zones; %d zone(s) cannot be hit",
            hit_die, n, n - hit_die,
        )

    return tuple(
        HitLocationEntry(min_roll=int(lo), max_roll=int(hi), zone=zone)
        for zone, lo, hi, count in zip(ordered_zones, lower, upper, counts)
        if count > 0
    )


def generate_hit_location_column(
    zones: Sequence[ZoneCode],
    hit_die: int,
    direction: AttackDirection,
) -> HitLocationColumn:
    ordered = reorder_zones_for_direction(zones, direction)
    return HitLocationColumn(direction=direction, entries=partition_rolls(ordered, hit_die))


def _known_zones(zones: Iterable[ZoneCode | str]) -> list[ZoneCode]:
    known: list[ZoneCode] = []
    for z in zones:
        try:
            known.append(ZoneCode(z))
        except ValueError:
            logger.warning("Unknown zone code '%s', leaving it off the chart", z)
    return known


def _known_directions(directions: Iterable[AttackDirection | str]) -> list[AttackDirection]:
    known: list[AttackDirection] = []
    for d in directions:
        try:
            known.append(AttackDirection(d))
        except ValueError:
            logger.warning("Unknown attack direction '%s', no column built", d)
    return known


def create_default_hit_location_chart(
    zones: Sequence[ZoneCode | str],
    hit_die: int,
    data: DamageDiagramData | None = None,
    directions: Iterable[AttackDirection | str] | None = None,
) -> HitLocationChart:
    """Build the hit location chart for a zone layout.

    Uses the authored table for ``(hit_die, len(zones))`` when ``data`` has
    one. Directions the authored table does not cover, and every direction
    when there is no table, are generated. Unknown zone codes are skipped
    with a warning, as are unknown directions.
    """
    zone_codes = _known_zones(zones)
    wanted = _known_directions(directions or CARDINAL_DIRECTIONS)

    table = None
    if data is not None:
        key = hit_location_table_key(hit_die, len(zone_codes))
        table = data.hit_location_tables.get(key)
        if table is None:
            logger.debug("No authored hit location table '%s', generating chart", key)

    columns: list[HitLocationColumn] = []
    generated = False
    for direction in wanted:
        entries = table.get(direction) if table is not None else None
        if entries:
            columns.append(HitLocationColumn(direction=direction, entries=entries))
            continue
        if table is not None:
            # Authored tables only cover the cardinal directions
            log = logger.warning if direction in CARDINAL_DIRECTIONS else logger.debug
            log(
                "Hit location table for d%d/%d zones has no '%s' column, generating it",
                hit_die, len(zone_codes), direction.value,
            )
        columns.append(generate_hit_location_column(zone_codes, hit_die, direction))
        generated = True

    return HitLocationChart(hit_die=hit_die, columns=tuple(columns), generated=generated)


def validate_hit_location_chart(
    chart: HitLocationChart,
    zones: Iterable[ZoneCode | str],
) -> list[str]:
    """Check every column partitions ``[1, hit_die]`` over the ship's zones."""
    expected = set(_known_zones(zones))
    errors: list[str] = []

    for col in chart.columns:
        label = f"Hit location column '{col.direction.value}'"
        if not col.entries:
            errors.append(f"{label} has no entries")
            continue

        next_roll = 1
        for entry in col.entries:
            if entry.min_roll != next_roll or entry.max_roll < entry.min_roll:
                errors.append(
                    f"{label} range {entry.min_roll}-{entry.max_roll} ({entry.zone.value}) "
                    f"does not start at roll {next_roll}"
                )
                break
            next_roll = entry.max_roll + 1
        else:
            if next_roll - 1 != chart.hit_die:
                errors.append(f"{label} covers 1-{next_roll - 1}, expected 1-{chart.hit_die}")

        seen = [e.zone for e in col.entries]
        duplicates = sorted({z.value for z in seen if seen.count(z) > 1})
        if duplicates:
            errors.append(f"{label} lists zone(s) more than once: {', '.join(duplicates)}")
        missing = sorted(z.value for z in expected - set(seen))
        if missing:
            errors.append(f"{label} never hits zone(s): {', '.join(missing)}")
        unknown = sorted(z.value for z in set(seen) - expected)
        if unknown:
            errors.append(f"{label} hits zone(s) not on this ship: {', '.join(unknown)}")

    return errors


def resolve_hit_zone(
    chart: HitLocationChart,
    direction: AttackDirection | str,
    roll: int,
) -> ZoneCode | None:
    """Zone struck by ``roll`` from ``direction``; None when off the chart."""
    col = chart.column(direction)
    if col is None:
        return None
    for entry in col.entries:
        if entry.min_roll <= roll <= entry.max_roll:
            return entry.zone
    return None


def zone_hit_probabilities(
    chart: HitLocationChart,
    direction: AttackDirection | str,
) -> dict[ZoneCode, float]:
    """Probability of each zone being struck by a single hit from ``direction``."""
    col = chart.column(direction)
    if col is None or not col.entries:
        return {}
    counts = np.array([e.roll_count for e in col.entries], dtype=float)
    probs = counts / float(chart.hit_die)
    result: dict[ZoneCode, float] = {}
    for entry, p in zip(col.entries, probs):
        result[entry.zone] = result.get(entry.zone, 0.0) + float(p)
    return result
