"""Weapon firing arc to zone placement rules.

Zone rules are currently the same for every ship class.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from shipzones.core.types import FiringArc, ZoneCode

_Z = ZoneCode

# Center-line zones usable by zero-range and vertical arcs
_CENTERLINE = frozenset({_Z.F, _Z.FC, _Z.AC, _Z.A, _Z.FFC, _Z.AAC, _Z.CF, _Z.CA})

ARC_ZONES: Mapping[str, frozenset[ZoneCode]] = MappingProxyType({
    FiringArc.FORWARD.value: frozenset({_Z.F, _Z.FC, _Z.FP, _Z.FS, _Z.FFP, _Z.FFC, _Z.FFS, _Z.CF}),
    FiringArc.AFT.value: frozenset({_Z.A, _Z.AC, _Z.AP, _Z.AS, _Z.AAP, _Z.AAC, _Z.AAS, _Z.CA}),
    FiringArc.PORT.value: frozenset({_Z.P, _Z.FP, _Z.AP, _Z.FFP, _Z.AAP, _Z.PC}),
    FiringArc.STARBOARD.value: frozenset({_Z.S, _Z.FS, _Z.AS, _Z.FFS, _Z.AAS, _Z.SC}),
    FiringArc.ZERO_PORT.value: _CENTERLINE,
    FiringArc.ZERO_STARBOARD.value: _CENTERLINE,
    FiringArc.HIGH.value: _CENTERLINE | {_Z.P, _Z.S},
    FiringArc.LOW.value: _CENTERLINE | {_Z.P, _Z.S},
})


def _arc_key(arc: FiringArc | str) -> str:
    return arc.value if isinstance(arc, FiringArc) else str(arc)


def can_weapon_be_in_zone(arcs: Iterable[FiringArc | str], zone_code: ZoneCode | str) -> bool:
    """True if ANY of the weapon's arcs may be mounted in the zone.

    Unknown arc labels permit no zone; an empty arc list permits none.
    """
    try:
        zone = ZoneCode(zone_code)
    except ValueError:
        return False
    return any(zone in ARC_ZONES.get(_arc_key(arc), ()) for arc in arcs)


def compatible_zones(
    arcs: Iterable[FiringArc | str],
    zones: Iterable[ZoneCode | str],
) -> list[ZoneCode]:
    """Subset of ``zones`` (order kept) where the weapon may be mounted."""
    arcs = list(arcs)
    return [ZoneCode(z) for z in zones if can_weapon_be_in_zone(arcs, z)]
