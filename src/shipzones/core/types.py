"""Core data types for the shipzones damage diagram engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


class ShipClass(str, enum.Enum):
    SMALL_CRAFT = "small-craft"
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    SUPER_HEAVY = "super-heavy"


class ZoneCode(str, enum.Enum):
    """Hull region identifiers (Table 5-18 abbreviations)."""

    # 2-zone ships
    F = "F"
    A = "A"
    # 4-zone ships add
    FC = "FC"
    AC = "AC"
    # 6-zone ships add
    P = "P"
    S = "S"
    # 8-zone ships add
    FP = "FP"
    FS = "FS"
    AP = "AP"
    AS = "AS"
    # 12-zone ships add
    CF = "CF"
    CA = "CA"
    # 20-zone ships add
    FFP = "FFP"
    FFC = "FFC"
    FFS = "FFS"
    PC = "PC"
    SC = "SC"
    AAP = "AAP"
    AAC = "AAC"
    AAS = "AAS"


ZONE_NAMES: dict[ZoneCode, str] = {
    ZoneCode.F: "Fore",
    ZoneCode.A: "Aft",
    ZoneCode.FC: "Forward Center",
    ZoneCode.AC: "Aft Center",
    ZoneCode.P: "Port",
    ZoneCode.S: "Starboard",
    ZoneCode.FP: "Forward Port",
    ZoneCode.FS: "Forward Starboard",
    ZoneCode.AP: "Aft Port",
    ZoneCode.AS: "Aft Starboard",
    ZoneCode.CF: "Center Forward",
    ZoneCode.CA: "Center Aft",
    ZoneCode.FFP: "Forward-Forward Port",
    ZoneCode.FFC: "Forward-Forward Center",
    ZoneCode.FFS: "Forward-Forward Starboard",
    ZoneCode.PC: "Port Center",
    ZoneCode.SC: "Starboard Center",
    ZoneCode.AAP: "Aft-Aft Port",
    ZoneCode.AAC: "Aft-Aft Center",
    ZoneCode.AAS: "Aft-Aft Starboard",
}


class SystemDamageCategory(str, enum.Enum):
    """Damage categories, declared surface (hit first) to core (hit last)."""

    WEAPON = "weapon"
    DEFENSE = "defense"
    SENSOR = "sensor"
    COMMUNICATION = "communication"
    FUEL = "fuel"
    HANGAR = "hangar"
    ACCOMMODATION = "accommodation"
    MISCELLANEOUS = "miscellaneous"
    SUPPORT = "support"
    ENGINE = "engine"
    POWER_PLANT = "powerPlant"
    FTL_DRIVE = "ftlDrive"
    COMMAND = "command"


DAMAGE_CATEGORY_ORDER: tuple[SystemDamageCategory, ...] = tuple(SystemDamageCategory)


class AttackDirection(str, enum.Enum):
    FORWARD = "forward"
    AFT = "aft"
    PORT = "port"
    STARBOARD = "starboard"
    HIGH = "high"
    LOW = "low"


# Default column order of a hit location chart
CARDINAL_DIRECTIONS: tuple[AttackDirection, ...] = (
    AttackDirection.FORWARD,
    AttackDirection.PORT,
    AttackDirection.STARBOARD,
    AttackDirection.AFT,
)


class FiringArc(str, enum.Enum):
    FORWARD = "forward"
    AFT = "aft"
    PORT = "port"
    STARBOARD = "starboard"
    ZERO_PORT = "zero-port"
    ZERO_STARBOARD = "zero-starboard"
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class HullDescriptor:
    """The parts of a hull the zone engine cares about."""

    id: str
    ship_class: ShipClass
    hull_points: int
    name: str = ""

    def __post_init__(self) -> None:
        # Accept raw labels ("light") from save files and UI state
        object.__setattr__(self, "ship_class", ShipClass(self.ship_class))


@dataclass(frozen=True)
class ShipClassZoneConfig:
    ship_class: ShipClass
    zone_count: int
    zones: tuple[ZoneCode, ...]
    hit_die: int


@dataclass(frozen=True)
class ZoneSystemReference:
    """A (possibly partial) installed system placed in a zone.

    ``system_type`` is a free-form label (``"beam"``, ``"reactor"``...);
    ``firepower_order`` is only meaningful for weapon-classified references.
    """

    id: str
    system_type: str
    hull_points: int
    firepower_order: int | None = None
    name: str = ""
    installed_system_id: str = ""


@dataclass(frozen=True)
class DamageZone:
    code: ZoneCode
    max_hull_points: int
    systems: tuple[ZoneSystemReference, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", ZoneCode(self.code))
        object.__setattr__(self, "systems", tuple(self.systems))

    @property
    def total_hull_points(self) -> int:
        return sum(s.hull_points for s in self.systems)

    @property
    def is_empty(self) -> bool:
        return len(self.systems) == 0

    @property
    def is_over_limit(self) -> bool:
        return self.total_hull_points > self.max_hull_points

    @property
    def free_hull_points(self) -> int:
        return self.max_hull_points - self.total_hull_points

    def to_dict(self) -> dict:
        return {
            "code": self.code.value,
            "systems": [s.id for s in self.systems],
            "total_hull_points": self.total_hull_points,
            "max_hull_points": self.max_hull_points,
        }


@dataclass(frozen=True)
class InstalledSystem:
    """A ship component that can be placed into a zone."""

    id: str
    system_type: str
    hull_points: int
    name: str = ""
    firepower_order: int | None = None
    arcs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "arcs", tuple(self.arcs))


@dataclass(frozen=True)
class HitLocationEntry:
    min_roll: int
    max_roll: int
    zone: ZoneCode

    def __post_init__(self) -> None:
        object.__setattr__(self, "zone", ZoneCode(self.zone))

    @property
    def roll_count(self) -> int:
        return self.max_roll - self.min_roll + 1


@dataclass(frozen=True)
class HitLocationColumn:
    direction: AttackDirection
    entries: tuple[HitLocationEntry, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", AttackDirection(self.direction))
        object.__setattr__(self, "entries", tuple(self.entries))


@dataclass(frozen=True)
class HitLocationChart:
    """Per-direction die roll -> zone chart.

    ``generated`` is True when at least one column was synthesized instead
    of read from an authored table.
    """

    hit_die: int
    columns: tuple[HitLocationColumn, ...]
    generated: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))

    def column(self, direction: AttackDirection | str) -> HitLocationColumn | None:
        direction = AttackDirection(direction)
        for col in self.columns:
            if col.direction == direction:
                return col
        return None

    def to_dict(self) -> dict:
        return {
            "hit_die": self.hit_die,
            "generated": self.generated,
            "columns": {
                col.direction.value: [
                    {"roll": [e.min_roll, e.max_roll], "zone": e.zone.value}
                    for e in col.entries
                ]
                for col in self.columns
            },
        }


@dataclass(frozen=True)
class DamageDiagramStats:
    zone_count: int
    zones_with_systems: int
    zones_over_limit: int
    empty_zones: int
    total_systems_assigned: int
    total_hull_points_assigned: int
    unassigned_systems: int


@dataclass(frozen=True)
class DamageDiagram:
    zones: tuple[DamageZone, ...]
    hit_location_chart: HitLocationChart
    is_complete: bool = False
    validation_errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "zones", tuple(self.zones))
        object.__setattr__(self, "validation_errors", tuple(self.validation_errors))


@dataclass(frozen=True)
class TableLookup(Generic[T]):
    """Result of a table lookup that may have used a fallback value."""

    value: T
    fallback_used: bool = False
    note: str = ""


@dataclass(frozen=True)
class AutoAssignResult:
    zones: list[DamageZone]
    unplaced: list[InstalledSystem] = field(default_factory=list)
