"""System damage classification and hit-order sorting.

Systems inside a zone are struck surface to core: weapons first, command
last. Within weapons the lighter firepower classes go first; within every
other category (and among equal-firepower weapons) larger systems soak hits
before smaller ones.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from shipzones.core.types import (
    DAMAGE_CATEGORY_ORDER,
    SystemDamageCategory,
    ZoneSystemReference,
)

_C = SystemDamageCategory

_SYSTEM_TYPE_CATEGORIES: Mapping[str, SystemDamageCategory] = MappingProxyType({
    # Weapons
    "beam": _C.WEAPON,
    "projectile": _C.WEAPON,
    "torpedo": _C.WEAPON,
    "special": _C.WEAPON,
    "ordnance": _C.WEAPON,
    "launchSystem": _C.WEAPON,
    # Defenses
    "shield": _C.DEFENSE,
    "screen": _C.DEFENSE,
    "ecm": _C.DEFENSE,
    # Sensors
    "active": _C.SENSOR,
    "passive": _C.SENSOR,
    # Communications
    "transceiver": _C.COMMUNICATION,
    # Fuel
    "engineFuel": _C.FUEL,
    "ftlFuel": _C.FUEL,
    # Hangars / cargo
    "cargo": _C.HANGAR,
    # Accommodations
    "stores": _C.ACCOMMODATION,
    # Miscellaneous
    "misc": _C.MISCELLANEOUS,
    # Support
    "lifeSupport": _C.SUPPORT,
    "recycler": _C.SUPPORT,
    "gravity": _C.SUPPORT,
    # Power plant
    "reactor": _C.POWER_PLANT,
    # FTL
    "stardrive": _C.FTL_DRIVE,
    # Command
    "computer": _C.COMMAND,
    "cockpit": _C.COMMAND,
    "commandDeck": _C.COMMAND,
    # Every category label classifies as itself
    **{c.value: c for c in SystemDamageCategory},
})

_CATEGORY_INDEX: Mapping[SystemDamageCategory, int] = MappingProxyType(
    {c: i for i, c in enumerate(DAMAGE_CATEGORY_ORDER)}
)

# Weapon firepower classes, lightest (point defense) to super-heavy
FIREPOWER_ORDER: Mapping[str, int] = MappingProxyType({
    "Gd": 0,
    "S": 1,
    "L": 2,
    "M": 3,
    "H": 4,
    "SH": 5,
})

# Sort position for weapons with no or an unknown firepower class
UNKNOWN_FIREPOWER_ORDER = 99


def get_system_damage_category(system_type: str) -> SystemDamageCategory:
    """Classify a system label; unknown labels are miscellaneous."""
    return _SYSTEM_TYPE_CATEGORIES.get(system_type, SystemDamageCategory.MISCELLANEOUS)


def get_damage_category_order(category: SystemDamageCategory | str) -> int:
    """Hit order index of a category (0 = hit first)."""
    if not isinstance(category, SystemDamageCategory):
        category = get_system_damage_category(category)
    return _CATEGORY_INDEX[category]


def get_firepower_order(firepower: str) -> int:
    return FIREPOWER_ORDER.get(firepower, UNKNOWN_FIREPOWER_ORDER)


def damage_priority_key(system: ZoneSystemReference) -> tuple[int, int, int]:
    """Composite sort key: category, weapon firepower, hull points (desc)."""
    category = get_system_damage_category(system.system_type)
    if category == SystemDamageCategory.WEAPON:
        firepower = system.firepower_order
        if firepower is None:
            firepower = UNKNOWN_FIREPOWER_ORDER
    else:
        firepower = 0
    return (_CATEGORY_INDEX[category], firepower, -system.hull_points)


def sort_systems_by_damage_priority(
    systems: Iterable[ZoneSystemReference],
) -> list[ZoneSystemReference]:
    """Return systems in hit order without touching the input.

    ``sorted`` is stable, so full ties keep their original relative order.
    """
    return sorted(systems, key=damage_priority_key)
