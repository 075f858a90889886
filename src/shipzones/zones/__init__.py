"""Damage zone allocation: zone layouts, hit order and hit location charts.

Resolves a hull's damage zone topology, classifies and orders the systems
placed in each zone, builds per-direction hit location charts and validates
zone assignments. Every function is pure; table data is passed in explicitly.
"""

from shipzones.zones.resolver import (
    create_empty_zones,
    get_zone_config_for_hull,
    get_zone_count_for_hull,
    get_zone_limit_for_hull,
    lookup_zone_count,
    lookup_zone_limit,
)
from shipzones.zones.classifier import (
    FIREPOWER_ORDER,
    get_damage_category_order,
    get_firepower_order,
    get_system_damage_category,
    sort_systems_by_damage_priority,
)
from shipzones.zones.arcs import (
    ARC_ZONES,
    can_weapon_be_in_zone,
    compatible_zones,
)
from shipzones.zones.hit_location import (
    create_default_hit_location_chart,
    hit_location_table_key,
    reorder_zones_for_direction,
    resolve_hit_zone,
    validate_hit_location_chart,
    zone_hit_probabilities,
)
from shipzones.zones.validation import (
    build_damage_diagram,
    calculate_damage_diagram_stats,
    is_damage_diagram_complete,
    validate_damage_diagram,
    validate_zone,
)
from shipzones.zones.config import DiagramConfig
from shipzones.zones.assignment import (
    assign_system,
    auto_assign,
    clear_all_zones,
    clear_zone,
    counter_id_generator,
    find_unassigned_systems,
    move_system_down,
    move_system_up,
    remove_installed_system,
    remove_system,
    uuid_id_generator,
)

__all__ = [
    "ARC_ZONES",
    "DiagramConfig",
    "FIREPOWER_ORDER",
    "assign_system",
    "auto_assign",
    "build_damage_diagram",
    "calculate_damage_diagram_stats",
    "can_weapon_be_in_zone",
    "clear_all_zones",
    "clear_zone",
    "compatible_zones",
    "counter_id_generator",
    "create_default_hit_location_chart",
    "create_empty_zones",
    "find_unassigned_systems",
    "get_damage_category_order",
    "get_firepower_order",
    "get_system_damage_category",
    "get_zone_config_for_hull",
    "get_zone_count_for_hull",
    "get_zone_limit_for_hull",
    "hit_location_table_key",
    "is_damage_diagram_complete",
    "lookup_zone_count",
    "lookup_zone_limit",
    "move_system_down",
    "move_system_up",
    "remove_installed_system",
    "remove_system",
    "reorder_zones_for_direction",
    "resolve_hit_zone",
    "sort_systems_by_damage_priority",
    "uuid_id_generator",
    "validate_damage_diagram",
    "validate_hit_location_chart",
    "validate_zone",
    "zone_hit_probabilities",
]
