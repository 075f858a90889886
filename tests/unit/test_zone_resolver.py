"""Unit tests for zone configuration resolution and empty zone creation."""

import logging

import pytest

from shipzones.core.types import ShipClass, ZoneCode
from shipzones.zones.resolver import (
    create_empty_zones,
    get_zone_config_for_hull,
    get_zone_count_for_hull,
    get_zone_limit_for_hull,
    lookup_zone_limit,
)


# ===================================================================
# get_zone_config_for_hull
# ===================================================================


class TestZoneConfigForHull:
    def test_medium_is_8_zones_d12(self, diagram_data, make_hull):
        config = get_zone_config_for_hull(make_hull(ship_class=ShipClass.MEDIUM), diagram_data)
        assert config.zone_count == 8
        assert config.hit_die == 12
        assert len(config.zones) == 8

    def test_light_is_6_zones_d8(self, diagram_data, make_hull):
        config = get_zone_config_for_hull(make_hull(ship_class="light", hull_points=80), diagram_data)
        assert config.ship_class == ShipClass.LIGHT
        assert config.zone_count == 6
        assert config.hit_die == 8

    def test_heavy_is_12_zones_d20(self, diagram_data, make_hull):
        config = get_zone_config_for_hull(make_hull(ship_class=ShipClass.HEAVY, hull_points=1200), diagram_data)
        assert config.zone_count == 12
        assert config.hit_die == 20

    def test_super_heavy_is_20_zones(self, diagram_data, make_hull):
        config = get_zone_config_for_hull(
            make_hull(ship_class=ShipClass.SUPER_HEAVY, hull_points=3200), diagram_data
        )
        assert config.zone_count == 20
        assert config.hit_die == 20

    @pytest.mark.parametrize(
        "ship_class", [ShipClass.LIGHT, ShipClass.MEDIUM, ShipClass.HEAVY, ShipClass.SUPER_HEAVY]
    )
    def test_zone_count_matches_zones_and_is_idempotent(self, diagram_data, make_hull, ship_class):
        hull = make_hull(ship_class=ship_class)
        first = get_zone_config_for_hull(hull, diagram_data)
        second = get_zone_config_for_hull(hull, diagram_data)
        assert len(first.zones) == first.zone_count
        assert first == second

    def test_zone_count_ignores_hull_points_for_large_classes(self, diagram_data, make_hull):
        small = get_zone_config_for_hull(make_hull(ship_class=ShipClass.LIGHT, hull_points=5), diagram_data)
        big = get_zone_config_for_hull(make_hull(ship_class=ShipClass.LIGHT, hull_points=500), diagram_data)
        assert small == big


class TestSmallCraftTiers:
    def test_15_hp_uses_2_zone_tier(self, diagram_data, make_hull):
        config = get_zone_config_for_hull(
            make_hull(ship_class=ShipClass.SMALL_CRAFT, hull_points=15), diagram_data
        )
        assert config.zone_count == 2
        assert config.hit_die == 6
        assert config.zones == (ZoneCode.F, ZoneCode.A)

    def test_20_hp_boundary_is_2_zone(self, diagram_data, make_hull):
        config = get_zone_config_for_hull(
            make_hull(ship_class=ShipClass.SMALL_CRAFT, hull_points=20), diagram_data
        )
        assert config.zone_count == 2

    def test_21_hp_is_4_zone(self, diagram_data, make_hull):
        config = get_zone_config_for_hull(
            make_hull(ship_class=ShipClass.SMALL_CRAFT, hull_points=21), diagram_data
        )
        assert config.zone_count == 4

    def test_45_hp_uses_4_zone_tier(self, diagram_data, make_hull):
        config = get_zone_config_for_hull(
            make_hull(ship_class=ShipClass.SMALL_CRAFT, hull_points=45), diagram_data
        )
        assert config.zone_count == 4
        assert config.hit_die == 8
        assert config.zones == (ZoneCode.F, ZoneCode.FC, ZoneCode.AC, ZoneCode.A)

    def test_threshold_ignores_tier_max_hull_points(self, table_dict, make_hull):
        from shipzones.data.tables import DamageDiagramData

        table_dict["zone_configurations"]["small-craft"]["2-zone"]["max_hull_points"] = 10
        data = DamageDiagramData.from_omegaconf(table_dict)
        for hp, expected in ((15, 2), (20, 2), (21, 4)):
            config = get_zone_config_for_hull(
                make_hull(ship_class=ShipClass.SMALL_CRAFT, hull_points=hp), data
            )
            assert config.zone_count == expected


# ===================================================================
# Zone limits / counts
# ===================================================================


class TestZoneLimits:
    def test_known_hull(self, diagram_data):
        assert get_zone_limit_for_hull("heavy-cruiser", diagram_data) == 96

    def test_small_craft_hull(self, diagram_data):
        assert get_zone_limit_for_hull("fighter", diagram_data) == 7

    def test_unknown_hull_defaults_to_100(self, diagram_data):
        assert get_zone_limit_for_hull("unknown-hull", diagram_data) == 100

    def test_unknown_hull_logs_warning(self, diagram_data, caplog):
        with caplog.at_level(logging.WARNING, logger="shipzones"):
            get_zone_limit_for_hull("custom-hull", diagram_data)
        assert "custom-hull" in caplog.text

    def test_lookup_flags_fallback(self, diagram_data):
        result = lookup_zone_limit("custom-hull", diagram_data)
        assert result.value == 100
        assert result.fallback_used is True
        assert "custom-hull" in result.note

    def test_lookup_known_hull_not_flagged(self, diagram_data):
        result = lookup_zone_limit("corvette", diagram_data)
        assert result.value == 22
        assert result.fallback_used is False
        assert result.note == ""

    def test_fallback_limit_comes_from_tables(self, table_dict):
        from shipzones.data.tables import DamageDiagramData

        table_dict["fallbacks"] = {"zone_limit": 55}
        data = DamageDiagramData.from_omegaconf(table_dict)
        assert get_zone_limit_for_hull("nope", data) == 55


class TestZoneCounts:
    def test_known_hulls(self, diagram_data):
        assert get_zone_count_for_hull("corvette", diagram_data) == 6
        assert get_zone_count_for_hull("heavy-cruiser", diagram_data) == 8

    def test_unknown_defaults_to_6(self, diagram_data):
        assert get_zone_count_for_hull("unknown", diagram_data) == 6


# ===================================================================
# create_empty_zones
# ===================================================================


class TestCreateEmptyZones:
    def test_medium_ship(self, diagram_data, make_hull):
        zones = create_empty_zones(make_hull(ship_class=ShipClass.MEDIUM, id="heavy-cruiser"), diagram_data)
        assert len(zones) == 8
        assert zones[0].code == ZoneCode.F
        assert zones[0].systems == ()
        assert zones[0].total_hull_points == 0
        assert zones[0].max_hull_points == 96

    def test_small_craft(self, diagram_data, make_hull):
        zones = create_empty_zones(
            make_hull(ship_class=ShipClass.SMALL_CRAFT, hull_points=10, id="fighter"), diagram_data
        )
        assert len(zones) == 2
        assert zones[0].max_hull_points == 7

    def test_light_cruiser_six_zones_of_40(self, diagram_data, make_hull):
        zones = create_empty_zones(make_hull(ship_class=ShipClass.LIGHT, id="light-cruiser"), diagram_data)
        assert len(zones) == 6
        assert all(z.max_hull_points == 40 for z in zones)

    def test_codes_match_config(self, diagram_data, make_hull):
        hull = make_hull(ship_class=ShipClass.HEAVY, id="battleship", hull_points=1200)
        zones = create_empty_zones(hull, diagram_data)
        config = get_zone_config_for_hull(hull, diagram_data)
        assert tuple(z.code for z in zones) == config.zones
        assert all(z.total_hull_points == 0 for z in zones)
        assert all(z.max_hull_points == get_zone_limit_for_hull(hull.id, diagram_data) for z in zones)

    def test_unknown_hull_uses_default_limit(self, diagram_data, make_hull):
        zones = create_empty_zones(make_hull(ship_class=ShipClass.LIGHT, id="homebrew"), diagram_data)
        assert all(z.max_hull_points == 100 for z in zones)

    def test_idempotent(self, diagram_data, make_hull):
        hull = make_hull()
        assert create_empty_zones(hull, diagram_data) == create_empty_zones(hull, diagram_data)
