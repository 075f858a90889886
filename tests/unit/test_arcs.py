"""Unit tests for weapon arc / zone placement rules."""

from shipzones.core.types import FiringArc, ZoneCode
from shipzones.zones.arcs import ARC_ZONES, can_weapon_be_in_zone, compatible_zones


class TestCanWeaponBeInZone:
    def test_forward_arc_in_forward_zones(self):
        for zone in ("F", "FC", "FP", "FS"):
            assert can_weapon_be_in_zone(["forward"], zone) is True

    def test_forward_arc_not_in_port(self):
        assert can_weapon_be_in_zone(["forward"], "P") is False

    def test_forward_arc_not_aft(self):
        assert can_weapon_be_in_zone(["forward"], "A") is False
        assert can_weapon_be_in_zone(["forward"], "AC") is False

    def test_aft_arc(self):
        assert can_weapon_be_in_zone(["aft"], ZoneCode.A) is True
        assert can_weapon_be_in_zone(["aft"], ZoneCode.AC) is True

    def test_port_and_starboard(self):
        assert can_weapon_be_in_zone(["port"], "AP") is True
        assert can_weapon_be_in_zone(["starboard"], "FS") is True
        assert can_weapon_be_in_zone(["port"], "S") is False
        assert can_weapon_be_in_zone(["starboard"], "P") is False

    def test_any_arc_is_enough(self):
        assert can_weapon_be_in_zone(["forward", "port"], "P") is True
        assert can_weapon_be_in_zone(["forward", "aft"], "F") is True
        assert can_weapon_be_in_zone(["forward", "aft"], "A") is True

    def test_zero_arcs_use_centerline(self):
        assert can_weapon_be_in_zone(["zero-port"], "FC") is True
        assert can_weapon_be_in_zone(["zero-starboard"], "AC") is True
        assert can_weapon_be_in_zone(["zero-port"], "P") is False

    def test_high_low_allow_broadsides(self):
        assert can_weapon_be_in_zone(["high"], "P") is True
        assert can_weapon_be_in_zone(["low"], "S") is True
        assert can_weapon_be_in_zone(["low"], "FP") is False

    def test_enum_arcs(self):
        assert can_weapon_be_in_zone([FiringArc.STARBOARD], ZoneCode.SC) is True

    def test_empty_arcs(self):
        assert can_weapon_be_in_zone([], "F") is False

    def test_unknown_arc_and_zone(self):
        assert can_weapon_be_in_zone(["sideways"], "F") is False
        assert can_weapon_be_in_zone(["forward"], "XX") is False

    def test_every_arc_has_a_table_row(self):
        assert set(ARC_ZONES) == {a.value for a in FiringArc}


class TestCompatibleZones:
    def test_filters_in_order(self):
        zones = ["F", "FC", "P", "S", "AC", "A"]
        assert compatible_zones(["port", "aft"], zones) == [ZoneCode.P, ZoneCode.AC, ZoneCode.A]

    def test_none_compatible(self):
        assert compatible_zones(["starboard"], ["F", "A"]) == []
