"""shipzones CLI entry point.

Usage:
    python -m shipzones --ship-class light --hull-points 160 --hull-id light-cruiser
    python -m shipzones -k medium -p 400 -i heavy-cruiser --json
    python -m shipzones -k heavy -p 1200 -i battleship --directions forward high
    python -m shipzones --config custom.yaml --data tables.yaml ...
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from shipzones.core.config import ShipZonesConfig
from shipzones.core.types import ZONE_NAMES, HullDescriptor, ShipClass
from shipzones.utils.logging import setup_logging
from shipzones.zones import (
    DiagramConfig,
    create_default_hit_location_chart,
    create_empty_zones,
    get_zone_config_for_hull,
    lookup_zone_limit,
    zone_hit_probabilities,
)

logger = logging.getLogger("shipzones.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shipzones",
        description="Damage zone layout and hit location chart for a starship hull",
    )
    parser.add_argument(
        "--config",
        "-c",
        default="config/default.yaml",
        help="Path to configuration YAML file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--data",
        "-d",
        default=None,
        help="Override damage diagram data file (default: bundled tables)",
    )
    parser.add_argument(
        "--ship-class",
        "-k",
        required=True,
        choices=[c.value for c in ShipClass],
        help="Ship class of the hull",
    )
    parser.add_argument(
        "--hull-points",
        "-p",
        type=int,
        required=True,
        help="Hull points of the hull (selects the small craft zone tier)",
    )
    parser.add_argument(
        "--hull-id",
        "-i",
        required=True,
        help="Hull type id used for the per-zone HP limit",
    )
    parser.add_argument(
        "--directions",
        nargs="+",
        default=None,
        help="Attack directions to chart (default: from config)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the zones and chart as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )
    parser.add_argument(
        "--validate-config",
        action="store_true",
        default=False,
        help="Validate config against Pydantic schema before starting",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path to log file (default: no file logging)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Output logs as JSON instead of human-readable",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load config
    config = ShipZonesConfig(args.config)
    try:
        cfg = config.load(validate=args.validate_config)
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: Config validation failed:\n{e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.data is not None:
        config.override("shipzones.data.path", args.data)
    if args.directions is not None:
        config.override("shipzones.chart.directions", args.directions)

    # Setup logging
    log_level = args.log_level or cfg.shipzones.system.get("log_level", "INFO")
    log_file = args.log_file or cfg.shipzones.system.get("log_file", None)
    log_json = args.log_json or cfg.shipzones.system.get("log_json", False)
    setup_logging(log_level, log_file=log_file, log_json=log_json)

    diagram_cfg = DiagramConfig.from_omegaconf(config.cfg.shipzones)
    try:
        data = diagram_cfg.load_data()
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: Damage diagram data is invalid:\n{e}", file=sys.stderr)
        return 1

    hull = HullDescriptor(
        id=args.hull_id,
        ship_class=ShipClass(args.ship_class),
        hull_points=args.hull_points,
    )
    zone_config = get_zone_config_for_hull(hull, data)
    limit = lookup_zone_limit(hull.id, data)
    zones = create_empty_zones(hull, data)
    chart = create_default_hit_location_chart(
        zone_config.zones,
        zone_config.hit_die,
        data,
        directions=diagram_cfg.directions,
    )
    logger.debug("Resolved %d zones, d%d, generated chart=%s", len(zones), chart.hit_die, chart.generated)

    if args.json:
        print(json.dumps({
            "hull": {
                "id": hull.id,
                "ship_class": hull.ship_class.value,
                "hull_points": hull.hull_points,
            },
            "zone_limit": limit.value,
            "zone_limit_fallback": limit.fallback_used,
            "zones": [z.to_dict() for z in zones],
            "hit_location_chart": chart.to_dict(),
        }, indent=2))
        return 0

    print(f"Hull {hull.id} ({hull.ship_class.value}, {hull.hull_points} HP)")
    note = " (default, no table entry)" if limit.fallback_used else ""
    print(f"Zones: {zone_config.zone_count}, zone limit {limit.value} HP{note}")
    print(f"Hit die: d{chart.hit_die}{' (generated chart)' if chart.generated else ''}")
    for col in chart.columns:
        probs = zone_hit_probabilities(chart, col.direction)
        print(f"\n  {col.direction.value}:")
        for entry in col.entries:
            rolls = (
                f"{entry.min_roll}"
                if entry.min_roll == entry.max_roll
                else f"{entry.min_roll}-{entry.max_roll}"
            )
            print(
                f"    {rolls:>5}  {entry.zone.value:<4} {ZONE_NAMES[entry.zone]:<26}"
                f" {probs[entry.zone] * 100:5.1f}%"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
