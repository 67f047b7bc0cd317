#!/usr/bin/env python3
"""
Plant Paladin

Nags about overdue houseplants and records when they were watered.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from plant_paladin import (
    ensure_config_dir,
    format_nag_report,
    get_config_dir,
    get_overdue_plants,
    load_config,
    load_state,
    save_state,
    sync_state_with_config,
    water_overdue_plants,
    water_plants,
)

logger = logging.getLogger(__name__)


def cmd_nag(config_dir: Path, now: datetime | None = None) -> list[str]:
    """Print every plant that needs watering. Never writes state."""
    if now is None:
        now = datetime.now()

    config = load_config(config_dir)
    state = load_state(config_dir)
    sync_state_with_config(config, state)

    lines = format_nag_report(get_overdue_plants(config, state, now))
    for line in lines:
        print(line)
    return lines


def cmd_water(
    config_dir: Path,
    plants: list[str],
    water_all: bool = False,
    now: datetime | None = None,
) -> list[str]:
    """Mark plants as watered and persist the state."""
    if now is None:
        now = datetime.now()

    config = load_config(config_dir)
    state = load_state(config_dir)
    sync_state_with_config(config, state)

    if water_all:
        watered = water_overdue_plants(config, state, now)
    else:
        watered = water_plants(config, state, plants, now)

    save_state(config_dir, state)
    return watered


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plant-paladin",
        description="Keeps track of when your houseplants were last watered.",
    )
    parser.add_argument(
        "--config-dir",
        help="directory holding config.toml and state.toml (default: ~/.config/plant-paladin)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log what is happening")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("nag", help="nags you about unwatered houseplants")

    water = subparsers.add_parser("water", help="marks plants as being watered")
    water.add_argument("plants", nargs="*", help="plant names")
    water.add_argument(
        "-a",
        "--all",
        dest="water_all",
        action="store_true",
        help="mark all plants as being watered, which needed to be watered",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "water" and not args.water_all and not args.plants:
        parser.error("water needs at least one plant name, or --all")

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config_dir = get_config_dir(args.config_dir)
        ensure_config_dir(config_dir)
    except (RuntimeError, OSError) as e:
        logger.error(f"Unable to set up config directory: {e}")
        return 1

    try:
        if args.command == "nag":
            cmd_nag(config_dir)
        else:
            cmd_water(config_dir, args.plants, water_all=args.water_all)
    except OSError as e:
        logger.error(f"I/O error on {e.filename or config_dir}: {e.strerror or e}")
        return 1
    except ValueError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
