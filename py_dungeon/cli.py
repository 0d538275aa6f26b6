#!/usr/bin/env python3
"""
Generate a dungeon from the command line.

Usage:
    py-dungeon --width 60 --height 40 --rooms 12 --seed demo --output dungeon.json
"""

import argparse
import sys
from typing import List, Optional

import structlog

from .config import settings
from .core.generator import DungeonConfig, generate_dungeon
from .core.geometry import DegenerateGeometryError
from .core.grid import CellType
from .core.rooms import RoomPlacementFailed
from .export import save_dungeon_json
from .logging_config import configure_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Procedural dungeon generator")
    parser.add_argument("--width", type=int, default=settings.default_level_width,
                        help="Level width in cells")
    parser.add_argument("--height", type=int, default=settings.default_level_height,
                        help="Level height in cells")
    parser.add_argument("--rooms", type=int, default=settings.default_room_count,
                        help="Number of rooms to place")
    parser.add_argument("--min-size", type=int, nargs=2, metavar=("W", "H"),
                        default=[settings.default_room_min_size] * 2,
                        help="Minimum room size")
    parser.add_argument("--max-size", type=int, nargs=2, metavar=("W", "H"),
                        default=[settings.default_room_max_size] * 2,
                        help="Maximum room size")
    parser.add_argument("--seed", default="0", help="Random seed")
    parser.add_argument("--probability", type=float,
                        default=settings.hallway_retention_probability,
                        help="Chance of keeping each non-tree edge as a hallway")
    parser.add_argument("--output", default=None, help="Write the dungeon as JSON to this path")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    parser.add_argument("--log-format", default="plain", choices=["plain", "json"],
                        help="Log output format")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    try:
        config = DungeonConfig.from_settings(
            width=args.width,
            height=args.height,
            room_count=args.rooms,
            room_min_size=tuple(args.min_size),
            room_max_size=tuple(args.max_size),
            seed=args.seed,
            hallway_probability=args.probability,
        )
        dungeon = generate_dungeon(config)
    except ValueError as e:
        # DegenerateGeometryError is a ValueError too
        kind = "degenerate_geometry" if isinstance(e, DegenerateGeometryError) else "invalid_config"
        logger.error("Generation failed", reason=kind, error=str(e))
        return 1
    except RoomPlacementFailed as e:
        logger.error("Generation failed", reason="room_placement",
                     placed=len(e.placement.rooms), requested=e.placement.requested)
        return 2

    logger.info("Dungeon summary",
                rooms=len(dungeon.rooms),
                hallways=len(dungeon.hallways),
                room_cells=dungeon.grid.count(CellType.ROOM),
                hallway_cells=dungeon.grid.count(CellType.HALLWAY))

    if args.output:
        save_dungeon_json(dungeon, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
