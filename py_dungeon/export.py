"""Export generated dungeons as plain data."""

import json
from pathlib import Path
from typing import Dict, List, Union

import structlog

from .core.generator import Dungeon
from .core.geometry import Edge

logger = structlog.get_logger()


def _edge_to_dict(edge: Edge) -> Dict:
    return {
        "u": list(edge.u.position),
        "v": list(edge.v.position),
        "length": edge.length,
    }


def dungeon_to_dict(dungeon: Dungeon) -> Dict:
    """Convert a dungeon into JSON-serialisable primitives."""
    triangulation_edges: List[Edge] = dungeon.triangulation.edges if dungeon.triangulation else []
    return {
        "config": dungeon.config.to_dict(),
        "width": dungeon.grid.width,
        "height": dungeon.grid.height,
        "grid": dungeon.grid.to_rows(),
        "rooms": [
            {"x": r.x, "y": r.y, "width": r.width, "height": r.height}
            for r in dungeon.rooms
        ],
        "triangulation_edges": [_edge_to_dict(e) for e in triangulation_edges],
        "mst_edges": [_edge_to_dict(e) for e in dungeon.mst_edges],
        "hallway_edges": [_edge_to_dict(e) for e in dungeon.hallway_edges],
        "hallways": [
            {"cells": [list(c) for c in h.cells], "cost": h.cost}
            for h in dungeon.hallways
        ],
    }


def save_dungeon_json(dungeon: Dungeon, path: Union[str, Path]) -> Path:
    """Write a dungeon to ``path`` as JSON and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(dungeon_to_dict(dungeon), f)
    logger.info("Dungeon exported", path=str(path))
    return path
