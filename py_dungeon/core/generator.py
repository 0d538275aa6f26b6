"""
Dungeon generation pipeline.

Phases run in a fixed order and share one random stream:

1. Room placement (rooms are written to the grid)
2. Delaunay triangulation of the room centers
3. Hallway selection: minimum spanning tree plus random extra edges
4. Corridor pathfinding and carving
"""

from dataclasses import asdict, dataclass, field
from typing import List, Optional, Tuple, Union

import structlog

from ..config import settings
from .alea_prng import AleaPRNG
from .delaunay import TriangulationResult, triangulate
from .geometry import Edge, Vertex
from .grid import CellType, Grid2D
from .hallways import Hallway, carve_hallways, select_hallway_edges
from .rooms import Room, RoomPlacementFailed, place_rooms

logger = structlog.get_logger()


@dataclass
class DungeonConfig:
    """Parameters of a single generation run."""
    width: int = 40
    height: int = 40
    room_count: int = 10
    room_min_size: Tuple[int, int] = (2, 2)
    room_max_size: Tuple[int, int] = (6, 6)
    seed: Union[str, int] = 0
    hallway_probability: float = 0.125
    room_padding: int = 1
    max_placement_attempts: int = 10000

    @classmethod
    def from_settings(cls, **overrides) -> "DungeonConfig":
        """Build a config from the environment defaults, then apply overrides."""
        values = dict(
            width=settings.default_level_width,
            height=settings.default_level_height,
            room_count=settings.default_room_count,
            room_min_size=(settings.default_room_min_size, settings.default_room_min_size),
            room_max_size=(settings.default_room_max_size, settings.default_room_max_size),
            hallway_probability=settings.hallway_retention_probability,
            room_padding=settings.room_padding,
            max_placement_attempts=settings.max_placement_attempts,
        )
        values.update(overrides)
        return cls(**values)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Level size must be positive, got {self.width}x{self.height}")
        if self.room_count < 0:
            raise ValueError(f"room_count must not be negative, got {self.room_count}")
        if any(lo > hi for lo, hi in zip(self.room_min_size, self.room_max_size)):
            raise ValueError(
                f"room_min_size {self.room_min_size} exceeds room_max_size {self.room_max_size}"
            )
        if min(self.room_min_size) <= 0:
            raise ValueError(f"Room sizes must be positive, got {self.room_min_size}")
        if not 0.0 <= self.hallway_probability <= 1.0:
            raise ValueError(f"hallway_probability must be within [0, 1], got {self.hallway_probability}")
        if self.room_padding < 0:
            raise ValueError(f"room_padding must not be negative, got {self.room_padding}")
        if self.max_placement_attempts <= 0:
            raise ValueError("max_placement_attempts must be positive")

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Dungeon:
    """A generated level and the intermediate structures that produced it."""
    config: DungeonConfig
    grid: Grid2D
    rooms: List[Room]
    triangulation: Optional[TriangulationResult]
    mst_edges: List[Edge] = field(default_factory=list)
    hallway_edges: List[Edge] = field(default_factory=list)
    hallways: List[Hallway] = field(default_factory=list)


def room_vertices(rooms: List[Room]) -> List[Vertex]:
    """One vertex per room at its center, carrying the room as payload."""
    return [Vertex(*room.center, item=room) for room in rooms]


class DungeonGenerator:
    """Runs the generation phases for one configuration."""

    def __init__(self, config: Optional[DungeonConfig] = None):
        self.config = config or DungeonConfig.from_settings()
        self.config.validate()

    def generate(self) -> Dungeon:
        """
        Generate a dungeon.

        Raises:
            RoomPlacementFailed: if the rooms do not fit within the attempt budget
            DegenerateGeometryError: if the room centers cannot be triangulated
        """
        config = self.config
        logger.info("Generating dungeon",
                    width=config.width, height=config.height,
                    room_count=config.room_count, seed=config.seed)

        rng = AleaPRNG(config.seed)
        grid = Grid2D(config.width, config.height)

        placement = place_rooms(
            rng, config.width, config.height, config.room_count,
            config.room_min_size, config.room_max_size,
            padding=config.room_padding,
            max_attempts=config.max_placement_attempts,
        )
        if not placement.complete:
            raise RoomPlacementFailed(placement)

        rooms = placement.rooms
        for room in rooms:
            grid.fill_rect(room, CellType.ROOM)

        dungeon = Dungeon(config=config, grid=grid, rooms=rooms, triangulation=None)
        if not rooms:
            return dungeon

        dungeon.triangulation = triangulate(room_vertices(rooms))

        selection = select_hallway_edges(dungeon.triangulation.edges, rng,
                                         config.hallway_probability)
        dungeon.mst_edges = selection.mst
        dungeon.hallway_edges = selection.selected
        dungeon.hallways = carve_hallways(grid, selection.selected)

        logger.info("Dungeon generated",
                    rooms=len(rooms),
                    triangulation_edges=len(dungeon.triangulation.edges),
                    hallways=len(dungeon.hallways),
                    random_draws=rng.call_count)
        return dungeon


def generate_dungeon(config: Optional[DungeonConfig] = None, **overrides) -> Dungeon:
    """Generate a dungeon from ``config`` or from the settings plus ``overrides``."""
    if config is None:
        config = DungeonConfig.from_settings(**overrides)
    return DungeonGenerator(config).generate()
