"""
Room rectangles and rejection-sampling room placement.

Placement draws a random position and size per attempt and rejects any
candidate that overlaps an accepted room (after padding) or leaves the level.
Attempts are bounded so an unsatisfiable layout terminates with a partial
result instead of looping forever.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import structlog

from .alea_prng import AleaPRNG

logger = structlog.get_logger()


@dataclass(frozen=True)
class Room:
    """Axis-aligned integer rectangle; ``x_max``/``y_max`` are exclusive."""
    x: int
    y: int
    width: int
    height: int

    @property
    def x_max(self) -> int:
        return self.x + self.width

    @property
    def y_max(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def anchor(self) -> Tuple[int, int]:
        """Cell that hallways are routed to and from."""
        return (self.x, self.y)

    def buffered(self, padding: int) -> "Room":
        """Return this room grown by ``padding`` cells on every side."""
        return Room(self.x - padding, self.y - padding,
                    self.width + 2 * padding, self.height + 2 * padding)

    def intersects(self, other: "Room") -> bool:
        return not (self.x >= other.x_max or self.x_max <= other.x
                    or self.y >= other.y_max or self.y_max <= other.y)

    def positions(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y, self.y_max):
            for x in range(self.x, self.x_max):
                yield (x, y)


@dataclass
class RoomPlacement:
    """Result of a bounded placement run."""
    rooms: List[Room] = field(default_factory=list)
    attempts: int = 0
    requested: int = 0

    @property
    def complete(self) -> bool:
        return len(self.rooms) >= self.requested


class RoomPlacementFailed(RuntimeError):
    """Raised when the requested number of rooms could not be placed."""

    def __init__(self, placement: RoomPlacement):
        self.placement = placement
        super().__init__(
            f"Placed {len(placement.rooms)} of {placement.requested} rooms "
            f"after {placement.attempts} attempts"
        )


def place_rooms(rng: AleaPRNG, level_width: int, level_height: int, room_count: int,
                min_size: Tuple[int, int], max_size: Tuple[int, int],
                padding: int = 1, max_attempts: int = 10000) -> RoomPlacement:
    """
    Place up to ``room_count`` non-overlapping rooms inside the level.

    Each attempt consumes four values from ``rng``: x, y, width, height.

    Args:
        rng: Random stream shared with the rest of the generation run
        level_width, level_height: Level bounds in cells
        room_count: Number of rooms wanted
        min_size, max_size: Inclusive (width, height) size limits
        padding: Free cells required around every room
        max_attempts: Upper bound on sampled candidates

    Returns:
        RoomPlacement; check ``complete`` to see whether every room fit
    """
    if min_size[0] > max_size[0] or min_size[1] > max_size[1]:
        raise ValueError(f"min_size {min_size} exceeds max_size {max_size}")
    if min_size[0] <= 0 or min_size[1] <= 0:
        raise ValueError(f"Room sizes must be positive, got {min_size}")

    placement = RoomPlacement(requested=room_count)

    while len(placement.rooms) < room_count and placement.attempts < max_attempts:
        placement.attempts += 1

        x = rng.next_int(0, level_width)
        y = rng.next_int(0, level_height)
        width = rng.next_int(min_size[0], max_size[0] + 1)
        height = rng.next_int(min_size[1], max_size[1] + 1)
        candidate = Room(x, y, width, height)

        if candidate.x_max >= level_width or candidate.y_max >= level_height:
            continue

        buffer = candidate.buffered(padding)
        if any(room.intersects(buffer) for room in placement.rooms):
            continue

        placement.rooms.append(candidate)

    if placement.complete:
        logger.info("Rooms placed", rooms=len(placement.rooms), attempts=placement.attempts)
    else:
        logger.warning("Room placement exhausted attempts",
                       placed=len(placement.rooms),
                       requested=room_count,
                       attempts=placement.attempts)
    return placement
