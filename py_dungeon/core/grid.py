"""Bounds-checked cell grid for a dungeon level."""

from enum import IntEnum
from typing import TYPE_CHECKING, Iterator, List, Tuple

import numpy as np
import structlog

if TYPE_CHECKING:
    from .rooms import Room

logger = structlog.get_logger()


class CellType(IntEnum):
    """Cell classification stored in the grid."""
    NONE = 0
    ROOM = 1
    HALLWAY = 2


class Grid2D:
    """
    Mapping from integer (x, y) coordinates to a CellType.

    Values live in a uint8 array indexed ``[y, x]``; ``grid[x, y]`` reads and
    writes a single cell and raises IndexError outside the level.
    """

    def __init__(self, width: int, height: int, default: CellType = CellType.NONE):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._cells = np.full((self.height, self.width), int(default), dtype=np.uint8)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the underlying ``[y, x]`` array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) out of bounds for grid {self.width}x{self.height}"
            )

    def __getitem__(self, pos: Tuple[int, int]) -> CellType:
        x, y = pos
        self._check(x, y)
        return CellType(int(self._cells[y, x]))

    def __setitem__(self, pos: Tuple[int, int], value: CellType) -> None:
        x, y = pos
        self._check(x, y)
        self._cells[y, x] = int(CellType(value))

    def cells_within(self, room: "Room") -> Iterator[Tuple[int, int]]:
        """Yield every in-bounds cell covered by ``room``."""
        for y in range(max(room.y, 0), min(room.y_max, self.height)):
            for x in range(max(room.x, 0), min(room.x_max, self.width)):
                yield (x, y)

    def fill_rect(self, room: "Room", value: CellType) -> None:
        """Set every in-bounds cell of ``room`` to ``value``."""
        x0, x1 = max(room.x, 0), min(room.x_max, self.width)
        y0, y1 = max(room.y, 0), min(room.y_max, self.height)
        if x0 < x1 and y0 < y1:
            self._cells[y0:y1, x0:x1] = int(CellType(value))

    def count(self, value: CellType) -> int:
        return int(np.count_nonzero(self._cells == int(value)))

    def to_rows(self) -> List[List[int]]:
        """Rows of integer cell values, row ``y`` first."""
        return self._cells.tolist()

    def copy(self) -> "Grid2D":
        clone = Grid2D(self.width, self.height)
        clone._cells = self._cells.copy()
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._cells, other._cells)

