"""A* search over a rectangular cell grid."""

import heapq
import math
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

import structlog

logger = structlog.get_logger()

Cell = Tuple[int, int]

# Fixed neighbour order: left, right, down, up.
NEIGHBOURS: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class PathCost(NamedTuple):
    """Incremental cost of stepping into a cell, and whether the step is allowed."""
    cost: float
    traversable: bool = True


class PathResult(NamedTuple):
    """Cells from start to goal inclusive, with the summed step cost."""
    cells: List[Cell]
    cost: float


CostFunction = Callable[[Cell, Cell], PathCost]
Heuristic = Callable[[Cell, Cell], float]


def euclidean(cell: Cell, goal: Cell) -> float:
    return math.hypot(cell[0] - goal[0], cell[1] - goal[1])


class GridPathfinder:
    """
    Best-first (A*) search on a width x height grid.

    The caller supplies the per-step cost function; the heuristic must not
    overestimate the remaining cost for the returned path to be optimal.
    Frontier ties are broken by insertion order.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell[0] < self.width and 0 <= cell[1] < self.height

    def find_path(self, start: Cell, goal: Cell, cost_fn: CostFunction,
                  heuristic: Optional[Heuristic] = None) -> Optional[PathResult]:
        """
        Find the cheapest path from ``start`` to ``goal``.

        Returns:
            PathResult, or None when the goal cannot be reached
        """
        for cell in (start, goal):
            if not self.in_bounds(cell):
                raise IndexError(f"Cell {cell} out of bounds for grid {self.width}x{self.height}")

        heuristic = heuristic or euclidean
        start, goal = tuple(start), tuple(goal)

        costs: Dict[Cell, float] = {start: 0.0}
        previous: Dict[Cell, Cell] = {}
        closed = set()
        counter = 0
        frontier: List[Tuple[float, int, Cell]] = [(heuristic(start, goal), counter, start)]

        while frontier:
            _, _, current = heapq.heappop(frontier)
            if current in closed:
                continue
            if current == goal:
                return PathResult(self._reconstruct(previous, goal), costs[goal])
            closed.add(current)

            for dx, dy in NEIGHBOURS:
                neighbour = (current[0] + dx, current[1] + dy)
                if not self.in_bounds(neighbour) or neighbour in closed:
                    continue

                step = cost_fn(current, neighbour)
                if not step.traversable:
                    continue

                new_cost = costs[current] + step.cost
                if new_cost < costs.get(neighbour, math.inf):
                    costs[neighbour] = new_cost
                    previous[neighbour] = current
                    counter += 1
                    heapq.heappush(frontier, (new_cost + heuristic(neighbour, goal), counter, neighbour))

        logger.debug("No path found", start=start, goal=goal, explored=len(closed))
        return None

    @staticmethod
    def _reconstruct(previous: Dict[Cell, Cell], goal: Cell) -> List[Cell]:
        path = [goal]
        while path[-1] in previous:
            path.append(previous[path[-1]])
        path.reverse()
        return path
