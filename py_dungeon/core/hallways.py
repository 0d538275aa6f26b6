"""
Hallway selection and corridor carving.

The minimum spanning tree of the triangulation keeps every room reachable;
a few extra edges are kept at random to add loops. Each selected edge is then
routed with A* over the current grid and written back as hallway cells, so
later corridors see (and prefer to avoid) earlier ones.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import structlog

from .alea_prng import AleaPRNG
from .geometry import Edge
from .grid import CellType, Grid2D
from .pathfinder import Cell, CostFunction, GridPathfinder, PathCost
from .prim import minimum_spanning_tree

logger = structlog.get_logger()

HALLWAY_COSTS = {
    CellType.NONE: 1.0,
    CellType.ROOM: 10.0,
    CellType.HALLWAY: 15.0,
}


@dataclass
class HallwaySelection:
    mst: List[Edge]
    selected: List[Edge]  # mst edges first, then retained extras


@dataclass
class Hallway:
    """A carved corridor between two rooms."""
    edge: Edge
    cells: List[Cell]
    cost: float


def select_hallway_edges(edges: Sequence[Edge], rng: AleaPRNG,
                         probability: float = 0.125) -> HallwaySelection:
    """
    Pick the edges that become hallways.

    Every minimum spanning tree edge is kept. Each remaining edge, in
    triangulation order, draws one value from ``rng`` and is kept when the
    draw is below ``probability``.
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must be within [0, 1], got {probability}")
    if not edges:
        return HallwaySelection(mst=[], selected=[])

    mst = minimum_spanning_tree(edges, edges[0].u)
    in_tree = {edge.key for edge in mst}

    selected = list(mst)
    for edge in edges:
        if edge.key in in_tree:
            continue
        if rng.random() < probability:
            selected.append(edge)

    logger.info("Hallway edges selected",
                candidates=len(edges), mst=len(mst), selected=len(selected))
    return HallwaySelection(mst=mst, selected=selected)


def hallway_cost(grid: Grid2D) -> CostFunction:
    """Step cost favouring empty cells over rooms and existing hallways."""
    def cost(_from: Cell, to: Cell) -> PathCost:
        return PathCost(HALLWAY_COSTS[grid[to]], True)
    return cost


def materialize_path(grid: Grid2D, cells: Sequence[Cell]) -> None:
    for cell in cells:
        grid[cell] = CellType.HALLWAY


def carve_hallways(grid: Grid2D, edges: Sequence[Edge],
                   pathfinder: Optional[GridPathfinder] = None) -> List[Hallway]:
    """
    Route and carve a corridor between the rooms of every edge.

    Edges without a path are skipped; the rooms simply stay unconnected by
    that corridor.
    """
    pathfinder = pathfinder or GridPathfinder(grid.width, grid.height)
    cost_fn = hallway_cost(grid)
    hallways = []

    for edge in edges:
        start = edge.u.item.anchor
        goal = edge.v.item.anchor
        path = pathfinder.find_path(start, goal, cost_fn)
        if path is None:
            logger.debug("Hallway skipped, no path", start=start, goal=goal)
            continue
        materialize_path(grid, path.cells)
        hallways.append(Hallway(edge=edge, cells=path.cells, cost=path.cost))

    logger.info("Hallways carved", requested=len(edges), carved=len(hallways),
                hallway_cells=grid.count(CellType.HALLWAY))
    return hallways
