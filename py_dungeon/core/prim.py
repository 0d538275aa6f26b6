"""Prim's minimum spanning tree over triangulation edges."""

import heapq
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import structlog

from .geometry import Edge, Vertex

logger = structlog.get_logger()


def minimum_spanning_tree(edges: Sequence[Edge], start: Vertex,
                          weight: Optional[Callable[[Edge], float]] = None) -> List[Edge]:
    """
    Grow a spanning tree from ``start`` by repeatedly taking the cheapest
    fringe edge.

    Ties between equal weights go to the edge that appears first in
    ``edges``, so the same input always yields the same tree. Vertices not
    connected to ``start`` are left out.

    Args:
        edges: Undirected edges of the graph
        start: Root vertex
        weight: Edge weight function, Euclidean length by default

    Returns:
        Tree edges in the order they were selected
    """
    weight = weight or (lambda e: e.length)

    adjacency: Dict[Vertex, List[Tuple[float, int, Edge]]] = defaultdict(list)
    for index, edge in enumerate(edges):
        entry = (weight(edge), index, edge)
        adjacency[edge.u].append(entry)
        adjacency[edge.v].append(entry)

    visited = {start}
    fringe: List[Tuple[float, int, Edge]] = list(adjacency[start])
    heapq.heapify(fringe)
    tree: List[Edge] = []

    while fringe:
        _, _, edge = heapq.heappop(fringe)
        u_in, v_in = edge.u in visited, edge.v in visited
        if u_in and v_in:
            continue

        new_vertex = edge.v if u_in else edge.u
        visited.add(new_vertex)
        tree.append(edge)

        for entry in adjacency[new_vertex]:
            other = entry[2].other(new_vertex)
            if other not in visited:
                heapq.heappush(fringe, entry)

    logger.debug("Minimum spanning tree built", edges=len(edges), tree_edges=len(tree))
    return tree
