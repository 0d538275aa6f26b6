"""
Incremental Delaunay triangulation (Bowyer-Watson).

Room centers are inserted one at a time into a triangulation seeded with a
synthetic super-triangle. Every triangle whose circumcircle contains the new
point is removed, the shared edges of the removed triangles cancel out, and
the remaining cavity boundary is re-triangulated against the new point.
Triangles touching the super-triangle are discarded at the end.

Cost is O(n) triangle scans per inserted vertex, which is fine for the tens to
low hundreds of rooms a dungeon level holds.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import structlog

from .geometry import (
    DegenerateGeometryError,
    Edge,
    Triangle,
    Vertex,
    edges_almost_equal,
    vertices_almost_equal,
)

logger = structlog.get_logger()


@dataclass
class TriangulationResult:
    """Output of one triangulation run."""
    vertices: List[Vertex]    # input vertices, input order preserved
    triangles: List[Triangle]
    edges: List[Edge]         # unique undirected edges, first-seen order


def super_triangle(vertices: Sequence[Vertex]) -> Tuple[Vertex, Vertex, Vertex]:
    """
    Build three synthetic vertices strictly enclosing every input vertex.

    With ``span`` the larger side of the bounding box, the corners sit
    ``margin = 10 * span`` away from the box and the two far corners a further
    ``delta = 2 * span`` out. The hypotenuse then clears the box's upper-right
    corner for any span, and the synthetic vertices stay far enough away that
    only very thin hull triangles can be lost to them.
    """
    xs = [v.x for v in vertices]
    ys = [v.y for v in vertices]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    span = max(max_x - min_x, max_y - min_y)
    if span == 0:
        span = 1.0
    delta = span * 2
    margin = span * 10

    p1 = Vertex(min_x - margin, min_y - margin)
    p2 = Vertex(min_x - margin, max_y + delta + margin)
    p3 = Vertex(max_x + delta + margin, min_y - margin)
    return p1, p2, p3


def check_coincident(vertices: Sequence[Vertex]) -> None:
    """Raise DegenerateGeometryError if any two vertices share a position."""
    for i, left in enumerate(vertices):
        for right in vertices[i + 1:]:
            if vertices_almost_equal(left, right):
                raise DegenerateGeometryError(
                    f"Coincident input vertices: {left!r} and {right!r}"
                )


class Delaunay2D:
    """
    One-shot triangulation engine.

    Use :meth:`triangulate`; an instance owns its vertex, edge and triangle
    lists for exactly one build and is not meant to be mutated afterwards.
    """

    def __init__(self, vertices: Sequence[Vertex]):
        self.vertices: List[Vertex] = list(vertices)
        self.edges: List[Edge] = []
        self.triangles: List[Triangle] = []

    @classmethod
    def triangulate(cls, vertices: Sequence[Vertex]) -> "Delaunay2D":
        if not vertices:
            raise ValueError("Cannot triangulate an empty vertex set")
        delaunay = cls(vertices)
        delaunay._triangulate()
        return delaunay

    @property
    def result(self) -> TriangulationResult:
        return TriangulationResult(
            vertices=list(self.vertices),
            triangles=list(self.triangles),
            edges=list(self.edges),
        )

    def _triangulate(self) -> None:
        logger.debug("Starting triangulation", vertices=len(self.vertices))
        check_coincident(self.vertices)

        p1, p2, p3 = super_triangle(self.vertices)
        self.triangles.append(Triangle(p1, p2, p3))

        for vertex in self.vertices:
            self._insert(vertex)

        self.triangles = [
            t for t in self.triangles
            if not (t.contains_vertex(p1) or t.contains_vertex(p2) or t.contains_vertex(p3))
        ]

        for t in self.triangles:
            if t.signed_area() == 0:
                raise DegenerateGeometryError(f"Zero-area triangle in output: {t!r}")

        self.edges = unique_edges(self.triangles)

        logger.info("Triangulation complete",
                    vertices=len(self.vertices),
                    triangles=len(self.triangles),
                    edges=len(self.edges))

    def _insert(self, vertex: Vertex) -> None:
        polygon: List[Edge] = []

        for t in self.triangles:
            if t.circumcircle_contains(vertex.x, vertex.y):
                t.is_bad = True
                polygon.extend(t.edges())

        self.triangles = [t for t in self.triangles if not t.is_bad]

        # Edges shared by two bad triangles are interior to the cavity.
        cancelled = [False] * len(polygon)
        for i in range(len(polygon)):
            for j in range(i + 1, len(polygon)):
                if edges_almost_equal(polygon[i], polygon[j]):
                    cancelled[i] = True
                    cancelled[j] = True

        boundary = [edge for edge, bad in zip(polygon, cancelled) if not bad]
        for edge in boundary:
            self.triangles.append(Triangle(edge.u, edge.v, vertex))

        logger.debug("Vertex inserted",
                     x=vertex.x, y=vertex.y,
                     cavity_edges=len(polygon), boundary_edges=len(boundary))


def unique_edges(triangles: Sequence[Triangle]) -> List[Edge]:
    """Collect the undirected edges of ``triangles`` once each, in first-seen order."""
    seen = set()
    edges = []
    for t in triangles:
        for edge in t.edges():
            if edge.key not in seen:
                seen.add(edge.key)
                edges.append(edge)
    return edges


def triangulate(vertices: Sequence[Vertex]) -> TriangulationResult:
    """Build the Delaunay triangulation of ``vertices``."""
    return Delaunay2D.triangulate(vertices).result
