"""
Geometric data model for the Delaunay triangulation.

Vertices are compared by identity only. Edges and triangles are unordered
collections of vertex references and expose two separately named notions of
equality:

- identity equality (``edges_identical`` / ``triangles_equal``), used by
  ``==``, ``hash`` and every graph-level consumer;
- positional near-equality (``edges_almost_equal``), used only to cancel
  shared cavity edges while the triangulation is being built.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

_EPSILON = float(np.finfo(np.float64).eps)
_TINY = float(np.finfo(np.float64).tiny)


class DegenerateGeometryError(ValueError):
    """Raised when collinear or coincident points make a predicate undefined."""


@dataclass(frozen=True, eq=False)
class Vertex:
    """A 2D point with an optional opaque payload (e.g. the owning room)."""
    x: float
    y: float
    item: Optional[Any] = None

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Vertex({self.x!r}, {self.y!r})"


def almost_equal(x: float, y: float) -> bool:
    """Compare two floats within a combined relative/absolute tolerance."""
    diff = abs(x - y)
    return diff <= _EPSILON * abs(x + y) * 2 or diff < _TINY


def vertices_almost_equal(left: Vertex, right: Vertex) -> bool:
    """True when both coordinates of two vertices are almost equal."""
    return almost_equal(left.x, right.x) and almost_equal(left.y, right.y)


def _identity_key(*vertices: Vertex) -> Tuple[int, ...]:
    # Sorted ids give an order-independent key for hashing unordered tuples.
    return tuple(sorted(id(v) for v in vertices))


class Edge:
    """Unordered pair of vertex references."""

    __slots__ = ("u", "v")

    def __init__(self, u: Vertex, v: Vertex):
        self.u = u
        self.v = v

    @property
    def vertices(self) -> Tuple[Vertex, Vertex]:
        return (self.u, self.v)

    @property
    def key(self) -> Tuple[int, ...]:
        return _identity_key(self.u, self.v)

    @property
    def length(self) -> float:
        return math.hypot(self.u.x - self.v.x, self.u.y - self.v.y)

    def other(self, vertex: Vertex) -> Vertex:
        """Return the endpoint opposite ``vertex``."""
        if vertex is self.u:
            return self.v
        if vertex is self.v:
            return self.u
        raise ValueError(f"{vertex!r} is not an endpoint of {self!r}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return edges_identical(self, other)

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Edge({self.u!r}, {self.v!r})"


def edges_identical(left: Edge, right: Edge) -> bool:
    """Identity equality: same two vertex references in either order."""
    return ((left.u is right.u and left.v is right.v)
            or (left.u is right.v and left.v is right.u))


def edges_almost_equal(left: Edge, right: Edge) -> bool:
    """Positional near-equality of two edges, matched order-independently."""
    return ((vertices_almost_equal(left.u, right.u) and vertices_almost_equal(left.v, right.v))
            or (vertices_almost_equal(left.u, right.v) and vertices_almost_equal(left.v, right.u)))


def circumcenter(a: Vertex, b: Vertex, c: Vertex) -> Tuple[float, float]:
    """
    Compute the circumcenter of triangle ABC.

    Uses the algebraic formula built from squared vertex magnitudes.

    Raises:
        DegenerateGeometryError: if the points are collinear (or coincident)
            and the circumcenter is not finite.
    """
    ab = a.x * a.x + a.y * a.y
    cd = b.x * b.x + b.y * b.y
    ef = c.x * c.x + c.y * c.y

    denom_x = a.x * (c.y - b.y) + b.x * (a.y - c.y) + c.x * (b.y - a.y)
    denom_y = a.y * (c.x - b.x) + b.y * (a.x - c.x) + c.y * (b.x - a.x)
    if denom_x == 0 or denom_y == 0:
        raise DegenerateGeometryError(
            f"Collinear triangle has no circumcircle: {a!r}, {b!r}, {c!r}"
        )

    circum_x = (ab * (c.y - b.y) + cd * (a.y - c.y) + ef * (b.y - a.y)) / denom_x
    circum_y = (ab * (c.x - b.x) + cd * (a.x - c.x) + ef * (b.x - a.x)) / denom_y
    center = (circum_x / 2, circum_y / 2)

    if not (math.isfinite(center[0]) and math.isfinite(center[1])):
        raise DegenerateGeometryError(
            f"Non-finite circumcenter for triangle: {a!r}, {b!r}, {c!r}"
        )
    return center


class Triangle:
    """Unordered triple of vertex references."""

    __slots__ = ("a", "b", "c", "is_bad")

    def __init__(self, a: Vertex, b: Vertex, c: Vertex):
        self.a = a
        self.b = b
        self.c = c
        self.is_bad = False

    @property
    def vertices(self) -> Tuple[Vertex, Vertex, Vertex]:
        return (self.a, self.b, self.c)

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return (Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a))

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex is self.a or vertex is self.b or vertex is self.c

    def signed_area(self) -> float:
        a, b, c = self.a, self.b, self.c
        return ((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2

    def circumcircle_contains(self, x: float, y: float) -> bool:
        return circumcircle_contains(self, x, y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return triangles_equal(self, other)

    def __hash__(self) -> int:
        return hash(_identity_key(self.a, self.b, self.c))

    def __repr__(self) -> str:
        return f"Triangle({self.a!r}, {self.b!r}, {self.c!r})"


def triangles_equal(left: Triangle, right: Triangle) -> bool:
    """Set equality of the two triangles' vertex references."""
    theirs = right.vertices
    return all(any(v is w for w in theirs) for v in left.vertices)


def circumcircle_contains(triangle: Triangle, x: float, y: float) -> bool:
    """
    Check whether point (x, y) lies inside or on the triangle's circumcircle.

    The triangle must be non-degenerate; collinear vertices raise
    DegenerateGeometryError instead of producing non-finite comparisons.
    """
    cx, cy = circumcenter(triangle.a, triangle.b, triangle.c)
    radius_sq = (triangle.a.x - cx) ** 2 + (triangle.a.y - cy) ** 2
    dist_sq = (x - cx) ** 2 + (y - cy) ** 2
    return dist_sq <= radius_sq
