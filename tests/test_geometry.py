"""Tests for the vertex/edge/triangle data model and predicates."""

import pytest
from py_dungeon.core.geometry import (
    DegenerateGeometryError, Edge, Triangle, Vertex, almost_equal,
    circumcenter, circumcircle_contains, edges_almost_equal, edges_identical,
    triangles_equal, vertices_almost_equal,
)


class TestAlmostEqual:
    """Test the floating point tolerance helpers."""

    def test_identical_values(self):
        assert almost_equal(1.5, 1.5)
        assert almost_equal(0.0, 0.0)

    def test_one_ulp_apart(self):
        x = 1.0
        y = 1.0 + 2.220446049250313e-16
        assert almost_equal(x, y)

    def test_clearly_different(self):
        assert not almost_equal(1.0, 1.0001)
        assert not almost_equal(0.0, 1e-6)

    def test_vertices_almost_equal_ignores_identity(self):
        assert vertices_almost_equal(Vertex(2.0, 3.0), Vertex(2.0, 3.0))
        assert not vertices_almost_equal(Vertex(2.0, 3.0), Vertex(2.0, 3.5))


class TestVertex:
    """Test vertex identity semantics."""

    def test_identity_equality(self):
        a = Vertex(1.0, 2.0)
        b = Vertex(1.0, 2.0)
        assert a == a
        assert a != b
        assert len({a, b}) == 2

    def test_payload_and_position(self):
        v = Vertex(1.0, 2.0, item="room")
        assert v.position == (1.0, 2.0)
        assert v.item == "room"


class TestEdge:
    """Test the two edge equality notions."""

    @pytest.fixture
    def vertices(self):
        return Vertex(0.0, 0.0), Vertex(3.0, 4.0)

    def test_identity_is_order_independent(self, vertices):
        a, b = vertices
        assert edges_identical(Edge(a, b), Edge(b, a))
        assert Edge(a, b) == Edge(b, a)
        assert hash(Edge(a, b)) == hash(Edge(b, a))

    def test_identity_ignores_position_twins(self, vertices):
        a, b = vertices
        twin = Vertex(0.0, 0.0)
        assert not edges_identical(Edge(a, b), Edge(twin, b))
        assert Edge(a, b) != Edge(twin, b)

    def test_near_equality_uses_positions(self, vertices):
        a, b = vertices
        twin_a = Vertex(0.0, 0.0)
        twin_b = Vertex(3.0, 4.0)
        assert edges_almost_equal(Edge(a, b), Edge(twin_b, twin_a))
        assert not edges_almost_equal(Edge(a, b), Edge(a, Vertex(3.0, 4.5)))

    def test_set_deduplication(self, vertices):
        a, b = vertices
        assert len({Edge(a, b), Edge(b, a)}) == 1

    def test_length_and_other(self, vertices):
        a, b = vertices
        edge = Edge(a, b)
        assert edge.length == pytest.approx(5.0)
        assert edge.other(a) is b
        assert edge.other(b) is a
        with pytest.raises(ValueError):
            edge.other(Vertex(0.0, 0.0))


class TestTriangle:
    """Test triangle equality and geometry."""

    @pytest.fixture
    def right_triangle(self):
        return Triangle(Vertex(0.0, 0.0), Vertex(2.0, 0.0), Vertex(0.0, 2.0))

    def test_set_equality_any_order(self, right_triangle):
        a, b, c = right_triangle.vertices
        assert triangles_equal(right_triangle, Triangle(c, a, b))
        assert right_triangle == Triangle(b, c, a)
        assert hash(right_triangle) == hash(Triangle(c, b, a))

    def test_position_twins_are_not_equal(self, right_triangle):
        a, b, _ = right_triangle.vertices
        assert right_triangle != Triangle(a, b, Vertex(0.0, 2.0))

    def test_edges(self, right_triangle):
        a, b, c = right_triangle.vertices
        assert right_triangle.edges() == (Edge(a, b), Edge(b, c), Edge(c, a))

    def test_contains_vertex_by_identity(self, right_triangle):
        a = right_triangle.a
        assert right_triangle.contains_vertex(a)
        assert not right_triangle.contains_vertex(Vertex(0.0, 0.0))

    def test_signed_area(self, right_triangle):
        assert right_triangle.signed_area() == pytest.approx(2.0)
        a, b, c = right_triangle.vertices
        assert Triangle(a, c, b).signed_area() == pytest.approx(-2.0)


class TestCircumcircle:
    """Test the circumcircle containment predicate."""

    @pytest.fixture
    def right_triangle(self):
        return Triangle(Vertex(0.0, 0.0), Vertex(2.0, 0.0), Vertex(0.0, 2.0))

    def test_circumcenter(self, right_triangle):
        cx, cy = circumcenter(*right_triangle.vertices)
        assert cx == pytest.approx(1.0)
        assert cy == pytest.approx(1.0)

    def test_inside(self, right_triangle):
        assert circumcircle_contains(right_triangle, 1.0, 1.0)
        assert circumcircle_contains(right_triangle, 0.5, 0.5)

    def test_on_circle_counts_as_inside(self, right_triangle):
        assert circumcircle_contains(right_triangle, 2.0, 2.0)

    def test_outside(self, right_triangle):
        assert not circumcircle_contains(right_triangle, 3.0, 3.0)
        assert not right_triangle.circumcircle_contains(-1.0, -1.0)

    def test_collinear_triangle_raises(self):
        t = Triangle(Vertex(0.0, 0.0), Vertex(1.0, 1.0), Vertex(2.0, 2.0))
        with pytest.raises(DegenerateGeometryError):
            circumcircle_contains(t, 0.5, 0.0)

    def test_coincident_vertices_raise(self):
        t = Triangle(Vertex(1.0, 1.0), Vertex(1.0, 1.0), Vertex(3.0, 0.0))
        with pytest.raises(DegenerateGeometryError):
            circumcenter(*t.vertices)
