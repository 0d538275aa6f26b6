"""Tests for hallway selection and carving."""

import pytest
from py_dungeon.core.alea_prng import AleaPRNG
from py_dungeon.core.delaunay import triangulate
from py_dungeon.core.generator import room_vertices
from py_dungeon.core.geometry import Edge
from py_dungeon.core.grid import CellType, Grid2D
from py_dungeon.core.hallways import (
    HALLWAY_COSTS, carve_hallways, hallway_cost, materialize_path, select_hallway_edges,
)
from py_dungeon.core.rooms import Room


@pytest.fixture
def rooms():
    return [
        Room(2, 2, 4, 4),
        Room(20, 3, 5, 4),
        Room(4, 20, 4, 5),
        Room(22, 22, 6, 5),
        Room(12, 12, 3, 3),
    ]


@pytest.fixture
def triangulation(rooms):
    return triangulate(room_vertices(rooms))


class TestSelectHallwayEdges:
    """Test MST plus random retention."""

    def test_mst_spans_rooms(self, rooms, triangulation):
        selection = select_hallway_edges(triangulation.edges, AleaPRNG(0))
        assert len(selection.mst) == len(rooms) - 1

    def test_mst_is_subset_of_selection(self, triangulation):
        for seed in range(10):
            selection = select_hallway_edges(triangulation.edges, AleaPRNG(seed), 0.5)
            selected = {e.key for e in selection.selected}
            assert {e.key for e in selection.mst} <= selected
            assert selection.selected[:len(selection.mst)] == selection.mst

    def test_probability_zero_keeps_only_mst(self, triangulation):
        selection = select_hallway_edges(triangulation.edges, AleaPRNG(0), 0.0)
        assert selection.selected == selection.mst

    def test_probability_one_keeps_everything(self, triangulation):
        selection = select_hallway_edges(triangulation.edges, AleaPRNG(0), 1.0)
        assert {e.key for e in selection.selected} == {e.key for e in triangulation.edges}

    def test_one_draw_per_remaining_edge(self, triangulation):
        rng = AleaPRNG(0)
        selection = select_hallway_edges(triangulation.edges, rng)
        assert rng.call_count == len(triangulation.edges) - len(selection.mst)

    def test_no_edges(self):
        selection = select_hallway_edges([], AleaPRNG(0))
        assert selection.mst == []
        assert selection.selected == []

    def test_invalid_probability(self, triangulation):
        with pytest.raises(ValueError):
            select_hallway_edges(triangulation.edges, AleaPRNG(0), 1.5)


class TestCarveHallways:
    """Test corridor routing over the grid."""

    @pytest.fixture
    def grid(self, rooms):
        grid = Grid2D(32, 32)
        for room in rooms:
            grid.fill_rect(room, CellType.ROOM)
        return grid

    def test_cost_function(self, grid):
        cost = hallway_cost(grid)
        assert cost((0, 0), (0, 1)).cost == HALLWAY_COSTS[CellType.NONE] == 1
        assert cost((1, 2), (2, 2)).cost == HALLWAY_COSTS[CellType.ROOM] == 10
        grid[0, 1] = CellType.HALLWAY
        assert cost((0, 0), (0, 1)).cost == HALLWAY_COSTS[CellType.HALLWAY] == 15
        assert cost((0, 0), (0, 1)).traversable

    def test_materialize_path(self, grid):
        materialize_path(grid, [(0, 0), (1, 0), (2, 0)])
        assert grid.count(CellType.HALLWAY) == 3

    def test_carves_between_anchors(self, grid, triangulation):
        selection = select_hallway_edges(triangulation.edges, AleaPRNG(0), 0.0)
        hallways = carve_hallways(grid, selection.selected)

        assert len(hallways) == len(selection.selected)
        for hallway in hallways:
            assert hallway.cells[0] == hallway.edge.u.item.anchor
            assert hallway.cells[-1] == hallway.edge.v.item.anchor
            assert all(grid[c] == CellType.HALLWAY for c in hallway.cells)
            assert hallway.cost > 0

    def test_later_hallways_see_earlier_ones(self, grid, rooms):
        a, b = room_vertices(rooms[:2])
        first = carve_hallways(grid, [Edge(a, b)])[0]
        second = carve_hallways(grid, [Edge(a, b)])[0]
        # Re-routing the same pair now pays hallway cost along the carved cells
        assert second.cost > first.cost
