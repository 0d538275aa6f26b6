"""
Core dungeon generation functionality.
"""

from .alea_prng import AleaPRNG
from .geometry import (Vertex, Edge, Triangle, DegenerateGeometryError,
                       edges_identical, edges_almost_equal, triangles_equal,
                       circumcircle_contains)
from .delaunay import Delaunay2D, TriangulationResult, triangulate
from .grid import CellType, Grid2D
from .rooms import Room, RoomPlacement, RoomPlacementFailed, place_rooms
from .prim import minimum_spanning_tree
from .pathfinder import GridPathfinder, PathCost, PathResult
from .hallways import Hallway, HallwaySelection, select_hallway_edges, carve_hallways
from .generator import Dungeon, DungeonConfig, DungeonGenerator, generate_dungeon

__all__ = ['AleaPRNG', 'Vertex', 'Edge', 'Triangle', 'DegenerateGeometryError',
           'edges_identical', 'edges_almost_equal', 'triangles_equal',
           'circumcircle_contains', 'Delaunay2D', 'TriangulationResult', 'triangulate',
           'CellType', 'Grid2D', 'Room', 'RoomPlacement', 'RoomPlacementFailed',
           'place_rooms', 'minimum_spanning_tree', 'GridPathfinder', 'PathCost',
           'PathResult', 'Hallway', 'HallwaySelection', 'select_hallway_edges',
           'carve_hallways', 'Dungeon', 'DungeonConfig', 'DungeonGenerator',
           'generate_dungeon']
