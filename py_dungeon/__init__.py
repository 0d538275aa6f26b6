"""
Procedural 2D dungeon generator.

Rooms are scattered over a grid, linked through a Delaunay triangulation of
their centers, thinned to a spanning tree plus a few loops, and joined by
A*-routed hallways.
"""

__version__ = "0.1.0"

from .core import DungeonConfig, DungeonGenerator, generate_dungeon

__all__ = ['DungeonConfig', 'DungeonGenerator', 'generate_dungeon', '__version__']
