"""
Core map generation functionality.
"""

from .hex_index import HexGrid, Direction, InvalidGridIndex, OFF_GRID, INVALID_HEX
from .terrain import Terrain, NUM_TERRAINS, edge_tile_index
from .regions import RegionPartitioner, partition_regions
from .adjacency import build_adjacency
from .coloring import TerrainColorer, color_regions
from .edges import edge_terrain
from .decorations import Decoration, OverdrawTile, hex_decorations, overdraw_decorations, overdraw_tiles
from .pipeline import GeneratedMap, generate_map, derive_hex_terrain

__all__ = ['HexGrid', 'Direction', 'InvalidGridIndex', 'OFF_GRID', 'INVALID_HEX',
           'Terrain', 'NUM_TERRAINS', 'edge_tile_index',
           'RegionPartitioner', 'partition_regions', 'build_adjacency',
           'TerrainColorer', 'color_regions', 'edge_terrain',
           'Decoration', 'OverdrawTile', 'hex_decorations', 'overdraw_decorations', 'overdraw_tiles',
           'GeneratedMap', 'generate_map', 'derive_hex_terrain']
