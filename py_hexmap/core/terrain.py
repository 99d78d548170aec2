"""Terrain kinds and the edge tile-sheet encoding."""

from enum import IntEnum

from .hex_index import Direction


class Terrain(IntEnum):
    """Terrain kinds, numbered densely from 0.

    Greedy coloring hands out kinds in this order, so GRASS is both the most
    common terrain and the fallback when a region's neighbors use them all.
    """

    GRASS = 0
    DIRT = 1
    SAND = 2
    WATER = 3
    SWAMP = 4
    SNOW = 5


NUM_TERRAINS = len(Terrain)

# Marker for a region that has not been colored yet
UNASSIGNED = -1

# Terrain names for display
TERRAIN_NAMES = {
    Terrain.GRASS: "Grass",
    Terrain.DIRT: "Dirt",
    Terrain.SAND: "Sand",
    Terrain.WATER: "Water",
    Terrain.SWAMP: "Swamp",
    Terrain.SNOW: "Snow",
}

# Single-letter symbols for text dumps
TERRAIN_SYMBOLS = {
    Terrain.GRASS: "g",
    Terrain.DIRT: "d",
    Terrain.SAND: "s",
    Terrain.WATER: "~",
    Terrain.SWAMP: "w",
    Terrain.SNOW: "*",
}


def edge_tile_index(terrain: Terrain, direction: Direction) -> int:
    """
    Position of an edge tile in a sheet laid out terrain-major.

    Each transition terrain owns one block of six tiles, one per direction,
    in Direction order: ``terrain * 6 + direction``.
    """
    return int(terrain) * len(Direction) + int(direction)
