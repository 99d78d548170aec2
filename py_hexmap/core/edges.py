"""
Edge transitions between neighboring terrains.

A transition tile is drawn on a hex along each side that borders a
different terrain. Which transition terrain is used follows a fixed
priority table:

1. water or sand on exactly one side -> sand (beach)
2. dirt next to grass -> grass
3. any other pair of different kinds -> dirt
4. same kind -> no transition
"""

from typing import Optional

from .terrain import Terrain

# Kinds that can come out of edge_terrain()
EDGE_TERRAINS = (Terrain.GRASS, Terrain.DIRT, Terrain.SAND)


def edge_terrain(terrain_from: int, terrain_to: int) -> Optional[Terrain]:
    """
    Transition terrain drawn on ``terrain_from``'s side of a border.

    The result depends only on the unordered pair of kinds; the argument
    order matters to callers only for which side the tile is drawn on.

    Args:
        terrain_from: Terrain of the hex being decorated
        terrain_to: Terrain of its neighbor

    Returns:
        Transition terrain, or None if both sides are the same kind
    """
    if (terrain_from == Terrain.WATER) != (terrain_to == Terrain.WATER) or (
        terrain_from == Terrain.SAND
    ) != (terrain_to == Terrain.SAND):
        return Terrain.SAND
    if {terrain_from, terrain_to} == {Terrain.DIRT, Terrain.GRASS}:
        return Terrain.GRASS
    if terrain_from != terrain_to:
        return Terrain.DIRT
    return None
