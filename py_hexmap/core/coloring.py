"""
Terrain assignment by greedy graph coloring.

Regions are visited once, in increasing id order. Each takes the lowest
terrain kind not already used by a neighbor colored before it; neighbors
with a higher id are not colored yet and are ignored.

When every kind is already taken by colored neighbors the region gets
kind 0 anyway, so two adjacent regions may share a terrain. This is
intended: there is no backtracking and coloring never fails.
"""

from typing import Dict, List, Optional, Sequence

import numpy as np
import structlog

from .terrain import NUM_TERRAINS, UNASSIGNED

logger = structlog.get_logger()

# Kind handed out when all kinds are used by neighbors
FALLBACK_TERRAIN = 0


class TerrainColorer:
    """Greedy terrain coloring over a region adjacency graph."""

    def __init__(self, num_terrains: int = NUM_TERRAINS):
        if not 1 <= num_terrains <= NUM_TERRAINS:
            raise ValueError(f"num_terrains must be between 1 and {NUM_TERRAINS}, got {num_terrains}")
        self.num_terrains = num_terrains
        self.fallback_regions: List[int] = []

    def lowest_free_terrain(self, used: Sequence[bool]) -> Optional[int]:
        """Lowest kind not marked used, or None when all are taken."""
        for terrain in range(self.num_terrains):
            if not used[terrain]:
                return terrain
        return None

    def color(self, adjacency: Dict[int, List[int]], num_regions: int) -> np.ndarray:
        """
        Assign a terrain kind to every region.

        Args:
            adjacency: Region id -> neighboring region ids
            num_regions: Number of region slots; regions missing from the
                graph have no neighbors and get kind 0

        Returns:
            Terrain kind per region
        """
        terrains = np.full(num_regions, UNASSIGNED, dtype=np.int32)
        self.fallback_regions = []

        for region in range(num_regions):
            used = [False] * self.num_terrains
            for neighbor in adjacency.get(region, ()):
                neighbor_terrain = terrains[neighbor]
                if neighbor_terrain != UNASSIGNED:
                    used[neighbor_terrain] = True

            terrain = self.lowest_free_terrain(used)
            if terrain is None:
                terrain = FALLBACK_TERRAIN
                self.fallback_regions.append(region)
                logger.debug("All terrains taken by neighbors, using fallback", region=region)
            terrains[region] = terrain

        if self.fallback_regions:
            logger.info("Terrain fallback applied", regions=self.fallback_regions)
        return terrains


def color_regions(
    adjacency: Dict[int, List[int]], num_regions: int, num_terrains: int = NUM_TERRAINS
) -> np.ndarray:
    """Greedy-color ``num_regions`` regions with ``num_terrains`` kinds."""
    return TerrainColorer(num_terrains).color(adjacency, num_regions)
