"""Region adjacency graph built from a per-hex region assignment."""

from typing import Dict, List

import structlog

from .hex_index import HexGrid

logger = structlog.get_logger()


def build_adjacency(grid: HexGrid, regions) -> Dict[int, List[int]]:
    """
    Build the region adjacency graph.

    Hexes are scanned in index (row-major) order and their neighbors in
    Direction order; a neighboring region is appended the first time it is
    seen across the border. Lists are therefore in discovery order, not
    sorted, but are fully determined by the input.

    Only regions that own at least one hex become keys, so regions emptied
    by relaxation never appear.

    Args:
        grid: Hex grid the regions were computed on
        regions: Region id per hex, in index order

    Returns:
        Mapping of region id to its neighboring region ids
    """
    if len(regions) != grid.size:
        raise ValueError(f"Expected {grid.size} region entries, got {len(regions)}")

    adjacency: Dict[int, List[int]] = {}
    for index in range(grid.size):
        region = int(regions[index])
        neighbors = adjacency.setdefault(region, [])

        for neighbor_index in grid.neighbor_indices(index):
            neighbor_region = int(regions[neighbor_index])
            if neighbor_region != region and neighbor_region not in neighbors:
                neighbors.append(neighbor_region)

    logger.info(
        "Built region adjacency",
        regions=len(adjacency),
        borders=sum(len(n) for n in adjacency.values()) // 2,
    )
    return adjacency
