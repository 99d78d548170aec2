"""
End-to-end map generation.

partition -> adjacency -> terrain coloring -> per-hex terrain
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np
import structlog

from ..config.config import MapConfig, settings
from .adjacency import build_adjacency
from .alea_prng import AleaPRNG
from .coloring import TerrainColorer
from .decorations import Decoration, OverdrawTile, hex_decorations, overdraw_decorations, overdraw_tiles
from .hex_index import Coord, HexGrid
from .regions import RegionPartitioner

logger = structlog.get_logger()


@dataclass
class GeneratedMap:
    """Everything the generator produces for one map."""

    grid: HexGrid
    regions: np.ndarray  # region id per hex
    adjacency: Dict[int, List[int]]  # region id -> neighboring region ids
    region_terrains: np.ndarray  # terrain per region
    hex_terrains: np.ndarray  # terrain per hex
    seed: Optional[str] = None
    extinct_regions: List[int] = field(default_factory=list)
    fallback_regions: List[int] = field(default_factory=list)

    def region_sizes(self) -> np.ndarray:
        """Number of hexes in each region slot (0 for extinct regions)."""
        return np.bincount(self.regions, minlength=len(self.region_terrains))

    def decorations(self) -> List[Decoration]:
        """Edge tiles for the map itself."""
        return hex_decorations(self.grid, self.hex_terrains)

    def overdraw_tiles(self) -> List[OverdrawTile]:
        return overdraw_tiles(self.grid, self.hex_terrains)

    def overdraw_decorations(self) -> List[Decoration]:
        return overdraw_decorations(self.grid, self.hex_terrains)

    def log_summary(self):
        """Log the adjacency list of every region."""
        for region, neighbors in sorted(self.adjacency.items()):
            logger.info(
                "Region",
                region=region,
                terrain=int(self.region_terrains[region]),
                size=int(np.sum(self.regions == region)),
                neighbors=neighbors,
            )


def derive_hex_terrain(regions: np.ndarray, region_terrains: np.ndarray) -> np.ndarray:
    """Terrain of every hex, looked up through its region."""
    return np.asarray(region_terrains)[np.asarray(regions)]


def generate_map(
    config: Optional[MapConfig] = None,
    seed: Optional[str] = None,
    center_seed_fn: Optional[Callable[[], Coord]] = None,
) -> GeneratedMap:
    """
    Generate a complete terrain map.

    Args:
        config: Map parameters; defaults come from settings
        seed: Seed string for region center placement; falls back to the
            config seed, then ``settings.default_seed``. Ignored when
            ``center_seed_fn`` is given
        center_seed_fn: Returns one starting region center per call

    Returns:
        GeneratedMap with region, adjacency and terrain data
    """
    config = config or MapConfig.from_settings()
    if seed is None and center_seed_fn is None:
        seed = config.seed or settings.default_seed

    logger.info(
        "Generating map",
        width=config.width,
        height=config.height,
        num_regions=config.num_regions,
        num_terrains=config.num_terrains,
        seed=seed,
    )

    grid = HexGrid(config.width, config.height)
    colorer = TerrainColorer(config.num_terrains)
    prng = AleaPRNG(seed) if center_seed_fn is None else None

    partitioner = RegionPartitioner(grid, config.num_regions, config.iterations)
    regions = partitioner.partition(center_seed_fn, prng)

    adjacency = build_adjacency(grid, regions)

    region_terrains = colorer.color(adjacency, config.num_regions)

    hex_terrains = derive_hex_terrain(regions, region_terrains)

    return GeneratedMap(
        grid=grid,
        regions=regions,
        adjacency=adjacency,
        region_terrains=region_terrains,
        hex_terrains=hex_terrains,
        seed=seed,
        extinct_regions=list(partitioner.extinct_regions),
        fallback_regions=list(colorer.fallback_regions),
    )
