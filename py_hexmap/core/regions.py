"""
Region partitioning by Lloyd relaxation on the hex grid.

Random centers are placed on the map, every hex joins its nearest center,
and each center then moves to the mean position of its hexes. A few rounds
of this give Voronoi regions of fairly even size. The round count is fixed
rather than run to convergence; four rounds look regular enough.

A region can lose all of its hexes to its neighbors during relaxation. Its
center becomes INVALID_HEX and it stays empty for the rest of the run, so
the final map may have fewer non-empty regions than requested.
"""

from typing import Callable, List, Optional

import numpy as np
import structlog

from .hex_index import INVALID_HEX, Coord, HexGrid, InvalidGridIndex, axial_distance, offset_to_axial

logger = structlog.get_logger()

RELAXATION_ITERATIONS = 4

# Distance to an invalid center; larger than any distance on a real map.
UNREACHABLE = np.iinfo(np.int64).max


def assign_nearest_centers(grid: HexGrid, centers: np.ndarray) -> np.ndarray:
    """
    Assign every hex to the region with the nearest center.

    Ties go to the lowest region id. Regions whose center is INVALID_HEX
    never win a hex.

    Args:
        grid: Hex grid
        centers: (num_regions, 2) array of center coordinates

    Returns:
        Region id per hex, in index order
    """
    coords = grid.coords()
    hex_q, hex_r = offset_to_axial(coords[:, 0], coords[:, 1])
    center_q, center_r = offset_to_axial(centers[:, 0], centers[:, 1])

    distances = axial_distance(
        hex_q[:, np.newaxis], hex_r[:, np.newaxis], center_q[np.newaxis, :], center_r[np.newaxis, :]
    ).astype(np.int64)

    invalid = np.all(centers == INVALID_HEX, axis=1)
    distances[:, invalid] = UNREACHABLE

    # argmin returns the first minimum, i.e. the lowest region id among ties
    return np.argmin(distances, axis=1).astype(np.int32)


def compute_region_centers(grid: HexGrid, regions: np.ndarray, num_regions: int) -> np.ndarray:
    """
    Center of mass of each region, truncated to whole hex coordinates.

    Args:
        grid: Hex grid
        regions: Region id per hex
        num_regions: Total number of region slots

    Returns:
        (num_regions, 2) array; empty regions get INVALID_HEX
    """
    coords = grid.coords()
    counts = np.bincount(regions, minlength=num_regions)

    sums = np.zeros((num_regions, 2), dtype=np.int64)
    np.add.at(sums, regions, coords)

    centers = np.full((num_regions, 2), INVALID_HEX, dtype=np.int64)
    occupied = counts > 0
    centers[occupied] = sums[occupied] // counts[occupied, np.newaxis]
    return centers


class RegionPartitioner:
    """Splits a hex grid into ``num_regions`` Voronoi regions."""

    def __init__(self, grid: HexGrid, num_regions: int, iterations: int = RELAXATION_ITERATIONS):
        """
        Initialize the partitioner.

        Args:
            grid: Hex grid to partition
            num_regions: Number of region slots (ids 0..num_regions-1)
            iterations: Relaxation rounds before the final assignment
        """
        if num_regions < 1:
            raise ValueError(f"num_regions must be at least 1, got {num_regions}")
        if iterations < 0:
            raise ValueError(f"iterations cannot be negative, got {iterations}")

        self.grid = grid
        self.num_regions = num_regions
        self.iterations = iterations

        # Results of the last run
        self.centers = None
        self.extinct_regions: List[int] = []

    def seed_centers(self, center_seed_fn: Callable[[], Coord]) -> np.ndarray:
        """Draw one starting center per region. Duplicates are fine."""
        centers = np.zeros((self.num_regions, 2), dtype=np.int64)
        for region in range(self.num_regions):
            hx, hy = center_seed_fn()
            if not self.grid.contains(hx, hy):
                raise InvalidGridIndex(f"Seed center ({hx}, {hy}) for region {region} is outside the grid")
            centers[region] = (hx, hy)
        return centers

    def partition(self, center_seed_fn: Optional[Callable[[], Coord]] = None, prng=None) -> np.ndarray:
        """
        Run the relaxation and return the final region of every hex.

        Args:
            center_seed_fn: Returns one starting center per call; defaults to
                uniformly random hexes
            prng: Generator used by the default seeding

        Returns:
            Region id per hex, in index order
        """
        if center_seed_fn is None:
            def center_seed_fn():
                return self.grid.random_hex(prng)

        centers = self.seed_centers(center_seed_fn)
        logger.debug("Seeded region centers", centers=centers.tolist())

        for iteration in range(self.iterations):
            regions = assign_nearest_centers(self.grid, centers)
            centers = compute_region_centers(self.grid, regions, self.num_regions)
            logger.debug(
                "Relaxation round complete",
                iteration=iteration,
                empty_regions=int(np.sum(np.all(centers == INVALID_HEX, axis=1))),
            )

        regions = assign_nearest_centers(self.grid, centers)

        self.centers = centers
        counts = np.bincount(regions, minlength=self.num_regions)
        self.extinct_regions = [int(r) for r in np.flatnonzero(counts == 0)]
        if self.extinct_regions:
            logger.debug("Regions absorbed by their neighbors", regions=self.extinct_regions)

        logger.info(
            "Partitioned regions",
            width=self.grid.width,
            height=self.grid.height,
            num_regions=self.num_regions,
            extinct=len(self.extinct_regions),
        )
        return regions


def partition_regions(
    grid: HexGrid,
    num_regions: int,
    center_seed_fn: Optional[Callable[[], Coord]] = None,
    iterations: int = RELAXATION_ITERATIONS,
    prng=None,
) -> np.ndarray:
    """
    Partition ``grid`` into ``num_regions`` regions.

    Convenience wrapper around RegionPartitioner.
    """
    partitioner = RegionPartitioner(grid, num_regions, iterations)
    return partitioner.partition(center_seed_fn, prng)
