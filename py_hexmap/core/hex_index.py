"""
Hex grid indexing for a fixed-size map.

Hexes are addressed by offset coordinates (hx, hy) in an "odd-q" layout:
columns are vertical, and odd columns are drawn half a hex lower than even
columns. Internally the map is a flat row-major array, so hex (hx, hy)
lives at index ``hy * width + hx``.

Distances are computed by converting offset coordinates to axial
coordinates (q, r), where the hex metric is exact.
"""

from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..utils.random import get_prng

Coord = Tuple[int, int]

# Neighbor index returned when a neighbor would fall outside the map.
OFF_GRID = -1

# Center of a region that owns no hexes.
INVALID_HEX: Coord = (-1, -1)


class InvalidGridIndex(IndexError):
    """An array index or hex coordinate outside the grid."""


class Direction(IntEnum):
    """The six hex directions, in the cyclic order used everywhere.

    Values are dense (0-5) so they can index tile sheets directly.
    """

    N = 0
    NE = 1
    SE = 2
    S = 3
    SW = 4
    NW = 5

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 3) % len(Direction))


# Offset (dx, dy) for each direction, selected by column parity (hx % 2).
NEIGHBOR_OFFSETS: Tuple[Dict[Direction, Coord], Dict[Direction, Coord]] = (
    # even columns
    {
        Direction.N: (0, -1),
        Direction.NE: (1, -1),
        Direction.SE: (1, 0),
        Direction.S: (0, 1),
        Direction.SW: (-1, 0),
        Direction.NW: (-1, -1),
    },
    # odd columns (shifted half a hex down)
    {
        Direction.N: (0, -1),
        Direction.NE: (1, 0),
        Direction.SE: (1, 1),
        Direction.S: (0, 1),
        Direction.SW: (-1, 1),
        Direction.NW: (-1, 0),
    },
)


def neighbor_offset(hx: int, direction: Direction) -> Coord:
    """Offset to the neighbor of a hex in column ``hx``."""
    return NEIGHBOR_OFFSETS[hx % 2][direction]


def offset_to_axial(hx, hy):
    """
    Convert odd-q offset coordinates to axial (q, r).

    Works element-wise on NumPy arrays as well as on plain integers, and for
    off-grid coordinates.
    """
    return hx, hy - (hx - (hx & 1)) // 2


def axial_distance(q1, r1, q2, r2):
    """Hex distance between axial coordinates (scalars or arrays)."""
    dq = q1 - q2
    dr = r1 - r2
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2


class HexGrid:
    """Index and coordinate arithmetic for a ``width`` x ``height`` hex map."""

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._coords = None

    def __repr__(self):
        return f"HexGrid(width={self.width}, height={self.height})"

    def __eq__(self, other):
        if not isinstance(other, HexGrid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height)

    def __hash__(self):
        return hash((self.width, self.height))

    @property
    def size(self) -> int:
        """Number of hexes on the map."""
        return self.width * self.height

    def contains(self, hx: int, hy: int) -> bool:
        return 0 <= hx < self.width and 0 <= hy < self.height

    def to_index(self, hx: int, hy: int) -> int:
        """Array index of hex (hx, hy)."""
        if not self.contains(hx, hy):
            raise InvalidGridIndex(f"Hex ({hx}, {hy}) is outside the {self.width}x{self.height} grid")
        return hy * self.width + hx

    def to_coord(self, index: int) -> Coord:
        """Hex coordinate of an array index."""
        if not 0 <= index < self.size:
            raise InvalidGridIndex(f"Index {index} is outside [0, {self.size})")
        return index % self.width, index // self.width

    def coords(self) -> np.ndarray:
        """
        Coordinates of every hex in index order.

        Returns:
            Read-only int array of shape (size, 2) holding [hx, hy] rows
        """
        if self._coords is None:
            indices = np.arange(self.size)
            coords = np.column_stack((indices % self.width, indices // self.width))
            coords.flags.writeable = False
            self._coords = coords
        return self._coords

    @staticmethod
    def distance(a: Coord, b: Coord) -> int:
        """Number of hex steps between two coordinates."""
        q1, r1 = offset_to_axial(*a)
        q2, r2 = offset_to_axial(*b)
        return axial_distance(q1, r1, q2, r2)

    @staticmethod
    def neighbor_coord(hx: int, hy: int, direction: Direction) -> Coord:
        """Coordinate of the adjacent hex, with no bounds checking."""
        dx, dy = neighbor_offset(hx, direction)
        return hx + dx, hy + dy

    @staticmethod
    def direction_to(a: Coord, b: Coord) -> Optional[Direction]:
        """Direction from hex ``a`` to adjacent hex ``b``, or None if not adjacent."""
        delta = (b[0] - a[0], b[1] - a[1])
        for direction, offset in NEIGHBOR_OFFSETS[a[0] % 2].items():
            if offset == delta:
                return direction
        return None

    def neighbor(self, index: int, direction: Direction) -> int:
        """
        Index of the neighbor in ``direction``.

        Returns:
            Neighbor index, or OFF_GRID if the neighbor is outside the map
        """
        hx, hy = self.to_coord(index)
        nx, ny = self.neighbor_coord(hx, hy, direction)
        if not self.contains(nx, ny):
            return OFF_GRID
        return ny * self.width + nx

    def neighbor_indices(self, index: int) -> List[int]:
        """On-grid neighbors of a hex, in Direction order."""
        neighbors = []
        for direction in Direction:
            neighbor = self.neighbor(index, direction)
            if neighbor != OFF_GRID:
                neighbors.append(neighbor)
        return neighbors

    def random_hex(self, prng=None) -> Coord:
        """
        Uniformly random on-grid coordinate.

        Args:
            prng: Generator with a ``randrange`` method; defaults to the
                process-wide Alea PRNG

        Returns:
            (hx, hy) with each axis drawn independently
        """
        prng = prng or get_prng()
        hx = prng.randrange(self.width)
        hy = prng.randrange(self.height)
        return hx, hy
