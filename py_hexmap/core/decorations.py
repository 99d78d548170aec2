r"""
Boundary decorations for a generated map.

Turns a per-hex terrain array into the list of edge transition tiles a
renderer has to draw, including the overdraw bands: a ring of off-grid
hexes around the map that copy the terrain of an on-grid "mirror" hex so
the map edge is not jagged.

Band hexes are off the grid, so their borders are found from the mirror
hex's own direction table and drawn on both sides with fixed directions:

    left             top              right            bottom
     /N\            _ O _             _                 _
    O\_/           /N\_/N\           /N\             _/M\_
     /M\           \_/M\_/           \_/O           /N\_/N\
     \_/             \_/             /M\            \_/O\_/
                                     \_/

    N = neighbor, O = overdraw hex, M = mirrored hex
"""

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Tuple

import structlog

from .edges import edge_terrain
from .hex_index import OFF_GRID, Coord, Direction, HexGrid
from .terrain import Terrain, edge_tile_index

logger = structlog.get_logger()


@dataclass(frozen=True)
class Decoration:
    """An edge tile drawn on hex (hx, hy) along its ``direction`` side."""

    hx: int
    hy: int
    terrain: Terrain
    direction: Direction

    @property
    def tile_index(self) -> int:
        return edge_tile_index(self.terrain, self.direction)


class OverdrawTile(NamedTuple):
    """An off-grid hex filled with the terrain of its mirror hex."""

    hx: int
    hy: int
    terrain: Terrain
    mirror: Coord


class BandLink(NamedTuple):
    """One border of a band hex, looked up from its mirror."""

    mirror_direction: Direction  # from the mirror to the on-grid neighbor
    band_direction: Direction  # side of the band hex facing that neighbor
    neighbor_direction: Direction  # side of the neighbor facing the band hex


def hex_decorations(grid: HexGrid, hex_terrains) -> List[Decoration]:
    """
    Edge tiles for every on-grid hex.

    Args:
        grid: Hex grid
        hex_terrains: Terrain per hex, in index order

    Returns:
        Decorations in index order, then Direction order
    """
    decorations = []
    for index in range(grid.size):
        hx, hy = grid.to_coord(index)
        own = hex_terrains[index]
        for direction in Direction:
            neighbor = grid.neighbor(index, direction)
            if neighbor == OFF_GRID:
                continue
            transition = edge_terrain(own, hex_terrains[neighbor])
            if transition is not None:
                decorations.append(Decoration(hx, hy, transition, direction))
    return decorations


def _band_hexes(grid: HexGrid) -> Iterator[Tuple[Coord, Coord, Tuple[BandLink, ...]]]:
    """Yield (band hex, mirror hex, links) for the four overdraw bands."""
    width, height = grid.width, grid.height

    # left edge; column -1 is odd, so the mirror sits to the southeast
    for hy in range(-1, height):
        yield (-1, hy), (0, min(hy + 1, height - 1)), (
            BandLink(Direction.N, Direction.NE, Direction.SW),
        )

    # top edge, odd columns only; even columns already have a flat top
    for hx in range(1, width, 2):
        yield (hx, -1), (hx, 0), (
            BandLink(Direction.NW, Direction.SW, Direction.NE),
            BandLink(Direction.NE, Direction.SE, Direction.NW),
        )

    # right edge; the mirror is southwest of the band hex
    last = width - 1
    if last % 2:
        rows = [(hy, min(hy, height - 1)) for hy in range(0, height + 1)]
    else:
        rows = [(hy, min(hy + 1, height - 1)) for hy in range(-1, height)]
    for hy, mirror_row in rows:
        yield (width, hy), (last, mirror_row), (
            BandLink(Direction.N, Direction.NW, Direction.SE),
        )

    # bottom edge, even columns only
    for hx in range(0, width, 2):
        yield (hx, height), (hx, height - 1), (
            BandLink(Direction.SW, Direction.NW, Direction.SE),
            BandLink(Direction.SE, Direction.NE, Direction.SW),
        )


def overdraw_tiles(grid: HexGrid, hex_terrains) -> List[OverdrawTile]:
    """Base tiles for the overdraw bands, left, top, right then bottom."""
    tiles = []
    for (hx, hy), mirror, _ in _band_hexes(grid):
        terrain = Terrain(int(hex_terrains[grid.to_index(*mirror)]))
        tiles.append(OverdrawTile(hx, hy, terrain, mirror))
    return tiles


def overdraw_decorations(grid: HexGrid, hex_terrains) -> List[Decoration]:
    """
    Edge tiles between the overdraw bands and the map.

    Each link produces up to two decorations: one on the band hex, using the
    mirror's terrain against the neighbor's, and one on the neighbor in the
    reverse order.
    """
    decorations = []
    for (hx, hy), mirror, links in _band_hexes(grid):
        mirror_index = grid.to_index(*mirror)
        band_terrain = hex_terrains[mirror_index]

        for link in links:
            neighbor = grid.neighbor(mirror_index, link.mirror_direction)
            if neighbor == OFF_GRID:
                continue
            neighbor_terrain = hex_terrains[neighbor]

            outward = edge_terrain(band_terrain, neighbor_terrain)
            if outward is not None:
                decorations.append(Decoration(hx, hy, outward, link.band_direction))

            inward = edge_terrain(neighbor_terrain, band_terrain)
            if inward is not None:
                nx, ny = grid.to_coord(neighbor)
                decorations.append(Decoration(nx, ny, inward, link.neighbor_direction))

    logger.debug("Computed overdraw decorations", count=len(decorations))
    return decorations
