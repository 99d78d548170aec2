"""Tests for boundary decorations and overdraw bands."""

import warnings
from pathlib import Path

import pytest
import numpy as np
from py_hexmap.core import decorations as decorations_module
from py_hexmap.core.decorations import (
    Decoration, hex_decorations, overdraw_decorations, overdraw_tiles
)
from py_hexmap.core.edges import edge_terrain
from py_hexmap.core.hex_index import HexGrid, Direction
from py_hexmap.core.terrain import Terrain


def terrain_map(grid, default, **overrides):
    """Per-hex terrain array with a few hexes overridden, keyed 'x_y'."""
    terrains = np.full(grid.size, default, dtype=np.int32)
    for key, kind in overrides.items():
        hx, hy = (int(v) for v in key.strip("_").split("_"))
        terrains[grid.to_index(hx, hy)] = kind
    return terrains


class TestHexDecorations:
    """Test decorations between on-grid hexes."""

    def test_uniform_map_has_none(self):
        """Test that a single-terrain map needs no edge tiles."""
        grid = HexGrid(6, 4)
        terrains = terrain_map(grid, Terrain.SNOW)
        assert hex_decorations(grid, terrains) == []
        assert overdraw_decorations(grid, terrains) == []

    def test_single_water_hex(self):
        """Test beach edges around a one-hex lake."""
        grid = HexGrid(5, 5)
        terrains = terrain_map(grid, Terrain.GRASS, _2_2=Terrain.WATER)
        decorations = hex_decorations(grid, terrains)

        # six beach edges on the lake, one on each surrounding hex
        assert len(decorations) == 12
        assert all(d.terrain == Terrain.SAND for d in decorations)
        on_lake = [d for d in decorations if (d.hx, d.hy) == (2, 2)]
        assert [d.direction for d in on_lake] == list(Direction)

    def test_every_edge_is_mirrored(self):
        """Test that each edge tile has a partner on the neighbor."""
        grid = HexGrid(6, 5)
        rng = np.random.default_rng(7)
        terrains = rng.integers(0, 6, grid.size)
        decorations = set(hex_decorations(grid, terrains))

        for d in decorations:
            nx, ny = HexGrid.neighbor_coord(d.hx, d.hy, d.direction)
            opposite = Decoration(nx, ny, d.terrain, d.direction.opposite)
            assert opposite in decorations

    def test_matches_edge_terrain(self):
        """Test that decoration terrains follow the rule table."""
        grid = HexGrid(4, 4)
        terrains = terrain_map(grid, Terrain.DIRT, _1_1=Terrain.GRASS, _3_3=Terrain.SWAMP)
        for d in hex_decorations(grid, terrains):
            own = terrains[grid.to_index(d.hx, d.hy)]
            neighbor = terrains[grid.to_index(*HexGrid.neighbor_coord(d.hx, d.hy, d.direction))]
            assert d.terrain == edge_terrain(own, neighbor)

    def test_tile_index(self):
        """Test the tile-sheet position of a decoration."""
        d = Decoration(0, 0, Terrain.SAND, Direction.SW)
        assert d.tile_index == 2 * 6 + 4


class TestOverdraw:
    """Test the off-grid bands around the map."""

    def test_band_sizes(self):
        """Test the number and placement of band hexes."""
        grid = HexGrid(16, 9)
        tiles = overdraw_tiles(grid, np.zeros(grid.size, dtype=np.int32))
        left = [t for t in tiles if t.hx == -1]
        top = [t for t in tiles if t.hy == -1 and t.hx >= 0]
        right = [t for t in tiles if t.hx == 16]
        bottom = [t for t in tiles if t.hy == 9 and t.hx < 16]

        assert len(left) == 10
        assert [t.hx for t in top] == list(range(1, 16, 2))
        assert [t.hy for t in right] == list(range(0, 10))
        assert [t.hx for t in bottom] == list(range(0, 16, 2))
        assert len(tiles) == 36

    def test_tiles_copy_mirror_terrain(self):
        """Test that band hexes copy their mirror's terrain."""
        grid = HexGrid(6, 4)
        rng = np.random.default_rng(3)
        terrains = rng.integers(0, 6, grid.size)
        for tile in overdraw_tiles(grid, terrains):
            assert not grid.contains(tile.hx, tile.hy)
            assert grid.contains(*tile.mirror)
            assert tile.terrain == terrains[grid.to_index(*tile.mirror)]

    def test_corner_lake(self):
        """Test band edges next to a lake in the top-left corner."""
        grid = HexGrid(4, 3)
        terrains = terrain_map(grid, Terrain.GRASS, _0_0=Terrain.WATER)

        tiles = overdraw_tiles(grid, terrains)
        assert len(tiles) == 12
        assert (tiles[0].hx, tiles[0].hy, tiles[0].terrain) == (-1, -1, Terrain.WATER)

        assert overdraw_decorations(grid, terrains) == [
            Decoration(-1, 0, Terrain.SAND, Direction.NE),
            Decoration(0, 0, Terrain.SAND, Direction.SW),
            Decoration(1, -1, Terrain.SAND, Direction.SW),
            Decoration(0, 0, Terrain.SAND, Direction.NE),
        ]

    def test_band_directions_face_the_neighbor(self):
        """Test that band edge directions point across the map border."""
        grid = HexGrid(4, 3)
        terrains = terrain_map(grid, Terrain.GRASS, _0_0=Terrain.WATER)
        for d in overdraw_decorations(grid, terrains):
            nx, ny = HexGrid.neighbor_coord(d.hx, d.hy, d.direction)
            if grid.contains(d.hx, d.hy):
                assert not grid.contains(nx, ny)
            else:
                assert grid.contains(nx, ny)

    def test_right_band_on_odd_width(self):
        """Test the right band when the last column is even."""
        grid = HexGrid(3, 2)
        terrains = terrain_map(grid, Terrain.GRASS, _2_0=Terrain.DIRT)
        tiles = overdraw_tiles(grid, terrains)
        right = [(t.hy, t.mirror) for t in tiles if t.hx == 3]
        assert right == [(-1, (2, 0)), (0, (2, 1)), (1, (2, 1))]

        decorations = overdraw_decorations(grid, terrains)
        assert Decoration(3, 0, Terrain.GRASS, Direction.NW) in decorations
        assert Decoration(2, 0, Terrain.GRASS, Direction.SE) in decorations
        assert HexGrid.neighbor_coord(3, 0, Direction.NW) == (2, 0)
        assert HexGrid.neighbor_coord(2, 0, Direction.SE) == (3, 0)

    def test_right_band_on_even_width(self):
        """Test the right band when the last column is odd."""
        grid = HexGrid(4, 3)
        terrains = terrain_map(grid, Terrain.GRASS, _3_0=Terrain.SNOW)
        decorations = overdraw_decorations(grid, terrains)
        # band hex (4, 1) mirrors (3, 1), whose north neighbor is the snow hex
        assert Decoration(4, 1, Terrain.DIRT, Direction.NW) in decorations
        assert Decoration(3, 0, Terrain.DIRT, Direction.SE) in decorations
        assert HexGrid.neighbor_coord(4, 1, Direction.NW) == (3, 0)


class TestModuleSource:
    """Test the decorations module source."""

    def test_compiles_without_warnings(self):
        """Test that the module source has no invalid escape sequences."""
        path = Path(decorations_module.__file__)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            compile(path.read_text(encoding="utf-8"), str(path), "exec")
