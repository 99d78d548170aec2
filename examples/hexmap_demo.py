#!/usr/bin/env python3
"""
Demo script: generate a hex map and print it as text.
"""

import sys
from collections import Counter

from py_hexmap.config import get_preset, list_presets
from py_hexmap.core import Terrain, generate_map
from py_hexmap.core.terrain import TERRAIN_NAMES, TERRAIN_SYMBOLS
from py_hexmap.utils.log_setup import configure_logging


def render_text(result):
    """Two text lines per hex row; odd columns drop half a row."""
    grid = result.grid
    lines = []
    for hy in range(grid.height):
        for odd in (0, 1):
            cells = []
            for hx in range(grid.width):
                if hx % 2 == odd:
                    terrain = Terrain(int(result.hex_terrains[grid.to_index(hx, hy)]))
                    cells.append(TERRAIN_SYMBOLS[terrain])
                else:
                    cells.append(" ")
            lines.append(" ".join(cells))
    return "\n".join(lines)


def main():
    """Demonstrate map generation."""
    preset = sys.argv[1] if len(sys.argv) > 1 else "classic"
    seed = sys.argv[2] if len(sys.argv) > 2 else "demo123"

    configure_logging("WARNING")

    print("Py-Hexmap Generation Demo")
    print("=" * 40)
    print(f"Presets: {', '.join(list_presets())}")
    print(f"Using preset '{preset}' with seed '{seed}'\n")

    result = generate_map(get_preset(preset), seed=seed)
    print(render_text(result))

    sizes = result.region_sizes()
    print(f"\nRegions: {len(result.adjacency)} non-empty of {len(sizes)}")
    print(f"Absorbed regions: {result.extinct_regions or 'none'}")
    print(f"Terrain fallbacks: {result.fallback_regions or 'none'}")

    print("\nTerrain distribution:")
    counts = Counter(int(t) for t in result.hex_terrains)
    for terrain in Terrain:
        print(f"  {TERRAIN_NAMES[terrain]:<6} {counts.get(int(terrain), 0):>4} hexes")

    decorations = result.decorations()
    overdraw = result.overdraw_decorations()
    print(f"\nEdge tiles: {len(decorations)} on the map, {len(overdraw)} along the overdraw bands")


if __name__ == "__main__":
    main()
