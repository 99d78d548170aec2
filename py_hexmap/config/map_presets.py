"""
Named map presets.

Each preset fixes the grid size and region/terrain counts; the seed is
supplied at generation time.
"""

from typing import List

from .config import MapConfig

TEMPLATE_CLASSIC = {
    "width": 16,
    "height": 9,
    "num_regions": 18,
    "num_terrains": 6,
}

TEMPLATE_SMALL = {
    "width": 8,
    "height": 6,
    "num_regions": 6,
    "num_terrains": 6,
}

TEMPLATE_LARGE = {
    "width": 32,
    "height": 18,
    "num_regions": 60,
    "num_terrains": 6,
}

# Few terrains, so neighbors frequently run out of kinds
TEMPLATE_PATCHWORK = {
    "width": 16,
    "height": 9,
    "num_regions": 30,
    "num_terrains": 3,
}

PRESETS = {
    "classic": TEMPLATE_CLASSIC,
    "small": TEMPLATE_SMALL,
    "large": TEMPLATE_LARGE,
    "patchwork": TEMPLATE_PATCHWORK,
}


def get_preset(name: str, **overrides) -> MapConfig:
    """
    Get a map config by preset name.

    Args:
        name: Preset name
        **overrides: Fields to replace, e.g. ``seed``

    Returns:
        MapConfig for the preset
    """
    if name not in PRESETS:
        raise ValueError(f"Unknown preset: {name}. Available: {', '.join(list_presets())}")
    values = dict(PRESETS[name])
    values.update(overrides)
    return MapConfig(**values)


def list_presets() -> List[str]:
    """List all available preset names."""
    return list(PRESETS.keys())
