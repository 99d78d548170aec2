"""
Configuration for map generation.
"""

from .config import MapConfig, Settings, settings
from .map_presets import PRESETS, get_preset, list_presets

__all__ = ['MapConfig', 'Settings', 'settings', 'PRESETS', 'get_preset', 'list_presets']
