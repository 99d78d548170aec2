"""
Procedural terrain maps on a hexagonal grid.
"""

__version__ = "0.1.0"
