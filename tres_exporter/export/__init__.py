"""Tile walking building blocks: coordinates, ids, shapes and rendering"""

from .coordinates import AutotileCoordinate, next_coordinate
from .identifiers import NavigationIdCounter
from .shapes import ShapeRole, ShapeRecord, build_collision_shape, build_navigation_shape
from .accumulator import ResourceAccumulator, ShapeAssignment
from .template import render_tileset
from .formatting import format_number

__all__ = [
    "AutotileCoordinate",
    "next_coordinate",
    "NavigationIdCounter",
    "ShapeRole",
    "ShapeRecord",
    "build_collision_shape",
    "build_navigation_shape",
    "ResourceAccumulator",
    "ShapeAssignment",
    "render_tileset",
    "format_number",
]
