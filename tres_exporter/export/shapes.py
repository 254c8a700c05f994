"""
Collision and navigation shape generation

=============================================================================
FROM TILED OBJECTS TO GODOT SUB-RESOURCES
=============================================================================

Every object drawn in a tile's collision editor becomes one sub-resource
in the exported TileSet:

    Tiled object                      Godot sub-resource
    ------------------------------    ------------------------------------
    type "" / anything   (solid)  ->  ConvexPolygonShape2D
    type "one-way"                ->  ConvexPolygonShape2D  (one_way=true)
    type "navigation"             ->  NavigationPolygon

Geometry is read as-is, no transforms:

    POLYGON: points are relative to the object anchor
        anchor (5,5), points (0,0) (10,0) (10,10) (0,10)
        -> 5, 5, 15, 5, 15, 15, 5, 15

    RECTANGLE: four corners, clockwise from top-left
        (2,3) 4x6
        -> TL 2, 3   TR 6, 3   BR 6, 9   BL 2, 9

Anything else (points, zero-sized rectangles, polylines) produces no
shape at all.

=============================================================================
SHAPE IDS
=============================================================================

Collision shapes take the id of the tile they belong to. Navigation
polygons get ids from NavigationIdCounter, which starts above the highest
tile id so both kinds never clash.

=============================================================================
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from ..model import TileLike, TileObjectLike
from .formatting import format_list, format_number


class ShapeRole(Enum):
    COLLISION = "collision"
    COLLISION_ONE_WAY = "one-way"
    NAVIGATION = "navigation"

    @classmethod
    def classify(cls, object_type: str) -> 'ShapeRole':
        """Role of a tile object from its Tiled type/class."""
        if object_type == "navigation":
            return cls.NAVIGATION
        if object_type == "one-way":
            return cls.COLLISION_ONE_WAY
        return cls.COLLISION

    @property
    def is_collision(self) -> bool:
        return self is not ShapeRole.NAVIGATION


@dataclass(frozen=True)
class ShapeRecord:
    """A generated sub-resource block and where it came from."""
    identifier: int
    role: ShapeRole
    tile_id: Optional[int]
    text: str


def object_vertices(obj: TileObjectLike) -> Optional[np.ndarray]:
    """
    Absolute vertices of an object as an (n, 2) array.

    Returns None for objects with neither a polygon nor a positive size.
    """
    if len(obj.polygon) > 0:
        return np.asarray(obj.polygon, dtype=float) + (obj.x, obj.y)

    if obj.width > 0 and obj.height > 0:
        left, top = obj.x, obj.y
        right, bottom = obj.x + obj.width, obj.y + obj.height
        return np.array([
            (left, top),
            (right, top),
            (right, bottom),
            (left, bottom),
        ], dtype=float)

    return None


def _vector_array(vertices: np.ndarray) -> str:
    return f"PoolVector2Array( {format_list(vertices.ravel().tolist())} )"


def build_collision_shape(tile: TileLike, obj: TileObjectLike,
                          role: ShapeRole = ShapeRole.COLLISION) -> Optional[ShapeRecord]:
    """ConvexPolygonShape2D block for a solid or one-way object."""
    vertices = object_vertices(obj)
    if vertices is None:
        return None

    text = (
        f'[sub_resource type="ConvexPolygonShape2D" id={format_number(tile.id)}]\n'
        f'points = {_vector_array(vertices)}\n'
        f'\n'
    )
    return ShapeRecord(identifier=tile.id, role=role, tile_id=tile.id, text=text)


def build_navigation_shape(shape_id: int, obj: TileObjectLike,
                           tile_id: Optional[int] = None) -> Optional[ShapeRecord]:
    """
    NavigationPolygon block for a navigation object.

    The polygons list is the identity index sequence over the vertices;
    there is no convex decomposition, the whole outline is one polygon.
    """
    vertices = object_vertices(obj)
    if vertices is None:
        return None

    indices = format_list(range(len(vertices)))
    text = (
        f'[sub_resource type="NavigationPolygon" id={format_number(shape_id)}]\n'
        f'vertices = {_vector_array(vertices)}\n'
        f'polygons = [ PoolIntArray( {indices} ) ]\n'
        f'\n'
    )
    return ShapeRecord(identifier=shape_id, role=ShapeRole.NAVIGATION,
                       tile_id=tile_id, text=text)
