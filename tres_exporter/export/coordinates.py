"""
Autotile coordinate mapping

=============================================================================
ROW-MAJOR ENUMERATION
=============================================================================

Godot addresses per-tile data of an autotile by the tile's (column, row)
position inside the spritesheet. Tiles are visited in id order, so the
coordinate simply walks the grid row by row:

    columns = 3

    +-------+-------+-------+
    | (0,0) | (1,0) | (2,0) |   <- tiles 0, 1, 2
    +-------+-------+-------+
    | (0,1) | (1,1) | (2,1) |   <- tiles 3, 4, 5
    +-------+-------+-------+

Tile i ends up at (i mod columns, i div columns).

=============================================================================
"""

from typing import NamedTuple


class AutotileCoordinate(NamedTuple):
    """(column, row) of a tile in its spritesheet."""
    x: int = 0
    y: int = 0


def next_coordinate(current: AutotileCoordinate, columns: int) -> AutotileCoordinate:
    """
    Coordinate of the tile following 'current'.

    Wraps to the start of the next row when the column after 'current'
    would fall outside the spritesheet.

    Raises:
    -------
    ValueError : If columns < 1 (image narrower than a single tile)
    """
    if columns < 1:
        raise ValueError(f"Tileset must have at least one column, got {columns}")

    if current.x + 1 >= columns:
        return AutotileCoordinate(0, current.y + 1)
    return AutotileCoordinate(current.x + 1, current.y)
