"""Navigation shape identifier allocation."""

from typing import Iterable

from ..model import TileLike


class NavigationIdCounter:
    """
    Hands out sub-resource ids for navigation polygons.

    Collision shapes reuse their tile's id, so navigation ids start right
    above the highest tile id and count up once per navigation object,
    across the whole tileset. One counter belongs to one export run.
    """

    def __init__(self, tiles: Iterable[TileLike]):
        self.current = max((tile.id for tile in tiles), default=0)

    def allocate(self) -> int:
        self.current += 1
        return self.current
