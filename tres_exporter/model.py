"""
Read-only view of the editor's tileset model

=============================================================================
WHY PROTOCOLS?
=============================================================================

The exporter never cares where a tileset comes from. Inside the editor it
is the host's own object model; standalone it is tsx_manager.Tileset; in
tests it is a handful of dataclasses. These protocols list the only fields
the exporter reads, so anything exposing them can be exported.

    TilesetLike
    ├── name, image, image_width, image_height
    ├── margin, tile_width, tile_height, tile_spacing
    ├── property(name)          -> projectRoot / relativePath
    └── tiles: [TileLike]
            ├── id
            ├── property(name)  -> z_index
            └── object_group: ObjectGroupLike | None
                    └── objects: [TileObjectLike]
                            ├── type
                            ├── x, y
                            ├── polygon: [(x, y)]  (relative to x, y)
                            └── width, height

=============================================================================
"""

from typing import Any, Optional, Protocol, Sequence, Tuple


class TileObjectLike(Protocol):
    type: str
    x: float
    y: float
    width: float
    height: float
    polygon: Sequence[Tuple[float, float]]


class ObjectGroupLike(Protocol):
    objects: Sequence[TileObjectLike]


class TileLike(Protocol):
    id: int
    object_group: Optional[ObjectGroupLike]

    def property(self, name: str) -> Any: ...


class TilesetLike(Protocol):
    name: str
    margin: int
    tile_width: int
    tile_height: int
    tile_spacing: int

    @property
    def tiles(self) -> Sequence[TileLike]: ...

    @property
    def image(self) -> str: ...

    @property
    def image_width(self) -> int: ...

    @property
    def image_height(self) -> int: ...

    def property(self, name: str) -> Any: ...
