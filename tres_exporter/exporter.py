"""
Godot TileSet exporter

=============================================================================
EXPORT PIPELINE
=============================================================================

    IDLE ──> ITERATING ──> RENDERING ──> WRITTEN

ITERATING
    Walk the tiles in id order. For each tile:
    1. Record its z-index (if the tile has a numeric z_index property)
    2. Turn every object into a collision or navigation sub-resource
    3. Advance the autotile coordinate, once, objects or not

RENDERING
    Fill the .tres template with the accumulated shapes and maps.

WRITTEN
    Write the text through a TextFile and commit it in one step, so a
    failed export never leaves a half-written resource behind.

Every export starts from fresh state: two exports of the same tileset
produce identical files.

=============================================================================
USAGE
=============================================================================

    tileset = Tileset.load("terrain.tsx")
    GodotTilesetExporter(tileset, "terrain.tres").write()

Or through the registered format:

    formats.get("Godot").write(tileset, "terrain.tres")

=============================================================================
"""

import math
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .export import (
    AutotileCoordinate,
    NavigationIdCounter,
    ResourceAccumulator,
    ShapeRole,
    build_collision_shape,
    build_navigation_shape,
    next_coordinate,
    render_tileset,
)
from .host import TextFile, TilesetFormat, get_res_path, register_tileset_format, tileset_columns
from .logging_config import get_logger
from .model import TileLike, TileObjectLike, TilesetLike

logger = get_logger('exporter')

Z_INDEX_PROPERTIES = ("z_index", "godot:z_index")


class ExportState(Enum):
    IDLE = "idle"
    ITERATING = "iterating"
    RENDERING = "rendering"
    WRITTEN = "written"


def parse_z_index(value) -> Optional[float]:
    """Float value of a z_index property, None if it isn't a number."""
    try:
        z_index = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(z_index):
        return None
    return z_index


class GodotTilesetExporter:
    """
    Exports one tileset to a Godot 3 .tres TileSet resource.

    Parameters:
    -----------
    tileset : TilesetLike
        Tileset to export (tsx_manager.Tileset or the host's own model)
    file_name : str or Path
        Destination .tres file
    project_root, relative_path : str, optional
        Where the image lives in the Godot project. Default to the
        tileset's "projectRoot" / "relativePath" custom properties.
    """

    def __init__(self, tileset: TilesetLike, file_name: Union[str, Path],
                 project_root: Optional[str] = None,
                 relative_path: Optional[str] = None):
        self.tileset = tileset
        self.file_name = Path(file_name)

        if project_root is None:
            project_root = tileset.property("projectRoot")
        if relative_path is None:
            relative_path = tileset.property("relativePath")
        self.sprite_image_path = get_res_path(project_root, relative_path, tileset.image)

        self.state = ExportState.IDLE
        self.resources = ResourceAccumulator()
        self.navigation_ids: Optional[NavigationIdCounter] = None

    def write(self):
        """Run the whole export and write the file."""
        self.iterate_tiles()

        self.state = ExportState.RENDERING
        text = render_tileset(self.tileset, self.sprite_image_path, self.resources)

        self.write_to_file(text)
        self.state = ExportState.WRITTEN
        logger.info(f"Tileset exported successfully to {self.file_name}")

    def write_to_file(self, text: str):
        with TextFile(self.file_name) as file:
            file.write(text)
            file.commit()

    # =========================================================================
    # TILE ITERATION
    # =========================================================================

    def iterate_tiles(self):
        """
        Walk all tiles, filling self.resources.

        Shapes of a tile are recorded at the tile's own coordinate; the
        coordinate moves on only after all of its objects are handled.
        """
        self.state = ExportState.ITERATING
        self.resources = ResourceAccumulator()

        tiles = self.tileset.tiles
        columns = tileset_columns(self.tileset)
        self.navigation_ids = NavigationIdCounter(tiles)

        coordinate = AutotileCoordinate(0, 0)
        for tile in tiles:
            self.export_z_index(tile, coordinate)

            if tile.object_group is not None:
                for obj in tile.object_group.objects:
                    self.export_object(tile, obj, coordinate)

            coordinate = next_coordinate(coordinate, columns)

        logger.debug(f"Walked {len(tiles)} tiles, "
                     f"{len(self.resources.shape_resources)} shapes generated")

    def export_z_index(self, tile: TileLike, coordinate: AutotileCoordinate):
        raw_value = None
        for name in Z_INDEX_PROPERTIES:
            raw_value = tile.property(name)
            if raw_value is not None:
                break
        if raw_value is None:
            return

        z_index = parse_z_index(raw_value)
        if z_index is None:
            logger.warning(
                f"Skipping export of z_index on tile with id {tile.id} because it "
                f"can not be converted to float. value: {raw_value}"
            )
            return
        self.resources.add_z_index(coordinate, z_index)

    def export_object(self, tile: TileLike, obj: TileObjectLike,
                      coordinate: AutotileCoordinate):
        role = ShapeRole.classify(obj.type)

        if not role.is_collision:
            # The id is taken even when the object turns out to have no shape
            shape_id = self.navigation_ids.allocate()
            record = build_navigation_shape(shape_id, obj, tile_id=tile.id)
            if record is not None:
                self.resources.add_navigation(record, coordinate)
            return

        record = build_collision_shape(tile, obj, role)
        if record is not None:
            self.resources.add_collision(
                record, coordinate, one_way=role is ShapeRole.COLLISION_ONE_WAY
            )


def write_godot_tileset(tileset: TilesetLike, file_name: Union[str, Path]):
    """Write callback of the registered "Godot" format."""
    GodotTilesetExporter(tileset, file_name).write()


GODOT_TILESET_FORMAT = TilesetFormat(
    name="Godot Tileset format",
    extension="tres",
    write=write_godot_tileset,
)

register_tileset_format("Godot", GODOT_TILESET_FORMAT)
