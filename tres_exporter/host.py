"""
Editor host services used by the exporter

=============================================================================
WHAT THE HOST PROVIDES
=============================================================================

Inside the editor, a tileset export plugin gets a few services from its
scripting host. Running standalone, this module provides them:

- Format registration: a name, a file extension and a write callback
  that the host calls with (tileset, destination path)
- Image path resolution: where the spritesheet lives inside the Godot
  project ("res://...")
- Column count of a spritesheet
- A text file handle that only replaces the destination on commit()

=============================================================================
"""

import math
import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union


def tileset_columns(tileset) -> int:
    """
    Number of tile columns in the spritesheet.

    A trailing partial column (image not wide enough for a full tile)
    is not counted.
    """
    image_width = tileset.image_width + tileset.tile_spacing - tileset.margin
    tile_width = tileset.tile_width + tileset.tile_spacing
    if tile_width <= 0:
        return 0
    return math.floor(image_width / tile_width)


def get_res_path(project_root: Optional[str], relative_path: Optional[str],
                 image_path: str) -> str:
    """
    Path of the tileset image inside the Godot project, without "res://".

    Resolution order:
    1. relative_path set  -> relative_path/<image file name>
    2. project_root set   -> image path relative to the project root
    3. neither            -> image file name (image next to project.godot)

    Raises:
    -------
    ValueError : If the image is outside project_root
    """
    file_name = Path(image_path).name

    if relative_path:
        relative_path = relative_path.replace('\\', '/').strip('/')
        return posixpath.join(relative_path, file_name) if relative_path else file_name

    if project_root:
        root = Path(project_root).resolve()
        image = Path(image_path).resolve()
        try:
            return image.relative_to(root).as_posix()
        except ValueError:
            raise ValueError(
                f"Tileset image {image} is not inside the Godot project {root}"
            ) from None

    return file_name


class TextFile:
    """
    Write-only text file committed in one step.

    Text goes to a temporary file next to the destination; commit()
    moves it over the destination. Leaving the 'with' block without
    committing discards everything written.

        with TextFile("terrain.tres") as file:
            file.write(text)
            file.commit()
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.temp_path = self.path.with_name(f".{self.path.name}.tmp")
        self._handle = None
        self.committed = False

    def __enter__(self) -> 'TextFile':
        self._handle = open(self.temp_path, 'w', encoding='utf-8', newline='\n')
        return self

    def write(self, text: str):
        self._handle.write(text)

    def commit(self):
        self._handle.flush()
        os.fsync(self._handle.fileno())
        self._handle.close()
        os.replace(self.temp_path, self.path)
        self.committed = True

    def __exit__(self, exc_type, exc, tb):
        if not self.committed:
            self._handle.close()
            self.temp_path.unlink(missing_ok=True)
        return False


# =============================================================================
# FORMAT REGISTRY
# =============================================================================

@dataclass(frozen=True)
class TilesetFormat:
    """A custom tileset export format, as registered with the editor."""
    name: str
    extension: str
    write: Callable[[Any, str], None]


class FormatRegistry:
    """Registered tileset formats, by short name."""

    def __init__(self):
        self._formats: Dict[str, TilesetFormat] = {}

    def register_tileset_format(self, short_name: str, tileset_format: TilesetFormat):
        self._formats[short_name] = tileset_format

    def get(self, key: str) -> Optional[TilesetFormat]:
        """Look a format up by short name, display name or extension."""
        if key in self._formats:
            return self._formats[key]
        for tileset_format in self._formats.values():
            if key in (tileset_format.name, tileset_format.extension):
                return tileset_format
        return None

    def names(self) -> List[str]:
        return list(self._formats)


formats = FormatRegistry()
register_tileset_format = formats.register_tileset_format
