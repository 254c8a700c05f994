"""
Godot TileSet exporter for Tiled tilesets

Requirements:
    pip install numpy pillow
"""

from .exporter import GodotTilesetExporter, ExportState, GODOT_TILESET_FORMAT, write_godot_tileset
from .host import FormatRegistry, TextFile, TilesetFormat, formats, get_res_path, tileset_columns
from .logging_config import setup_logging, get_logger

__version__ = "1.0.0"
__all__ = [
    "GodotTilesetExporter",
    "ExportState",
    "GODOT_TILESET_FORMAT",
    "write_godot_tileset",
    "FormatRegistry",
    "TextFile",
    "TilesetFormat",
    "formats",
    "get_res_path",
    "tileset_columns",
    "setup_logging",
    "get_logger",
]
