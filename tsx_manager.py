#!/usr/bin/env python3

"""
Module for reading TSX files (Tiled external tilesets)

=============================================================================
WHAT IS TSX?
=============================================================================

TSX is the external tileset format of the Tiled Map Editor. Instead of
embedding a tileset inside every map, Tiled can store it in its own XML
file so many maps share it. A TSX file describes:

- Tile size, spacing and margin
- The spritesheet image the tiles are cut from
- Per-tile metadata: custom properties and collision objects

This module provides read support for TSX files so that a tileset can be
exported without running the Tiled editor itself.

=============================================================================
TSX FILE STRUCTURE
=============================================================================

    <tileset version="1.10" name="terrain" tilewidth="16" tileheight="16"
             spacing="0" margin="0" tilecount="64" columns="8">
        <properties>
            <property name="relativePath" value="tilesets"/>
        </properties>
        <image source="terrain.png" width="128" height="128"/>
        <tile id="3">
            <properties>
                <property name="z_index" value="1"/>
            </properties>
            <objectgroup draworder="index" id="2">
                <object id="1" x="0" y="8" width="16" height="8"/>
                <object id="2" type="navigation" x="0" y="0">
                    <polygon points="0,0 16,0 16,8 0,8"/>
                </object>
            </objectgroup>
        </tile>
    </tileset>

=============================================================================
TILE ENUMERATION
=============================================================================

Only tiles carrying metadata get a <tile> element. The editor however
enumerates EVERY tile of a spritesheet tileset, in id order. Tileset.tiles
does the same: ids 0..tilecount-1, with bare Tile objects filling the gaps.

=============================================================================
"""

import xml.etree.ElementTree as ET
from typing import Optional, List, Dict, Any, Tuple, Union
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image as PILImage


# =============================================================================
# PROPERTY CLASS
# =============================================================================

@dataclass
class Property:
    """
    Custom property attached to a tileset, tile or object.

    Values are converted to Python types according to their declared type.
    Untyped properties stay strings, which is what the z-index lookup
    expects: a string that has to parse as a float.
    """
    name: str                    # Property name (key)
    type: str = "string"         # Value type
    value: Any = None            # The actual value

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'Property':
        """
        Parse property from XML element.

        XML format:
            <property name="z_index" value="1.5"/>   (type defaults to string)
            <property name="solid" type="bool" value="true"/>
        """
        prop_type = elem.get('type', 'string')
        value = elem.get('value')
        if value is None:
            # Multi-line string properties keep their value as element text
            value = elem.text or ''

        if prop_type == 'int':
            value = int(value)
        elif prop_type == 'float':
            value = float(value)
        elif prop_type == 'bool':
            value = value.lower() == 'true'

        return cls(name=elem.get('name'), type=prop_type, value=value)


def _parse_properties(elem: ET.Element) -> Dict[str, Property]:
    properties = {}
    props_elem = elem.find('properties')
    if props_elem is not None:
        for prop_elem in props_elem.findall('property'):
            prop = Property.from_xml(prop_elem)
            properties[prop.name] = prop
    return properties


# =============================================================================
# IMAGE CLASS
# =============================================================================

@dataclass
class Image:
    """
    Spritesheet image reference.

    source: Path to image file (relative to the TSX file)
    width:  Image width in pixels
    height: Image height in pixels
    """
    source: str
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'Image':
        """Parse image from XML element."""
        return cls(
            source=elem.get('source', ''),
            width=int(elem.get('width')) if elem.get('width') else None,
            height=int(elem.get('height')) if elem.get('height') else None,
        )

    def read_size(self, base_dir: Path):
        """
        Fill in missing width/height by opening the image file.

        Older TSX files (and hand-written ones) may omit the image size,
        but the exported region and the column count both depend on it.
        """
        if self.width and self.height:
            return
        with PILImage.open(base_dir / self.source) as img:
            self.width, self.height = img.size


# =============================================================================
# MAP OBJECT CLASS
# =============================================================================

@dataclass
class MapObject:
    """
    Collision object attached to a tile.

    ==========================================================================
    OBJECT SHAPES
    ==========================================================================

    Rectangle:
        x, y, width, height define the bounds

    Polygon:
        x, y is the anchor, polygon holds the points RELATIVE to it

        <object id="2" x="4" y="4">
            <polygon points="0,0 8,0 8,8"/>
        </object>

        Absolute vertices: (4,4) (12,4) (12,12)

    The 'type' decides what the object means on export:
        "navigation" -> walkable area
        "one-way"    -> collision only blocking from one side
        anything     -> solid collision

    Tiled 1.9 renamed the attribute to 'class'; both are read.
    ==========================================================================
    """
    id: int
    name: str = ""
    type: str = ""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    polygon: List[Tuple[float, float]] = field(default_factory=list)
    properties: Dict[str, Property] = field(default_factory=dict)

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'MapObject':
        """Parse object from XML element."""
        obj = cls(
            id=int(elem.get('id', 0)),
            name=elem.get('name', ''),
            type=elem.get('type', elem.get('class', '')),
            x=float(elem.get('x', 0)),
            y=float(elem.get('y', 0)),
            width=float(elem.get('width', 0)),
            height=float(elem.get('height', 0)),
        )

        polygon_elem = elem.find('polygon')
        if polygon_elem is not None:
            obj.polygon = parse_points(polygon_elem.get('points', ''))

        obj.properties = _parse_properties(elem)
        return obj


def parse_points(points: str) -> List[Tuple[float, float]]:
    """Parse a Tiled point list: "x1,y1 x2,y2 ..."."""
    result = []
    for pair in points.split():
        px, py = pair.split(',')
        result.append((float(px), float(py)))
    return result


# =============================================================================
# OBJECT GROUP CLASS
# =============================================================================

@dataclass
class ObjectGroup:
    """Objects of a single tile, in document order."""
    id: int = 0
    objects: List[MapObject] = field(default_factory=list)

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'ObjectGroup':
        group = cls(id=int(elem.get('id', 0)))
        for obj_elem in elem.findall('object'):
            group.objects.append(MapObject.from_xml(obj_elem))
        return group


# =============================================================================
# TILE CLASS
# =============================================================================

@dataclass
class Tile:
    """
    Individual tile within a tileset.

    The 'id' is LOCAL to the tileset (0-based index into the spritesheet).
    object_group is None for tiles without collision objects.
    """
    id: int
    type: str = ""
    properties: Dict[str, Property] = field(default_factory=dict)
    object_group: Optional[ObjectGroup] = None

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'Tile':
        """Parse tile from XML element."""
        tile = cls(id=int(elem.get('id', 0)))
        tile.type = elem.get('type', elem.get('class', ''))
        tile.properties = _parse_properties(elem)

        group_elem = elem.find('objectgroup')
        if group_elem is not None:
            tile.object_group = ObjectGroup.from_xml(group_elem)

        return tile

    def property(self, name: str) -> Any:
        """Raw property value, or None when the tile does not define it."""
        prop = self.properties.get(name)
        return prop.value if prop is not None else None


# =============================================================================
# TILESET CLASS
# =============================================================================

@dataclass
class Tileset:
    """
    Spritesheet tileset loaded from a TSX file.

    ==========================================================================
    SPACING AND MARGIN
    ==========================================================================

    margin = pixels around the EDGE of the entire image
    spacing = pixels BETWEEN tiles

    +--+===+===+===+--+
    |  | 0 | 1 | 2 |  |  <- margin
    +--+===+===+===+--+
    |  | 3 | 4 | 5 |  |
    +--+===+===+===+--+
         ^
         spacing between tiles

    ==========================================================================
    """
    name: str
    tile_width: int
    tile_height: int
    tilecount: int = 0
    columns: int = 0
    tile_spacing: int = 0
    margin: int = 0
    image_source: Optional[Image] = None
    defined_tiles: Dict[int, Tile] = field(default_factory=dict)
    properties: Dict[str, Property] = field(default_factory=dict)
    source: Optional[Path] = None                    # TSX file path

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'Tileset':
        """Parse tileset from the <tileset> root element."""
        tileset = cls(
            name=elem.get('name', ''),
            tile_width=int(elem.get('tilewidth', 0)),
            tile_height=int(elem.get('tileheight', 0)),
            tilecount=int(elem.get('tilecount', 0)),
            columns=int(elem.get('columns', 0)),
            tile_spacing=int(elem.get('spacing', 0)),
            margin=int(elem.get('margin', 0)),
        )
        tileset.properties = _parse_properties(elem)

        img_elem = elem.find('image')
        if img_elem is not None:
            tileset.image_source = Image.from_xml(img_elem)

        for tile_elem in elem.findall('tile'):
            tile = Tile.from_xml(tile_elem)
            tileset.defined_tiles[tile.id] = tile

        return tileset

    @classmethod
    def load(cls, filepath: Union[str, Path]) -> 'Tileset':
        """
        Load a TSX file from disk.

        Raises:
        -------
        FileNotFoundError : If the TSX (or its image, when its size has to
                            be read from disk) doesn't exist
        xml.etree.ElementTree.ParseError : If XML is malformed
        """
        filepath = Path(filepath)
        root = ET.parse(filepath).getroot()

        tileset = cls.from_xml(root)
        tileset.source = filepath

        if tileset.image_source is not None:
            tileset.image_source.read_size(filepath.parent)

        return tileset

    # -------------------------------------------------------------------------
    # Read-only view used by the exporter
    # -------------------------------------------------------------------------

    @property
    def tiles(self) -> List[Tile]:
        """Every tile of the tileset in id order, metadata or not."""
        count = max(self.tilecount, max(self.defined_tiles, default=-1) + 1)
        return [self.defined_tiles.get(tile_id) or Tile(id=tile_id)
                for tile_id in range(count)]

    @property
    def image(self) -> str:
        """Absolute path of the spritesheet image."""
        if self.image_source is None:
            return ''
        base_dir = self.source.parent if self.source else Path('.')
        return str((base_dir / self.image_source.source).resolve())

    @property
    def image_width(self) -> int:
        return self.image_source.width or 0 if self.image_source else 0

    @property
    def image_height(self) -> int:
        return self.image_source.height or 0 if self.image_source else 0

    def property(self, name: str) -> Any:
        """Raw custom property value, or None when undefined."""
        prop = self.properties.get(name)
        return prop.value if prop is not None else None
