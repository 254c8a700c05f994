from __future__ import annotations

from typing import Iterable, Optional

from tsx_manager import Image, MapObject, ObjectGroup, Property, Tile, Tileset


def rect(x: float, y: float, width: float, height: float, type: str = "") -> MapObject:
    return MapObject(id=0, type=type, x=x, y=y, width=width, height=height)


def poly(x: float, y: float, points, type: str = "") -> MapObject:
    return MapObject(id=0, type=type, x=x, y=y, polygon=list(points))


def tile(tile_id: int, *objects: MapObject, z_index: Optional[str] = None) -> Tile:
    result = Tile(id=tile_id)
    if objects:
        result.object_group = ObjectGroup(objects=list(objects))
    if z_index is not None:
        result.properties["z_index"] = Property("z_index", value=z_index)
    return result


def make_tileset(tiles: Iterable[Tile] = (), columns: int = 2, tilecount: int = 4,
                 name: str = "terrain") -> Tileset:
    """Spritesheet tileset of 16x16 tiles, 'columns' tiles wide."""
    tileset = Tileset(
        name=name,
        tile_width=16,
        tile_height=16,
        tilecount=tilecount,
        image_source=Image("terrain.png", width=16 * columns, height=32),
        properties={"relativePath": Property("relativePath", value="tilesets")},
    )
    for t in tiles:
        tileset.defined_tiles[t.id] = t
    return tileset


TSX = '''<?xml version="1.0" encoding="UTF-8"?>
<tileset version="1.10" tiledversion="1.10.2" name="terrain" tilewidth="16" tileheight="16"
         spacing="1" margin="2" tilecount="6" columns="3">
 <properties>
  <property name="relativePath" value="tilesets"/>
 </properties>
 <image source="terrain.png"{size}/>
 <tile id="1">
  <properties>
   <property name="z_index" value="1.5"/>
   <property name="layer" type="int" value="3"/>
  </properties>
  <objectgroup draworder="index" id="2">
   <object id="1" x="0" y="8" width="16" height="8"/>
   <object id="2" type="navigation" x="2" y="2">
    <polygon points="0,0 12,0 12,12"/>
   </object>
   <object id="3" class="one-way" x="0" y="0" width="16" height="2"/>
  </objectgroup>
 </tile>
 <tile id="4"/>
</tileset>
'''


def write_tsx(tmp_path, size=' width="53" height="36"'):
    path = tmp_path / "terrain.tsx"
    path.write_text(TSX.format(size=size), encoding="utf-8")
    return path
