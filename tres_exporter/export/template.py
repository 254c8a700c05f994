"""
TileSet resource rendering

=============================================================================
OUTPUT LAYOUT
=============================================================================

The exported file is a Godot 3 text resource with a single autotile
(tile_mode = 2) covering the whole spritesheet:

    [gd_resource type="TileSet" load_steps=3 format=2]

    [ext_resource path="res://..." type="Texture" id=1]

    [sub_resource ...]          <- one per generated shape
    ...
    [resource]
    0/name = "<tileset> 0"
    0/...                       <- fixed keys
    0/autotile/navpoly_map      <- Vector2 coordinate, SubResource pairs
    0/autotile/z_index_map      <- Vector3( x, y, z ) per tile
    0/shape                     <- first collision shape, or 0
    0/shapes                    <- one dictionary per collision shape

Empty lists render as "[  ]", exactly as the editor plugin writes them.

=============================================================================
"""

from ..model import TilesetLike
from .accumulator import ResourceAccumulator, ShapeAssignment
from .formatting import format_list, format_number

RESOURCE_HEADER = '[gd_resource type="TileSet" load_steps=3 format=2]'
TEXTURE_ID = 1
IDENTITY_TRANSFORM = "Transform2D( 1, 0, 0, 1, 0, 0 )"


def _vector2(x, y) -> str:
    return f"Vector2( {format_list((x, y))} )"


def _sub_resource(shape_id) -> str:
    return f"SubResource( {format_number(shape_id)} )"


def _bracket(items) -> str:
    return f"[ {', '.join(items)} ]"


def render_shape_assignment(assignment: ShapeAssignment) -> str:
    coordinate = assignment.coordinate
    return (
        '{\n'
        f'"autotile_coord": {_vector2(coordinate.x, coordinate.y)},\n'
        f'"one_way": {format_number(assignment.one_way)},\n'
        '"one_way_margin": 1.0,\n'
        f'"shape": {_sub_resource(assignment.shape_id)},\n'
        f'"shape_transform": {IDENTITY_TRANSFORM}\n'
        '}'
    )


def render_tileset(tileset: TilesetLike, image_path: str,
                   resources: ResourceAccumulator) -> str:
    """
    Build the complete .tres text.

    Parameters:
    -----------
    tileset : TilesetLike
        Source of the metadata (name, image size, margin, tile size, spacing)
    image_path : str
        Image path inside the Godot project, without the "res://" prefix
    resources : ResourceAccumulator
        Shapes and maps gathered while walking the tiles
    """
    margin = tileset.margin
    shape_resources = ''.join(record.text for record in resources.shape_resources)

    navpoly_map = []
    for coordinate, shape_id in resources.navpoly_map:
        navpoly_map.append(_vector2(coordinate.x, coordinate.y))
        navpoly_map.append(_sub_resource(shape_id))

    z_index_map = [f"Vector3( {format_list(entry)} )" for entry in resources.z_index_map]
    shapes = [render_shape_assignment(entry) for entry in resources.shape_assignments]

    if resources.first_shape_id is not None:
        first_shape = _sub_resource(resources.first_shape_id)
    else:
        first_shape = "0"

    region = format_list((
        margin,
        margin,
        tileset.image_width - margin,
        tileset.image_height - margin,
    ))

    return (
        f'{RESOURCE_HEADER}\n'
        f'\n'
        f'[ext_resource path="res://{image_path}" type="Texture" id={TEXTURE_ID}]\n'
        f'\n'
        f'{shape_resources}[resource]\n'
        f'0/name = "{tileset.name} 0"\n'
        f'0/texture = ExtResource( {TEXTURE_ID} )\n'
        f'0/tex_offset = Vector2( 0, 0 )\n'
        f'0/modulate = Color( 1, 1, 1, 1 )\n'
        f'0/region = Rect2( {region} )\n'
        f'0/tile_mode = 2\n'
        f'0/autotile/icon_coordinate = Vector2( 0, 0 )\n'
        f'0/autotile/tile_size = {_vector2(tileset.tile_width, tileset.tile_height)}\n'
        f'0/autotile/spacing = {format_number(tileset.tile_spacing)}\n'
        f'0/autotile/occluder_map = [  ]\n'
        f'0/autotile/navpoly_map = {_bracket(navpoly_map)}\n'
        f'0/autotile/priority_map = [  ]\n'
        f'0/autotile/z_index_map = {_bracket(z_index_map)}\n'
        f'0/occluder_offset = Vector2( 0, 0 )\n'
        f'0/navigation_offset = Vector2( 0, 0 )\n'
        f'0/shape_offset = Vector2( 0, 0 )\n'
        f'0/shape_transform = {IDENTITY_TRANSFORM}\n'
        f'0/shape = {first_shape}\n'
        f'0/shape_one_way = false\n'
        f'0/shape_one_way_margin = 1.0\n'
        f'0/shapes = {_bracket(shapes)}\n'
        f'0/z_index = 0\n'
    )
