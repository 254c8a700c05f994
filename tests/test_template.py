from tres_exporter.export.accumulator import ResourceAccumulator
from tres_exporter.export.coordinates import AutotileCoordinate
from tres_exporter.export.shapes import build_collision_shape, build_navigation_shape
from tres_exporter.export.template import render_shape_assignment, render_tileset
from tests.helpers import make_tileset, rect, tile


def lines_of(text: str) -> dict:
    return dict(line.split(" = ", 1) for line in text.splitlines() if line.startswith("0/"))


def test_empty_tileset_renders_empty_lists():
    text = render_tileset(make_tileset(), "terrain.png", ResourceAccumulator())
    keys = lines_of(text)
    assert keys["0/autotile/navpoly_map"] == "[  ]"
    assert keys["0/autotile/z_index_map"] == "[  ]"
    assert keys["0/shapes"] == "[  ]"
    assert keys["0/shape"] == "0"
    assert "[sub_resource" not in text
    assert text.startswith(
        '[gd_resource type="TileSet" load_steps=3 format=2]\n'
        '\n'
        '[ext_resource path="res://terrain.png" type="Texture" id=1]\n'
        '\n'
        '[resource]\n'
    )
    assert text.endswith("0/z_index = 0\n")


def test_metadata_fields():
    tileset = make_tileset(columns=4)
    tileset.margin = 2
    tileset.tile_spacing = 1
    keys = lines_of(render_tileset(tileset, "terrain.png", ResourceAccumulator()))
    assert keys["0/name"] == '"terrain 0"'
    assert keys["0/region"] == "Rect2( 2, 2, 62, 30 )"
    assert keys["0/autotile/tile_size"] == "Vector2( 16, 16 )"
    assert keys["0/autotile/spacing"] == "1"


def test_first_collision_shape_is_default_shape():
    resources = ResourceAccumulator()
    resources.add_navigation(build_navigation_shape(9, rect(0, 0, 4, 4)), AutotileCoordinate(0, 0))
    resources.add_collision(build_collision_shape(tile(5), rect(0, 0, 4, 4)), AutotileCoordinate(1, 2), False)
    resources.add_collision(build_collision_shape(tile(6), rect(0, 0, 4, 4)), AutotileCoordinate(0, 3), True)

    keys = lines_of(render_tileset(make_tileset(), "terrain.png", resources))
    assert keys["0/shape"] == "SubResource( 5 )"
    assert keys["0/autotile/navpoly_map"] == "[ Vector2( 0, 0 ), SubResource( 9 ) ]"


def test_shape_assignment_entry():
    resources = ResourceAccumulator()
    resources.add_collision(build_collision_shape(tile(6), rect(0, 0, 4, 4)), AutotileCoordinate(1, 2), True)
    assert render_shape_assignment(resources.shape_assignments[0]) == (
        '{\n'
        '"autotile_coord": Vector2( 1, 2 ),\n'
        '"one_way": true,\n'
        '"one_way_margin": 1.0,\n'
        '"shape": SubResource( 6 ),\n'
        '"shape_transform": Transform2D( 1, 0, 0, 1, 0, 0 )\n'
        '}'
    )


def test_lists_have_no_trailing_separators():
    resources = ResourceAccumulator()
    for x in range(3):
        coordinate = AutotileCoordinate(x, 0)
        resources.add_collision(build_collision_shape(tile(x), rect(0, 0, 4, 4)), coordinate, False)
        resources.add_navigation(build_navigation_shape(10 + x, rect(0, 0, 4, 4)), coordinate)
        resources.add_z_index(coordinate, 2.0)

    text = render_tileset(make_tileset(), "terrain.png", resources)
    assert ", ]" not in text
    assert ",  ]" not in text
    assert "} ]" in text
    assert "0/autotile/z_index_map = [ Vector3( 0, 0, 2 ), Vector3( 1, 0, 2 ), Vector3( 2, 0, 2 ) ]" in text
