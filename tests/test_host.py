import pytest

from tres_exporter.host import FormatRegistry, TextFile, TilesetFormat, get_res_path, tileset_columns
from tests.helpers import make_tileset


def test_columns_from_image_width():
    assert tileset_columns(make_tileset(columns=8)) == 8


def test_columns_ignore_partial_tile():
    tileset = make_tileset(columns=2)
    tileset.image_source.width = 40
    assert tileset_columns(tileset) == 2


def test_columns_with_spacing_and_margin():
    tileset = make_tileset()
    # 1px margin, 2px spacing: 1 + 16 + 2 + 16 + 2 + 16 = 53
    tileset.image_source.width = 53
    tileset.margin = 1
    tileset.tile_spacing = 2
    assert tileset_columns(tileset) == 3


def test_res_path_prefers_relative_path():
    assert get_res_path("/project", "tiles/", "/anywhere/terrain.png") == "tiles/terrain.png"
    assert get_res_path(None, "assets\\tiles", "/anywhere/terrain.png") == "assets/tiles/terrain.png"


def test_res_path_relative_to_project_root(tmp_path):
    image = tmp_path / "art" / "tiles" / "terrain.png"
    assert get_res_path(str(tmp_path), None, str(image)) == "art/tiles/terrain.png"


def test_res_path_outside_project_root(tmp_path):
    with pytest.raises(ValueError):
        get_res_path(str(tmp_path / "game"), None, str(tmp_path / "terrain.png"))


def test_res_path_defaults_to_file_name():
    assert get_res_path(None, None, "/anywhere/terrain.png") == "terrain.png"


def test_text_file_replaces_on_commit(tmp_path):
    destination = tmp_path / "out.tres"
    destination.write_text("old")

    with TextFile(destination) as file:
        file.write("new ")
        file.write("content")
        assert destination.read_text() == "old"
        file.commit()

    assert destination.read_text() == "new content"
    assert list(tmp_path.iterdir()) == [destination]


def test_text_file_discards_uncommitted_text(tmp_path):
    destination = tmp_path / "out.tres"

    with pytest.raises(RuntimeError):
        with TextFile(destination) as file:
            file.write("partial")
            raise RuntimeError("export failed")

    assert list(tmp_path.iterdir()) == []


def test_format_registry_lookup():
    registry = FormatRegistry()
    written = []
    custom = TilesetFormat("Custom format", "txt", lambda tileset, path: written.append(path))
    registry.register_tileset_format("Custom", custom)

    assert registry.get("Custom") is custom
    assert registry.get("Custom format") is custom
    assert registry.get("txt") is custom
    assert registry.get("missing") is None
    assert registry.names() == ["Custom"]

    registry.get("txt").write(None, "out.txt")
    assert written == ["out.txt"]
