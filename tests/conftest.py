from __future__ import annotations

from collections.abc import Iterator

import pytest

from tres_exporter.host import formats
from tres_exporter.exporter import GODOT_TILESET_FORMAT


@pytest.fixture(autouse=True)
def restore_format_registry() -> Iterator[None]:
    """Keep the global format registry as the exporter module left it."""
    yield
    formats._formats.clear()
    formats.register_tileset_format("Godot", GODOT_TILESET_FORMAT)
