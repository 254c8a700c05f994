from tres_exporter.export.identifiers import NavigationIdCounter
from tests.helpers import tile


def test_counter_starts_above_highest_tile_id():
    counter = NavigationIdCounter([tile(0), tile(7), tile(3)])
    assert counter.allocate() == 8
    assert counter.allocate() == 9


def test_counter_without_tiles_starts_at_one():
    counter = NavigationIdCounter([])
    assert counter.allocate() == 1


def test_counters_are_independent():
    tiles = [tile(0), tile(1)]
    first = NavigationIdCounter(tiles)
    first.allocate()
    first.allocate()
    assert NavigationIdCounter(tiles).allocate() == 2
