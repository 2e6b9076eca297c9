import pytest

from data import LayerDescription
from errors import UnknownTileId, TileOutOfBounds
from tests.helpers import FakeAtlas, build_simple_map
from tilemap import build_map, TileGrid
from tiles import EMPTY_TILE, NO_PROPERTIES, SolidTile


def test_unset_cells_are_empty():
    tile_map = build_simple_map([{(0, 0): 1}, {}])
    assert tile_map.tile_at(3, 2) is EMPTY_TILE
    assert tile_map.tile_at(3, 2).is_empty
    for layer in tile_map.layers:
        assert layer.tile_at(2, 1) is EMPTY_TILE


def test_explicit_zero_is_empty():
    tile_map = build_simple_map([{(1, 1): 0}])
    assert tile_map.tile_at(1, 1) is EMPTY_TILE


def test_combined_takes_topmost_non_empty_tile():
    tile_map = build_simple_map([{(2, 1): 1}, {}])
    a = tile_map.layers[0].tile_at(2, 1)
    assert tile_map.tile_at(2, 1) is a

    tile_map = build_simple_map([{(2, 1): 1}, {(2, 1): 2}])
    assert tile_map.tile_at(2, 1) is tile_map.tile_types[2]
    assert tile_map.layer_tile_at(0, 2, 1) is tile_map.tile_types[1]


def test_empty_upper_layer_does_not_hide_lower_tile():
    tile_map = build_simple_map([{(0, 0): 3}, {(0, 0): 0}, {(1, 0): 4}])
    assert tile_map.combined.id_at(0, 0) == 3
    assert tile_map.combined.id_at(1, 0) == 4
    assert tile_map.combined.id_at(2, 0) == 0


def test_combined_matches_topmost_layer_everywhere():
    layers = [
        {(x, y): 1 for x in range(4) for y in range(3)},
        {(0, 0): 2, (3, 2): 2},
        {(0, 0): 3, (1, 2): 4},
    ]
    tile_map = build_simple_map(layers)
    for x in range(4):
        for y in range(3):
            expected = 0
            for layer in layers:
                if layer.get((x, y), 0):
                    expected = layer[(x, y)]
            assert tile_map.combined.id_at(x, y) == expected


def test_unknown_tile_id_aborts_build():
    with pytest.raises(UnknownTileId) as excinfo:
        build_simple_map([{(0, 0): 1}, LayerDescription("walls", {(2, 1): 99})])
    assert excinfo.value.tile_id == 99
    assert excinfo.value.layer == "walls"
    assert excinfo.value.position == (2, 1)


def test_tile_outside_map_fails():
    with pytest.raises(TileOutOfBounds):
        build_simple_map([{(4, 0): 1}])


def test_id_zero_is_empty_even_if_a_tileset_defines_it():
    atlas = FakeAtlas("a")
    tile_types = {0: SolidTile(atlas, (0, 0, 8, 8)), 1: SolidTile(atlas, (8, 0, 8, 8))}
    tile_map = build_map(2, 2, 8, 8, tile_types, [{(0, 0): 0, (1, 0): 1}])
    assert tile_map.tile_at(0, 0) is EMPTY_TILE
    assert tile_map.tile_types[0] is EMPTY_TILE
    assert tile_map.tile_at(1, 0).rect == (8, 0, 8, 8)


def test_layers_keep_order_and_dimensions():
    tile_map = build_simple_map([
        LayerDescription("ground", {(0, 0): 1}),
        LayerDescription("decor", {}),
        {(1, 1): 2},
    ])
    assert [layer.name for layer in tile_map.layers] == ["ground", "decor", 2]
    for grid in tile_map.layers + [tile_map.combined]:
        assert (grid.width, grid.height) == (4, 3)
        assert len(grid.cells) == 4
        assert all(len(column) == 3 for column in grid.cells)


def test_cells_share_tile_types():
    tile_map = build_simple_map([{(0, 0): 2, (3, 2): 2}])
    assert tile_map.tile_at(0, 0) is tile_map.tile_at(3, 2)


def test_properties_at():
    tile_map = build_simple_map([{(0, 0): 1}, {(1, 0): 4}])
    assert tile_map.properties_at(0, 0) == {"name": "grass"}
    assert tile_map.properties_at(1, 0) == {"solid": True}
    assert tile_map.properties_at(2, 0) == {}
    assert tile_map.tile_properties == {1: {"name": "grass"}, 4: {"solid": True}}


def test_queries_outside_map():
    tile_map = build_simple_map([{(0, 0): 1}])
    assert tile_map.tile_at(-1, 0) is None
    assert tile_map.tile_at(4, 0) is None
    assert tile_map.properties_at(0, 3) == {}
    assert tile_map.layer_tile_at(0, 9, 9) is None


def test_pixel_size():
    tile_map = build_simple_map([], width=5, height=2, tile_size=32)
    assert tile_map.pixel_size == (160, 64)


def test_grid_iterates_every_cell():
    grid = TileGrid(2, 3, {0: EMPTY_TILE})
    cells = list(grid)
    assert len(cells) == 6
    assert cells[0] == (0, 0, 0)
    assert grid[(1, 2)] is EMPTY_TILE


def test_properties_outside_map_are_the_shared_read_only_mapping():
    tile_map = build_simple_map([{(0, 0): 1}])
    outside = tile_map.properties_at(-1, -1)
    assert outside is NO_PROPERTIES
    assert outside is tile_map.properties_at(2, 2)
    with pytest.raises(TypeError):
        outside["solid"] = True
