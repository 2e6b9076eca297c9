from tilemap import build_map
from tileset import resolve_tileset


class FakeAtlas:
    """Stand-in atlas handle; only the size is ever asked for."""

    def __init__(self, name, size=(64, 64)):
        self.name = name
        self.size = size

    def get_size(self):
        return self.size

    def __repr__(self):
        return f"FakeAtlas({self.name!r})"


class RecordingSink:
    """Draw sink that remembers every blit in call order."""

    def __init__(self):
        self.calls = []

    def blit(self, handle, dest, source_rect, tint, rotation, origin, scale, effects, depth):
        self.calls.append((handle, dest, source_rect, tint, rotation, origin, scale, effects, depth))

    @property
    def destinations(self):
        return [call[1] for call in self.calls]


def build_simple_map(layers, width=4, height=3, tile_size=32, atlas=None):
    """Build a map over one 2x2-tile atlas (ids 1-4) with 32px tiles."""
    atlas = atlas or FakeAtlas("terrain")
    tile_types = resolve_tileset(atlas, (2 * tile_size, 2 * tile_size), tile_size, tile_size, 1,
                                 tile_properties={0: {"name": "grass"}, 3: {"solid": True}})
    return build_map(width, height, tile_size, tile_size, tile_types, layers)
