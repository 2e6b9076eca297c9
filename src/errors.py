class TileMapError(Exception):
    """Base class for errors raised while building a tile map."""


class UnknownTileId(TileMapError):
    """A layer references a tile id that no tileset defines."""

    def __init__(self, tile_id, layer=None, position=None):
        self.tile_id = tile_id
        self.layer = layer
        self.position = position
        where = ""
        if layer is not None:
            where += f" in layer {layer!r}"
        if position is not None:
            where += f" at {position}"
        super().__init__(f"Unknown tile id {tile_id}{where}")


class MalformedTileset(TileMapError):
    """A tileset yields no tiles or declares properties for a tile it does not have."""

    def __init__(self, name, reason):
        self.name = name
        self.reason = reason
        super().__init__(f"Malformed tileset {name!r}: {reason}")


class AtlasLoadFailure(TileMapError):
    """The atlas image of a tileset could not be loaded."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load atlas {path}: {reason}")


class TileOutOfBounds(TileMapError):
    """A layer entry lies outside the map."""

    def __init__(self, position, width, height, layer=None):
        self.position = position
        self.layer = layer
        where = f" in layer {layer!r}" if layer is not None else ""
        super().__init__(f"Tile at {position}{where} is outside the {width}x{height} map")
