import logging
from data import load_map_description
from errors import UnknownTileId, TileOutOfBounds
from renderer import MapRenderer
from tileset import load_tilesets
from tiles import EMPTY_TILE, EMPTY_TILE_ID, NO_PROPERTIES
from utils import load_atlas

# Configure logging (Pyodide-compatible)
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.handlers = [console_handler]
logger.info("Initializing tilemap.py")


class TileGrid:
    """A width x height grid of tile ids, resolved through a shared tile-type table."""

    def __init__(self, width, height, tile_types, name=None):
        self.width = width
        self.height = height
        self.name = name
        self.tile_types = tile_types
        self.cells = [[EMPTY_TILE_ID for _ in range(height)] for _ in range(width)]

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def id_at(self, x, y):
        return self.cells[x][y]

    def set_id(self, x, y, tile_id):
        self.cells[x][y] = tile_id

    def tile_at(self, x, y):
        return self.tile_types[self.cells[x][y]]

    def __getitem__(self, position):
        x, y = position
        return self.tile_at(x, y)

    def __iter__(self):
        """Yield (x, y, tile_id) for every cell, column by column."""
        for x, column in enumerate(self.cells):
            for y, tile_id in enumerate(column):
                yield x, y, tile_id


class TileMap:
    """A built map: one grid per layer plus the combined gameplay grid.

    Gameplay questions (what is at this cell?) go through tile_at and
    properties_at, which read the combined grid; drawing goes through draw.
    """

    def __init__(self, width, height, tile_width, tile_height, tile_types, layers, combined):
        self.width, self.height = width, height
        self.tile_width, self.tile_height = tile_width, tile_height
        self.tile_types = tile_types
        self.layers = layers  # bottom to top
        self.combined = combined
        self.tile_properties = {
            tile_id: tile.properties for tile_id, tile in tile_types.items() if tile.properties
        }
        self.renderer = MapRenderer(self)

    @property
    def pixel_size(self):
        return self.width * self.tile_width, self.height * self.tile_height

    def tile_at(self, x, y):
        """Get the topmost non-empty tile at the specified cell, None outside the map."""
        if not self.combined.in_bounds(x, y):
            return None
        return self.combined.tile_at(x, y)

    def properties_at(self, x, y):
        """Get the properties of the tile at the specified cell."""
        tile = self.tile_at(x, y)
        if tile is None:
            return NO_PROPERTIES
        return tile.properties

    def layer_tile_at(self, layer_index, x, y):
        layer = self.layers[layer_index]
        if not layer.in_bounds(x, y):
            return None
        return layer.tile_at(x, y)

    def draw(self, sink, viewport):
        """Draw the part of the map inside the pixel-space viewport."""
        self.renderer.draw(sink, viewport)


def _layer_entries(layer):
    """Name and (x, y) -> tile id entries of a layer description or a plain mapping."""
    tiles = getattr(layer, "tiles", layer)
    return getattr(layer, "name", None), tiles


def build_map(width, height, tile_width, tile_height, tile_types, layers):
    """Build a TileMap from raw layers of tile ids.

    tile_types maps every tile id the tilesets define to its SolidTile; id 0 is
    always empty. Cells absent from a layer are empty. Any unknown id aborts
    the build.
    """
    table = dict(tile_types)
    table[EMPTY_TILE_ID] = EMPTY_TILE

    grids = []
    for index, layer in enumerate(layers):
        name, tiles = _layer_entries(layer)
        name = name if name is not None else index
        grid = TileGrid(width, height, table, name=name)
        for (x, y), tile_id in tiles.items():
            if not grid.in_bounds(x, y):
                logger.error(f"Layer {name} has a tile at ({x}, {y}) outside the {width}x{height} map")
                raise TileOutOfBounds((x, y), width, height, layer=name)
            if tile_id not in table:
                logger.error(f"Layer {name} references unknown tile id {tile_id} at ({x}, {y})")
                raise UnknownTileId(tile_id, layer=name, position=(x, y))
            grid.set_id(x, y, tile_id)
        grids.append(grid)

    # Combined layer: topmost non-empty tile per cell
    combined = TileGrid(width, height, table, name="combined")
    for grid in grids:
        for x, y, tile_id in grid:
            if not table[tile_id].is_empty:
                combined.set_id(x, y, tile_id)

    logger.info(f"Built map: {width}x{height} tiles of {tile_width}x{tile_height} px, "
                f"{len(grids)} layers, {len(table) - 1} tile types")
    return TileMap(width, height, tile_width, tile_height, table, grids, combined)


def load_map(filename, atlas_loader=load_atlas):
    """Load a .tmx map, its tileset atlases, and build it."""
    description = load_map_description(filename)
    tile_types = load_tilesets(description.tilesets, atlas_loader)
    return build_map(description.width, description.height,
                     description.tile_width, description.tile_height,
                     tile_types, description.layers)
