import os
import logging
from dataclasses import dataclass, field
import pytmx
from settings import RESERVED_TILE_KEYS

# Configure logging (Pyodide-compatible)
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.handlers = [console_handler]
logger.info("Initializing data.py")


@dataclass
class TilesetDescription:
    """One tileset as written in the map file."""
    name: str
    image_path: str
    image_width: int
    image_height: int
    tile_width: int
    tile_height: int
    first_id: int
    margin: int = 0
    spacing: int = 0
    tile_properties: dict = field(default_factory=dict)  # local tile id -> properties


@dataclass
class LayerDescription:
    """A tile layer; tiles maps (x, y) to a raw tile id, absent cells are empty."""
    name: str
    tiles: dict = field(default_factory=dict)


@dataclass
class MapDescription:
    width: int
    height: int
    tile_width: int
    tile_height: int
    layers: list = field(default_factory=list)  # bottom to top
    tilesets: list = field(default_factory=list)


def _find_tileset(tilesets, tile_id):
    """Return the tileset whose id range contains tile_id (highest first id not above it)."""
    owner = None
    for tileset in tilesets:
        if tileset.first_id <= tile_id and (owner is None or tileset.first_id > owner.first_id):
            owner = tileset
    return owner


def _tile_properties(tmx, tilesets):
    """Collect tileset-declared properties keyed by local tile id, per tileset."""
    for gid, props in tmx.tile_properties.items():
        tile_id = tmx.tiledgidmap.get(gid, gid)
        tileset = _find_tileset(tilesets, tile_id)
        if tileset is None:
            logger.warning(f"Properties for tile {tile_id} belong to no tileset, ignored")
            continue
        declared = {k: v for k, v in props.items() if k not in RESERVED_TILE_KEYS}
        if declared:
            tileset.tile_properties[tile_id - tileset.first_id] = declared


def _layer_tiles(tmx, layer):
    """Sparse (x, y) -> tile id for one tile layer, ids as written in the file."""
    tiles = {}
    for x, y, gid in layer.iter_data():
        if gid:
            tiles[(x, y)] = tmx.tiledgidmap.get(gid, gid)
    return tiles


def load_map_description(filename):
    """Parse a Tiled .tmx file into a MapDescription without loading any image."""
    try:
        tmx = pytmx.TiledMap(filename)
    except Exception as e:
        logger.error(f"Failed to parse map {filename}: {e}")
        raise
    base_dir = os.path.dirname(os.path.abspath(filename))

    tilesets = []
    for ts in tmx.tilesets:
        if ts.source is None:
            logger.warning(f"Tileset {ts.name} has no atlas image, skipped")
            continue
        tilesets.append(TilesetDescription(
            name=ts.name,
            image_path=os.path.join(base_dir, ts.source),
            image_width=int(ts.width or 0),
            image_height=int(ts.height or 0),
            tile_width=int(ts.tilewidth),
            tile_height=int(ts.tileheight),
            first_id=int(ts.firstgid),
            margin=int(ts.margin or 0),
            spacing=int(ts.spacing or 0),
        ))
    _tile_properties(tmx, tilesets)

    layers = [
        LayerDescription(name=layer.name, tiles=_layer_tiles(tmx, layer))
        for layer in tmx.layers
        if isinstance(layer, pytmx.TiledTileLayer)
    ]

    description = MapDescription(
        width=tmx.width,
        height=tmx.height,
        tile_width=tmx.tilewidth,
        tile_height=tmx.tileheight,
        layers=layers,
        tilesets=tilesets,
    )
    logger.info(f"Loaded map description {filename}: {tmx.width}x{tmx.height} tiles, "
                f"{len(layers)} layers, {len(tilesets)} tilesets")
    return description
