import logging
from errors import MalformedTileset
from tiles import SolidTile

# Configure logging (Pyodide-compatible)
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.handlers = [console_handler]
logger.info("Initializing tileset.py")


def _starts(size, tile_size, margin, spacing):
    """Offsets of the tiles along one axis.

    A tile is kept only while start + tile_size + spacing fits in the image, so
    the trailing (size mod step) pixels never yield a partial tile.
    """
    starts = []
    step = tile_size + spacing
    start = margin
    while start + step <= size:
        starts.append(start)
        start += step
    return starts


def scan_atlas(image_size, tile_width, tile_height, margin=0, spacing=0):
    """Source rectangles of every tile in an atlas, row by row."""
    image_width, image_height = image_size
    if tile_width <= 0 or tile_height <= 0:
        return []
    columns = _starts(image_width, tile_width, margin, spacing)
    rows = _starts(image_height, tile_height, margin, spacing)
    return [(x, y, tile_width, tile_height) for y in rows for x in columns]


def resolve_tileset(atlas, image_size, tile_width, tile_height, first_id,
                    margin=0, spacing=0, tile_properties=None, name=None):
    """Map each global tile id of a tileset to its SolidTile.

    Ids run from first_id in row-major order over the atlas. tile_properties is
    keyed by local tile id and merged into the tiles afterwards.
    """
    name = name or f"tileset@{first_id}"
    rects = scan_atlas(image_size, tile_width, tile_height, margin, spacing)
    if not rects:
        logger.error(f"Tileset {name} yields no tiles: image {image_size}, "
                     f"tile {tile_width}x{tile_height}, margin {margin}, spacing {spacing}")
        raise MalformedTileset(name, f"image {image_size} holds no {tile_width}x{tile_height} tile")

    tile_types = {first_id + index: SolidTile(atlas, rect) for index, rect in enumerate(rects)}

    for local_id, properties in (tile_properties or {}).items():
        tile_id = first_id + local_id
        if tile_id not in tile_types:
            logger.error(f"Tileset {name} declares properties for missing tile {local_id}")
            raise MalformedTileset(name, f"properties for tile {local_id}, which the atlas does not contain")
        tile_types[tile_id] = tile_types[tile_id].with_properties(properties)

    logger.info(f"Resolved tileset {name}: ids {first_id}-{first_id + len(rects) - 1}")
    return tile_types


def load_tilesets(tilesets, atlas_loader):
    """Resolve every tileset description, loading one atlas per tileset."""
    tile_types = {}
    for ts in tilesets:
        atlas = atlas_loader(ts.image_path)
        image_size = (ts.image_width, ts.image_height)
        if not ts.image_width or not ts.image_height:
            image_size = atlas.get_size()
            logger.debug(f"Tileset {ts.name} has no image size, using atlas size {image_size}")
        tile_types.update(resolve_tileset(
            atlas, image_size, ts.tile_width, ts.tile_height, ts.first_id,
            margin=ts.margin, spacing=ts.spacing,
            tile_properties=ts.tile_properties, name=ts.name,
        ))
    return tile_types
