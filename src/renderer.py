import pygame
import logging
import settings

# Configure logging (Pyodide-compatible)
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.handlers = [console_handler]
logger.info("Initializing renderer.py")


def visible_tile_range(viewport, tile_width, tile_height, map_width, map_height):
    """Convert a pixel viewport to tile ranges and the sub-tile scroll remainder.

    Returns (i_start, i_end, j_start, j_end, x_remainder, y_remainder). The end
    indices include one extra tile so a partially visible trailing tile is drawn,
    and never exceed the map size. The start indices are not clamped.
    """
    x, y, width, height = viewport
    if x < 0 or y < 0:
        raise ValueError(f"Viewport origin ({x}, {y}) must not be negative")

    i_start = int(x // tile_width)
    i_end = min(i_start + int(width // tile_width) + 1, map_width)
    j_start = int(y // tile_height)
    j_end = min(j_start + int(height // tile_height) + 1, map_height)

    x_remainder = x % tile_width
    y_remainder = y % tile_height
    return i_start, i_end, j_start, j_end, x_remainder, y_remainder


def draw_layers(sink, layers, tile_width, tile_height, map_width, map_height, viewport):
    """Draw the visible part of each layer, bottom layer first."""
    i_start, i_end, j_start, j_end, x_remainder, y_remainder = visible_tile_range(
        viewport, tile_width, tile_height, map_width, map_height)

    drawn = 0
    for layer in layers:
        for i in range(i_start, i_end):
            for j in range(j_start, j_end):
                tile = layer.tile_at(i, j)
                # Empty tiles have nothing to draw
                if tile.is_empty:
                    continue
                position = (tile_width * (i - i_start) - x_remainder,
                            tile_height * (j - j_start) - y_remainder)
                sink.blit(tile.atlas, position, tile.rect,
                          settings.DEFAULT_TINT, settings.DEFAULT_ROTATION, settings.DEFAULT_ORIGIN,
                          settings.DEFAULT_SCALE, settings.DEFAULT_EFFECTS, settings.DEFAULT_DEPTH)
                drawn += 1
    logger.debug(f"Drew {drawn} tiles for viewport {tuple(viewport)}: "
                 f"i {i_start}-{i_end}, j {j_start}-{j_end}")
    return drawn


class MapRenderer:
    def __init__(self, tile_map):
        """Bind the renderer to a built map; it only ever reads from it."""
        self.map = tile_map

    def draw(self, sink, viewport):
        """Draw the map. viewport is in pixels, not tiles, to allow smooth scrolling."""
        m = self.map
        draw_layers(sink, m.layers, m.tile_width, m.tile_height, m.width, m.height, viewport)


class SurfaceSink:
    """Draw sink writing tiles to a pygame Surface."""

    def __init__(self, surface):
        self.surface = surface

    def blit(self, handle, dest, source_rect, tint=settings.DEFAULT_TINT, rotation=0.0,
             origin=(0, 0), scale=1, effects=0, depth=0):
        """Blit source_rect of handle at dest.

        rotation is in degrees, counter-clockwise (pygame.transform.rotozoom),
        about the top-left corner shifted by origin. effects and depth are
        ignored; call order is draw order.
        """
        if tuple(tint) == settings.DEFAULT_TINT and not rotation and scale == 1 and tuple(origin) == (0, 0):
            self.surface.blit(handle, dest, source_rect)
            return
        image = handle.subsurface(pygame.Rect(source_rect)).copy()
        if tuple(tint) != settings.DEFAULT_TINT:
            image.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
        if rotation or scale != 1:
            image = pygame.transform.rotozoom(image, rotation, scale)
        self.surface.blit(image, (dest[0] - origin[0], dest[1] - origin[1]))
