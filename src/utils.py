import pygame
import logging
from errors import AtlasLoadFailure

# Configure logging (Pyodide-compatible)
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.handlers = [console_handler]
logger.info("Initializing utils.py")


def load_atlas(path):
    """Load a tileset atlas image, converted for fast blitting when a display is open."""
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        logger.error(f"Failed to load atlas {path}: {e}")
        raise AtlasLoadFailure(path, e) from e
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    logger.debug(f"Loaded atlas: {path} ({image.get_width()}x{image.get_height()})")
    return image


def clamp_camera(camera_x, camera_y, map_pixel_size, view_size):
    """Keep the camera inside the map so the viewport origin is never negative."""
    max_x = max(0, map_pixel_size[0] - view_size[0])
    max_y = max(0, map_pixel_size[1] - view_size[1])
    return min(max(0, camera_x), max_x), min(max(0, camera_y), max_y)
