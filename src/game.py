import pygame
import logging
import settings
from event_handler import EventHandler
from renderer import SurfaceSink
from utils import clamp_camera

# Configure logging (Pyodide-compatible)
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.handlers = [console_handler]
logger.info("Initializing game.py")


class Game:
    def __init__(self, screen, tile_map):
        """Initialize the viewer with a display surface and a built map."""
        self.screen = screen
        self.tile_map = tile_map
        self.sink = SurfaceSink(screen)
        self.event_handler = EventHandler(self)
        self.camera_x = 0.0
        self.camera_y = 0.0
        self.running = True
        logger.info(f"Game initialized: map {tile_map.width}x{tile_map.height}, "
                    f"screen {screen.get_width()}x{screen.get_height()}")

    @property
    def viewport(self):
        """Current camera window in map pixels."""
        return pygame.Rect(int(self.camera_x), int(self.camera_y),
                           self.screen.get_width(), self.screen.get_height())

    def scroll(self, dx, dy):
        """Move the camera, keeping it inside the map."""
        self.camera_x, self.camera_y = clamp_camera(
            self.camera_x + dx, self.camera_y + dy,
            self.tile_map.pixel_size, self.screen.get_size())
        logger.debug(f"Camera moved to ({self.camera_x:.1f}, {self.camera_y:.1f})")

    def gameplay_tile(self, screen_pos):
        """Cell, tile and properties under a screen position; logged on left click."""
        tx = int((screen_pos[0] + self.camera_x) // self.tile_map.tile_width)
        ty = int((screen_pos[1] + self.camera_y) // self.tile_map.tile_height)
        return (tx, ty), self.tile_map.tile_at(tx, ty), self.tile_map.properties_at(tx, ty)

    def render(self):
        self.screen.fill(settings.BACKGROUND_COLOR)
        self.tile_map.draw(self.sink, self.viewport)

    def run(self, dt):
        """Advance one frame: handle input, scroll, draw."""
        self.event_handler.process_events()
        self.event_handler.update_camera(dt)
        self.render()
        pygame.display.flip()

    def quit(self):
        self.running = False
        logger.info("Viewer stopping")
