import pygame
import logging
from settings import SCROLL_SPEED, KEYS

# Configure logging (Pyodide-compatible)
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.handlers = [console_handler]
logger.info("Initializing event_handler.py")


class EventHandler:
    def __init__(self, game):
        self.game = game
        logger.info("EventHandler initialized")

    def process_events(self):
        """Process all Pygame events and delegate to the viewer."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.game.quit()
                logger.info("Quit event triggered")
            elif event.type == pygame.KEYDOWN and event.key == KEYS["QUIT"]:
                self.game.quit()
                logger.info("Quit key pressed")
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos)

    def handle_click(self, pos):
        """Log the gameplay tile under the cursor."""
        position, tile, properties = self.game.gameplay_tile(pos)
        if tile is None:
            logger.info(f"Clicked outside the map at {position}")
        elif tile.is_empty:
            logger.info(f"Tile {position}: empty")
        else:
            logger.info(f"Tile {position}: {tile.rect}, properties {dict(properties)}")
        return position, tile, properties

    def scroll_direction(self, keys_pressed):
        """Return (dx, dy) in -1..1 from the held scroll keys."""
        dx = dy = 0
        if any(keys_pressed[k] for k in KEYS["LEFT"]):
            dx -= 1
        if any(keys_pressed[k] for k in KEYS["RIGHT"]):
            dx += 1
        if any(keys_pressed[k] for k in KEYS["UP"]):
            dy -= 1
        if any(keys_pressed[k] for k in KEYS["DOWN"]):
            dy += 1
        return dx, dy

    def update_camera(self, dt, keys_pressed=None):
        """Scroll the camera by the held keys for dt seconds."""
        if keys_pressed is None:
            keys_pressed = pygame.key.get_pressed()
        dx, dy = self.scroll_direction(keys_pressed)
        if dx or dy:
            self.game.scroll(dx * SCROLL_SPEED * dt, dy * SCROLL_SPEED * dt)
