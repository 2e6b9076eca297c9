import pygame
import asyncio
import logging
import os
import platform
import sys
from game import Game
from tilemap import load_map
from settings import WIDTH, HEIGHT, FPS, CAPTION, MAP_FILE

# Configure logging (Pyodide-compatible)
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.handlers = [console_handler]
logger.info("Initializing main.py")


def verify_map(path):
    """Log whether the map file exists; file system checks are skipped under Pyodide."""
    if platform.system() == "Emscripten":
        logger.info(f"Assumed present: {path} (file system checks disabled for Pyodide)")
        return
    if os.path.exists(path):
        logger.info(f"Found: {path}")
    else:
        logger.warning(f"Missing: {path}")


async def main(map_file=MAP_FILE):
    """Open the window, load the map and scroll around it until closed."""
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    verify_map(map_file)
    # Atlases are converted against the display, so load after set_mode
    tile_map = load_map(map_file)

    game = Game(screen, tile_map)
    logger.info("Starting viewer loop")
    while game.running:
        dt = clock.tick(FPS) / 1000.0
        game.run(dt)
        await asyncio.sleep(0)  # Yield control for browser compatibility

    pygame.quit()


if platform.system() == "Emscripten":
    asyncio.ensure_future(main())
else:
    if __name__ == "__main__":
        try:
            asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else MAP_FILE))
        except KeyboardInterrupt:
            logger.info("Viewer terminated by user")
