import os
import platform
import pygame

# Base directory for the project
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Data directory for maps and tilesets
DATA_DIR = os.path.join(BASE_DIR, "data")
if platform.system() == "Emscripten":
    # Web builds package only the app folder, see build_script.py
    DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")

# Map loaded by the viewer when none is given on the command line
MAP_FILE = os.getenv("TILEMAP_FILE", os.path.join(DATA_DIR, "maps", "demo.tmx"))

# Viewer constants
WIDTH = 1280
HEIGHT = 720
FPS = 60
SCROLL_SPEED = 400  # pixels per second
BACKGROUND_COLOR = (0, 0, 0)
CAPTION = "Tile Map Viewer"

# Draw defaults passed to the sink for every tile (an unmodified blit)
DEFAULT_TINT = (255, 255, 255, 255)
DEFAULT_ROTATION = 0.0
DEFAULT_ORIGIN = (0, 0)
DEFAULT_SCALE = 1
DEFAULT_EFFECTS = 0
DEFAULT_DEPTH = 0

# pytmx bookkeeping keys and <tile> attributes; only the <properties> block is tile metadata
RESERVED_TILE_KEYS = ("id", "width", "height", "frames", "colliders", "source", "trans",
                      "probability", "type", "class")

# Key bindings for the viewer
KEYS = {
    "LEFT": (pygame.K_LEFT, pygame.K_a),
    "RIGHT": (pygame.K_RIGHT, pygame.K_d),
    "UP": (pygame.K_UP, pygame.K_w),
    "DOWN": (pygame.K_DOWN, pygame.K_s),
    "QUIT": pygame.K_ESCAPE,
}
