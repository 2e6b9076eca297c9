import sys, os

# Off-screen pygame for tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from tests.helpers import RecordingSink, FakeAtlas, build_simple_map

__all__ = [
    "RecordingSink",
    "FakeAtlas",
    "build_simple_map",
]
