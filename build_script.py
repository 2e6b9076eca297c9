import os
import sys
import subprocess
import shutil
import logging

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

APP_DIR = "src"
BUILD_DIR = os.path.join(APP_DIR, "build", "web")
MAP_DIR = os.path.join("data", "maps")


def stage_maps(map_dir=MAP_DIR):
    """Copy maps and their atlases into the app folder; pygbag only packages that folder."""
    target = os.path.join(APP_DIR, "data", "maps")
    if not os.path.isdir(map_dir):
        logger.warning(f"No map directory at {map_dir}, the web build will have no map")
        return None
    if os.path.exists(target):
        shutil.rmtree(target)
    shutil.copytree(map_dir, target)
    logger.info(f"Staged maps from {map_dir} into {target}")
    return target


def run_build(map_dir=MAP_DIR):
    """Run a pygbag build of the viewer."""
    logger.info("Starting pygbag build of the tile map viewer")
    if os.path.exists(BUILD_DIR):
        shutil.rmtree(BUILD_DIR)
        logger.info(f"Cleared existing build directory: {BUILD_DIR}")
    staged = stage_maps(map_dir)

    cmd = [sys.executable, "-m", "pygbag", "--build", APP_DIR]
    result = subprocess.run(cmd, capture_output=True, text=True)
    logger.info(f"pygbag stdout: {result.stdout}")
    if result.returncode != 0:
        logger.error(f"pygbag stderr: {result.stderr}")

    if staged:
        shutil.rmtree(os.path.dirname(staged))

    if not os.path.exists(BUILD_DIR):
        logger.error(f"Build directory {BUILD_DIR} not found")
        raise FileNotFoundError(f"Build directory {BUILD_DIR} not created")
    logger.info(f"Build output created at {BUILD_DIR}")


if __name__ == "__main__":
    try:
        run_build(sys.argv[1] if len(sys.argv) > 1 else MAP_DIR)
    except Exception as e:
        logger.error(f"Build failed: {e}")
        raise
