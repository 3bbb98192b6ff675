"""
Configuration settings for Mesopotamia Explorer.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Positive int from the environment; falls back to `default` on a bad value."""
    raw = os.getenv(name, "").strip()
    try:
        value = int(raw)
    except ValueError:
        if raw:
            print(f"Warning: ignoring {name}={raw!r} (not an integer), using {default}")
        return default
    return value if value > 0 else default


# Window settings
GAME_WIDTH = 800  # viewport width (pixels == world units)
GAME_HEIGHT = 400
FPS = _env_int("EXPLORER_FPS", 60)
VERSION = "1.0.0"
GAME_TITLE = f"Mesopotamia Explorer (v{VERSION})"

# World settings
WORLD_WIDTH = 2400
GROUND_Y = 320  # top of the ground band (screen pixels)

# Player settings
PLAYER_WIDTH = 32
PLAYER_HEIGHT = 48
PLAYER_SPEED = 4  # world units per frame
PLAYER_START_X = 100

# Artifact settings
PROXIMITY_THRESHOLD = 60  # how close you need to be
ARTIFACT_SIZE = 28

# HUD settings
HUD_BAR_HEIGHT = 56
POPUP_WIDTH = 520
POPUP_HEIGHT = 260

# Colors
COLOR_SKY = (250, 214, 165)
COLOR_SKY_FAR = (238, 190, 140)
COLOR_GROUND = (194, 154, 108)
COLOR_GROUND_EDGE = (150, 112, 72)
COLOR_RIVER = (86, 140, 180)
COLOR_ZIGGURAT = (170, 120, 80)
COLOR_PLAYER = (60, 90, 160)
COLOR_PLAYER_HEAD = (230, 190, 150)
COLOR_ARTIFACT = (218, 165, 32)
COLOR_ARTIFACT_ACTIVE = (255, 235, 120)
COLOR_ARTIFACT_COLLECTED = (120, 110, 95)
COLOR_UI_BG = (40, 32, 28)
COLOR_UI_BORDER = (120, 92, 60)
COLOR_GOLD = (255, 215, 0)
COLOR_WHITE = (255, 255, 255)

# Messages
MSG_EXPLORE = "Explore Mesopotamia! Use Left/Right or A/D to move. Press E near an object to inspect it."
MSG_NEARBY = "You see a {name}. Press E to inspect it."
MSG_DISCOVERY = "Great discovery! Keep exploring to find the remaining inventions."
MSG_ALL_FOUND = "You found all the key Mesopotamian inventions! Press Space or Enter to close."
MSG_MISSION_COMPLETE = "Mission complete! You uncovered how Mesopotamian inventions shaped our modern world."
MSG_FOUND_COUNTER = "Artifacts found: {found} / {total}"

# Debug settings
DEBUG_EXPLORER = os.getenv("EXPLORER_DEBUG", "").strip().lower() in ("1", "true", "yes", "on")
