"""
Game systems package.
"""
from .input_state import InputState, normalize_key, is_close_key
from .movement import MovementController, camera_offset
from .proximity import ProximityDetector, find_nearest
from .interaction import InteractionController, InteractionMode
