"""
Static game content (artifact text + scene placement).
"""
from .artifacts import ARTIFACT_INFO, DEFAULT_SCENE
from .scene_loader import load_scene_file
