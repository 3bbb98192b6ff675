"""
Game entities package.
"""
from .artifact import Artifact
