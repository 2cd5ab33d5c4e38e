# [file name]: src/engine/__init__.py
# src/engine/__init__.py

"""
Snake Game Engine Module
"""

from .core import GameEngine
from .game_state import GameState
from .grid import Direction, Point, Size
from .apple_manager import AppleManager, AppleSpawnError
from .game_over_checker import GameOverChecker
from .renderer import Renderer, to_png_bytes

__all__ = [
    'GameEngine',
    'GameState',
    'Direction',
    'Point',
    'Size',
    'AppleManager',
    'AppleSpawnError',
    'GameOverChecker',
    'Renderer',
    'to_png_bytes'
]
