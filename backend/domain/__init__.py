"""
Domain entities for the terminal Snake game.

This module contains the game engine and board snapshot, which are
independent of terminal concerns (keyboard polling, screen drawing).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, KEY_BINDINGS
from .engine import GameEngine, SnakeGameError, BoardTooSmallError, FoodPlacementError
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'KEY_BINDINGS',
    'GameEngine',
    'SnakeGameError',
    'BoardTooSmallError',
    'FoodPlacementError',
    'GameState',
]
