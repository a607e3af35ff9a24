"""
ANSI terminal renderer.
"""

import sys
from typing import Optional, TextIO

from domain.game_state import GameState
from .base import Renderer

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class TerminalRenderer(Renderer):
    """
    Draws each frame as text: one line per board row, every cell a glyph
    followed by a space.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def clear(self):
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()

    def draw(self, game_state: GameState):
        self.stream.write(game_state.print_board() + "\n")
        self.stream.flush()
