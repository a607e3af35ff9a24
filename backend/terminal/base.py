"""
Base input and rendering interfaces for the run loop.
"""

from domain.game_state import GameState


class InputSource:
    """
    Base class/interface for anything that produces key presses.

    Polling must never block: the run loop asks key_available() once per
    frame and only then calls read_key().
    """

    def key_available(self) -> bool:
        raise NotImplementedError

    def read_key(self) -> str:
        """
        Return one key code.

        Returns:
            One of "w", "a", "s", "d", or any other string, which the
            engine ignores.
        """
        raise NotImplementedError


class Renderer:
    """
    Base class/interface for drawing a board snapshot.
    """

    def clear(self):
        raise NotImplementedError

    def draw(self, game_state: GameState):
        raise NotImplementedError
