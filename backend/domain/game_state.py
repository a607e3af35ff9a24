"""
GameState entity - a snapshot of the board at a point in time.
"""

from typing import Optional, Sequence, Tuple

from .constants import (
    BODY_GLYPH,
    EMPTY_GLYPH,
    FOOD,
    FOOD_GLYPH,
    WALL,
    WALL_GLYPH,
)


def glyph_for(value: int) -> str:
    """Return the single character used to draw a cell value."""
    if value > 0:
        return BODY_GLYPH
    if value == WALL:
        return WALL_GLYPH
    if value == FOOD:
        return FOOD_GLYPH
    return EMPTY_GLYPH


class GameState:
    """
    A read-only snapshot of the game at a specific tick.

    Attributes:
        width, height: board dimensions
        cells: row-major cell values, index = x + y * width
        head: (x, y) of the snake head
        direction: current direction of travel
        score: food counter, also the decay value written at the head
        running: False once the snake has collided
        food: (x, y) of the food cell, or None if there is none
    """

    def __init__(
        self,
        width: int,
        height: int,
        cells: Sequence[int],
        head: Tuple[int, int],
        direction: str,
        score: int,
        running: bool,
        food: Optional[Tuple[int, int]] = None
    ):
        self.width = width
        self.height = height
        self.cells = tuple(cells)
        self.head = head
        self.direction = direction
        self.score = score
        self.running = running
        self.food = food

    def cell_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell {(x, y)} is outside the {self.width}x{self.height} board.")
        return self.cells[x + y * self.width]

    def print_board(self) -> str:
        """
        Returns a string representation of the board, one line per row
        from top to bottom. Every cell is drawn as its glyph followed by
        a space:
        o = snake body
        X = wall
        O = food
        (space) = empty
        """
        result = []
        for y in range(self.height):
            row = self.cells[y * self.width:(y + 1) * self.width]
            result.append("".join(glyph_for(value) + " " for value in row))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState score={self.score}, head={self.head}, "
            f"direction={self.direction}, running={self.running}>"
        )
