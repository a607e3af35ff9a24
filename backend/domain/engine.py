"""
GameEngine - the whole single-player Snake state machine.

The snake has no explicit body list. Every body cell holds a countdown
that is decremented once per tick; the head is painted with the current
score, so a higher score keeps the trail alive for longer. The snake's
length is simply the number of positive cells on the board.
"""

import logging
import random
from typing import List, Optional, Tuple

from .constants import (
    DIRECTION_DELTAS,
    EMPTY,
    FOOD,
    INITIAL_DIRECTION,
    KEY_BINDINGS,
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_FOOD_ATTEMPTS,
    MIN_BOARD_SIZE,
    OPPOSITE_MOVES,
    STARTING_SCORE,
    VALID_MOVES,
    WALL,
)
from .game_state import GameState

logger = logging.getLogger(__name__)


class SnakeGameError(Exception):
    """Base class for fatal game setup errors."""


class BoardTooSmallError(SnakeGameError, ValueError):
    """The board has no room for a border plus an interior."""


class FoodPlacementError(SnakeGameError):
    """No empty interior cell is left to hold food."""


class GameEngine:
    """
    Manages:
      - Grid (row-major cell values, walls on the border)
      - Head position and direction
      - Food counter (score)
      - Running flag (Playing -> GameOver, one way)
    """

    def __init__(
        self,
        width: int = MAP_WIDTH,
        height: int = MAP_HEIGHT,
        rng: Optional[random.Random] = None,
        starting_score: int = STARTING_SCORE
    ):
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise BoardTooSmallError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, got {width}x{height}."
            )
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.starting_score = starting_score

        self.cells: List[int] = [EMPTY] * (width * height)
        self.head: Tuple[int, int] = (width // 2, height // 2)
        self.food: Optional[Tuple[int, int]] = None
        self.direction = INITIAL_DIRECTION
        self.score = starting_score
        self.running = True

        self.initialize()

    def _index(self, x: int, y: int) -> int:
        return x + y * self.width

    def initialize(self, rng: Optional[random.Random] = None):
        """
        Reset the board: head in the centre, walls around the border and
        one piece of food on a random empty interior cell.
        """
        if rng is not None:
            self.rng = rng

        for i in range(len(self.cells)):
            self.cells[i] = EMPTY
        self.score = self.starting_score
        self.direction = INITIAL_DIRECTION
        self.running = True
        self.food = None

        self.head = (self.width // 2, self.height // 2)
        self.cells[self._index(*self.head)] = 1

        for x in range(self.width):
            self.cells[self._index(x, 0)] = WALL
            self.cells[self._index(x, self.height - 1)] = WALL

        for y in range(self.height):
            self.cells[self._index(0, y)] = WALL
            self.cells[self._index(self.width - 1, y)] = WALL

        self._generate_food()

    def _generate_food(self):
        """
        Place food on a random empty interior cell.

        Rejection sampling is tried first; once MAX_FOOD_ATTEMPTS misses
        have piled up we pick among the cells that are actually free.
        """
        for _ in range(MAX_FOOD_ATTEMPTS):
            x = self.rng.randrange(1, self.width - 1)
            y = self.rng.randrange(1, self.height - 1)
            if self.cells[self._index(x, y)] == EMPTY:
                self._place_food(x, y)
                return

        free_cells = [
            (x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if self.cells[self._index(x, y)] == EMPTY
        ]
        if not free_cells:
            raise FoodPlacementError("No empty interior cell left for food.")
        self._place_food(*self.rng.choice(free_cells))

    def _place_food(self, x: int, y: int):
        self.cells[self._index(x, y)] = FOOD
        self.food = (x, y)
        logger.debug("Food placed at %s", self.food)

    def tick(self):
        """
        Advance the game by one step:
          1) Resolve the direction into a displacement
          2) Move the head, eating food or colliding
          3) Decay every body cell by one, including the new head
        """
        if not self.running:
            return

        dx, dy = DIRECTION_DELTAS[self.direction]
        hx, hy = self.head
        new_head = (hx + dx, hy + dy)
        index = self._index(*new_head)
        target = self.cells[index]

        if target == FOOD:
            self.score += 1
            self.head = new_head
            self.cells[index] = self.score
            self.food = None
            try:
                self._generate_food()
            except FoodPlacementError:
                # Board is full: a finished game, not a setup failure
                self.running = False
                logger.info("No room left for food, game over with score %d", self.score)
        elif target != EMPTY:
            # The obstacle keeps its value; only the head coordinates move.
            self.running = False
            self.head = new_head
            logger.info("Game over at %s with score %d", new_head, self.score)
        else:
            self.head = new_head
            self.cells[index] = self.score + 1

        # Also decays the head painted above, so a segment lives one tick
        # less than the value it was painted with.
        for i, value in enumerate(self.cells):
            if value > 0:
                self.cells[i] = value - 1

    def set_direction(self, requested: str):
        """Change direction unless the request is unknown or a reversal."""
        if requested not in VALID_MOVES:
            return
        if requested == OPPOSITE_MOVES[self.direction]:
            logger.debug("Ignoring reversal from %s to %s", self.direction, requested)
            return
        self.direction = requested

    def handle_key(self, key: Optional[str]):
        direction = KEY_BINDINGS.get(key)
        if direction is not None:
            self.set_direction(direction)

    def is_running(self) -> bool:
        return self.running

    def cell_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell {(x, y)} is outside the {self.width}x{self.height} board.")
        return self.cells[self._index(x, y)]

    def grid_dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            width=self.width,
            height=self.height,
            cells=self.cells,
            head=self.head,
            direction=self.direction,
            score=self.score,
            running=self.running,
            food=self.food
        )

    def __repr__(self):
        return (
            f"<GameEngine {self.width}x{self.height}, score={self.score}, "
            f"head={self.head}, running={self.running}>"
        )
