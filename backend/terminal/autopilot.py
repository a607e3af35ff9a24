"""
Autopilot input - steers the snake with random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import (
    DIRECTION_DELTAS,
    EMPTY,
    FOOD,
    KEY_BINDINGS,
    OPPOSITE_MOVES,
)
from domain.engine import GameEngine
from .base import InputSource

# Reverse lookup: direction -> key code
DIRECTION_KEYS = {direction: key for key, direction in KEY_BINDINGS.items()}


class AutopilotInput(InputSource):
    """
    A demo input source that always has a key ready and picks a direction
    whose target cell is empty or food.
    """

    def __init__(self, engine: GameEngine, rng: Optional[random.Random] = None):
        self.engine = engine
        self.rng = rng if rng is not None else random.Random()

    def key_available(self) -> bool:
        return self.engine.is_running()

    def read_key(self) -> str:
        game_state = self.engine.get_current_state()
        head_x, head_y = game_state.head

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit a wall or the body
        safe_moves: List[str] = []
        for move, (dx, dy) in DIRECTION_DELTAS.items():
            if move == OPPOSITE_MOVES[game_state.direction]:
                continue
            if game_state.cell_at(head_x + dx, head_y + dy) in (EMPTY, FOOD):
                safe_moves.append(move)

        # Boxed in: keep going and take the collision
        if not safe_moves:
            return DIRECTION_KEYS[game_state.direction]

        return DIRECTION_KEYS[self.rng.choice(sorted(safe_moves))]
