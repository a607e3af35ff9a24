"""
Game constants for the terminal Snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: y grows downward
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_MOVES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# The only key codes the engine understands
KEY_BINDINGS = {
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}

# Cell values. Anything above zero is snake body.
EMPTY = 0
WALL = -1
FOOD = -2

# Board glyphs
BODY_GLYPH = "o"
WALL_GLYPH = "X"
FOOD_GLYPH = "O"
EMPTY_GLYPH = " "

# Game settings
MAP_WIDTH = 20
MAP_HEIGHT = 20
MIN_BOARD_SIZE = 3
STARTING_SCORE = 4
INITIAL_DIRECTION = UP
MAX_FOOD_ATTEMPTS = 1000
TICK_DELAY_MS = 400
