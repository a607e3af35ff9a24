import logging
import os
import random
import sys
import time
from typing import Callable, Optional

from dotenv import load_dotenv

from domain.constants import TICK_DELAY_MS
from domain.engine import GameEngine, SnakeGameError
from terminal.autopilot import AutopilotInput
from terminal.base import InputSource, Renderer
from terminal.keyboard import TerminalKeyboard
from terminal.renderer import TerminalRenderer

load_dotenv()

LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("SNAKE_LOG_FILE")
SNAKE_TICK_MS = os.getenv("SNAKE_TICK_MS")
SNAKE_SEED = os.getenv("SNAKE_SEED")
SNAKE_AUTOPILOT = os.getenv("SNAKE_AUTOPILOT", "false").lower() == "true"

logger = logging.getLogger(__name__)


def configure_logging():
    # Frames are redrawn in place; SNAKE_LOG_FILE keeps records off the board
    logging.basicConfig(
        level=LOG_LEVEL,
        filename=LOG_FILE,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


class SettingsError(SnakeGameError, ValueError):
    """An environment setting holds a value that cannot be used."""


def parse_int_setting(name: str, raw: Optional[str], default: Optional[int] = None) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise SettingsError(f"{name} must be an integer, got {raw!r}") from None


def build_rng() -> random.Random:
    seed = parse_int_setting("SNAKE_SEED", SNAKE_SEED)
    if seed is None:
        return random.Random()
    return random.Random(seed)


def run_game(
    engine: GameEngine,
    input_source: InputSource,
    renderer: Renderer,
    sleep: Callable[[float], None] = time.sleep,
    tick_ms: int = TICK_DELAY_MS
) -> int:
    """
    Drive the engine until the snake collides.

    Each frame:
      1) Poll for a key and hand it to the engine
      2) Advance one tick
      3) Clear and redraw the board
      4) Wait tick_ms milliseconds

    Returns:
        The final score.
    """
    frames = 0
    while engine.is_running():
        if input_source.key_available():
            engine.handle_key(input_source.read_key())
        engine.tick()
        renderer.clear()
        renderer.draw(engine.get_current_state())
        frames += 1
        sleep(tick_ms / 1000)

    logger.info("Game finished after %d frames with score %d", frames, engine.score)
    return engine.score


def print_game_over(score: int):
    print("\t\tGame Over!")
    print(f"\t\tYour score is: {score}")


def main() -> int:
    configure_logging()
    renderer = TerminalRenderer()

    try:
        tick_ms = parse_int_setting("SNAKE_TICK_MS", SNAKE_TICK_MS, TICK_DELAY_MS)
        rng = build_rng()
        engine = GameEngine(rng=rng)
        if SNAKE_AUTOPILOT:
            score = run_game(engine, AutopilotInput(engine, rng), renderer, tick_ms=tick_ms)
        else:
            with TerminalKeyboard() as keyboard:
                score = run_game(engine, keyboard, renderer, tick_ms=tick_ms)
    except SnakeGameError as e:
        logger.exception("Game aborted")
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    print_game_over(score)
    try:
        input()
    except EOFError:
        logger.debug("stdin closed, skipping acknowledgement")
    return 0


if __name__ == "__main__":
    sys.exit(main())
