"""
Terminal collaborators for the Snake game.

This module contains the input and rendering abstractions the run loop
drives, plus their keyboard, autopilot and ANSI implementations.
"""

from .base import InputSource, Renderer
from .keyboard import TerminalKeyboard
from .autopilot import AutopilotInput
from .renderer import TerminalRenderer

__all__ = [
    'InputSource',
    'Renderer',
    'TerminalKeyboard',
    'AutopilotInput',
    'TerminalRenderer',
]
