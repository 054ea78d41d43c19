"""Domain value objects - immutable data structures."""

from .terminal_size import TerminalSize
from .window_settings import DEFAULT_LIMIT, WindowSettings

__all__ = [
    "TerminalSize",
    "WindowSettings",
    "DEFAULT_LIMIT",
]
