"""Domain entities - objects with identity and state."""

from .line_window import LineWindow, WindowState

__all__ = [
    "LineWindow",
    "WindowState",
]
