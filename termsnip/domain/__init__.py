"""Pure domain layer - no infrastructure dependencies."""

# Entities
from .entities import LineWindow, WindowState

# Ports
from .ports import TerminalPort

# Services
from .services import LineWrapper, pad_line, split_text

# Value Objects
from .values import DEFAULT_LIMIT, TerminalSize, WindowSettings

__all__ = [
    # Values
    "TerminalSize",
    "WindowSettings",
    "DEFAULT_LIMIT",
    # Entities
    "LineWindow",
    "WindowState",
    # Services
    "LineWrapper",
    "split_text",
    "pad_line",
    # Ports
    "TerminalPort",
]
