"""Domain ports - interfaces for infrastructure to implement."""

from .terminal_port import TerminalPort

__all__ = [
    "TerminalPort",
]
