"""Terminal infrastructure - real output devices."""

from .rich_terminal import RichTerminal

__all__ = [
    "RichTerminal",
]
