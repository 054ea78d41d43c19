"""Terminal port - interface for the output device."""

from typing import Protocol

from ..values import TerminalSize


class TerminalPort(Protocol):
    """Protocol for line-oriented terminal control.

    Infrastructure layer implements this with a real console. Every
    method raises OSError when the underlying device fails.
    """

    def write_line(self, text: str) -> None:
        """Write text followed by a line break and move to the next line."""
        ...

    def clear_last_lines(self, n: int) -> None:
        """Erase the last n lines, leaving the cursor where the first began.

        n == 0 is a no-op.
        """
        ...

    def size(self) -> TerminalSize:
        """Get the current terminal size. Called on every write."""
        ...
