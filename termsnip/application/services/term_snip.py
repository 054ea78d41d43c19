"""TermSnip - write to a terminal limited to a number of lines."""

import logging
from collections.abc import Iterable

from termsnip.domain import (
    DEFAULT_LIMIT,
    LineWindow,
    LineWrapper,
    TerminalPort,
    WindowSettings,
)

logger = logging.getLogger(__name__)


class TermSnip:
    """Terminal output limited to the most recent ``limit`` lines.

    Writing a line past the limit scrolls the oldest one out. Long
    lines are wrapped at the terminal width and every wrapped piece
    counts against the limit.

    The session assumes it is the only writer to the terminal. Any
    OSError raised by the terminal propagates; after one the screen may
    be partially repainted, so call ``clear_lines`` or drop the session.

    Example:
        snip = TermSnip(5)
        for n in range(1, 15):
            snip.write_line(f"{n} - line number {n}")
    """

    def __init__(
        self,
        limit: int = DEFAULT_LIMIT,
        fill: bool = False,
        terminal: TerminalPort | None = None,
        clear_on_exit: bool = False,
    ) -> None:
        self._settings = WindowSettings(limit=limit, fill=fill)
        if terminal is None:
            from termsnip.composition import create_terminal

            terminal = create_terminal()
        self._terminal = terminal
        self._window = LineWindow(terminal=terminal, limit=limit)
        self._wrapper = LineWrapper(terminal, self._window, fill=fill)
        self._clear_on_exit = clear_on_exit

    @property
    def limit(self) -> int:
        return self._settings.limit

    @property
    def fill(self) -> bool:
        return self._settings.fill

    @property
    def lines(self) -> tuple[str, ...]:
        """Lines currently shown, oldest first, after wrapping and padding."""
        return self._window.lines

    @property
    def terminal(self) -> TerminalPort:
        return self._terminal

    def write_line(self, text: str) -> None:
        """Write a line of text, wrapping and scrolling as needed."""
        self._wrapper.submit(text)

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each line in order."""
        for line in lines:
            self.write_line(line)

    def clear_lines(self) -> None:
        """Clear every line written by this session."""
        self._window.clear()

    def __enter__(self) -> "TermSnip":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Screen state is unknown after a failed write
        if self._clear_on_exit and exc_type is None:
            self.clear_lines()

    def __repr__(self) -> str:
        return f"TermSnip(limit={self.limit}, fill={self.fill}, visible={len(self._window)})"
