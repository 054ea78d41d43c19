"""Line window entity - the bounded set of lines visible on screen."""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from ..ports import TerminalPort

logger = logging.getLogger(__name__)


class WindowState(str, Enum):
    """Fill state of a line window."""

    BELOW_LIMIT = "below_limit"
    AT_LIMIT = "at_limit"


@dataclass
class LineWindow:
    """Lines currently visible on the terminal, oldest first.

    The history always mirrors the screen: the last ``len(window)``
    physical lines of the terminal are exactly ``window.lines``. This
    only holds while nothing else writes to the same terminal.
    """

    terminal: TerminalPort
    limit: int
    _history: deque[str] = field(default_factory=deque)

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"Limit must be positive, got {self.limit}")

    @property
    def lines(self) -> tuple[str, ...]:
        """Snapshot of the visible lines."""
        return tuple(self._history)

    @property
    def is_full(self) -> bool:
        """True once the next push has to scroll out the oldest line."""
        return len(self._history) >= self.limit

    @property
    def state(self) -> WindowState:
        return WindowState.AT_LIMIT if self.is_full else WindowState.BELOW_LIMIT

    def push(self, chunk: str) -> None:
        """Show one physical line, scrolling out the oldest if at the limit.

        Below the limit the chunk is written straight to the terminal.
        At the limit the previous window is cleared and repainted without
        its oldest line. History is updated before the terminal is touched,
        so an OSError can leave the screen behind the history.
        """
        self._history.append(chunk)
        if len(self._history) <= self.limit:
            self.terminal.write_line(chunk)
            return

        self._history.popleft()
        logger.debug("Repainting window limit=%d", self.limit)
        self.terminal.clear_last_lines(self.limit)
        for line in self._history:
            self.terminal.write_line(line)

    def clear(self) -> None:
        """Erase every visible line from the terminal and forget them."""
        count = len(self._history)
        logger.debug("Clearing window lines=%d", count)
        self.terminal.clear_last_lines(count)
        self._history.clear()

    def __len__(self) -> int:
        """Return number of visible lines."""
        return len(self._history)
