"""Line wrapper service - splits text to the terminal width."""

import logging

from ..entities import LineWindow
from ..ports import TerminalPort

logger = logging.getLogger(__name__)


def split_text(text: str, width: int) -> list[str]:
    """Split text into chunks no wider than the terminal.

    Text strictly shorter than ``width`` is a single chunk. Otherwise
    full-width chunks are cut from the front until the remainder is
    shorter than ``width``; the remainder is always the last chunk, even
    when empty. A text exactly ``width`` wide therefore yields the
    full chunk plus an empty one.

    Args:
        text: Logical line to split.
        width: Terminal columns. Values below 1 disable splitting.

    Returns:
        Chunks in display order.
    """
    if width < 1:
        return [text]

    chunks = []
    while len(text) >= width:
        chunks.append(text[:width])
        text = text[width:]
    chunks.append(text)
    return chunks


def pad_line(text: str, width: int) -> str:
    """Pad text with spaces up to width."""
    return text.ljust(width)


class LineWrapper:
    """Feed logical lines into a line window as width-sized chunks."""

    def __init__(self, terminal: TerminalPort, window: LineWindow, fill: bool = False) -> None:
        self._terminal = terminal
        self._window = window
        self._fill = fill

    @property
    def fill(self) -> bool:
        return self._fill

    def submit(self, text: str) -> None:
        """Write one logical line, wrapping it at the current width.

        The width is queried on every call since the terminal may have
        been resized. Stops at the first OSError.
        """
        width = self._terminal.size().cols
        chunks = split_text(text, width)
        if len(chunks) > 1:
            logger.debug("Split line chars=%d width=%d chunks=%d", len(text), width, len(chunks))

        if self._fill and width > 0:
            chunks[-1] = pad_line(chunks[-1], width)

        for chunk in chunks:
            self._window.push(chunk)
