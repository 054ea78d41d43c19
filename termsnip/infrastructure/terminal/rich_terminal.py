"""Terminal adapter backed by a rich Console."""

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from termsnip.domain import TerminalSize


class RichTerminal:
    """Implements TerminalPort on top of rich.console.Console.

    Lines go straight to the console's stream, byte for byte. Rich
    rendering would expand tabs and drop control characters, making a
    line wider on screen than its character count.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    @property
    def console(self) -> Console:
        return self._console

    def write_line(self, text: str) -> None:
        stream = self._console.file
        stream.write(f"{text}\n")
        stream.flush()

    def clear_last_lines(self, n: int) -> None:
        if n <= 0:
            return
        # Cursor sits at the start of the line below the last one written
        codes = ((ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2)) * n
        self._console.control(Control(*codes, (ControlType.CARRIAGE_RETURN,)))

    def size(self) -> TerminalSize:
        width, height = self._console.size
        return TerminalSize(rows=height, cols=width)
