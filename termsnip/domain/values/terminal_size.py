"""Terminal size value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TerminalSize:
    """Visible terminal area in character cells.

    Unpacks as ``(rows, cols)``.
    """

    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows < 0:
            raise ValueError(f"rows must be non-negative, got {self.rows}")
        if self.cols < 0:
            raise ValueError(f"cols must be non-negative, got {self.cols}")

    def __iter__(self):
        yield self.rows
        yield self.cols

    @property
    def width(self) -> int:
        """Alias for cols."""
        return self.cols

    @property
    def height(self) -> int:
        """Alias for rows."""
        return self.rows
