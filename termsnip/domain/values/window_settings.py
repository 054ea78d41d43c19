"""Window settings value object."""

from dataclasses import dataclass

# Default business rules
DEFAULT_LIMIT = 5


@dataclass(frozen=True, slots=True)
class WindowSettings:
    """Parameters of a snip session (value object)."""

    limit: int = DEFAULT_LIMIT
    fill: bool = False

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"Limit must be positive, got {self.limit}")
