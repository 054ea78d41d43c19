"""Domain services - pure business logic operations."""

from .line_wrapper import LineWrapper, pad_line, split_text

__all__ = [
    "LineWrapper",
    "pad_line",
    "split_text",
]
