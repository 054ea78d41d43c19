"""Application services - use case orchestration."""

from .term_snip import TermSnip

__all__ = [
    "TermSnip",
]
