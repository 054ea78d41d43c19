"""termsnip - write to a terminal limited to a given number of lines.

The oldest line scrolls out when a new line is written past the limit.
"""

__version__ = "0.1.0"

from termsnip.application.services import TermSnip  # noqa: E402
from termsnip.domain import TerminalPort, TerminalSize  # noqa: E402

__all__ = [
    "__version__",
    "TermSnip",
    "TerminalPort",
    "TerminalSize",
]
