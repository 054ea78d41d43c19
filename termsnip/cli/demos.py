"""Demo programs showing a limited terminal in action."""

import time
from collections.abc import Callable

from termsnip.application.services import TermSnip

LOREM = (
    "Lorem ipsum dolor sit amet, consetetur sadipscing elitr, sed diam nonumy "
    "eirmod tempor invidunt ut labore et dolore magna aliquyam erat, sed diam voluptua."
)

Sleep = Callable[[float], None]


def demo_five(snip: TermSnip, delay: float, sleep: Sleep = time.sleep) -> None:
    """Write 14 lines while only the last few stay visible."""
    for n in range(1, 15):
        snip.write_line(f"{n} - line number {n}")
        sleep(delay)


def demo_long_lines(snip: TermSnip, delay: float, sleep: Sleep = time.sleep) -> None:
    """Write lines longer than the terminal is wide.

    Use a terminal narrower than 170 columns to see the wrapping.
    """
    for n in range(1, 15):
        snip.write_line(f"{n} - line number {n} {LOREM}")
        sleep(delay)


def demo_clear(snip: TermSnip, delay: float, sleep: Sleep = time.sleep) -> None:
    """Write some lines and then clear them."""
    for n in range(1, 6):
        snip.write_line(f"{n} - line number {n}")
        sleep(delay)

    sleep(delay * 2)
    snip.clear_lines()
    snip.terminal.write_line("cleared...")
    sleep(delay * 4)


DEMOS: dict[str, Callable[..., None]] = {
    "five": demo_five,
    "long_lines": demo_long_lines,
    "clear": demo_clear,
}


def run_demo(name: str, snip: TermSnip, delay: float = 0.5, sleep: Sleep = time.sleep) -> None:
    """Run a demo by name."""
    try:
        demo = DEMOS[name]
    except KeyError:
        raise ValueError(f"Unknown demo: {name}") from None
    demo(snip, delay, sleep)
