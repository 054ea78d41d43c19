"""Command line entry point."""

import io
import logging
import os
import sys
from typing import TextIO

from pydantic import ValidationError

from termsnip.application.services import TermSnip
from termsnip.cli.args import parse_args
from termsnip.cli.demos import run_demo
from termsnip.composition import create_term_snip
from termsnip.config import load_config
from termsnip.domain import TerminalPort
from termsnip.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def stream_lines(snip: TermSnip, source: TextIO) -> int:
    """Write every line of source through the session.

    Returns:
        Number of lines read.
    """
    count = 0
    for line in source:
        snip.write_line(line.rstrip("\r\n"))
        count += 1
    return count


def silence_stdout() -> None:
    """Point stdout at devnull once the reader has gone away.

    Output still buffered in sys.stdout would otherwise fail again when
    the interpreter flushes it at exit.
    """
    try:
        fd = sys.stdout.fileno()
    except io.UnsupportedOperation:
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    terminal: TerminalPort | None = None,
) -> int:
    """Run the CLI and return the exit code."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValidationError, ValueError) as e:
        print(f"termsnip: invalid config: {e}", file=sys.stderr)
        return 2

    setup_logging("DEBUG" if args.verbose else config.log_level)

    snip = create_term_snip(
        config=config,
        terminal=terminal,
        limit=args.lines,
        fill=args.fill,
        clear_on_exit=args.clear,
    )
    logger.debug("Session created %r", snip)

    try:
        with snip:
            if args.demo:
                run_demo(args.demo, snip, delay=args.delay)
            else:
                count = stream_lines(snip, stdin or sys.stdin)
                logger.debug("Input ended lines=%d", count)
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        silence_stdout()
        return 1
    return 0
