"""Command line argument parsing."""

import argparse

from termsnip import __version__
from termsnip.cli.demos import DEMOS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - lines: Maximum visible lines (None to use config)
        - fill: Whether to pad lines to terminal width
        - clear: Whether to clear the output when done
        - config: Path to YAML config file
        - verbose: Whether to show debug logs
        - demo: Name of a demo to run instead of reading stdin
        - delay: Seconds between demo lines
    """
    parser = argparse.ArgumentParser(
        prog="termsnip",
        description="Show input on the terminal limited to the last N lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Example:\n  make 2>&1 | termsnip -n 10 --clear",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n",
        "--lines",
        type=int,
        default=None,
        metavar="N",
        help="Maximum number of visible lines (default: from config, 5)",
    )
    parser.add_argument(
        "--fill",
        action="store_true",
        default=None,
        help="Pad every line with spaces to the terminal width",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        default=None,
        help="Clear the written lines when input ends",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        metavar="PATH",
        help="YAML config file (default: $TERMSNIP_CONFIG_PATH or termsnip.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs on stderr",
    )
    parser.add_argument(
        "--demo",
        choices=sorted(DEMOS),
        default=None,
        help="Run a demo instead of reading stdin",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.5,
        metavar="SECONDS",
        help="Pause between demo lines (default: 0.5)",
    )

    args = parser.parse_args(argv)
    if args.lines is not None and args.lines < 1:
        parser.error("--lines must be positive")
    if args.delay < 0:
        parser.error("--delay must not be negative")
    return args
