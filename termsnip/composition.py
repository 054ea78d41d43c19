"""Composition root - the ONLY place where dependencies are wired."""

from pathlib import Path
from typing import Any

from termsnip.application.services import TermSnip
from termsnip.config import SnipConfig, load_config
from termsnip.domain import TerminalPort
from termsnip.infrastructure.terminal import RichTerminal


def create_terminal() -> TerminalPort:
    """Create the real terminal adapter."""
    return RichTerminal()


def create_term_snip(
    config: SnipConfig | None = None,
    config_path: Path | str | None = None,
    terminal: TerminalPort | None = None,
    **overrides: Any,
) -> TermSnip:
    """Create a TermSnip session wired from configuration.

    Args:
        config: Ready configuration; loaded from ``config_path`` if None.
        config_path: YAML file to load when ``config`` is None.
        terminal: Terminal to write to, defaults to stdout.
        **overrides: Config fields that take precedence, None values ignored.

    Returns:
        Session ready for writing.
    """
    if config is None:
        config = load_config(config_path)

    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        config = SnipConfig.model_validate({**config.model_dump(), **updates})

    return TermSnip(
        limit=config.limit,
        fill=config.fill,
        terminal=terminal or create_terminal(),
        clear_on_exit=config.clear_on_exit,
    )
