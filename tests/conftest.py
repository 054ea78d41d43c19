"""Shared test fixtures and configuration."""

import logging

import pytest

from termsnip.domain import LineWindow, LineWrapper, TerminalSize

# ============= Mock Fixtures =============


class FakeTerminal:
    """Fake terminal recording calls and simulating the screen."""

    def __init__(self, rows: int = 20, cols: int = 20, fail_on_write: int | None = None):
        self._size = TerminalSize(rows=rows, cols=cols)
        self._fail_on_write = fail_on_write
        self._write_attempts = 0
        self.calls: list[tuple[str, object]] = []
        self.screen: list[str] = []
        self.size_queries = 0

    def write_line(self, text: str) -> None:
        self._write_attempts += 1
        if self._fail_on_write is not None and self._write_attempts == self._fail_on_write:
            raise OSError("device write failed")
        self.calls.append(("write_line", text))
        self.screen.append(text)

    def clear_last_lines(self, n: int) -> None:
        self.calls.append(("clear_last_lines", n))
        if n > 0:
            del self.screen[-n:]

    def size(self) -> TerminalSize:
        self.size_queries += 1
        return self._size

    # Test helpers
    def resize(self, rows: int, cols: int) -> None:
        """Simulate the user resizing the terminal."""
        self._size = TerminalSize(rows=rows, cols=cols)

    @property
    def writes(self) -> list[str]:
        """Texts passed to write_line, in order."""
        return [arg for name, arg in self.calls if name == "write_line"]

    @property
    def clears(self) -> list[int]:
        """Arguments passed to clear_last_lines, in order."""
        return [arg for name, arg in self.calls if name == "clear_last_lines"]

    def reset_calls(self) -> None:
        self.calls.clear()


@pytest.fixture
def fake_terminal():
    """Fake terminal 20 rows by 20 columns."""
    return FakeTerminal()


@pytest.fixture
def narrow_terminal():
    """Fake terminal only 6 columns wide."""
    return FakeTerminal(cols=6)


# ============= Domain Fixtures =============


@pytest.fixture
def window(fake_terminal):
    """Line window with a limit of 5."""
    return LineWindow(terminal=fake_terminal, limit=5)


@pytest.fixture
def wrapper(fake_terminal, window):
    """Line wrapper feeding the window."""
    return LineWrapper(fake_terminal, window)


# ============= Logging Fixtures =============


@pytest.fixture
def clean_logger():
    """Restore the package logger after a test configures it."""
    logger = logging.getLogger("termsnip")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty directory with no config path override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TERMSNIP_CONFIG_PATH", raising=False)
    return tmp_path
