"""Shared fixtures for trellis-conf tests."""

import logging
from collections.abc import Generator
from typing import Any

import pytest
from loguru import logger

from trellis_conf.core.action import ConfigAction
from trellis_conf.utils.settings import reset_context


class RecordingAction(ConfigAction):
    """Remembers every callback as ``(name, *args)`` and can refuse one of them.

    Parameters
    ----------
    fail_on : str | None
        Callback name to refuse, e.g. ``"on_arc"``.
    fail_at : int
        Refuse the n-th (0-based) call of ``fail_on`` only.
    """

    def __init__(self, fail_on: str | None = None, fail_at: int = 0) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.cookies: list[Any] = []
        self.fail_on = fail_on
        self.fail_at = fail_at
        self._seen: dict[str, int] = {}

    def _record(self, name: str, cookie: Any, *args: Any) -> bool:
        self.calls.append((name, *args))
        self.cookies.append(cookie)
        n = self._seen.get(name, 0)
        self._seen[name] = n + 1
        return not (name == self.fail_on and n == self.fail_at)

    def on_device(self, cookie, name):
        return self._record("device", cookie, name)

    def on_comment(self, cookie, text):
        return self._record("comment", cookie, text)

    def on_sysconfig(self, cookie, name, value):
        return self._record("sysconfig", cookie, name, value)

    def on_tile(self, cookie, name):
        return self._record("tile", cookie, name)

    def on_arc(self, cookie, sink, source):
        return self._record("arc", cookie, sink, source)

    def on_word(self, cookie, name, value):
        return self._record("word", cookie, name, value)

    def on_enum(self, cookie, name, value):
        return self._record("enum", cookie, name, value)

    def on_unknown(self, cookie, value):
        return self._record("unknown", cookie, value)

    def on_bram(self, cookie, index):
        return self._record("bram", cookie, index)

    def on_data(self, cookie, index, row, value):
        return self._record("data", cookie, index, row, value)

    def on_commit(self, cookie):
        return self._record("commit", cookie)


@pytest.fixture
def recorder() -> RecordingAction:
    """An action that accepts and remembers everything."""
    return RecordingAction()


@pytest.fixture
def make_recorder() -> type[RecordingAction]:
    """Factory for actions that refuse a chosen callback."""
    return RecordingAction


@pytest.fixture
def caplog(caplog: pytest.LogCaptureFixture) -> Generator[pytest.LogCaptureFixture]:
    """Route loguru messages into pytest's caplog."""

    class PropagateHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            logging.getLogger(record.name).handle(record)

    handler_id = logger.add(PropagateHandler(), format="{message}", level="DEBUG")
    caplog.set_level(logging.DEBUG)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clean_settings() -> Generator[None]:
    """Make sure no settings leak between tests."""
    reset_context()
    yield
    reset_context()
