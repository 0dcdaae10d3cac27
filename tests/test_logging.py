"""Tests for logging configuration, hooks and the events the library emits."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
from async_result import Ok, catching, catching_async, safe
from async_result._logging import (
    add_log_hook,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """configure_logging replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def received() -> list[dict[str, Any]]:
    """Collect every log event dict passed to hooks."""
    events: list[dict[str, Any]] = []
    add_log_hook(events.append)
    return events


def boom() -> int:
    raise ValueError('boom')


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, received: list[dict[str, Any]]) -> None:
        configure_logging(level='DEBUG', json_output=True)

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_failing_hook_does_not_break_logging(self, received: list[dict[str, Any]]) -> None:
        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failed')

        configure_logging(level='DEBUG')
        add_log_hook(broken)
        get_logger('test').info('still logged')
        assert any(e.get('event') == 'still logged' for e in received)

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError, match='Unknown log level'):
            configure_logging(level='LOUD')


class TestLibraryEvents:
    """The catching layer logs conversions at DEBUG; combinators stay silent."""

    def test_catching_logs_conversion(self, received: list[dict[str, Any]]) -> None:
        configure_logging(level='DEBUG')
        catching(boom)

        entries = [e for e in received if e.get('event') == 'exception converted to Err']
        assert len(entries) == 1
        assert entries[0]['exc_type'] == 'ValueError'
        assert entries[0]['operation'] == 'boom'
        assert entries[0]['level'] == 'debug'

    async def test_catching_async_logs_conversion(self, received: list[dict[str, Any]]) -> None:
        async def fetch() -> int:
            raise KeyError('missing')

        configure_logging(level='DEBUG')
        await catching_async(fetch)

        assert [e['exc_type'] for e in received if e.get('event') == 'exception converted to Err'] == ['KeyError']

    def test_safe_logs_wrapped_name(self, received: list[dict[str, Any]]) -> None:
        configure_logging(level='DEBUG')
        safe(boom)()
        assert [e['operation'] for e in received if 'operation' in e] == ['boom']

    def test_silent_above_debug(self, received: list[dict[str, Any]]) -> None:
        configure_logging(level='INFO')
        catching(boom)
        assert received == []

    def test_success_and_combinators_do_not_log(self, received: list[dict[str, Any]]) -> None:
        configure_logging(level='DEBUG')
        catching(lambda: 1).map(str).flat_map(Ok)
        assert received == []

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='DEBUG', json_output=True)
        catching(boom)

        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith('{')]
        assert any(line['event'] == 'exception converted to Err' for line in lines)
