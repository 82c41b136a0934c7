import logging
from typing import Collection

import pytest

from osclient._cogs.helpers.loggers import JsonFormatter, LogFormat, configure


def _get_new_handlers(original: Collection[logging.Handler]) -> Collection[logging.Handler]:
    return [handler for handler in logging.getLogger().handlers if handler not in original]


def test_one_handler_is_added():
    original = logging.getLogger().handlers[:]
    configure()
    assert len(_get_new_handlers(original)) == 1


@pytest.mark.parametrize('options, level', [
    (dict(), logging.INFO),
    (dict(verbose=True), logging.DEBUG),
    (dict(debug=True), logging.DEBUG),
    (dict(quiet=True), logging.WARNING),
])
def test_levels(options, level):
    configure(**options)
    assert logging.getLogger().level == level


@pytest.mark.parametrize('log_format', [LogFormat.FULL, LogFormat.PLAIN, '%(message)s'])
def test_text_formatters(log_format):
    original = logging.getLogger().handlers[:]
    configure(log_format=log_format)
    handlers = _get_new_handlers(original)
    assert type(handlers[0].formatter) is logging.Formatter


def test_json_formatter():
    original = logging.getLogger().handlers[:]
    configure(log_format=LogFormat.JSON)
    handlers = _get_new_handlers(original)
    assert type(handlers[0].formatter) is JsonFormatter


def test_libraries_are_silenced_unless_debugging():
    configure(verbose=True)
    assert not logging.getLogger('aiohttp').propagate
    assert not logging.getLogger('asyncio').propagate


def test_libraries_are_heard_when_debugging():
    configure(debug=True)
    assert logging.getLogger('aiohttp').propagate
    assert logging.getLogger('asyncio').propagate
