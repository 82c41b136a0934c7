import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_loggers():
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    libs = {name: (logging.getLogger(name).propagate, logging.getLogger(name).handlers[:])
            for name in ['asyncio', 'aiohttp']}
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)
    for name, (propagate, handlers) in libs.items():
        logging.getLogger(name).propagate = propagate
        logging.getLogger(name).handlers[:] = handlers
