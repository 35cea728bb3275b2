import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """cli.main reconfigures the root logger; drop its handler after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
