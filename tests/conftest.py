# conftest.py - pytest configuration
import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_library_loggers():
    # resolve_logger(enabled=True) sets levels on named loggers; undo that between tests.
    names = ["npmignore", "npmignore.test", "npmignore.core", "npmignore.core.test"]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
