import logging

import pytest
import structlog

from formcheck.core import logging as fc_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any configure_logging() a test (or the CLI) performed."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    saved = dict(fc_logging._config)

    yield

    root.handlers[:] = handlers
    root.setLevel(level)
    fc_logging._config.update(saved)
    structlog.reset_defaults()
