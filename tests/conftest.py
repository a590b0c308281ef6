import logging

import pytest

from giftwrap.config import LOGGER_NAME


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
