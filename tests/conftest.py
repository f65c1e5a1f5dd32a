import logging

import pytest

from fuzzysets.config import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # setup_logging() binds a StreamHandler to the current sys.stderr
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
