import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_json_logger():
    # the default JSON handler binds sys.stderr at creation; pytest swaps it per test
    yield
    logger = logging.getLogger("ride_share")
    for h in list(logger.handlers):
        logger.removeHandler(h)
