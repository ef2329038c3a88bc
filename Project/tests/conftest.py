import logging
import sys
import os
import pytest
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from fpcore.logger import logger


@pytest.fixture
def fpcore_log(caplog):
    """caplog wired to the package logger, which does not propagate to root."""
    caplog.set_level(logging.DEBUG, logger="fpcore")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
