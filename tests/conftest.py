import logging
from unittest import mock

import pytest

from libnrpe.common import run
from libnrpe.context import CheckContext
from libnrpe.log import LOGGER_NAME


@pytest.fixture
def logger():
    return mock.Mock(spec=['info', 'debug', 'error'])


@pytest.fixture
def ctx(logger):
    return CheckContext(config={}, logger=logger)


@pytest.fixture
def nagios(capsys):
    """Run a check function to the end, return exit code and stdout"""

    def finish(func, *args):
        with pytest.raises(SystemExit) as exc_info:
            run(func, *args)
        return exc_info.value.code, capsys.readouterr().out

    return finish


@pytest.fixture
def clean_logger():
    """Drop the handlers load_logger() put on the library logger"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
