import logging
import logging.handlers
import sys

import pytest

from libnrpe import log
from libnrpe.log import load_logger


@pytest.fixture(autouse=True)
def reset_logger(clean_logger):
    yield


@pytest.fixture
def syslog(monkeypatch):
    handler = logging.handlers.BufferingHandler(10)
    monkeypatch.setattr(log, 'get_syslog_handler', lambda: handler)
    return handler


def test_disabled_logger_is_silent(capsys):
    logger = load_logger({})

    assert [type(h) for h in logger.handlers] == [logging.NullHandler]
    logger.error('nobody hears this')
    assert capsys.readouterr() == ('', '')


def test_verbose_logger_writes_stdout(capsys):
    logger = load_logger({}, verbose=True)
    logger.debug('checking things')

    handler, = logger.handlers
    assert handler.stream is sys.stdout
    assert 'checking things' in capsys.readouterr().out


def test_syslog_logger(syslog):
    logger = load_logger({'log': True})
    logger.debug('too detailed')
    logger.info('check started')

    assert logger.handlers == [syslog]
    assert syslog.level == logging.INFO
    assert [r.getMessage() for r in syslog.buffer] == ['check started']


def test_verbose_and_syslog(syslog):
    logger = load_logger({'log': True}, verbose=True)

    assert len(logger.handlers) == 2
    assert syslog in logger.handlers


def test_custom_logging_config(syslog):
    config = {
        'log': True,
        'logging': {
            'default': {
                'loggers': {'libnrpe': {'level': 'ERROR'}},
            },
        },
    }

    logger = load_logger(config)

    assert logger.level == logging.ERROR
    assert syslog not in logger.handlers


def test_reload_replaces_handlers():
    load_logger({}, verbose=True)
    logger = load_logger({})

    assert len(logger.handlers) == 1
