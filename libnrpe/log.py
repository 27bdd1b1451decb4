#!/usr/bin/env python
#
# Nagios NRPE Checks Library - Logging
#
# Copyright (c) 2026, InnoGames GmbH
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.  IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.
#


import logging
import logging.config
import logging.handlers
import sys

LOGGER_NAME = 'libnrpe'
LOG_FORMAT = '%(levelname)-8s [%(filename)s:%(lineno)d] %(message)s'
SYSLOG_FORMAT = 'nrpe[%(process)d]: %(levelname)s %(message)s'
SYSLOG_SOCKET = '/dev/log'


def load_logger(config, verbose=False):
    """Set up the library logger for the verbose, syslog or silent mode

    A dictConfig document under the "logging" key of the configuration
    replaces the built-in setup of the selected mode.
    """
    if verbose:
        mode = 'verbose'
    elif config.get('log'):
        mode = 'default'
    else:
        mode = 'disabled'

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    custom = (config.get('logging') or {}).get(mode)
    if custom:
        custom = dict(custom)
        custom.setdefault('version', 1)
        custom.setdefault('disable_existing_loggers', False)
        logging.config.dictConfig(custom)
        return logger

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if verbose:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if config.get('log'):
        handler = get_syslog_handler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(SYSLOG_FORMAT))
        logger.addHandler(handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_syslog_handler():
    """Return a handler for the local syslog daemon"""
    try:
        return logging.handlers.SysLogHandler(
            address=SYSLOG_SOCKET,
            facility=logging.handlers.SysLogHandler.LOG_DAEMON,
        )
    except OSError:
        # No unix socket, e.g. inside containers
        return logging.handlers.SysLogHandler(
            facility=logging.handlers.SysLogHandler.LOG_DAEMON,
        )
