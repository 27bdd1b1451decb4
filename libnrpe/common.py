#!/usr/bin/env python
#
# Nagios NRPE Checks Library - Common
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

import collections
import enum
import logging
import re
import sys

logger = logging.getLogger(__name__)

WORD = re.compile(r'\w+')


class NagiosCodes(enum.IntEnum):
    """Nagios compatible exit codes

    The numbers are read by the monitoring system, never change them.
    """
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class Outcome(collections.namedtuple('Outcome', ['code', 'message', 'stats'])):
    """The final result of a single check invocation"""
    __slots__ = ()

    def output(self):
        """Return the line printed for the monitoring agent

        The performance stats and the pipe are left out altogether when
        the stats do not contain anything.
        """
        if WORD.search(self.stats):
            return '{}|{}'.format(self.message, self.stats)
        return self.message


class NrpeError(Exception):
    pass


class InvalidExitCode(NrpeError):
    pass


class EmptyMessage(NrpeError):
    pass


class UndefinedStats(NrpeError):
    pass


class ConfigError(NrpeError):
    pass


class CheckNotFound(NrpeError):
    pass


class GeneratorError(NrpeError):
    pass


class CheckExit(BaseException):
    """Raised by CheckContext.finalize() to end a check invocation

    This is a BaseException like SystemExit, so a check catching
    Exception cannot keep the process from terminating.
    """

    def __init__(self, outcome):
        super().__init__(outcome)
        self.outcome = outcome


def exit(outcome):
    """Exit procedure for the check commands"""
    print(outcome.output())
    sys.stdout.flush()
    sys.exit(int(outcome.code))


def run(func, *args, **kwargs):
    """Call func and turn whatever it ends with into a Nagios exit"""
    try:
        func(*args, **kwargs)
    except CheckExit as check_exit:
        exit(check_exit.outcome)
    except Exception as error:
        message = str(error).strip() or type(error).__name__
        logger.error(message)
        exit(Outcome(NagiosCodes.CRITICAL, message, ''))

    # The check forgot to report anything
    exit(Outcome(NagiosCodes.UNKNOWN, 'Unknown', ''))
