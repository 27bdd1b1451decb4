#!/usr/bin/env python
#
# Nagios NRPE Checks Library - Check Context
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


from libnrpe.checks import default_registry
from libnrpe.common import (
    WORD,
    CheckExit,
    EmptyMessage,
    InvalidExitCode,
    NagiosCodes,
    Outcome,
    UndefinedStats,
)
from libnrpe.config import default_config_file, load_config, validate_config
from libnrpe.log import load_logger


class CheckContext:
    """State of a single check invocation

    The check reports its result through one of the exit methods.  They
    all end in finalize(), which raises CheckExit carrying the outcome;
    libnrpe.common.run() turns that into the printed line and the exit
    code of the process.
    """

    def __init__(self, config=None, logger=None, verbose=None,
                 config_file=None, strict=False):
        # Validate eagerly, a bad nagios section must fail construction
        self._config = None if config is None else validate_config(config)
        self._config_file = config_file
        self._log = logger
        self._verbose = verbose
        self.strict = strict
        self._exit_code = None
        self._exit_message = None
        self._exit_stats = None
        self._finalized = False

    @property
    def config(self):
        if self._config is None:
            self._config = load_config(
                self._config_file or default_config_file()
            )
        return self._config

    @property
    def log(self):
        if self._log is None:
            self._log = load_logger(self.config, self.verbose)
        return self._log

    @property
    def verbose(self):
        if self._verbose is None:
            return bool(self.config.get('verbose', False))
        return bool(self._verbose)

    @property
    def logging_enabled(self):
        return bool(self.config.get('log', False))

    @property
    def ok(self):
        return NagiosCodes.OK

    @property
    def warning(self):
        return NagiosCodes.WARNING

    @property
    def critical(self):
        return NagiosCodes.CRITICAL

    @property
    def unknown(self):
        return NagiosCodes.UNKNOWN

    @property
    def exit_code(self):
        return self._exit_code

    @exit_code.setter
    def exit_code(self, value):
        self._exit_code = parse_exit_code(value)

    @property
    def exit_message(self):
        return self._exit_message

    @exit_message.setter
    def exit_message(self, value):
        if not isinstance(value, str) or not WORD.search(value):
            raise EmptyMessage('{!r}: exit message is empty'.format(value))
        self._exit_message = value

    @property
    def exit_stats(self):
        if self._exit_stats is None and self.strict:
            raise UndefinedStats('exit stats are not set')
        return self._exit_stats

    @exit_stats.setter
    def exit_stats(self, value):
        if not isinstance(value, str):
            raise UndefinedStats('{!r}: stats are not a string'.format(value))
        self._exit_stats = value

    def set_exit(self, code, message=None, stats=None):
        """Set the complete exit state and finalize"""
        self.exit_code = code
        self.exit_message = 'Unknown' if message is None else message
        self.exit_stats = '' if stats is None else stats
        self.finalize()

    def exit_ok(self, message=None, stats=None):
        self.set_exit(self.ok, message, stats)

    def exit_warning(self, message=None, stats=None):
        self.set_exit(self.warning, message, stats)

    def exit_critical(self, message=None, stats=None):
        self.set_exit(self.critical, message, stats)

    def exit_unknown(self, message=None, stats=None):
        self.set_exit(self.unknown, message, stats)

    def error(self, message='Unknown error'):
        """Log the error and finalize as critical

        This overrides whatever exit code was set before.
        """
        if message is None:
            message = 'Unknown error'
        message = str(message).rstrip()
        if not WORD.search(message):
            message = 'Unknown error'

        self.log.error(message)
        self.exit_message = message
        self.exit_code = self.critical
        self.finalize()

    def info(self, message='Unknown info'):
        self.log.info(str(message).rstrip())

    def debug(self, message='Unknown debug'):
        self.log.debug(str(message).rstrip())

    def outcome(self):
        """Return the outcome with the defaults of the unset fields"""
        code = self._exit_code
        if code is None:
            code = self.unknown
        message = self._exit_message
        if message is None:
            message = 'Unknown'
        stats = self._exit_stats
        if stats is None:
            stats = ''

        return Outcome(code, message.rstrip(), stats.rstrip())

    def finalize(self):
        if self._finalized:
            raise RuntimeError('Check is already finalized')
        self._finalized = True

        raise CheckExit(self.outcome())

    def check(self, name=None, registry=None):
        """Run the named check among the ones enabled by the configuration"""
        if registry is None:
            registry = default_registry.enabled_by(self.config)
        registry.dispatch(self, name)

    def check_list(self, registry=None):
        if registry is None:
            registry = default_registry.enabled_by(self.config)
        registry.list(self)


def parse_exit_code(value):
    """Return the NagiosCodes member for an exit code of 0 to 3"""
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return NagiosCodes(value)
        except ValueError:
            pass

    raise InvalidExitCode('{!r}: invalid nagios exit code'.format(value))
