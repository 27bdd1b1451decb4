#!/usr/bin/env python
#
# Nagios NRPE Checks Library - Check Registry
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

logger = logging.getLogger(__name__)

DEFAULT_CHECK = 'example'


class FunctionCheck:
    """Adapter for checks written as a plain function of the context"""

    def __init__(self, func):
        self.func = func
        self.__doc__ = func.__doc__

    def run(self, ctx):
        return self.func(ctx)


class CheckRegistry:
    """Checks looked up by their case insensitive name"""

    def __init__(self):
        self._checks = {}

    def __contains__(self, name):
        return name.lower() in self._checks

    def __len__(self):
        return len(self._checks)

    def register(self, name, implementation=None):
        """Add a check, can also be used as a decorator

        A later check with the same name replaces the earlier one.
        """
        if implementation is None:
            def decorator(func):
                self.register(name, func)
                return func
            return decorator

        if not hasattr(implementation, 'run'):
            implementation = FunctionCheck(implementation)

        key = name.lower()
        if key in self._checks:
            logger.debug('Check {} is shadowed by {!r}'.format(
                key, implementation,
            ))
        self._checks[key] = implementation

        return implementation

    def get(self, name):
        return self._checks.get(name.lower())

    def names(self):
        return sorted(self._checks)

    def enabled_by(self, config):
        """Return the checks which are listed in the check section

        Without a check section in the configuration everything stays
        enabled.
        """
        enabled = config.get('check')
        if enabled is None:
            return self

        registry = CheckRegistry()
        for name in enabled:
            check = self.get(str(name))
            if check is not None:
                registry.register(str(name), check)

        return registry

    def dispatch(self, ctx, requested_name=None):
        """Run the requested check, this never returns

        Anything the check raises becomes a critical result, and a check
        returning without an exit is finalized with the state it set.
        """
        name = (requested_name or DEFAULT_CHECK).lower()
        check = self._checks.get(name)

        if check is None:
            ctx.error('Check not found.')

        ctx.debug('Running check {}'.format(name))
        try:
            check.run(ctx)
        except Exception as error:
            ctx.error(str(error) or type(error).__name__)

        ctx.finalize()

    def list(self, ctx):
        for name in self.names():
            print('check: {}'.format(name))

        ctx.exit_ok('Check list complete.')
