#!/usr/bin/env python
#
# Nagios NRPE Checks Library - Command Line
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


import argparse
import logging
import os
import sys

from libnrpe.common import GeneratorError, NagiosCodes, Outcome, exit, run
from libnrpe.context import CheckContext
from libnrpe.generator import DEFAULT_AUTHOR, generate_check

logging.basicConfig(
    format='%(levelname)-8s [%(filename)s:%(lineno)d] %(message)s',
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse CLI arguments of the check runner"""
    parser = argparse.ArgumentParser(
        description='Run one of the bundled Nagios NRPE checks',
    )
    parser.add_argument(
        '-c',
        '--check',
        help='Name of the check to run',
    )
    parser.add_argument(
        '-l',
        '--check-list',
        action='store_true',
        help='List the checks enabled by the configuration',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Mirror the log messages to standard output',
    )
    parser.add_argument(
        '-f',
        '--config',
        default=None,
        help='The YAML configuration file, default is ../config.yaml',
    )

    return parser, parser.parse_args(argv)


def main(argv=None):
    """Main entry point of nrpe"""
    parser, args = parse_args(argv)

    if not args.check_list and not args.check:
        parser.print_help(sys.stderr)
        exit(Outcome(NagiosCodes.UNKNOWN, 'No check given', ''))

    # The verbose flag only overrides the configuration when it is set
    ctx = CheckContext(
        config_file=args.config, verbose=True if args.verbose else None,
    )
    if args.check_list:
        run(ctx.check_list)
    run(ctx.check, args.check)


def parse_generate_args(argv=None):
    """Parse CLI arguments of the check generator"""
    parser = argparse.ArgumentParser(
        description='Create a new Nagios NRPE check script from the template',
    )
    parser.add_argument(
        '-n',
        '--check-name',
        required=True,
        help='The name of the check script to be created',
    )
    parser.add_argument(
        '-p',
        '--check-path',
        default=os.getcwd(),
        help='The directory the check script is created in',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Print what is done',
    )
    parser.add_argument(
        '-a',
        '--author',
        default=DEFAULT_AUTHOR,
        help='The copyright holder written into the check script',
    )

    return parser.parse_args(argv)


def generate_main(argv=None):
    """Main entry point of nrpe-generate"""
    args = parse_generate_args(argv)
    logger.setLevel(logging.INFO if args.verbose else logging.WARNING)
    logging.getLogger('libnrpe.generator').setLevel(logger.level)

    try:
        check_file = generate_check(
            args.check_name, args.check_path, args.verbose, args.author,
        )
    except GeneratorError as error:
        print(error, file=sys.stderr)
        sys.exit(1)

    print('Created {}'.format(check_file))
    sys.exit(0)
