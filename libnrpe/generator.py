#!/usr/bin/env python
#
# Nagios NRPE Checks Library - Check Generator
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


import datetime
import keyword
import logging
import os
import re
import stat
from string import Template

from libnrpe.common import GeneratorError

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = '<author>'
CHECK_NAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
# Names the template itself uses
RESERVED = {'args', 'argparse', 'ctx', 'main', 'parse_args', 'run'}
TEMPLATE_FILE = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'templates', 'check.py.tmpl',
)


def generate_check(name, path, verbose=False, author=DEFAULT_AUTHOR):
    """Write a new check script from the template and return its path"""
    if not name or not CHECK_NAME.match(name):
        raise GeneratorError('{}: not a valid check name'.format(name))
    if keyword.iskeyword(name.lower()) or name.lower() in RESERVED:
        raise GeneratorError('{}: reserved check name'.format(name))
    if not os.path.isdir(path):
        raise GeneratorError('{}: not a directory'.format(path))

    check_file = os.path.join(path, '{}.py'.format(name))
    if os.path.exists(check_file):
        raise GeneratorError('{}: file already exists'.format(check_file))

    content = render_check(name, author)
    if verbose:
        logger.info('Writing check {} to {}'.format(name, check_file))

    # Exclusive create, in case the file appeared since the check above
    try:
        with open(check_file, 'x') as fd:
            fd.write(content)
    except FileExistsError:
        raise GeneratorError('{}: file already exists'.format(check_file))

    mode = os.stat(check_file).st_mode
    os.chmod(check_file, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    return check_file


def render_check(name, author=DEFAULT_AUTHOR):
    with open(TEMPLATE_FILE, 'r') as fd:
        template = Template(fd.read())

    return template.substitute(
        name=name.lower(),
        title=name.replace('_', ' ').title(),
        year=datetime.date.today().year,
        author=author,
    )
