#!/usr/bin/env python
"""Nagios NRPE Checks - Hosts File Check

Checks the hosts file to ensure correctness.  Generally only useful if
you have got a bucket load of stuff in your hosts file.  Returns:

* critical when a line is not an address followed by host names
* warning when a host name points to different addresses of the same
  IP version

The file defaults to /etc/hosts and can be set in the configuration:

    check:
      hostsfile:
        path: /etc/hosts

Copyright (c) 2026 InnoGames GmbH
"""
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

import collections
import ipaddress
import re

from libnrpe.checks import default_registry

DEFAULT_PATH = '/etc/hosts'
LABEL = re.compile(r'^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$')

HostsEntry = collections.namedtuple('HostsEntry', ['lineno', 'address', 'names'])


@default_registry.register('hostsfile')
def hostsfile(ctx):
    settings = (ctx.config.get('check') or {}).get('hostsfile') or {}
    if not isinstance(settings, dict):
        ctx.error('{!r}: check.hostsfile is not a mapping'.format(settings))
    path = settings.get('path', DEFAULT_PATH)
    if not isinstance(path, str) or not path:
        ctx.error('{!r}: check.hostsfile.path is not a file name'.format(path))
    ctx.info('Checking hosts file {}'.format(path))

    try:
        with open(path, 'r') as hosts_file:
            lines = hosts_file.readlines()
    except (OSError, UnicodeDecodeError) as error:
        ctx.error('Cannot read {}: {}'.format(path, error))

    entries, invalid = parse_hosts(lines)
    duplicates = find_duplicates(entries)
    stats = 'entries={};invalid={};duplicates={}'.format(
        len(entries), len(invalid), len(duplicates),
    )

    problems = []
    if invalid:
        ctx.debug('Invalid lines: {}'.format(invalid))
        problems.append('Invalid lines in {}: {}'.format(
            path, ', '.join(str(i) for i in invalid),
        ))
    if duplicates:
        problems.append('Host names with multiple addresses: {}'.format(
            ', '.join(duplicates),
        ))

    if invalid:
        ctx.exit_critical('; '.join(problems), stats)
    if duplicates:
        ctx.exit_warning('; '.join(problems), stats)
    ctx.exit_ok(
        'Hosts file {} is valid with {} entries'.format(path, len(entries)),
        stats,
    )


def parse_hosts(lines):
    """Return the valid entries and the numbers of the invalid lines"""
    entries = []
    invalid = []

    for lineno, line in enumerate(lines, 1):
        fields = line.split('#', 1)[0].split()
        if not fields:
            continue

        address = parse_address(fields[0])
        names = fields[1:]
        if address is None or not names or not all(map(valid_name, names)):
            invalid.append(lineno)
            continue

        entries.append(HostsEntry(lineno, address, names))

    return entries, invalid


def parse_address(value):
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        return None


def valid_name(name):
    """Check the host name against RFC 1123"""
    if name.endswith('.'):
        name = name[:-1]
    if not name or len(name) > 253:
        return False
    return all(LABEL.match(label) for label in name.split('.'))


def find_duplicates(entries):
    """Return the host names pointing to more than one address

    The same name for an IPv4 and an IPv6 address is expected, think
    of localhost, so only the addresses of the same version count.
    """
    addresses = collections.defaultdict(set)
    for entry in entries:
        for name in entry.names:
            addresses[(name.lower(), entry.address.version)].add(entry.address)

    return sorted({
        name for (name, version), found in addresses.items() if len(found) > 1
    })
