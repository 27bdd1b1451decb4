#!/usr/bin/env python
#
# Nagios NRPE Checks Library - Configuration
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

import os
import sys

import yaml

from libnrpe.common import ConfigError, NagiosCodes


def default_config_file():
    """Return the config.yaml next to the directory of the running script"""
    if os.environ.get('NRPE_CONFIG'):
        return os.environ['NRPE_CONFIG']

    bin_dir = os.path.dirname(os.path.abspath(sys.argv[0]))
    return os.path.join(bin_dir, '..', 'config.yaml')


def load_config(path):
    """Read and validate the YAML configuration file"""
    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        raise ConfigError('{}: not a readable file'.format(path))

    try:
        with open(path, 'r') as config_file:
            config = yaml.safe_load(config_file)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as error:
        raise ConfigError('{}: {}'.format(path, error))

    if config is None:
        config = {}

    return validate_config(config)


def validate_config(config):
    if not isinstance(config, dict):
        raise ConfigError('{}: not a mapping'.format(config))

    for key in ('log', 'verbose'):
        if key in config and config[key] not in (True, False, 0, 1):
            raise ConfigError('{}: not a boolean'.format(config[key]))

    for key in ('check', 'nagios', 'logging', 'log4perl'):
        if config.get(key) is not None and not isinstance(config[key], dict):
            raise ConfigError('{}: {} is not a mapping'.format(
                config[key], key,
            ))

    validate_severities(config)

    return config


def validate_severities(config):
    """Make sure the configuration cannot renumber the exit codes

    The nagios section may only repeat the fixed values.
    """
    overrides = config.get('nagios') or {}

    for code in NagiosCodes:
        name = code.name.lower()
        if name not in overrides:
            continue
        value = overrides[name]
        if isinstance(value, bool) or str(value).strip() != str(code.value):
            raise ConfigError('{}: nagios {} exit code is {}'.format(
                value, name, code.value,
            ))
