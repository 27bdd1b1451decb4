import os

import pytest

from libnrpe.common import ConfigError
from libnrpe.config import default_config_file, load_config, validate_config


def write(tmp_path, content):
    config_file = tmp_path / 'config.yaml'
    config_file.write_text(content)
    return str(config_file)


def test_load_config(tmp_path):
    path = write(tmp_path, (
        'log: true\n'
        'verbose: false\n'
        'check:\n'
        '  example:\n'
        'nagios:\n'
        '  ok: 0\n'
        '  unknown: 3\n'
        'log4perl:\n'
        '  default: "log4perl.rootLogger = INFO, SYSLOG"\n'
    ))

    config = load_config(path)

    assert config['log'] is True
    assert config['check'] == {'example': None}


def test_empty_config(tmp_path):
    assert load_config(write(tmp_path, '')) == {}


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError, match='not a readable file'):
        load_config(str(tmp_path / 'missing.yaml'))


def test_directory_is_not_a_config(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path))


def test_malformed_config(tmp_path):
    with pytest.raises(ConfigError):
        load_config(write(tmp_path, 'check: [example\n'))


def test_config_must_be_mapping(tmp_path):
    with pytest.raises(ConfigError, match='not a mapping'):
        load_config(write(tmp_path, '- example\n- hostsfile\n'))


def test_severity_override_fails_load(tmp_path):
    with pytest.raises(ConfigError, match='nagios critical exit code is 2'):
        load_config(write(tmp_path, 'nagios:\n  critical: 3\n'))


@pytest.mark.parametrize('config', [
    {'log': 'sometimes'},
    {'verbose': 2},
    {'check': ['example']},
    {'nagios': 'ok'},
])
def test_invalid_values(config):
    with pytest.raises(ConfigError):
        validate_config(config)


def test_default_config_file(monkeypatch):
    monkeypatch.delenv('NRPE_CONFIG', raising=False)
    monkeypatch.setattr('sys.argv', ['/opt/nrpe/bin/nrpe'])

    assert os.path.normpath(default_config_file()) == '/opt/nrpe/config.yaml'


def test_default_config_file_from_environment(monkeypatch):
    monkeypatch.setenv('NRPE_CONFIG', '/etc/nrpe/checks.yaml')

    assert default_config_file() == '/etc/nrpe/checks.yaml'
