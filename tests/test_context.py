import pytest

from libnrpe.common import (
    CheckExit,
    ConfigError,
    EmptyMessage,
    InvalidExitCode,
    NagiosCodes,
    UndefinedStats,
)
from libnrpe.context import CheckContext, parse_exit_code


def test_severity_accessors(ctx):
    assert (ctx.ok, ctx.warning, ctx.critical, ctx.unknown) == (0, 1, 2, 3)


def test_matching_severity_config_is_accepted(logger):
    config = {'nagios': {'ok': 0, 'warning': '1', 'critical': 2}}
    ctx = CheckContext(config=config, logger=logger)

    assert ctx.critical == 2


@pytest.mark.parametrize('name, value', [
    ('ok', 5),
    ('warning', 0),
    ('critical', 'two'),
    ('unknown', True),
])
def test_mismatched_severity_config_fails(logger, name, value):
    with pytest.raises(ConfigError):
        CheckContext(config={'nagios': {name: value}}, logger=logger)


def test_finalize_defaults(nagios, ctx):
    assert nagios(ctx.finalize) == (3, 'Unknown\n')


def test_exit_ok_with_stats(nagios, ctx):
    result = nagios(ctx.exit_ok, 'Looks good', 'stat1=123;stat2=321')

    assert result == (0, 'Looks good|stat1=123;stat2=321\n')


def test_exit_warning_without_arguments(nagios, ctx):
    assert nagios(ctx.exit_warning) == (1, 'Unknown\n')


def test_exit_unknown(nagios, ctx):
    assert nagios(ctx.exit_unknown, 'No data') == (3, 'No data\n')


def test_finalize_strips_trailing_whitespace(nagios, ctx):
    result = nagios(ctx.exit_critical, 'Service down\n', 'up=0\n')

    assert result == (2, 'Service down|up=0\n')


def test_invalid_exit_code_keeps_previous_state(ctx):
    ctx.exit_code = 1

    with pytest.raises(InvalidExitCode):
        ctx.exit_code = 7

    assert ctx.exit_code == NagiosCodes.WARNING


@pytest.mark.parametrize('value', [7, -1, None, True, 1.0, 'warning'])
def test_parse_exit_code_rejects(value):
    with pytest.raises(InvalidExitCode):
        parse_exit_code(value)


def test_parse_exit_code_accepts_digits():
    assert parse_exit_code('2') is NagiosCodes.CRITICAL


@pytest.mark.parametrize('value', ['', '   ', '\n', '...', None])
def test_empty_message_is_rejected(ctx, value):
    ctx.exit_message = 'Fine'

    with pytest.raises(EmptyMessage):
        ctx.exit_message = value

    assert ctx.exit_message == 'Fine'


def test_empty_message_fails_set_exit(ctx):
    with pytest.raises(EmptyMessage):
        ctx.exit_ok('')


def test_stats_may_be_empty(ctx):
    ctx.exit_stats = ''

    assert ctx.exit_stats == ''


def test_stats_must_be_string(ctx):
    with pytest.raises(UndefinedStats):
        ctx.exit_stats = None


def test_strict_context_requires_stats(logger):
    ctx = CheckContext(config={}, logger=logger, strict=True)

    with pytest.raises(UndefinedStats):
        ctx.exit_stats

    ctx.exit_stats = ''
    assert ctx.exit_stats == ''


def test_error_overrides_exit_code(nagios, ctx, logger):
    ctx.exit_code = 0

    assert nagios(ctx.error, 'boom') == (2, 'boom\n')
    logger.error.assert_called_once_with('boom')


def test_error_default_message(nagios, ctx, logger):
    assert nagios(ctx.error) == (2, 'Unknown error\n')
    logger.error.assert_called_once_with('Unknown error')


def test_info_and_debug_do_not_exit(ctx, logger):
    ctx.info('some info\n')
    ctx.debug()

    logger.info.assert_called_once_with('some info')
    logger.debug.assert_called_once_with('Unknown debug')
    assert ctx.exit_code is None


def test_finalize_runs_once(ctx):
    with pytest.raises(CheckExit) as exc_info:
        ctx.exit_ok('first')

    assert exc_info.value.outcome.message == 'first'

    with pytest.raises(RuntimeError):
        ctx.finalize()


def test_exit_cannot_be_swallowed(nagios, ctx):
    def sneaky(ctx):
        try:
            ctx.exit_ok('fine')
        except Exception:
            ctx.exit_critical('swallowed')

    assert nagios(sneaky, ctx) == (0, 'fine\n')


def test_outcome_does_not_finalize(ctx):
    ctx.exit_code = 1
    ctx.exit_message = 'Slow'

    assert ctx.outcome() == (NagiosCodes.WARNING, 'Slow', '')
    assert ctx.outcome().output() == 'Slow'


def test_config_loaded_lazily(tmp_path, logger):
    config_file = tmp_path / 'config.yaml'
    config_file.write_text('verbose: true\nlog: true\n')
    ctx = CheckContext(config_file=str(config_file), logger=logger)

    assert ctx.verbose is True
    assert ctx.logging_enabled is True


def test_explicit_verbose_wins(logger):
    ctx = CheckContext(config={'verbose': True}, logger=logger, verbose=False)

    assert ctx.verbose is False
    assert ctx.logging_enabled is False
