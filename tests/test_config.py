"""Tests for EitherConfig, init() and environment detection."""

import os
from unittest.mock import patch

import pytest
from klaw_either import EitherConfig, get_config, init

pytestmark = pytest.mark.usefixtures('fresh_config')


class TestDefaults:
    """Tests for the default configuration."""

    def test_default_config(self):
        """With no environment, logging is left alone and tracing is off."""
        with patch.dict(os.environ, {}, clear=True):
            config = get_config()
        assert config == EitherConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.trace_faults is False

    def test_config_is_frozen(self):
        """EitherConfig is immutable."""
        with pytest.raises(AttributeError):
            EitherConfig().trace_faults = True  # type: ignore[misc]

    def test_get_config_is_cached(self):
        """The environment is read once until reset."""
        with patch.dict(os.environ, {'KLAW_EITHER_TRACE_FAULTS': '1'}):
            first = get_config()
        assert get_config() is first
        assert first.trace_faults is True


class TestEnvironment:
    """Tests for environment variable detection."""

    def test_log_level_is_uppercased(self):
        """KLAW_EITHER_LOG_LEVEL is normalized."""
        with (
            patch.dict(os.environ, {'KLAW_EITHER_LOG_LEVEL': 'warning'}),
            patch('klaw_either._config.configure_logging'),
        ):
            assert get_config().log_level == 'WARNING'

    def test_log_level_configures_logging_on_first_read(self):
        """An environment log level configures logging once, on first use."""
        with (
            patch.dict(os.environ, {'KLAW_EITHER_LOG_LEVEL': 'info', 'KLAW_EITHER_LOG_JSON': '0'}),
            patch('klaw_either._config.configure_logging') as configure,
        ):
            get_config()
            get_config()
        configure.assert_called_once_with('INFO', json_output=False)

    def test_no_log_level_leaves_logging_alone(self):
        """Without a log level, reading the config does not touch logging."""
        with (
            patch.dict(os.environ, {}, clear=True),
            patch('klaw_either._config.configure_logging') as configure,
        ):
            get_config()
        configure.assert_not_called()

    @pytest.mark.parametrize(('raw', 'expected'), [('1', True), ('true', True), ('ON', True), ('0', False), ('no', False)])
    def test_trace_flag_values(self, raw, expected):
        """Boolean flags accept common spellings."""
        with patch.dict(os.environ, {'KLAW_EITHER_TRACE_FAULTS': raw}):
            assert get_config().trace_faults is expected

    def test_unknown_flag_value_falls_back(self):
        """Unknown flag values keep the default."""
        with patch.dict(os.environ, {'KLAW_EITHER_LOG_JSON': 'maybe'}):
            assert get_config().json_logs is True


class TestInit:
    """Tests for init()."""

    def test_explicit_arguments_override_environment(self):
        """init() arguments win over environment variables."""
        with patch.dict(os.environ, {'KLAW_EITHER_TRACE_FAULTS': '1', 'KLAW_EITHER_LOG_JSON': '0'}, clear=True):
            config = init(trace_faults=False)
        assert config.trace_faults is False
        assert config.json_logs is False
        assert get_config() is config

    def test_init_configures_logging_when_level_given(self):
        """A log level triggers logging configuration."""
        with patch('klaw_either._config.configure_logging') as configure:
            config = init(log_level='debug', json_logs=False)
        assert config.log_level == 'DEBUG'
        configure.assert_called_once_with('DEBUG', json_output=False)

    def test_init_leaves_logging_alone_without_level(self):
        """No level means no logging configuration."""
        with (
            patch.dict(os.environ, {}, clear=True),
            patch('klaw_either._config.configure_logging') as configure,
        ):
            init(trace_faults=True)
        configure.assert_not_called()
