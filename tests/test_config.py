"""Tests for resultkit.config."""

import logging

import pytest

from resultkit.config import DEFAULT_CLONE_MAX_DEPTH, Settings, configure, get_settings, reset_settings


@pytest.fixture(autouse=True)
def _settings(fresh_settings):
    """Every test here starts from a clean environment."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = list(root.handlers)
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestDefaults:
    """Tests for settings built without configuration."""

    def test_defaults(self):
        """Unset environment gives the stock settings."""
        settings = get_settings()
        assert settings == Settings()
        assert settings.log_level is None
        assert settings.json_logs is True
        assert settings.clone_max_depth == DEFAULT_CLONE_MAX_DEPTH == 10

    def test_settings_cached(self):
        """get_settings() returns the same object until reset."""
        assert get_settings() is get_settings()

    def test_settings_frozen(self):
        """Settings cannot be modified in place."""
        with pytest.raises(AttributeError):
            get_settings().clone_max_depth = 3  # type: ignore[misc]


class TestEnvironment:
    """Tests for environment variable handling."""

    def test_reads_environment(self, monkeypatch):
        """Environment variables feed the lazily built settings."""
        monkeypatch.setenv('RESULTKIT_LOG_LEVEL', 'debug')
        monkeypatch.setenv('RESULTKIT_JSON_LOGS', 'false')
        monkeypatch.setenv('RESULTKIT_CLONE_MAX_DEPTH', '4')
        settings = get_settings()
        assert settings == Settings(log_level='DEBUG', json_logs=False, clone_max_depth=4)

    @pytest.mark.parametrize(
        ('name', 'value', 'field', 'expected'),
        [
            ('RESULTKIT_LOG_LEVEL', 'LOUD', 'log_level', None),
            ('RESULTKIT_JSON_LOGS', 'maybe', 'json_logs', True),
            ('RESULTKIT_CLONE_MAX_DEPTH', 'deep', 'clone_max_depth', 10),
            ('RESULTKIT_CLONE_MAX_DEPTH', '-2', 'clone_max_depth', 10),
        ],
    )
    def test_invalid_values_fall_back(self, monkeypatch, caplog, name, value, field, expected):
        """Invalid values log a warning and use the default."""
        monkeypatch.setenv(name, value)
        with caplog.at_level(logging.WARNING):
            settings = get_settings()
        assert getattr(settings, field) == expected
        assert name in caplog.text

    def test_reset_rereads_environment(self, monkeypatch):
        """reset_settings() makes the next read see new environment values."""
        assert get_settings().clone_max_depth == 10
        monkeypatch.setenv('RESULTKIT_CLONE_MAX_DEPTH', '3')
        assert get_settings().clone_max_depth == 10
        reset_settings()
        assert get_settings().clone_max_depth == 3


class TestConfigure:
    """Tests for configure()."""

    def test_explicit_arguments_win(self, monkeypatch):
        """Arguments override the environment."""
        monkeypatch.setenv('RESULTKIT_CLONE_MAX_DEPTH', '3')
        settings = configure(clone_max_depth=7, json_logs=False)
        assert settings.clone_max_depth == 7
        assert settings.json_logs is False
        assert get_settings() is settings

    def test_environment_fills_gaps(self, monkeypatch):
        """Omitted arguments come from the environment."""
        monkeypatch.setenv('RESULTKIT_CLONE_MAX_DEPTH', '3')
        assert configure().clone_max_depth == 3

    def test_negative_depth_rejected(self):
        """A negative clone_max_depth raises ValueError."""
        with pytest.raises(ValueError, match='clone_max_depth'):
            configure(clone_max_depth=-1)

    def test_log_level_configures_logging(self):
        """A log level installs a handler on the root logger."""
        configure(log_level='WARNING', json_logs=True)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_no_log_level_leaves_logging_alone(self):
        """Without a log level the root logger is untouched."""
        root = logging.getLogger()
        handlers = list(root.handlers)
        configure()
        assert root.handlers == handlers
