"""Unit tests for environment driven configuration."""
import importlib

import pytest

from orchestrator.config import base_config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload settings with a patched environment, restoring them afterwards."""
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(base_config)
    yield _reload
    monkeypatch.undo()
    importlib.reload(base_config)


def test_settings_from_environment(reload_config):
    config = reload_config(
        ORCHESTRATOR_API_VERSION="2",
        LOG_LEVEL="debug",
        METRICS_ENABLED="false",
        SKIP_INVALID_POOLS="TRUE",
    )

    assert config.ORCHESTRATOR_API_VERSION == "2"
    assert config.LOG_LEVEL == "DEBUG"
    assert config.METRICS_ENABLED is False
    assert config.SKIP_INVALID_POOLS is True


def test_defaults(reload_config, monkeypatch):
    for key in ("LOG_LEVEL", "SKIP_INVALID_POOLS"):
        monkeypatch.delenv(key, raising=False)
    config = reload_config()

    assert config.LOG_LEVEL == "INFO"
    assert config.SKIP_INVALID_POOLS is False
