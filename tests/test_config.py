"""Tests for environment overrides in keyfx.config."""

import importlib

import pytest

import keyfx.config

OVERRIDES = ("KEYFX_SNAKE_TICK_MS", "KEYFX_BLINK_MS", "KEYFX_LOG_LEVEL")


@pytest.fixture
def config(monkeypatch):
    """Reload the config module after setting env vars; restore it afterwards."""
    yield keyfx.config
    for name in OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    importlib.reload(keyfx.config)


class TestDefaults:
    def test_tick_periods(self, config, monkeypatch):
        for name in OVERRIDES:
            monkeypatch.delenv(name, raising=False)
        importlib.reload(config)
        assert config.SNAKE_TICK == pytest.approx(0.35)
        assert config.HEATMAP_BLINK_INTERVAL == pytest.approx(0.5)
        assert config.LOG_LEVEL == "INFO"


class TestOverrides:
    def test_snake_tick(self, config, monkeypatch):
        monkeypatch.setenv("KEYFX_SNAKE_TICK_MS", "200")
        importlib.reload(config)
        assert config.SNAKE_TICK == pytest.approx(0.2)

    def test_blink_interval(self, config, monkeypatch):
        monkeypatch.setenv("KEYFX_BLINK_MS", "750")
        importlib.reload(config)
        assert config.HEATMAP_BLINK_INTERVAL == pytest.approx(0.75)

    def test_log_level_uppercased(self, config, monkeypatch):
        monkeypatch.setenv("KEYFX_LOG_LEVEL", "debug")
        importlib.reload(config)
        assert config.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("name", ["KEYFX_SNAKE_TICK_MS", "KEYFX_BLINK_MS"])
    @pytest.mark.parametrize("raw", ["0", "-350"])
    def test_non_positive_period_rejected(self, config, monkeypatch, name, raw):
        monkeypatch.setenv(name, raw)
        with pytest.raises(ValueError, match=name):
            importlib.reload(config)
