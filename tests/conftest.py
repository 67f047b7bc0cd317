"""Pytest fixtures and config."""

from datetime import datetime, timedelta

import pytest


@pytest.fixture
def config_dir(tmp_path):
    """Temporary config directory."""
    path = tmp_path / "plant-paladin"
    path.mkdir()
    return path


@pytest.fixture
def now():
    return datetime(2026, 10, 19, 9, 30, 0)


@pytest.fixture
def sample_config():
    return {
        "fern": {"watering_interval": 3},
        "cactus": {"watering_interval": 21},
        "basil": {"watering_interval": 1},
    }


@pytest.fixture
def sample_state(now):
    return {
        "plants": {
            "fern": {"last_watered": now - timedelta(days=4)},
            "cactus": {"last_watered": now - timedelta(days=2)},
            "orchid": {"last_watered": now - timedelta(days=30)},
        }
    }


@pytest.fixture
def write_config(config_dir):
    """Write a config.toml into the temporary config directory."""

    def _write(text):
        (config_dir / "config.toml").write_text(text, encoding="utf-8")

    return _write
