"""Configuration and state management for plant watering reminders."""

import logging
import os
import tomllib
from datetime import datetime
from pathlib import Path
from typing import Any

import tomli_w

logger = logging.getLogger(__name__)

APP_NAME = "plant-paladin"
CONFIG_FILENAME = "config.toml"
STATE_FILENAME = "state.toml"

# Sentinel for plants that have no recorded watering yet
NEVER_WATERED = datetime(1900, 1, 1, 0, 0, 0)

DEFAULT_CONFIG_TOML = """\
# Plants to keep track of, one table per plant.
# watering_interval is the number of days a plant may go between waterings.

[monstera]
watering_interval = 7

[pothos]
watering_interval = 5

[snake-plant]
watering_interval = 14
"""


def get_config_dir(override: str | Path | None = None) -> Path:
    """
    Resolve the per-user config directory.

    Uses the explicit override if given, then $XDG_CONFIG_HOME, then
    ~/.config. Raises RuntimeError if the home directory cannot be found.
    """
    if override:
        return Path(override).expanduser()

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def ensure_config_dir(config_dir: Path) -> None:
    """Create the config directory if it doesn't exist yet."""
    if not config_dir.exists():
        logger.info(f"Creating config directory {config_dir}")
        config_dir.mkdir(parents=True)


def config_path(config_dir: Path) -> Path:
    return config_dir / CONFIG_FILENAME


def state_path(config_dir: Path) -> Path:
    return config_dir / STATE_FILENAME


def load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return contents."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def save_toml(path: Path, data: dict[str, Any]) -> None:
    """Save data to TOML file."""
    with open(path, "wb") as f:
        tomli_w.dump(data, f)


def parse_config(data: dict[str, Any], source: str = "config") -> dict[str, dict[str, Any]]:
    """Validate a parsed config document and return the plant mapping."""
    plants = {}
    for name, plant in data.items():
        if not isinstance(plant, dict):
            raise ValueError(f"failed to deserialize {source}: [{name}] must be a table")
        interval = plant.get("watering_interval")
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise ValueError(
                f"failed to deserialize {source}: {name}.watering_interval must be an integer"
            )
        if interval < 0:
            raise ValueError(
                f"failed to deserialize {source}: {name}.watering_interval must not be negative"
            )
        plants[name] = {"watering_interval": interval}
    return plants


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        # State only ever stores local wall-clock times
        return value.replace(tzinfo=None) if value.tzinfo else value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise ValueError(f"expected a date-time, got {value!r}")


def parse_state(data: dict[str, Any], source: str = "state") -> dict[str, Any]:
    """Validate a parsed state document and return it with datetime values."""
    raw_plants = data.get("plants", {})
    if not isinstance(raw_plants, dict):
        raise ValueError(f"failed to deserialize {source}: plants must be a table")

    plants = {}
    for name, status in raw_plants.items():
        if not isinstance(status, dict) or "last_watered" not in status:
            raise ValueError(
                f"failed to deserialize {source}: plants.{name} needs a last_watered value"
            )
        try:
            last_watered = _parse_timestamp(status["last_watered"])
        except ValueError as e:
            raise ValueError(f"failed to deserialize {source}: plants.{name}.last_watered: {e}") from e
        plants[name] = {"last_watered": last_watered}
    return {"plants": plants}


def dump_state(state: dict[str, Any]) -> dict[str, Any]:
    """Convert state to a document with ISO-8601 timestamp strings."""
    return {
        "plants": {
            name: {"last_watered": status["last_watered"].isoformat()}
            for name, status in state["plants"].items()
        }
    }


def load_config(config_dir: Path) -> dict[str, dict[str, Any]]:
    """Load plant configuration, writing the default config on first run."""
    path = config_path(config_dir)
    if not path.exists():
        logger.warning(f"No config exists, creating config at {path}")
        path.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
        return parse_config(tomllib.loads(DEFAULT_CONFIG_TOML), str(path))

    try:
        data = load_toml(path)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"failed to deserialize {path}: {e}") from e
    return parse_config(data, str(path))


def load_state(config_dir: Path) -> dict[str, Any]:
    """Load watering state, returning an empty state if there is none yet."""
    path = state_path(config_dir)
    if not path.exists():
        return {"plants": {}}

    try:
        data = load_toml(path)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"failed to deserialize {path}: {e}") from e
    return parse_state(data, str(path))


def save_state(config_dir: Path, state: dict[str, Any]) -> None:
    """Save watering state."""
    path = state_path(config_dir)
    save_toml(path, dump_state(state))
    logger.info(f"Saved state for {len(state['plants'])} plants to {path}")
