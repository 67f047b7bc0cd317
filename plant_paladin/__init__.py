"""Houseplant watering reminders."""

from plant_paladin.config import (
    DEFAULT_CONFIG_TOML,
    NEVER_WATERED,
    ensure_config_dir,
    get_config_dir,
    load_config,
    load_state,
    save_state,
)
from plant_paladin.watering import (
    UnknownPlantError,
    days_since_watered,
    get_overdue_plants,
    is_overdue,
    sync_state_with_config,
    water_overdue_plants,
    water_plants,
)
from plant_paladin.notify import format_nag_line, format_nag_report

__all__ = [
    "DEFAULT_CONFIG_TOML",
    "NEVER_WATERED",
    "ensure_config_dir",
    "get_config_dir",
    "load_config",
    "load_state",
    "save_state",
    "UnknownPlantError",
    "days_since_watered",
    "get_overdue_plants",
    "is_overdue",
    "sync_state_with_config",
    "water_overdue_plants",
    "water_plants",
    "format_nag_line",
    "format_nag_report",
]
