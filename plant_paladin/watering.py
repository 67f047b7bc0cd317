"""Decision engine for reconciling state and evaluating which plants need water."""

import logging
from datetime import datetime
from typing import Any

from plant_paladin.config import NEVER_WATERED

logger = logging.getLogger(__name__)


class UnknownPlantError(ValueError):
    """A plant was named that does not appear in the config."""

    def __init__(self, name: str):
        super().__init__(f"no plant named {name} in config")
        self.name = name


def sync_state_with_config(config: dict[str, dict], state: dict[str, Any]) -> dict[str, Any]:
    """
    Make the state track exactly the plants in the config.

    Drops status records for plants no longer configured and adds a
    never-watered record for each newly configured plant. Mutates and
    returns the state.
    """
    plants = state.setdefault("plants", {})

    for name in list(plants):
        if name not in config:
            logger.debug(f"Dropping state for removed plant {name}")
            del plants[name]

    for name in config:
        if name not in plants:
            logger.debug(f"Adding state for new plant {name}")
            plants[name] = {"last_watered": NEVER_WATERED}

    return state


def days_since_watered(status: dict[str, Any], now: datetime) -> int:
    """Whole days elapsed since the plant was last watered."""
    return (now - status["last_watered"]).days


def is_overdue(plant: dict[str, Any], status: dict[str, Any], now: datetime) -> bool:
    """A plant is overdue once its watering interval has fully elapsed."""
    return days_since_watered(status, now) >= plant["watering_interval"]


def get_overdue_plants(
    config: dict[str, dict],
    state: dict[str, Any],
    now: datetime,
) -> list[dict[str, Any]]:
    """
    List plants that need watering, sorted by name.

    Expects a state already synced with the config. Returns dicts with
    name, days_since and watering_interval.
    """
    overdue = []
    for name, status in sorted(state["plants"].items()):
        plant = config[name]
        days = days_since_watered(status, now)
        if days >= plant["watering_interval"]:
            overdue.append({
                "name": name,
                "days_since": days,
                "watering_interval": plant["watering_interval"],
            })
    return overdue


def water_plants(
    config: dict[str, dict],
    state: dict[str, Any],
    names: list[str],
    now: datetime,
) -> list[str]:
    """
    Mark the named plants as watered at `now`.

    Every name is checked against the config before anything changes, so an
    unknown name leaves the state untouched.
    """
    for name in names:
        if name not in config:
            raise UnknownPlantError(name)

    plants = state["plants"]
    watered = []
    for name in names:
        plants[name]["last_watered"] = now
        if name not in watered:
            watered.append(name)
        logger.info(f"Watered {name}")
    return watered


def water_overdue_plants(
    config: dict[str, dict],
    state: dict[str, Any],
    now: datetime,
) -> list[str]:
    """Mark every overdue plant as watered at `now`; plants not yet due are left alone."""
    plants = state["plants"]
    watered = []
    for name, plant in sorted(config.items()):
        status = plants[name]
        if is_overdue(plant, status, now):
            status["last_watered"] = now
            watered.append(name)
            logger.info(f"Watered {name}")
    return watered
