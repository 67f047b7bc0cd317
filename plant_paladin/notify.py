"""Formatting of watering reminders."""

from typing import Any


def format_nag_line(entry: dict[str, Any]) -> str:
    """Format a single overdue plant."""
    return f"Plant needs watering: {entry['name']} ({entry['days_since']} days since last watered)"


def format_nag_report(overdue: list[dict[str, Any]]) -> list[str]:
    """Format every overdue plant, one line each."""
    return [format_nag_line(entry) for entry in overdue]
