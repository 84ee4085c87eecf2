"""
Formatting utilities for display.

Used by the plain-text upload endpoint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.features.stats.models import StatsResult


def format_distance_km(meters: float) -> str:
    """
    Format distance in kilometers.

    Args:
        meters: Distance in meters

    Returns:
        Formatted string (e.g., '32.15 km')
    """
    return f"{meters / 1000:.2f} km"


def format_meters(meters: float) -> str:
    """Format a length in meters with 2 decimals (e.g., '2056.00 m')."""
    return f"{meters:.2f} m"


def format_stats_summary(result: StatsResult) -> str:
    """
    Render track statistics as a multi-line human-readable summary.

    Args:
        result: Computed track statistics

    Returns:
        Summary text, one statistic per line
    """
    lines = [
        f"Track name: {result.track_name}",
        f"Total distance: {format_distance_km(result.total_distance_m)}",
        f"Total ascent: {format_meters(result.total_ascent_m)}",
        f"Total descent: {format_meters(result.total_descent_m)}",
        "",
        f"Elevation calculated with threshold of {result.ele_threshold_used_m:.2f} meters",
    ]
    return "\n".join(lines)
