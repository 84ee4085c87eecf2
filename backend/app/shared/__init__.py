"""
Shared utilities (NOT business logic).

Usage:
    from app.shared import haversine_m
    from app.shared.formatters import format_stats_summary
"""
from .geo import (
    haversine_m,
    EARTH_RADIUS_M,
)
from .formatters import (
    format_distance_km,
    format_meters,
    format_stats_summary,
)

__all__ = [
    # geo
    "haversine_m",
    "EARTH_RADIUS_M",
    # formatters
    "format_distance_km",
    "format_meters",
    "format_stats_summary",
]
