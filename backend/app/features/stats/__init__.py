"""
Track statistics module.

Usage:
    from app.features.stats import parse_document, compute_stats

Components:
- parse_document: GPX text -> GPXDocument (gpxpy)
- DistanceAccumulator / ElevationAccumulator: per-track running totals
- compute_stats: first-track statistics (StatsResult)
- StatsResponse: Pydantic schema for the JSON endpoints
"""

from .models import GPXDocument, Segment, StatsResult, Track, Waypoint
from .parser import GPXParseError, parse_document
from .accumulators import (
    DEFAULT_ELE_THRESHOLD_M,
    DistanceAccumulator,
    ElevationAccumulator,
    accumulate_distance,
    accumulate_elevation,
)
from .service import StatsOptions, compute_stats
from .schemas import StatsResponse

__all__ = [
    # Models
    "GPXDocument",
    "Segment",
    "StatsResult",
    "Track",
    "Waypoint",
    # Parsing
    "GPXParseError",
    "parse_document",
    # Accumulators
    "DEFAULT_ELE_THRESHOLD_M",
    "DistanceAccumulator",
    "ElevationAccumulator",
    "accumulate_distance",
    "accumulate_elevation",
    # Service
    "StatsOptions",
    "compute_stats",
    # Schemas
    "StatsResponse",
]
