"""
Track Statistics Service

Drives a single pass over the first track of a document, feeding the
distance and elevation accumulators in lockstep.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from app.shared.geo import EARTH_RADIUS_M

from .accumulators import (
    DEFAULT_ELE_THRESHOLD_M,
    DistanceAccumulator,
    ElevationAccumulator,
)
from .models import GPXDocument, StatsResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsOptions:
    """Tunables for a statistics computation."""

    ele_threshold_m: float = DEFAULT_ELE_THRESHOLD_M
    earth_radius_m: float = EARTH_RADIUS_M
    # Treat 0 as "no previous value" for coordinates and elevation
    legacy_sentinels: bool = False


def compute_stats(
    document: GPXDocument,
    options: Optional[StatsOptions] = None
) -> StatsResult:
    """
    Compute distance, ascent and descent for the first track of a document.

    Only the first track is processed. A document without tracks yields
    zero totals and an empty name.

    Args:
        document: Parsed GPX document
        options: Threshold and radius settings (defaults if omitted)

    Returns:
        StatsResult with totals in meters and the threshold used
    """
    options = options or StatsOptions()

    distance = DistanceAccumulator(
        radius_m=options.earth_radius_m,
        skip_non_positive_coordinates=options.legacy_sentinels,
    )
    elevation = ElevationAccumulator(
        threshold_m=options.ele_threshold_m,
        zero_is_missing=options.legacy_sentinels,
    )

    track = document.first_track
    track_name = ""
    points_count = 0

    if track is not None:
        track_name = track.name or ""
        for waypoint in track.waypoints():
            elevation.add(waypoint.elevation)
            distance.add(waypoint.lat, waypoint.lon)
            points_count += 1

    if len(document.tracks) > 1:
        logger.debug(f"Ignoring {len(document.tracks) - 1} additional track(s)")

    logger.info(
        f"Stats for '{track_name}': {points_count} points, "
        f"{distance.total_m:.0f} m, +{elevation.ascent_m:.0f}/-{elevation.descent_m:.0f} m "
        f"(threshold {options.ele_threshold_m} m)"
    )

    return StatsResult(
        track_name=track_name,
        total_distance_m=distance.total_m,
        total_ascent_m=elevation.ascent_m,
        total_descent_m=elevation.descent_m,
        ele_threshold_used_m=options.ele_threshold_m,
    )
