"""
Track Accumulators

Running totals fed one waypoint at a time:
- DistanceAccumulator: haversine distance between consecutive positions
- ElevationAccumulator: ascent/descent with a noise threshold

Both are scoped to a single computation. Create new instances per track.
"""

import math
from typing import Iterable, Optional, Tuple

from app.shared.geo import EARTH_RADIUS_M, haversine_m

# Elevation changes at or below this magnitude are treated as GPS noise
DEFAULT_ELE_THRESHOLD_M = 2.0


class DistanceAccumulator:
    """
    Sums great-circle distance between each position and its predecessor.

    With skip_non_positive_coordinates=True a step is only counted when the
    previous latitude and longitude were both > 0. This reproduces the
    reference implementation, which used 0 as a "no previous point" marker
    and therefore undercounts tracks in the southern or western hemispheres.
    """

    def __init__(
        self,
        radius_m: float = EARTH_RADIUS_M,
        skip_non_positive_coordinates: bool = False
    ):
        if not (math.isfinite(radius_m) and radius_m > 0):
            raise ValueError(f"Earth radius must be finite and positive, got {radius_m}")
        self.radius_m = radius_m
        self.skip_non_positive_coordinates = skip_non_positive_coordinates
        self.total_m = 0.0
        self._previous: Optional[Tuple[float, float]] = None

    def add(self, lat: float, lon: float) -> None:
        previous = self._previous
        if previous is not None and self._counts_from(previous):
            self.total_m += haversine_m(
                previous[0], previous[1], lat, lon, radius_m=self.radius_m
            )
        self._previous = (lat, lon)

    def _counts_from(self, previous: Tuple[float, float]) -> bool:
        if not self.skip_non_positive_coordinates:
            return True
        prev_lat, prev_lon = previous
        return prev_lat > 0 and prev_lon > 0


class ElevationAccumulator:
    """
    Accumulates total ascent and descent from consecutive elevation readings.

    Raw GPS elevation jitters by a few meters even on flat ground, so a
    change only counts when its magnitude exceeds threshold_m. The baseline
    moves to every reading, counted or not: each step is compared with the
    immediately preceding raw reading.

    Missing readings (None) are skipped and keep the previous baseline.
    With zero_is_missing=True a baseline <= 0 is treated as "no previous
    reading", matching the reference implementation's sentinel.
    """

    def __init__(
        self,
        threshold_m: float = DEFAULT_ELE_THRESHOLD_M,
        zero_is_missing: bool = False
    ):
        if not (math.isfinite(threshold_m) and threshold_m >= 0):
            raise ValueError(f"Elevation threshold must be finite and >= 0, got {threshold_m}")
        self.threshold_m = threshold_m
        self.zero_is_missing = zero_is_missing
        self.ascent_m = 0.0
        self.descent_m = 0.0
        self._previous: Optional[float] = None

    def add(self, elevation: Optional[float]) -> None:
        if elevation is None:
            return

        previous = self._previous
        if previous is not None and not (self.zero_is_missing and previous <= 0):
            difference = elevation - previous
            if abs(difference) > self.threshold_m:
                if difference >= 0:
                    self.ascent_m += difference
                else:
                    self.descent_m += abs(difference)

        self._previous = elevation


def accumulate_distance(
    positions: Iterable[Tuple[float, float]],
    radius_m: float = EARTH_RADIUS_M,
    skip_non_positive_coordinates: bool = False
) -> float:
    """
    Total distance along a sequence of positions.

    Args:
        positions: (lat, lon) pairs in degrees, in travel order
        radius_m: Sphere radius in meters
        skip_non_positive_coordinates: Reproduce the reference <= 0 guard

    Returns:
        Distance in meters
    """
    accumulator = DistanceAccumulator(radius_m, skip_non_positive_coordinates)
    for lat, lon in positions:
        accumulator.add(lat, lon)
    return accumulator.total_m


def accumulate_elevation(
    elevations: Iterable[Optional[float]],
    threshold_m: float = DEFAULT_ELE_THRESHOLD_M,
    zero_is_missing: bool = False
) -> Tuple[float, float]:
    """
    Total ascent and descent along a sequence of elevation readings.

    Returns:
        Tuple of (ascent_m, descent_m)
    """
    accumulator = ElevationAccumulator(threshold_m, zero_is_missing)
    for elevation in elevations:
        accumulator.add(elevation)
    return accumulator.ascent_m, accumulator.descent_m
