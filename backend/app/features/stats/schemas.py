"""
Track statistics schemas.

Pydantic models for the JSON stats endpoints.
"""

from pydantic import BaseModel

from .models import StatsResult


class StatsResponse(BaseModel):
    """Statistics for the first track of an uploaded GPX document."""

    track_name: str

    # Metrics (rounded to 2 decimals)
    total_distance_km: float
    total_ascent_m: float
    total_descent_m: float
    ele_threshold_m: float

    # Unrounded distance
    total_distance_m: float

    @classmethod
    def from_result(cls, result: StatsResult) -> "StatsResponse":
        return cls(
            track_name=result.track_name,
            total_distance_km=round(result.total_distance_m / 1000, 2),
            total_ascent_m=round(result.total_ascent_m, 2),
            total_descent_m=round(result.total_descent_m, 2),
            ele_threshold_m=round(result.ele_threshold_used_m, 2),
            total_distance_m=result.total_distance_m,
        )
