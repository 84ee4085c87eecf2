"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math

# Equatorial radius (WGS84) in meters.
# Kept instead of the mean radius so totals match the reference figures.
EARTH_RADIUS_M = 6378137.0


def haversine_m(
    lat1: float, lon1: float,
    lat2: float, lon2: float,
    radius_m: float = EARTH_RADIUS_M
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)
        radius_m: Sphere radius in meters

    Returns:
        Distance in meters
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push a marginally above 1 for antipodal points
    c = 2 * math.asin(math.sqrt(min(a, 1.0)))

    return radius_m * c
