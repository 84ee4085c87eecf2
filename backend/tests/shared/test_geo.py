"""
Tests for shared geographic functions.

Tests the haversine distance in meters.
"""

import pytest

from app.shared.geo import haversine_m, EARTH_RADIUS_M


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine_m function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        dist = haversine_m(44.0, 11.8, 44.0, 11.8)
        assert dist == 0.0

    def test_known_distance_almaty_astana(self):
        """Test with known distance (Almaty to Astana ~974km)."""
        dist = haversine_m(43.238949, 76.945465, 51.169392, 71.449074)
        assert 950_000 < dist < 1_000_000

    def test_small_distance(self):
        """0.001 degree latitude is roughly 111 meters."""
        dist = haversine_m(43.0, 76.0, 43.001, 76.0)
        assert 110 < dist < 112

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine_m(43.0, 76.0, 44.0, 77.0)
        dist_ba = haversine_m(44.0, 77.0, 43.0, 76.0)
        assert dist_ab == pytest.approx(dist_ba, rel=0.0001)

    def test_one_degree_on_equator(self):
        """One degree of longitude on the equator is R * pi / 180."""
        dist = haversine_m(0.0, 0.0, 0.0, 1.0)
        assert dist == pytest.approx(111_319.49, abs=0.01)

    def test_earth_radius_constant(self):
        """Equatorial radius is kept for compatibility."""
        assert EARTH_RADIUS_M == 6378137.0

    def test_custom_radius_scales_linearly(self):
        """Distance is proportional to the sphere radius."""
        default = haversine_m(45.0, 7.0, 46.0, 8.0)
        mean = haversine_m(45.0, 7.0, 46.0, 8.0, radius_m=6371008.8)
        assert mean / default == pytest.approx(6371008.8 / EARTH_RADIUS_M)

    def test_negative_coordinates(self):
        """Sydney to Melbourne (~714 km)."""
        dist = haversine_m(-33.8688, 151.2093, -37.8136, 144.9631)
        assert 700_000 < dist < 730_000

    def test_antipodal_points(self):
        """Antipodal points are half the circumference apart."""
        dist = haversine_m(0.0, 0.0, 0.0, 180.0)
        assert dist == pytest.approx(EARTH_RADIUS_M * 3.141592653589793)

    def test_never_negative(self):
        """Distance is non-negative in every direction."""
        for lat2, lon2 in [(-1.0, -1.0), (1.0, -1.0), (-1.0, 1.0), (1.0, 1.0)]:
            assert haversine_m(0.0, 0.0, lat2, lon2) >= 0
