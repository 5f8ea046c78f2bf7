"""
Tests for shared geographic functions.

Tests the haversine distance and unit conversions.
"""

import pytest

from marathon_tracker.shared.geo import (
    haversine,
    km_to_miles,
    miles_to_km,
    meters_to_feet,
    EARTH_RADIUS_MILES,
)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        dist = haversine(40.7128, -74.0059, 40.7128, -74.0059)
        assert dist == 0.0

    def test_known_distance_nyc_boston(self):
        """Test with known distance (New York to Boston ~190 mi)."""
        dist = haversine(40.7128, -74.0060, 42.3601, -71.0589)
        assert 185 < dist < 195

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine(40.0, -74.0, 41.0, -73.0)
        dist_ba = haversine(41.0, -73.0, 40.0, -74.0)
        assert dist_ab == pytest.approx(dist_ba, rel=0.0001)

    def test_north_south_distance(self):
        """1 degree latitude ≈ 69 miles everywhere."""
        dist = haversine(0.0, 0.0, 1.0, 0.0)
        assert dist == pytest.approx(69.1, abs=0.1)

    def test_earth_radius_constant(self):
        """Verify Earth radius constant is in miles."""
        assert EARTH_RADIUS_MILES == 3959.0

    def test_cross_hemisphere(self):
        """Quarter meridian is a quarter of the circumference."""
        dist = haversine(45.0, 0.0, -45.0, 0.0)
        assert dist == pytest.approx(3959.0 * 3.141592653589793 / 2, rel=1e-6)


# =============================================================================
# Test Unit Conversions
# =============================================================================

class TestConversions:
    """Tests for km/mile and meter/foot conversions."""

    def test_marathon_km_to_miles(self):
        """42.195 km is 26.2 miles."""
        assert km_to_miles(42.195) == pytest.approx(26.2, abs=0.01)

    def test_round_trip(self):
        """miles_to_km inverts km_to_miles."""
        assert miles_to_km(km_to_miles(10.0)) == pytest.approx(10.0)

    def test_meters_to_feet(self):
        """100 m is 328 ft."""
        assert meters_to_feet(100) == pytest.approx(328.084)
