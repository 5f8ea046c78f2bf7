"""
Tests for elevation gain/loss.
"""

from marathon_tracker.shared.elevation import (
    calculate_elevation_changes,
    calculate_elevation_gain,
)


class TestElevationChanges:
    """Tests for calculate_elevation_changes."""

    def test_gain_and_loss(self):
        """Ascents and descents are summed separately."""
        gain, loss = calculate_elevation_changes([100, 150, 120, 200])
        assert gain == 130
        assert loss == 30

    def test_missing_values_skipped(self):
        """None is skipped; the next delta uses the last known value."""
        gain, loss = calculate_elevation_changes([100, None, 150, None, 140])
        assert gain == 50
        assert loss == 10

    def test_zero_is_a_real_elevation(self):
        """Sea level counts as an elevation."""
        gain, _ = calculate_elevation_changes([0, 10])
        assert gain == 10

    def test_empty(self):
        """No elevations means no change."""
        assert calculate_elevation_changes([]) == (0.0, 0.0)


class TestElevationGain:
    """Tests for calculate_elevation_gain."""

    def test_rounded(self):
        """Gain is rounded to a whole number."""
        assert calculate_elevation_gain([10.0, 12.6]) == 3

    def test_descents_only(self):
        """A downhill course has no gain."""
        assert calculate_elevation_gain([300, 200, 100]) == 0
