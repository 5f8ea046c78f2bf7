"""
Tests for MarkerService helpers.
"""

import pytest

from marathon_tracker.features.markers import Marker, MarkerService
from marathon_tracker.features.route import GeoPath
from marathon_tracker.features.pacing import DistanceTimeSample

# Straight route north, about 27.6 miles long
COORDS = [(-74.0, 40.0 + i * 0.02) for i in range(21)]


@pytest.fixture
def path():
    return GeoPath.from_coordinates(COORDS)


def _marker(distance_km, race_time=None, note=None):
    return Marker(
        name="m",
        latitude=40.0,
        longitude=-74.0,
        distance_km=distance_km,
        race_time=race_time,
        note=note,
    )


# =============================================================================
# Samples
# =============================================================================

class TestToSamples:
    """Tests for MarkerService.to_samples."""

    def test_km_to_miles_sorted(self):
        samples = MarkerService.to_samples([
            _marker(10.0, "0:45:00"),
            _marker(5.0, "0:21:30", note="start"),
        ])
        assert [s.elapsed for s in samples] == [1290, 2700]
        assert samples[0].distance == pytest.approx(3.107, abs=0.001)
        assert samples[0].note == "start"

    def test_markers_without_time_skipped(self):
        samples = MarkerService.to_samples([
            _marker(5.0),
            _marker(6.0, "bad"),
            _marker(10.0, "0:45:00"),
        ])
        assert len(samples) == 1


# =============================================================================
# Race markers
# =============================================================================

class TestBuildRaceMarker:
    """Tests for MarkerService.build_race_marker."""

    def test_places_on_route(self, path):
        values = MarkerService.build_race_marker(path, "10K", "0:45:00", note="on pace")
        location = path.location_at_distance(6.21)

        assert values["name"] == "10K"
        assert values["distance_km"] == 10.0
        assert values["race_time"] == "0:45:00"
        assert values["note"] == "on pace"
        assert values["latitude"] == pytest.approx(location.latitude)
        assert values["longitude"] == pytest.approx(location.longitude)
        assert values["description"] == "on pace"

    def test_default_description(self, path):
        values = MarkerService.build_race_marker(path, "10K", "0:42:00")

        assert values["description"] == "Race marker at 10K (10K) - Time: 0:42:00"
        assert values["note"] is None

    def test_unknown_label(self, path):
        with pytest.raises(ValueError, match="Unknown race distance"):
            MarkerService.build_race_marker(path, "12K", "0:50:00")

    def test_bad_time(self, path):
        with pytest.raises(ValueError, match="Invalid time"):
            MarkerService.build_race_marker(path, "5K", "21:30")

    def test_rejects_distance_not_beyond_recorded(self, path):
        """A distance at or below an existing one is rejected."""
        existing = [_marker(10.0, "0:45:00")]
        with pytest.raises(ValueError, match="must be beyond"):
            MarkerService.build_race_marker(path, "10K", "0:46:00", existing=existing)
        with pytest.raises(ValueError, match="must be beyond"):
            MarkerService.build_race_marker(path, "5K", "0:22:00", existing=existing)

    def test_untimed_markers_do_not_block(self, path):
        existing = [_marker(30.0)]
        values = MarkerService.build_race_marker(path, "5K", "0:22:00", existing=existing)
        assert values["distance_km"] == 5.0

    def test_empty_route(self):
        with pytest.raises(ValueError, match="no coordinates"):
            MarkerService.build_race_marker(GeoPath.empty(), "5K", "0:22:00")


class TestBuildSampleMarker:
    """Tests for MarkerService.build_sample_marker."""

    def test_values(self, path):
        values = MarkerService.build_sample_marker(
            path, DistanceTimeSample(6.21, 2700, note="imported")
        )
        assert values["name"] == "Mile 6.21"
        assert values["race_time"] == "0:45:00"
        assert values["distance_km"] == pytest.approx(9.994, abs=0.001)
        assert values["note"] == "imported"
