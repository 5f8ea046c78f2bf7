"""
Tests for SplitPlanner.
"""

import pytest

from marathon_tracker.features.pacing import SplitPlanner
from marathon_tracker.shared.constants import SplitStrategy

TARGET = 3 * 3600 + 30 * 60  # 3:30:00


class TestEvenSplits:
    """Even pacing."""

    def test_constant_pace(self):
        """Every checkpoint is at target_total / 26.2."""
        planner = SplitPlanner("3:30:00")
        splits = planner.compute_splits()

        assert [s.distance for s in splits] == [5, 10, 15, 20, 25]
        for split in splits:
            assert split.pace == pytest.approx(TARGET / 26.2)
            assert split.elapsed == pytest.approx(split.distance * TARGET / 26.2)

    def test_seconds_target(self):
        """Target may be given in seconds."""
        assert SplitPlanner(TARGET).target_total == TARGET

    def test_custom_interval(self):
        """Checkpoints stop at the last whole mile."""
        splits = SplitPlanner("3:30:00").compute_splits(interval_miles=2)
        assert splits[-1].distance == 26


class TestStrategies:
    """Negative and positive splits."""

    def test_negative_split_halves(self):
        """First half 2.5% slower, second half 2.5% faster."""
        planner = SplitPlanner("3:30:00", strategy=SplitStrategy.NEGATIVE)
        average = TARGET / 26.2

        assert planner.pace_at(5) == pytest.approx(average * 1.025)
        assert planner.pace_at(20) == pytest.approx(average * 0.975)

    def test_negative_split_totals(self):
        """The two halves still add up to the target."""
        planner = SplitPlanner("3:30:00", strategy=SplitStrategy.NEGATIVE)
        assert planner.elapsed_at(26.2) == pytest.approx(TARGET)

    def test_break_at_half(self):
        """Paces change at 13.1, not 13."""
        planner = SplitPlanner("3:30:00", strategy=SplitStrategy.POSITIVE)
        average = TARGET / 26.2
        assert planner.elapsed_at(13.1) == pytest.approx(13.1 * average * 0.975)
        assert planner.pace_at(13.1) == pytest.approx(average * 0.975)
        assert planner.pace_at(13.2) == pytest.approx(average * 1.025)

    def test_positive_split_checkpoint(self):
        """Checkpoint after halfway uses both half paces."""
        planner = SplitPlanner("3:30:00", strategy=SplitStrategy.POSITIVE)
        average = TARGET / 26.2
        split_20 = planner.compute_splits()[3]

        expected = 13.1 * average * 0.975 + 6.9 * average * 1.025
        assert split_20.distance == 20
        assert split_20.elapsed == pytest.approx(expected)
        assert split_20.pace == pytest.approx(expected / 20)


class TestFallback:
    """Missing or malformed target times."""

    def test_malformed_uses_fallback_pace(self):
        planner = SplitPlanner("3:30", fallback_pace=480)
        assert planner.target_total == pytest.approx(26.2 * 480)

    def test_no_target_no_fallback(self):
        """Nothing to plan."""
        planner = SplitPlanner(None)
        assert planner.target_total == 0
        assert planner.compute_splits() == []

    def test_invalid_interval(self):
        assert SplitPlanner("3:30:00").compute_splits(interval_miles=0) == []
