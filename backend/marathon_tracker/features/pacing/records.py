"""Split records derived from recorded distance/time samples."""

from __future__ import annotations

from typing import Sequence

from .models import DistanceTimeSample, SplitRecord


def sort_samples(samples: Sequence[DistanceTimeSample]) -> list[DistanceTimeSample]:
    """Samples ordered by distance."""
    return sorted(samples, key=lambda s: s.distance)


def build_split_records(samples: Sequence[DistanceTimeSample]) -> list[SplitRecord]:
    """
    Compute split and pace for each sample.

    The first record's pace is elapsed / distance. Later records use the
    split from the previous sample over the distance between them; a
    zero-length gap gives pace 0.
    """
    records: list[SplitRecord] = []
    previous: DistanceTimeSample | None = None

    for sample in sort_samples(samples):
        if previous is None:
            split = sample.elapsed
            gap = sample.distance
        else:
            split = sample.elapsed - previous.elapsed
            gap = sample.distance - previous.distance

        records.append(SplitRecord(
            distance=sample.distance,
            elapsed=sample.elapsed,
            split=split,
            pace=split / gap if gap > 0 else 0.0,
            note=sample.note,
        ))
        previous = sample

    return records
