"""
Split CSV export/import.

Format:
    Mile,Time,Pace,Split,Note
    5.00,0:35:00,7:00,0:35:00,Feeling good
"""

from __future__ import annotations

import csv
import io
import math
from typing import Sequence

from marathon_tracker.shared.formatters import format_duration, format_pace, parse_duration

from .models import DistanceTimeSample, SplitRecord

CSV_HEADER = ["Mile", "Time", "Pace", "Split", "Note"]


def export_splits_csv(records: Sequence[SplitRecord]) -> str:
    """
    Serialize split records, one row per record.

    Returns:
        CSV text with header
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for record in records:
        writer.writerow([
            f"{record.distance:.2f}",
            format_duration(record.elapsed),
            format_pace(record.pace),
            format_duration(record.split),
            record.note or "",
        ])

    return buffer.getvalue()


def import_splits_csv(text: str) -> list[DistanceTimeSample]:
    """
    Parse split CSV back into samples.

    Only Mile, Time and Note are read; Pace and Split are derived data.

    Raises:
        ValueError: On a wrong header or a malformed row (line number
            included in the message)
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))

    header = next(reader, None)
    if header is None:
        raise ValueError("CSV is empty")
    if [h.strip() for h in header] != CSV_HEADER:
        raise ValueError(f"Expected header {','.join(CSV_HEADER)}")

    samples: list[DistanceTimeSample] = []
    for line_number, row in enumerate(reader, start=2):
        if not any(cell.strip() for cell in row):
            continue
        if len(row) < 2:
            raise ValueError(f"Line {line_number}: expected at least Mile and Time")

        try:
            distance = float(row[0])
        except ValueError:
            raise ValueError(f"Line {line_number}: invalid mile '{row[0]}'") from None
        if not math.isfinite(distance):
            raise ValueError(f"Line {line_number}: invalid mile '{row[0]}'")
        if distance < 0:
            raise ValueError(f"Line {line_number}: mile must not be negative")

        elapsed = parse_duration(row[1])
        if elapsed is None:
            raise ValueError(f"Line {line_number}: invalid time '{row[1]}', expected H:MM:SS")

        note = row[4].strip() if len(row) > 4 and row[4].strip() else None
        samples.append(DistanceTimeSample(distance=distance, elapsed=elapsed, note=note))

    return samples
