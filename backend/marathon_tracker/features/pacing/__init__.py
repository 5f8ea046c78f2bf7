"""
Pacing module.

Usage:
    from marathon_tracker.features.pacing import PaceProjector, SplitPlanner
    from marathon_tracker.features.pacing import build_split_records

Components:
- PaceProjector: Current pace, trend, finish-time projection
- SplitPlanner: Even / negative / positive split schedules
- build_split_records: Splits between recorded samples
- export_splits_csv / import_splits_csv: Split CSV files
- PACE_ZONES: Static pace zone reference data
"""

from .models import (
    DistanceTimeSample,
    PaceZone,
    PaceReading,
    FinishScenarios,
    SplitRecord,
    Split,
    PaceAnalysis,
)
from .zones import PACE_ZONES, zone_for_pace
from .records import build_split_records, sort_samples
from .projector import PaceProjector
from .splits import SplitPlanner
from .csv_io import CSV_HEADER, export_splits_csv, import_splits_csv

__all__ = [
    # Models
    "DistanceTimeSample",
    "PaceZone",
    "PaceReading",
    "FinishScenarios",
    "SplitRecord",
    "Split",
    "PaceAnalysis",
    # Zones
    "PACE_ZONES",
    "zone_for_pace",
    # Records
    "build_split_records",
    "sort_samples",
    # Calculators
    "PaceProjector",
    "SplitPlanner",
    # CSV
    "CSV_HEADER",
    "export_splits_csv",
    "import_splits_csv",
]
