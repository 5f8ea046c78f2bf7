"""
GPX file handling module.

Usage:
    from marathon_tracker.features.gpx import GPXParserService, GPXImporter

Components:
- GPXParserService: Parse GPX files into track points (gpxpy)
- GPXImporter: Track points -> GeoPath with landmarks
- GPXExporter: Coordinates -> GPX XML
- GPXInfo: Pydantic schema for GPX metadata
"""

from .parser import GPXParserService, GPXData, GPXTrackPoint
from .importer import GPXImporter
from .exporter import GPXExporter
from .schemas import GPXInfo, GPXUploadResponse, GPXExportRequest

__all__ = [
    # Services
    "GPXParserService",
    "GPXImporter",
    "GPXExporter",
    # Data
    "GPXData",
    "GPXTrackPoint",
    # Schemas
    "GPXInfo",
    "GPXUploadResponse",
    "GPXExportRequest",
]
