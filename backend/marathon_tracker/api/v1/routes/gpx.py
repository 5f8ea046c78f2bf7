"""
GPX File Routes

Endpoints for importing and exporting GPX files.
"""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import Response

from marathon_tracker.config import settings
from marathon_tracker.features.gpx import (
    GPXExporter,
    GPXExportRequest,
    GPXImporter,
    GPXInfo,
    GPXParserService,
    GPXUploadResponse,
)
from marathon_tracker.features.route.schemas import PathSchema
from marathon_tracker.shared.formatters import format_distance_miles, format_elevation

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload", response_model=GPXUploadResponse)
async def upload_gpx(file: UploadFile = File(...)):
    """
    Upload and parse a GPX file.

    Returns route metadata and the imported path with landmarks.
    """
    # Validate file
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    # Read content
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    max_bytes = settings.max_gpx_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_gpx_size_mb}MB)"
        )

    # Parse GPX
    try:
        data = GPXParserService.parse(content)
    except ValueError as e:
        logger.warning(f"GPX upload rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    path = GPXImporter.to_geo_path(data.track_points)
    info = GPXInfo.from_path(file.filename, data.name, data.description, path)
    logger.info(
        f"Imported {file.filename}: {info.points_count} points, "
        f"{format_distance_miles(info.distance_miles)}, "
        f"{format_elevation(info.elevation_gain_ft)}"
    )

    return GPXUploadResponse(
        success=True,
        info=info,
        path=PathSchema.from_path(path),
    )


@router.post("/export")
async def export_gpx(data: GPXExportRequest):
    """Export a drawn route as a GPX 1.1 file."""
    xml = GPXExporter.export(data.coordinates, data.name, data.description)
    filename = "marathon-route.gpx"
    return Response(
        content=xml,
        media_type="application/gpx+xml",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
