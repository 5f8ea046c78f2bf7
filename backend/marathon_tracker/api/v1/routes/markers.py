"""
Marker Routes

Endpoints for storing race markers and the splits derived from them.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from marathon_tracker.api.v1.deps import get_route_catalog, resolve_path
from marathon_tracker.db.session import get_async_db
from marathon_tracker.features.markers import MarkerRepository, MarkerService
from marathon_tracker.features.markers.schemas import (
    MarkerCreate,
    MarkerImportResponse,
    MarkerResponse,
    MarkerSplitsResponse,
    RaceMarkerRequest,
)
from marathon_tracker.features.pacing import PaceProjector, export_splits_csv, import_splits_csv
from marathon_tracker.features.pacing.schemas import SplitRecordSchema
from marathon_tracker.features.route import RouteCatalog

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_CSV_SIZE_BYTES = 1024 * 1024


@router.get("", response_model=List[MarkerResponse])
async def list_markers(db: AsyncSession = Depends(get_async_db)):
    """All markers ordered by distance."""
    return await MarkerRepository(db).list()


@router.get("/latest", response_model=Optional[MarkerResponse])
async def latest_marker(db: AsyncSession = Depends(get_async_db)):
    """Most recently created marker, or null."""
    return await MarkerRepository(db).latest()


@router.post("", response_model=MarkerResponse, status_code=201)
async def create_marker(
    data: MarkerCreate,
    db: AsyncSession = Depends(get_async_db)
):
    """Create a marker."""
    marker = await MarkerRepository(db).create(**data.model_dump())
    await db.commit()
    return marker


@router.delete("/{marker_id}")
async def delete_marker(
    marker_id: int,
    db: AsyncSession = Depends(get_async_db)
):
    """Delete a marker by ID."""
    deleted = await MarkerRepository(db).delete(marker_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Marker not found")

    await db.commit()
    return {"success": True, "id": marker_id}


@router.post("/race", response_model=MarkerResponse, status_code=201)
async def record_race_marker(
    data: RaceMarkerRequest,
    db: AsyncSession = Depends(get_async_db),
    catalog: RouteCatalog = Depends(get_route_catalog),
):
    """
    Record a race time at a standard distance (5K ... Finish).

    The marker is placed on the route at that distance.
    """
    path = resolve_path(catalog, data.route_id, data.coordinates)

    try:
        marker = await MarkerService(db).record_race_marker(
            path, data.label, data.race_time, data.note
        )
    except ValueError as e:
        logger.warning(f"Race marker rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    await db.commit()
    return marker


@router.get("/splits", response_model=MarkerSplitsResponse)
async def marker_splits(db: AsyncSession = Depends(get_async_db)):
    """Splits and pacing consistency from markers with race times."""
    records = await MarkerService(db).split_records()
    paces = [r.pace for r in records if r.pace > 0]

    return MarkerSplitsResponse(
        records=[SplitRecordSchema.from_record(r) for r in records],
        consistency=round(PaceProjector.split_consistency(paces), 1),
    )


@router.get("/export.csv")
async def export_splits(db: AsyncSession = Depends(get_async_db)):
    """Download splits as CSV."""
    records = await MarkerService(db).split_records()
    return Response(
        content=export_splits_csv(records),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="splits.csv"'},
    )


@router.post("/import", response_model=MarkerImportResponse, status_code=201)
async def import_splits(
    file: UploadFile = File(...),
    route_id: str = Query(..., description="Catalog route the markers are placed on"),
    db: AsyncSession = Depends(get_async_db),
    catalog: RouteCatalog = Depends(get_route_catalog),
):
    """Import a split CSV as markers along a catalog route."""
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > MAX_CSV_SIZE_BYTES:
        raise HTTPException(status_code=400, detail="File too large (max 1MB)")

    path = resolve_path(catalog, route_id, [])

    try:
        samples = import_splits_csv(content.decode("utf-8"))
        markers = await MarkerService(db).import_samples(path, samples)
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV must be UTF-8 encoded")
    except ValueError as e:
        logger.warning(f"Split import rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    await db.commit()
    return MarkerImportResponse(
        imported=len(markers),
        markers=[MarkerResponse.model_validate(m) for m in markers],
    )
