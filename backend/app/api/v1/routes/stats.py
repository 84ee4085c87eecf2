"""
Track Statistics Routes

Endpoints computing distance and elevation statistics for GPX documents.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, HTTPException, Query, Request, UploadFile

from app.config import settings
from app.features.stats import StatsResponse, compute_stats, parse_document

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_gpx_body(request: Request) -> bytes:
    """Read the raw request body, enforcing the configured size limit."""
    content = await request.body()
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"GPX document too large (max {settings.max_upload_bytes} bytes)"
        )
    return content


@router.post("", response_model=StatsResponse)
async def track_stats(
    request: Request,
    threshold: Optional[float] = Query(
        default=None, ge=0, allow_inf_nan=False, description="Elevation noise threshold override (m)"
    ),
):
    """
    Compute statistics for a GPX document sent as the request body.

    Only the first track is analysed.
    """
    content = await read_gpx_body(request)

    try:
        document = parse_document(content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = compute_stats(document, settings.stats_options(threshold))
    return StatsResponse.from_result(result)


@router.post("/upload", response_model=StatsResponse)
async def upload_track_stats(
    file: UploadFile = File(...),
    threshold: Optional[float] = Query(default=None, ge=0, allow_inf_nan=False),
):
    """
    Upload a GPX file and compute statistics for its first track.
    """
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_bytes} bytes)"
        )

    try:
        document = parse_document(content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug(f"Computing stats for uploaded file {file.filename}")
    result = compute_stats(document, settings.stats_options(threshold))
    return StatsResponse.from_result(result)
