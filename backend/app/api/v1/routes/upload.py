"""
Plain-text Upload Route

Accepts a raw GPX document and answers with a human-readable summary.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from app.api.v1.routes.stats import read_gpx_body
from app.config import settings
from app.features.stats import compute_stats, parse_document
from app.shared.formatters import format_stats_summary

router = APIRouter()


@router.post("/upload", response_class=PlainTextResponse)
async def upload(request: Request):
    """Summarise the first track of the GPX document in the request body."""
    content = await read_gpx_body(request)

    try:
        document = parse_document(content)
    except ValueError as e:
        return PlainTextResponse(f"Error in GPX reading: {e}", status_code=400)

    result = compute_stats(document, settings.stats_options())
    return PlainTextResponse(format_stats_summary(result))
