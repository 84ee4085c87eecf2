"""
GPX Document Reader

Converts raw GPX text into the in-memory track model.
"""

import logging
import math
import xml.etree.ElementTree as ET
from typing import Optional, Union

import gpxpy
import gpxpy.gpx

from .models import GPXDocument, Segment, Track, Waypoint

logger = logging.getLogger(__name__)


class GPXParseError(ValueError):
    """Raised when the request body is not a readable GPX document."""


def parse_document(content: Union[bytes, str]) -> GPXDocument:
    """
    Parse GPX content into a GPXDocument.

    Args:
        content: GPX document as bytes (UTF-8) or text

    Returns:
        GPXDocument with every track, segment and point

    Raises:
        GPXParseError: If the content is not valid UTF-8, not valid GPX,
            or a point has a non-finite or out-of-range value
    """
    if isinstance(content, bytes):
        try:
            content = content.decode('utf-8')
        except UnicodeDecodeError as e:
            logger.warning(f"GPX body is not valid UTF-8: {e}")
            raise GPXParseError(f"body is not valid UTF-8: {e}")

    if not content.strip():
        logger.warning("GPX body is empty")
        raise GPXParseError("document is empty")

    try:
        gpx = gpxpy.parse(content)
    except (gpxpy.gpx.GPXException, ValueError) as e:
        logger.warning(f"Failed to parse GPX: {e}")
        raise GPXParseError(str(e))

    root = _root_name(content)
    if root != "gpx":
        logger.warning(f"GPX body has root element <{root}>")
        raise GPXParseError(f"root element must be <gpx>, got <{root}>")

    try:
        document = GPXDocument(tracks=tuple(_convert_track(t) for t in gpx.tracks))
    except GPXParseError as e:
        logger.warning(f"Invalid GPX point: {e}")
        raise

    logger.debug(
        f"Parsed GPX: {len(document.tracks)} track(s), "
        f"{sum(len(t.segments) for t in document.tracks)} segment(s)"
    )
    return document


def _root_name(content: str) -> str:
    """Local name of the document's root element (namespace stripped)."""
    parser = ET.XMLPullParser(events=("start",))
    try:
        parser.feed(content)
    except ET.ParseError as e:
        raise GPXParseError(str(e))
    for _, element in parser.read_events():
        return element.tag.rsplit('}', 1)[-1]
    return ""


def _convert_track(track: gpxpy.gpx.GPXTrack) -> Track:
    return Track(
        name=track.name,
        segments=tuple(
            Segment(points=tuple(
                _convert_point(point, track.name, seg_no, point_no)
                for point_no, point in enumerate(segment.points)
            ))
            for seg_no, segment in enumerate(track.segments)
        ),
    )


def _convert_point(
    point: gpxpy.gpx.GPXTrackPoint,
    track_name: Optional[str],
    seg_no: int,
    point_no: int
) -> Waypoint:
    where = f"track '{track_name or ''}' segment {seg_no} point {point_no}"

    lat, lon, ele = point.latitude, point.longitude, point.elevation
    if not (math.isfinite(lat) and -90 <= lat <= 90):
        raise GPXParseError(f"{where}: latitude {lat} outside -90..90")
    if not (math.isfinite(lon) and -180 <= lon <= 180):
        raise GPXParseError(f"{where}: longitude {lon} outside -180..180")
    if ele is not None and not math.isfinite(ele):
        raise GPXParseError(f"{where}: elevation {ele} is not finite")

    return Waypoint(lat=lat, lon=lon, elevation=ele, name=point.name)
