"""Data models for GPX tracks and their statistics (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Waypoint:
    """Single recorded position."""

    lat: float  # degrees, -90..90
    lon: float  # degrees, -180..180
    elevation: float | None = None  # meters
    name: str | None = None


@dataclass(frozen=True)
class Segment:
    """Contiguous run of waypoints within a track."""

    points: tuple[Waypoint, ...] = ()


@dataclass(frozen=True)
class Track:
    """Named track made of ordered segments."""

    name: str | None = None
    segments: tuple[Segment, ...] = ()

    def waypoints(self) -> Iterator[Waypoint]:
        """Iterate over all waypoints of all segments in recording order."""
        for segment in self.segments:
            yield from segment.points


@dataclass(frozen=True)
class GPXDocument:
    """Parsed GPX document: zero or more tracks."""

    tracks: tuple[Track, ...] = ()

    @property
    def first_track(self) -> Track | None:
        return self.tracks[0] if self.tracks else None


@dataclass(frozen=True)
class StatsResult:
    """Summary statistics for one track."""

    track_name: str
    total_distance_m: float
    total_ascent_m: float
    total_descent_m: float
    ele_threshold_used_m: float
