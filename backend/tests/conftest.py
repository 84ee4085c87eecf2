"""Shared GPX documents for tests."""

import pytest


def make_gpx(*tracks: str) -> str:
    """Wrap <trk> fragments into a GPX 1.1 document."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<gpx version="1.1" creator="pytest" xmlns="http://www.topografix.com/GPX/1/1">\n'
        + "\n".join(tracks)
        + "\n</gpx>\n"
    )


RIDRACOLI_TRACK = """
  <trk><name>Anello Diga di Ridracoli</name>
    <trkseg>
      <trkpt lat="43.9050" lon="11.8330"><ele>560.0</ele><name>Diga</name></trkpt>
      <trkpt lat="43.9060" lon="11.8340"><ele>561.0</ele></trkpt>
      <trkpt lat="43.9075" lon="11.8352"><ele>575.0</ele></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="43.9080" lon="11.8371"></trkpt>
      <trkpt lat="43.9090" lon="11.8380"><ele>568.0</ele></trkpt>
    </trkseg>
  </trk>
"""

SECOND_TRACK = """
  <trk><name>Ignored</name>
    <trkseg>
      <trkpt lat="44.0" lon="12.0"><ele>10.0</ele></trkpt>
      <trkpt lat="45.0" lon="13.0"><ele>900.0</ele></trkpt>
    </trkseg>
  </trk>
"""


@pytest.fixture
def ridracoli_gpx() -> str:
    return make_gpx(RIDRACOLI_TRACK)


@pytest.fixture
def two_tracks_gpx() -> str:
    return make_gpx(RIDRACOLI_TRACK, SECOND_TRACK)


@pytest.fixture
def no_tracks_gpx() -> str:
    return make_gpx()
