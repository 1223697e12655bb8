"""Tests for GPX survey parsing."""
from boundary_guard.core.gpx import parse_survey_gpx
from boundary_guard.models import GeoPoint

GPX_SURVEY = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <wpt lat="0.5" lon="0.5"><name>Reported</name></wpt>
  <wpt lat="0.7" lon="0.7"><name>Second</name></wpt>
  <trk>
    <name>Plot outline</name>
    <trkseg>
      <trkpt lat="0.2" lon="0.2"></trkpt>
      <trkpt lat="0.2" lon="0.8"></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="0.8" lon="0.8"></trkpt>
      <trkpt lat="0.2" lon="0.2"></trkpt>
    </trkseg>
  </trk>
</gpx>
"""

GPX_EMPTY = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1"></gpx>
"""


def test_parse_point_and_ring(tmp_path):
    path = tmp_path / "survey.gpx"
    path.write_text(GPX_SURVEY)
    survey = parse_survey_gpx(str(path))

    assert survey["point"] == GeoPoint(latitude=0.5, longitude=0.5)
    assert survey["track_name"] == "Plot outline"
    ring = survey["ring"]
    # Segments are concatenated and the closing vertex dropped
    assert len(ring.positions) == 3
    assert ring.positions[1].lng == 0.8
    assert ring.positions[1].lat == 0.2


def test_parse_empty_gpx(tmp_path):
    path = tmp_path / "empty.gpx"
    path.write_text(GPX_EMPTY)
    survey = parse_survey_gpx(str(path))
    assert survey["point"] is None
    assert survey["ring"] is None
