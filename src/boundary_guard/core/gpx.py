"""GPX file parsing for survey submissions recorded on handheld GPS units."""

import gpxpy

from ..models import GeoPoint, Ring


def parse_survey_gpx(filepath: str) -> dict:
    """Extract the reported location and drawn survey outline from a GPX file.

    The first waypoint is the reported GPS point; the first track (all of its
    segments, in order) is the survey outline.
    """
    with open(filepath, "r") as f:
        gpx = gpxpy.parse(f)

    point = None
    if gpx.waypoints:
        wp = gpx.waypoints[0]
        point = GeoPoint(latitude=wp.latitude, longitude=wp.longitude)

    ring = None
    track_name = None
    for track in gpx.tracks:
        vertices = [
            GeoPoint(latitude=p.latitude, longitude=p.longitude).to_position()
            for segment in track.segments
            for p in segment.points
        ]
        if vertices:
            ring = Ring(positions=tuple(vertices))
            track_name = track.name or "Unnamed Track"
            break

    return {
        "point": point,          # GeoPoint | None
        "ring": ring,            # Ring | None
        "track_name": track_name,
        "metadata": {
            "name": gpx.name,
            "description": gpx.description,
        },
    }
