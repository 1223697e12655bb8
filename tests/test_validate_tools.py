"""Tests for the validation and policy tools."""
import json
from unittest.mock import MagicMock

from boundary_guard.core.models import ValidationOptions
from boundary_guard.models import GeoPoint, Polygon, Ring
from boundary_guard.state import state, AssignedBoundary


def _capture(register):
    tools = {}
    mock_mcp = MagicMock()
    def capture(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn
        return decorator
    mock_mcp.tool = capture
    register(mock_mcp)
    return tools


def _get_validate_tools():
    from boundary_guard.tools.validate import register_validate_tools
    return _capture(register_validate_tools)


def _get_policy_tools():
    from boundary_guard.tools.policy import register_policy_tools
    return _capture(register_policy_tools)


def _load_ten_square():
    """Assign a 10x10 degree square boundary and reset the policy."""
    square = Polygon(outer=Ring.from_coordinates([[0, 0], [10, 0], [10, 10], [0, 10]]))
    state.assigned = AssignedBoundary.from_geometry(square, name="Test ward")
    state.options = ValidationOptions()
    state.last_result = None


def _decagon(outside: int) -> list[GeoPoint]:
    pts = [(1, 1), (3, 1), (5, 1), (7, 1), (9, 1), (9, 5), (7, 9), (5, 9), (3, 9), (1, 5)]
    return [
        GeoPoint(latitude=y, longitude=x + (20 if i < outside else 0))
        for i, (x, y) in enumerate(pts)
    ]


def test_validate_point_inside():
    tools = _get_validate_tools()
    _load_ten_square()
    result = json.loads(tools["validate_point"](latitude=5.0, longitude=5.0))
    assert result["is_valid"] is True
    assert result["reason"] == "ok"
    assert state.last_result is not None


def test_validate_point_outside_has_nearest_point():
    tools = _get_validate_tools()
    _load_ten_square()
    result = json.loads(tools["validate_point"](latitude=5.0, longitude=12.0))
    assert result["reason"] == "outside_boundary"
    assert result["nearest_point"]["longitude"] == 10.0
    assert result["distance_outside_m"] > 0


def test_validate_point_without_boundary():
    tools = _get_validate_tools()
    state.clear_boundary()
    result = json.loads(tools["validate_point"](latitude=5.0, longitude=5.0))
    assert result["is_valid"] is False
    assert result["reason"] == "boundary_unavailable"


def test_validate_polygon_reports_outside_vertices():
    tools = _get_validate_tools()
    _load_ten_square()
    result = json.loads(tools["validate_polygon"](vertices=_decagon(outside=2)))
    assert result["is_valid"] is False
    assert result["percentage_inside"] == 80.0
    assert len(result["outside_vertices"]) == 2


def test_validate_survey_uses_session_policy():
    validate = _get_validate_tools()
    policy = _get_policy_tools()
    _load_ten_square()

    strict = json.loads(validate["validate_survey"](vertices=_decagon(outside=1)))
    assert strict["reason"] == "outside_boundary"

    policy["set_validation_policy"](allow_partial_overlap=True)
    lenient = json.loads(validate["validate_survey"](vertices=_decagon(outside=1)))
    assert lenient["is_valid"] is True
    assert lenient["reason"] == "partial_overlap_accepted"


def test_validate_survey_polygon_required():
    validate = _get_validate_tools()
    policy = _get_policy_tools()
    _load_ten_square()
    policy["set_validation_policy"](require_polygon=True)
    result = json.loads(validate["validate_survey"](latitude=5.0, longitude=5.0))
    assert result["reason"] == "polygon_required"


def test_validate_survey_rejects_half_a_point():
    tools = _get_validate_tools()
    _load_ten_square()
    assert tools["validate_survey"](latitude=5.0).startswith("Error")


def test_validate_gpx(tmp_path):
    tools = _get_validate_tools()
    _load_ten_square()
    path = tmp_path / "survey.gpx"
    path.write_text(
        '<?xml version="1.0"?>'
        '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">'
        '<wpt lat="5" lon="5"></wpt>'
        '<trk><trkseg>'
        '<trkpt lat="1" lon="1"></trkpt><trkpt lat="1" lon="9"></trkpt><trkpt lat="9" lon="9"></trkpt>'
        '</trkseg></trk></gpx>'
    )
    result = json.loads(tools["validate_gpx"](file_path=str(path)))
    assert result["is_valid"] is True
    assert result["reason"] == "ok"


def test_validate_gpx_missing_file(tmp_path):
    tools = _get_validate_tools()
    assert tools["validate_gpx"](file_path=str(tmp_path / "none.gpx")).startswith("Error")


def test_snap_point_requires_boundary():
    tools = _get_validate_tools()
    state.clear_boundary()
    assert tools["snap_point"](latitude=1.0, longitude=1.0).startswith("Error")


def test_snap_point_outside():
    tools = _get_validate_tools()
    _load_ten_square()
    result = json.loads(tools["snap_point"](latitude=12.0, longitude=12.0))
    assert result["moved"] is True
    assert result["snapped"] == {"latitude": 10.0, "longitude": 10.0}
    assert result["distance_m"] > 0


def test_snap_point_inside_is_unchanged():
    tools = _get_validate_tools()
    _load_ten_square()
    result = json.loads(tools["snap_point"](latitude=3.0, longitude=3.0))
    assert result["moved"] is False
    assert result["distance_m"] == 0.0


def test_set_validation_policy_rejects_bad_threshold():
    policy = _get_policy_tools()
    state.options = ValidationOptions()
    result = policy["set_validation_policy"](partial_overlap_threshold=150.0)
    assert result.startswith("Error")
    assert state.options.partial_overlap_threshold == 90.0


def test_set_validation_policy_reports_values():
    policy = _get_policy_tools()
    state.options = ValidationOptions()
    result = policy["set_validation_policy"](allow_partial_overlap=True, partial_overlap_threshold=85.0)
    assert "allow_partial_overlap=True" in result
    assert "85.0" in result
