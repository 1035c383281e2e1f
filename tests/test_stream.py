import json
import pytest
from datetime import datetime, timezone

from pathcross.core.stream import WaypointStream

@pytest.fixture
def container_json(tmp_path):
    p = tmp_path / "gps1.json"
    p.write_text(json.dumps({
        "Waypoints": [
            {"Lat": 52.1, "Lon": 4.3, "Time": "2018-03-15T10:00:00"},
            {"Lat": 52.2, "Lon": 4.4, "Time": "2018-03-15T10:01:00"},
            {"Lat": 52.3, "Lon": 4.5, "Time": "2018-03-15T10:02:00"},
        ]
    }))
    return p

def test_container_json(container_json):
    waypoints = WaypointStream(container_json).load()

    assert len(waypoints) == 3
    assert waypoints[0].lat == 52.1
    assert waypoints[0].lon == 4.3
    assert waypoints[0].timestamp == datetime(2018, 3, 15, 10, 0, 0, tzinfo=timezone.utc)
    assert waypoints[2].timestamp == datetime(2018, 3, 15, 10, 2, 0, tzinfo=timezone.utc)
    assert all(w.obj_id == "gps1" for w in waypoints)

def test_bare_list_json_with_offsets(tmp_path, container_json):
    p = tmp_path / "gps2.json"
    p.write_text(json.dumps([
        {"Lat": 1.0, "Lon": 2.0, "Time": "2018-03-15T11:00:00+01:00"},
        {"Lat": 1.5, "Lon": 2.5, "Time": "2018-03-15T11:01:00+01:00"},
    ]))

    second = list(WaypointStream(p, obj_id="suspect").stream())
    first = WaypointStream(container_json).load()

    assert second[0].obj_id == "suspect"
    # Naive and offset-qualified times end up on the same clock
    assert second[0].timestamp == first[0].timestamp
    assert second[1].timestamp == first[1].timestamp

def test_csv_with_mapping(tmp_path):
    p = tmp_path / "track.csv"
    p.write_text("time,latitude,longitude\n2022-11-09 17:32:43,10.0,20.0\n2022-11-09 17:32:44,10.1,20.1\n")

    stream = WaypointStream(p, col_mapping={'lat': 'latitude', 'lon': 'longitude', 'timestamp': 'time'})
    waypoints = stream.load()

    assert [(w.lat, w.lon) for w in waypoints] == [(10.0, 20.0), (10.1, 20.1)]
    assert waypoints[1].timestamp == datetime(2022, 11, 9, 17, 32, 44, tzinfo=timezone.utc)

def test_empty_waypoint_list(tmp_path):
    p = tmp_path / "empty.json"
    p.write_text(json.dumps({"Waypoints": []}))
    assert WaypointStream(p).load() == []

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        WaypointStream(tmp_path / "nope.json")

def test_missing_columns(tmp_path):
    p = tmp_path / "bad.csv"
    p.write_text("lat,lon\n10,20")  # Wrong headers for the default mapping

    stream = WaypointStream(p)
    with pytest.raises(ValueError, match="Missing"):
        stream.load()

def test_container_without_waypoints(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text(json.dumps({"Points": []}))
    with pytest.raises(ValueError, match="'Waypoints'"):
        WaypointStream(p).load()

def test_unsupported_suffix(tmp_path):
    p = tmp_path / "track.gpx"
    p.write_text("<gpx/>")
    with pytest.raises(ValueError, match="Unsupported"):
        WaypointStream(p).load()
