import pytest
from datetime import datetime, timedelta

from pathcross.core.waypoint import Waypoint
from pathcross.geometry.distance import haversine_distance
from pathcross.modules.proximity_matching.matcher import ProximityMatcher

T0 = datetime(2025, 1, 1, 0, 0, 0)

def wp(lat, lon, minutes=0, obj_id="1"):
    return Waypoint(lat=lat, lon=lon, timestamp=T0 + timedelta(minutes=minutes), obj_id=obj_id)

@pytest.fixture
def trajectories():
    seq_a = [wp(52.0, 4.0, 0, "a"), wp(52.00005, 4.0, 1, "a"), wp(52.0001, 4.0, 2, "a")]
    seq_b = [wp(52.00006, 4.0, 0, "b"), wp(52.0, 4.00001, 1, "b"), wp(53.0, 5.0, 2, "b")]
    return seq_a, seq_b

def test_rank_sorted_and_bounded(trajectories):
    seq_a, seq_b = trajectories
    result = ProximityMatcher(max_distance=10.0).rank(seq_a, seq_b)

    assert result
    distances = [p.distance for p in result]
    assert distances == sorted(distances)
    assert all(d <= 10.0 for d in distances)

    for pair in result:
        assert pair.distance == haversine_distance(pair.waypoint_one, pair.waypoint_two)

def test_rank_drops_far_pairs(trajectories):
    seq_a, seq_b = trajectories
    result = ProximityMatcher().rank(seq_a, seq_b)
    assert all(p.waypoint_two != seq_b[2] for p in result)

def test_rank_max_distance_override(trajectories):
    seq_a, seq_b = trajectories
    matcher = ProximityMatcher(max_distance=10.0)
    assert len(matcher.rank(seq_a, seq_b, max_distance=1e7)) == 9
    assert matcher.rank(seq_a, seq_b, max_distance=0.0) == []

def test_rank_ties_keep_enumeration_order():
    seq_a = [wp(0.0, 0.0, 0, "a"), wp(0.0, 0.0, 1, "a")]
    seq_b = [wp(0.0, 0.00001, 0, "b"), wp(0.0, -0.00001, 1, "b")]
    result = ProximityMatcher().rank(seq_a, seq_b)

    assert [(p.waypoint_one, p.waypoint_two) for p in result] == [
        (seq_a[0], seq_b[0]),
        (seq_a[0], seq_b[1]),
        (seq_a[1], seq_b[0]),
        (seq_a[1], seq_b[1]),
    ]

def test_rank_degenerate_inputs(trajectories):
    seq_a, _ = trajectories
    matcher = ProximityMatcher()
    assert matcher.rank([], seq_a) == []
    assert matcher.rank(seq_a, []) == []
    assert len(matcher.rank(seq_a[:1], seq_a[:1])) == 1

def test_negative_max_distance():
    with pytest.raises(ValueError, match="cannot be negative"):
        ProximityMatcher(max_distance=-1.0)

def test_rank_skips_antipodal_pairs():
    seq_a = [wp(0.08, 0.0, 0, "a"), wp(10.0, 10.0, 1, "a")]
    seq_b = [wp(-0.08, -180.0, 0, "b"), wp(10.0, 10.00001, 1, "b")]
    result = ProximityMatcher().rank(seq_a, seq_b)

    assert [(p.waypoint_one, p.waypoint_two) for p in result] == [(seq_a[1], seq_b[1])]
