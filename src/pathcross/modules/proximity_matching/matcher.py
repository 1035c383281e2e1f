from typing import List, Optional

from pathcross.core.candidate import CandidatePair
from pathcross.core.waypoint import WaypointSequence
from pathcross.geometry.distance import EARTH_RADIUS, haversine_distance

class ProximityMatcher:
    """
    Ranks waypoint pairs of two trajectories by great circle distance.
    Close pairs hint at a shared location, they do not prove the paths crossed.
    """

    def __init__(self, max_distance: float = 10.0, radius: float = EARTH_RADIUS):
        """
        Args:
            max_distance: Distance threshold in meters, pairs further apart are dropped.
            radius: Earth radius in meters used by the haversine formula.
        """
        if max_distance < 0:
            raise ValueError(f"Maximum distance cannot be negative, got {max_distance}")
        self.max_distance = max_distance
        self.radius = radius

    def rank(self, seq_a: WaypointSequence, seq_b: WaypointSequence, max_distance: Optional[float] = None) -> List[CandidatePair]:
        """
        Measures the full cross product and returns the pairs within max_distance,
        closest first. Equal distances keep their enumeration order.
        """
        limit = max_distance if max_distance is not None else self.max_distance

        pairs = [
            CandidatePair(waypoint_one=a, waypoint_two=b, distance=haversine_distance(a, b, self.radius))
            for a in seq_a
            for b in seq_b
        ]
        # sorted() is stable
        return sorted((p for p in pairs if p.distance <= limit), key=lambda p: p.distance)
