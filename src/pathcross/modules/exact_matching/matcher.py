from typing import List, Optional

from pathcross.core.candidate import CandidatePair
from pathcross.core.waypoint import WaypointSequence

# Degrees. 1e-10 asks for near identical floats, 1e-5 is roughly a meter.
HIGH_PRECISION = 0.0000000001
MEDIUM_PRECISION = 0.00001

class ExactMatcher:
    def __init__(self, tolerance: float = MEDIUM_PRECISION):
        """
        Args:
            tolerance: maximum per-axis difference in degrees for two waypoints to share a location.
        """
        if tolerance <= 0:
            raise ValueError(f"Tolerance must be positive, got {tolerance}")
        self.tolerance = tolerance

    def match(self, seq_a: WaypointSequence, seq_b: WaypointSequence, tolerance: Optional[float] = None) -> List[CandidatePair]:
        """
        Pairs every waypoint of seq_a with every waypoint of seq_b whose latitude
        and longitude both differ by less than the tolerance.
        Pairs come out in enumeration order, seq_a outer and seq_b inner.

        Args:
            seq_a: waypoints of the first entity.
            seq_b: waypoints of the second entity.
            tolerance: Optional tolerance override for this specific call.
        """
        limit = tolerance if tolerance is not None else self.tolerance

        return [
            CandidatePair(waypoint_one=a, waypoint_two=b)
            for a in seq_a
            for b in seq_b
            if abs(a.lat - b.lat) < limit and abs(a.lon - b.lon) < limit
        ]
