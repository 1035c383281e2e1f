from dataclasses import dataclass
from typing import Optional

from .waypoint import Waypoint

@dataclass(frozen=True)
class CandidatePair:
    """
    A waypoint of each trajectory that may mark the same place.
    distance is only filled in by matchers that measure it (meters).
    """
    waypoint_one: Waypoint
    waypoint_two: Waypoint
    distance: Optional[float] = None
