from dataclasses import dataclass, field
from typing import List, Optional

from pathcross.core.candidate import CandidatePair
from pathcross.core.errors import NoCrossingFound
from pathcross.core.waypoint import WaypointSequence
from pathcross.modules.exact_matching.matcher import HIGH_PRECISION, MEDIUM_PRECISION, ExactMatcher
from pathcross.modules.intersection.matcher import IntersectionMatcher, MeetingPoint
from pathcross.modules.proximity_matching.matcher import ProximityMatcher

def format_meeting_point(point: MeetingPoint, decimals: int = 4) -> str:
    """
    Renders a meeting point as "<lat>;<lon>".
    Format specs ignore the host locale, the decimal separator is always a period.
    """
    return f"{point.lat:.{decimals}f};{point.lon:.{decimals}f}"

@dataclass(frozen=True)
class MatchReport:
    high_precision_matches: List[CandidatePair] = field(default_factory=list)
    medium_precision_matches: List[CandidatePair] = field(default_factory=list)
    nearby_pairs: List[CandidatePair] = field(default_factory=list)
    meeting_point: Optional[MeetingPoint] = None

    @property
    def crossed(self) -> bool:
        return self.meeting_point is not None

def analyse(seq_a: WaypointSequence, seq_b: WaypointSequence, max_distance: float = 10.0) -> MatchReport:
    """
    Runs every strategy over the same two trajectories, from the loosest
    evidence (shared coordinates) to the segment crossing.
    A missing crossing is reported as meeting_point=None.
    """
    exact = ExactMatcher(tolerance=HIGH_PRECISION)
    high = exact.match(seq_a, seq_b)
    medium = exact.match(seq_a, seq_b, tolerance=MEDIUM_PRECISION)

    nearby = ProximityMatcher(max_distance=max_distance).rank(seq_a, seq_b)

    try:
        meeting_point = IntersectionMatcher().find_crossing(seq_a, seq_b)
    except NoCrossingFound:
        meeting_point = None

    return MatchReport(
        high_precision_matches=high,
        medium_precision_matches=medium,
        nearby_pairs=nearby,
        meeting_point=meeting_point,
    )
