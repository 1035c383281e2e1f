from pathcross.core import (
    CandidatePair,
    InvalidCoordinate,
    MalformedSequence,
    NoCrossingFound,
    PathCrossError,
    Segment,
    Waypoint,
    WaypointSequence,
    build_segments,
    require_segments,
)
from pathcross.modules.exact_matching import HIGH_PRECISION, MEDIUM_PRECISION, ExactMatcher
from pathcross.modules.intersection import IntersectionCandidate, IntersectionMatcher, MeetingPoint
from pathcross.modules.proximity_matching import ProximityMatcher
from pathcross.report import MatchReport, analyse, format_meeting_point
