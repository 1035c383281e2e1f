from .candidate import CandidatePair
from .errors import InvalidCoordinate, MalformedSequence, NoCrossingFound, PathCrossError
from .segment import Segment, build_segments, require_segments
from .waypoint import Waypoint, WaypointSequence
