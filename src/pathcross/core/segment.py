from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from .errors import InvalidCoordinate, MalformedSequence
from .waypoint import Waypoint

WGS84_SRID = 4326

@dataclass(frozen=True)
class Segment:
    """
    A straight line between two temporally adjacent waypoints of one trajectory.
    Planar geometry uses longitude as x and latitude as y.
    """
    current: Waypoint
    next: Waypoint
    srid: int = WGS84_SRID

    def __post_init__(self):
        for waypoint in (self.current, self.next):
            if not waypoint.is_valid:
                raise InvalidCoordinate(
                    f"Cannot build segment geometry from lat={waypoint.lat}, lon={waypoint.lon}"
                )

    @property
    def start(self) -> Tuple[float, float]:
        return (self.current.lon, self.current.lat)

    @property
    def end(self) -> Tuple[float, float]:
        return (self.next.lon, self.next.lat)

    @property
    def start_time(self) -> datetime:
        return self.current.timestamp

    @property
    def end_time(self) -> datetime:
        return self.next.timestamp

    @property
    def wkt(self) -> str:
        return f"LINESTRING({self.current.lon_lat_text}, {self.next.lon_lat_text})"


def build_segments(waypoints: Sequence[Optional[Waypoint]]) -> List[Segment]:
    """
    Pairs every waypoint with its successor, yielding max(N - 1, 0) segments.

    A missing (None) entry in the "current" position falls back to the first
    waypoint of the sequence, so the trajectory wraps around instead of failing.
    A missing entry in the "next" position has nothing to connect to and is skipped.
    """
    segments = []
    for index in range(1, len(waypoints)):
        current = waypoints[index - 1]
        nxt = waypoints[index]
        if nxt is None:
            continue
        if current is None:
            current = waypoints[0]
        if current is None:
            continue
        segments.append(Segment(current=current, next=nxt))
    return segments


def require_segments(waypoints: Sequence[Optional[Waypoint]]) -> List[Segment]:
    """
    Same as build_segments, but rejects sequences that cannot form a single segment.
    """
    if len(waypoints) < 2:
        raise MalformedSequence(
            f"At least 2 waypoints are needed to build a segment, got {len(waypoints)}"
        )
    return build_segments(waypoints)
