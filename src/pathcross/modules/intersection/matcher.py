from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from pathcross.core.errors import NoCrossingFound
from pathcross.core.segment import Segment, build_segments
from pathcross.core.waypoint import WaypointSequence
from pathcross.geometry.lines import segment_intersection
from pathcross.geometry.periods import periods_overlap
from pathcross.geometry.precision import truncate

@dataclass(frozen=True)
class IntersectionCandidate:
    """
    One segment of each trajectory and where their lines meet, as (lon, lat).
    """
    segment_one: Segment
    segment_two: Segment
    intersection: Optional[Tuple[float, float]] = None

    @property
    def is_empty(self) -> bool:
        return self.intersection is None

    @property
    def lat(self) -> float:
        if self.intersection is None:
            raise ValueError("Candidate has no intersection")
        return self.intersection[1]

    @property
    def lon(self) -> float:
        if self.intersection is None:
            raise ValueError("Candidate has no intersection")
        return self.intersection[0]

    @property
    def overlaps_in_time(self) -> bool:
        # Argument order is significant, it decides which candidate wins on ambiguous input
        return periods_overlap(
            self.segment_one.start_time,
            self.segment_two.end_time,
            self.segment_one.end_time,
            self.segment_two.start_time,
        )

@dataclass(frozen=True)
class MeetingPoint:
    lat: float
    lon: float
    candidate: IntersectionCandidate

class IntersectionMatcher:
    """
    Finds where two trajectories crossed by intersecting their segments and
    keeping only crossings whose segments were travelled during overlapping periods.
    """

    def __init__(self, decimals: int = 4):
        """
        Args:
            decimals: Number of decimals the meeting point is truncated to.
        """
        self.decimals = decimals

    def candidates(self, seq_a: WaypointSequence, seq_b: WaypointSequence) -> Iterator[IntersectionCandidate]:
        """
        Yields the intersection of every segment pair, segments of seq_a outer
        and segments of seq_b inner, both in waypoint order.
        """
        segments_a = build_segments(seq_a)
        segments_b = build_segments(seq_b)

        for segment_one in segments_a:
            for segment_two in segments_b:
                yield IntersectionCandidate(
                    segment_one=segment_one,
                    segment_two=segment_two,
                    intersection=segment_intersection(
                        segment_one.start, segment_one.end,
                        segment_two.start, segment_two.end,
                    ),
                )

    def crossings(self, seq_a: WaypointSequence, seq_b: WaypointSequence) -> Iterator[IntersectionCandidate]:
        """
        Yields the candidates that intersect and overlap in time, in enumeration order.
        Neighbouring segment pairs often produce near identical points.
        """
        for candidate in self.candidates(seq_a, seq_b):
            if not candidate.is_empty and candidate.overlaps_in_time:
                yield candidate

    def find_crossing(self, seq_a: WaypointSequence, seq_b: WaypointSequence) -> MeetingPoint:
        """
        Returns the first crossing in enumeration order, truncated to self.decimals.

        Raises:
            NoCrossingFound: if no segment pair intersects during overlapping periods.
        """
        crossing = next(self.crossings(seq_a, seq_b), None)
        if crossing is None:
            raise NoCrossingFound(
                f"No crossing among {max(len(seq_a) - 1, 0)} x {max(len(seq_b) - 1, 0)} segment pairs"
            )

        return MeetingPoint(
            lat=truncate(crossing.lat, self.decimals),
            lon=truncate(crossing.lon, self.decimals),
            candidate=crossing,
        )
