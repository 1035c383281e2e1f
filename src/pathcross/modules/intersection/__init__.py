from .matcher import IntersectionCandidate, IntersectionMatcher, MeetingPoint
