class PathCrossError(Exception):
    """Base class for errors raised by pathcross."""


class NoCrossingFound(PathCrossError, LookupError):
    """
    No segment pair intersects while overlapping in time.
    This is an expected outcome of the intersection matcher, callers branch on it.
    """


class MalformedSequence(PathCrossError, ValueError):
    """A sequence holds too few waypoints to form a single segment."""


class InvalidCoordinate(PathCrossError, ValueError):
    """A latitude or longitude lies outside its geographic range."""
