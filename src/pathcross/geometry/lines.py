from typing import Optional, Tuple

Coordinate = Tuple[float, float]

# Slack on the segment parameters so that crossings exactly on an endpoint
# survive floating point noise.
PARAM_EPS = 1e-12

def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx

def segment_intersection(
    p1: Coordinate, p2: Coordinate, q1: Coordinate, q2: Coordinate
) -> Optional[Coordinate]:
    """
    Intersects the closed planar segments p1-p2 and q1-q2.

    Uses the parametric form p1 + t * r == q1 + u * s. A zero denominator means
    the segments are parallel; collinear segments only count when they touch
    in a single point, any overlap of positive length is not a point intersection.

    Returns:
        The (x, y) intersection point, or None if the segments do not meet in a point.
    """
    rx, ry = p2[0] - p1[0], p2[1] - p1[1]
    sx, sy = q2[0] - q1[0], q2[1] - q1[1]
    qpx, qpy = q1[0] - p1[0], q1[1] - p1[1]

    denom = _cross(rx, ry, sx, sy)
    if denom == 0.0:
        if _cross(qpx, qpy, rx, ry) != 0.0 or _cross(qpx, qpy, sx, sy) != 0.0:
            return None # Parallel, never meet
        return _collinear_touch(p1, p2, q1, q2)

    t = _cross(qpx, qpy, sx, sy) / denom
    u = _cross(qpx, qpy, rx, ry) / denom

    if -PARAM_EPS <= t <= 1.0 + PARAM_EPS and -PARAM_EPS <= u <= 1.0 + PARAM_EPS:
        return (p1[0] + t * rx, p1[1] + t * ry)
    return None

def _collinear_touch(
    p1: Coordinate, p2: Coordinate, q1: Coordinate, q2: Coordinate
) -> Optional[Coordinate]:
    if p1 == p2 and q1 == q2:
        return p1 if p1 == q1 else None

    # Project on the dominant axis so vertical segments are handled too
    spread_x = abs(p2[0] - p1[0]) + abs(q2[0] - q1[0])
    spread_y = abs(p2[1] - p1[1]) + abs(q2[1] - q1[1])
    axis = 0 if spread_x >= spread_y else 1

    p_lo, p_hi = sorted((p1, p2), key=lambda c: c[axis])
    q_lo, q_hi = sorted((q1, q2), key=lambda c: c[axis])

    lo = p_lo if p_lo[axis] >= q_lo[axis] else q_lo
    hi = p_hi if p_hi[axis] <= q_hi[axis] else q_hi

    if lo[axis] == hi[axis]:
        return lo
    return None # Disjoint, or overlapping along a stretch
