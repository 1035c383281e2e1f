from math import radians, sin, cos, sqrt, atan2

from pathcross.core.waypoint import Waypoint

# Mean earth radius in meters used by the reference crossing runs.
EARTH_RADIUS = 6376500.0

def haversine_distance(p1: Waypoint, p2: Waypoint, radius: float = EARTH_RADIUS) -> float:
    """
    Calculate the great circle distance between two waypoints (specified in decimal degrees).
    Returns distance in meters.
    """
    lat1, lon1 = radians(p1.lat), radians(p1.lon)
    lat2, lon2 = radians(p2.lat), radians(p2.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2)**2 + cos(lat1) * cos(lat2) * sin(dlon / 2)**2
    # Rounding can push a just past 1 for antipodal points
    a = min(1.0, a)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return radius * c
