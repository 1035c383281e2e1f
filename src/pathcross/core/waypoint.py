from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

@dataclass(frozen=True)
class Waypoint:
    """
    Represents a single timestamped GPS sample (lat, lon, t).
    frozen=True keeps waypoints immutable while every matcher borrows them.
    """
    lat: float
    lon: float
    timestamp: datetime
    obj_id: str | None = None

    @property
    def tuple(self):
        return (self.lat, self.lon, self.timestamp)

    @property
    def lon_lat_text(self) -> str:
        """
        Coordinate pair in WKT order ("lon lat"). repr() of a float never
        depends on the host locale.
        """
        return f"{self.lon!r} {self.lat!r}"

    @property
    def is_valid(self) -> bool:
        return -90.0 <= self.lat <= 90.0 and -180.0 <= self.lon <= 180.0

    def __str__(self) -> str:
        return f"Lat: {self.lat}. Lon: {self.lon}. Time: {self.timestamp}"


WaypointSequence = Sequence[Waypoint]
