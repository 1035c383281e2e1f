import json
import pandas as pd
from typing import Iterator, Dict, List, Optional
from pathlib import Path
from .waypoint import Waypoint

class WaypointStream:
    """
    Reads one tracked entity's waypoints from a JSON or CSV file.
    JSON files hold either a {"Waypoints": [...]} container or a bare list of records.
    """
    def __init__(
        self,
        filepath: str | Path,
        col_mapping: Dict[str, str] = None,
        obj_id: Optional[str] = None,
        sep: str = ',',
    ):
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.sep = sep
        self.obj_id = obj_id if obj_id else self.filepath.stem

        self.mapping = col_mapping or {
            'lat': 'Lat',
            'lon': 'Lon',
            'timestamp': 'Time',
        }

    def _read_frame(self) -> pd.DataFrame:
        suffix = self.filepath.suffix.lower()
        if suffix == '.csv':
            return pd.read_csv(self.filepath, sep=self.sep)
        if suffix == '.json':
            with open(self.filepath, mode="r", encoding="utf-8") as f:
                document = json.load(f)
            if isinstance(document, dict):
                if 'Waypoints' not in document:
                    raise ValueError(f"JSON document must contain a 'Waypoints' list. Found keys: {list(document)}")
                document = document['Waypoints']
            return pd.DataFrame.from_records(document)
        raise ValueError(f"Unsupported trajectory file type '{suffix}', expected .json or .csv")

    def stream(self) -> Iterator[Waypoint]:
        """
        Yields waypoints one by one, in file order.
        """
        df = self._read_frame()
        if df.empty:
            return

        columns = [self.mapping['lat'], self.mapping['lon'], self.mapping['timestamp']]
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ValueError(f"Trajectory must contain {columns} columns. Missing: {missing}")

        # utc=True makes naive and offset-qualified timestamps comparable across files
        times = pd.to_datetime(df[self.mapping['timestamp']], utc=True)

        for lat, lon, ts in zip(df[self.mapping['lat']], df[self.mapping['lon']], times):
            yield Waypoint(
                lat=float(lat),
                lon=float(lon),
                timestamp=ts.to_pydatetime(),
                obj_id=self.obj_id,
            )

    def load(self) -> List[Waypoint]:
        return list(self.stream())
