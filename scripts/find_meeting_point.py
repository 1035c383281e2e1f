import argparse
import os
import sys

# Add project root to sys.path to find src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from pathcross.core.errors import MalformedSequence, InvalidCoordinate
from pathcross.core.segment import require_segments
from pathcross.core.stream import WaypointStream
from pathcross.report import analyse, format_meeting_point


def load_waypoints(path: str, col_mapping):
    print(f"Loading waypoints from {path}...")
    waypoints = WaypointStream(path, col_mapping=col_mapping).load()
    print(f"Loaded {len(waypoints)} waypoints.")
    return waypoints


def main():
    parser = argparse.ArgumentParser(description="Find where two GPS trajectories crossed paths.")
    parser.add_argument("first", nargs="?", default="gps1.json", help="Trajectory of the first entity (.json or .csv).")
    parser.add_argument("second", nargs="?", default="gps2.json", help="Trajectory of the second entity (.json or .csv).")
    parser.add_argument("--max-distance", type=float, default=10.0, help="Proximity threshold in meters.")
    parser.add_argument("--lat-col", default="Lat", help="Latitude column name.")
    parser.add_argument("--lon-col", default="Lon", help="Longitude column name.")
    parser.add_argument("--time-col", default="Time", help="Timestamp column name.")
    args = parser.parse_args()

    col_mapping = {'lat': args.lat_col, 'lon': args.lon_col, 'timestamp': args.time_col}

    for path in (args.first, args.second):
        if not os.path.exists(path):
            print(f"Error: Input file {path} not found.")
            sys.exit(1)

    first = load_waypoints(args.first, col_mapping)
    second = load_waypoints(args.second, col_mapping)

    try:
        require_segments(first)
        require_segments(second)
    except (MalformedSequence, InvalidCoordinate) as e:
        print(f"Error: {e}")
        sys.exit(1)

    report = analyse(first, second, max_distance=args.max_distance)

    print(f"High precision matches: {len(report.high_precision_matches)}")
    for pair in report.high_precision_matches:
        print(f" - {pair.waypoint_one} | {pair.waypoint_two}")

    print(f"Medium precision matches: {len(report.medium_precision_matches)}")
    for pair in report.medium_precision_matches:
        print(f" - {pair.waypoint_one} | {pair.waypoint_two}")

    print(f"Waypoint pairs within {args.max_distance} m: {len(report.nearby_pairs)}")
    for pair in report.nearby_pairs:
        print(f" - {pair.distance:.2f} m: {pair.waypoint_one} | {pair.waypoint_two}")

    if not report.crossed:
        print("No crossing found: no segments intersect during overlapping periods.")
        sys.exit(1)

    print(format_meeting_point(report.meeting_point))

if __name__ == "__main__":
    main()
