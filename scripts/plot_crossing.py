import argparse
import os
import sys
from datetime import datetime
import matplotlib.pyplot as plt
import matplotlib.lines as mlines

# Add project root to sys.path to find src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from pathcross.core.errors import MalformedSequence, InvalidCoordinate
from pathcross.core.segment import require_segments
from pathcross.core.stream import WaypointStream
from pathcross.report import analyse, format_meeting_point


def plot_report(first, second, report, output_img: str, title: str):
    fig, ax = plt.subplots(figsize=(12, 12))

    ax.plot([p.lon for p in first], [p.lat for p in first], color='blue', linewidth=1.5, marker='.', alpha=0.7)
    ax.plot([p.lon for p in second], [p.lat for p in second], color='orange', linewidth=1.5, marker='.', alpha=0.7)

    # Medium precision matches, both waypoints share a location so plotting one is enough
    if report.medium_precision_matches:
        ax.scatter(
            [m.waypoint_one.lon for m in report.medium_precision_matches],
            [m.waypoint_one.lat for m in report.medium_precision_matches],
            color='gray', s=40, zorder=4,
        )

    if report.nearby_pairs:
        for pair in report.nearby_pairs:
            ax.plot(
                [pair.waypoint_one.lon, pair.waypoint_two.lon],
                [pair.waypoint_one.lat, pair.waypoint_two.lat],
                color='green', linewidth=2, zorder=4,
            )

    if report.crossed:
        mp = report.meeting_point
        ax.scatter([mp.lon], [mp.lat], color='red', s=150, marker='X', zorder=5)
        ax.annotate(format_meeting_point(mp), (mp.lon, mp.lat), textcoords="offset points", xytext=(10, 10))

    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.set_aspect('equal', adjustable='datalim')
    ax.set_title(title)

    blue_line = mlines.Line2D([], [], color='blue', linewidth=1.5, label='First trajectory')
    orange_line = mlines.Line2D([], [], color='orange', linewidth=1.5, label='Second trajectory')
    gray_dot = mlines.Line2D([], [], color='gray', marker='o', linestyle='None', markersize=6, label='Shared location')
    green_line = mlines.Line2D([], [], color='green', linewidth=2, label='Nearby waypoints')
    red_x = mlines.Line2D([], [], color='red', marker='X', linestyle='None', markersize=10, label='Meeting point')
    ax.legend(handles=[blue_line, orange_line, gray_dot, green_line, red_x])

    plt.tight_layout()
    plt.savefig(output_img, dpi=300, bbox_inches='tight')
    plt.close(fig)
    print(f"Visualization saved to {output_img}")


def main():
    parser = argparse.ArgumentParser(description="Plot two trajectories and where they crossed.")
    parser.add_argument("first", nargs="?", default="gps1.json", help="Trajectory of the first entity.")
    parser.add_argument("second", nargs="?", default="gps2.json", help="Trajectory of the second entity.")
    parser.add_argument("--max-distance", type=float, default=10.0, help="Proximity threshold in meters.")
    args = parser.parse_args()

    for path in (args.first, args.second):
        if not os.path.exists(path):
            print(f"Error: Input file {path} not found.")
            sys.exit(1)

    print(f"Loading data from {args.first} and {args.second}...")
    first = WaypointStream(args.first).load()
    second = WaypointStream(args.second).load()
    print(f"Loaded {len(first)} and {len(second)} waypoints.")

    try:
        require_segments(first)
        require_segments(second)
    except (MalformedSequence, InvalidCoordinate) as e:
        print(f"Error: {e}")
        sys.exit(1)

    report = analyse(first, second, max_distance=args.max_distance)
    if report.crossed:
        print(f"Meeting point: {format_meeting_point(report.meeting_point)}")
    else:
        print("No crossing found.")

    # Create output directory
    script_name = "plot_crossing"
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_dir = os.path.join(project_root, "data", "processed", script_name, timestamp)
    os.makedirs(output_dir, exist_ok=True)

    title = f"{os.path.basename(args.first)} vs {os.path.basename(args.second)}"
    plot_report(first, second, report, os.path.join(output_dir, "plot.png"), title)

if __name__ == "__main__":
    main()
