"""
Analyze telemetry data logged from play_human.py

This script reads CSV telemetry files and prints summary, drift and
collision analyses. Useful for tuning the physics constants or
understanding how a session was scored.

Usage:
    python analyze_telemetry.py drift_telemetry_20260113_123456.csv
    python analyze_telemetry.py session.csv --drifts --plot
"""

import argparse
import csv
import statistics

from drift.config.physics_config import CarParams
from drift.utils.display import get_display_speed


def load_telemetry(filename):
    """Load telemetry CSV file."""
    try:
        data = []
        with open(filename, 'r') as f:
            reader = csv.DictReader(f)
            for row in reader:
                # Convert numeric fields
                for key in row:
                    try:
                        if key != 'timestamp':
                            row[key] = float(row[key])
                    except (ValueError, TypeError):
                        pass
                data.append(row)

        print(f"✓ Loaded telemetry: {filename}")
        print(f"  Logged rows: {len(data)}")
        if data:
            print(f"  Total frames: {int(data[-1]['frame'])}")
            print(f"  Duration: {data[-1]['sim_time']:.1f}s simulated")
        return data
    except FileNotFoundError:
        print(f"✗ File not found: {filename}")
        return None


def find_drifts(data):
    """
    Split the log into drifts: runs of consecutive scoring frames.

    With log_interval > 1 a drift can end (and another start) between two
    logged rows. The logger carries the skipped frames' collision and bonus
    into the next row, so a scoring row that reports either one, or whose
    drift timer went backwards, closes the previous drift and opens a new one.

    Returns:
        List of dicts with start_frame, end_frame, duration, bonus and
        ended_by_collision
    """
    drifts = []
    current = None
    for row in data:
        scoring = row['drifting'] and row['drift_timer'] > 0
        if current is not None and (not scoring or row['collided'] or row['drift_bonus'] > 0
                                    or row['drift_timer'] < current['duration']):
            current['ended_by_collision'] = bool(row['collided'])
            current['bonus'] = row['drift_bonus']
            drifts.append(current)
            current = None

        if scoring:
            if current is None:
                current = {'start_frame': int(row['frame']), 'duration': 0.0}
            current['end_frame'] = int(row['frame'])
            current['duration'] = row['drift_timer']

    if current is not None:
        current['ended_by_collision'] = False
        current['bonus'] = 0.0
        drifts.append(current)
    return drifts


def analyze_summary(data):
    """Print summary statistics."""
    print("\n" + "=" * 60)
    print("SUMMARY STATISTICS")
    print("=" * 60)

    max_speed = CarParams().MAX_SPEED
    speeds = [get_display_speed(row['speed'], max_speed) for row in data]
    print(f"\nSpeed (gauge):")
    print(f"  Mean: {statistics.mean(speeds):.1f}")
    print(f"  Max: {max(speeds)}")

    print(f"\nScore:")
    print(f"  Final: {data[-1]['score']:.0f}")
    print(f"  Best: {max(row['score'] for row in data):.0f}")

    drifting = sum(1 for row in data if row['drifting'])
    print(f"\nDrift frames: {drifting} ({drifting / len(data) * 100:.1f}%)")
    print(f"Max skid marks on screen: {int(max(row['skid_count'] for row in data))}")

    gas = sum(1 for row in data if row['accelerate'])
    brake = sum(1 for row in data if row['brake'] and not row['accelerate'])
    print(f"\nControls:")
    print(f"  Gas frames: {gas} ({gas / len(data) * 100:.1f}%)")
    print(f"  Brake frames: {brake} ({brake / len(data) * 100:.1f}%)")


def analyze_drifts(data):
    """Print one line per drift."""
    print("\n" + "=" * 60)
    print("DRIFTS")
    print("=" * 60)

    drifts = find_drifts(data)
    if not drifts:
        print("\nNo drifts recorded.")
        return

    for i, d in enumerate(drifts, 1):
        ending = "wall" if d['ended_by_collision'] else f"bonus +{d['bonus']:.0f}"
        print(f"  #{i:<3} frames {d['start_frame']}-{d['end_frame']}  {d['duration']:.2f}s  ({ending})")

    durations = [d['duration'] for d in drifts]
    print(f"\nDrifts: {len(drifts)}, mean {statistics.mean(durations):.2f}s, longest {max(durations):.2f}s")


def analyze_collisions(data):
    """Print every wall hit."""
    print("\n" + "=" * 60)
    print("COLLISIONS")
    print("=" * 60)

    hits = [row for row in data if row['collided']]
    print(f"\nWall hits: {len(hits)}")
    for row in hits:
        print(f"  Frame {int(row['frame'])}: pos=({row['car_x']:.0f}, {row['car_y']:.0f}) "
              f"speed after={row['speed']:.0f} score={row['score']:.0f}")


def plot_session(data):
    """Plot score and speed against simulated time."""
    import matplotlib.pyplot as plt

    times = [row['sim_time'] for row in data]

    fig, (ax_score, ax_speed) = plt.subplots(2, 1, sharex=True, figsize=(10, 6))
    ax_score.plot(times, [row['score'] for row in data], color='tab:orange')
    ax_score.set_ylabel('Score')
    for x, row in zip(times, data):
        if row['collided']:
            ax_score.axvline(x, color='tab:red', alpha=0.3)

    ax_speed.plot(times, [row['speed'] for row in data], color='tab:blue')
    ax_speed.fill_between(times, 0, [row['drifting'] * CarParams().MAX_SPEED for row in data],
                          color='tab:gray', alpha=0.2, label='drifting')
    ax_speed.set_ylabel('Speed (px/s)')
    ax_speed.set_xlabel('Time (s)')
    ax_speed.legend(loc='upper right')

    fig.tight_layout()
    plt.show()


def main():
    parser = argparse.ArgumentParser(description='Analyze telemetry data from play_human.py')
    parser.add_argument('filename', type=str, help='CSV telemetry file to analyze')
    parser.add_argument('--summary', action='store_true', help='Show summary statistics (default if no flags)')
    parser.add_argument('--drifts', action='store_true', help='List every drift')
    parser.add_argument('--collisions', action='store_true', help='List every wall hit')
    parser.add_argument('--all', action='store_true', help='Show all analyses')
    parser.add_argument('--plot', action='store_true', help='Plot score and speed (matplotlib)')

    args = parser.parse_args()

    # Load data
    data = load_telemetry(args.filename)
    if not data:
        return

    # If no specific analysis requested, show summary
    show_all = args.all or not (args.summary or args.drifts or args.collisions)

    if show_all or args.summary:
        analyze_summary(data)

    if show_all or args.drifts:
        analyze_drifts(data)

    if show_all or args.collisions:
        analyze_collisions(data)

    print("\n" + "=" * 60)
    print("Analysis complete!")
    print("=" * 60)

    if args.plot:
        plot_session(data)


if __name__ == '__main__':
    main()
