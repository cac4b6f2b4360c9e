"""
CSV telemetry logging for drift sessions.

One row per logged frame with the car state, the controls, the score
bookkeeping and what the physics step reported (drift, collision). Files
are read back by analyze_telemetry.py.

sim_time accumulates over every frame, logged or not. Collisions and drift
bonuses from frames skipped by log_interval are reported on the next
logged row.
"""

import csv
from datetime import datetime

from drift.config.constants import DEFAULT_LOG_INTERVAL

FIELDNAMES = [
    'timestamp', 'frame', 'dt', 'sim_time',
    'accelerate', 'brake', 'steer_left', 'steer_right',
    'car_x', 'car_y', 'car_heading', 'speed', 'traction',
    'drifting', 'collided', 'drift_bonus',
    'drift_timer', 'score', 'skid_count',
]


class TelemetryLogger:
    """Log simulation telemetry to a CSV file."""

    def __init__(self, filename=None, log_interval=DEFAULT_LOG_INTERVAL):
        """
        Initialize telemetry logger.

        Args:
            filename: Output CSV filename (None = auto-generate)
            log_interval: Log every N frames (default: 1 = every frame)
        """
        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"drift_telemetry_{timestamp}.csv"
        if log_interval < 1:
            raise ValueError(f"log_interval must be >= 1, got {log_interval}")

        self.filename = filename
        self.log_interval = log_interval
        self.frame_count = 0
        self.rows_written = 0
        self.sim_time = 0.0

        # Events from frames skipped by log_interval, carried into the next row
        self.pending_collided = False
        self.pending_bonus = 0.0
        self.fieldnames = list(FIELDNAMES)

        self.file = open(self.filename, 'w', newline='')
        self.writer = csv.DictWriter(self.file, fieldnames=self.fieldnames)
        self.writer.writeheader()
        self.file.flush()

    def log_frame(self, context, intent, result):
        """
        Log a single simulated frame.

        Args:
            context: SimulationContext after the step
            intent: InputIntent used for the step
            result: StepResult returned by the step
        """
        self.frame_count += 1
        self.sim_time += result.dt
        self.pending_collided = self.pending_collided or result.collided
        self.pending_bonus += result.drift_bonus

        # Only log every N frames
        if self.frame_count % self.log_interval != 0:
            return

        car = context.car
        session = context.session
        row = {
            'timestamp': datetime.now().isoformat(),
            'frame': self.frame_count,
            'dt': f"{result.dt:.4f}",
            'sim_time': f"{self.sim_time:.4f}",
            'accelerate': int(intent.accelerate),
            'brake': int(intent.brake),
            'steer_left': int(intent.steer_left),
            'steer_right': int(intent.steer_right),
            'car_x': f"{car.x:.3f}",
            'car_y': f"{car.y:.3f}",
            'car_heading': f"{car.normalized_heading():.4f}",
            'speed': f"{car.speed:.3f}",
            'traction': f"{car.traction(context.config.drift):.2f}",
            'drifting': int(result.drifting),
            'collided': int(self.pending_collided),
            'drift_bonus': f"{self.pending_bonus:.0f}",
            'drift_timer': f"{session.drift_timer:.4f}",
            'score': f"{session.score:.3f}",
            'skid_count': len(context.trail),
        }

        self.writer.writerow(row)
        self.rows_written += 1
        self.pending_collided = False
        self.pending_bonus = 0.0

        # Flush periodically so a crash loses little data
        if self.rows_written % 100 == 0:
            self.file.flush()

    def close(self):
        """Flush and close the CSV file."""
        if self.file is not None:
            self.file.flush()
            self.file.close()
            self.file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
