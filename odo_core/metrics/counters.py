"""
Localizer diagnostics.

Tracks what a tuner needs to judge an odometry run:
- Event counters (updates, pose resets, encoder rebases, recalibrations)
- Fault reasons for cycles and operations that did not complete normally
- A rolling window of cycle times, to spot a late or jittery control loop
- A rolling window of per-cycle heading deltas, to spot turns that approach
  the shortest-turn ambiguity at pi

A telemetry thread may read while the control loop writes, so every
access takes the lock.
"""

import logging
import math
import statistics
import threading
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class CycleTimeSummary:
    """
    Control loop timing over the recorded window.

    Attributes:
        count: Cycles in the window
        mean_ms: Mean cycle time (ms)
        min_ms: Shortest cycle (ms)
        max_ms: Longest cycle (ms)
        jitter_ms: Population standard deviation of cycle time (ms)
        overruns: Cycles longer than the overrun threshold
    """

    count: int
    mean_ms: float
    min_ms: float
    max_ms: float
    jitter_ms: float
    overruns: int

    @property
    def rate_hz(self) -> float:
        """Mean update rate implied by mean_ms."""
        if self.mean_ms <= 0:
            return 0.0
        return 1000.0 / self.mean_ms


@dataclass
class HeadingDeltaSummary:
    """
    Per-cycle heading change over the recorded window.

    Attributes:
        count: Cycles in the window
        net_rad: Signed sum of the window's heading deltas
        mean_abs_rad: Mean turn per cycle, unsigned
        max_abs_rad: Largest turn in a single cycle, unsigned
    """

    count: int
    net_rad: float
    mean_abs_rad: float
    max_abs_rad: float


class MetricsCollector:
    """
    Thread-safe localizer diagnostics.

    Usage:
        collector = MetricsCollector()
        collector.increment('localizer_updates')
        collector.record_cycle(cycle_time_ms=10.2, heading_delta_rad=0.004)

        timing = collector.cycle_time_summary()
        print(f"{timing.rate_hz:.1f} Hz, jitter {timing.jitter_ms:.2f} ms")
    """

    FAULT_REASONS = {
        'zero_cycle_time': 'Update called with no elapsed time since the last cycle',
        'imu_recalibration_canceled': 'IMU settling wait canceled before completion',
    }

    STANDARD_COUNTERS = (
        'localizer_updates',
        'pose_resets',
        'start_pose_changes',
        'encoder_resets',
        'imu_recalibrations',
    )

    def __init__(self, window: int = 1000, overrun_ms: float = 20.0):
        """
        Args:
            window: Number of most recent cycles kept for the summaries
            overrun_ms: Cycle time above which a cycle counts as an overrun
        """
        self.window = window
        self.overrun_ms = overrun_ms
        self._lock = threading.Lock()
        self._counters: Dict[str, int] = defaultdict(int)
        self._faults: Dict[str, int] = defaultdict(int)
        self._cycle_times_ms: deque = deque(maxlen=window)
        self._heading_deltas: deque = deque(maxlen=window)

    def increment(self, counter_name: str, value: int = 1):
        with self._lock:
            self._counters[counter_name] += value

    def increment_fault(self, reason: str, value: int = 1):
        """
        Count a fault.

        Args:
            reason: Fault reason code (should be in FAULT_REASONS)
            value: Amount to increment (default 1)
        """
        if reason not in self.FAULT_REASONS:
            logger.warning(f"Unknown fault reason '{reason}'")

        with self._lock:
            self._faults[reason] += value

    def get_counter(self, counter_name: str) -> int:
        with self._lock:
            return self._counters.get(counter_name, 0)

    def get_fault_count(self, reason: Optional[str] = None) -> int:
        """Count for one fault reason, or across all reasons if None."""
        with self._lock:
            if reason is None:
                return sum(self._faults.values())
            return self._faults.get(reason, 0)

    def record_cycle(self, cycle_time_ms: float, heading_delta_rad: float):
        """Record one completed localizer cycle."""
        with self._lock:
            self._cycle_times_ms.append(cycle_time_ms)
            self._heading_deltas.append(heading_delta_rad)

    def cycle_time_summary(self) -> Optional[CycleTimeSummary]:
        """Timing over the window, or None before the first cycle."""
        with self._lock:
            samples = list(self._cycle_times_ms)

        if not samples:
            return None

        return CycleTimeSummary(
            count=len(samples),
            mean_ms=statistics.fmean(samples),
            min_ms=min(samples),
            max_ms=max(samples),
            jitter_ms=statistics.pstdev(samples),
            overruns=sum(1 for s in samples if s > self.overrun_ms),
        )

    def heading_delta_summary(self) -> Optional[HeadingDeltaSummary]:
        """Heading change statistics over the window, or None before the first cycle."""
        with self._lock:
            samples = list(self._heading_deltas)

        if not samples:
            return None

        magnitudes = [abs(s) for s in samples]
        return HeadingDeltaSummary(
            count=len(samples),
            net_rad=math.fsum(samples),
            mean_abs_rad=statistics.fmean(magnitudes),
            max_abs_rad=max(magnitudes),
        )

    def reset(self):
        """Clear everything (useful for testing)."""
        with self._lock:
            self._counters.clear()
            self._faults.clear()
            self._cycle_times_ms.clear()
            self._heading_deltas.clear()

    def print_summary(self):
        """Print a human-readable report of the run."""
        with self._lock:
            counters = dict(self._counters)
            faults = {k: v for k, v in self._faults.items() if v > 0}
        timing = self.cycle_time_summary()
        heading = self.heading_delta_summary()

        print("\n" + "=" * 70)
        print("  LOCALIZER METRICS")
        print("=" * 70)

        print("\nCOUNTERS:")
        for name in self.STANDARD_COUNTERS:
            print(f"  {name:30s}: {counters.get(name, 0):8d}")

        if faults:
            print("\nFAULTS:")
            for reason, count in sorted(faults.items()):
                print(f"  {reason:30s}: {count:8d}")

        if timing:
            print(f"\nCYCLE TIME (last {timing.count}):")
            print(f"  mean={timing.mean_ms:.3f} ms ({timing.rate_hz:.1f} Hz), "
                  f"min={timing.min_ms:.3f}, max={timing.max_ms:.3f}, "
                  f"jitter={timing.jitter_ms:.3f}, overruns={timing.overruns}")

        if heading:
            print(f"\nHEADING DELTA (last {heading.count}):")
            print(f"  net={math.degrees(heading.net_rad):.2f} deg, "
                  f"mean |d|={math.degrees(heading.mean_abs_rad):.3f} deg, "
                  f"max |d|={math.degrees(heading.max_abs_rad):.3f} deg")

        print("=" * 70 + "\n")
