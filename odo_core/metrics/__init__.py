"""
Metrics Module: Localizer diagnostics.

Localizers report through a process-wide collector:
- Counters: localizer_updates, pose_resets, imu_recalibrations, etc.
- Fault reasons for cycles and operations that did not complete normally
- Rolling cycle-time and heading-delta summaries for tuning

Usage:
    from odo_core.metrics import get_metrics

    metrics = get_metrics()
    metrics.increment('localizer_updates')
    metrics.record_cycle(cycle_time_ms=10.2, heading_delta_rad=0.004)
    metrics.print_summary()
"""

from .counters import CycleTimeSummary, HeadingDeltaSummary, MetricsCollector

# Global singleton for easy access
_global_metrics = None


def get_metrics() -> MetricsCollector:
    """Get the global metrics collector singleton."""
    global _global_metrics
    if _global_metrics is None:
        _global_metrics = MetricsCollector()
    return _global_metrics


def reset_metrics():
    """Reset global metrics (for testing)."""
    global _global_metrics
    _global_metrics = MetricsCollector()


__all__ = [
    'CycleTimeSummary',
    'HeadingDeltaSummary',
    'MetricsCollector',
    'get_metrics',
    'reset_metrics',
]
