"""
Pytest configuration and shared fixtures for the odometry core tests.

Provides a manual nanosecond clock, simulated tick and heading sources,
and a localizer bound to them with offsets chosen so rotation artifacts
come out as whole ticks.
"""

import sys
import math
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from odo_core.geometry import Pose
from odo_core.hardware.simulated import (
    ManualClock,
    SimulatedTickSource,
    SimulatedHeadingSource,
)
from odo_core.localization import (
    OdometryHardware,
    TwoWheelLocalizer,
    TwoWheelLocalizerConfig,
)
from odo_core.metrics import reset_metrics, get_metrics


# =============================================================================
# Constants
# =============================================================================

CYCLE_NS = 10_000_000  # 10 ms control loop
FORWARD_OFFSET_Y = 10.0
STRAFE_OFFSET_X = -20.0


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_metrics():
    """Give every test its own global metrics collector."""
    reset_metrics()
    yield get_metrics()
    reset_metrics()


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock(start_ns=1_000_000_000)


@pytest.fixture
def forward_ticks() -> SimulatedTickSource:
    return SimulatedTickSource(quantize=False)


@pytest.fixture
def strafe_ticks() -> SimulatedTickSource:
    return SimulatedTickSource(quantize=False)


@pytest.fixture
def heading_source() -> SimulatedHeadingSource:
    return SimulatedHeadingSource()


@pytest.fixture
def hardware(forward_ticks, strafe_ticks, heading_source, manual_clock) -> OdometryHardware:
    return OdometryHardware(
        forward=forward_ticks,
        strafe=strafe_ticks,
        heading=heading_source,
        clock=manual_clock,
    )


@pytest.fixture
def localizer_config() -> TwoWheelLocalizerConfig:
    """
    Test calibration: 0.002 in/tick on both wheels.

    Forward wheel 10 in left of center, strafe wheel 20 in behind it, so a
    0.1 rad turn produces exactly 1 and -2 artifact ticks.
    """
    return TwoWheelLocalizerConfig(
        forward_ticks_to_inches=0.002,
        strafe_ticks_to_inches=0.002,
        forward_encoder_pose=Pose(0.0, FORWARD_OFFSET_Y, 0.0),
        strafe_encoder_pose=Pose(STRAFE_OFFSET_X, 0.0, math.pi / 2),
        imu_settle_time_s=0.0,
    )


@pytest.fixture
def localizer(hardware, localizer_config) -> TwoWheelLocalizer:
    return TwoWheelLocalizer(hardware, Pose(), localizer_config)


# =============================================================================
# Helper Functions
# =============================================================================


def run_cycle(localizer: TwoWheelLocalizer, clock: ManualClock, nanos: int = CYCLE_NS):
    """Advance the clock by one control period and update the localizer."""
    clock.advance(nanos)
    localizer.update()
