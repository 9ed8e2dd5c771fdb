"""
Odometry demo.

Drives a TwoWheelLocalizer against a simulated robot following a
constant-curvature arc and reports estimate against ground truth.
"""

import math
import logging
import argparse

import config
from odo_core.geometry import Pose
from odo_core.hardware.simulated import SimulatedRobot
from odo_core.localization import OdometryHardware, TwoWheelLocalizer, TwoWheelLocalizerConfig
from odo_core.metrics import get_metrics

logging.basicConfig(
    level=getattr(logging, config.LOGGING_CONFIG["level"]),
    format=config.LOGGING_CONFIG["format"]
)
logger = logging.getLogger(__name__)


def build_localizer(robot: SimulatedRobot) -> TwoWheelLocalizer:
    """Bind a localizer to the simulated robot's hardware."""
    robot_cfg = config.ROBOT_CONFIG
    localizer_config = TwoWheelLocalizerConfig(
        forward_ticks_to_inches=robot_cfg["forward_ticks_to_inches"],
        strafe_ticks_to_inches=robot_cfg["strafe_ticks_to_inches"],
        forward_encoder_pose=Pose(0.0, robot_cfg["forward_encoder_y"], 0.0),
        strafe_encoder_pose=Pose(robot_cfg["strafe_encoder_x"], 0.0, math.pi / 2),
        imu_settle_time_s=robot_cfg["imu_settle_time_s"],
    )
    hardware = OdometryHardware(
        forward=robot.forward,
        strafe=robot.strafe,
        heading=robot.heading,
        clock=robot.clock,
    )
    return TwoWheelLocalizer(hardware, Pose(), localizer_config)


def run(cycles: int, period_ms: float):
    """Run the simulated control loop."""
    sim = config.SIMULATION_CONFIG
    robot_cfg = config.ROBOT_CONFIG

    robot = SimulatedRobot(
        forward_offset_y=robot_cfg["forward_encoder_y"],
        strafe_offset_x=robot_cfg["strafe_encoder_x"],
        forward_ticks_to_inches=robot_cfg["forward_ticks_to_inches"],
        strafe_ticks_to_inches=robot_cfg["strafe_ticks_to_inches"],
        quantize=sim["quantize_ticks"],
    )
    localizer = build_localizer(robot)
    dt = period_ms / 1000.0

    logger.info(f"Running {cycles} cycles at {period_ms:.1f} ms")

    for cycle in range(1, cycles + 1):
        robot.step(sim["forward_speed"], sim["strafe_speed"], sim["turn_rate"], dt)
        localizer.update()

        if cycle % sim["print_interval"] == 0:
            estimate = localizer.get_pose()
            truth = robot.true_pose
            error = math.hypot(estimate.x - truth.x, estimate.y - truth.y)
            print(f"[{cycle:5d}] estimate={estimate} truth={truth} error={error:.4f} in")

    velocity = localizer.get_velocity_vector()
    print(f"Final velocity: {velocity.magnitude:.3f} in/s @ {math.degrees(velocity.theta):.1f} deg")
    print(f"Total heading: {math.degrees(localizer.get_total_heading()):.1f} deg")
    get_metrics().print_summary()


def main():
    """Entry point."""
    parser = argparse.ArgumentParser(description='Two-wheel odometry demo')
    parser.add_argument('--cycles', '-n', type=int, default=None,
                       help='Number of update cycles')
    parser.add_argument('--period-ms', '-p', type=float, default=None,
                       help='Control loop period (ms)')
    parser.add_argument('--debug', '-d', action='store_true',
                       help='Enable debug logging')

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    cycles = args.cycles if args.cycles is not None else config.SIMULATION_CONFIG["cycles"]
    period_ms = args.period_ms if args.period_ms is not None else config.SIMULATION_CONFIG["period_ms"]

    run(cycles, period_ms)


if __name__ == "__main__":
    main()
