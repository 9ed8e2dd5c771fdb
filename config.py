"""
Odometry demo configuration.
"""

import math

# Logging configuration
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# Robot calibration (inches, ticks)
ROBOT_CONFIG = {
    "forward_ticks_to_inches": 0.002,
    "strafe_ticks_to_inches": 0.002,
    "forward_encoder_y": 0.75,       # forward wheel, left of center
    "strafe_encoder_x": -6.6,        # strafe wheel, behind center
    "imu_settle_time_s": 0.3,
}

# Simulated motion (constant-curvature arc)
SIMULATION_CONFIG = {
    "cycles": 500,
    "period_ms": 10,
    "forward_speed": 20.0,           # in/s
    "strafe_speed": 5.0,             # in/s
    "turn_rate": math.radians(45),   # rad/s
    "print_interval": 50,            # print every 50 cycles
    "quantize_ticks": True,
}
