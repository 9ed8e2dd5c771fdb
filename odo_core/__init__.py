"""
Odometry Core Package.

Two-wheel dead-reckoning localizer fused with an absolute heading sensor.

Package structure:
- geometry: Matrix, Pose, Vector and angle helpers
- hardware: Encoder, heading source and timer interfaces (plus simulated sources)
- localization: Localizer interface and the two-wheel pose-exponential estimator
- metrics: Diagnostics, counters, histograms
"""

__version__ = "0.1.0"
