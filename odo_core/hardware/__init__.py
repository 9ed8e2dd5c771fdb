"""
Hardware Module: Narrow interfaces to the external collaborators.

The localizer only sees three things:
- TickSource: a raw, monotonically reported encoder position
- HeadingSource: an absolute heading in radians
- a monotonic nanosecond clock (wrapped by NanoTimer)

Simulated implementations live in odo_core.hardware.simulated.
"""

from .encoder import Encoder, EncoderDirection, TickSource
from .heading import HeadingSource, SettleResult, settle
from .timer import NanoTimer

__all__ = [
    'Encoder',
    'EncoderDirection',
    'TickSource',
    'HeadingSource',
    'SettleResult',
    'settle',
    'NanoTimer',
]
