"""
Encoder abstraction over a raw tick counter.

Tracks the signed position change between polls without ever clearing the
hardware counter: reset() only rebases the reference point.
"""

from enum import IntEnum
from typing import Protocol


class TickSource(Protocol):
    """Anything that reports a raw encoder position in ticks."""

    def get_current_position(self) -> int:
        ...


class EncoderDirection(IntEnum):
    """Sign applied to raw ticks."""

    FORWARD = 1
    REVERSE = -1


class Encoder:
    """
    Signed delta tracker for one odometry wheel.

    Usage:
        encoder = Encoder(tick_source, EncoderDirection.REVERSE)
        encoder.update()                 # once per cycle
        ticks = encoder.get_delta_position()
    """

    def __init__(self, tick_source: TickSource, direction: EncoderDirection = EncoderDirection.FORWARD):
        """
        Args:
            tick_source: Raw counter to poll
            direction: Sign applied to every delta
        """
        self.tick_source = tick_source
        self.direction = EncoderDirection(direction)
        self.previous_position = 0
        self.current_position = 0
        self.reset()

    def set_direction(self, direction: EncoderDirection):
        self.direction = EncoderDirection(direction)

    def get_direction(self) -> EncoderDirection:
        return self.direction

    def get_multiplier(self) -> int:
        """Sign factor for this encoder (+1 or -1)."""
        return int(self.direction)

    def reset(self):
        """Rebase both reference points to the present raw reading."""
        raw = self.tick_source.get_current_position()
        self.previous_position = raw
        self.current_position = raw

    def update(self):
        """Poll the tick source; the last reading becomes the previous one."""
        self.previous_position = self.current_position
        self.current_position = self.tick_source.get_current_position()

    def get_delta_position(self) -> int:
        """Signed change in ticks between the last two polls."""
        return self.get_multiplier() * (self.current_position - self.previous_position)
