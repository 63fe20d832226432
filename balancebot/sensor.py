"""Base class for shaft angle sensors with rotation tracking and velocity."""

import enum
from abc import ABC, abstractmethod
from collections.abc import Callable

from .focmath import TWO_PI
from .timing import micros, msleep, usleep


class Direction(enum.IntEnum):
    """Rotation direction of a sensor."""

    CW = 1
    CCW = -1
    UNKNOWN = 0


class Pullup(enum.IntEnum):
    """Pull-up resistor configuration of a sensor's inputs."""

    USE_INTERN = 0x00
    USE_EXTERN = 0x01


class Sensor(ABC):
    """Shaft angle sensor that counts full rotations and estimates velocity.

    Subclasses implement :meth:`sensor_angle`, returning the raw shaft angle in
    radians in the range 0 to 2PI. :meth:`update` must be called often enough
    that no full rotation is missed between calls.
    """

    def __init__(self, clock: Callable[[], int] = micros) -> None:
        self._clock = clock
        self.min_elapsed_time = 0.000100
        self._velocity = 0.0
        self._angle_prev = 0.0
        self._angle_prev_ts = 0
        self._vel_angle_prev = 0.0
        self._vel_angle_prev_ts = 0
        self._full_rotations = 0
        self._vel_full_rotations = 0

    @abstractmethod
    def sensor_angle(self) -> float:
        """Read the raw shaft angle from the hardware, in radians."""

    def init(self) -> None:
        """Prime the internal state so the first readings do not jump from zero."""
        self.sensor_angle()
        usleep(1)
        self._vel_angle_prev = self.sensor_angle()
        self._vel_angle_prev_ts = self._clock()
        msleep(1)
        self.sensor_angle()
        usleep(1)
        self._angle_prev = self.sensor_angle()
        self._angle_prev_ts = self._clock()

    def update(self) -> None:
        """Read the sensor and update angle, timestamp and rotation count."""
        val = self.sensor_angle()
        # Negative readings signal a sensor error and are ignored.
        if val < 0:
            return
        self._angle_prev_ts = self._clock()
        d_angle = val - self._angle_prev
        if abs(d_angle) > 0.8 * TWO_PI:
            self._full_rotations += -1 if d_angle > 0 else 1
        self._angle_prev = val

    def velocity(self) -> float:
        """Angular velocity in rad/s since the previous velocity computation."""
        ts = (self._angle_prev_ts - self._vel_angle_prev_ts) * 1e-6
        if ts < 0.0:
            # The clock wrapped around: restart the measurement window.
            self._vel_angle_prev = self._angle_prev
            self._vel_full_rotations = self._full_rotations
            self._vel_angle_prev_ts = self._angle_prev_ts
            return self._velocity
        if ts < self.min_elapsed_time:
            return self._velocity

        turns = self._full_rotations - self._vel_full_rotations
        self._velocity = (turns * TWO_PI + (self._angle_prev - self._vel_angle_prev)) / ts
        self._vel_angle_prev = self._angle_prev
        self._vel_full_rotations = self._full_rotations
        self._vel_angle_prev_ts = self._angle_prev_ts
        return self._velocity

    def mechanical_angle(self) -> float:
        """Shaft angle within one turn, as of the last update."""
        return self._angle_prev

    def angle(self) -> float:
        """Total angle including full rotations, as of the last update."""
        return self._full_rotations * TWO_PI + self._angle_prev

    def precise_angle(self) -> float:
        """Total angle including full rotations, in full precision."""
        return float(self._full_rotations) * TWO_PI + self._angle_prev

    def full_rotations(self) -> int:
        """Number of full rotations counted so far."""
        return self._full_rotations

    def needs_search(self) -> int:
        """Whether an absolute zero search is needed; 0 for this sensor."""
        return 0