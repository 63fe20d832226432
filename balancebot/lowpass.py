"""First-order low-pass filter timed by a microsecond clock."""

from collections.abc import Callable

from .timing import micros


class LowPassFilter:
    """Exponential low-pass filter with time constant ``tf`` in seconds."""

    def __init__(self, tf: float, clock: Callable[[], int] = micros) -> None:
        self.tf = tf
        self._clock = clock
        self._y_prev = 0.0
        self._timestamp_prev = clock()

    def __call__(self, x: float) -> float:
        """Filter a new sample and return the filtered value."""
        timestamp = self._clock()
        dt = (timestamp - self._timestamp_prev) * 1e-6
        # A backwards clock is an unsigned wrap-around: treat it as a long gap.
        if dt < 0.0 or dt > 0.3:
            self._y_prev = x
            self._timestamp_prev = timestamp
            return x

        alpha = self.tf / (self.tf + dt)
        y = alpha * self._y_prev + (1.0 - alpha) * x
        self._y_prev = y
        self._timestamp_prev = timestamp
        return y