"""Discrete PID controller with anti-windup and output ramp limiting."""

from collections.abc import Callable

from .focmath import constrain
from .timing import micros


class PIDController:
    """PID controller timed by a microsecond clock.

    ``ramp`` is the maximum rate of change of the output per second (0 disables
    ramping) and ``limit`` bounds both the integral term and the output.
    """

    def __init__(
        self,
        p: float,
        i: float,
        d: float,
        ramp: float,
        limit: float,
        clock: Callable[[], int] = micros,
    ) -> None:
        self.p = p
        self.i = i
        self.d = d
        self.output_ramp = ramp
        self.limit = limit
        self._clock = clock
        self._error_prev = 0.0
        self._output_prev = 0.0
        self._integral_prev = 0.0
        self._timestamp_prev = clock()

    def __call__(self, error: float) -> float:
        """Advance the controller with a new tracking error and return the output."""
        timestamp_now = self._clock()
        ts = (timestamp_now - self._timestamp_prev) * 1e-6
        # Clock wrap-around or stale state: fall back to a nominal 1 ms step.
        if ts <= 0 or ts > 0.5:
            ts = 1e-3

        proportional = self.p * error
        integral = self._integral_prev + self.i * ts * 0.5 * (error + self._error_prev)
        integral = constrain(integral, -self.limit, self.limit)
        derivative = self.d * (error - self._error_prev) / ts

        output = constrain(proportional + integral + derivative, -self.limit, self.limit)

        if self.output_ramp > 0:
            output_rate = (output - self._output_prev) / ts
            if output_rate > self.output_ramp:
                output = self._output_prev + self.output_ramp * ts
            elif output_rate < -self.output_ramp:
                output = self._output_prev - self.output_ramp * ts

        self._integral_prev = integral
        self._output_prev = output
        self._error_prev = error
        self._timestamp_prev = timestamp_now
        return output

    def reset(self) -> None:
        """Clear the integral, previous output and previous error."""
        self._integral_prev = 0.0
        self._output_prev = 0.0
        self._error_prev = 0.0