"""Quadrature encoder sensor read through a pulse counter."""

from collections.abc import Callable

from .focmath import TWO_PI
from .sensor import Sensor
from .timing import micros


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Division truncating toward zero, remainder taking the dividend's sign."""
    q, r = divmod(abs(a), abs(b))
    if (a < 0) != (b < 0):
        q = -q
    if a < 0:
        r = -r
    return q, r


class Encoder(Sensor):
    """Encoder whose pulse count is read from ``read_count(channel)``.

    ``ppr`` is the pulses per revolution; the counts per revolution are four
    times that for quadrature decoding.
    """

    def __init__(
        self,
        channel: int,
        ppr: float,
        read_count: Callable[[int], int],
        clock: Callable[[], int] = micros,
    ) -> None:
        super().__init__(clock)
        self.channel = channel
        self.cpr = 4 * ppr
        self._read_count = read_count
        self._pulse_counter = 0
        self._pulse_timestamp = 0

    def init(self) -> None:
        """Reset the pulse counter state."""
        self._pulse_counter = 0
        self._pulse_timestamp = self._clock()

    def update(self) -> None:
        """Read the pulse count and derive rotations and shaft angle from it."""
        self._pulse_counter = self._read_count(self.channel)
        self._angle_prev_ts = self._clock()
        whole_cpr = int(self.cpr)
        turns, remainder = _trunc_divmod(self._pulse_counter, whole_cpr)
        self._full_rotations = turns
        self._angle_prev = TWO_PI * remainder / self.cpr

    def sensor_angle(self) -> float:
        """Shaft angle in radians from the last read pulse count."""
        return TWO_PI * self._pulse_counter / self.cpr