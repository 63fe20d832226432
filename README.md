# balancebot

Control building blocks for a two-wheeled self-balancing robot. It is plain
Python and has no third-party dependencies.

## Modules

- `balancebot.timing` provides `millis()` and `micros()`. They return the time
  elapsed since the module was imported, from a monotonic clock, and wrap at
  32 bits. `msleep()` and `usleep()` sleep for the given number of
  milliseconds or microseconds and raise `ValueError` when the duration is
  negative.
- `balancebot.focmath` holds approximations and helpers for motor control:
  - `sin_approx`, `cos_approx` and `sincos` use a lookup table and expect an
    angle in 0 to 2PI.
  - `atan2_approx` is a polynomial approximation. It returns NaN when both
    arguments are zero.
  - `sqrt_approx` uses the fast inverse square root bit trick in single
    precision.
  - `normalize_angle`, `electrical_angle`, `constrain`, `sign` and `mapfloat`
    are plain helpers.
  - It also defines constants such as `TWO_PI`, `PI_2`, `DEG_TO_RAD` and
    `RAD_TO_DEG`.
- `balancebot.pid` provides `PIDController`, a discrete PID controller:
  - The integral uses the Tustin rule.
  - The integral and the output are both clamped to `±limit`.
  - A `ramp` greater than 0 caps how fast the output may change, per second.
  - A time step that is not positive, or is longer than 0.5 s, is replaced
    by 1 ms.
  - `reset()` clears the integral, the previous output and the previous error.
- `balancebot.lowpass` provides `LowPassFilter`, a first-order filter with time
  constant `tf` in seconds. If more than 0.3 s has passed since the previous
  sample, or the clock has gone backwards, the filter returns the new sample
  unchanged.
- `balancebot.sensor` provides the abstract `Sensor` base class and the enums
  `Direction` and `Pullup`. A subclass implements `sensor_angle()`. `update()`
  counts full rotations from jumps in the angle and ignores negative
  readings. `velocity()` returns rad/s, and does not recompute it if less than
  `min_elapsed_time` has passed. The base class also has `angle()`,
  `precise_angle()`, `mechanical_angle()`, `full_rotations()` and
  `needs_search()`.
- `balancebot.encoder` provides `Encoder`, a quadrature encoder `Sensor`. It
  reads its pulse count through a `read_count(channel)` callable you supply.
  Its counts per revolution are `4 * ppr`.
- `balancebot.commands` provides `Commands`, a dataclass holding the joystick's
  buttons, sticks and triggers. `Commands.from_dict()` builds one from a
  mapping:
  - Every field name must be present, or it raises `KeyError`.
  - Values must be integers, or it raises `TypeError`.
  - Buttons become booleans and axes are truncated to 8 bits.

  `compute_velocity_cmd()` maps the triggers onto a velocity command. The
  left trigger drives forward and the right trigger drives backward, each
  scaled from 0–180 to 0–20.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from balancebot.commands import Commands, compute_velocity_cmd
from balancebot.lowpass import LowPassFilter
from balancebot.pid import PIDController
from balancebot.timing import micros

pid_stb = PIDController(3.0, 5.0, 0.001, 100000, 0.7, micros)
lpf_throttle = LowPassFilter(0.5, micros)

state = {field: 0 for field in (
    "BUTTON_A", "BUTTON_B", "BUTTON_X", "BUTTON_Y",
    "BUTTON_L", "BUTTON_R", "BUTTON_WL", "BUTTON_WR",
    "JOYSTICK_L_X", "JOYSTICK_L_Y", "JOYSTICK_R_X", "JOYSTICK_R_Y",
    "TRIGGER_L", "TRIGGER_R",
)}
state["TRIGGER_L"] = 90

cmd = Commands.from_dict(state)
target = lpf_throttle(compute_velocity_cmd(cmd))
voltage = pid_stb(target - 0.0)
```

Every time-dependent class takes a `clock` argument. It is a callable that
returns a timestamp in microseconds and defaults to `timing.micros`. If you
pass a fake clock, results repeat exactly, which is useful in tests.

An `Encoder` gets its pulse count from a callable that you pass in:

```python
from balancebot.encoder import Encoder
from balancebot.timing import micros

counts = {2: 0}
enc = Encoder(2, 533.655, lambda ch: counts[ch], micros)
enc.init()
counts[2] = 1000
enc.update()
print(enc.angle(), enc.full_rotations())
```

## What this package does not do

This package provides only the computational pieces. It does not talk to any
hardware: it does not read an IMU, drive motors or access encoder
peripherals. It has no Bluetooth or other joystick receiver. It has no
command or main loop that runs a robot. You supply the pulse counts, sensor
readings and joystick state, and you act on the outputs yourself.