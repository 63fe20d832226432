"""Fast trigonometric and numeric approximations used by the motor control loop."""

import math
import struct

TWO_SQRT3 = 1.15470053838
SQRT3 = 1.73205080757
ONE_SQRT3 = 0.57735026919
SQRT3_2 = 0.86602540378
SQRT2 = 1.41421356237
D120_TO_RAD = 2.09439510239
PI = 3.14159265359
PI_2 = 1.57079632679
PI_3 = 1.0471975512
TWO_PI = 6.28318530718
THREE_PI_2 = 4.71238898038
PI_6 = 0.52359877559
RPM_TO_RADS = 0.10471975512

NOT_SET = -12345.0
MIN_ANGLE_DETECT_MOVEMENT = TWO_PI / 101.0

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Quarter sine wave, 16-bit amplitude, 65 entries.
_SINE_TABLE = (
    0, 804, 1608, 2411, 3212, 4011, 4808, 5602, 6393, 7180, 7962, 8740, 9512,
    10279, 11039, 11793, 12540, 13279, 14010, 14733, 15447, 16151, 16846, 17531,
    18205, 18868, 19520, 20160, 20788, 21403, 22006, 22595, 23170, 23732, 24279,
    24812, 25330, 25833, 26320, 26791, 27246, 27684, 28106, 28511, 28899, 29269,
    29622, 29957, 30274, 30572, 30853, 31114, 31357, 31581, 31786, 31972, 32138,
    32286, 32413, 32522, 32610, 32679, 32729, 32758, 32768,
)

_SIN_SCALE = 64 * 4 * 256.0 / TWO_PI
_FAST_INV_SQRT_MAGIC = 0x5F375A86


def sign(a: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``a``."""
    if a < 0:
        return -1
    return 1 if a > 0 else 0


def constrain(amt, low, high):
    """Clamp ``amt`` to the closed range [low, high]."""
    if amt < low:
        return low
    if amt > high:
        return high
    return amt


def sin_approx(a: float) -> float:
    """Table-based sine of an angle in the range 0 to 2PI."""
    i = int(a * _SIN_SCALE) & 0xFFFFFFFF
    frac = i & 0xFF
    i = (i >> 8) & 0xFF
    if i < 64:
        t1, t2 = _SINE_TABLE[i], _SINE_TABLE[i + 1]
    elif i < 128:
        t1, t2 = _SINE_TABLE[128 - i], _SINE_TABLE[127 - i]
    elif i < 192:
        t1, t2 = -_SINE_TABLE[i - 128], -_SINE_TABLE[i - 127]
    else:
        t1, t2 = -_SINE_TABLE[256 - i], -_SINE_TABLE[255 - i]
    return (t1 + (((t2 - t1) * frac) >> 8)) / 32768.0


def cos_approx(a: float) -> float:
    """Table-based cosine of an angle in the range 0 to 2PI."""
    shifted = a + PI_2
    if shifted > TWO_PI:
        shifted -= TWO_PI
    return sin_approx(shifted)


def sincos(a: float) -> tuple[float, float]:
    """Return ``(sin, cos)`` of ``a`` using the table approximations."""
    return sin_approx(a), cos_approx(a)


def atan2_approx(y: float, x: float) -> float:
    """Polynomial approximation of atan2; NaN when both arguments are zero."""
    abs_y = abs(y)
    abs_x = abs(x)
    largest = max(abs_x, abs_y)
    a = min(abs_x, abs_y) / largest if largest != 0 else math.nan
    s = a * a
    r = ((-0.0464964749 * s + 0.15931422) * s - 0.327622764) * s * a + a
    if abs_y > abs_x:
        r = 1.57079637 - r
    if x < 0.0:
        r = 3.14159274 - r
    if y < 0.0:
        r = -r
    return r


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into [0, 2PI]."""
    a = math.fmod(angle, TWO_PI)
    return a if a >= 0 else a + TWO_PI


def electrical_angle(shaft_angle: float, pole_pairs: int) -> float:
    """Electrical angle of a motor with the given number of pole pairs."""
    return shaft_angle * pole_pairs


def sqrt_approx(value: float) -> float:
    """Square root via the fast inverse square root bit trick (single precision)."""
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    bits = (_FAST_INV_SQRT_MAGIC - (bits >> 1)) & 0xFFFFFFFF
    (inv_sqrt,) = struct.unpack("<f", struct.pack("<I", bits))
    return value * inv_sqrt


def mapfloat(x: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``x`` from one range onto another."""
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min