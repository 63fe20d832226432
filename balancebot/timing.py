"""Arduino-style timing helpers: elapsed milliseconds/microseconds and sleeps."""

import time

_UINT32_MASK = 0xFFFFFFFF

_START_NS = time.monotonic_ns()


def _elapsed_ns() -> int:
    return time.monotonic_ns() - _START_NS


def millis() -> int:
    """Milliseconds since the module was loaded, wrapping at 32 bits."""
    return (_elapsed_ns() // 1_000_000) & _UINT32_MASK


def micros() -> int:
    """Microseconds since the module was loaded, wrapping at 32 bits."""
    return (_elapsed_ns() // 1_000) & _UINT32_MASK


def msleep(millisec: int) -> None:
    """Sleep for the given number of milliseconds."""
    if millisec < 0:
        raise ValueError(f"sleep duration must be non-negative, got {millisec} ms")
    time.sleep(millisec / 1_000)


def usleep(microsec: int) -> None:
    """Sleep for the given number of microseconds."""
    if microsec < 0:
        raise ValueError(f"sleep duration must be non-negative, got {microsec} us")
    time.sleep(microsec / 1_000_000)