import pytest

from balancebot.pid import PIDController


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def make(p=1.0, i=0.0, d=0.0, ramp=0.0, limit=1000.0, now=0):
    clock = FakeClock(now)
    return PIDController(p, i, d, ramp, limit, clock), clock


def test_proportional_only():
    pid, clock = make(p=3.0)
    clock.now = 1000
    assert pid(2.0) == pytest.approx(3.0 * 2.0)


def test_output_limited():
    pid, clock = make(p=100.0, limit=0.7)
    clock.now = 1000
    assert pid(5.0) == pytest.approx(0.7)
    clock.now = 2000
    assert pid(-5.0) == pytest.approx(-0.7)


def test_integral_accumulates():
    pid, clock = make(p=0.0, i=10.0)
    outputs = []
    for step in range(1, 6):
        clock.now = step * 1000
        outputs.append(pid(1.0))
    assert all(b > a for a, b in zip(outputs, outputs[1:]))


def test_integral_is_clamped_by_limit():
    pid, clock = make(p=0.0, i=1000.0, limit=0.5)
    for step in range(1, 200):
        clock.now = step * 10000
        out = pid(1.0)
    assert out == pytest.approx(0.5)


def test_ramp_limits_rate_of_change():
    ramp = 100.0
    pid, clock = make(p=50.0, ramp=ramp)
    clock.now = 1000
    out = pid(10.0)
    assert out == pytest.approx(ramp * 1e-3)
    clock.now = 3000
    out2 = pid(10.0)
    assert out2 - out == pytest.approx(ramp * 2e-3)


def test_zero_elapsed_time_uses_one_millisecond():
    a, clock_a = make(p=1.0, i=5.0, d=0.01)
    b, clock_b = make(p=1.0, i=5.0, d=0.01)
    clock_b.now = 1000
    assert a(2.0) == pytest.approx(b(2.0))


def test_long_gap_uses_one_millisecond():
    a, clock_a = make(p=1.0, i=5.0, d=0.01)
    b, clock_b = make(p=1.0, i=5.0, d=0.01)
    clock_a.now = 2_000_000
    clock_b.now = 1000
    assert a(2.0) == pytest.approx(b(2.0))


def test_reset_restores_fresh_behaviour():
    used, clock_used = make(p=1.0, i=5.0, d=0.01)
    for step in range(1, 4):
        clock_used.now = step * 1000
        used(3.0)
    used.reset()
    fresh, clock_fresh = make(p=1.0, i=5.0, d=0.01)
    clock_used.now += 1000
    clock_fresh.now = 1000
    assert used(-1.5) == pytest.approx(fresh(-1.5))


def test_gains_are_public_and_adjustable():
    pid, clock = make(p=1.0)
    pid.p = 2.0
    clock.now = 1000
    assert pid(1.5) == pytest.approx(2.0 * 1.5)