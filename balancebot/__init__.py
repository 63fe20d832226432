"""Control building blocks for a two-wheeled self-balancing robot: timing, fast math, PID, low-pass filtering, encoder sensing and joystick commands."""

__version__ = "0.1.0"

__all__ = ["commands", "encoder", "focmath", "lowpass", "pid", "sensor", "timing"]