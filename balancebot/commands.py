"""Joystick command state and the velocity command derived from it."""

import operator
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from .focmath import mapfloat

MAX_VELOCITY_CMD = 20.0
TRIGGER_FULL_SCALE = 180.0


@dataclass
class Commands:
    """Latest button and axis state received from the joystick."""

    BUTTON_A: bool = False
    BUTTON_B: bool = False
    BUTTON_X: bool = False
    BUTTON_Y: bool = False
    BUTTON_L: bool = False
    BUTTON_R: bool = False
    BUTTON_WL: bool = False
    BUTTON_WR: bool = False
    JOYSTICK_L_X: int = 0
    JOYSTICK_L_Y: int = 0
    JOYSTICK_R_X: int = 0
    JOYSTICK_R_Y: int = 0
    TRIGGER_L: int = 0
    TRIGGER_R: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Commands":
        """Build commands from a mapping of key names to integers.

        Buttons become booleans and axes are truncated to 8 bits. Raises
        ``KeyError`` for a missing key and ``TypeError`` for a non-integer.
        """
        values = {}
        for field in fields(cls):
            raw = operator.index(data[field.name])
            values[field.name] = bool(raw) if field.type in (bool, "bool") else raw & 0xFF
        return cls(**values)


def compute_velocity_cmd(cmd: Commands) -> float:
    """Velocity command from the triggers: left drives forward, right backward."""
    trig_r = mapfloat(cmd.TRIGGER_R, 0.0, TRIGGER_FULL_SCALE, 0.0, MAX_VELOCITY_CMD)
    trig_l = mapfloat(cmd.TRIGGER_L, 0.0, TRIGGER_FULL_SCALE, 0.0, MAX_VELOCITY_CMD)
    return min(trig_l, MAX_VELOCITY_CMD) - min(trig_r, MAX_VELOCITY_CMD)