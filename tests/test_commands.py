import pytest

from balancebot.commands import Commands, compute_velocity_cmd

KEYS = (
    "BUTTON_A", "BUTTON_B", "BUTTON_X", "BUTTON_Y",
    "BUTTON_L", "BUTTON_R", "BUTTON_WL", "BUTTON_WR",
    "JOYSTICK_L_X", "JOYSTICK_L_Y",
    "JOYSTICK_R_X", "JOYSTICK_R_Y",
    "TRIGGER_L", "TRIGGER_R",
)


def full_dict(**overrides):
    data = dict.fromkeys(KEYS, 0)
    data.update(overrides)
    return data


def test_defaults_are_zero():
    cmd = Commands()
    assert cmd.BUTTON_A is False
    assert cmd.TRIGGER_R == 0
    assert compute_velocity_cmd(cmd) == 0.0


def test_from_dict_reads_all_fields():
    data = full_dict(BUTTON_A=1, BUTTON_WR=1, JOYSTICK_L_X=12, JOYSTICK_R_Y=200, TRIGGER_L=90)
    cmd = Commands.from_dict(data)
    assert cmd.BUTTON_A is True
    assert cmd.BUTTON_B is False
    assert cmd.BUTTON_WR is True
    assert cmd.JOYSTICK_L_X == 12
    assert cmd.JOYSTICK_R_Y == 200
    assert cmd.TRIGGER_L == 90


def test_from_dict_nonzero_button_is_true():
    cmd = Commands.from_dict(full_dict(BUTTON_Y=7))
    assert cmd.BUTTON_Y is True


def test_from_dict_truncates_axes_to_byte():
    cmd = Commands.from_dict(full_dict(TRIGGER_R=300, JOYSTICK_L_Y=-1))
    assert cmd.TRIGGER_R == 44
    assert cmd.JOYSTICK_L_Y == 255


def test_from_dict_ignores_extra_keys():
    cmd = Commands.from_dict(full_dict(EXTRA=5, TRIGGER_L=3))
    assert cmd.TRIGGER_L == 3


def test_from_dict_missing_key():
    data = full_dict()
    del data["TRIGGER_R"]
    with pytest.raises(KeyError):
        Commands.from_dict(data)


def test_from_dict_rejects_non_integer():
    with pytest.raises(TypeError):
        Commands.from_dict(full_dict(TRIGGER_L=1.5))


def test_left_trigger_full_forward():
    assert compute_velocity_cmd(Commands(TRIGGER_L=180)) == pytest.approx(20.0)


def test_right_trigger_full_backward():
    assert compute_velocity_cmd(Commands(TRIGGER_R=180)) == pytest.approx(-20.0)


def test_triggers_cancel():
    assert compute_velocity_cmd(Commands(TRIGGER_L=120, TRIGGER_R=120)) == pytest.approx(0.0)


def test_velocity_is_capped():
    assert compute_velocity_cmd(Commands(TRIGGER_L=255)) == pytest.approx(20.0)
    assert compute_velocity_cmd(Commands(TRIGGER_R=255)) == pytest.approx(-20.0)


def test_velocity_is_antisymmetric():
    forward = compute_velocity_cmd(Commands(TRIGGER_L=60))
    backward = compute_velocity_cmd(Commands(TRIGGER_R=60))
    assert forward == pytest.approx(-backward)
    assert 0.0 < forward < 20.0