import struct

import pytest

from padbridge.analog_stick import SwitchAnalogStick
from padbridge.powera import PowerAController, PowerADPad
from padbridge.switch_types import HardwareID, SwitchButtonData


def report03(lx=0x80, ly=0x80, rx=0x80, ry=0x80, b0=PowerADPad.RELEASED, b1=0, l2=0, r2=0, battery=0):
    return struct.pack("<11B", 0x03, lx, ly, rx, ry, b0, b1, l2, r2, battery, 0)


def test_hardware_ids():
    assert HardwareID(0x20D6, 0x6271) in PowerAController.HARDWARE_IDS
    assert len(PowerAController.HARDWARE_IDS) == 3


def test_released_hat_maps_nothing():
    pad = PowerAController()
    pad.process_input_data(report03())
    assert pad.buttons == SwitchButtonData()


@pytest.mark.parametrize(
    "hat, expected",
    [
        (PowerADPad.N, {"dpad_up": True}),
        (PowerADPad.SE, {"dpad_down": True, "dpad_right": True}),
        (PowerADPad.W, {"dpad_left": True}),
        (PowerADPad.NW, {"dpad_up": True, "dpad_left": True}),
    ],
)
def test_hat(hat, expected):
    pad = PowerAController()
    pad.process_input_data(report03(b0=hat))
    assert pad.buttons == SwitchButtonData(**expected)


@pytest.mark.parametrize("bit, name", [(4, "B"), (5, "A"), (6, "Y"), (7, "X")])
def test_face_buttons_swapped(bit, name):
    pad = PowerAController()
    pad.process_input_data(report03(b0=PowerADPad.RELEASED | (1 << bit)))
    assert pad.buttons == SwitchButtonData(**{name: True})


@pytest.mark.parametrize(
    "bit, name",
    [(0, "L"), (1, "R"), (2, "minus"), (3, "plus"), (4, "lstick_press"), (5, "rstick_press")],
)
def test_second_byte_buttons(bit, name):
    pad = PowerAController()
    pad.process_input_data(report03(b1=1 << bit))
    assert pad.buttons == SwitchButtonData(**{name: True})


def test_triggers_any_nonzero():
    pad = PowerAController(trigger_threshold=0.9)
    pad.process_input_data(report03(l2=1, r2=0))
    assert pad.buttons.ZL
    assert not pad.buttons.ZR


def test_battery_and_sticks():
    pad = PowerAController()
    pad.process_input_data(report03(lx=0, ly=0, rx=0xFF, ry=0xFF, battery=0x64))
    assert pad.battery_raw == 0x64
    assert pad.left_stick.x == SwitchAnalogStick.MIN
    assert pad.left_stick.y == SwitchAnalogStick.MAX
    assert pad.right_stick.x == SwitchAnalogStick.MAX
    assert pad.right_stick.y == SwitchAnalogStick.MIN


def test_other_reports_ignored():
    pad = PowerAController()
    pad.process_input_data(bytes([0x01]) + bytes([0xFF]) * 10)
    assert pad.buttons == SwitchButtonData()
    assert pad.battery_raw is None


def test_short_report_raises():
    with pytest.raises(ValueError):
        PowerAController().process_input_data(report03()[:5])


def test_empty_report_raises():
    with pytest.raises(ValueError):
        PowerAController().process_input_data(b"")