import struct

import pytest

from padbridge.analog_stick import SwitchAnalogStick
from padbridge.ouya import OuyaController
from padbridge.switch_types import HardwareID, SwitchButtonData

CENTER16 = 0x8000


def report07(lx=CENTER16, ly=CENTER16, rx=CENTER16, ry=CENTER16, lt=0, rt=0, b0=0, b1=0):
    return struct.pack("<B6H2B", 0x07, lx, ly, rx, ry, lt, rt, b0, b1)


def test_hardware_id():
    assert HardwareID(0x2836, 0x0001) in OuyaController.HARDWARE_IDS


def test_battery_report():
    pad = OuyaController()
    pad.process_input_data(bytes([0x03, 0x9A, 0, 0, 0, 0, 0, 0]))
    assert pad.battery_raw == 0x9A
    assert pad.buttons == SwitchButtonData()


@pytest.mark.parametrize(
    "bit, name",
    [(3, "A"), (0, "B"), (2, "X"), (1, "Y"), (5, "R"), (4, "L"), (6, "lstick_press"), (7, "rstick_press")],
)
def test_face_buttons(bit, name):
    pad = OuyaController()
    pad.process_input_data(report07(b0=1 << bit))
    assert pad.buttons == SwitchButtonData(**{name: True})


@pytest.mark.parametrize(
    "bit, name",
    [(0, "dpad_up"), (1, "dpad_down"), (2, "dpad_left"), (3, "dpad_right"), (7, "home")],
)
def test_second_byte_buttons(bit, name):
    pad = OuyaController()
    pad.process_input_data(report07(b1=1 << bit))
    assert pad.buttons == SwitchButtonData(**{name: True})


def test_center_press_and_digital_triggers_unmapped():
    pad = OuyaController()
    pad.process_input_data(report07(b1=(1 << 4) | (1 << 5) | (1 << 6)))
    assert pad.buttons == SwitchButtonData()


def test_minus_plus_cleared():
    pad = OuyaController()
    pad.buttons.minus = True
    pad.buttons.plus = True
    pad.process_input_data(report07())
    assert not pad.buttons.minus
    assert not pad.buttons.plus


def test_analog_triggers_threshold():
    pad = OuyaController(trigger_threshold=0.5)
    pad.process_input_data(report07(lt=0x8000, rt=0x7FFF))
    assert pad.buttons.ZL
    assert not pad.buttons.ZR


def test_stick_extremes_with_y_inverted():
    pad = OuyaController()
    pad.process_input_data(report07(lx=0, ly=0, rx=0xFFFF, ry=0xFFFF))
    assert pad.left_stick.x == SwitchAnalogStick.MIN
    assert pad.left_stick.y == SwitchAnalogStick.MAX
    assert pad.right_stick.x == SwitchAnalogStick.MAX
    assert pad.right_stick.y == SwitchAnalogStick.MIN


def test_unknown_report_ignored():
    pad = OuyaController()
    before = pad.left_stick.to_bytes()
    pad.process_input_data(bytes([0x42, 0xFF, 0xFF, 0xFF]))
    assert pad.buttons == SwitchButtonData()
    assert pad.left_stick.to_bytes() == before
    assert pad.battery_raw is None


def test_short_report_raises():
    pad = OuyaController()
    with pytest.raises(ValueError):
        pad.process_input_data(report07()[:-1])


def test_empty_report_raises():
    with pytest.raises(ValueError):
        OuyaController().process_input_data(b"")