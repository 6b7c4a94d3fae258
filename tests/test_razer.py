import pytest

from padbridge.analog_stick import convert_analog_stick_12bit, invert_analog_stick_value
from padbridge.razer import RazerController, RazerDPad
from padbridge.switch_types import SwitchButtonData


def make_report(sticks=(0x80, 0x80, 0x80, 0x80), b0=RazerDPad.RELEASED, b1=0, b2=0, lt=0, rt=0):
    return bytes([0x01, *sticks, b0, b1, b2, lt, rt])


def test_idle_report_presses_nothing():
    pad = RazerController()
    pad.process_input_data(make_report())
    assert pad.buttons == SwitchButtonData()


@pytest.mark.parametrize(
    "dpad, expected",
    [
        (RazerDPad.N, {"dpad_up"}),
        (RazerDPad.NE, {"dpad_up", "dpad_right"}),
        (RazerDPad.SW, {"dpad_down", "dpad_left"}),
        (RazerDPad.RELEASED, set()),
    ],
)
def test_dpad(dpad, expected):
    pad = RazerController()
    pad.process_input_data(make_report(b0=dpad))
    pressed = {
        name
        for name in ("dpad_up", "dpad_down", "dpad_left", "dpad_right")
        if getattr(pad.buttons, name)
    }
    assert pressed == expected


def test_face_buttons_are_swapped():
    pad = RazerController()
    pad.process_input_data(make_report(b0=RazerDPad.RELEASED | 0x10))  # A
    assert pad.buttons.B and not pad.buttons.A
    pad.process_input_data(make_report(b0=RazerDPad.RELEASED | 0x80))  # Y
    assert pad.buttons.X and not pad.buttons.Y


def test_system_buttons():
    pad = RazerController()
    pad.process_input_data(make_report(b1=0b1011_1111, b2=0x01))
    b = pad.buttons
    assert b.L and b.R and b.capture and b.plus
    assert b.lstick_press and b.rstick_press and b.home and b.minus


def test_triggers_use_threshold():
    pad = RazerController()
    pad.process_input_data(make_report(lt=128, rt=127))
    assert pad.buttons.ZL
    assert not pad.buttons.ZR


def test_sticks_are_scaled_with_inverted_y():
    pad = RazerController()
    pad.process_input_data(make_report(sticks=(0x00, 0xFF, 0x40, 0x10)))
    assert pad.left_stick.x == convert_analog_stick_12bit(0x00)
    assert pad.left_stick.y == convert_analog_stick_12bit(invert_analog_stick_value(0xFF))
    assert pad.right_stick.x == convert_analog_stick_12bit(0x40)
    assert pad.right_stick.y == convert_analog_stick_12bit(invert_analog_stick_value(0x10))


def test_unknown_report_is_ignored():
    pad = RazerController()
    before = pad.right_stick.to_bytes()
    pad.process_input_data(bytes([0x02, 0xFF, 0xFF]))
    assert pad.buttons == SwitchButtonData()
    assert pad.right_stick.to_bytes() == before


def test_short_and_empty_reports_raise():
    pad = RazerController()
    with pytest.raises(ValueError):
        pad.process_input_data(b"\x01\x80\x80")
    with pytest.raises(ValueError):
        pad.process_input_data(b"")