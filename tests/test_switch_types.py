import struct

import pytest

from padbridge.switch_types import (
    HardwareID,
    ProControllerColours,
    RGBColour,
    Switch6AxisCalibrationData,
    Switch6AxisHorizontalOffset,
    SwitchButtonData,
)


def test_empty_buttons_are_zero_bytes():
    assert SwitchButtonData().to_bytes() == b"\x00\x00\x00"


@pytest.mark.parametrize(
    "name, index, bit",
    [
        ("Y", 0, 0),
        ("A", 0, 3),
        ("ZR", 0, 7),
        ("minus", 1, 0),
        ("home", 1, 4),
        ("capture", 1, 5),
        ("dpad_down", 2, 0),
        ("dpad_left", 2, 3),
        ("ZL", 2, 7),
    ],
)
def test_single_button_bit_position(name, index, bit):
    data = SwitchButtonData(**{name: True}).to_bytes()
    expected = bytearray(3)
    expected[index] = 1 << bit
    assert data == bytes(expected)


def test_button_round_trip_all_bytes():
    for value in (0x00, 0xFF, 0x5A, 0xA5):
        raw = bytes((value, value & 0x3F, value))
        assert SwitchButtonData.from_bytes(raw).to_bytes() == raw


def test_from_bytes_reads_fields():
    buttons = SwitchButtonData.from_bytes(bytes((0x08, 0x10, 0x40)))
    assert buttons.A and buttons.home and buttons.L
    assert not buttons.B and not buttons.capture and not buttons.ZL


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        SwitchButtonData.from_bytes(b"\x00\x00")


def test_rgb_colour_bytes_and_range():
    assert RGBColour(1, 2, 3).to_bytes() == b"\x01\x02\x03"
    with pytest.raises(ValueError):
        RGBColour(256, 0, 0)


def test_pro_controller_colours_order():
    colours = ProControllerColours(
        RGBColour(0x32, 0x32, 0x32),
        RGBColour(0xE6, 0xE6, 0xE6),
        RGBColour(0x46, 0x46, 0x46),
        RGBColour(0x46, 0x46, 0x46),
    )
    assert colours.to_bytes() == bytes([0x32] * 3 + [0xE6] * 3 + [0x46] * 6)


def test_calibration_layout():
    calib = Switch6AxisCalibrationData(
        acc_bias=(1, -2, 3),
        acc_sensitivity=(16384, 16384, 16384),
        gyro_bias=(-4, 5, -6),
        gyro_sensitivity=(13371, 13371, 13371),
    )
    data = calib.to_bytes()
    assert len(data) == Switch6AxisCalibrationData.SIZE
    assert struct.unpack("<12h", data) == (
        1, -2, 3, 16384, 16384, 16384, -4, 5, -6, 13371, 13371, 13371
    )


def test_calibration_rejects_out_of_range():
    with pytest.raises(ValueError):
        Switch6AxisCalibrationData(acc_bias=(40000, 0, 0))


def test_horizontal_offset_round_trip():
    offset = Switch6AxisHorizontalOffset(-1, 2, -3)
    assert struct.unpack("<3h", offset.to_bytes()) == (-1, 2, -3)


def test_hardware_id_validation_and_equality():
    assert HardwareID(0x057E, 0x2009) == HardwareID(0x057E, 0x2009)
    with pytest.raises(ValueError):
        HardwareID(0x10000, 0)