"""Input mapping for Mad Catz controllers."""

from __future__ import annotations

import struct
from enum import IntEnum

from padbridge.analog_stick import (
    UINT12_MAX,
    SwitchAnalogStick,
    invert_analog_stick_value,
    pack_analog_stick_values,
)
from padbridge.switch_controller import ControllerState
from padbridge.switch_types import HardwareID

_TRIGGER_MAX = 0xFF


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


_MEDIA_MODE_STICK_SCALE = _f32(float(UINT12_MAX) / 39)

# buttons (2 bytes), dpad, left stick, right stick, left/right trigger
_REPORT_0X01 = struct.Struct("<9B")
# media buttons
_REPORT_0X02 = struct.Struct("<B")
# buttons (2 bytes), dpad, left stick, right stick, left/right trigger
_REPORT_0X81 = struct.Struct("<9B")
# buttons, dpad bitmask
_REPORT_0X82 = struct.Struct("<2B")
# buttons, left stick
_REPORT_0X83 = struct.Struct("<Bbb")


class MadCatzDPad(IntEnum):
    RELEASED = 0
    N = 1
    NE = 2
    E = 3
    SE = 4
    S = 5
    SW = 6
    W = 7
    NW = 8


def _bit(value: int, bit: int) -> bool:
    return bool((value >> bit) & 1)


def _unpack(layout: struct.Struct, report: bytes):
    try:
        return layout.unpack_from(report, 1)
    except struct.error as exc:
        raise ValueError(f"report {report[0]:#04x} is too short") from exc


def _media_axis(value: int) -> int:
    scaled = _MEDIA_MODE_STICK_SCALE * value + 0x7FF
    return int(min(max(scaled, float(SwitchAnalogStick.MIN)), float(SwitchAnalogStick.MAX)))


class MadCatzController(ControllerState):
    """Maps Mad Catz HID reports onto emulated Switch controller state."""

    HARDWARE_IDS = (
        HardwareID(0x0738, 0x5266),  # C.T.R.L.R
        HardwareID(0x0738, 0x5250),  # C.T.R.L.R for Samsung
        HardwareID(0x0738, 0x5269),  # L.Y.N.X. 3
    )

    def process_input_data(self, report: bytes) -> None:
        """Update the state from a raw HID input report, id byte first."""
        if not report:
            raise ValueError("empty report")
        handler = {
            0x01: self._map_input_report_0x01,
            0x02: self._map_input_report_0x02,
            0x81: self._map_input_report_0x81,
            0x82: self._map_input_report_0x82,
            0x83: self._map_input_report_0x83,
        }.get(report[0])
        if handler is not None:
            handler(report)

    def _map_sticks(self, lx: int, ly: int, rx: int, ry: int) -> None:
        self.left_stick = pack_analog_stick_values(lx, invert_analog_stick_value(ly, 8))
        self.right_stick = pack_analog_stick_values(rx, invert_analog_stick_value(ry, 8))

    def _map_triggers(self, left_trigger: int, right_trigger: int) -> None:
        self.buttons.ZR = self.trigger_pressed(right_trigger, _TRIGGER_MAX)
        self.buttons.ZL = self.trigger_pressed(left_trigger, _TRIGGER_MAX)

    def _map_input_report_0x01(self, report: bytes) -> None:
        b0, b1, dpad, lx, ly, rx, ry, left_trigger, right_trigger = _unpack(_REPORT_0X01, report)

        self._map_sticks(lx, ly, rx, ry)
        self.map_hat(dpad, MadCatzDPad.N)

        buttons = self.buttons
        buttons.A = _bit(b0, 2)  # B
        buttons.B = _bit(b0, 1)  # A
        buttons.X = _bit(b0, 3)  # Y
        buttons.Y = _bit(b0, 0)  # X

        buttons.R = _bit(b0, 5)
        buttons.L = _bit(b0, 4)
        self._map_triggers(left_trigger, right_trigger)

        buttons.minus = _bit(b1, 0)
        buttons.plus = _bit(b1, 1)

        buttons.lstick_press = _bit(b1, 2)
        buttons.rstick_press = _bit(b1, 3)

    def _map_input_report_0x02(self, report: bytes) -> None:
        (media,) = _unpack(_REPORT_0X02, report)
        self.buttons.home = _bit(media, 4)  # play

    def _map_input_report_0x81(self, report: bytes) -> None:
        b0, b1, dpad, lx, ly, rx, ry, left_trigger, right_trigger = _unpack(_REPORT_0X81, report)

        self._map_sticks(lx, ly, rx, ry)
        self.map_hat(dpad, MadCatzDPad.N)

        buttons = self.buttons
        buttons.A = _bit(b0, 1)  # B
        buttons.B = _bit(b0, 0)  # A
        buttons.X = _bit(b0, 3)  # Y
        buttons.Y = _bit(b0, 2)  # X

        buttons.R = _bit(b0, 5)
        buttons.L = _bit(b0, 4)
        self._map_triggers(left_trigger, right_trigger)

        buttons.minus = _bit(b0, 6)
        buttons.plus = _bit(b0, 7)

        buttons.lstick_press = _bit(b1, 0)
        buttons.rstick_press = _bit(b1, 1)

    def _map_input_report_0x82(self, report: bytes) -> None:
        b0, dpad = _unpack(_REPORT_0X82, report)

        buttons = self.buttons
        buttons.dpad_up = bool(dpad & 0x01)
        buttons.dpad_down = bool(dpad & 0x02)
        buttons.dpad_left = bool(dpad & 0x04)
        buttons.dpad_right = bool(dpad & 0x08)

        buttons.A = _bit(b0, 5)  # B
        buttons.X = _bit(b0, 4)  # Y
        buttons.Y = _bit(b0, 6)  # X

        buttons.R = _bit(b0, 2)
        buttons.L = _bit(b0, 3)

        buttons.minus = _bit(b0, 7)

    def _map_input_report_0x83(self, report: bytes) -> None:
        b0, x, y = _unpack(_REPORT_0X83, report)

        self.left_stick.set_data(_media_axis(-x), _media_axis(y))

        buttons = self.buttons
        buttons.ZR = _bit(b0, 0)
        buttons.ZL = _bit(b0, 1)
        buttons.rstick_press = _bit(b0, 2)
        buttons.lstick_press = _bit(b0, 3)