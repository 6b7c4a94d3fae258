"""Input mapping for the OUYA controller."""

from __future__ import annotations

import struct

from padbridge.analog_stick import invert_analog_stick_value, pack_analog_stick_values
from padbridge.switch_controller import ControllerState
from padbridge.switch_types import HardwareID

_TRIGGER_MAX = 0xFFFF

_REPORT_0X03 = struct.Struct("<B")
_REPORT_0X07 = struct.Struct("<6H2B")


def _unpack(layout: struct.Struct, report: bytes):
    try:
        return layout.unpack_from(report, 1)
    except struct.error as exc:
        raise ValueError(f"report {report[0]:#04x} is too short") from exc


def _bit(value: int, bit: int) -> bool:
    return bool((value >> bit) & 1)


class OuyaController(ControllerState):
    """Maps OUYA HID reports onto emulated Switch controller state."""

    HARDWARE_IDS = (HardwareID(0x2836, 0x0001),)

    def process_input_data(self, report: bytes) -> None:
        """Update the state from a raw HID input report, id byte first."""
        if not report:
            raise ValueError("empty report")
        report_id = report[0]
        if report_id == 0x03:
            self._map_input_report_0x03(report)
        elif report_id == 0x07:
            self._map_input_report_0x07(report)

    def _map_input_report_0x03(self, report: bytes) -> None:
        (self.battery_raw,) = _unpack(_REPORT_0X03, report)

    def _map_input_report_0x07(self, report: bytes) -> None:
        lx, ly, rx, ry, left_trigger, right_trigger, b0, b1 = _unpack(_REPORT_0X07, report)

        self.left_stick = pack_analog_stick_values(lx, invert_analog_stick_value(ly, 16), bits=16)
        self.right_stick = pack_analog_stick_values(rx, invert_analog_stick_value(ry, 16), bits=16)

        buttons = self.buttons
        buttons.dpad_up = _bit(b1, 0)
        buttons.dpad_down = _bit(b1, 1)
        buttons.dpad_left = _bit(b1, 2)
        buttons.dpad_right = _bit(b1, 3)

        buttons.A = _bit(b0, 3)  # A
        buttons.B = _bit(b0, 0)  # O
        buttons.X = _bit(b0, 2)  # Y
        buttons.Y = _bit(b0, 1)  # U

        buttons.R = _bit(b0, 5)
        buttons.ZR = self.trigger_pressed(right_trigger, _TRIGGER_MAX)
        buttons.L = _bit(b0, 4)
        buttons.ZL = self.trigger_pressed(left_trigger, _TRIGGER_MAX)

        buttons.minus = False
        buttons.plus = False

        buttons.lstick_press = _bit(b0, 6)
        buttons.rstick_press = _bit(b0, 7)

        buttons.home = _bit(b1, 7)