"""Input mapping for the Razer Serval controller."""

from __future__ import annotations

import struct
from enum import IntEnum

from padbridge.analog_stick import invert_analog_stick_value, pack_analog_stick_values
from padbridge.switch_controller import ControllerState
from padbridge.switch_types import HardwareID

_TRIGGER_MAX = 0xFF

# left stick, right stick, buttons (3 bytes), left/right trigger
_REPORT_0X01 = struct.Struct("<9B")


class RazerDPad(IntEnum):
    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7
    RELEASED = 8


def _bit(value: int, bit: int) -> bool:
    return bool((value >> bit) & 1)


class RazerController(ControllerState):
    """Maps Razer HID reports onto emulated Switch controller state."""

    HARDWARE_IDS = (HardwareID(0x1532, 0x0900),)  # Razer Serval

    def process_input_data(self, report: bytes) -> None:
        """Update the state from a raw HID input report, id byte first."""
        if not report:
            raise ValueError("empty report")
        if report[0] == 0x01:
            self._map_input_report_0x01(report)

    def _map_input_report_0x01(self, report: bytes) -> None:
        try:
            lx, ly, rx, ry, b0, b1, b2, left_trigger, right_trigger = _REPORT_0X01.unpack_from(
                report, 1
            )
        except struct.error as exc:
            raise ValueError("report 0x01 is too short") from exc

        self.left_stick = pack_analog_stick_values(lx, invert_analog_stick_value(ly, 8))
        self.right_stick = pack_analog_stick_values(rx, invert_analog_stick_value(ry, 8))

        self.map_hat(b0 & 0x0F, RazerDPad.N)

        buttons = self.buttons
        buttons.A = _bit(b0, 5)  # B
        buttons.B = _bit(b0, 4)  # A
        buttons.X = _bit(b0, 7)  # Y
        buttons.Y = _bit(b0, 6)  # X

        buttons.R = _bit(b1, 1)
        buttons.ZR = self.trigger_pressed(right_trigger, _TRIGGER_MAX)
        buttons.L = _bit(b1, 0)
        buttons.ZL = self.trigger_pressed(left_trigger, _TRIGGER_MAX)

        buttons.minus = _bit(b2, 0)
        buttons.plus = _bit(b1, 3)

        buttons.lstick_press = _bit(b1, 4)
        buttons.rstick_press = _bit(b1, 5)

        buttons.capture = _bit(b1, 2)
        buttons.home = _bit(b1, 7)