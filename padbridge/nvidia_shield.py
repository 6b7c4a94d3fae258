"""Input mapping for the NVIDIA Shield controller."""

from __future__ import annotations

import struct
from enum import IntEnum

from padbridge.analog_stick import invert_analog_stick_value, pack_analog_stick_values
from padbridge.switch_controller import ControllerState
from padbridge.switch_types import HardwareID

_TRIGGER_MAX = 0xFFFF

# unk, dpad, buttons (2 bytes), left/right trigger, left stick, right stick, home/back
_REPORT_0X01 = struct.Struct("<4B2H4HB")


class NvidiaShieldDPad(IntEnum):
    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7
    RELEASED = 0x80


def _bit(value: int, bit: int) -> bool:
    return bool((value >> bit) & 1)


class NvidiaShieldController(ControllerState):
    """Maps NVIDIA Shield HID reports onto emulated Switch controller state."""

    HARDWARE_IDS = (HardwareID(0x0955, 0x7214),)  # Shield Controller (2017)

    def process_input_data(self, report: bytes) -> None:
        """Update the state from a raw HID input report, id byte first."""
        if not report:
            raise ValueError("empty report")
        if report[0] == 0x01:
            self._map_input_report_0x01(report)
        # Report 0x03 carries nothing that is mapped; other ids are ignored.

    def _map_input_report_0x01(self, report: bytes) -> None:
        try:
            (
                _unk, dpad, b0, b1,
                left_trigger, right_trigger,
                lx, ly, rx, ry,
                extra,
            ) = _REPORT_0X01.unpack_from(report, 1)
        except struct.error as exc:
            raise ValueError("report 0x01 is too short") from exc

        self.left_stick = pack_analog_stick_values(lx, invert_analog_stick_value(ly, 16), bits=16)
        self.right_stick = pack_analog_stick_values(rx, invert_analog_stick_value(ry, 16), bits=16)

        self.map_hat(dpad, NvidiaShieldDPad.N)

        buttons = self.buttons
        buttons.A = _bit(b0, 1)  # B
        buttons.B = _bit(b0, 0)  # A
        buttons.X = _bit(b0, 3)  # Y
        buttons.Y = _bit(b0, 2)  # X

        buttons.R = _bit(b0, 5)
        buttons.ZR = self.trigger_pressed(right_trigger, _TRIGGER_MAX)
        buttons.L = _bit(b0, 4)
        buttons.ZL = self.trigger_pressed(left_trigger, _TRIGGER_MAX)

        buttons.minus = _bit(extra, 1)
        buttons.plus = _bit(b1, 0)

        buttons.lstick_press = _bit(b0, 6)
        buttons.rstick_press = _bit(b0, 7)

        buttons.home = _bit(extra, 0)