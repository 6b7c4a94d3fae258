"""Input mapping for PowerA (Moga) controllers."""

from __future__ import annotations

import struct
from enum import IntEnum

from padbridge.analog_stick import invert_analog_stick_value, pack_analog_stick_values
from padbridge.switch_controller import ControllerState
from padbridge.switch_types import HardwareID

_REPORT_0X03 = struct.Struct("<10B")


class PowerADPad(IntEnum):
    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7
    RELEASED = 0x0F


def _bit(value: int, bit: int) -> bool:
    return bool((value >> bit) & 1)


class PowerAController(ControllerState):
    """Maps PowerA HID reports onto emulated Switch controller state."""

    HARDWARE_IDS = (
        HardwareID(0x20D6, 0x89E5),  # Moga Hero
        HardwareID(0x20D6, 0x0DAD),  # Moga Pro
        HardwareID(0x20D6, 0x6271),  # Moga Pro 2
    )

    def process_input_data(self, report: bytes) -> None:
        """Update the state from a raw HID input report, id byte first."""
        if not report:
            raise ValueError("empty report")
        if report[0] == 0x03:
            self._map_input_report_0x03(report)

    def _map_input_report_0x03(self, report: bytes) -> None:
        try:
            lx, ly, rx, ry, b0, b1, l2, r2, battery, _ = _REPORT_0X03.unpack_from(report, 1)
        except struct.error as exc:
            raise ValueError("report 0x03 is too short") from exc

        self.battery_raw = battery

        self.left_stick = pack_analog_stick_values(lx, invert_analog_stick_value(ly, 8))
        self.right_stick = pack_analog_stick_values(rx, invert_analog_stick_value(ry, 8))

        self.map_hat(b0 & 0x0F, PowerADPad.N)

        buttons = self.buttons
        buttons.A = _bit(b0, 5)  # B
        buttons.B = _bit(b0, 4)  # A
        buttons.X = _bit(b0, 7)  # Y
        buttons.Y = _bit(b0, 6)  # X

        buttons.R = _bit(b1, 1)
        buttons.ZR = r2 > 0
        buttons.L = _bit(b1, 0)
        buttons.ZL = l2 > 0

        buttons.minus = _bit(b1, 2)
        buttons.plus = _bit(b1, 3)

        buttons.lstick_press = _bit(b1, 4)
        buttons.rstick_press = _bit(b1, 5)