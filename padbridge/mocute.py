"""Input mapping for Mocute controllers."""

from __future__ import annotations

import struct
from enum import Enum, IntEnum

from padbridge.analog_stick import invert_analog_stick_value, pack_analog_stick_values
from padbridge.switch_controller import ControllerState
from padbridge.switch_types import HardwareID

_TRIGGER_MAX = 0xFF

# left stick, right stick, buttons (2 bytes), left/right trigger
_REPORT_0X01 = struct.Struct("<8B")
# left stick, right stick, left/right trigger, buttons (2 bytes)
_REPORT_0X04 = struct.Struct("<8B")


class MocuteVariant(Enum):
    MOCUTE_050 = "050"
    MOCUTE_053 = "053"


class MocuteDPad(IntEnum):
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


def _unpack(layout: struct.Struct, report: bytes):
    try:
        return layout.unpack_from(report, 1)
    except struct.error as exc:
        raise ValueError(f"report {report[0]:#04x} is too short") from exc


class MocuteController(ControllerState):
    """Maps Mocute 050/053 HID reports onto emulated Switch controller state."""

    HARDWARE_IDS = (
        HardwareID(0xFFFF, 0x0000),  # Mocute 050
        HardwareID(0x04E8, 0x046E),  # Mocute 050
        HardwareID(0x0000, 0x0000),  # Mocute 053
    )

    def __init__(self, hardware_id: HardwareID) -> None:
        super().__init__()
        self.hardware_id = hardware_id
        if hardware_id.vid == 0x0000 and hardware_id.pid == 0x0000:
            self.variant = MocuteVariant.MOCUTE_053
        else:
            self.variant = MocuteVariant.MOCUTE_050

    def process_input_data(self, report: bytes) -> None:
        """Update the state from a raw HID input report, id byte first."""
        if not report:
            raise ValueError("empty report")
        report_id = report[0]
        if self.variant is MocuteVariant.MOCUTE_050:
            if report_id in (0x01, 0x04, 0x06):
                self._map_input_report_0x01(report)
        elif report_id == 0x04:
            self._map_input_report_0x04(report)

    def _map_input_report_0x01(self, report: bytes) -> None:
        lx, ly, rx, ry, b0, b1, left_trigger, right_trigger = _unpack(_REPORT_0X01, report)
        self._map_sticks(lx, ly, rx, ry)
        # Report 0x01 numbers its hat from 1; 0x04 and 0x06 from 0.
        self._map_buttons(b0, b1, north=1 if report[0] == 0x01 else 0)
        self._map_triggers(left_trigger, right_trigger)

    def _map_input_report_0x04(self, report: bytes) -> None:
        lx, ly, rx, ry, left_trigger, right_trigger, b0, b1 = _unpack(_REPORT_0X04, report)
        self._map_sticks(lx, ly, rx, ry)
        self._map_buttons(b0, b1, north=1)
        self._map_triggers(left_trigger, right_trigger)

    def _map_sticks(self, lx: int, ly: int, rx: int, ry: int) -> None:
        self.left_stick = pack_analog_stick_values(lx, invert_analog_stick_value(ly, 8))
        self.right_stick = pack_analog_stick_values(rx, invert_analog_stick_value(ry, 8))

    def _map_triggers(self, left_trigger: int, right_trigger: int) -> None:
        self.buttons.ZR = self.trigger_pressed(right_trigger, _TRIGGER_MAX)
        self.buttons.ZL = self.trigger_pressed(left_trigger, _TRIGGER_MAX)

    def _map_buttons(self, b0: int, b1: int, north: int) -> None:
        self.map_hat(b0 & 0x0F, north)

        buttons = self.buttons
        buttons.A = _bit(b0, 5)  # B
        buttons.B = _bit(b0, 4)  # A
        buttons.X = _bit(b0, 7)  # Y
        buttons.Y = _bit(b0, 6)  # X

        buttons.R = _bit(b1, 1)
        buttons.L = _bit(b1, 0)

        buttons.minus = _bit(b1, 2)
        buttons.plus = _bit(b1, 3)

        buttons.lstick_press = _bit(b1, 4)
        buttons.rstick_press = _bit(b1, 5)