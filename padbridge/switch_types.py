"""Enumerations and fixed-layout records of the Switch controller protocol."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Tuple

BATTERY_MAX = 8

_INT16_MIN = -32768
_INT16_MAX = 32767


class SwitchPlayerNumber(IntEnum):
    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    UNKNOWN = 0xF


class HidCommand(IntEnum):
    PAIRING_OUT = 0x01
    GET_DEVICE_INFO = 0x02
    SET_DATA_FORMAT = 0x03
    LR_BUTTON_DETECTION = 0x04
    PAGE = 0x05
    RESET = 0x06
    CLEAR_PAIRING_INFO = 0x07
    SHIPMENT = 0x08
    SERIAL_FLASH_READ = 0x10
    SERIAL_FLASH_WRITE = 0x11
    SERIAL_FLASH_SECTOR_ERASE = 0x12
    MCU_RESET = 0x20
    MCU_WRITE = 0x21
    MCU_RESUME = 0x22
    MCU_POLLING_ENABLE = 0x24
    MCU_POLLING_DISABLE = 0x25
    ATTACHMENT_WRITE = 0x28
    ATTACHMENT_READ = 0x29
    ATTACHMENT_ENABLE = 0x2A
    SET_INDICATOR_LED = 0x30
    GET_INDICATOR_LED = 0x31
    SET_NOTIFICATION_LED = 0x38
    SENSOR_SLEEP = 0x40
    SENSOR_CONFIG = 0x41
    SENSOR_WRITE = 0x42
    SENSOR_READ = 0x43
    MOTOR_ENABLE = 0x48
    GET_BATTERY_VOLTAGE = 0x50
    WRITE_CHARGE_SETTING = 0x51
    READ_CHARGE_SETTING = 0x52


class McuCommand(IntEnum):
    INVALID = 0x00
    STATE_REPORT = 0x01
    IR_DATA = 0x03
    BUSY_INITIALIZING = 0x0B
    IR_STATUS = 0x13
    IR_REGISTERS = 0x1B
    CONFIGURE_MCU = 0x21
    CONFIGURE_IR = 0x23
    NFC_STATE = 0x2A
    NFC_READ_DATA = 0x3A
    EMPTY_AWAITING_CMD = 0xFF


class McuSubCommand(IntEnum):
    SET_MCU_MODE = 0x00
    GET_MCU_MODE = 0x01
    READ_DEVICE_MODE = 0x02
    WRITE_DEVICE_REGISTERS = 0x04


class McuMode(IntEnum):
    SUSPENDED = 0
    STANDBY = 1
    RINGCON = 3
    NFC = 4
    IR = 5
    BUSY = 6


class SensorSleepType(IntEnum):
    INACTIVE = 0x0
    ACTIVE = 0x1
    ACTIVE_DSCALE_MODE1 = 0x2
    ACTIVE_DSCALE_MODE2 = 0x3
    ACTIVE_DSCALE_MODE3 = 0x4
    ACTIVE_DSCALE_MODE4 = 0x5


class SensorType(IntEnum):
    LSM6DS3H = 0x1
    ICM20600 = 0x3
    LSM6DS3TRC = 0x4


@dataclass(frozen=True)
class HardwareID:
    """USB/Bluetooth vendor and product id pair."""

    vid: int
    pid: int

    def __post_init__(self) -> None:
        for name, value in (("vid", self.vid), ("pid", self.pid)):
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} out of range: {value:#x}")


SWITCH_HARDWARE_IDS: Tuple[HardwareID, ...] = (
    HardwareID(0x057E, 0x2006),  # Joy-Con (L)
    HardwareID(0x057E, 0x2007),  # Joy-Con (R) / NES Online controller
    HardwareID(0x057E, 0x2009),  # Pro Controller
    HardwareID(0x057E, 0x2017),  # SNES Online controller
    HardwareID(0x057E, 0x2019),  # N64 Online controller
    HardwareID(0x057E, 0x201A),  # Genesis/Mega Drive Online controller
)


@dataclass(frozen=True)
class RGBColour:
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for value in (self.r, self.g, self.b):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"colour component out of range: {value}")

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))


@dataclass(frozen=True)
class ProControllerColours:
    body: RGBColour = field(default_factory=RGBColour)
    buttons: RGBColour = field(default_factory=RGBColour)
    left_grip: RGBColour = field(default_factory=RGBColour)
    right_grip: RGBColour = field(default_factory=RGBColour)

    def to_bytes(self) -> bytes:
        return b"".join(
            c.to_bytes() for c in (self.body, self.buttons, self.left_grip, self.right_grip)
        )


def _check_int16_triple(name: str, values: Tuple[int, int, int]) -> None:
    if len(values) != 3:
        raise ValueError(f"{name} must have three components")
    for value in values:
        if not _INT16_MIN <= value <= _INT16_MAX:
            raise ValueError(f"{name} component out of int16 range: {value}")


@dataclass(frozen=True)
class Switch6AxisCalibrationData:
    """Accelerometer (x, y, z) and gyroscope (roll, pitch, yaw) calibration."""

    acc_bias: Tuple[int, int, int] = (0, 0, 0)
    acc_sensitivity: Tuple[int, int, int] = (0, 0, 0)
    gyro_bias: Tuple[int, int, int] = (0, 0, 0)
    gyro_sensitivity: Tuple[int, int, int] = (0, 0, 0)

    SIZE: ClassVar[int] = 24

    def __post_init__(self) -> None:
        _check_int16_triple("acc_bias", self.acc_bias)
        _check_int16_triple("acc_sensitivity", self.acc_sensitivity)
        _check_int16_triple("gyro_bias", self.gyro_bias)
        _check_int16_triple("gyro_sensitivity", self.gyro_sensitivity)

    def to_bytes(self) -> bytes:
        return struct.pack(
            "<12h",
            *self.acc_bias,
            *self.acc_sensitivity,
            *self.gyro_bias,
            *self.gyro_sensitivity,
        )


@dataclass(frozen=True)
class Switch6AxisHorizontalOffset:
    x: int = 0
    y: int = 0
    z: int = 0

    SIZE: ClassVar[int] = 6

    def __post_init__(self) -> None:
        _check_int16_triple("offset", (self.x, self.y, self.z))

    def to_bytes(self) -> bytes:
        return struct.pack("<3h", self.x, self.y, self.z)


# (field, byte index, bit index) of every button in the three-byte record.
_BUTTON_BITS = (
    ("Y", 0, 0),
    ("X", 0, 1),
    ("B", 0, 2),
    ("A", 0, 3),
    ("right_sr", 0, 4),
    ("right_sl", 0, 5),
    ("R", 0, 6),
    ("ZR", 0, 7),
    ("minus", 1, 0),
    ("plus", 1, 1),
    ("rstick_press", 1, 2),
    ("lstick_press", 1, 3),
    ("home", 1, 4),
    ("capture", 1, 5),
    ("dpad_down", 2, 0),
    ("dpad_up", 2, 1),
    ("dpad_right", 2, 2),
    ("dpad_left", 2, 3),
    ("left_sr", 2, 4),
    ("left_sl", 2, 5),
    ("L", 2, 6),
    ("ZL", 2, 7),
)


@dataclass
class SwitchButtonData:
    """Button state as carried in bytes 3 to 5 of a Switch input report."""

    Y: bool = False
    X: bool = False
    B: bool = False
    A: bool = False
    right_sr: bool = False
    right_sl: bool = False
    R: bool = False
    ZR: bool = False
    minus: bool = False
    plus: bool = False
    rstick_press: bool = False
    lstick_press: bool = False
    home: bool = False
    capture: bool = False
    dpad_down: bool = False
    dpad_up: bool = False
    dpad_right: bool = False
    dpad_left: bool = False
    left_sr: bool = False
    left_sl: bool = False
    L: bool = False
    ZL: bool = False

    SIZE: ClassVar[int] = 3

    def to_bytes(self) -> bytes:
        data = bytearray(self.SIZE)
        for name, index, bit in _BUTTON_BITS:
            if getattr(self, name):
                data[index] |= 1 << bit
        return bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SwitchButtonData":
        if len(data) != cls.SIZE:
            raise ValueError(f"button data must be {cls.SIZE} bytes, got {len(data)}")
        return cls(
            **{name: bool((data[index] >> bit) & 1) for name, index, bit in _BUTTON_BITS}
        )