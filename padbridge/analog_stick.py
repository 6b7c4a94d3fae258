"""Packed 12-bit analog stick values as used in Switch input reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

UINT12_MAX = 0xFFF


def _pack_xy(x: int, y: int) -> bytearray:
    return bytearray(
        (
            x & 0xFF,
            ((x >> 8) | ((y & 0xFF) << 4)) & 0xFF,
            (y >> 4) & 0xFF,
        )
    )


@dataclass
class SwitchAnalogStick:
    """Two 12-bit axis values packed little-endian into three bytes."""

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0xFFF
    CENTER: ClassVar[int] = 0x800
    SIZE: ClassVar[int] = 3

    xy: bytearray = field(default_factory=lambda: bytearray(3))

    def __post_init__(self) -> None:
        self.xy = bytearray(self.xy)
        if len(self.xy) != self.SIZE:
            raise ValueError(f"analog stick data must be {self.SIZE} bytes, got {len(self.xy)}")

    def set_data(self, x: int, y: int) -> None:
        """Store both axes at once."""
        self.xy = _pack_xy(x, y)

    @property
    def x(self) -> int:
        return self.xy[0] | ((self.xy[1] & 0x0F) << 8)

    @x.setter
    def x(self, value: int) -> None:
        self.xy[0] = value & 0xFF
        self.xy[1] = ((self.xy[1] & 0xF0) | (value >> 8)) & 0xFF

    @property
    def y(self) -> int:
        return (self.xy[1] >> 4) | (self.xy[2] << 4)

    @y.setter
    def y(self, value: int) -> None:
        self.xy[1] = ((self.xy[1] & 0x0F) | ((value & 0xFF) << 4)) & 0xFF
        self.xy[2] = (value >> 4) & 0xFF

    def invert_x(self) -> None:
        self.xy[0] ^= 0xFF
        self.xy[1] ^= 0x0F

    def invert_y(self) -> None:
        self.xy[1] ^= 0xF0
        self.xy[2] ^= 0xFF

    def to_bytes(self) -> bytes:
        return bytes(self.xy)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SwitchAnalogStick":
        return cls(bytearray(data))


def invert_analog_stick_value(value: int, bits: int = 8) -> int:
    """Bitwise complement of an unsigned axis value of the given width."""
    return ~value & ((1 << bits) - 1)


def convert_analog_stick_12bit(value: int, bits: int = 8, signed: bool = False) -> int:
    """Scale an axis value of the given width and signedness to 12 bits."""
    unsigned_max = (1 << bits) - 1
    scale = float(UINT12_MAX) / unsigned_max
    if signed:
        shift = (unsigned_max >> 1) + 1
        return int(scale * (value + shift)) & 0xFFFF
    return int(scale * value) & 0xFFFF


def pack_analog_stick_values(x: int, y: int, bits: int = 8, signed: bool = False) -> SwitchAnalogStick:
    """Convert both axes to 12 bits and pack them into a stick."""
    stick = SwitchAnalogStick()
    stick.set_data(
        convert_analog_stick_12bit(x, bits, signed),
        convert_analog_stick_12bit(y, bits, signed),
    )
    return stick