"""A file-backed emulation of the first 64 KiB of a controller's SPI flash."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Optional, Union

from padbridge.switch_types import (
    ProControllerColours,
    RGBColour,
    Switch6AxisCalibrationData,
    Switch6AxisHorizontalOffset,
)

SPI_FLASH_SIZE = 0x10000
SECTOR_SIZE = 0x1000
ERASED_BYTE = 0xFF

FACTORY_MOTION_CALIBRATION = Switch6AxisCalibrationData(
    acc_bias=(0, 0, 0),
    acc_sensitivity=(16384, 16384, 16384),
    gyro_bias=(0, 0, 0),
    gyro_sensitivity=(13371, 13371, 13371),
)

# Stick ranges that span the whole 12-bit range in x and y.
LSTICK_FACTORY_CALIBRATION = bytes((0xFF, 0xF7, 0x7F, 0x00, 0x08, 0x80, 0x00, 0x08, 0x80))
RSTICK_FACTORY_CALIBRATION = bytes((0x00, 0x08, 0x80, 0x00, 0x08, 0x80, 0xFF, 0xF7, 0x7F))

# 12.5% inner and 5% outer deadzone.
DEFAULT_STICK_PARAMETERS = bytes(
    (
        0x0F, 0x30, 0x61, 0x00, 0x31, 0xF3, 0xD4, 0x14, 0x54,
        0x41, 0x15, 0x54, 0xC7, 0x79, 0x9C, 0x33, 0x36, 0x63,
    )
)

FACTORY_COLOURS = ProControllerColours(
    body=RGBColour(0x32, 0x32, 0x32),
    buttons=RGBColour(0xE6, 0xE6, 0xE6),
    left_grip=RGBColour(0x46, 0x46, 0x46),
    right_grip=RGBColour(0x46, 0x46, 0x46),
)

HORIZONTAL_OFFSET = Switch6AxisHorizontalOffset(0, 0, 0)

DEFAULT_REGIONS = (
    (0x6020, FACTORY_MOTION_CALIBRATION.to_bytes()),
    (0x603D, LSTICK_FACTORY_CALIBRATION + RSTICK_FACTORY_CALIBRATION),
    (0x6050, FACTORY_COLOURS.to_bytes()),
    (0x6080, HORIZONTAL_OFFSET.to_bytes()),
    (0x6086, DEFAULT_STICK_PARAMETERS * 2),
)


class VirtualSpiFlash:
    """SPI flash contents stored in a file, seeded with factory defaults."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)
        self._file: Optional[BinaryIO] = None

    def open(self) -> "VirtualSpiFlash":
        """Create the file if missing, open it and fill unset default regions."""
        if self._file is not None:
            return self
        if not self.path.exists():
            self._create()
        self._file = open(self.path, "r+b")
        try:
            self._ensure_initialized()
        except BaseException:
            self.close()
            raise
        return self

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "VirtualSpiFlash":
        return self.open()

    def __exit__(self, *args) -> None:
        self.close()

    def read(self, offset: int, size: int) -> bytes:
        handle = self._checked(offset, size)
        handle.seek(offset)
        return handle.read(size)

    def write(self, offset: int, data: bytes) -> None:
        self._write(offset, data)
        self._handle.flush()

    def sector_erase(self, offset: int) -> None:
        """Fill the sector starting at offset with 0xff."""
        self.write(offset, bytes([ERASED_BYTE]) * SECTOR_SIZE)

    def is_region_initialized(self, offset: int, size: int) -> bool:
        """True if any byte in the region differs from the erased value."""
        return any(b != ERASED_BYTE for b in self.read(offset, size))

    @property
    def _handle(self) -> BinaryIO:
        if self._file is None:
            raise RuntimeError("virtual SPI flash is not open")
        return self._file

    def _checked(self, offset: int, size: int) -> BinaryIO:
        handle = self._handle
        file_size = os.fstat(handle.fileno()).st_size
        if offset < 0 or size < 0 or offset + size > file_size:
            raise ValueError(
                f"range {offset:#x}+{size:#x} outside flash of size {file_size:#x}"
            )
        return handle

    def _write(self, offset: int, data: bytes) -> None:
        handle = self._checked(offset, len(data))
        handle.seek(offset)
        handle.write(data)

    def _create(self) -> None:
        with open(self.path, "xb") as handle:
            handle.write(bytes([ERASED_BYTE]) * SPI_FLASH_SIZE)

    def _ensure_initialized(self) -> None:
        for offset, data in DEFAULT_REGIONS:
            if not self.is_region_initialized(offset, len(data)):
                self._write(offset, data)
        self._handle.flush()