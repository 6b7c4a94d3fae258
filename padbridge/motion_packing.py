"""Packing of accelerometer and gyroscope samples into Switch motion data."""

from __future__ import annotations

import math
import struct
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

MOTION_DATA_SIZE = 36

_INT16_MIN = -32768
_INT16_MAX = 32767

# Degrees to radians and nanoseconds to seconds
_QUAT_SCALE_FACTOR = math.pi / 180.0 / 1_000_000_000.0


def _f32(value: float) -> float:
    """Round a value to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


_BASE_GYRO_SENSITIVITY = _f32(936.0 / 13371)
_BASE_ACCEL_SENSITIVITY = _f32(4.0 / 16384)

_GYRO_SENSITIVITIES = (
    _f32(_BASE_GYRO_SENSITIVITY / 8),
    _f32(_BASE_GYRO_SENSITIVITY / 4),
    _f32(_BASE_GYRO_SENSITIVITY / 2),
    _BASE_GYRO_SENSITIVITY,
)
_ACCEL_SENSITIVITIES = (
    _BASE_ACCEL_SENSITIVITY,
    _f32(_BASE_ACCEL_SENSITIVITY / 2),
    _f32(_BASE_ACCEL_SENSITIVITY / 4),
    _f32(_BASE_ACCEL_SENSITIVITY * 2),
)


@dataclass(frozen=True)
class Vec3d:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class GyroSensitivity(IntEnum):
    DPS_250 = 0
    DPS_500 = 1
    DPS_1000 = 2
    DPS_2000 = 3


class AccelSensitivity(IntEnum):
    G8 = 0
    G4 = 1
    G2 = 2
    G16 = 3


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @property
    def raw(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)


def hamilton_product(q1: Quaternion, q2: Quaternion) -> Quaternion:
    return Quaternion(
        q1.w * q2.x + q1.x * q2.w + q1.y * q2.z - q1.z * q2.y,
        q1.w * q2.y + q1.y * q2.w + q1.z * q2.x - q1.x * q2.z,
        q1.w * q2.z + q1.z * q2.w + q1.x * q2.y - q1.y * q2.x,
        q1.w * q2.w - q1.x * q2.x - q1.y * q2.y - q1.z * q2.z,
    )


def quaternion_normalize(q: Quaternion) -> Quaternion:
    norm_inverse = 1.0 / math.sqrt(q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w)
    return Quaternion(q.x * norm_inverse, q.y * norm_inverse, q.z * norm_inverse, q.w * norm_inverse)


def _scale_component(value: float, sensitivity: float) -> int:
    scaled = _f32(_f32(value) / sensitivity)
    return int(min(max(scaled, float(_INT16_MIN)), float(_INT16_MAX)))


def _scale(vec: Vec3d, sensitivity: float) -> tuple[int, int, int]:
    return tuple(_scale_component(v, sensitivity) for v in (vec.x, vec.y, vec.z))


class SwitchMotionPacker(ABC):
    """Turns one accelerometer/gyroscope sample into 36 bytes of motion data."""

    def __init__(
        self,
        gyro_sensitivity: GyroSensitivity = GyroSensitivity.DPS_2000,
        accel_sensitivity: AccelSensitivity = AccelSensitivity.G8,
    ) -> None:
        self.gyro_sensitivity = GyroSensitivity(gyro_sensitivity)
        self.accel_sensitivity = AccelSensitivity(accel_sensitivity)

    def _scaled_accel(self, accel: Vec3d) -> tuple[int, int, int]:
        return _scale(accel, _ACCEL_SENSITIVITIES[int(self.accel_sensitivity)])

    @abstractmethod
    def pack_data(self, accel: Vec3d, gyro: Vec3d) -> bytes:
        """Return the packed motion data."""


class NullMotionPacker(SwitchMotionPacker):
    """Reports no motion at all."""

    def pack_data(self, accel: Vec3d, gyro: Vec3d) -> bytes:
        return bytes(MOTION_DATA_SIZE)


class StandardMotionPacker(SwitchMotionPacker):
    """Three identical raw accelerometer/gyroscope samples."""

    def pack_data(self, accel: Vec3d, gyro: Vec3d) -> bytes:
        accel_scaled = self._scaled_accel(accel)
        gyro_scaled = _scale(gyro, _GYRO_SENSITIVITIES[int(self.gyro_sensitivity)])
        return struct.pack("<18h", *(accel_scaled + gyro_scaled) * 3)


class QuaternionMotionPacker(SwitchMotionPacker):
    """Integrates gyroscope rates into an orientation sent in packing mode 2."""

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        super().__init__()
        self._clock = clock if clock is not None else time.monotonic_ns
        self._previous_tick = self._clock()
        self.rotation = Quaternion()

    def pack_data(self, accel: Vec3d, gyro: Vec3d) -> bytes:
        ax, ay, az = self._scaled_accel(accel)
        self.update_rotation_state(gyro)
        return self._pack_gyro_fixed_precision(ax, ay, az)

    def update_rotation_state(self, gyro: Vec3d) -> None:
        """Advance the orientation by the rates in gyro over the elapsed time."""
        current_tick = self._clock()
        dt = float(current_tick - self._previous_tick)

        angle_x = _f32(gyro.x) * _QUAT_SCALE_FACTOR * dt
        angle_y = _f32(gyro.y) * _QUAT_SCALE_FACTOR * dt
        angle_z = _f32(gyro.z) * _QUAT_SCALE_FACTOR * dt

        norm_squared = angle_x * angle_x + angle_y * angle_y + angle_z * angle_z
        vector_scale = norm_squared * norm_squared / 3840.0 - norm_squared / 48 + 0.5
        scalar_component = norm_squared * norm_squared / 384.0 - norm_squared / 8 + 1

        step = Quaternion(
            angle_x * vector_scale,
            angle_y * vector_scale,
            angle_z * vector_scale,
            scalar_component,
        )
        self.rotation = quaternion_normalize(hamilton_product(self.rotation, step))
        self._previous_tick = current_tick

    def _pack_gyro_fixed_precision(self, ax: int, ay: int, az: int) -> bytes:
        raw = self.rotation.raw
        max_index = 0
        for i in range(1, 4):
            if abs(raw[i]) > abs(raw[max_index]):
                max_index = i

        sign = -1 if raw[max_index] < 0 else 1
        c0, c1, c2 = (
            int(raw[(max_index + i + 1) & 3] * 0x40000000 * sign) for i in range(3)
        )

        last_0 = (c0 >> 10) & 0x1FFFFF
        last_1l = (c1 >> 10) & 0x7F
        last_1h = ((c1 >> 10) & 0x1FFF80) >> 7
        last_2l = (c2 >> 10) & 0x3
        last_2h = ((c2 >> 10) & 0x1FFFFC) >> 2

        timestamp_start = self._previous_tick // 1_000_000
        ts_l = timestamp_start & 0x1
        ts_h = (timestamp_start >> 1) & 0x3FF

        word0 = 2 | (max_index << 2) | (last_0 << 4) | (last_1l << 25)
        half0 = (last_1h & 0x3FFF) | (last_2l << 14)
        word1 = last_2h & 0x7FFFF
        half1 = 0
        word2 = ts_l << 31
        half2 = ts_h | (3 << 10)

        return struct.pack(
            "<3hIH3hIH3hIH",
            ax, ay, az, word0, half0,
            ax, ay, az, word1, half1,
            ax, ay, az, word2, half2,
        )