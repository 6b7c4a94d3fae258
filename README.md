# padbridge

padbridge turns input reports from third-party Bluetooth gamepads into the
button and stick state of a Switch Pro Controller. It also packs
accelerometer and gyroscope samples into Switch motion data, and keeps a
file-backed stand-in for a controller's SPI flash.

It is a library and has no command-line entry point.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

- `padbridge.analog_stick`
  - `SwitchAnalogStick` holds two 12-bit axes packed into three bytes. The
    `x` and `y` properties read and write each axis. `set_data`,
    `invert_x`, `invert_y`, `to_bytes` and `from_bytes` are also provided.
  - `convert_analog_stick_12bit` rescales an 8-bit or 16-bit axis, signed or
    unsigned, to 12 bits. `pack_analog_stick_values` rescales both axes and
    packs them into a stick. `invert_analog_stick_value` complements an axis
    value of a given width.
- `padbridge.motion_packing`
  - Each packer's `pack_data(accel, gyro)` returns 36 bytes of motion data
    from two `Vec3d` samples.
  - `NullMotionPacker` returns all zeros.
  - `StandardMotionPacker` scales the samples by the selected
    `GyroSensitivity` and `AccelSensitivity` and repeats them three times.
  - `QuaternionMotionPacker` integrates gyroscope rates into a `Quaternion`
    orientation and packs it in packing mode 2. It takes an optional clock
    that returns nanoseconds.
  - `hamilton_product` and `quaternion_normalize` are exposed for use
    elsewhere.
- `padbridge.switch_types`
  - Protocol enums: `SwitchPlayerNumber`, `HidCommand`, `McuCommand`,
    `McuSubCommand`, `McuMode`, `SensorSleepType` and `SensorType`.
  - Fixed-layout records with `to_bytes`: `HardwareID`, `RGBColour`,
    `ProControllerColours`, `Switch6AxisCalibrationData` and
    `Switch6AxisHorizontalOffset`.
  - `SwitchButtonData` holds the three-byte button record and has
    `to_bytes` and `from_bytes`.
- `padbridge.spi_flash`
  - `VirtualSpiFlash` keeps a 64 KiB file filled with `0xff`. On `open`, or
    when used as a context manager, it creates the file if needed. It then
    writes factory motion calibration, stick calibration, colours,
    horizontal offset and stick parameters into any of those regions that
    are still erased.
  - It also provides `read`, `write`, `sector_erase` and
    `is_region_initialized`.
- `padbridge.switch_controller`
  - `ControllerState` holds the emulated button and stick state and a
    trigger threshold (0.5 by default). `map_hat` sets the d-pad from an
    eight-way hat, and `trigger_pressed` tests an analog trigger against
    the threshold.
  - `leds_mask_to_player_number` reads the player number from an LED mask.
    It raises `UnknownPlayerError` for patterns that show no player.
  - `controller_directory` gives the per-controller directory path for a
    6-byte Bluetooth address.
  - `apply_button_combos` turns MINUS+DOWN into HOME and MINUS+UP into
    CAPTURE.
- Controller mappings: each one is a `ControllerState` with a
  `process_input_data(report)` method and a `HARDWARE_IDS` tuple.
  - `padbridge.ouya.OuyaController`
  - `padbridge.powera.PowerAController`
  - `padbridge.nvidia_shield.NvidiaShieldController`
  - `padbridge.razer.RazerController`
  - `padbridge.mad_catz.MadCatzController`
  - `padbridge.mocute.MocuteController`, which is constructed with a
    `HardwareID` that selects the 050 or 053 variant.

  Each report passed to `process_input_data` starts with its report id.
  Reports with unknown ids are ignored. Empty reports, and reports too short
  for their id, raise `ValueError`.

## Example

```python
from padbridge.analog_stick import pack_analog_stick_values
from padbridge.razer import RazerController
from padbridge.switch_controller import apply_button_combos

stick = pack_analog_stick_values(0x80, 0x80, bits=8, signed=False)
print(stick.x, stick.y)

controller = RazerController()
controller.process_input_data(bytes([0x01, 0x80, 0x80, 0x80, 0x80, 0x00, 0x00, 0x00, 0x00, 0x00]))
apply_button_combos(controller.buttons)
print(controller.buttons.to_bytes(), controller.left_stick.to_bytes())
```

## What it does not do

- padbridge does not talk to Bluetooth devices or to a console. You supply
  the report bytes, and you send on the resulting state yourself.
- It does not decode Switch rumble (vibration) packets.
- It has no command-line tool and no service.