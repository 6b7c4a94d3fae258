"""Common Switch controller state and helpers shared by emulated controllers."""

from __future__ import annotations

from typing import Optional

from padbridge.analog_stick import SwitchAnalogStick
from padbridge.switch_types import SwitchButtonData, SwitchPlayerNumber

CONTROLLERS_ROOT = "sdmc:/config/MissionControl/controllers"
DEFAULT_TRIGGER_THRESHOLD = 0.5

_P = SwitchPlayerNumber

# Indexed by the 4-bit LED pattern (flash and on nibbles or-ed together).
_LED_PLAYER_MAPPINGS = (
    _P.UNKNOWN,  # 0000
    _P.ONE,      # 0001
    _P.UNKNOWN,  # 0010
    _P.TWO,      # 0011
    _P.UNKNOWN,  # 0100
    _P.SIX,      # 0101
    _P.EIGHT,    # 0110
    _P.THREE,    # 0111
    _P.ONE,      # 1000
    _P.FIVE,     # 1001
    _P.SIX,      # 1010
    _P.SEVEN,    # 1011
    _P.TWO,      # 1100
    _P.SEVEN,    # 1101
    _P.THREE,    # 1110
    _P.FOUR,     # 1111
)


class UnknownPlayerError(ValueError):
    """The LED pattern does not correspond to any player number."""


def leds_mask_to_player_number(led_mask: int) -> SwitchPlayerNumber:
    """Map an indicator LED mask to the player number it shows."""
    if not 0 <= led_mask <= 0xFF:
        raise ValueError(f"LED mask out of range: {led_mask}")
    player = _LED_PLAYER_MAPPINGS[(led_mask & 0xF) | (led_mask >> 4)]
    if player is SwitchPlayerNumber.UNKNOWN:
        raise UnknownPlayerError(f"no player number for LED mask {led_mask:#04x}")
    return player


def controller_directory(address: bytes) -> str:
    """Directory holding per-controller data for a Bluetooth address."""
    address = bytes(address)
    if len(address) != 6:
        raise ValueError(f"Bluetooth address must be 6 bytes, got {len(address)}")
    return f"{CONTROLLERS_ROOT}/{address.hex()}"


def apply_button_combos(buttons: SwitchButtonData) -> None:
    """Turn MINUS+DPAD_DOWN into HOME and MINUS+DPAD_UP into CAPTURE, in place."""
    if buttons.minus and buttons.dpad_down:
        buttons.home = True
        buttons.minus = False
        buttons.dpad_down = False

    if buttons.minus and buttons.dpad_up:
        buttons.capture = True
        buttons.minus = False
        buttons.dpad_up = False


class ControllerState:
    """Emulated Pro Controller input state that third-party mappers fill in."""

    def __init__(self, trigger_threshold: float = DEFAULT_TRIGGER_THRESHOLD) -> None:
        self.trigger_threshold = trigger_threshold
        self.buttons = SwitchButtonData()
        self.left_stick = SwitchAnalogStick()
        self.left_stick.set_data(SwitchAnalogStick.CENTER, SwitchAnalogStick.CENTER)
        self.right_stick = SwitchAnalogStick()
        self.right_stick.set_data(SwitchAnalogStick.CENTER, SwitchAnalogStick.CENTER)
        # Last raw 0-255 battery reading reported by the device, if any.
        self.battery_raw: Optional[int] = None

    def map_hat(self, hat: int, north: int = 0) -> None:
        """Set the d-pad from an eight-way hat whose north value is `north`.

        Directions follow clockwise from north; any other value is released.
        """
        direction = hat - north
        buttons = self.buttons
        if not 0 <= direction <= 7:
            buttons.dpad_up = buttons.dpad_right = False
            buttons.dpad_down = buttons.dpad_left = False
            return
        buttons.dpad_up = direction in (0, 1, 7)
        buttons.dpad_right = direction in (1, 2, 3)
        buttons.dpad_down = direction in (3, 4, 5)
        buttons.dpad_left = direction in (5, 6, 7)

    def trigger_pressed(self, value: int, maximum: int) -> bool:
        """True if an analog trigger reading exceeds the configured threshold."""
        return value > self.trigger_threshold * maximum