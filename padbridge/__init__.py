"""Map third-party gamepad reports to Switch Pro Controller input state and motion data."""

__version__ = "0.1.0"