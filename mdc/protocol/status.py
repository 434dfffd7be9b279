"""Status readings decoded from acknowledgement payloads.

PowerStatus and PanelStatus map the same byte values to opposite meanings.
This mirrors how displays report them and is kept as is.
"""
from __future__ import annotations

from enum import Enum

from ..errors import InvalidValueError


class PowerStatus(Enum):
    """Power state of a display."""
    ON = "on"
    OFF = "off"

    @property
    def is_on(self) -> bool:
        """True if the display is powered on."""
        return self is PowerStatus.ON

    @classmethod
    def from_byte(cls, value: int) -> PowerStatus:
        """Parse the status byte of a power query reply.

        Args:
            value: 0x00 (on) or 0x01 (off)

        Raises:
            InvalidValueError: For any other value.
        """
        if value == 0x00:
            return cls.ON
        if value == 0x01:
            return cls.OFF
        raise InvalidValueError(value, kind="power status")


class PanelStatus(Enum):
    """Panel (backlight) state of a display."""
    ON = "on"
    OFF = "off"

    @property
    def is_on(self) -> bool:
        """True if the panel is lit."""
        return self is PanelStatus.ON

    @classmethod
    def from_byte(cls, value: int) -> PanelStatus:
        """Parse the status byte of a panel query reply.

        Args:
            value: 0x00 (off) or 0x01 (on)

        Raises:
            InvalidValueError: For any other value.
        """
        if value == 0x00:
            return cls.OFF
        if value == 0x01:
            return cls.ON
        raise InvalidValueError(value, kind="panel status")
