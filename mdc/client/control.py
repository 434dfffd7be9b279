"""High level display commands.

Two implementations of the same control interface:

- ``DisplayCommands`` addresses one display and waits for its ACK.
  It can also query the display's status.
- ``BroadcastCommands`` addresses every display and does not wait, since
  each display would answer. It has no status queries.

Payload conventions differ between commands: panel on is ``[0]`` while
power on is ``[1]``. Both are what the displays expect.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..commands import DISPLAY_BROADCAST, PANEL_ON_OFF, POWER_CONTROL
from ..errors import IncompleteInputError
from ..protocol.frame import Frame
from ..protocol.status import PanelStatus, PowerStatus

if TYPE_CHECKING:
    from .session import MDCSession

PANEL_ON = b"\x00"
PANEL_OFF = b"\x01"
POWER_ON = b"\x01"
POWER_OFF = b"\x00"

# Offset of the value in an ACK payload: b"A", echoed command, value
STATUS_VALUE_OFFSET = 2


class DisplayControl(ABC):
    """Commands every display target supports."""

    @abstractmethod
    def set_panel_on(self) -> None:
        """Turn the panel on."""
        pass

    @abstractmethod
    def set_panel_off(self) -> None:
        """Turn the panel off and blank the screen."""
        pass

    @abstractmethod
    def set_power_on(self) -> None:
        """Power the display on."""
        pass

    @abstractmethod
    def set_power_off(self) -> None:
        """Power the display off."""
        pass


class DisplayCommands(DisplayControl):
    """Send commands to, and query, a single display."""

    def __init__(self, session: MDCSession, display_id: int):
        self._session = session
        self._display_id = display_id

    @property
    def display_id(self) -> int:
        return self._display_id

    def _command(self, command: int, data: bytes = b"") -> Frame:
        return self._session.send_and_await_ack(Frame(command, self._display_id, data))

    def set_panel_on(self) -> None:
        self._command(PANEL_ON_OFF, PANEL_ON)

    def set_panel_off(self) -> None:
        self._command(PANEL_ON_OFF, PANEL_OFF)

    def set_power_on(self) -> None:
        self._command(POWER_CONTROL, POWER_ON)

    def set_power_off(self) -> None:
        self._command(POWER_CONTROL, POWER_OFF)

    def get_power_status(self) -> PowerStatus:
        """Query the display's power state.

        Raises:
            IncompleteInputError: The ACK carries no status value.
            InvalidValueError: The status value is unknown.
        """
        return PowerStatus.from_byte(self._query(POWER_CONTROL))

    def get_panel_status(self) -> PanelStatus:
        """Query the display's panel state.

        Raises:
            IncompleteInputError: The ACK carries no status value.
            InvalidValueError: The status value is unknown.
        """
        return PanelStatus.from_byte(self._query(PANEL_ON_OFF))

    def _query(self, command: int) -> int:
        """Send an empty-payload query and return the status byte of the ACK."""
        response = self._command(command)
        if len(response.data) <= STATUS_VALUE_OFFSET:
            raise IncompleteInputError(
                f"ACK payload too short for a status value: {response!r}"
            )
        return response.data[STATUS_VALUE_OFFSET]


class BroadcastCommands(DisplayControl):
    """Send commands to every display without waiting for replies."""

    def __init__(self, session: MDCSession):
        self._session = session

    @property
    def display_id(self) -> int:
        return DISPLAY_BROADCAST

    def _command(self, command: int, data: bytes) -> None:
        self._session.send(Frame(command, DISPLAY_BROADCAST, data))

    def set_panel_on(self) -> None:
        self._command(PANEL_ON_OFF, PANEL_ON)

    def set_panel_off(self) -> None:
        self._command(PANEL_ON_OFF, PANEL_OFF)

    def set_power_on(self) -> None:
        self._command(POWER_CONTROL, POWER_ON)

    def set_power_off(self) -> None:
        self._command(POWER_CONTROL, POWER_OFF)
