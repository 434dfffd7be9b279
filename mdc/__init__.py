"""MDC SDK - Control commercial display panels over TCP or serial."""

from .commands import DISPLAY_BROADCAST, ACK_NACK, POWER_CONTROL, PANEL_ON_OFF
from .errors import (
    MDCError,
    TransportIOError,
    StreamEndedError,
    FrameError,
    InvalidHeaderError,
    InvalidChecksumError,
    IncompleteInputError,
    ProtocolError,
    UnexpectedResponseError,
    NackError,
    InvalidValueError,
)
from .protocol import Frame, PowerStatus, PanelStatus
from .transport import Stream, TcpStream, SerialStream
from .client import MDCSession, DisplayControl, DisplayCommands, BroadcastCommands

__all__ = [
    "DISPLAY_BROADCAST",
    "ACK_NACK",
    "POWER_CONTROL",
    "PANEL_ON_OFF",
    "MDCError",
    "TransportIOError",
    "StreamEndedError",
    "FrameError",
    "InvalidHeaderError",
    "InvalidChecksumError",
    "IncompleteInputError",
    "ProtocolError",
    "UnexpectedResponseError",
    "NackError",
    "InvalidValueError",
    "Frame",
    "PowerStatus",
    "PanelStatus",
    "Stream",
    "TcpStream",
    "SerialStream",
    "MDCSession",
    "DisplayControl",
    "DisplayCommands",
    "BroadcastCommands",
]
