"""Exceptions raised by the MDC SDK.

Every error derives from ``MDCError`` so callers can catch the whole family.
Errors that concern a specific reply keep it on ``.frame`` for diagnostics.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .protocol.frame import Frame


class MDCError(Exception):
    """Base class for all MDC errors."""
    pass


class TransportIOError(MDCError):
    """Raised when the underlying stream fails to read or write.

    The original exception is chained as ``__cause__``.
    """
    pass


class StreamEndedError(MDCError):
    """Raised when the stream is closed before a full frame was received."""
    pass


class FrameError(MDCError):
    """Base class for errors raised while decoding a frame."""
    pass


class InvalidHeaderError(FrameError):
    """Raised when a frame does not start with the 0xAA header."""
    pass


class IncompleteInputError(FrameError):
    """Raised when the buffer does not hold a whole frame yet."""
    pass


class InvalidChecksumError(FrameError):
    """Raised when the trailing checksum byte does not match the frame."""
    def __init__(self, expected: int, received: int):
        super().__init__(
            f"Invalid checksum: expected 0x{expected:02X}, received 0x{received:02X}"
        )
        self.expected = expected
        self.received = received


class ProtocolError(MDCError):
    """Base class for replies rejected at the protocol level."""
    def __init__(self, message: str, frame: Frame):
        super().__init__(f"{message}: {frame!r}")
        self.frame = frame


class UnexpectedResponseError(ProtocolError):
    """Raised when a reply does not carry the ACK/NACK command id."""
    def __init__(self, frame: Frame):
        super().__init__("Unexpected response frame", frame)


class NackError(ProtocolError):
    """Raised when the display answers with a negative acknowledgement."""
    def __init__(self, frame: Frame):
        super().__init__("Display responded with NACK", frame)


class InvalidValueError(MDCError, ValueError):
    """Raised when a status byte has no known meaning."""
    def __init__(self, value: Optional[int], kind: str = "status"):
        super().__init__(f"Invalid {kind} value received: {value!r}")
        self.value = value
