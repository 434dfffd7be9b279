"""MDC session over a byte stream.

The session owns one stream and an accumulation buffer. It turns the raw
byte stream into whole frames, sends frames, and implements the
send-then-wait-for-acknowledgement exchange used by addressed commands.

A session is not thread-safe. Only one request may be in flight at a time.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..commands import ACK, ACK_NACK, DISPLAY_BROADCAST
from ..errors import (
    FrameError,
    IncompleteInputError,
    NackError,
    StreamEndedError,
    TransportIOError,
    UnexpectedResponseError,
)
from ..protocol.frame import Frame, decode
from ..transport.base import Stream
from ..transport.serial import DEFAULT_BAUDRATE, SerialStream
from ..transport.tcp import DEFAULT_TCP_PORT, TcpStream
from .control import BroadcastCommands, DisplayCommands

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 1024  # bytes


class MDCSession:
    """A session where frames can be sent to and received from displays.

    Example:
        >>> with MDCSession.from_tcp("10.0.151.55") as session:
        ...     session.display(0).set_power_on()
        ...     session.display(0).get_power_status()
        <PowerStatus.ON: 'on'>
    """

    def __init__(self, stream: Stream, chunk_size: int = READ_CHUNK_SIZE):
        """Start a session on an open stream.

        Args:
            stream: Open duplex byte stream. The session takes ownership.
            chunk_size: Maximum bytes to read per call to the stream
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = bytearray()

    @classmethod
    def from_tcp(cls,
                 host: str,
                 port: int = DEFAULT_TCP_PORT,
                 timeout: Optional[float] = None) -> MDCSession:
        """Open a TCP connection to a display and start a session on it.

        Args:
            host: Display host name or IP address
            port: TCP port (default 1515)
            timeout: Read deadline in seconds, or None to block forever
        """
        return cls(TcpStream(host, port=port, timeout=timeout))

    @classmethod
    def from_serial(cls,
                    port: str,
                    baudrate: int = DEFAULT_BAUDRATE,
                    timeout: Optional[float] = None) -> MDCSession:
        """Open a serial port and start a session on it.

        Args:
            port: Serial port path
            baudrate: Serial baud rate (default 9600)
            timeout: Read deadline in seconds, or None to block forever
        """
        return cls(SerialStream(port, baudrate=baudrate, timeout=timeout))

    @property
    def stream(self) -> Stream:
        """The underlying stream."""
        return self._stream

    @property
    def buffered(self) -> int:
        """Number of received bytes not yet parsed into a frame."""
        return len(self._buffer)

    def close(self) -> None:
        """Close the underlying stream and drop buffered bytes."""
        self._buffer.clear()
        self._stream.close()

    def __enter__(self) -> MDCSession:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # --- Command builders ---

    def display(self, display_id: int) -> DisplayCommands:
        """Send commands to a single display.

        Args:
            display_id: Display id (0-255, except the broadcast id)

        Raises:
            ValueError: For the broadcast id; use :meth:`all_displays` instead.
        """
        if display_id == DISPLAY_BROADCAST:
            raise ValueError(
                "Broadcast id cannot be addressed as a single display, use all_displays()"
            )
        return DisplayCommands(self, display_id)

    def all_displays(self) -> BroadcastCommands:
        """Send commands to every display reachable through this session."""
        return BroadcastCommands(self)

    # --- Low level frame interface ---

    def send(self, frame: Frame) -> None:
        """Send a frame.

        Args:
            frame: Frame to send

        Raises:
            TransportIOError: If the stream fails to write.
        """
        data = frame.to_bytes()
        logger.debug(f"Sending {frame!r}")
        try:
            self._stream.write_all(data)
        except OSError as e:
            logger.error(f"Send error: {e}")
            raise TransportIOError(f"Failed to send frame: {e}") from e

    def receive(self) -> Frame:
        """Receive the next frame.

        Reads from the stream until the buffer holds a whole frame. If the
        buffered bytes cannot be parsed, the buffer is discarded since the
        stream is out of sync.

        Returns:
            The next frame.

        Raises:
            InvalidHeaderError: The stream is out of sync.
            InvalidChecksumError: A corrupted frame was received.
            StreamEndedError: The stream closed before a whole frame arrived.
            TransportIOError: If the stream fails to read.
        """
        chunk = bytearray(self._chunk_size)
        while True:
            try:
                frame, _ = decode(self._buffer)
                logger.debug(f"Received {frame!r}")
                return frame
            except IncompleteInputError:
                pass
            except FrameError as e:
                logger.warning(f"Discarding {len(self._buffer)} buffered bytes: {e}")
                self._buffer.clear()
                raise

            try:
                count = self._stream.read_into(chunk)
            except OSError as e:
                logger.error(f"Receive error: {e}")
                raise TransportIOError(f"Failed to receive frame: {e}") from e

            if count == 0:
                raise StreamEndedError(
                    f"Stream ended with {len(self._buffer)} bytes of an incomplete frame"
                )

            logger.debug(f"Read {count} bytes")
            self._buffer.extend(chunk[:count])

    def send_and_await_ack(self, frame: Frame) -> Frame:
        """Send a frame and wait for the display to acknowledge it.

        Args:
            frame: Frame to send

        Returns:
            The ACK frame. Its payload is ``b"A"``, the echoed command id,
            then any values returned by the display.

        Raises:
            UnexpectedResponseError: The reply is not an ACK/NACK frame.
            NackError: The display rejected the command.
        """
        self.send(frame)
        response = self.receive()

        if response.command != ACK_NACK:
            logger.warning(f"Unexpected response to 0x{frame.command:02X}: {response!r}")
            raise UnexpectedResponseError(response)

        if not response.data or response.data[0] != ACK:
            logger.warning(f"NACK for 0x{frame.command:02X}: {response!r}")
            raise NackError(response)

        return response
