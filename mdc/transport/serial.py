"""RS-232C serial stream to an MDC display.

Displays chained on a serial line use 9600 baud, 8 data bits, no parity,
1 stop bit. Serial lines have no end-of-stream: a read that returns no
bytes can only mean the configured timeout expired.
"""
from __future__ import annotations

import logging
from typing import Optional

import serial

from .base import Stream, WritableBuffer

logger = logging.getLogger(__name__)

DEFAULT_BAUDRATE = 9600


class SerialStream(Stream):
    """Blocking serial connection to a display (or a daisy chain of displays).

    Example:
        >>> stream = SerialStream("/dev/ttyUSB0")
        >>> stream.write_all(b"\\xAA\\x11\\x00\\x00\\x11")
        >>> stream.close()
    """

    def __init__(self,
                 port: str,
                 baudrate: int = DEFAULT_BAUDRATE,
                 timeout: Optional[float] = None):
        """Open the serial port.

        Args:
            port: Serial port path (e.g., '/dev/ttyUSB0', 'COM3')
            baudrate: Serial baud rate (default 9600)
            timeout: Read deadline in seconds, or None to block forever

        Raises:
            serial.SerialException: If the port cannot be opened.
        """
        try:
            ser = serial.Serial(
                port=port,
                baudrate=baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=timeout,
            )
        except serial.SerialException as e:
            logger.error(f"Failed to open {port}: {e}")
            raise

        # Drop anything left over from a previous session
        ser.reset_input_buffer()
        ser.reset_output_buffer()

        logger.info(f"Connected to {port} @ {baudrate} baud")
        self._serial: Optional[serial.Serial] = ser

    @classmethod
    def from_serial(cls, ser: serial.Serial) -> SerialStream:
        """Wrap an already-open serial port.

        Args:
            ser: Open ``serial.Serial`` instance. Its settings are kept.
        """
        stream = cls.__new__(cls)
        stream._serial = ser
        return stream

    @property
    def timeout(self) -> Optional[float]:
        """Current read deadline in seconds (None blocks forever)."""
        return self._serial.timeout if self._serial else None

    def set_timeout(self, timeout: Optional[float]) -> None:
        """Change the read deadline.

        Args:
            timeout: Seconds, or None to block forever
        """
        if self._serial:
            self._serial.timeout = timeout

    def read_into(self, buffer: WritableBuffer) -> int:
        if self._serial is None:
            raise serial.SerialException("Stream is closed")

        # Block for the first byte only, then take whatever else is pending
        first = self._serial.read(1)
        if not first:
            raise TimeoutError(
                f"No data received from {self._serial.port} within {self._serial.timeout}s"
            )

        pending = min(self._serial.in_waiting, len(buffer) - 1)
        data = first + (self._serial.read(pending) if pending > 0 else b"")
        buffer[:len(data)] = data
        return len(data)

    def write_all(self, data: bytes) -> None:
        if self._serial is None:
            raise serial.SerialException("Stream is closed")
        self._serial.write(data)
        self._serial.flush()

    def close(self) -> None:
        if self._serial is None:
            return

        port = self._serial.port
        try:
            self._serial.close()
        finally:
            self._serial = None
        logger.info(f"Serial stream on {port} closed")
