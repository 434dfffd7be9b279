"""Frame encoder and decoder for the MDC wire format.

Frame layout::

    +--------+---------+------------+--------+-----------------+----------+
    | Header | Command | Display ID | Length |     Payload     | Checksum |
    | 0xAA   | 1 byte  |   1 byte   | 1 byte | 0-255 bytes     |  1 byte  |
    +--------+---------+------------+--------+-----------------+----------+

- Display ID 0xFE addresses every display (broadcast)
- Checksum: low 8 bits of command + display id + length + sum(payload).
  The header is not part of the checksum.

Pure functions with no I/O.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..errors import IncompleteInputError, InvalidChecksumError, InvalidHeaderError

HEADER = 0xAA
HEADER_SIZE = 4  # header + command + display id + length
CHECKSUM_SIZE = 1
MAX_PAYLOAD_SIZE = 255


def checksum(command: int, display_id: int, data: bytes) -> int:
    """Compute the checksum byte of a frame.

    Args:
        command: Command id.
        display_id: Target display id.
        data: Payload bytes.

    Returns:
        Checksum value in the range 0-255.
    """
    return (command + display_id + len(data) + sum(data)) & 0xFF


@dataclass(frozen=True)
class Frame:
    """A single MDC frame.

    Carries commands to a display and replies from it.

    Attributes:
        command: Command id (see ``mdc.commands``)
        display_id: Display to address, or ``DISPLAY_BROADCAST``
        data: Command arguments or reply payload (at most 255 bytes)
    """
    command: int
    display_id: int
    data: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= self.command <= 0xFF:
            raise ValueError(f"Command id out of range: {self.command}")
        if not 0 <= self.display_id <= 0xFF:
            raise ValueError(f"Display id out of range: {self.display_id}")

        data = bytes(self.data)
        if len(data) > MAX_PAYLOAD_SIZE:
            raise ValueError(
                f"Payload too large: {len(data)} bytes (max {MAX_PAYLOAD_SIZE})"
            )
        object.__setattr__(self, "data", data)

    def __repr__(self) -> str:
        return (
            f"Frame(command=0x{self.command:02X}, "
            f"display_id=0x{self.display_id:02X}, "
            f"data={self.data.hex(' ') if self.data else '(empty)'})"
        )

    @property
    def size(self) -> int:
        """Number of bytes this frame occupies on the wire."""
        return HEADER_SIZE + len(self.data) + CHECKSUM_SIZE

    def checksum(self) -> int:
        """Compute this frame's checksum byte."""
        return checksum(self.command, self.display_id, self.data)

    def to_bytes(self) -> bytes:
        """Convert this frame into bytes ready to be sent."""
        return encode(self)

    @classmethod
    def from_bytes(cls, buffer: bytearray) -> Tuple[Frame, int]:
        """Parse a frame from the front of ``buffer``. See :func:`decode`."""
        return decode(buffer)


def encode(frame: Frame) -> bytes:
    """Encode a frame into its wire representation.

    Args:
        frame: Frame to encode.

    Returns:
        ``0xAA, command, display_id, length, payload..., checksum``
    """
    return (
        bytes([HEADER, frame.command, frame.display_id, len(frame.data)])
        + frame.data
        + bytes([frame.checksum()])
    )


def decode(buffer: bytearray) -> Tuple[Frame, int]:
    """Parse one frame from the front of a buffer.

    The buffer may hold more than one frame; only the first is consumed.
    On success the frame's bytes are removed from the front of ``buffer``.
    On any error the buffer is left untouched so the caller can decide
    whether to wait for more bytes or to discard it.

    Args:
        buffer: Accumulated input bytes. Mutated on success only.

    Returns:
        Tuple of the parsed frame and the number of bytes removed.

    Raises:
        IncompleteInputError: The buffer does not hold a whole frame yet.
        InvalidHeaderError: The buffer does not start with 0xAA.
        InvalidChecksumError: The frame is complete but corrupted.

    Example:
        >>> buf = bytearray(b"\\xAA\\x4A\\x00\\x01\\x00\\x4B\\xAA\\xFF")
        >>> decode(buf)
        (Frame(command=0x4A, display_id=0x00, data=00), 6)
        >>> buf
        bytearray(b'\\xaa\\xff')
    """
    if not buffer:
        raise IncompleteInputError("Empty input")

    if buffer[0] != HEADER:
        raise InvalidHeaderError(
            f"Invalid header 0x{buffer[0]:02X}: every frame should start with 0xAA"
        )

    if len(buffer) < HEADER_SIZE:
        raise IncompleteInputError(f"Incomplete header ({len(buffer)} bytes)")

    command = buffer[1]
    display_id = buffer[2]
    length = buffer[3]
    frame_size = HEADER_SIZE + length + CHECKSUM_SIZE

    if len(buffer) < frame_size:
        raise IncompleteInputError(
            f"Incomplete frame ({len(buffer)} of {frame_size} bytes)"
        )

    data = bytes(buffer[HEADER_SIZE:HEADER_SIZE + length])
    received = buffer[HEADER_SIZE + length]
    expected = checksum(command, display_id, data)
    if received != expected:
        raise InvalidChecksumError(expected, received)

    del buffer[:frame_size]
    return Frame(command=command, display_id=display_id, data=data), frame_size
