"""Abstract base class for the byte stream under an MDC session.

The Stream interface is the only thing the session needs from a transport:
a blocking read into a buffer and a blocking write of a whole byte string.
Implementations can be a TCP socket, a serial line or a test double.

Key principles:
- Blocking calls only (no threads, no callbacks)
- Read deadlines belong to the stream, not to the session
- A read returning 0 bytes means the peer closed the stream
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

WritableBuffer = Union[bytearray, memoryview]


class Stream(ABC):
    """Abstract duplex byte stream.

    Streams are responsible for:
    1. Moving raw bytes in both directions
    2. Enforcing a read deadline, if one is configured
    3. Releasing the underlying resource on close

    Streams should NOT interpret bytes. Framing is done by the session.
    """

    @abstractmethod
    def read_into(self, buffer: WritableBuffer) -> int:
        """Read available bytes into ``buffer``.

        Blocks until at least one byte is available, the stream ends, or
        the stream's read deadline expires.

        Args:
            buffer: Writable buffer to fill (at most ``len(buffer)`` bytes)

        Returns:
            Number of bytes read. 0 means the peer closed the stream.

        Raises:
            OSError: On I/O failure or deadline expiry.
        """
        pass

    @abstractmethod
    def write_all(self, data: bytes) -> None:
        """Write every byte of ``data``.

        Args:
            data: Bytes to send

        Raises:
            OSError: On I/O failure.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the stream.

        Should be safe to call multiple times.
        """
        pass

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
