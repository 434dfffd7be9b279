"""TCP stream to an MDC display.

Displays listen for MDC on TCP port 1515.
"""
from __future__ import annotations

import logging
import socket
from typing import Optional

from .base import Stream, WritableBuffer

logger = logging.getLogger(__name__)

DEFAULT_TCP_PORT = 1515


class TcpStream(Stream):
    """Blocking TCP connection to a display.

    Example:
        >>> stream = TcpStream("10.0.151.55")
        >>> stream.write_all(b"\\xAA\\x11\\x00\\x00\\x11")
        >>> stream.close()
    """

    def __init__(self,
                 host: str,
                 port: int = DEFAULT_TCP_PORT,
                 timeout: Optional[float] = None):
        """Open a TCP connection.

        Args:
            host: Display host name or IP address
            port: TCP port (default 1515)
            timeout: Connect and read deadline in seconds, or None to block forever

        Raises:
            OSError: If the connection cannot be established.
        """
        sock = socket.create_connection((host, port), timeout=timeout)
        logger.info(f"Connected to {host}:{port}")
        self._init_socket(sock)

    @classmethod
    def from_socket(cls, sock: socket.socket) -> TcpStream:
        """Wrap an already-connected socket.

        Args:
            sock: Connected stream socket. Its current timeout is kept.
        """
        stream = cls.__new__(cls)
        stream._init_socket(sock)
        return stream

    def _init_socket(self, sock: socket.socket) -> None:
        self._socket: Optional[socket.socket] = sock

    @property
    def timeout(self) -> Optional[float]:
        """Current read deadline in seconds (None blocks forever)."""
        return self._socket.gettimeout() if self._socket else None

    def set_timeout(self, timeout: Optional[float]) -> None:
        """Change the read deadline.

        Args:
            timeout: Seconds, or None to block forever
        """
        if self._socket:
            self._socket.settimeout(timeout)

    def read_into(self, buffer: WritableBuffer) -> int:
        if self._socket is None:
            raise OSError("Stream is closed")
        return self._socket.recv_into(buffer)

    def write_all(self, data: bytes) -> None:
        if self._socket is None:
            raise OSError("Stream is closed")
        self._socket.sendall(data)

    def close(self) -> None:
        if self._socket is None:
            return

        try:
            self._socket.close()
        finally:
            self._socket = None
        logger.info("TCP stream closed")
