"""Byte streams carrying MDC frames."""

from .base import Stream
from .tcp import TcpStream, DEFAULT_TCP_PORT
from .serial import SerialStream, DEFAULT_BAUDRATE

__all__ = ["Stream", "TcpStream", "SerialStream", "DEFAULT_TCP_PORT", "DEFAULT_BAUDRATE"]
