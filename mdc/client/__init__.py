"""Client layer: MDC session and display commands."""

from .control import DisplayControl, DisplayCommands, BroadcastCommands
from .session import MDCSession, READ_CHUNK_SIZE

__all__ = [
    "MDCSession",
    "READ_CHUNK_SIZE",
    "DisplayControl",
    "DisplayCommands",
    "BroadcastCommands",
]
