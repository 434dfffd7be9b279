"""Protocol layer: frame encoding/decoding and status values."""

from .frame import Frame, checksum, encode, decode, HEADER, MAX_PAYLOAD_SIZE
from .status import PowerStatus, PanelStatus

__all__ = [
    "Frame",
    "checksum",
    "encode",
    "decode",
    "HEADER",
    "MAX_PAYLOAD_SIZE",
    "PowerStatus",
    "PanelStatus",
]
