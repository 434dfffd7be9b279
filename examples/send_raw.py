#!/usr/bin/env python3
"""
Send a raw MDC frame and print the reply.

Usage: send_raw.py <host> <display_id> <command> [payload bytes...]

All numbers accept 0x prefixes, e.g. ``send_raw.py 10.0.0.5 0 0xF9 0``.
No reply is awaited for the broadcast display id (0xFE).
"""

import sys
import logging
from pathlib import Path

# Add SDK to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mdc import DISPLAY_BROADCAST, Frame, MDCSession

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
)


def main():
    if len(sys.argv) < 4:
        print(__doc__)
        return 1

    host = sys.argv[1]
    display_id = int(sys.argv[2], 0)
    command = int(sys.argv[3], 0)
    payload = bytes(int(arg, 0) for arg in sys.argv[4:])

    with MDCSession.from_tcp(host, timeout=5.0) as session:
        session.send(Frame(command, display_id, payload))

        if display_id != DISPLAY_BROADCAST:
            response = session.receive()
            print(f"Response: {response!r}")

    print("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
