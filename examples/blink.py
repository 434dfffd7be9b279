#!/usr/bin/env python3
"""
Toggle a display's panel on and off every 5 seconds until interrupted.

Usage: blink.py <host> [display_id]
"""

import sys
import time
import logging
from pathlib import Path

# Add SDK to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mdc import MDCSession

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        return 1

    host = sys.argv[1]
    display_id = int(sys.argv[2]) if len(sys.argv) > 2 else 0

    session = MDCSession.from_tcp(host)
    try:
        display = session.display(display_id)
        while True:
            display.set_panel_on()
            print("ON")
            time.sleep(5)

            display.set_panel_off()
            print("OFF")
            time.sleep(5)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        session.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
