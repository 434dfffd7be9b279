#!/usr/bin/env python3
"""
Power a display on, wait, then power it off.

Usage: power_control.py <host> [display_id]
"""

import sys
import time
import logging
from pathlib import Path

# Add SDK to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mdc import MDCSession, MDCError

# Configure logging
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

    try:
        with MDCSession.from_tcp(host, timeout=5.0) as session:
            display = session.display(display_id)

            display.set_power_on()
            print("Powered on")

            time.sleep(10)

            display.set_power_off()
            print("Powered off")

            print(f"Power status: {display.get_power_status().value}")
    except (MDCError, OSError) as e:
        print(f"Failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
