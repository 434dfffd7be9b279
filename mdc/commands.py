"""MDC command identifiers.

Only the commands used by the control layer are listed here. Any other
command id can still be sent as a raw ``Frame`` through ``MDCSession``.
"""

# Display id addressing every display on the line
DISPLAY_BROADCAST = 0xFE

# Reply to an addressed command (payload starts with b"A" or b"N")
ACK_NACK = 0xFF

# Display power state
POWER_CONTROL = 0x11

# Panel (backlight) on/off
PANEL_ON_OFF = 0xF9

# First payload byte of an ACK_NACK reply
ACK = ord("A")
NACK = ord("N")
