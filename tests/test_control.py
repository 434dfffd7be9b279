"""Unit tests for addressed and broadcast display commands.

A FakeDisplay stream decodes the frames written to it, keeps power and
panel state, and answers like a real display would.
"""
import unittest

from mdc.client.control import BroadcastCommands, DisplayCommands, DisplayControl
from mdc.client.session import MDCSession
from mdc.commands import ACK_NACK, DISPLAY_BROADCAST, PANEL_ON_OFF, POWER_CONTROL
from mdc.errors import IncompleteInputError, InvalidValueError, NackError
from mdc.protocol.frame import Frame, decode
from mdc.protocol.status import PanelStatus, PowerStatus
from mdc.transport.base import Stream


class FakeDisplay(Stream):
    """Stream emulating one display behind an MDC connection."""

    def __init__(self, display_id=0, power_on=False, panel_on=False):
        self.display_id = display_id
        self.power_on = power_on
        self.panel_on = panel_on
        self.received = []
        self._outgoing = bytearray()

    def write_all(self, data):
        frame, _ = decode(bytearray(data))
        self.received.append(frame)

        if frame.command == POWER_CONTROL:
            if frame.data:
                self.power_on = frame.data[0] == 1
                values = []
            else:
                values = [0x00 if self.power_on else 0x01]
        elif frame.command == PANEL_ON_OFF:
            if frame.data:
                self.panel_on = frame.data[0] == 0
                values = []
            else:
                values = [0x01 if self.panel_on else 0x00]
        else:
            self._reply(b"N", frame.command, [])
            return

        if frame.display_id == self.display_id:
            self._reply(b"A", frame.command, values)

    def _reply(self, status, command, values):
        data = status + bytes([command, *values])
        self._outgoing.extend(Frame(ACK_NACK, self.display_id, data).to_bytes())

    def read_into(self, buffer):
        count = min(len(buffer), len(self._outgoing))
        buffer[:count] = self._outgoing[:count]
        del self._outgoing[:count]
        return count

    def close(self):
        pass


class ScriptedReply(Stream):
    """Stream answering every write with a fixed reply."""

    def __init__(self, reply):
        self.reply = reply
        self._outgoing = bytearray()

    def write_all(self, data):
        self._outgoing.extend(self.reply.to_bytes())

    def read_into(self, buffer):
        count = min(len(buffer), len(self._outgoing))
        buffer[:count] = self._outgoing[:count]
        del self._outgoing[:count]
        return count

    def close(self):
        pass


class TestDisplayCommands(unittest.TestCase):
    """Tests for commands addressed to a single display."""

    def setUp(self):
        self.device = FakeDisplay(display_id=0)
        self.session = MDCSession(self.device)
        self.display = self.session.display(0)

    def test_power_on_payload(self):
        self.display.set_power_on()
        self.assertEqual(self.device.received[-1], Frame(POWER_CONTROL, 0x00, b"\x01"))

    def test_power_off_payload(self):
        self.display.set_power_off()
        self.assertEqual(self.device.received[-1], Frame(POWER_CONTROL, 0x00, b"\x00"))

    def test_panel_on_payload(self):
        self.display.set_panel_on()
        self.assertEqual(self.device.received[-1], Frame(PANEL_ON_OFF, 0x00, b"\x00"))

    def test_panel_off_payload(self):
        self.display.set_panel_off()
        self.assertEqual(self.device.received[-1], Frame(PANEL_ON_OFF, 0x00, b"\x01"))

    def test_power_on_off_then_status(self):
        """Test status follows the last applied power command."""
        self.display.set_power_on()
        self.assertIs(self.display.get_power_status(), PowerStatus.ON)

        self.display.set_power_off()
        status = self.display.get_power_status()
        self.assertIs(status, PowerStatus.OFF)
        self.assertFalse(status.is_on)

    def test_panel_on_off_then_status(self):
        """Test status follows the last applied panel command."""
        self.display.set_panel_on()
        self.assertIs(self.display.get_panel_status(), PanelStatus.ON)

        self.display.set_panel_off()
        self.assertIs(self.display.get_panel_status(), PanelStatus.OFF)

    def test_status_query_is_empty_payload(self):
        self.display.get_power_status()
        self.display.get_panel_status()
        self.assertEqual(self.device.received[0], Frame(POWER_CONTROL, 0x00))
        self.assertEqual(self.device.received[1], Frame(PANEL_ON_OFF, 0x00))

    def test_status_reads_payload_offset_two(self):
        """Test the status byte is taken after the ACK marker and echoed command."""
        reply = Frame(ACK_NACK, 0x00, b"A\x11\x01")
        display = MDCSession(ScriptedReply(reply)).display(0)
        self.assertIs(display.get_power_status(), PowerStatus.OFF)

    def test_status_short_payload(self):
        reply = Frame(ACK_NACK, 0x00, b"A\x11")
        display = MDCSession(ScriptedReply(reply)).display(0)
        with self.assertRaises(IncompleteInputError):
            display.get_power_status()

    def test_status_invalid_value(self):
        reply = Frame(ACK_NACK, 0x00, b"A\xF9\x07")
        display = MDCSession(ScriptedReply(reply)).display(0)
        with self.assertRaises(InvalidValueError):
            display.get_panel_status()

    def test_nack_propagates(self):
        reply = Frame(ACK_NACK, 0x00, b"N\x11\x01")
        display = MDCSession(ScriptedReply(reply)).display(0)
        with self.assertRaises(NackError):
            display.set_power_on()


class TestBroadcastCommands(unittest.TestCase):
    """Tests for commands sent to every display."""

    def setUp(self):
        self.device = FakeDisplay(display_id=0)
        self.session = MDCSession(self.device)
        self.broadcast = self.session.all_displays()

    def test_payloads(self):
        self.broadcast.set_power_on()
        self.broadcast.set_power_off()
        self.broadcast.set_panel_on()
        self.broadcast.set_panel_off()

        self.assertEqual(self.device.received, [
            Frame(POWER_CONTROL, DISPLAY_BROADCAST, b"\x01"),
            Frame(POWER_CONTROL, DISPLAY_BROADCAST, b"\x00"),
            Frame(PANEL_ON_OFF, DISPLAY_BROADCAST, b"\x00"),
            Frame(PANEL_ON_OFF, DISPLAY_BROADCAST, b"\x01"),
        ])

    def test_wire_bytes(self):
        """Test a broadcast power on frame on the wire."""
        self.broadcast.set_power_on()
        self.assertEqual(
            self.device.received[0].to_bytes(),
            bytes([0xAA, 0x11, 0xFE, 0x01, 0x01, 0x11]),
        )

    def test_does_not_wait_for_reply(self):
        """Test broadcast commands return without reading."""
        self.broadcast.set_power_on()
        self.assertTrue(self.device.power_on)
        self.assertEqual(self.session.buffered, 0)

    def test_no_status_queries(self):
        """Test status queries are not part of the broadcast interface."""
        self.assertFalse(hasattr(BroadcastCommands, "get_power_status"))
        self.assertFalse(hasattr(BroadcastCommands, "get_panel_status"))
        self.assertFalse(hasattr(DisplayControl, "get_power_status"))


class TestDisplayControlInterface(unittest.TestCase):
    """Tests for the shared control interface."""

    def test_is_abstract(self):
        with self.assertRaises(TypeError):
            DisplayControl()

    def test_both_implement_interface(self):
        session = MDCSession(FakeDisplay())
        for target in (session.display(1), session.all_displays()):
            with self.subTest(target=type(target).__name__):
                self.assertIsInstance(target, DisplayControl)


if __name__ == '__main__':
    unittest.main()
