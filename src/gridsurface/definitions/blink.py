"""Blink signalling through note-on messages.

Besides the lighting SysEx, the MK3 family starts and stops blinking with
plain note-on messages: channel 2 starts blinking a pad in the velocity's
palette color and channel 1 with velocity 0 stops it. Channels are mido's
zero-based numbers.
"""

from typing import Any, Protocol

import mido

START_BLINK_CHANNEL = 2
STOP_BLINK_CHANNEL = 1


class MidiSender(Protocol):
    """Anything that can send a mido message (port or output manager)."""

    def send(self, message: mido.Message) -> Any:
        """Send one MIDI message."""
        ...


def blink_message(note: int, blink_color: int, fast: bool = False) -> mido.Message:
    """
    Build the note-on that starts or stops blinking a pad.

    Args:
        note: Pad note number
        blink_color: Palette color to blink with, 0 to stop
        fast: Blink speed requested upstream; does not change the message

    Returns:
        note_on message on the start or stop channel
    """
    channel = STOP_BLINK_CHANNEL if blink_color == 0 else START_BLINK_CHANNEL
    return mido.Message("note_on", channel=channel, note=note, velocity=blink_color)


def send_blink_state(output: MidiSender, note: int, blink_color: int, fast: bool) -> None:
    """Send the blink start/stop note-on for a pad through ``output``."""
    output.send(blink_message(note, blink_color, fast))
