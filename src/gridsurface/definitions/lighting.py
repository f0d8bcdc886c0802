"""
Palette lighting SysEx encoder.

The Launchpad MK3 family accepts one SysEx message that sets any number of
LEDs at once::

    F0 00 20 29 02 0C  03  00 3C 05  01 3D 0A 05  02 3E 05  F7
    └───── header ───┘  │  └static┘ └─flashing─┘ └pulsing┘  end
                        LED lighting command

Each LED record starts with a lighting type:

- **00 STATIC**: ``00 <note> <color>``, one palette entry
- **01 FLASHING**: ``01 <note> <color B> <color A>``, alternates between
  the blink color and the base color
- **02 PULSING**: ``02 <note> <color>``, breathes a single color

A LightInfo with ``blink_color <= 0`` is static. Otherwise ``is_fast``
selects flashing, and pulsing when false.

Messages are built as uppercase hex strings because that is the form the
control surface framework hands to its transport. ``to_sysex_messages``
converts them to mido messages for transports built on mido.

Values are not range checked here. Colors and notes must already be MIDI
data bytes (0-127); mido rejects anything else when the message is
converted.
"""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum

import mido
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

LIGHTING_COMMAND = 0x03
SYSEX_START = 0xF0
SYSEX_END = "F7"


class LightingMode(Enum):
    """LED lighting types."""

    STATIC = 0  # Static color from palette
    FLASHING = 1  # Flashing between two colors
    PULSING = 2  # Pulsing color


class LightInfo(BaseModel):
    """Desired light state of one pad."""

    model_config = ConfigDict(frozen=True)

    color: int
    blink_color: int = 0
    is_fast: bool = False

    @property
    def mode(self) -> LightingMode:
        """Lighting type selected by the blink settings."""
        if self.blink_color <= 0:
            return LightingMode.STATIC
        return LightingMode.FLASHING if self.is_fast else LightingMode.PULSING


def to_hex(value: int) -> str:
    """Format a byte as two uppercase hex digits."""
    return f"{value:02X}"


def format_header(header: Iterable[int]) -> str:
    """Format SysEx header bytes (without F0) as a hex string starting with F0."""
    return " ".join(to_hex(b) for b in (SYSEX_START, *header))


def encode_light(note: int, info: LightInfo) -> list[str]:
    """
    Encode one LED record.

    Args:
        note: Pad note number
        info: Desired light state

    Returns:
        Hex bytes of the record
    """
    mode = info.mode
    record = [to_hex(mode.value), to_hex(note)]

    if mode == LightingMode.FLASHING:
        record.extend((to_hex(info.blink_color), to_hex(info.color)))
    else:
        record.append(to_hex(info.color))

    return record


def build_lighting_update(
    header: str,
    request: Mapping[int, LightInfo],
    command: int = LIGHTING_COMMAND,
) -> list[str]:
    """
    Build the SysEx messages for a lighting update.

    Pads are written in ascending note order so the same request always
    produces the same bytes.

    Args:
        header: Hex header including F0 (e.g. "F0 00 20 29 02 0C")
        request: Pad note to light state
        command: Lighting command byte

    Returns:
        One hex SysEx string. An empty request gives header, command and F7.
    """
    parts = [header, to_hex(command)]
    for note in sorted(request):
        parts.extend(encode_light(note, request[note]))
    parts.append(SYSEX_END)

    logger.debug(f"Encoded lighting update for {len(request)} pads")
    return [" ".join(parts)]


def to_sysex_messages(messages: Iterable[str]) -> list[mido.Message]:
    """
    Convert hex SysEx strings into mido messages.

    mido frames SysEx itself, so F0 and F7 are stripped from the data.

    Raises:
        ValueError: If a data byte is outside 0-127
    """
    result = []
    for message in messages:
        data = [int(token, 16) for token in message.split()]
        result.append(mido.Message("sysex", data=data[1:-1]))
    return result
