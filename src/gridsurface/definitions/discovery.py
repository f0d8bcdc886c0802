"""
MIDI port discovery pairs.

The transport layer auto-selects ports by trying candidate
(input name, output name) pairs in order and accepting the first pair
whose names each match exactly one open port. This module builds those
candidates per operating system.

Port naming by platform::

    Windows: MIDIIN2 (LPX MIDI)        first device
             MIDIIN2 (2- LPX MIDI)     second identical device
    macOS:   Launchpad X LPX MIDI Out  stable CoreMIDI name
    Linux:   Launchpad X MIDI 2        stable ALSA client name

Windows drivers prefix a counter when several identical devices are
plugged in, so the Windows entry is a template with a ``%s`` placeholder
that is expanded once per known prefix. macOS and Linux contribute one
literal pair each.
"""

import logging
import platform
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

PLACEHOLDER = "%s"


class OperatingSystem(str, Enum):
    """Operating systems with distinct MIDI port naming."""

    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"
    OTHER = "other"

    @classmethod
    def current(cls) -> "OperatingSystem":
        """Get the operating system this process runs on."""
        return {
            "windows": cls.WINDOWS,
            "darwin": cls.MAC,
            "linux": cls.LINUX,
        }.get(platform.system().lower(), cls.OTHER)


class DiscoveryPair(BaseModel):
    """Candidate input/output port names for one device instance."""

    model_config = ConfigDict(frozen=True)

    input_pattern: str = Field(description="Input port name (may hold one %s placeholder)")
    output_pattern: str = Field(description="Output port name (may hold one %s placeholder)")

    def substitute(self, variant: str) -> "DiscoveryPair":
        """Fill the placeholder in both names with a naming variant."""
        return DiscoveryPair(
            input_pattern=self.input_pattern.replace(PLACEHOLDER, variant, 1),
            output_pattern=self.output_pattern.replace(PLACEHOLDER, variant, 1),
        )


class DiscoveryTemplates(BaseModel):
    """Device-specific port names per operating system."""

    model_config = ConfigDict(frozen=True)

    windows: DiscoveryPair | None = None
    mac: DiscoveryPair | None = None
    linux: DiscoveryPair | None = None


def build_discovery_pairs(
    os: OperatingSystem,
    base: Sequence[DiscoveryPair],
    templates: DiscoveryTemplates,
    windows_variants: Sequence[str],
) -> list[DiscoveryPair]:
    """
    Build the ordered candidate list for one operating system.

    Args:
        os: Operating system to build for
        base: Generic pairs shared by the whole family, always first
        templates: Device-specific names
        windows_variants: Values substituted into the Windows template, in order

    Returns:
        New list; base pairs followed by the device pairs for ``os``.
        Unsupported systems get the base pairs only.
    """
    pairs = list(base)

    if os == OperatingSystem.WINDOWS and templates.windows is not None:
        pairs.extend(templates.windows.substitute(v) for v in windows_variants)
    elif os == OperatingSystem.MAC and templates.mac is not None:
        pairs.append(templates.mac)
    elif os == OperatingSystem.LINUX and templates.linux is not None:
        pairs.append(templates.linux)

    return pairs


def select_ports(
    pairs: Sequence[DiscoveryPair],
    input_names: Sequence[str],
    output_names: Sequence[str],
) -> DiscoveryPair | None:
    """
    Pick the first pair whose names each match exactly one open port.

    Args:
        pairs: Candidates in priority order
        input_names: Names of the open input ports
        output_names: Names of the open output ports

    Returns:
        The accepted pair, or None if no candidate is unambiguous
    """
    for pair in pairs:
        if input_names.count(pair.input_pattern) != 1:
            continue
        if output_names.count(pair.output_pattern) != 1:
            continue

        logger.debug(f"Selected ports {pair.input_pattern!r} / {pair.output_pattern!r}")
        return pair

    logger.debug(f"No discovery pair matched among {len(pairs)} candidates")
    return None
