"""Runtime controller definition (family profile + device overrides merged).

A ControllerDefinition is a value, not a subtype: every supported model is
described by one instance, and the encoders are generic functions
parametrized by it.
"""

from collections.abc import Mapping

import mido
from pydantic import BaseModel, ConfigDict, Field

from .blink import MidiSender, send_blink_state
from .buttons import ButtonID
from .discovery import DiscoveryPair, DiscoveryTemplates, OperatingSystem, build_discovery_pairs
from .identity import DeviceCapabilities, DeviceIdentity
from .lighting import LightInfo, build_lighting_update, format_header, to_sysex_messages
from .modes import ModeCommandTable, SurfaceMode


class ControllerDefinition(BaseModel):
    """
    Flattened controller definition (family + device merged).

    This is the runtime representation handed to the control surface
    framework. It is built once by the DefinitionRegistry and is read-only
    afterwards, so it can be shared between threads.
    """

    model_config = ConfigDict(frozen=True)

    family: str = Field(description="Device family identifier")
    identity: DeviceIdentity
    capabilities: DeviceCapabilities
    header: tuple[int, ...] = Field(description="SysEx header bytes (excluding F0)")
    detection_patterns: tuple[str, ...] = ()
    base_discovery: tuple[DiscoveryPair, ...] = ()
    windows_variants: tuple[str, ...] = ("",)
    discovery: DiscoveryTemplates = Field(default_factory=DiscoveryTemplates)
    buttons: tuple[tuple[ButtonID, int], ...] = Field(default=(), description="(button, control number) pairs")
    scene_buttons_cc: bool = True
    lighting_command: int = 0x03
    modes: ModeCommandTable

    # Identity shortcuts

    @property
    def display_name(self) -> str:
        """Human-readable device name."""
        return self.identity.display_name

    @property
    def vendor(self) -> str:
        """Manufacturer name."""
        return self.identity.vendor

    @property
    def is_pro(self) -> bool:
        return self.capabilities.is_pro

    @property
    def has_fader_support(self) -> bool:
        return self.capabilities.has_fader_support

    @property
    def sysex_header(self) -> str:
        """SysEx header as hex, starting with F0."""
        return format_header(self.header)

    def matches(self, port_name: str) -> bool:
        """Check if port name matches this device's detection patterns."""
        return any(pattern in port_name for pattern in self.detection_patterns)

    # Port discovery

    def discovery_pairs(self, os: OperatingSystem | None = None) -> list[DiscoveryPair]:
        """
        Get candidate port name pairs in priority order.

        Args:
            os: Operating system, defaults to the current one

        Returns:
            Family base pairs followed by this device's pairs for ``os``
        """
        if os is None:
            os = OperatingSystem.current()
        return build_discovery_pairs(os, self.base_discovery, self.discovery, self.windows_variants)

    # Buttons

    def button_ids(self) -> dict[ButtonID, int]:
        """
        Get the control number of every button this device has.

        Roles the device lacks are absent from the returned dict.
        """
        return dict(self.buttons)

    def button_for_control(self, number: int) -> ButtonID | None:
        """Get the button wired to a control number, if any."""
        for button, control in self.buttons:
            if control == number:
                return button
        return None

    def scene_buttons_use_cc(self) -> bool:
        """Whether scene buttons send control change (True) or notes (False)."""
        return self.scene_buttons_cc

    # Mode commands

    def standalone_mode_command(self) -> str:
        return self.modes.command(SurfaceMode.STANDALONE)

    def program_mode_command(self) -> str:
        return self.modes.command(SurfaceMode.PROGRAM)

    def fader_mode_command(self) -> str:
        return self.modes.command(SurfaceMode.FADER)

    def pan_mode_command(self) -> str:
        return self.modes.command(SurfaceMode.PAN)

    def mode_command(self, mode: SurfaceMode) -> str:
        """Get the command bytes for a mode, without header or terminator."""
        return self.modes.command(mode)

    def build_mode_message(self, mode: SurfaceMode) -> str:
        """Get the complete SysEx that switches the device into ``mode``."""
        return f"{self.sysex_header} {self.mode_command(mode)} F7"

    # Lighting

    def build_lighting_update(self, request: Mapping[int, LightInfo]) -> list[str]:
        """Encode pad light states into SysEx hex strings (always one for this family)."""
        return build_lighting_update(self.sysex_header, request, self.lighting_command)

    def build_lighting_messages(self, request: Mapping[int, LightInfo]) -> list[mido.Message]:
        """Encode pad light states into mido SysEx messages."""
        return to_sysex_messages(self.build_lighting_update(request))

    def send_blink_state(self, output: MidiSender, note: int, blink_color: int, fast: bool) -> None:
        """Start (blink_color > 0) or stop (blink_color == 0) blinking a pad."""
        send_blink_state(output, note, blink_color, fast)
