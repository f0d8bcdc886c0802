"""Data-driven controller definitions and their encoders."""

from .blink import blink_message, send_blink_state
from .buttons import SCENE_BUTTONS, ButtonID
from .definition import ControllerDefinition
from .discovery import DiscoveryPair, OperatingSystem, select_ports
from .identity import DeviceCapabilities, DeviceIdentity
from .lighting import LightInfo, LightingMode, build_lighting_update, to_sysex_messages
from .modes import SurfaceMode
from .registry import DefinitionRegistry, get_registry

__all__ = [
    "ButtonID",
    "ControllerDefinition",
    "DefinitionRegistry",
    "DeviceCapabilities",
    "DeviceIdentity",
    "DiscoveryPair",
    "LightInfo",
    "LightingMode",
    "OperatingSystem",
    "SCENE_BUTTONS",
    "SurfaceMode",
    "blink_message",
    "build_lighting_update",
    "get_registry",
    "select_ports",
    "send_blink_state",
    "to_sysex_messages",
]
