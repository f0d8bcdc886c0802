"""gridsurface: device definitions for grid MIDI control surfaces."""

__version__ = "0.1.0"

from .definitions import (
    ButtonID,
    ControllerDefinition,
    DefinitionRegistry,
    LightInfo,
    OperatingSystem,
    SurfaceMode,
    get_registry,
)

__all__ = [
    "ButtonID",
    "ControllerDefinition",
    "DefinitionRegistry",
    "LightInfo",
    "OperatingSystem",
    "SurfaceMode",
    "get_registry",
]
