"""Pydantic models for the definitions file schema.

This module defines the structure of definitions.json. A family carries
the base profile shared by its devices (protocol, base button map, mode
commands, discovery defaults); each device carries its identity, SysEx
header, port names and any overrides of the family profile.
"""

from pathlib import Path
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .buttons import ButtonID
from .discovery import DiscoveryPair, DiscoveryTemplates
from .identity import DeviceCapabilities
from .modes import ModeCommandOverrides, ModeCommandTable


class DeviceOverrides(BaseModel):
    """Device-specific overrides for family defaults."""

    buttons: dict[ButtonID, int] = Field(
        default_factory=dict, description="Buttons added to or replacing the family map"
    )
    capabilities: DeviceCapabilities | None = None
    scene_buttons_use_cc: bool | None = None
    modes: ModeCommandOverrides = Field(default_factory=ModeCommandOverrides)


class Device(BaseModel):
    """Individual device configuration within a family."""

    model: str = Field(min_length=1, description="Device model name (e.g., 'Launchpad X')")
    unique_id: UUID = Field(description="Stable extension identifier")
    num_input_ports: int = Field(default=1, ge=0)
    num_output_ports: int = Field(default=1, ge=0)
    sysex_header: list[int] = Field(
        min_length=1, description="SysEx header bytes for this device (excluding F0)"
    )
    detection_patterns: list[str] = Field(
        default_factory=list, description="Patterns for detecting this device in port names"
    )
    discovery: DiscoveryTemplates = Field(
        default_factory=DiscoveryTemplates, description="Port names per operating system"
    )
    overrides: DeviceOverrides = Field(
        default_factory=DeviceOverrides, description="Device-specific overrides"
    )

    @field_validator("sysex_header")
    @classmethod
    def validate_sysex_header(cls, v: list[int]) -> list[int]:
        """Validate SysEx header bytes are in valid range."""
        for byte in v:
            if not 0 <= byte <= 127:
                raise ValueError(f"SysEx byte {byte} out of range (0-127)")
        return v


class DeviceFamily(BaseModel):
    """Device family configuration (e.g., Launchpad MK3 family)."""

    family: str = Field(min_length=1, description="Family identifier (e.g., 'launchpad_mk3')")
    manufacturer: str = Field(min_length=1, description="Manufacturer name (e.g., 'Novation')")
    detection_patterns: list[str] = Field(
        default_factory=list, description="Common patterns for detecting any device in this family"
    )
    capabilities: DeviceCapabilities = Field(
        default_factory=DeviceCapabilities, description="Hardware capabilities shared by family"
    )
    discovery: list[DiscoveryPair] = Field(
        default_factory=list, description="Base discovery pairs offered on every OS"
    )
    windows_variants: list[str] = Field(
        default_factory=lambda: [""],
        min_length=1,
        description="Values substituted into Windows port name templates, in priority order",
    )
    buttons: dict[ButtonID, int] = Field(
        default_factory=dict, description="Base button map shared by the family"
    )
    scene_buttons_use_cc: bool = Field(
        default=True, description="Scene buttons send control change (True) or notes (False)"
    )
    lighting_command: int = Field(default=0x03, ge=0, le=127)
    modes: ModeCommandTable = Field(description="Mode-switch commands")
    devices: list[Device] = Field(
        default_factory=list, description="List of specific devices in this family"
    )


class DefinitionRegistrySchema(BaseModel):
    """Root schema for the definitions.json file."""

    families: list[DeviceFamily] = Field(
        default_factory=list, description="List of device families"
    )

    @classmethod
    def from_json_file(cls, path: Path) -> "DefinitionRegistrySchema":
        """Load registry from JSON file with validation."""
        with open(path) as f:
            return cls.model_validate_json(f.read())

