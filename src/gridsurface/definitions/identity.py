"""Static identity and capability records for a controller model."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DeviceIdentity(BaseModel):
    """
    Immutable facts identifying one controller model.

    One instance exists per supported model. Fields cannot be reassigned
    once the registry has built the definition.
    """

    model_config = ConfigDict(frozen=True)

    unique_id: UUID = Field(description="Stable extension identifier for this model")
    display_name: str = Field(min_length=1, description="Model name shown to users")
    vendor: str = Field(min_length=1, description="Manufacturer name")
    num_input_ports: int = Field(default=1, ge=0, description="MIDI input ports used")
    num_output_ports: int = Field(default=1, ge=0, description="MIDI output ports used")


class DeviceCapabilities(BaseModel):
    """Device hardware capabilities."""

    model_config = ConfigDict(frozen=True)

    num_pads: int = Field(default=64, ge=1, description="Number of grid pads")
    grid_size: int = Field(default=8, ge=1, description="Grid size (e.g., 8 for 8x8 grid)")
    is_pro: bool = Field(default=False, description="Pro model with extra button rows")
    has_fader_support: bool = Field(
        default=False, description="Whether the device has native fader/pan overlays"
    )
