"""Mode-switch commands (standalone, program, fader and pan)."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class SurfaceMode(str, Enum):
    """Operating modes a surface can be switched into."""

    STANDALONE = "standalone"
    PROGRAM = "program"
    FADER = "fader"
    PAN = "pan"


def normalize_hex(value: str) -> str:
    """
    Normalize a space separated hex byte string to uppercase pairs.

    Raises:
        ValueError: If a token is not a two digit hex byte
    """
    tokens = value.split()
    for token in tokens:
        if len(token) != 2:
            raise ValueError(f"'{token}' is not a two digit hex byte")
        int(token, 16)
    return " ".join(token.upper() for token in tokens)


class ModeCommandTable(BaseModel):
    """
    Mode-switch commands for one device, without header or terminator.

    Fader and pan are optional. When unset they resolve to the program
    command; several devices have no dedicated overlay command and simply
    re-enter program mode.
    """

    model_config = ConfigDict(frozen=True)

    standalone: str
    program: str
    fader: str | None = None
    pan: str | None = None

    @field_validator("standalone", "program", "fader", "pan")
    @classmethod
    def validate_hex(cls, v: str | None) -> str | None:
        """Validate commands are hex byte pairs."""
        if v is None:
            return v
        return normalize_hex(v)

    def command(self, mode: SurfaceMode) -> str:
        """Get the command bytes for a mode."""
        if mode == SurfaceMode.STANDALONE:
            return self.standalone
        if mode == SurfaceMode.FADER and self.fader is not None:
            return self.fader
        if mode == SurfaceMode.PAN and self.pan is not None:
            return self.pan
        return self.program


class ModeCommandOverrides(BaseModel):
    """Per-device replacements for family mode commands."""

    standalone: str | None = None
    program: str | None = None
    fader: str | None = None
    pan: str | None = None

    def apply(self, base: ModeCommandTable) -> ModeCommandTable:
        """Merge these overrides onto a family table."""
        return ModeCommandTable(**{**base.model_dump(), **self.model_dump(exclude_none=True)})
