"""CLI commands for gridsurface."""

from .definitions import buttons, discover, info, list_definitions
from .lighting import encode, mode
from .midi import midi_group

__all__ = ["buttons", "discover", "encode", "info", "list_definitions", "midi_group", "mode"]
