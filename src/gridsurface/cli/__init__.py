"""Command line interface for gridsurface."""

from .main import cli

__all__ = ["cli"]
