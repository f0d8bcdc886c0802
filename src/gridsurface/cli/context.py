"""Shared helpers for CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from gridsurface.definitions import ControllerDefinition, DefinitionRegistry, get_registry
from gridsurface.exceptions import GridSurfaceError, format_error_for_display

logger = logging.getLogger(__name__)


def load_registry(ctx: click.Context) -> DefinitionRegistry:
    """Get the registry for the definitions file selected on the command line."""
    ctx.ensure_object(dict)
    registry = ctx.obj.get("registry")
    if registry is not None:
        return registry

    path: Optional[Path] = ctx.obj.get("definitions_path")
    try:
        registry = DefinitionRegistry(path) if path else get_registry()
    except GridSurfaceError as e:
        fail(e)

    ctx.obj["registry"] = registry
    return registry


def resolve_definition(ctx: click.Context, model: str) -> ControllerDefinition:
    """Look up a definition by model name or unique id, exiting on failure."""
    registry = load_registry(ctx)
    try:
        return registry.get(model)
    except GridSurfaceError as e:
        fail(e)


def fail(error: Exception) -> NoReturn:
    """Log an error, show the user message and hint, and exit with code 1."""
    technical = getattr(error, "technical_message", str(error))
    logger.exception(f"Command failed: {technical}")

    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    sys.exit(1)
