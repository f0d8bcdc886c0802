"""MIDI port commands."""

import logging
from typing import Optional

import click
import mido

from gridsurface.cli.context import resolve_definition
from gridsurface.definitions import select_ports

logger = logging.getLogger(__name__)


@click.group(name="midi")
def midi_group():
    """MIDI port commands."""
    pass


@midi_group.command(name="ports")
@click.argument("model", required=False)
@click.pass_context
def list_ports(ctx, model: Optional[str]):
    """
    List MIDI ports, and with MODEL the pair auto-discovery would pick.
    """
    try:
        inputs = mido.get_input_names()
        outputs = mido.get_output_names()
    except Exception as e:
        logger.exception("Failed to enumerate MIDI ports")
        raise click.ClickException(f"Could not list MIDI ports: {e}") from e

    click.echo("MIDI Input Ports:\n")
    if not inputs:
        click.echo("  No MIDI input ports found.")
    for i, port in enumerate(inputs):
        click.echo(f"  [{i}] {port}")

    click.echo("\nMIDI Output Ports:\n")
    if not outputs:
        click.echo("  No MIDI output ports found.")
    for i, port in enumerate(outputs):
        click.echo(f"  [{i}] {port}")

    if model is None:
        return

    definition = resolve_definition(ctx, model)
    pair = select_ports(definition.discovery_pairs(), inputs, outputs)

    if pair is None:
        click.echo(f"\nNo ports match {definition.display_name}.")
    else:
        click.echo(f"\n{definition.display_name}: in={pair.input_pattern!r} out={pair.output_pattern!r}")
