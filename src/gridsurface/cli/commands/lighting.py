"""SysEx encoding commands."""

import click

from gridsurface.cli.context import resolve_definition
from gridsurface.definitions import LightInfo, SurfaceMode


def parse_light(value: str) -> tuple[int, LightInfo]:
    """
    Parse NOTE=COLOR[:BLINK[:fast]].

    Raises:
        click.BadParameter: If the value is malformed
    """
    try:
        note_text, state = value.split("=", 1)
        fields = state.split(":")
        if len(fields) > 3:
            raise ValueError("too many fields")

        note = int(note_text)
        color = int(fields[0])
        blink_color = int(fields[1]) if len(fields) > 1 else 0
        is_fast = len(fields) > 2 and fields[2].lower() == "fast"
    except ValueError as e:
        raise click.BadParameter(
            f"'{value}' is not NOTE=COLOR[:BLINK[:fast]] ({e})", param_hint="LIGHTS"
        ) from e

    return note, LightInfo(color=color, blink_color=blink_color, is_fast=is_fast)


@click.command(name="encode")
@click.argument("model")
@click.argument("lights", nargs=-1)
@click.pass_context
def encode(ctx, model: str, lights: tuple[str, ...]):
    """
    Print the lighting SysEx for MODEL.

    Each LIGHTS entry is NOTE=COLOR, NOTE=COLOR:BLINK (pulsing) or
    NOTE=COLOR:BLINK:fast (flashing). Values are decimal.
    """
    definition = resolve_definition(ctx, model)
    request = dict(parse_light(light) for light in lights)

    for message in definition.build_lighting_update(request):
        click.echo(message)


@click.command(name="mode")
@click.argument("model")
@click.argument(
    "surface_mode",
    metavar="MODE",
    type=click.Choice([m.value for m in SurfaceMode], case_sensitive=False),
)
@click.pass_context
def mode(ctx, model: str, surface_mode: str):
    """Print the SysEx that switches MODEL into MODE."""
    definition = resolve_definition(ctx, model)
    click.echo(definition.build_mode_message(SurfaceMode(surface_mode.lower())))
