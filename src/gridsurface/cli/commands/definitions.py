"""Definition inspection commands."""

from typing import Optional

import click

from gridsurface.cli.context import load_registry, resolve_definition
from gridsurface.definitions import OperatingSystem, SurfaceMode


@click.command(name="list")
@click.pass_context
def list_definitions(ctx):
    """List supported controllers."""
    registry = load_registry(ctx)

    if not registry.definitions:
        click.echo("No controller definitions found.")
        return

    for definition in registry.definitions:
        click.echo(f"{definition.display_name} ({definition.vendor})")
        click.echo(f"    Family: {definition.family}")
        click.echo(f"    ID: {definition.identity.unique_id}")


@click.command(name="info")
@click.argument("model")
@click.pass_context
def info(ctx, model: str):
    """Show identity, capabilities and mode commands of MODEL."""
    definition = resolve_definition(ctx, model)
    identity = definition.identity
    capabilities = definition.capabilities

    click.echo(f"{identity.display_name}")
    click.echo(f"  Vendor: {identity.vendor}")
    click.echo(f"  ID: {identity.unique_id}")
    click.echo(f"  Ports: {identity.num_input_ports} in / {identity.num_output_ports} out")
    click.echo(f"  Pads: {capabilities.num_pads} ({capabilities.grid_size}x{capabilities.grid_size})")
    click.echo(f"  Pro: {'yes' if capabilities.is_pro else 'no'}")
    click.echo(f"  Fader support: {'yes' if capabilities.has_fader_support else 'no'}")
    click.echo(f"  SysEx header: {definition.sysex_header}")

    click.echo("\nMode commands:")
    for surface_mode in SurfaceMode:
        click.echo(f"  {surface_mode.value:<10} {definition.mode_command(surface_mode)}")


@click.command(name="buttons")
@click.argument("model")
@click.pass_context
def buttons(ctx, model: str):
    """Show the button table of MODEL."""
    definition = resolve_definition(ctx, model)

    for button, number in definition.button_ids().items():
        click.echo(f"  {button.value:<10} {number:>3}  (0x{number:02X})")

    kind = "control change" if definition.scene_buttons_use_cc() else "note"
    click.echo(f"\nScene buttons send {kind} messages")


@click.command(name="discover")
@click.argument("model")
@click.option(
    "--os",
    "os_name",
    type=click.Choice([o.value for o in OperatingSystem], case_sensitive=False),
    default=None,
    help="Operating system (default: the current one)",
)
@click.pass_context
def discover(ctx, model: str, os_name: Optional[str]):
    """Show the port name pairs tried for MODEL, in priority order."""
    definition = resolve_definition(ctx, model)
    os = OperatingSystem(os_name.lower()) if os_name else OperatingSystem.current()

    pairs = definition.discovery_pairs(os)
    if not pairs:
        click.echo(f"No discovery pairs for {definition.display_name} on {os.value}.")
        return

    for i, pair in enumerate(pairs):
        click.echo(f"  [{i}] in: {pair.input_pattern!r}  out: {pair.output_pattern!r}")
