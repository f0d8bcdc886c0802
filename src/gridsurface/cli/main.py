"""Main CLI entry point."""

import logging
from pathlib import Path
from typing import Optional

import click

from gridsurface import __version__

from .commands import buttons, discover, encode, info, list_definitions, midi_group, mode

logger = logging.getLogger(__name__)

_handler: Optional[logging.Handler] = None


def setup_logging(verbose: int, debug: bool) -> None:
    """
    Configure logging for the command line.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, force DEBUG level
    """
    global _handler

    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Command output goes to stdout, logs to stderr
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _handler = handler

    logger.info(f"Logging configured: level={logging.getLevelName(level)}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="gridsurface")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--definitions',
    'definitions_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Use another definitions file instead of the bundled one'
)
def cli(ctx, verbose: int, debug: bool, definitions_path: Optional[Path]):
    """
    Grid Surface - controller definitions for grid MIDI control surfaces.

    Inspect supported controllers, their port names and button tables,
    and encode lighting or mode-switch SysEx messages.

    \b
    Examples:
      # List supported controllers
      gridsurface list

      # Port names tried on Windows
      gridsurface discover "Launchpad X" --os windows

      # Pad 60 static color 5, pad 61 flashing 10/5
      gridsurface encode "Launchpad X" 60=5 61=5:10:fast

      # Which ports would be picked right now
      gridsurface midi ports "Launchpad X"
    """
    setup_logging(verbose, debug)

    ctx.ensure_object(dict)
    ctx.obj["definitions_path"] = definitions_path


cli.add_command(list_definitions)
cli.add_command(info)
cli.add_command(buttons)
cli.add_command(discover)
cli.add_command(encode)
cli.add_command(mode)
cli.add_command(midi_group)

if __name__ == "__main__":
    cli()
