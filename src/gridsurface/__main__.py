"""Main entry point for gridsurface."""

from gridsurface.cli.main import cli

if __name__ == "__main__":
    cli()
