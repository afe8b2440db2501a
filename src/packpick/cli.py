"""
CLI entry point for packpick.

Modified: 2026-10-17
"""

import sys
import traceback
import click
from pathlib import Path
from packpick import __version__
from packpick.config.settings import Settings
from packpick.core.exceptions import ConfigurationError
from packpick.utils.logger import setup_logging


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to config file (default: ~/.config/packpick/config.yaml)",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write logs to this file",
)
@click.option("--keys", is_flag=True, help="Show key bindings and exit")
def cli(config_path: Path, log_file: Path, keys: bool):
    """Pick a language, an architecture and a zip name."""
    if keys:
        from packpick.tui.keybindings import registry

        click.echo(registry.format_help_text())
        return

    try:
        settings = Settings.load(config_path)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)

    if log_file:
        settings.logging.file = str(log_file)
    setup_logging(settings.logging.level, settings.logging.file)

    try:
        from packpick.tui.app import run_app

        exit_code = run_app(settings)
    except Exception as e:
        click.echo(f"✗ TUI error: {e}", err=True)
        traceback.print_exc()
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
