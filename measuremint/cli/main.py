"""MeasureMint command-line interface.

Entry point for the ``measuremint`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from measuremint import __app_name__, __version__
from measuremint.core.config import Settings, load_settings

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Settings file (JSON).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """MeasureMint — length and temperature unit converter.

    Convert values between units, list the supported units, or keep a
    conversion history in an interactive session.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

    settings = Settings()
    if config_path:
        try:
            settings = load_settings(config_path)
        except ValueError as e:
            console.print(f"[red]Error:[/red] Invalid settings in {config_path}: {e}")
            raise SystemExit(1)

    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj["settings"] = settings


# Import and register sub-commands
from measuremint.cli.convert_cmd import convert  # noqa: E402
from measuremint.cli.units_cmd import units  # noqa: E402
from measuremint.cli.session_cmd import session  # noqa: E402
from measuremint.cli.gui_cmd import gui  # noqa: E402

cli.add_command(convert)
cli.add_command(units)
cli.add_command(session)
cli.add_command(gui)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
