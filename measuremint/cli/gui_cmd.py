"""CLI command to launch the MeasureMint desktop GUI."""

from __future__ import annotations

import click


@click.command("gui")
@click.pass_context
def gui(ctx: click.Context) -> None:
    """Launch the MeasureMint desktop application."""
    try:
        from measuremint.ui.app import run
    except ImportError as e:
        click.echo(
            f"GUI dependencies not installed: {e}\n"
            f"Install with: pip install -e '.[ui]'"
        )
        raise SystemExit(1)

    run(settings=ctx.obj.get("settings"))
