"""CLI command listing categories and their units."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from measuremint.core.categories import Category, default_units, parse_category, units_for


@click.command("units")
@click.argument("category", required=False, default=None)
@click.pass_context
def units(ctx: click.Context, category: str | None) -> None:
    """List supported units, optionally for a single CATEGORY."""
    console: Console = ctx.obj.get("console", Console())

    if category:
        try:
            categories = [parse_category(category)]
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)
    else:
        categories = list(Category)

    for cat in categories:
        first, last = default_units(cat)
        table = Table(title=cat.label)
        table.add_column("Unit", style="cyan")
        table.add_column("Key", style="green")
        table.add_column("Symbol", style="yellow")
        table.add_column("Default", style="dim")

        for unit in units_for(cat):
            marker = "from" if unit is first else "to" if unit is last else ""
            table.add_row(unit.label, unit.key, unit.symbol, marker)
        console.print(table)
