"""CLI command for one-shot unit conversion."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from measuremint.core.categories import parse_category, parse_unit
from measuremint.core.config import Settings
from measuremint.core.converter import convert_measurement
from measuremint.core.session import parse_value


@click.command("convert", context_settings={"ignore_unknown_options": True})
@click.argument("value", type=str)
@click.option("--from", "-f", "from_unit", required=True, help="Input unit (e.g. m, feet, °C).")
@click.option("--to", "-t", "to_unit", required=True, help="Output unit.")
@click.option(
    "--category",
    "-c",
    default=None,
    help="Conversion category (length, temperature). Inferred from --from if omitted.",
)
@click.pass_context
def convert(
    ctx: click.Context,
    value: str,
    from_unit: str,
    to_unit: str,
    category: str | None,
) -> None:
    """Convert VALUE between two units of the same category.

    Negative values may be given directly (e.g. -40). Malformed numbers
    are treated as 0.
    """
    console: Console = ctx.obj.get("console", Console())
    settings: Settings = ctx.obj.get("settings", Settings())

    try:
        cat = parse_category(category) if category else parse_unit(from_unit).category
        src = parse_unit(from_unit, cat)
        dst = parse_unit(to_unit, cat)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    result = convert_measurement(parse_value(value), src, dst, settings)

    table = Table(title="Conversion")
    table.add_column("Input", style="cyan", justify="right")
    table.add_column("Output", style="green", justify="right")
    table.add_column("Category", style="dim")
    table.add_row(result.input_text, result.output_text, cat.label)
    console.print(table)
