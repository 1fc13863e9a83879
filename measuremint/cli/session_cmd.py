"""Interactive converter session with a conversion history."""

from __future__ import annotations

import shlex

import click
from rich.console import Console
from rich.table import Table

from measuremint.core.categories import parse_category, units_for
from measuremint.core.config import Settings
from measuremint.core.history import format_timestamp
from measuremint.core.session import ConverterSession

HELP_TEXT = """\
[bold]Commands[/bold]
  category <name>   switch category (resets units, clears the result)
  from <unit>       select the input unit
  to <unit>         select the output unit
  value <number>    set the input value (malformed numbers become 0)
  convert [number]  convert the current value and record it
  history           show conversions, newest first
  clear             clear the history
  status            show the current selection
  help              show this help
  quit              leave the session"""


def print_history(console: Console, state: ConverterSession) -> None:
    if not state.history:
        console.print("[dim italic]No conversions yet.[/dim italic]")
        return

    table = Table(title="Conversion History")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Conversion", style="cyan")
    table.add_column("Category", style="yellow")
    table.add_column("Time", style="dim")

    records = state.history.newest_first()
    for i, record in enumerate(records):
        table.add_row(
            str(len(records) - i),
            record.summary,
            record.category,
            format_timestamp(record.timestamp),
        )
    console.print(table)


def print_status(console: Console, state: ConverterSession) -> None:
    table = Table(title="Converter", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Category", state.category.label)
    table.add_row("From", state.input_unit.label)
    table.add_row("To", state.output_unit.label)
    table.add_row("Value", f"{state.input_value:g}")
    table.add_row("Result", state.result_text or "—")
    table.add_row("Units", ", ".join(u.key for u in units_for(state.category)))
    console.print(table)


def run_command(console: Console, state: ConverterSession, line: str) -> bool:
    """Execute one session command.

    Returns:
        False when the session should end.

    Raises:
        ValueError: For unknown commands, names or missing arguments.
    """
    parts = shlex.split(line)
    if not parts:
        return True
    cmd, args = parts[0].lower(), parts[1:]
    arg = " ".join(args)

    if cmd in ("quit", "exit", "q"):
        return False
    elif cmd == "help":
        console.print(HELP_TEXT)
    elif cmd in ("category", "cat"):
        if not arg:
            raise ValueError("category needs a name")
        state.select_category(parse_category(arg))
        console.print(
            f"{state.category.label}: {state.input_unit.label} → {state.output_unit.label}"
        )
    elif cmd == "from":
        if not arg:
            raise ValueError("from needs a unit")
        state.select_input_unit(arg)
        console.print(f"From: {state.input_unit.label}")
    elif cmd == "to":
        if not arg:
            raise ValueError("to needs a unit")
        state.select_output_unit(arg)
        console.print(f"To: {state.output_unit.label}")
    elif cmd == "value":
        state.set_input_text(arg)
        console.print(f"Value: {state.input_value:g}")
    elif cmd in ("convert", "c"):
        if args:
            state.set_input_text(arg)
        result, added = state.convert_and_record()
        suffix = "" if added else " [dim](unchanged, not recorded)[/dim]"
        console.print(
            f"[bold]{result.input_text}[/bold] → [bold green]{result.output_text}[/bold green]{suffix}"
        )
    elif cmd == "history":
        print_history(console, state)
    elif cmd == "clear":
        state.clear_history()
        console.print("History cleared.")
    elif cmd == "status":
        print_status(console, state)
    else:
        raise ValueError(f"Unknown command {cmd!r} (type 'help')")
    return True


@click.command("session")
@click.pass_context
def session(ctx: click.Context) -> None:
    """Start an interactive converter session.

    The history lives only as long as the session.  Type 'help' for the
    list of commands.
    """
    console: Console = ctx.obj.get("console", Console())
    settings: Settings = ctx.obj.get("settings", Settings())
    state = ConverterSession(settings)

    console.print("[bold]MeasureMint session[/bold] — type 'help' for commands")
    while True:
        try:
            line = console.input("[bold green]>[/bold green] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        try:
            if not run_command(console, state, line):
                break
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}")
