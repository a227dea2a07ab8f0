"""CLI for the litmus test scaffolder.

Usage:
    python -m litmus generate                                  # Auto-discover in cwd
    python -m litmus generate Counter.razor.cs Counter.razor   # Explicit files
    python -m litmus generate -o CounterTests.cs               # Write to a file
    python -m litmus inspect                                   # Show what was extracted
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from litmus.composer import expected_variable, generate
from litmus.config import Settings
from litmus.discovery import InputError, InputPair, resolve_inputs
from litmus.markup import harvest
from litmus.members import read_properties
from litmus.models import ClassNotFound

app = typer.Typer(
    name="litmus",
    help="Scaffold bUnit tests from a Blazor component's class and markup",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _load(class_file: Optional[Path], razor_file: Optional[Path]) -> tuple[InputPair, str, str]:
    """Resolve and read the inputs, exiting with status 1 on failure."""
    try:
        pair = resolve_inputs(class_file, razor_file)
        class_text, markup_text = pair.read()
    except InputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    if pair.discovered:
        console.print("Auto-discovered files:")
        console.print(f"  Class: [green]{pair.class_path}[/green]")
        console.print(f"  Razor: [green]{pair.razor_path}[/green]")
    return pair, class_text, markup_text


@app.command("generate")
def cmd_generate(
    class_file: Optional[Path] = typer.Argument(None, help="Component class file (.cs)"),
    razor_file: Optional[Path] = typer.Argument(None, help="Component markup file (.razor)"),
    component_name: Optional[str] = typer.Option(
        None, "--component-name", "-c", help="Override the detected class name"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write tests here instead of stdout"),
) -> None:
    """Generate test methods for one component."""
    _, class_text, markup_text = _load(class_file, razor_file)

    console.print("[dim]Processing files...[/dim]")
    test_code = generate(class_text, markup_text, component_name, Settings.from_env())

    if output:
        try:
            output.write_text(test_code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error:[/red] Could not write {escape(str(output))}: {escape(str(e))}")
            raise typer.Exit(1)
        console.print(f"Tests written to {output}")
    else:
        typer.echo(test_code, nl=False)


@app.command("inspect")
def cmd_inspect(
    class_file: Optional[Path] = typer.Argument(None, help="Component class file (.cs)"),
    razor_file: Optional[Path] = typer.Argument(None, help="Component markup file (.razor)"),
) -> None:
    """Show the members and ref attributes litmus extracts, without generating."""
    _, class_text, markup_text = _load(class_file, razor_file)

    parsed = read_properties(class_text)
    if isinstance(parsed, ClassNotFound):
        console.print(f"[yellow]{parsed.message}[/yellow]")
    else:
        table = Table(title=f"Members of {parsed.name}", show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Name", style="green", min_width=15)
        table.add_column("Type")
        table.add_column("Visibility")
        table.add_column("Parameter", justify="center")
        table.add_column("Asserted", justify="center")
        for m in parsed.members:
            asserted = m.is_public and not m.is_bindable_parameter
            table.add_row(
                str(m.order),
                m.name,
                escape(m.type_name),
                m.visibility.value,
                "yes" if m.is_bindable_parameter else "",
                "[green]yes[/green]" if asserted else "[dim]no[/dim]",
            )
        console.print()
        console.print(table)

    ref_values = harvest(markup_text)
    if not ref_values:
        console.print("[yellow]No @ref-bound elements found.[/yellow]")
        return

    table = Table(title="Ref attributes", show_header=True, header_style="bold")
    table.add_column("Ref", style="green")
    table.add_column("Key")
    table.add_column("Kind")
    table.add_column("Type")
    table.add_column("Literal")
    table.add_column("Variable", style="dim")
    for rv in ref_values:
        type_cell = rv.value.type_name if rv.value.is_resolved else f"[red]{rv.value.type_name}[/red]"
        table.add_row(
            rv.ref_name,
            rv.key,
            rv.value.kind.value,
            type_cell,
            escape(rv.value.literal),
            expected_variable(rv),
        )
    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    app()
