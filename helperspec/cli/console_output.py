# helperspec/cli/console_output.py
"""
Handles printing parsed helper specs and render summaries to the console.
"""
import click
from rich.console import Console as RichConsole
from rich.table import Table
import structlog

from helperspec.core.parser import describe_spec
from helperspec.core.spec import HelperSpec

log = structlog.get_logger(__name__)

def print_spec_table(spec: HelperSpec, console: RichConsole | None = None):
    """Prints one row per bound name: kind, name, type and default."""
    console = console or RichConsole()
    table = Table(title=f"helper `{spec.name}`", show_lines=False)
    table.add_column("kind", style="cyan")
    table.add_column("name", style="bold")
    table.add_column("type", style="green")
    table.add_column("default", style="yellow")
    rows = describe_spec(spec)
    for row in rows:
        table.add_row(*row)
    if not rows:
        table.add_row("-", "(no parameters)", "", "")
    console.print(table)
    log.debug("spec_table_printed", helper=spec.name, rows=len(rows))

def print_render_summary(source_name: str, helper_names, output_chars: int):
    click.secho("--- render summary ---", fg="cyan", err=True)
    click.echo(f"Template: {source_name}", err=True)
    click.echo(f"Helpers registered: {', '.join(sorted(helper_names))}", err=True)
    click.echo(f"Characters rendered: {output_chars:,}", err=True)
