"""Monorepify CLI entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from monorepify import __version__
from monorepify.errors import MonorepifyError


@click.command()
@click.version_option(version=__version__, prog_name="monorepify")
@click.argument(
    "target",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    required=False,
    default=None,
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
def main(target: Path | None, *, verbose: bool, quiet: bool) -> None:
    """Convert the project in TARGET (default: current directory) into a monorepo.

    The root package.json moves to ./lib, a ./docs norska site is created
    from the README, and the root becomes a yarn workspaces + lerna root.
    Run it once, on a clean checkout: moves are not undone on failure.
    """
    from monorepify.log import configure_logging
    from monorepify.pipeline import run

    configure_logging(verbose=verbose, quiet=quiet)

    try:
        result = run(target or Path.cwd())
    except MonorepifyError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if quiet:
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"{result.name}@{result.version}", show_header=False, box=None)
    table.add_column("Workspace", style="bold")
    table.add_column("File")
    for file_path in result.files:
        workspace, _, rest = file_path.partition("/")
        if not rest:
            workspace, rest = "root", file_path
        table.add_row(workspace, rest)

    console = Console()
    console.print(table)
    console.print(f"\n[green bold]Monorepo ready in {result.root}[/green bold]")
