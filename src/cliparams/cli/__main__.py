"""cliparams CLI entry point.

Provides commands to inspect applications declared with cliparams: print
their manifest, help text and parameter values, and store default metadata
in pyproject.toml.
"""

from typing import Optional
import logging
import sys

import typer

from .config import write_metadata_config
from .export import manifest_command, synopsis_command, ini_command

# Create the main app
app = typer.Typer(
    name="cliparams",
    help="Inspect self-describing command-line applications",
    invoke_without_command=True,
)

app.command("manifest")(manifest_command)
app.command("synopsis")(synopsis_command)
app.command("ini")(ini_command)


@app.command("init")
def init(
    title: Optional[str] = typer.Option(None, "--title", help="Application title"),
    description: Optional[str] = typer.Option(None, "--description", help="Application description"),
    version: Optional[str] = typer.Option(None, "--version", help="Application version"),
    category: Optional[str] = typer.Option(None, "--category", help="Host menu category"),
    documentation_url: Optional[str] = typer.Option(None, "--documentation-url", help="Documentation link"),
    license: Optional[str] = typer.Option(None, "--license", help="License name"),
    contributor: Optional[str] = typer.Option(None, "--contributor", help="Author(s)"),
    acknowledgements: Optional[str] = typer.Option(None, "--acknowledgements", help="Credits"),
):
    """Store default application metadata in pyproject.toml."""
    values = {
        "title": title,
        "description": description,
        "version": version,
        "category": category,
        "documentation_url": documentation_url,
        "license": license,
        "contributor": contributor,
        "acknowledgements": acknowledgements,
    }
    values = {name: value for name, value in values.items() if value}
    if not values:
        typer.echo("Error: nothing to write, pass at least one field.", err=True)
        raise typer.Exit(1)
    path = write_metadata_config(values)
    typer.echo(f"Updated [tool.cliparams] in {path} ({', '.join(sorted(values))})")


@app.command("version")
def version():
    """Show version information."""
    from .. import __version__
    typer.echo(f"cliparams version {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output")
):
    """Inspect self-describing command-line applications."""
    if verbose:
        logging.basicConfig(level=logging.INFO)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        typer.echo("\nError: Missing command.", err=True)
        raise typer.Exit(1)


def cli_main():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\nAborted", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
