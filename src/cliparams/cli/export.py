"""Commands that describe an application: manifest, synopsis and ini values."""

from pathlib import Path
from typing import Optional
import logging

import typer
from typer.models import OptionInfo

from ..application import Application
from ..utils import load_symbol
from .config import project_metadata

logger = logging.getLogger(__name__)


def _normalize_option_value(value):
    """Support calling the Typer command functions directly in tests."""
    return value.default if isinstance(value, OptionInfo) else value


def load_application(reference: str, project_root: Optional[str] = None) -> Application:
    """Load an Application from ``module:attr`` or ``file.py:attr``.

    The attribute may be an Application or a function returning one.
    Metadata fields the application leaves empty are filled from the
    project's [tool.cliparams] table.

    Raises:
        ValueError: If the reference does not resolve to an Application or
            the project configuration is invalid
        ModuleNotFoundError: If the module cannot be imported
        AttributeError: If the attribute does not exist
    """
    obj = load_symbol(reference, project_root)
    if callable(obj) and not isinstance(obj, Application):
        obj = obj()
    if not isinstance(obj, Application):
        raise ValueError(f"{reference} is not a cliparams Application (got {type(obj).__name__})")

    defaults = project_metadata(Path(project_root) if project_root else None)
    if defaults:
        obj.metadata.update(defaults, overwrite=False)
        logger.info(f"Applied project metadata: {', '.join(sorted(defaults))}")
    return obj


def _load_or_exit(reference: str, project_root: Optional[str]) -> Application:
    try:
        return load_application(reference, project_root)
    except (ValueError, ModuleNotFoundError, AttributeError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {output}", err=True)
    else:
        typer.echo(text, nl=False)


def manifest_command(
    application: str = typer.Argument(..., help="Application reference (module:attr or file.py:attr)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the manifest to this file"),
    project_root: Optional[str] = typer.Option(None, "--project-root", help="Project root (default: cwd)"),
):
    """Print the XML manifest of an application."""
    output = _normalize_option_value(output)
    project_root = _normalize_option_value(project_root)

    app = _load_or_exit(application, project_root)
    _emit(app.xml_description(), output)


def synopsis_command(
    application: str = typer.Argument(..., help="Application reference (module:attr or file.py:attr)"),
    prog: Optional[str] = typer.Option(None, "--prog", help="Program name for the usage line"),
    project_root: Optional[str] = typer.Option(None, "--project-root", help="Project root (default: cwd)"),
):
    """Print the help text of an application."""
    prog = _normalize_option_value(prog)
    project_root = _normalize_option_value(project_root)

    app = _load_or_exit(application, project_root)
    typer.echo(app.synopsis(prog), nl=False)


def ini_command(
    application: str = typer.Argument(..., help="Application reference (module:attr or file.py:attr)"),
    load: Optional[str] = typer.Option(None, "--load", "-l", help="Ini file to load before printing"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the values to this file"),
    project_root: Optional[str] = typer.Option(None, "--project-root", help="Project root (default: cwd)"),
):
    """Print the parameter values of an application in ini format."""
    load = _normalize_option_value(load)
    output = _normalize_option_value(output)
    project_root = _normalize_option_value(project_root)

    app = _load_or_exit(application, project_root)
    if load and not app.load(load):
        typer.echo(f"Error: cannot read ini file {load}", err=True)
        raise typer.Exit(1)
    _emit(app.to_ini(), output)
