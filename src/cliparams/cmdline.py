"""Command-line parsing against a parameter registry.

``parse_command_line`` scans an argument list from left to right, assigns
the values of bound flags and positional arguments, and removes every
argument it handled. Everything it does not understand stays in the list,
in order, for the caller to process.

Rules:
- ``--xml`` prints the manifest, ``-h``/``--help`` prints the synopsis
- ``--ctk-save-ini FILE`` / ``--ctk-load-ini FILE`` save or load values
- a flag bound to a boolean toggles it and takes no value
- any other bound flag takes the next argument as its value
- an argument without "-" is matched to the next positional index (a
  boolean parameter is toggled); if no parameter has that index, it is left
  alone and does not use the index
- an unknown flag is reported and left in place; the argument after it is
  scanned normally
"""

from typing import List, Optional, Tuple
import logging

import typer

from .binder import FlagBinder
from .constants import FLAG_MARKER, HELP_FLAGS, LOAD_INI_FLAG, SAVE_INI_FLAG, XML_FLAG
from .ini import load_ini, save_ini
from .manifest import render_manifest
from .metadata import AppMetadata
from .parameters.codec import BOOLEAN
from .parameters.record import ParamRecord
from .parameters.registry import ParameterRegistry
from .synopsis import render_synopsis

logger = logging.getLogger(__name__)


def _report(*lines: str) -> None:
    for line in lines:
        typer.echo(line, err=True)
    logger.debug(" ".join(lines))


def _report_missing_value(token: str) -> None:
    _report(
        "Expected value but found end of argument list.",
        f"Ignored command line argument {token}",
    )


def _is_flag(token: str) -> bool:
    return token.startswith(FLAG_MARKER)


def _resolve(token: str, registry: ParameterRegistry, binder: FlagBinder) -> Optional[Tuple[str, str, ParamRecord]]:
    address = binder.resolve(token)
    if address is None:
        return None
    record = registry.lookup(*address)
    if record is None:
        return None
    return address[0], address[1], record


def _run_ini_command(token: str, path: str, registry: ParameterRegistry) -> None:
    if token == SAVE_INI_FLAG:
        try:
            save_ini(path, registry)
        except OSError as e:
            _report(f"Cannot save ini file {path}: {e}")
    elif not load_ini(path, registry):
        _report(f"Cannot load ini file {path}")


def parse_command_line(
    argv: List[str],
    registry: ParameterRegistry,
    binder: FlagBinder,
    metadata: Optional[AppMetadata] = None,
    prog: Optional[str] = None,
) -> List[str]:
    """Assign parameter values from command-line arguments.

    ``argv`` is modified in place: handled arguments are removed and the
    remaining ones keep their relative order. Problems are reported on
    standard error and never abort the program.

    Args:
        argv: Arguments without the program name
        registry: Parameters to assign
        binder: Token bindings
        metadata: Application metadata for --xml and --help
        prog: Program name used in the help text

    Returns:
        ``argv`` itself, holding the unhandled arguments
    """
    metadata = metadata if metadata is not None else AppMetadata()
    handled = [False] * len(argv)
    position = 0
    count = len(argv)
    i = 0
    while i < count:
        token = argv[i]

        if token == XML_FLAG:
            typer.echo(render_manifest(registry, metadata), nl=False)
            handled[i] = True
            i += 1
            continue

        if token in HELP_FLAGS:
            typer.echo(render_synopsis(registry, metadata, prog), nl=False)
            handled[i] = True
            i += 1
            continue

        if token in (SAVE_INI_FLAG, LOAD_INI_FLAG):
            if i == count - 1:
                _report_missing_value(token)
                break
            handled[i] = handled[i + 1] = True
            _run_ini_command(token, argv[i + 1], registry)
            i += 2
            continue

        if _is_flag(token):
            target = _resolve(token, registry, binder)
            if target is not None and target[2].kind.codec is BOOLEAN:
                record = target[2]
                record.value = not record.value
                handled[i] = True
                i += 1
                continue
            if i == count - 1:
                _report_missing_value(token)
                break
            if target is None:
                _report(f"Ignored command line argument {token}")
                i += 1
                continue
            target[2].text = argv[i + 1]
            handled[i] = handled[i + 1] = True
            i += 2
            continue

        target = _resolve(str(position), registry, binder)
        if target is not None:
            record = target[2]
            if record.kind.codec is BOOLEAN:
                record.value = not record.value
            else:
                record.text = token
            handled[i] = True
            position += 1
        i += 1

    remaining = [token for token, done in zip(argv, handled) if not done]
    logger.debug(f"Handled {len(argv) - len(remaining)} of {len(argv)} arguments")
    argv[:] = remaining
    return argv
