"""Help text ("synopsis") for applications declaring parameters.

The synopsis has three parts: a usage block listing every flag and
positional argument, a verbose listing per section, and the application's
description, contributor and acknowledgements.
"""

from typing import List, Optional, Tuple

from .constants import (
    HELP_FLAGS,
    LOAD_INI_FLAG,
    SAVE_INI_FLAG,
    TAG_DESCRIPTION,
    TAG_FLAG,
    TAG_INDEX,
    TAG_LONGFLAG,
    XML_FLAG,
)
from .metadata import AppMetadata
from .parameters.record import ParamRecord
from .parameters.registry import ParameterRegistry


def _flag_summary(record: ParamRecord, verbose: bool = False) -> str:
    """Bracketed flag summary, e.g. "[-b|--basic-flag <boolean>]"."""
    short = record.tags.get(TAG_FLAG, "")
    long = record.tags.get(TAG_LONGFLAG, "")
    kind = record.kind.value
    if short and long and verbose:
        return f"[-{short}|--{long} <{kind}>]"
    if short:
        return f"[-{short} <{kind}>]"
    return f"[--{long} <{kind}>]"


def _is_flagged(record: ParamRecord) -> bool:
    return bool(record.tags.get(TAG_FLAG) or record.tags.get(TAG_LONGFLAG))


def positional_parameters(registry: ParameterRegistry) -> List[Tuple[int, ParamRecord]]:
    """(index, record) of all positional parameters, ordered by index."""
    positional = []
    for _, _, record in registry.walk():
        index = record.tags.get(TAG_INDEX, "")
        if index.isdigit() and not _is_flagged(record):
            positional.append((int(index), record))
    return sorted(positional, key=lambda item: item[0])


def render_synopsis(registry: ParameterRegistry, metadata: AppMetadata, prog: Optional[str] = None) -> str:
    """Render the help text.

    Args:
        registry: Declared parameters
        metadata: Application metadata (description, contributor, ...)
        prog: Program name for the usage line; defaults to the title

    Returns:
        Help text ending with a newline
    """
    prog = prog or metadata.title or "app"
    indent = " " * (len(prog) + 6)
    positional = positional_parameters(registry)

    lines = ["USAGE:", ""]
    lines.append(f"   ./{prog} [{HELP_FLAGS[0]}] [{XML_FLAG}]")
    lines.append(f"{indent}[{SAVE_INI_FLAG} <file>] [{LOAD_INI_FLAG} <file>]")
    for _, _, record in registry.walk():
        if _is_flagged(record):
            lines.append(indent + _flag_summary(record))
    if positional:
        lines.append(indent + " ".join(f"<{record.kind.value}>" for _, record in positional))

    for section in registry.sections():
        lines.extend(["", f"{section}:", ""])
        for _, record in registry.items(section):
            if not _is_flagged(record):
                continue
            lines.append(" " + _flag_summary(record, verbose=True))
            description = record.tags.get(TAG_DESCRIPTION, "")
            if description:
                lines.extend([f"    {description}", ""])

    for index, record in positional:
        lines.extend(["", f"{record.kind.value}({index}):"])
        lines.append(f"    {record.tags.get(TAG_DESCRIPTION, '')}")

    if metadata.description:
        lines.extend(["", metadata.description])
    if metadata.contributor:
        lines.extend(["", f"Author: {metadata.contributor}"])
    if metadata.acknowledgements:
        lines.extend(["", f"Acknowledgements: {metadata.acknowledgements}"])
    return "\n".join(lines) + "\n"
