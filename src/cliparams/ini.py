"""Ini persistence of parameter values.

Format written by ``dump_ini``:

    [Section]

    key = value
    other key = 1,2,3

Reading is line oriented. Lines shorter than two characters and lines
starting with "#" are ignored, "[name]" switches the current section
(initially "Global"), and every other line is split on its first "=".
Both sides are trimmed and the value is decoded into the addressed record.

Keys that were never declared are created as "string" records so that an
ini file may be loaded before the parameters are declared; a later typed
declaration re-decodes the stored text.

Some values cannot be stored exactly: text with leading or trailing blanks
(trimmed on read), text containing a line break (split into several lines)
and sequences whose items contain commas or end with an empty item, such
as [""] (read back as []). ``dump_ini`` writes them anyway and logs a warning.
"""

from pathlib import Path
from typing import List, Union
import logging

from .constants import DEFAULT_SECTION
from .parameters.kinds import Kind
from .parameters.record import ParamRecord
from .parameters.registry import ParameterRegistry

logger = logging.getLogger(__name__)

_BLANKS = " \t"


def is_representable(record: ParamRecord) -> bool:
    """True if the record's text reads back to the same value."""
    text = record.text
    if text != text.strip(_BLANKS) or "".join(text.splitlines()) != text:
        return False
    codec = record.kind.codec
    return not codec.is_sequence or len(codec.decode(text)) == len(record.value)


def dump_ini(registry: ParameterRegistry) -> str:
    """Serialize every parameter value as ini text, in registry order."""
    lines: List[str] = []
    for section in registry.sections():
        lines.append(f"[{section}]")
        lines.append("")
        for key, record in registry.items(section):
            if not is_representable(record):
                logger.warning(f"Value of {section}/{key} cannot be stored exactly in ini text: {record.text!r}")
            lines.append(f"{key} = {record.text}")
        lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")


def parse_ini(text: str, registry: ParameterRegistry) -> int:
    """Assign the values found in ini ``text`` to the registry.

    Args:
        text: Ini file contents
        registry: Registry receiving the values

    Returns:
        Number of values assigned
    """
    section = DEFAULT_SECTION
    assigned = 0
    for line_number, line in enumerate(text.splitlines(), start=1):
        if len(line) < 2 or line.startswith("#"):
            continue
        if line.startswith("["):
            header = line.rstrip()
            section = header[1:-1] if header.endswith("]") else header[1:]
            continue
        if "=" not in line:
            logger.warning(f"Ignoring ini line {line_number} without '=': {line!r}")
            continue

        key, value = line.split("=", 1)
        key = key.strip(_BLANKS)
        value = value.strip(_BLANKS)
        record = registry.lookup(section, key)
        if record is None:
            logger.warning(f"Undeclared parameter {section}/{key} in ini text, storing as string")
            record = registry.insert_or_replace(section, key, ParamRecord(Kind.STRING))
        record.text = value
        assigned += 1
    return assigned


def load_ini(path: Union[str, Path], registry: ParameterRegistry) -> bool:
    """Load parameter values from an ini file.

    Args:
        path: File to read
        registry: Registry receiving the values

    Returns:
        True on success; False if the file cannot be read, in which case
        the registry is unchanged
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.info(f"Cannot read ini file {path}: {e}")
        return False
    assigned = parse_ini(text, registry)
    logger.info(f"Loaded {assigned} values from {path}")
    return True


def save_ini(path: Union[str, Path], registry: ParameterRegistry) -> None:
    """Write all parameter values to an ini file.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    path.write_text(dump_ini(registry), encoding="utf-8")
    logger.info(f"Wrote {len(registry)} values to {path}")
