"""Project configuration for the cliparams tool.

Default application metadata can live in pyproject.toml:

    [tool.cliparams]
    title = "Smoothing"
    version = "1.2"
    category = "Filtering"
    contributor = "Jane Doe"

The tool applies these values to an application's metadata for every field
the application leaves empty.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import tomllib
import toml

from ..metadata import AppMetadata

TOOL_TABLE = "cliparams"


def _pyproject_path(root: Optional[Path] = None) -> Path:
    return Path(root or Path.cwd()) / "pyproject.toml"


def read_pyproject(root: Optional[Path] = None) -> Dict[str, Any]:
    """Read the [tool.cliparams] table.

    Args:
        root: Project directory (default: cwd)

    Returns:
        The table, or an empty dict if it is missing

    Raises:
        FileNotFoundError: If pyproject.toml doesn't exist
        tomllib.TOMLDecodeError: If TOML is malformed
    """
    pyproject_path = _pyproject_path(root)
    if not pyproject_path.exists():
        raise FileNotFoundError(f"pyproject.toml not found in {pyproject_path.parent}")

    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get(TOOL_TABLE, {})


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate a [tool.cliparams] table.

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    known = AppMetadata.field_names()
    for name, value in config.items():
        if name not in known:
            errors.append(f"Unknown field: {name} (expected one of {', '.join(known)})")
        elif not isinstance(value, str):
            errors.append(f"Field '{name}' must be a string, got {type(value).__name__}")
    return errors


def project_metadata(root: Optional[Path] = None) -> Dict[str, str]:
    """Metadata defaults of the project, empty without a pyproject.toml.

    Raises:
        ValueError: If the table contains invalid entries
    """
    try:
        config = read_pyproject(root)
    except FileNotFoundError:
        return {}
    errors = validate_config(config)
    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))
    return dict(config)


def write_metadata_config(values: Dict[str, str], root: Optional[Path] = None) -> Path:
    """Add or update metadata fields in [tool.cliparams].

    Empty values are skipped; other tables of pyproject.toml are kept.

    Args:
        values: Field name -> text
        root: Project directory (default: cwd)

    Returns:
        Path of the written pyproject.toml

    Raises:
        ValueError: If a field name is unknown
    """
    errors = validate_config(values)
    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

    pyproject_path = _pyproject_path(root)
    if pyproject_path.exists():
        with open(pyproject_path, "r", encoding="utf-8") as f:
            data = toml.load(f)
    else:
        data = {}

    table = data.setdefault("tool", {}).setdefault(TOOL_TABLE, {})
    for name, value in values.items():
        if value:
            table[name] = value

    with open(pyproject_path, "w", encoding="utf-8") as f:
        toml.dump(data, f)
    return pyproject_path
