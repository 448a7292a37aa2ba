"""Import helpers for loading applications from user code.

The command-line tool refers to an application as ``module:attribute`` or
``path/to/file.py:attribute``. Module references are tried on the normal
import path first and then with the project root temporarily prepended to
``sys.path``.
"""

from __future__ import annotations
from contextlib import contextmanager
from importlib import import_module, util
from pathlib import Path
import logging
import os
import sys
import types
from typing import Any, Optional

logger = logging.getLogger(__name__)


@contextmanager
def _prepend_sys_path(path: str):
    """Temporarily put ``path`` first on sys.path."""
    resolved = str(Path(path).resolve())
    added = resolved not in sys.path
    if added:
        sys.path.insert(0, resolved)
    try:
        yield
    finally:
        if added and resolved in sys.path:
            sys.path.remove(resolved)


def _import_from_file(pyfile: str) -> types.ModuleType:
    """Execute a Python file as a module and return it.

    Raises:
        ModuleNotFoundError: If the file does not exist or cannot be loaded
    """
    py = Path(pyfile).resolve()
    if not py.exists():
        raise ModuleNotFoundError(f"No such file: {py}")
    spec = util.spec_from_file_location(py.stem, py)
    if spec is None or spec.loader is None:
        raise ModuleNotFoundError(f"Could not load module from {py}")
    module = util.module_from_spec(spec)
    spec.loader.exec_module(module)  # type: ignore[attr-defined]
    return module


def _attribute(module: types.ModuleType, name: str, where: str) -> Any:
    if not hasattr(module, name):
        raise AttributeError(f"Module {where} has no attribute '{name}'")
    return getattr(module, name)


def load_symbol(qualified: str, project_root: Optional[str] = None) -> Any:
    """Load an attribute from ``module:attr`` or ``file.py:attr``.

    Args:
        qualified: Reference such as "tools.smooth:app" or "./smooth.py:app"
        project_root: Directory added to sys.path for module references
            that are not importable as-is (default: cwd)

    Returns:
        The referenced object

    Raises:
        ValueError: If the reference has no ':'
        ModuleNotFoundError: If the module cannot be imported
        AttributeError: If the attribute does not exist

    Examples:
        >>> app = load_symbol("tools.smooth:app")
        >>> app = load_symbol("./tools/smooth.py:app")
    """
    module_part, sep, name = qualified.partition(":")
    if not sep or not name:
        raise ValueError(f"Expected 'module_or_file:attribute' format, got: {qualified}")

    if module_part.endswith(".py") or "/" in module_part or "\\" in module_part:
        return _attribute(_import_from_file(module_part), name, module_part)

    try:
        return _attribute(import_module(module_part), name, module_part)
    except ModuleNotFoundError:
        logger.debug(f"{module_part} not importable, retrying from project root")

    root = Path(project_root or os.getcwd()).resolve()
    with _prepend_sys_path(str(root)):
        try:
            module = import_module(module_part)
        except ModuleNotFoundError:
            raise ModuleNotFoundError(
                f"Cannot import '{module_part}' even with project root '{root}' in path. "
                f"Check that the module path is correct and the file exists."
            )
        return _attribute(module, name, module_part)
