"""Applications: one registry, one binder and one metadata record.

Application bundles the state a command-line program needs and exposes the
parameter operations as methods. There is no global instance; programs
create their own and independent applications never share parameters.

Example:
    >>> app = Application("Smoothing", "Gaussian smoothing of an image")
    >>> app.param("Filter", "Sigma", Kind.DOUBLE).set(1.5).declare("Kernel width", "s")
    >>> app.param("IO", "Input", Kind.IMAGE).declare("Input image", 0)
    >>> rest = app.parse_command_line(["-s", "2.0", "brain.nii"])
    >>> app.param("Filter", "Sigma", float).value
    2.0
"""

from pathlib import Path
from typing import Any, List, Optional, Union
import sys

from .binder import FlagBinder
from .cmdline import parse_command_line
from .ini import dump_ini, load_ini, parse_ini, save_ini
from .manifest import render_manifest
from .metadata import AppMetadata
from .parameters.handle import ParamHandle, declare_param
from .parameters.kinds import Kind
from .parameters.registry import ParameterRegistry
from .synopsis import render_synopsis


class Application:
    """A command-line program described by its parameters.

    Attributes:
        metadata: Title, description, version and other descriptive fields
        registry: All declared parameters
        binder: Command-line token bindings
    """

    def __init__(self, title: str = "", description: str = "", **metadata: str):
        """Create an application.

        Args:
            title: Application title (also the program name in --help)
            description: What the application does
            **metadata: Further AppMetadata fields (version, category, ...)

        Raises:
            ValueError: If a metadata field is unknown
        """
        self.metadata = AppMetadata(title=title, description=description)
        self.metadata.update(metadata)
        self.registry = ParameterRegistry()
        self.binder = FlagBinder()

    def param(self, section: str, key: str, kind: Any = Kind.STRING) -> ParamHandle:
        """Declare (or look up) a parameter and return its handle.

        Args:
            section: Section name
            key: Key name
            kind: Kind, kind name ("double", "file", ...) or Python type

        Returns:
            Handle for reading, writing and decorating the parameter
        """
        return declare_param(self.registry, self.binder, section, key, kind)

    def parse_command_line(self, argv: Optional[List[str]] = None) -> List[str]:
        """Assign values from the command line.

        Args:
            argv: Arguments without the program name; defaults to a copy of
                ``sys.argv[1:]``. The list is modified in place.

        Returns:
            The arguments that were not handled
        """
        if argv is None:
            argv = list(sys.argv[1:])
        return parse_command_line(argv, self.registry, self.binder, self.metadata)

    def parse_ini(self, text: str) -> int:
        """Assign values from ini text; returns the number of values read."""
        return parse_ini(text, self.registry)

    def to_ini(self) -> str:
        return dump_ini(self.registry)

    def load(self, path: Union[str, Path]) -> bool:
        """Load values from an ini file; False if it cannot be read."""
        return load_ini(path, self.registry)

    def save(self, path: Union[str, Path]) -> None:
        save_ini(path, self.registry)

    def xml_description(self) -> str:
        """The XML manifest describing this application."""
        return render_manifest(self.registry, self.metadata)

    def synopsis(self, prog: Optional[str] = None) -> str:
        return render_synopsis(self.registry, self.metadata, prog)

    def __repr__(self) -> str:
        return f"Application({self.metadata.title!r}, {len(self.registry)} parameters)"
