"""Public API for cliparams."""

# Application
from .application import Application
from .metadata import AppMetadata

# Parameters
from .parameters import (
    Kind,
    ValueCodec,
    ParamRecord,
    ParameterRegistry,
    ParamHandle,
    declare_param,
)

# Surfaces
from .binder import FlagBinder
from .cmdline import parse_command_line
from .ini import dump_ini, parse_ini, load_ini, save_ini
from .manifest import render_manifest
from .synopsis import render_synopsis

# Utilities
from .utils.imports import load_symbol
from .utils.text import flag_name

# Version
try:
    from importlib.metadata import version
    __version__ = version("cliparams")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Application
    "Application",
    "AppMetadata",

    # Parameters
    "Kind",
    "ValueCodec",
    "ParamRecord",
    "ParameterRegistry",
    "ParamHandle",
    "declare_param",

    # Command line
    "FlagBinder",
    "parse_command_line",

    # Ini
    "dump_ini",
    "parse_ini",
    "load_ini",
    "save_ini",

    # Renderers
    "render_manifest",
    "render_synopsis",

    # Utilities
    "load_symbol",
    "flag_name",

    # Version
    "__version__",
]
