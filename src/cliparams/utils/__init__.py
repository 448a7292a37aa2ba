"""Helpers shared by the library and the command-line tool."""

from .imports import load_symbol
from .text import flag_name

__all__ = ["load_symbol", "flag_name"]
