"""Text helpers shared by the declaration layer and the renderers."""

from typing import Iterable, Union


def flag_name(section: str, key: str) -> str:
    """Derive the long flag name of a parameter.

    The section and key are joined by a hyphen, lower-cased, and spaces
    become hyphens.

    Example:
        >>> flag_name("Basic Types", "Bool Param")
        'basic-types-bool-param'
    """
    return f"{section}-{key}".lower().replace(" ", "-")


def join_items(values: Union[str, Iterable]) -> str:
    """Join a list of items into comma-separated text; text passes through."""
    if isinstance(values, str):
        return values
    return ",".join(str(v) for v in values)


def split_items(text: str) -> list:
    """Split comma-separated text, dropping empty items."""
    return [item for item in text.split(",") if item]
