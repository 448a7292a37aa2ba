"""The closed set of parameter kinds.

A kind names the value type of a parameter and the element it renders as
in the manifest. Each kind carries its value codec and the decorations
(builder setters) that make sense for it. Specialized kinds such as
``file`` or ``point`` reuse a basic codec and only differ in metadata.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet

from . import codec as _codec
from .codec import ValueCodec

# Decoration names accepted by ParamHandle builder setters
ENUMERATION = "enumeration"
FILE_EXTENSIONS = "fileExtensions"
TYPE = "type"
MULTIPLE = "multiple"
COORDINATE_SYSTEM = "coordinateSystem"
RANGE = "range"


class Kind(str, Enum):
    """Parameter kinds, valued by their manifest element name."""
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    INTEGER_VECTOR = "integer-vector"
    FLOAT_VECTOR = "float-vector"
    DOUBLE_VECTOR = "double-vector"
    STRING_VECTOR = "string-vector"

    INTEGER_ENUMERATION = "integer-enumeration"
    FLOAT_ENUMERATION = "float-enumeration"
    DOUBLE_ENUMERATION = "double-enumeration"
    STRING_ENUMERATION = "string-enumeration"
    FILE = "file"
    DIRECTORY = "directory"
    IMAGE = "image"
    GEOMETRY = "geometry"
    POINT = "point"
    REGION = "region"

    def __str__(self) -> str:
        return self.value

    @property
    def codec(self) -> ValueCodec:
        """Value codec shared by all records of this kind."""
        return _CODECS[self]

    @property
    def is_basic(self) -> bool:
        """True for the plain value kinds, False for specialized ones."""
        return self in _BASIC

    @property
    def decorations(self) -> FrozenSet[str]:
        return _DECORATIONS.get(self, frozenset())

    def supports(self, decoration: str) -> bool:
        return decoration in self.decorations

    @classmethod
    def resolve(cls, kind: Any) -> "Kind":
        """Normalize a kind given as Kind, manifest name or Python type.

        Args:
            kind: A Kind, its value ("double", "file", ...) or one of
                bool, int, float, str

        Returns:
            The matching Kind

        Raises:
            ValueError: If a string does not name a kind
            TypeError: If ``kind`` is of an unsupported type
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind)
            except ValueError:
                known = ", ".join(k.value for k in cls)
                raise ValueError(f"Unknown parameter kind '{kind}'. Known kinds: {known}") from None
        if isinstance(kind, type) and kind in _PYTHON_TYPES:
            return _PYTHON_TYPES[kind]
        raise TypeError(f"Parameter kind must be a Kind, kind name or Python type, got {kind!r}")


_CODECS: Dict[Kind, ValueCodec] = {
    Kind.BOOLEAN: _codec.BOOLEAN,
    Kind.INTEGER: _codec.INTEGER,
    Kind.FLOAT: _codec.FLOAT,
    Kind.DOUBLE: _codec.DOUBLE,
    Kind.STRING: _codec.TEXT,
    Kind.INTEGER_VECTOR: _codec.INTEGER_SEQUENCE,
    Kind.FLOAT_VECTOR: _codec.FLOAT_SEQUENCE,
    Kind.DOUBLE_VECTOR: _codec.DOUBLE_SEQUENCE,
    Kind.STRING_VECTOR: _codec.TEXT_SEQUENCE,
    Kind.INTEGER_ENUMERATION: _codec.INTEGER,
    Kind.FLOAT_ENUMERATION: _codec.FLOAT,
    Kind.DOUBLE_ENUMERATION: _codec.DOUBLE,
    Kind.STRING_ENUMERATION: _codec.TEXT,
    Kind.FILE: _codec.TEXT,
    Kind.DIRECTORY: _codec.TEXT,
    Kind.IMAGE: _codec.TEXT,
    Kind.GEOMETRY: _codec.TEXT,
    Kind.POINT: _codec.TEXT_SEQUENCE,
    Kind.REGION: _codec.TEXT_SEQUENCE,
}

_BASIC = frozenset({
    Kind.BOOLEAN,
    Kind.INTEGER,
    Kind.FLOAT,
    Kind.DOUBLE,
    Kind.STRING,
    Kind.INTEGER_VECTOR,
    Kind.FLOAT_VECTOR,
    Kind.DOUBLE_VECTOR,
    Kind.STRING_VECTOR,
})

_DECORATIONS: Dict[Kind, FrozenSet[str]] = {
    Kind.INTEGER: frozenset({RANGE}),
    Kind.FLOAT: frozenset({RANGE}),
    Kind.DOUBLE: frozenset({RANGE}),
    Kind.INTEGER_VECTOR: frozenset({RANGE}),
    Kind.FLOAT_VECTOR: frozenset({RANGE}),
    Kind.DOUBLE_VECTOR: frozenset({RANGE}),
    Kind.INTEGER_ENUMERATION: frozenset({ENUMERATION}),
    Kind.FLOAT_ENUMERATION: frozenset({ENUMERATION}),
    Kind.DOUBLE_ENUMERATION: frozenset({ENUMERATION}),
    Kind.STRING_ENUMERATION: frozenset({ENUMERATION}),
    Kind.FILE: frozenset({FILE_EXTENSIONS}),
    Kind.IMAGE: frozenset({TYPE, FILE_EXTENSIONS}),
    Kind.GEOMETRY: frozenset({TYPE, FILE_EXTENSIONS}),
    Kind.POINT: frozenset({MULTIPLE, COORDINATE_SYSTEM}),
    Kind.REGION: frozenset({MULTIPLE, COORDINATE_SYSTEM}),
}

_PYTHON_TYPES: Dict[type, Kind] = {
    bool: Kind.BOOLEAN,
    int: Kind.INTEGER,
    float: Kind.DOUBLE,
    str: Kind.STRING,
}
