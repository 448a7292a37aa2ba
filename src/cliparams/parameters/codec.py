"""Canonical text encoding for parameter values.

Every parameter value has one canonical text form. The same text is what
the command line assigns, what the ini file stores and what the manifest
reports as the default, so all three surfaces stay consistent.

Codecs provided:
- BOOLEAN: "true"/"false" out; "true"/"yes"/"false"/"no" or a number in
- INTEGER: decimal integers
- FLOAT: single precision (binary32) floats
- DOUBLE: Python floats, shortest round-trip text
- TEXT: strings, unchanged
- sequence_of(codec): comma-joined element text

Decoding never raises. Text that does not convert falls back to the leading
numeric prefix, or to the zero value of the codec when there is none.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional
import logging
import re

import numpy as np

logger = logging.getLogger(__name__)

SEQUENCE_DELIMITER = ","

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ValueCodec:
    """Bidirectional conversion between a native value and its text.

    Attributes:
        name: Type label of the codec ("boolean", "integer-vector", ...)
        encode: Native value -> canonical text
        decode: Text -> native value (lenient, never raises)
        coerce: Normalize an assigned Python value to the native form
        default: Factory for the zero value
        element: Element codec for sequences, None for scalars
    """
    name: str
    encode: Callable[[Any], str]
    decode: Callable[[str], Any]
    coerce: Callable[[Any], Any]
    default: Callable[[], Any]
    element: Optional["ValueCodec"] = None

    @property
    def is_sequence(self) -> bool:
        return self.element is not None

    @property
    def scalar(self) -> "ValueCodec":
        """The codec of a single item (self for scalars)."""
        return self.element if self.element is not None else self


def parse_int(text: str) -> int:
    """Read the leading integer of ``text``, 0 if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        logger.debug(f"Cannot read integer from {text!r}, using 0")
        return 0
    return int(match.group(1))


def parse_double(text: str) -> float:
    """Read the leading floating point number of ``text``, 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        logger.debug(f"Cannot read number from {text!r}, using 0.0")
        return 0.0
    return float(match.group(1))


def parse_bool(text: str) -> bool:
    """Decode boolean text.

    Accepts "true"/"yes" and "false"/"no" (any case); anything else is
    interpreted as an integer and is true when positive.
    """
    word = text.strip().lower()
    if word in ("true", "yes"):
        return True
    if word in ("false", "no"):
        return False
    return parse_int(text) > 0


def format_bool(value: Any) -> str:
    return "true" if value else "false"


def format_double(value: Any) -> str:
    return repr(float(value))


def to_float32(value: Any) -> float:
    """Round a number to single precision, returned as a Python float."""
    return float(np.float32(value))


def parse_float32(text: str) -> float:
    return to_float32(parse_double(text))


def format_float32(value: Any) -> str:
    # numpy prints the shortest text that reads back to the same float32
    return str(np.float32(value))


def _split_items(text: str) -> List[str]:
    """Split sequence text; a single trailing empty item is dropped."""
    items = text.split(SEQUENCE_DELIMITER)
    if items and items[-1] == "":
        items.pop()
    return items


def sequence_of(element: ValueCodec) -> ValueCodec:
    """Build the comma-separated sequence codec for an element codec.

    Args:
        element: Codec of the items

    Returns:
        Codec named ``<element>-vector`` operating on lists
    """
    def encode(values: Any) -> str:
        return SEQUENCE_DELIMITER.join(element.encode(v) for v in values)

    def decode(text: str) -> List[Any]:
        return [element.decode(item) for item in _split_items(text)]

    def coerce(values: Any) -> List[Any]:
        if isinstance(values, str):
            return decode(values)
        return [element.coerce(v) for v in values]

    return ValueCodec(
        name=f"{element.name}-vector",
        encode=encode,
        decode=decode,
        coerce=coerce,
        default=list,
        element=element,
    )


def _coercer(native: Callable[[Any], Any], parse: Callable[[str], Any]) -> Callable[[Any], Any]:
    """Text goes through the lenient parser, everything else through the native type."""
    def coerce(value: Any) -> Any:
        return parse(value) if isinstance(value, str) else native(value)
    return coerce


BOOLEAN = ValueCodec("boolean", format_bool, parse_bool, _coercer(bool, parse_bool), bool)
INTEGER = ValueCodec("integer", lambda v: str(int(v)), parse_int, _coercer(int, parse_int), int)
FLOAT = ValueCodec("float", format_float32, parse_float32, _coercer(to_float32, parse_float32), float)
DOUBLE = ValueCodec("double", format_double, parse_double, _coercer(float, parse_double), float)
TEXT = ValueCodec("string", str, str, str, str)

INTEGER_SEQUENCE = sequence_of(INTEGER)
FLOAT_SEQUENCE = sequence_of(FLOAT)
DOUBLE_SEQUENCE = sequence_of(DOUBLE)
TEXT_SEQUENCE = sequence_of(TEXT)


def encode(codec: ValueCodec, value: Any) -> str:
    """Encode ``value`` with ``codec`` after normalizing it."""
    return codec.encode(codec.coerce(value))


def decode(codec: ValueCodec, text: str) -> Any:
    """Decode ``text`` with ``codec``."""
    return codec.decode(text)
