"""Declaration handles for parameters.

A ParamHandle is a small, non-owning view of one (section, key) in an
explicit registry. It never stores a value itself: reads and writes go to
the record held by the registry, converted through the handle's own kind.

Creating a handle declares the parameter:

- unknown (section, key): a fresh record of the handle's kind is inserted
  and its long flag ("--section-key") is bound
- known, same kind: plain lookup
- known, different kind: the record is replaced by one of the handle's
  kind, keeping its text value. A basic handle over a specialized record
  (a double handle over a double-enumeration) is a converting view
  instead; ``retype()`` forces the replacement

Setters return the handle so declarations read as one chained expression:

    >>> app.param("Special", "File", Kind.FILE) \\
    ...     .set_file_extensions(["nii", "nrrd"]) \\
    ...     .declare("Input file", 0)
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from ..binder import FlagBinder
from ..constants import (
    TAG_CHANNEL,
    TAG_DESCRIPTION,
    TAG_ENUMERATION,
    TAG_FLAG,
    TAG_INDEX,
    TAG_LABEL,
    TAG_LONGFLAG,
)
from ..utils.text import flag_name, join_items
from . import kinds
from .kinds import Kind
from .record import ParamRecord
from .registry import ParameterRegistry


def declare_param(
    registry: ParameterRegistry,
    binder: FlagBinder,
    section: str,
    key: str,
    kind: Any = Kind.STRING,
    retype: bool = False,
) -> "ParamHandle":
    """Declare (section, key) and return a handle to it.

    Args:
        registry: Registry that owns the record
        binder: Binder receiving the default long flag
        section: Section name
        key: Key name within the section
        kind: Kind of the handle (Kind, kind name or Python type)
        retype: Replace an existing specialized record even when the
            handle's kind is a basic one

    Returns:
        Handle addressing (section, key)
    """
    kind = Kind.resolve(kind)
    existing = registry.lookup(section, key)
    view_only = kind.is_basic and existing is not None and not existing.kind.is_basic
    if existing is None or (existing.kind is not kind and (retype or not view_only)):
        record = registry.insert_or_replace(section, key, ParamRecord(kind))
        # Records created from ini text have no command-line binding yet
        if not binder.bindings_for(section, key):
            name = flag_name(section, key)
            binder.bind_long(name, section, key)
            record.tags[TAG_LONGFLAG] = name
    return ParamHandle(registry, binder, section, key, kind)


@dataclass
class ParamHandle:
    """Non-owning reference to one declared parameter.

    Attributes:
        registry: Registry holding the record
        binder: Binder used by ``declare``
        section: Section name
        key: Key name
        kind: Static kind used to convert values on get/set
    """
    registry: ParameterRegistry
    binder: FlagBinder
    section: str
    key: str
    kind: Kind

    @property
    def record(self) -> ParamRecord:
        return self.registry.get(self.section, self.key)

    @property
    def name(self) -> str:
        """Normalized flag name of this parameter."""
        return flag_name(self.section, self.key)

    # -- values ------------------------------------------------------------

    def get(self) -> Any:
        """Current value, converted to the handle's kind."""
        record = self.record
        if record.kind.codec is self.kind.codec:
            return record.value
        return self.kind.codec.decode(record.text)

    def set(self, value: Any) -> "ParamHandle":
        """Assign ``value`` (interpreted with the handle's kind)."""
        record = self.record
        value = self.kind.codec.coerce(value)
        if record.kind.codec is self.kind.codec:
            record.value = value
        else:
            record.text = self.kind.codec.encode(value)
        return self

    @property
    def value(self) -> Any:
        return self.get()

    @value.setter
    def value(self, value: Any) -> None:
        self.set(value)

    @property
    def text(self) -> str:
        return self.record.text

    @text.setter
    def text(self, new_text: str) -> None:
        self.record.text = new_text

    def retype(self) -> "ParamHandle":
        """Replace the record with one of this handle's kind, keeping its value."""
        return declare_param(self.registry, self.binder, self.section, self.key, self.kind, retype=True)

    # -- free-text metadata -------------------------------------------------

    def set_tag(self, name: str, value: str) -> "ParamHandle":
        self.record.tags[name] = value
        return self

    def set_attribute(self, name: str, value: str) -> "ParamHandle":
        self.record.attributes[name] = value
        return self

    def set_constraint(self, name: str, value: str) -> "ParamHandle":
        self.record.constraints[name] = value
        return self

    def set_description(self, description: str) -> "ParamHandle":
        """Verbose description shown in the manifest and in the help text."""
        return self.set_tag(TAG_DESCRIPTION, description)

    def set_label(self, label: str) -> "ParamHandle":
        return self.set_tag(TAG_LABEL, label)

    def set_channel(self, is_input: bool) -> "ParamHandle":
        """Mark the parameter as an input or output channel."""
        return self.set_tag(TAG_CHANNEL, "input" if is_input else "output")

    # -- command line -------------------------------------------------------

    def declare(self, description: str, flag: Union[str, int] = "") -> "ParamHandle":
        """Make the parameter settable from the command line.

        With a string (possibly empty) ``flag``, the long flag
        ``--section-key`` is bound and, if given, the one-character short
        flag ``-flag`` as well. With an integer ``flag``, the parameter
        becomes positional argument number ``flag``; a long flag bound
        earlier stays usable as an alias.

        Args:
            description: Help text for the parameter
            flag: Short flag character, or a positional index

        Returns:
            This handle

        Raises:
            ValueError: If the short flag is not one character or the index
                is negative
        """
        if isinstance(flag, int) and not isinstance(flag, bool):
            return self._declare_index(description, flag)

        record = self.record
        name = self.name
        self.binder.bind_long(name, self.section, self.key)
        record.tags[TAG_LONGFLAG] = name
        if flag:
            self.binder.bind_short(flag, self.section, self.key)
            record.tags[TAG_FLAG] = flag.lstrip("-")
        record.tags[TAG_DESCRIPTION] = description
        return self

    def _declare_index(self, description: str, index: int) -> "ParamHandle":
        record = self.record
        self.binder.bind_index(index, self.section, self.key)
        # Positional entries carry no flag tags in the manifest
        record.tags.pop(TAG_FLAG, None)
        record.tags.pop(TAG_LONGFLAG, None)
        record.tags[TAG_INDEX] = str(index)
        record.tags[TAG_DESCRIPTION] = description
        return self

    # -- kind specific decorations --------------------------------------------

    def _require(self, decoration: str) -> ParamRecord:
        record = self.record
        if not record.kind.supports(decoration):
            raise ValueError(
                f"Parameter {self.section}/{self.key} of kind '{record.kind.value}' "
                f"does not support '{decoration}'"
            )
        return record

    def set_enumeration(self, values: Union[str, Iterable[Any]]) -> "ParamHandle":
        """Possible values of an enumeration kind (list or comma-separated text)."""
        record = self._require(kinds.ENUMERATION)
        record.tags[TAG_ENUMERATION] = join_items(values)
        return self

    def set_file_extensions(self, extensions: Union[str, Iterable[str]]) -> "ParamHandle":
        record = self._require(kinds.FILE_EXTENSIONS)
        record.attributes[kinds.FILE_EXTENSIONS] = join_items(extensions)
        return self

    def set_type(self, type_name: str) -> "ParamHandle":
        """Pixel or geometry type of an image/geometry parameter (e.g. "label")."""
        record = self._require(kinds.TYPE)
        record.attributes[kinds.TYPE] = type_name
        return self

    def set_multiple(self, multiple: Union[bool, str]) -> "ParamHandle":
        record = self._require(kinds.MULTIPLE)
        if isinstance(multiple, bool):
            multiple = "true" if multiple else "false"
        record.attributes[kinds.MULTIPLE] = multiple
        return self

    def set_coordinate_system(self, system: str) -> "ParamHandle":
        """Coordinate system of a point/region parameter ("ras", "ijk", ...)."""
        record = self._require(kinds.COORDINATE_SYSTEM)
        record.attributes[kinds.COORDINATE_SYSTEM] = system
        return self

    def set_range(self, minimum: Any, maximum: Any, step: Optional[Any] = None) -> "ParamHandle":
        """Slider range of a numeric parameter.

        Args:
            minimum: Lower end of the range
            maximum: Upper end of the range
            step: Slider step; defaults to 1 for integers and 0.01 otherwise

        Returns:
            This handle
        """
        record = self._require(kinds.RANGE)
        scalar = record.kind.codec.scalar
        if step is None:
            step = 1 if scalar is Kind.INTEGER.codec else 0.01
        record.constraints["minimum"] = scalar.encode(scalar.coerce(minimum))
        record.constraints["maximum"] = scalar.encode(scalar.coerce(maximum))
        record.constraints["step"] = scalar.encode(scalar.coerce(step))
        return self

    def __repr__(self) -> str:
        return f"ParamHandle({self.section}/{self.key}: {self.kind.value})"
