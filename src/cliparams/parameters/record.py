"""Parameter records: the value-holding unit of the registry.

A ParamRecord owns the native value of one parameter together with three
open string mappings used by the renderers:

- tags: child elements of the manifest entry ("description", "flag", ...)
- attributes: attributes of the manifest element ("fileExtensions", ...)
- constraints: children of the <constraints> block ("minimum", ...)

The kind of a record is fixed when it is created. Changing the kind of a
(section, key) means installing a new record through the registry.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .kinds import Kind


@dataclass(eq=False)
class ParamRecord:
    """Type-erased holder of one parameter value.

    Attributes:
        kind: Kind of the parameter (immutable)
        value: Native value, normalized by the kind's codec
        tags: Manifest child elements
        attributes: Manifest element attributes
        constraints: Manifest constraint entries
    """
    kind: Kind
    value: Any = None
    tags: Dict[str, str] = field(default_factory=dict)
    attributes: Dict[str, str] = field(default_factory=dict)
    constraints: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Normalize kind and value."""
        kind = Kind.resolve(self.kind)
        object.__setattr__(self, "kind", kind)
        if self.value is None:
            self.value = kind.codec.default()
        else:
            self.value = kind.codec.coerce(self.value)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError(
                "Parameter kind is fixed; replace the record through the registry instead"
            )
        super().__setattr__(name, value)

    @property
    def text(self) -> str:
        """Canonical text of the current value."""
        return self.kind.codec.encode(self.value)

    @text.setter
    def text(self, new_text: str) -> None:
        self.value = self.kind.codec.decode(new_text)

    def copy_metadata_from(self, other: "ParamRecord") -> None:
        """Carry over tags, attributes and constraints this record lacks."""
        for mine, theirs in (
            (self.tags, other.tags),
            (self.attributes, other.attributes),
            (self.constraints, other.constraints),
        ):
            for name, value in theirs.items():
                mine.setdefault(name, value)

    def __repr__(self) -> str:
        return f"ParamRecord({self.kind.value}={self.text!r})"
