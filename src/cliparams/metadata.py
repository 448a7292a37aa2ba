"""Application metadata shown in the manifest and in the help text."""

from dataclasses import dataclass, fields
from typing import Dict, Iterator, Mapping, Tuple

# Manifest order of the metadata elements: (field name, XML element)
MANIFEST_ORDER: Tuple[Tuple[str, str], ...] = (
    ("category", "category"),
    ("title", "title"),
    ("description", "description"),
    ("version", "version"),
    ("documentation_url", "documentation-url"),
    ("license", "license"),
    ("contributor", "contributor"),
    ("acknowledgements", "acknowledgements"),
)


@dataclass
class AppMetadata:
    """Descriptive fields of an application.

    Attributes:
        title: Application name, also used as program name in the usage line
        description: What the application does
        version: Version string
        category: Menu category for host applications (e.g. "Filtering")
        documentation_url: Link to the documentation
        license: License name
        contributor: Author(s)
        acknowledgements: Funding or other credits
    """
    title: str = ""
    description: str = ""
    version: str = ""
    category: str = ""
    documentation_url: str = ""
    license: str = ""
    contributor: str = ""
    acknowledgements: str = ""

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def manifest_fields(self) -> Iterator[Tuple[str, str]]:
        """Yield (element name, value) for non-empty fields in manifest order."""
        for name, element in MANIFEST_ORDER:
            value = getattr(self, name)
            if value:
                yield element, value

    def update(self, values: Mapping[str, str], overwrite: bool = True) -> None:
        """Merge non-empty ``values`` into this metadata.

        Args:
            values: Field name -> text
            overwrite: If False, only fields that are still empty are filled

        Raises:
            ValueError: If a name is not a metadata field
        """
        known = self.field_names()
        unknown = sorted(set(values) - set(known))
        if unknown:
            raise ValueError(f"Unknown metadata fields: {unknown}. Available: {list(known)}")
        for name, value in values.items():
            if not value:
                continue
            if overwrite or not getattr(self, name):
                setattr(self, name, str(value))

    def to_dict(self) -> Dict[str, str]:
        """Export all fields as a regular dict."""
        return {name: getattr(self, name) for name in self.field_names()}
