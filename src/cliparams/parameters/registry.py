"""The parameter registry.

ParameterRegistry owns every ParamRecord of an application, addressed by
(section, key). Sections and keys keep their first-insertion order, which
drives the order of the manifest, the ini output and the help text.
"""

from typing import Dict, Iterator, List, Optional, Tuple
import logging

from .record import ParamRecord

logger = logging.getLogger(__name__)


class ParameterRegistry:
    """Two-level ordered mapping section -> key -> ParamRecord.

    At most one record exists per (section, key). Replacing a record keeps
    its position in the iteration order and its text value.
    """

    def __init__(self):
        self._sections: Dict[str, Dict[str, ParamRecord]] = {}

    def lookup(self, section: str, key: str) -> Optional[ParamRecord]:
        """Return the record for (section, key), or None. Never creates."""
        return self._sections.get(section, {}).get(key)

    def get(self, section: str, key: str) -> ParamRecord:
        """Return the record for (section, key).

        Raises:
            KeyError: If the parameter was never declared
        """
        record = self.lookup(section, key)
        if record is None:
            available = sorted(f"{s}/{k}" for s, k, _ in self.walk())
            raise KeyError(f"Unknown parameter: {section}/{key}. Available: {available}")
        return record

    def insert_or_replace(self, section: str, key: str, record: ParamRecord) -> ParamRecord:
        """Install ``record`` at (section, key), preserving any previous value.

        The text of an existing record is captured before it is dropped and
        decoded into the new record when non-empty. Metadata the new record
        does not set itself is carried over from the old one.

        Args:
            section: Section name
            key: Key name within the section
            record: The record to install; the registry takes ownership

        Returns:
            The installed record
        """
        keys = self._sections.setdefault(section, {})
        previous = keys.get(key)
        keys[key] = record
        if previous is None or previous is record:
            return record

        text = previous.text
        record.copy_metadata_from(previous)
        if text:
            record.text = text
        if previous.kind is not record.kind:
            logger.debug(f"Replaced {section}/{key}: {previous.kind.value} -> {record.kind.value}")
        return record

    def sections(self) -> List[str]:
        """Section names in first-insertion order."""
        return list(self._sections)

    def items(self, section: str) -> List[Tuple[str, ParamRecord]]:
        """(key, record) pairs of one section in first-insertion order."""
        return list(self._sections.get(section, {}).items())

    def walk(self) -> Iterator[Tuple[str, str, ParamRecord]]:
        """Iterate (section, key, record) over the whole registry."""
        for section, keys in self._sections.items():
            for key, record in keys.items():
                yield section, key, record

    def clear(self) -> None:
        """Drop every record."""
        self._sections.clear()

    def __contains__(self, address: Tuple[str, str]) -> bool:
        section, key = address
        return self.lookup(section, key) is not None

    def __len__(self) -> int:
        return sum(len(keys) for keys in self._sections.values())

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for section, key, _ in self.walk():
            yield section, key
