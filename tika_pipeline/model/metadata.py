"""Metadata records attached to extracted documents.

A record is additive: every ``add`` call keeps the value next to the ones
already stored under the same name, so repeated ``meta`` tags or JSON arrays
never overwrite each other.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Tuple, Type

from tika_pipeline.core.enums import MetadataRecordType


class MetadataSink(ABC):
    """Interface for metadata records filled by the output parser."""

    @abstractmethod
    def add(self, name: str, value: Any) -> None:
        """Append ``value`` under ``name``."""

    @abstractmethod
    def all(self) -> Dict[str, List[Any]]:
        """Return every field with all of its values, in first-seen order."""

    def get(self, name: str) -> List[Any]:
        """Return all values stored under ``name`` (empty list if unknown)."""
        return list(self.all().get(name, []))

    def first(self, name: str, default: Any = None) -> Any:
        """Return the first value stored under ``name``."""
        values = self.get(name)
        return values[0] if values else default

    def names(self) -> List[str]:
        return list(self.all().keys())

    def to_dict(self) -> Dict[str, Any]:
        """Flatten single-valued fields for serialization."""
        return {
            name: values[0] if len(values) == 1 else list(values)
            for name, values in self.all().items()
        }

    def __contains__(self, name: object) -> bool:
        return name in self.all()

    def __len__(self) -> int:
        return len(self.all())

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fields={self.names()})"


class Metadata(MetadataSink):
    """Mapping of field name to the list of its values."""

    def __init__(self) -> None:
        self._fields: Dict[str, List[Any]] = {}

    def add(self, name: str, value: Any) -> None:
        self._fields.setdefault(name, []).append(value)

    def all(self) -> Dict[str, List[Any]]:
        return {name: list(values) for name, values in self._fields.items()}


class MetadataPairs(MetadataSink):
    """Ordered list of ``(name, value)`` occurrences.

    Keeps the interleaving of fields exactly as the parser saw them, which
    :class:`Metadata` loses once values are grouped by name.
    """

    def __init__(self) -> None:
        self._pairs: List[Tuple[str, Any]] = []

    def add(self, name: str, value: Any) -> None:
        self._pairs.append((name, value))

    def all(self) -> Dict[str, List[Any]]:
        fields: Dict[str, List[Any]] = {}
        for name, value in self._pairs:
            fields.setdefault(name, []).append(value)
        return fields

    def pairs(self) -> List[Tuple[str, Any]]:
        return list(self._pairs)


METADATA_RECORDS: Dict[MetadataRecordType, Type[MetadataSink]] = {
    MetadataRecordType.MAPPING: Metadata,
    MetadataRecordType.PAIRS: MetadataPairs,
}


def create_metadata(record_type: MetadataRecordType = MetadataRecordType.MAPPING) -> MetadataSink:
    """Create an empty metadata record of the configured type."""
    return METADATA_RECORDS[MetadataRecordType(record_type)]()
