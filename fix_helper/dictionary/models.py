"""
FIX Dictionary Structures

Immutable value objects for tag definitions and per-version catalogs.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


def _freeze(mapping: Optional[Mapping]) -> Optional[Mapping]:
    if mapping is None:
        return None
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class TagDefinition:
    """
    A single FIX tag.

    Attributes:
        tag_number: Positive tag number, unique within a version
        name: Field name, e.g. ``Side``
        type: FIX data type, e.g. ``CHAR``
        enum_values: Valid codes mapped to their descriptions, never empty
            when present
    """

    tag_number: int
    name: str
    type: Optional[str] = None
    enum_values: Optional[Mapping[str, str]] = None

    def __post_init__(self):
        object.__setattr__(self, "enum_values", _freeze(self.enum_values))

    @property
    def enum_count(self) -> int:
        return len(self.enum_values) if self.enum_values else 0

    @property
    def has_enums(self) -> bool:
        return self.enum_count > 0


@dataclass(frozen=True)
class VersionCatalog:
    """Tag definitions of one FIX protocol revision."""

    version_id: str
    tags: Mapping[int, TagDefinition] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "tags", _freeze(self.tags))

    def get_tag(self, tag_number: int) -> Optional[TagDefinition]:
        return self.tags.get(tag_number)

    def __len__(self) -> int:
        return len(self.tags)

    def __iter__(self) -> Iterator[TagDefinition]:
        return iter(self.tags.values())

    def __contains__(self, tag_number: object) -> bool:
        return tag_number in self.tags
