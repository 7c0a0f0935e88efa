"""
Tag Search Index

Sorted, filterable view over one version's tag definitions. Matching is
case-insensitive substring containment over a composite text of tag number,
name, type and enum descriptions; results keep ascending tag-number order.
"""

import logging
from typing import Iterable, List, Sequence

from prometheus_client import Counter

from fix_helper.dictionary.models import TagDefinition, VersionCatalog

logger = logging.getLogger(__name__)

SEARCH_COUNTER = Counter(
    "fix_helper_search_total",
    "Filter passes over a version's tag list",
    ["version"],
)


def build_sorted_list(version_catalog: VersionCatalog) -> List[TagDefinition]:
    """Get the version's tags ordered by ascending tag number."""
    return sorted(version_catalog.tags.values(), key=lambda tag: tag.tag_number)


def composite_text(tag: TagDefinition) -> str:
    """Build the lowercase text a query is matched against."""
    enum_text = " ".join(tag.enum_values.values()) if tag.enum_values else ""
    return f"{tag.tag_number} {tag.name} {tag.type or ''} {enum_text}".lower()


def filter_tags(sorted_list: Sequence[TagDefinition], query: str) -> List[TagDefinition]:
    """
    Filter tags by a search string.

    Args:
        sorted_list: Tags in display order
        query: Free text; empty returns every tag

    Returns:
        Matching tags in their input order
    """
    return _select(sorted_list, (composite_text(tag) for tag in sorted_list), query)


def _select(
    tags: Sequence[TagDefinition], texts: Iterable[str], query: str
) -> List[TagDefinition]:
    # texts[i] is the composite text of tags[i]
    if not query:
        return list(tags)

    needle = query.lower()
    return [tag for tag, text in zip(tags, texts) if needle in text]


class TagSearchIndex:
    """
    Search index for a single FIX version.

    The tag list is sorted once on construction; :meth:`search` re-filters it
    for every query.
    """

    def __init__(self, version_catalog: VersionCatalog):
        self.version_id = version_catalog.version_id
        self._entries = build_sorted_list(version_catalog)
        # Composite texts are fixed for the index lifetime
        self._texts = [composite_text(tag) for tag in self._entries]

    @property
    def entries(self) -> List[TagDefinition]:
        return list(self._entries)

    def search(self, query: str) -> List[TagDefinition]:
        """Get the tags matching ``query`` in ascending tag-number order."""
        SEARCH_COUNTER.labels(version=self.version_id).inc()
        results = _select(self._entries, self._texts, query)
        logger.debug(
            f"Search {query!r} in {self.version_id}: {len(results)}/{len(self._entries)} tags"
        )
        return results

    def __len__(self) -> int:
        return len(self._entries)
