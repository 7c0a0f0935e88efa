"""
Search Session

State of one "Search FIX Tags" command: the selected version, the current
search text and the rows to display. The sorted tag list is built once per
version and re-filtered on every search text change.
"""

import logging
from typing import Dict, List, Optional, Tuple

from fix_helper.core.config import Preferences, ReferenceConfig
from fix_helper.core.exceptions import TagNotFoundException
from fix_helper.dictionary.catalog import SpecCatalog
from fix_helper.dictionary.codes import version_title
from fix_helper.dictionary.models import TagDefinition, VersionCatalog
from fix_helper.search.index import TagSearchIndex
from fix_helper.search.presentation import (
    TagDetailView,
    TagListItem,
    build_detail_view,
    build_list_item,
)

logger = logging.getLogger(__name__)

SEARCH_BAR_PLACEHOLDER = "Search by tag number or name..."


class SearchSession:
    """
    Interactive tag search over a :class:`SpecCatalog`.

    Args:
        catalog: Catalog shared for the process lifetime
        preferences: Host preferences; ``default_version`` is the initially
            selected version and ``show_icons`` controls row icons
        reference: Reference dictionary settings for deep links
    """

    def __init__(
        self,
        catalog: SpecCatalog,
        preferences: Optional[Preferences] = None,
        reference: Optional[ReferenceConfig] = None,
    ):
        self.catalog = catalog
        self.preferences = preferences or Preferences()
        self.reference = reference or ReferenceConfig()
        self._version = self.preferences.default_version
        self._search_text = ""
        self._indexes: Dict[str, TagSearchIndex] = {}

    @property
    def version(self) -> str:
        """Selected version id, as chosen by the user."""
        return self._version

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def spec(self) -> VersionCatalog:
        """Catalog shown for the selected version, after fallback."""
        return self.catalog.get_version(self._version)

    @property
    def fell_back(self) -> bool:
        """True when the selected version is unknown and the default is shown."""
        return not self.catalog.has_version(self._version)

    @property
    def versions(self) -> List[str]:
        return self.catalog.get_versions()

    def version_options(self) -> List[Tuple[str, str]]:
        """Version dropdown entries as (version id, title) pairs."""
        return [(v, version_title(v)) for v in self.catalog.get_versions()]

    @property
    def navigation_title(self) -> str:
        return f"Search FIX Tags ({self._version})"

    def set_version(self, version_id: str) -> None:
        if version_id != self._version:
            logger.debug(f"Version changed from {self._version} to {version_id}")
        self._version = version_id

    def set_search_text(self, text: str) -> None:
        self._search_text = text

    def _index(self) -> TagSearchIndex:
        spec = self.spec
        index = self._indexes.get(spec.version_id)
        if index is None:
            index = TagSearchIndex(spec)
            self._indexes[spec.version_id] = index
        return index

    @property
    def tags(self) -> List[TagDefinition]:
        """All tags of the shown version in ascending order."""
        return self._index().entries

    def filtered_tags(self) -> List[TagDefinition]:
        return self._index().search(self._search_text)

    def results(self) -> List[TagListItem]:
        """Display rows for the current version and search text."""
        # Rows link to the version the user selected, matching the title
        return [
            build_list_item(
                tag,
                self._version,
                show_icons=self.preferences.show_icons,
                base_url=self.reference.base_url,
            )
            for tag in self.filtered_tags()
        ]

    def detail(self, tag_number: int) -> TagDetailView:
        """
        Build the detail view of a tag in the shown version.

        Raises:
            TagNotFoundException: If the tag is not defined in that version
        """
        spec = self.spec
        tag = spec.get_tag(tag_number)
        if tag is None:
            raise TagNotFoundException(
                f"Tag {tag_number} is not defined in {spec.version_id}",
                tag_number=tag_number,
                version_id=spec.version_id,
            )
        return build_detail_view(tag, self._version, base_url=self.reference.base_url)
