"""
FIX Specification Catalog

Read-only mapping from FIX version identifiers to their tag catalogs, with
fallback to a configured default version.
"""

import logging
from types import MappingProxyType
from typing import Iterator, List, Mapping

from prometheus_client import Counter

from ..core.config import DEFAULT_FIX_VERSION
from ..core.exceptions import VersionNotFoundException
from .codes import FixVersion
from .models import VersionCatalog

logger = logging.getLogger(__name__)

VERSION_FALLBACKS = Counter(
    "fix_helper_version_fallback_total",
    "Lookups of unknown FIX versions answered with the default version",
    ["requested"],
)

UNKNOWN_VERSION_LABEL = "unknown"


def _fallback_label(version_id: str) -> str:
    # Free-form ids share one label so the series count stays bounded
    if FixVersion.from_string(version_id) is not None:
        return version_id
    return UNKNOWN_VERSION_LABEL


class SpecCatalog:
    """
    Immutable catalog of FIX versions.

    Built once at startup and shared for the process lifetime. Lookups of an
    unknown version id fall back to ``default_version``; only a missing
    default raises.
    """

    def __init__(
        self,
        versions: Mapping[str, VersionCatalog],
        default_version: str = DEFAULT_FIX_VERSION,
    ):
        self._versions: Mapping[str, VersionCatalog] = MappingProxyType(dict(versions))
        self._default_version = default_version

    @property
    def default_version(self) -> str:
        return self._default_version

    def get_versions(self) -> List[str]:
        """Get version ids in lexicographic order."""
        return sorted(self._versions)

    def has_version(self, version_id: str) -> bool:
        return version_id in self._versions

    def get_version(self, version_id: str) -> VersionCatalog:
        """
        Get the catalog for a version.

        Args:
            version_id: Version identifier such as ``FIX.4.4``

        Returns:
            The requested version's catalog, or the default version's catalog
            when the requested id is unknown

        Raises:
            VersionNotFoundException: If the default version is missing too
        """
        catalog = self._versions.get(version_id)
        if catalog is not None:
            return catalog

        default = self._versions.get(self._default_version)
        if default is None:
            raise VersionNotFoundException(
                f"FIX version {version_id!r} not found and default version "
                f"{self._default_version!r} is not available",
                requested=version_id,
                default=self._default_version,
            )

        logger.warning(
            f"Unknown FIX version {version_id!r}, falling back to {self._default_version}"
        )
        VERSION_FALLBACKS.labels(requested=_fallback_label(version_id)).inc()
        return default

    def with_default(self, default_version: str) -> "SpecCatalog":
        """Get a catalog sharing the same versions with another default."""
        return SpecCatalog(self._versions, default_version=default_version)

    def validate(self) -> None:
        """Ensure the default version is present."""
        if self._default_version not in self._versions:
            raise VersionNotFoundException(
                f"Default FIX version {self._default_version!r} is not in the catalog "
                f"(available: {', '.join(self.get_versions()) or 'none'})",
                default=self._default_version,
            )

    def __len__(self) -> int:
        return len(self._versions)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_versions())

    def __contains__(self, version_id: object) -> bool:
        return version_id in self._versions

    def __repr__(self) -> str:
        return f"SpecCatalog(versions={self.get_versions()}, default={self._default_version!r})"
