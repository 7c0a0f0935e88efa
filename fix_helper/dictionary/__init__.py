"""
FIX Dictionary

Bundled FIX tag definitions for several protocol versions:
- FIX 4.2, 4.4 and 5.0 SP2 datasets
- Immutable per-version catalogs keyed by tag number
- Lookup with fallback to a default version
"""

from fix_helper.dictionary.codes import (
    FixVersion,
    HEADER_TAGS,
    TRAILER_TAGS,
    reference_path_for,
    version_title,
)
from fix_helper.dictionary.models import (
    TagDefinition,
    VersionCatalog,
)
from fix_helper.dictionary.catalog import SpecCatalog
from fix_helper.dictionary.loader import (
    BUNDLED_DATA_PATH,
    build_catalog,
    load_bundled_catalog,
    load_catalog_from_directory,
    load_specs,
    load_version_file,
    parse_version_data,
)

__all__ = [
    # Codes
    "FixVersion",
    "HEADER_TAGS",
    "TRAILER_TAGS",
    "reference_path_for",
    "version_title",
    # Structures
    "TagDefinition",
    "VersionCatalog",
    "SpecCatalog",
    # Loading
    "BUNDLED_DATA_PATH",
    "build_catalog",
    "load_bundled_catalog",
    "load_catalog_from_directory",
    "load_specs",
    "load_version_file",
    "parse_version_data",
]
