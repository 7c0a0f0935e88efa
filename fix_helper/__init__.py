"""
FIX Helper

Browse and search FIX protocol tag definitions (tag number, name, type and
enumerated values) across FIX versions, and link tags to the OnixS FIX
dictionary.
"""

from .core import Config, Preferences, configure_logging
from .core.exceptions import (
    FixHelperException,
    ConfigurationException,
    VersionNotFoundException,
    TagNotFoundException,
    DataException,
)
from .dictionary import SpecCatalog, TagDefinition, VersionCatalog, load_bundled_catalog
from .search import SearchSession, TagSearchIndex, build_sorted_list, filter_tags, get_onixs_url
from .bootstrap import create_session, initialize, load_catalog

__version__ = "1.0.0"
__all__ = [
    "Config",
    "Preferences",
    "configure_logging",
    "FixHelperException",
    "ConfigurationException",
    "VersionNotFoundException",
    "TagNotFoundException",
    "DataException",
    "SpecCatalog",
    "TagDefinition",
    "VersionCatalog",
    "load_bundled_catalog",
    "SearchSession",
    "TagSearchIndex",
    "build_sorted_list",
    "filter_tags",
    "get_onixs_url",
    "create_session",
    "initialize",
    "load_catalog",
]
