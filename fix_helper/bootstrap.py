"""
FIX Helper - Startup

Builds the process-wide catalog and search sessions from a :class:`Config`.
"""

import logging
from typing import Optional

from .core.config import DEFAULT_FIX_VERSION, Config, get_config
from .core.structured_logging import configure_logging
from .dictionary.catalog import SpecCatalog
from .dictionary.loader import load_bundled_catalog, load_catalog_from_directory
from .search.session import SearchSession

logger = logging.getLogger(__name__)


def load_catalog(config: Optional[Config] = None) -> SpecCatalog:
    """
    Load the catalog named by the configuration.

    The catalog always falls back to FIX.4.4. The ``default_version``
    preference only picks the version a session starts on, see
    :func:`create_session`.

    Raises:
        DataException: If a dataset is malformed
        VersionNotFoundException: If the datasets lack FIX.4.4
    """
    config = config or get_config()

    if config.data_path:
        return load_catalog_from_directory(config.data_path, default_version=DEFAULT_FIX_VERSION)
    return load_bundled_catalog(DEFAULT_FIX_VERSION)


def create_session(
    config: Optional[Config] = None,
    catalog: Optional[SpecCatalog] = None,
) -> SearchSession:
    """Create a search session with the configured preferences."""
    config = config or get_config()
    if catalog is None:
        catalog = load_catalog(config)
    return SearchSession(catalog, preferences=config.preferences, reference=config.reference)


def initialize(config: Optional[Config] = None) -> SpecCatalog:
    """Validate configuration, set up logging and load the catalog."""
    config = config or get_config()
    config.validate()
    configure_logging(config)

    logger.info(f"Starting {config.service_name} {config.version} ({config.environment.value})")
    catalog = load_catalog(config)
    logger.info(f"Catalog ready: {len(catalog)} FIX versions, default {catalog.default_version}")
    return catalog
