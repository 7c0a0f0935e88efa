"""
FIX Helper - Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

import pytest
import yaml

from fix_helper.core.config import Config, Environment, Preferences
from fix_helper.dictionary.loader import load_bundled_catalog, load_specs


SAMPLE_SPECS = {
    "FIX.4.4": {
        "tags": {
            54: {"name": "Side", "type": "CHAR"},
            55: {"name": "Symbol"},
        },
        "enums": {
            54: {"1": "Buy", "2": "Sell"},
        },
    },
    "FIX.4.2": {
        "tags": {
            40: {"name": "OrdType", "type": "char"},
            35: {"name": "MsgType", "type": "String"},
            8: {"name": "BeginString", "type": "String"},
        },
        "enums": {
            40: {"1": "Market", "2": "Limit"},
        },
    },
}


@pytest.fixture
def sample_specs():
    """Raw in-memory datasets keyed by version."""
    return SAMPLE_SPECS


@pytest.fixture
def sample_catalog():
    """Small catalog with FIX.4.4 as default."""
    return load_specs(SAMPLE_SPECS, default_version="FIX.4.4")


@pytest.fixture
def bundled_catalog():
    """Catalog built from the datasets shipped with the package."""
    return load_bundled_catalog("FIX.4.4")


@pytest.fixture
def test_config():
    """Create test configuration."""
    config = Config()
    config.environment = Environment.TESTING
    config.preferences = Preferences(default_version="FIX.4.4", show_icons=True)
    return config


@pytest.fixture
def dataset_dir(tmp_path):
    """Directory holding two small YAML datasets."""
    for version_id, data in SAMPLE_SPECS.items():
        path = tmp_path / f"{version_id}.yaml"
        path.write_text(yaml.safe_dump({"version": version_id, **data}))
    return tmp_path
