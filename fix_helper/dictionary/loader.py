"""
FIX Dictionary Loader

Loads the bundled YAML specification datasets, validates them with pydantic
and builds an immutable :class:`SpecCatalog`. Malformed data is rejected here
so lookups never fail on bad records later on.

Dataset layout (one file per version)::

    version: FIX.4.4
    tags:
      54: {name: Side, type: CHAR}
    enums:
      54:
        "1": Buy
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

import yaml
from prometheus_client import Gauge
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ..core.config import DEFAULT_FIX_VERSION
from ..core.exceptions import DataException
from .catalog import SpecCatalog
from .models import TagDefinition, VersionCatalog

logger = logging.getLogger(__name__)

BUNDLED_DATA_PATH = Path(__file__).parent / "data"

CATALOG_TAGS = Gauge(
    "fix_helper_catalog_tags",
    "Number of tag definitions loaded per FIX version",
    ["version"],
)


class TagRecord(BaseModel):
    """Raw tag entry as stored in a dataset."""

    name: str = Field(..., min_length=1, description="Tag name")
    type: Optional[str] = Field(None, description="FIX data type")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("tag name must not be blank")
        return v.strip()

    @field_validator("type")
    @classmethod
    def type_blank_as_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class VersionRecord(BaseModel):
    """Raw dataset of one FIX version."""

    version: str = Field(..., min_length=1, description="Version identifier")
    tags: Dict[int, TagRecord] = Field(..., description="Tags keyed by number")
    enums: Dict[int, Dict[str, str]] = Field(default_factory=dict, description="Enum values keyed by tag")

    @field_validator("enums", mode="before")
    @classmethod
    def stringify_enum_codes(cls, v):
        # YAML reads unquoted codes such as 1 as integers
        if not isinstance(v, dict):
            return v
        result = {}
        for tag, values in v.items():
            if isinstance(values, dict):
                values = {str(code): str(desc) for code, desc in values.items()}
            result[tag] = values
        return result

    @field_validator("tags")
    @classmethod
    def tag_numbers_positive(cls, v):
        bad = sorted(tag for tag in v if tag <= 0)
        if bad:
            raise ValueError(f"tag numbers must be positive: {bad}")
        return v

    @model_validator(mode="after")
    def enums_reference_known_tags(self):
        for tag, values in self.enums.items():
            if tag not in self.tags:
                raise ValueError(f"enum values given for unknown tag {tag}")
            if not values:
                raise ValueError(f"enum values for tag {tag} must not be empty")
        return self


def build_version_catalog(record: VersionRecord) -> VersionCatalog:
    """Convert a validated record into an immutable version catalog."""
    tags = {
        number: TagDefinition(
            tag_number=number,
            name=tag.name,
            type=tag.type,
            enum_values=record.enums.get(number),
        )
        for number, tag in record.tags.items()
    }
    return VersionCatalog(version_id=record.version, tags=tags)


def parse_version_data(data: Mapping[str, Any], source: str = "<memory>") -> VersionCatalog:
    """
    Validate one version's raw data.

    Raises:
        DataException: If the data does not match the dataset schema
    """
    try:
        record = VersionRecord.model_validate(dict(data))
    except ValidationError as e:
        raise DataException(f"Invalid FIX dataset: {e}", data_source=source)
    return build_version_catalog(record)


def load_version_file(path: Union[str, Path]) -> VersionCatalog:
    """Load and validate one YAML dataset file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise DataException(f"Cannot read FIX dataset: {e}", data_source=str(path))
    except yaml.YAMLError as e:
        raise DataException(f"Invalid YAML in FIX dataset: {e}", data_source=str(path))

    if not isinstance(data, dict):
        raise DataException("FIX dataset must contain a mapping", data_source=str(path))

    catalog = parse_version_data(data, source=str(path))
    logger.debug(f"Loaded {len(catalog)} tags for {catalog.version_id} from {path.name}")
    return catalog


def build_catalog(
    version_catalogs: Iterable[VersionCatalog],
    default_version: str = DEFAULT_FIX_VERSION,
    source: str = "<memory>",
) -> SpecCatalog:
    """
    Assemble version catalogs into a validated :class:`SpecCatalog`.

    Raises:
        DataException: On duplicate version ids
        VersionNotFoundException: If the default version is missing
    """
    versions: Dict[str, VersionCatalog] = {}
    for version_catalog in version_catalogs:
        if version_catalog.version_id in versions:
            raise DataException(
                f"Duplicate FIX version {version_catalog.version_id!r}",
                data_source=source,
            )
        versions[version_catalog.version_id] = version_catalog
        CATALOG_TAGS.labels(version=version_catalog.version_id).set(len(version_catalog))

    catalog = SpecCatalog(versions, default_version=default_version)
    catalog.validate()
    return catalog


def load_specs(
    specs: Mapping[str, Mapping[str, Any]],
    default_version: str = DEFAULT_FIX_VERSION,
) -> SpecCatalog:
    """
    Build a catalog from in-memory data keyed by version id.

    Each value holds ``tags`` and optionally ``enums`` in the dataset layout.
    """
    catalogs = [
        parse_version_data({"version": version_id, **data}, source=version_id)
        for version_id, data in specs.items()
    ]
    return build_catalog(catalogs, default_version=default_version)


def load_catalog_from_directory(
    data_path: Union[str, Path],
    default_version: str = DEFAULT_FIX_VERSION,
) -> SpecCatalog:
    """Load every ``*.yaml`` dataset in a directory."""
    data_path = Path(data_path)
    files = sorted(data_path.glob("*.yaml"))
    if not files:
        raise DataException("No FIX datasets found", data_source=str(data_path))

    catalog = build_catalog(
        (load_version_file(path) for path in files),
        default_version=default_version,
        source=str(data_path),
    )
    logger.info(
        f"Loaded FIX catalog with versions {', '.join(catalog.get_versions())} "
        f"(default {default_version})"
    )
    return catalog


@lru_cache(maxsize=None)
def load_bundled_catalog(default_version: str = DEFAULT_FIX_VERSION) -> SpecCatalog:
    """Load the datasets shipped with the package, once per default version."""
    return load_catalog_from_directory(BUNDLED_DATA_PATH, default_version=default_version)
