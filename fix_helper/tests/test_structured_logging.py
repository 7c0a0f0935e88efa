"""
Tests for structured logging.
"""

import json
import logging
import sys

from fix_helper.core.config import Config, LogLevel
from fix_helper.core.structured_logging import (
    LogCategory,
    StructuredFormatter,
    build_logging_config,
)


def _record(message="Catalog ready", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="fix_helper.dictionary.loader",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for JSON log formatting."""

    def test_basic_record(self):
        """Test the JSON fields of a plain record."""
        payload = json.loads(StructuredFormatter().format(_record()))

        assert payload["message"] == "Catalog ready"
        assert payload["level"] == "INFO"
        assert payload["category"] == "system"
        assert payload["component"] == "fix_helper.dictionary.loader"
        assert payload["iso_timestamp"].endswith("+00:00")

    def test_extra_fields(self):
        """Test category, operation and metadata passed via extra."""
        record = _record(
            category=LogCategory.SEARCH,
            operation="filter",
            metadata={"version": "FIX.4.4", "results": 3},
        )
        payload = json.loads(StructuredFormatter().format(record))

        assert payload["category"] == "search"
        assert payload["operation"] == "filter"
        assert payload["metadata"] == {"version": "FIX.4.4", "results": 3}

    def test_category_by_value(self):
        """Test a plain string category."""
        payload = json.loads(StructuredFormatter().format(_record(category="catalog")))
        assert payload["category"] == "catalog"

    def test_metadata_suppressed(self):
        """Test metadata can be left out."""
        record = _record(metadata={"secret": 1})
        payload = json.loads(StructuredFormatter(include_metadata=False).format(record))
        assert payload["metadata"] == {}

    def test_exception(self):
        """Test exception details are included."""
        try:
            raise ValueError("bad dataset")
        except ValueError:
            record = _record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        payload = json.loads(StructuredFormatter().format(record))
        assert payload["exception"]["type"] == "ValueError"
        assert payload["exception"]["message"] == "bad dataset"


class TestBuildLoggingConfig:
    """Tests for the dictConfig mapping."""

    def test_defaults(self):
        """Test the mapping without configuration."""
        mapping = build_logging_config()
        assert mapping["handlers"]["console"]["formatter"] == "simple"
        assert mapping["loggers"]["fix_helper"]["level"] == "INFO"

    def test_from_config(self):
        """Test level and formatter come from the configuration."""
        config = Config()
        config.log_level = LogLevel.DEBUG
        config.structured_logs = True

        mapping = build_logging_config(config)
        assert mapping["handlers"]["console"]["formatter"] == "structured"
        assert mapping["handlers"]["console"]["level"] == "DEBUG"
        assert mapping["loggers"]["fix_helper"]["level"] == "DEBUG"
