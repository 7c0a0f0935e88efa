"""
FIX Helper - Structured Logging

JSON log formatting and logging setup driven by :class:`Config`.
"""

import json
import logging
import logging.config
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config


class LogCategory(Enum):
    """Log categories for filtering and routing."""
    SYSTEM = "system"
    CATALOG = "catalog"
    SEARCH = "search"
    CONFIGURATION = "configuration"


@dataclass
class LogEvent:
    """Structured log event."""
    timestamp: float
    level: str
    category: LogCategory
    message: str
    component: str
    operation: Optional[str] = None
    exception: Optional[BaseException] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'timestamp': self.timestamp,
            'iso_timestamp': datetime.fromtimestamp(self.timestamp, timezone.utc).isoformat(),
            'level': self.level,
            'category': self.category.value,
            'message': self.message,
            'component': self.component,
            'operation': self.operation,
            'metadata': self.metadata
        }

        if self.exception:
            result['exception'] = {
                'type': type(self.exception).__name__,
                'message': str(self.exception),
                'traceback': traceback.format_exception(
                    type(self.exception), self.exception, self.exception.__traceback__
                )
            }

        return result

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


class StructuredFormatter(logging.Formatter):
    """Formats log records as one JSON object per line."""

    def __init__(self, include_metadata: bool = True):
        super().__init__()
        self.include_metadata = include_metadata

    def format(self, record: logging.LogRecord) -> str:
        category = getattr(record, 'category', LogCategory.SYSTEM)
        if not isinstance(category, LogCategory):
            category = LogCategory(category)

        log_event = LogEvent(
            timestamp=record.created,
            level=record.levelname,
            category=category,
            message=record.getMessage(),
            component=getattr(record, 'component', record.name),
            operation=getattr(record, 'operation', None),
            exception=record.exc_info[1] if record.exc_info else None,
            metadata=getattr(record, 'metadata', {}) if self.include_metadata else {},
        )

        return log_event.to_json()


def build_logging_config(config: Optional["Config"] = None) -> Dict[str, Any]:
    """Build a ``dictConfig`` mapping for the given configuration."""
    level = config.log_level.value if config else 'INFO'
    formatter = 'structured' if config and config.structured_logs else 'simple'

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'structured': {
                '()': StructuredFormatter,
                'include_metadata': True
            },
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': level,
                'formatter': formatter,
                'stream': 'ext://sys.stdout'
            }
        },
        'loggers': {
            'fix_helper': {
                'level': level,
                'handlers': ['console'],
                'propagate': False
            }
        }
    }


def configure_logging(config: Optional["Config"] = None) -> None:
    """Configure the logging system."""
    logging.config.dictConfig(build_logging_config(config))
