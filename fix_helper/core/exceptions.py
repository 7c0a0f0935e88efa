"""
FIX Helper - Custom Exceptions

This module defines the exception hierarchy used across the FIX Helper
package.
"""

from typing import Any, Dict, Optional


class FixHelperException(Exception):
    """Base exception for all FIX Helper errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "FIX_HELPER_ERROR"
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (Code: {self.error_code}, Context: {self.context})"
        return f"{self.message} (Code: {self.error_code})"


class ConfigurationException(FixHelperException):
    """Exception raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        error_code: str = "CONFIG_ERROR",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if config_key:
            ctx["config_key"] = config_key
        super().__init__(message, error_code=error_code, context=ctx)


class VersionNotFoundException(ConfigurationException):
    """
    Raised when neither the requested FIX version nor the configured default
    version exists in the loaded dataset.

    The bundled dataset is corrupt or incomplete when this happens, so hosts
    treat it as fatal at startup.
    """

    def __init__(self, message: str, requested: Optional[str] = None, default: Optional[str] = None):
        context = {}
        if requested:
            context["requested"] = requested
        if default:
            context["default"] = default
        super().__init__(
            message,
            config_key="default_version",
            error_code="VERSION_NOT_FOUND",
            context=context,
        )


class TagNotFoundException(FixHelperException):
    """Exception raised when a tag number is absent from a version catalog."""

    def __init__(self, message: str, tag_number: Optional[int] = None, version_id: Optional[str] = None):
        context: Dict[str, Any] = {}
        if tag_number is not None:
            context["tag_number"] = tag_number
        if version_id:
            context["version_id"] = version_id

        super().__init__(message, error_code="TAG_NOT_FOUND", context=context)


class DataException(FixHelperException):
    """Exception raised for malformed specification datasets."""

    def __init__(
        self,
        message: str,
        data_source: Optional[str] = None,
        record_count: Optional[int] = None,
    ):
        context: Dict[str, Any] = {}
        if data_source:
            context["data_source"] = data_source
        if record_count is not None:
            context["record_count"] = record_count

        super().__init__(message, error_code="DATA_ERROR", context=context)
