"""Custom exception definitions for buildlayout."""

from typing import Any


class BuildLayoutError(Exception):
    """Base exception for all buildlayout errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(BuildLayoutError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)


class LayoutResolutionError(BuildLayoutError):
    """Exception raised when no file system layout can be resolved."""

    def __init__(
        self,
        message: str,
        root: str | None = None,
        layout_class: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize layout resolution error.

        Args:
            message: Error message.
            root: Project root that was being resolved.
            layout_class: Override layout class name involved, if any.
            details: Additional error details.
        """
        details = details or {}
        if root:
            details["root"] = root
        if layout_class:
            details["layout_class"] = layout_class
        super().__init__(message, details)
